"""Allow running as ``python -m commitmsg``."""
from commitmsg.cli import main

if __name__ == "__main__":
    main()
