"""Tests for running the verifier as ``python -m commitmsg``."""
from __future__ import annotations

import subprocess
import sys


class TestMainModule:
    def test_check_exits_with_rule_code(self, tmp_path) -> None:
        msg = tmp_path / "msg"
        msg.write_text("subject\nbody\n")
        result = subprocess.run(
            [sys.executable, "-m", "commitmsg", "check", str(msg)],
            capture_output=True,
            text=True,
            timeout=10,
            cwd=tmp_path,
        )
        assert result.returncode == 1
        assert result.stdout == ""
        assert result.stderr == "Separate subject from body with a blank line!\n"

    def test_missing_message_file_exits_254(self, tmp_path) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "commitmsg", "check", str(tmp_path / "absent")],
            capture_output=True,
            text=True,
            timeout=10,
            cwd=tmp_path,
        )
        assert result.returncode == 254
        assert result.stderr.startswith("FileNotFoundError: ")
