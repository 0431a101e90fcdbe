"""Accepted first words for the imperative mood check.

The verbs file is a plain text file with one accepted word per line. It is
not managed by this package; the default location is ``~/.verbs``.
"""
from __future__ import annotations

from pathlib import Path

from commitmsg.message import split_lines

VERBS_FILE_NAME = ".verbs"


def default_verbs_path() -> Path:
    """Return the verbs file path in the invoking user's home directory."""
    return Path.home() / VERBS_FILE_NAME


def load_verbs(path: Path) -> frozenset[str]:
    """Read the verbs file into a set of exact, case-sensitive words."""
    with open(path, encoding="utf-8", newline="") as f:
        return frozenset(split_lines(f.read()))
