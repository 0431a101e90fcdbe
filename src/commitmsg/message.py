"""Commit message loading and line access."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Message:
    """A commit message split into lines.

    Line 0 is the subject, line 1 the separator and everything after it the
    body. A trailing newline does not produce an extra empty line.
    """
    lines: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def subject(self) -> str:
        return self.lines[0] if self.lines else ""

    @property
    def separator(self) -> str | None:
        return self.lines[1] if len(self.lines) > 1 else None

    @property
    def body(self) -> tuple[str, ...]:
        return self.lines[2:]

    @property
    def has_body(self) -> bool:
        return len(self.lines) >= 3


def split_lines(text: str) -> list[str]:
    """Split text on \\n, \\r\\n and \\r only; a trailing line break adds no empty line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_message(text: str) -> Message:
    """Split raw message text into lines."""
    return Message(lines=tuple(split_lines(text)))


def load_message(path: str | Path) -> Message:
    """Read a commit message file as UTF-8.

    Raises OSError if the file cannot be read and UnicodeDecodeError if it is
    not valid UTF-8.
    """
    with open(Path(path).absolute(), encoding="utf-8", newline="") as f:
        return parse_message(f.read())
