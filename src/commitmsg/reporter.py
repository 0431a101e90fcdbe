"""Diagnostic output for the commit-msg hook."""
from __future__ import annotations

from typing import TextIO

import click

from commitmsg.engine import VerificationResult


class Reporter:
    """Writes a verification result as plain stderr lines."""

    def __init__(self, result: VerificationResult):
        self.result = result

    def exit_code(self) -> int:
        return int(self.result.exit_code)

    def lines(self) -> list[str]:
        if self.result.violation is None:
            return []
        return list(self.result.violation.messages)

    def write(self, stream: TextIO | None = None) -> None:
        """Echo each message on its own line; successful runs print nothing."""
        for line in self.lines():
            click.echo(line, file=stream, err=True)


def format_io_error(exc: BaseException) -> str:
    """Describe a read failure as ``<ErrorKind>: <description>``."""
    return f"{exc.__class__.__name__}: {exc}"

