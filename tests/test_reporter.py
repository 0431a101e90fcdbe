"""Tests for commitmsg.reporter."""
from __future__ import annotations

import io

from commitmsg.engine import VerificationResult
from commitmsg.models import ExitCode, Violation
from commitmsg.reporter import Reporter, format_io_error


def _failed(*messages: str, code: ExitCode = ExitCode.SUBJECT_TOO_LONG) -> VerificationResult:
    return VerificationResult(
        violation=Violation(rule_id="test", code=code, messages=list(messages)),
        rules_evaluated=3,
    )


class TestReporter:
    def test_success_writes_nothing(self):
        stream = io.StringIO()
        reporter = Reporter(VerificationResult(rules_evaluated=7))
        reporter.write(stream)
        assert stream.getvalue() == ""
        assert reporter.exit_code() == 0

    def test_one_line_per_message(self):
        stream = io.StringIO()
        reporter = Reporter(_failed("first", "second"))
        reporter.write(stream)
        assert stream.getvalue() == "first\nsecond\n"

    def test_exit_code_is_plain_int(self):
        code = Reporter(_failed("x", code=ExitCode.EMPTY_MESSAGE)).exit_code()
        assert code == 255
        assert type(code) is int

    def test_lines(self):
        assert Reporter(_failed("a", "b")).lines() == ["a", "b"]
        assert Reporter(VerificationResult()).lines() == []


class TestFormatIoError:
    def test_includes_kind_and_description(self, tmp_path):
        missing = tmp_path / "missing"
        try:
            missing.read_text()
        except OSError as exc:
            line = format_io_error(exc)
        assert line.startswith("FileNotFoundError: ")
        assert str(missing) in line

    def test_decode_error(self):
        try:
            b"\xff".decode("utf-8")
        except UnicodeDecodeError as exc:
            line = format_io_error(exc)
        assert line.startswith("UnicodeDecodeError: ")
