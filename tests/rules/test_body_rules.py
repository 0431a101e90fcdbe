"""Tests for the body line length rule."""
from __future__ import annotations

from pathlib import Path

from commitmsg.message import parse_message
from commitmsg.models import ExitCode, RuleContext
from commitmsg.rules.body_max_line_length import BodyMaxLineLength


def _ctx(text: str) -> RuleContext:
    return RuleContext(message=parse_message(text), verbs_path=Path("/nonexistent/.verbs"))


class TestBodyMaxLineLength:
    rule = BodyMaxLineLength()

    def test_applies_only_with_body(self):
        assert self.rule.applies(_ctx("Subject")) is False
        assert self.rule.applies(_ctx("Subject\n\n")) is False
        assert self.rule.applies(_ctx("Subject\n\nBody")) is True

    def test_seventy_two_characters_pass(self):
        assert self.rule.evaluate(_ctx("Subject\n\n" + "b" * 72)) is None

    def test_seventy_three_characters_fail(self):
        line = "b" * 73
        v = self.rule.evaluate(_ctx("Subject\n\n" + line))
        assert v is not None
        assert v.code == ExitCode.BODY_LINE_TOO_LONG
        assert v.messages == [
            "Wrap the body at 72 characters!",
            f"The following line has '73' characters: {line}",
        ]

    def test_reports_first_offending_line_only(self):
        first = "x" * 80
        second = "y" * 90
        v = self.rule.evaluate(_ctx(f"Subject\n\nshort\n{first}\n{second}"))
        assert v.messages[1] == f"The following line has '80' characters: {first}"

    def test_blank_body_lines_pass(self):
        assert self.rule.evaluate(_ctx("Subject\n\nPara one\n\nPara two")) is None
