"""Rule: a commit message must have a non-blank subject line."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation

# Whitespace to str.isspace() that still counts as subject text.
_VISIBLE_SPACES = frozenset("\x85\u00a0\u2007\u202f")


def is_blank(line: str) -> bool:
    return all(ch.isspace() and ch not in _VISIBLE_SPACES for ch in line)


class NonEmptyMessage(Rule):
    """Reject messages with no lines or a blank first line."""

    id = "non-empty-message"
    description = "Enter a commit message"
    code = ExitCode.EMPTY_MESSAGE

    def evaluate(self, context: RuleContext) -> Violation | None:
        message = context.message
        if message.is_empty or is_blank(message.subject):
            return self.violation("Enter a commit message!")
        return None
