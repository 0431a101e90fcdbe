"""Rule: the subject line must be followed by a blank line."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation


class SeparateSubjectFromBody(Rule):
    """Require an empty second line when the message has more than one line."""

    id = "separate-subject-from-body"
    description = "Separate subject from body with a blank line"
    code = ExitCode.SUBJECT_NOT_SEPARATED

    def evaluate(self, context: RuleContext) -> Violation | None:
        separator = context.message.separator
        if separator:
            return self.violation("Separate subject from body with a blank line!")
        return None
