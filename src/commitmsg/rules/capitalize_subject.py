"""Rule: capitalize the subject line."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation


class CapitalizeSubject(Rule):
    """Require the subject to start with an upper-case letter."""

    id = "capitalize-subject"
    description = "Capitalize the subject line"
    code = ExitCode.SUBJECT_NOT_CAPITALIZED

    def evaluate(self, context: RuleContext) -> Violation | None:
        if not context.subject[:1].isupper():
            return self.violation("Capitalize the subject line!")
        return None
