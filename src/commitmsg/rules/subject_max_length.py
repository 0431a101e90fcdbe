"""Rule: limit the subject line to 50 characters."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation

MAX_SUBJECT_LENGTH = 50


class SubjectMaxLength(Rule):
    """Reject subjects longer than 50 characters."""

    id = "subject-max-length"
    description = f"Limit the subject line to {MAX_SUBJECT_LENGTH} characters"
    code = ExitCode.SUBJECT_TOO_LONG

    def evaluate(self, context: RuleContext) -> Violation | None:
        length = len(context.subject)
        if length > MAX_SUBJECT_LENGTH:
            return self.violation(
                f"Limit the subject line to {MAX_SUBJECT_LENGTH} characters!",
                f"The subject has '{length}' characters!",
            )
        return None
