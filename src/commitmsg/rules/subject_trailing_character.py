"""Rule: do not end the subject line with punctuation or whitespace."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation

FORBIDDEN_LAST_CHARACTERS = ".!;:, \t"


class SubjectTrailingCharacter(Rule):
    """Reject subjects ending with a period, other punctuation, or whitespace."""

    id = "subject-trailing-character"
    description = "Do not end the subject line with a period"
    code = ExitCode.SUBJECT_FORBIDDEN_ENDING

    def evaluate(self, context: RuleContext) -> Violation | None:
        last_char = context.subject[-1:]
        if last_char and last_char in FORBIDDEN_LAST_CHARACTERS:
            return self.violation(f"Do not end the subject line with a `{last_char}` character!")
        return None
