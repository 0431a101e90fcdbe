"""Rule: wrap the body at 72 characters."""
from __future__ import annotations

from commitmsg.models import ExitCode, Rule, RuleContext, Violation

MAX_BODY_LINE_LENGTH = 72


class BodyMaxLineLength(Rule):
    """Reject the first body line longer than 72 characters."""

    id = "body-max-line-length"
    description = f"Wrap the body at {MAX_BODY_LINE_LENGTH} characters"
    code = ExitCode.BODY_LINE_TOO_LONG

    def applies(self, context: RuleContext) -> bool:
        return context.message.has_body

    def evaluate(self, context: RuleContext) -> Violation | None:
        for line in context.message.body:
            if len(line) > MAX_BODY_LINE_LENGTH:
                return self.violation(
                    f"Wrap the body at {MAX_BODY_LINE_LENGTH} characters!",
                    f"The following line has '{len(line)}' characters: {line}",
                )
        return None
