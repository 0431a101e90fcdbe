"""Commit message evaluation engine."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from commitmsg.config import VerifierConfig
from commitmsg.message import Message
from commitmsg.models import ExitCode, Rule, RuleContext, Violation
from commitmsg.rules import RULES

logger = logging.getLogger("commitmsg")


@dataclass
class VerificationResult:
    """Outcome of one run: no violation on success, otherwise the first one found."""
    violation: Violation | None = None
    rules_evaluated: int = 0

    @property
    def passed(self) -> bool:
        return self.violation is None

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.SUCCESS if self.violation is None else self.violation.code


class Engine:
    """Runs rules in order and stops at the first violation."""

    def __init__(self, config: VerifierConfig, rules: list[Rule] | None = None):
        self.config = config
        self.rules = RULES if rules is None else rules

    def evaluate(self, message: Message) -> VerificationResult:
        """Evaluate the rules against a message.

        Rule exceptions are not caught: an OSError while reading the verbs
        file reaches the caller like one raised while reading the message.
        """
        context = RuleContext(message=message, verbs_path=self.config.verbs_path)
        result = VerificationResult()

        for rule in self.rules:
            if not rule.applies(context):
                logger.debug("Rule %s skipped", rule.id)
                continue

            result.rules_evaluated += 1
            violation = rule.evaluate(context)
            if violation is not None:
                logger.debug("Rule %s failed with code %d", rule.id, violation.code)
                result.violation = violation
                return result

        return result


def verify(message: Message, config: VerifierConfig) -> VerificationResult:
    """Verify a message with the default rule order."""
    return Engine(config=config).evaluate(message)
