"""Rule: start the subject line with a verb in the imperative mood.

The check is a flat lookup of the subject's first word in the verbs file.
A missing verbs file is reported with its own exit code before any lookup.
"""
from __future__ import annotations

import logging

from commitmsg.models import ExitCode, Rule, RuleContext, Violation
from commitmsg.verbs import load_verbs

logger = logging.getLogger("commitmsg")

HELP_TEMPLATE = "HELP MESSAGE TEMPLATE: If applied, this commit will YOUR_SUBJECT_LINE_HERE!"


class ImperativeMood(Rule):
    """Require the first word of the subject to be listed in the verbs file."""

    id = "imperative-mood"
    description = "Use the imperative mood in the subject line"
    code = ExitCode.NOT_IMPERATIVE_MOOD

    def evaluate(self, context: RuleContext) -> Violation | None:
        verbs_path = context.verbs_path
        if not verbs_path.exists():
            return self.violation(
                f"Required file with english verbs not found: '{verbs_path}'. Make this file!",
                code=ExitCode.VERBS_FILE_NOT_FOUND,
            )

        # OSError from an unreadable verbs file propagates to the caller.
        verbs = load_verbs(verbs_path)
        logger.debug("Loaded %d verbs from %s", len(verbs), verbs_path)

        subject = context.subject
        first_word = subject.split()[0]
        if first_word not in verbs:
            return self.violation(
                f"Use the imperative mood in the subject line: '{first_word}' is not verb or imperative mood!",
                HELP_TEMPLATE,
                f"CURRENT MESSAGE: If applied, this commit will {subject}",
            )
        return None
