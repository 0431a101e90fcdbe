"""Core models for the commit message verifier."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from commitmsg.message import Message


class ExitCode(IntEnum):
    """Process exit codes, one per outcome of a verification run."""
    SUCCESS = 0
    SUBJECT_NOT_SEPARATED = 1
    SUBJECT_TOO_LONG = 2
    SUBJECT_NOT_CAPITALIZED = 3
    SUBJECT_FORBIDDEN_ENDING = 4
    NOT_IMPERATIVE_MOOD = 5
    BODY_LINE_TOO_LONG = 6
    VERBS_FILE_NOT_FOUND = 253
    IO_ERROR = 254
    EMPTY_MESSAGE = 255


@dataclass
class Violation:
    """A rejected commit message: the failing rule, its exit code and the lines to print."""
    rule_id: str
    code: ExitCode
    messages: list[str] = field(default_factory=list)


@dataclass
class RuleContext:
    """Context passed to rules during evaluation."""
    message: Message
    verbs_path: Path

    @property
    def subject(self) -> str:
        return self.message.subject


class Rule(ABC):
    """Base class for all commit message rules."""
    id: str
    description: str
    code: ExitCode

    @abstractmethod
    def evaluate(self, context: RuleContext) -> Violation | None:
        """Evaluate this rule against the given context."""

    def applies(self, context: RuleContext) -> bool:
        """Check if this rule should run for the given message."""
        return True

    def violation(self, *messages: str, code: ExitCode | None = None) -> Violation:
        return Violation(
            rule_id=self.id,
            code=self.code if code is None else code,
            messages=list(messages),
        )
