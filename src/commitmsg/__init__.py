"""commit-msg-verifier - style rules for git commit messages."""

__version__ = "1.0.0"

from commitmsg.engine import Engine, VerificationResult, verify
from commitmsg.message import Message, load_message, parse_message
from commitmsg.models import (
    ExitCode,
    Rule,
    RuleContext,
    Violation,
)

__all__ = [
    "Engine",
    "ExitCode",
    "Message",
    "Rule",
    "RuleContext",
    "VerificationResult",
    "Violation",
    "load_message",
    "parse_message",
    "verify",
]
