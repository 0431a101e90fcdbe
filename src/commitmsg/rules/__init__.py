"""Commit message rules, in evaluation order.

Order matters: the engine stops at the first violation, so earlier rules
guard the assumptions of later ones (a non-blank subject, a blank separator).
"""
from commitmsg.rules.body_max_line_length import BodyMaxLineLength
from commitmsg.rules.capitalize_subject import CapitalizeSubject
from commitmsg.rules.imperative_mood import ImperativeMood
from commitmsg.rules.non_empty_message import NonEmptyMessage
from commitmsg.rules.separate_subject_from_body import SeparateSubjectFromBody
from commitmsg.rules.subject_max_length import SubjectMaxLength
from commitmsg.rules.subject_trailing_character import SubjectTrailingCharacter

RULES = [
    NonEmptyMessage(),
    SeparateSubjectFromBody(),
    SubjectMaxLength(),
    CapitalizeSubject(),
    SubjectTrailingCharacter(),
    ImperativeMood(),
    BodyMaxLineLength(),
]
