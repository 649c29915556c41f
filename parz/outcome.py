"""Outcome algebra — the four shapes a single step can produce.

==================  ========================  ==================================
Variant             Carries                   Meaning
==================  ========================  ==================================
ParseValid          original, target          transform succeeded
ParseInvalid        errors                    transform failed, no target
ValidationValid     original, target          predicate passed, value unchanged
ValidationInvalid   original, target, errors  predicate failed, value unchanged
==================  ========================  ==================================

Only ``ParseInvalid`` halts a pipeline; the other three are *continuable*.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar, Union

O = TypeVar("O")
T = TypeVar("T")
E = TypeVar("E")


class OutcomeKind(Enum):
    """Discriminant tag carried by every Outcome."""

    PARSE_VALID = "PARSE_VALID"
    PARSE_INVALID = "PARSE_INVALID"
    VALIDATION_VALID = "VALIDATION_VALID"
    VALIDATION_INVALID = "VALIDATION_INVALID"


def _freeze_errors(instance: Any) -> None:
    # Coerce list/other iterables → tuple for immutability
    if not isinstance(instance.errors, tuple):
        object.__setattr__(instance, "errors", tuple(instance.errors))


@dataclass(frozen=True)
class ParseValid(Generic[O, T]):
    original: O
    target: T

    kind: ClassVar[OutcomeKind] = OutcomeKind.PARSE_VALID


@dataclass(frozen=True)
class ParseInvalid(Generic[E]):
    """Hard failure.  Never carries a target."""

    errors: tuple = field(default_factory=tuple)

    kind: ClassVar[OutcomeKind] = OutcomeKind.PARSE_INVALID

    def __post_init__(self) -> None:
        _freeze_errors(self)


@dataclass(frozen=True)
class ValidationValid(Generic[O]):
    original: O
    target: O

    kind: ClassVar[OutcomeKind] = OutcomeKind.VALIDATION_VALID


@dataclass(frozen=True)
class ValidationInvalid(Generic[O, E]):
    """Soft failure: the only variant holding both a target and errors."""

    original: O
    target: O
    errors: tuple = field(default_factory=tuple)

    kind: ClassVar[OutcomeKind] = OutcomeKind.VALIDATION_INVALID

    def __post_init__(self) -> None:
        _freeze_errors(self)


Outcome = Union[ParseValid, ParseInvalid, ValidationValid, ValidationInvalid]
Continuable = Union[ParseValid, ValidationValid, ValidationInvalid]

OUTCOME_TYPES: tuple[type, ...] = (
    ParseValid,
    ParseInvalid,
    ValidationValid,
    ValidationInvalid,
)


def is_outcome(value: object) -> bool:
    return isinstance(value, OUTCOME_TYPES)


def is_continuable(outcome: Outcome) -> bool:
    """True for every Outcome that still carries a usable target."""
    return not isinstance(outcome, ParseInvalid)


def is_parse_valid(outcome: Outcome) -> bool:
    return isinstance(outcome, ParseValid)


def is_parse_invalid(outcome: Outcome) -> bool:
    return isinstance(outcome, ParseInvalid)


def is_validation_valid(outcome: Outcome) -> bool:
    return isinstance(outcome, ValidationValid)


def is_validation_invalid(outcome: Outcome) -> bool:
    return isinstance(outcome, ValidationInvalid)
