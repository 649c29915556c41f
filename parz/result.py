"""Terminal result of a pipeline: ``Success`` xor ``Fail``."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Generic, TypeVar, Union

O = TypeVar("O")
T = TypeVar("T")
E = TypeVar("E")


class ResultKind(Enum):
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class Success(Generic[O, T]):
    """Every step passed: ``target`` is the fully transformed value."""

    original: O
    target: T

    kind: ClassVar[ResultKind] = ResultKind.SUCCESS


@dataclass(frozen=True)
class Fail(Generic[O, E]):
    """At least one step failed.

    ``errors`` is the ordered, flattened list of every error collected up to
    and including the first hard failure, in the order the steps ran.
    """

    original: O
    errors: tuple = field(default_factory=tuple)

    kind: ClassVar[ResultKind] = ResultKind.FAIL

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))


Result = Union[Success, Fail]


def is_success(result: Result) -> bool:
    return isinstance(result, Success)


def is_fail(result: Result) -> bool:
    return isinstance(result, Fail)
