"""Pipeline — immutable, fail-aware chain of steps.

Build via the fluent API::

    result = (
        start_with("12345")
        .then(length_is_5)      # validator: soft, accumulates
        .then(string_to_int)    # parser: hard, halts on failure
        .then(less_than_ten)
        .value()
    )

Every ``then`` returns a *new* Pipeline; the receiver is never mutated, so
one intermediate pipeline can seed several divergent chains.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .config import DEFAULT_CONFIG, ParzConfig
from .errors import StepContractError, describe_step
from .outcome import (
    Outcome,
    ParseInvalid,
    ParseValid,
    ValidationInvalid,
    ValidationValid,
    is_outcome,
)
from .result import Fail, Result, Success

logger = logging.getLogger(__name__)

A = TypeVar("A")
C = TypeVar("C")
E = TypeVar("E")


@dataclass(frozen=True)
class Pipeline(Generic[A, C, E]):
    """Frozen chain state: original input, latest Outcome, cumulative errors.

    The pipeline is *continuable* while ``outcome`` is anything but
    ``ParseInvalid`` and *halted* afterwards.  ``errors`` is append-only, in
    arrival order, never reordered or deduplicated.
    """

    original: A
    outcome: Outcome
    errors: tuple = field(default_factory=tuple)
    config: ParzConfig = DEFAULT_CONFIG

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def init(cls, value: A, config: ParzConfig = DEFAULT_CONFIG) -> "Pipeline[A, A, E]":
        """Seed a pipeline with the identity outcome of *value*."""
        return cls(value, ValidationValid(value, value), (), config)

    @property
    def is_halted(self) -> bool:
        return isinstance(self.outcome, ParseInvalid)

    def replace(self, **changes: Any) -> "Pipeline":
        """Return a new Pipeline with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Chaining
    # ------------------------------------------------------------------

    def then(self, step: Callable[[C], Outcome]) -> "Pipeline":
        """Feed the current target to *step* and return the next pipeline.

        Once halted, *step* is never invoked: the new pipeline stays halted
        with the same accumulated errors.
        """
        if self.is_halted:
            logger.debug("Pipeline halted; skipping %s", describe_step(step))
            return self.replace(outcome=ParseInvalid(self.errors))

        result = step(self.outcome.target)

        if not is_outcome(result):
            if self.config.check_outcomes:
                raise StepContractError(step, result)
            logger.warning(
                "%s returned %s instead of an Outcome; halting pipeline",
                describe_step(step),
                type(result).__name__,
            )
            result = ParseInvalid(())

        if isinstance(result, (ParseValid, ValidationValid)):
            nxt = self.replace(outcome=result)
        elif isinstance(result, ValidationInvalid):
            nxt = self.replace(outcome=result, errors=self.errors + result.errors)
        else:
            errors = self.errors + result.errors
            nxt = self.replace(outcome=ParseInvalid(errors), errors=errors)

        logger.debug(
            "%s -> %s (%d accumulated errors)",
            describe_step(step),
            result.kind.value,
            len(nxt.errors),
        )
        return nxt

    def then_all(self, *steps: Callable[[Any], Outcome]) -> "Pipeline":
        """Chain *steps* in order; same as calling ``then`` for each."""
        pipeline = self
        for step in steps:
            pipeline = pipeline.then(step)
        return pipeline

    # ------------------------------------------------------------------
    # Materialisation
    # ------------------------------------------------------------------

    def value(self) -> Result:
        """Materialise into ``Success`` or ``Fail``.

        Success requires a valid final outcome *and* an empty error history:
        an earlier validation failure still forces ``Fail``.
        """
        if isinstance(self.outcome, (ParseValid, ValidationValid)) and not self.errors:
            return Success(self.original, self.outcome.target)
        return Fail(self.original, self.errors)


def start_with(value: A, *, config: ParzConfig = DEFAULT_CONFIG) -> Pipeline[A, A, Any]:
    """Begin a pipeline: ``original = target = value``, no errors."""
    return Pipeline.init(value, config)
