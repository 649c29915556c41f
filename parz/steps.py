"""Step constructors — turn plain callables into Outcome-returning steps.

A *step* is any callable ``value -> Outcome``.  No base class is needed:
``StepFn`` is a structural protocol.  The two constructors cover every
domain failure a step can express:

- ``create_validator(predicate, error_fn)`` — soft; value unchanged.
- ``create_parser(transform, error_fn)`` — hard; ``None`` means failure.

Neither constructor fails: all failure is carried by the returned Outcome.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from .config import DEFAULT_CONFIG, ParzConfig
from .errors import EmptyErrorsError, StepContractError, describe_step
from .outcome import Outcome, ParseInvalid, ParseValid, ValidationInvalid, ValidationValid

I = TypeVar("I")
U = TypeVar("U")
E = TypeVar("E")


@runtime_checkable
class StepFn(Protocol):
    """Structural protocol every step satisfies."""

    def __call__(self, value: Any) -> Outcome: ...


def collect_errors(step: Any, value: Any, raw: Any, config: ParzConfig) -> tuple:
    """Normalise an error factory's return into a tuple of errors.

    A bare ``str`` / ``bytes`` is rejected rather than split into characters.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        raise StepContractError(
            step,
            raw,
            f"Error factory of {describe_step(step)} returned a bare "
            f"{type(raw).__name__} {raw!r}; wrap it in a list.",
        )
    errors = tuple(raw)
    if not errors and config.require_errors:
        raise EmptyErrorsError(step, value)
    return errors


class _Step(Generic[I, E]):
    """Shared plumbing: naming and the non-empty error rule."""

    def __init__(
        self,
        error_fn: Callable[[I], Sequence[E]],
        name: str | None,
        config: ParzConfig,
    ) -> None:
        self.error_fn = error_fn
        self.config = config
        self.name = name or type(self).__name__

    def _errors_for(self, value: I) -> tuple:
        return collect_errors(self, value, self.error_fn(value), self.config)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class Validator(_Step[I, E]):
    """Re-checks a value without changing it."""

    def __init__(
        self,
        predicate: Callable[[I], bool],
        error_fn: Callable[[I], Sequence[E]],
        name: str | None = None,
        config: ParzConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(error_fn, name or getattr(predicate, "__name__", None), config)
        self.predicate = predicate

    def __call__(self, value: I) -> ValidationValid | ValidationInvalid:
        if self.predicate(value):
            return ValidationValid(value, value)
        # error_fn only runs on failure
        return ValidationInvalid(value, value, self._errors_for(value))


class Parser(_Step[I, E], Generic[I, U, E]):
    """Transforms a value; a ``None`` result is a hard failure."""

    def __init__(
        self,
        transform: Callable[[I], U | None],
        error_fn: Callable[[I], Sequence[E]],
        name: str | None = None,
        config: ParzConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(error_fn, name or getattr(transform, "__name__", None), config)
        self.transform = transform

    def __call__(self, value: I) -> ParseValid | ParseInvalid:
        result = self.transform(value)
        if result is not None:
            return ParseValid(value, result)
        return ParseInvalid(self._errors_for(value))


def create_validator(
    predicate: Callable[[I], bool],
    error_fn: Callable[[I], Sequence[E]],
    *,
    name: str | None = None,
    config: ParzConfig = DEFAULT_CONFIG,
) -> Validator[I, E]:
    """Build a validation step.

    On a truthy predicate the step yields ``ValidationValid(value, value)``;
    otherwise ``ValidationInvalid(value, value, error_fn(value))``.
    """
    return Validator(predicate, error_fn, name=name, config=config)


def create_parser(
    transform: Callable[[I], U | None],
    error_fn: Callable[[I], Sequence[E]],
    *,
    name: str | None = None,
    config: ParzConfig = DEFAULT_CONFIG,
) -> Parser[I, U, E]:
    """Build a parse step.

    ``transform`` returns the new value, or ``None`` when it cannot parse.
    ``None`` is the absence sentinel, so a transform whose legitimate
    result is ``None`` cannot be expressed as a parser.
    """
    return Parser(transform, error_fn, name=name, config=config)
