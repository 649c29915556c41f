"""Parz error types.

Domain failures are never raised; they travel as Outcome / Result values.
The exceptions here signal misuse of the library contract.
"""

from __future__ import annotations

from typing import Any


class ParzError(Exception):
    """Base class for every exception raised by parz itself."""


class StepContractError(ParzError):
    """A step function returned something that is not an Outcome."""

    def __init__(self, step: Any, returned: Any, message: str | None = None) -> None:
        self.step = step
        self.returned = returned
        super().__init__(
            message
            or f"{describe_step(step)} returned {type(returned).__name__}; "
            "steps must return an Outcome (use create_validator / create_parser)."
        )


class EmptyErrorsError(StepContractError):
    """An error factory returned an empty sequence.

    Every failure path must carry at least one error.
    """

    def __init__(self, step: Any, value: Any) -> None:
        self.value = value
        super().__init__(
            step,
            (),
            f"Error factory of {describe_step(step)} returned no errors for {value!r}.",
        )


class DeflateInputError(ParzError):
    """A deflate entry is not a materialised Result, or its key repeats."""

    def __init__(self, key: Any, entry: Any, message: str | None = None) -> None:
        self.key = key
        self.entry = entry
        super().__init__(
            message
            or f"deflate entry {key!r} is a {type(entry).__name__}, expected "
            "Success or Fail; call .value() on the pipeline first."
        )


def describe_step(step: Any) -> str:
    return (
        getattr(step, "name", None)
        or getattr(step, "__qualname__", None)
        or type(step).__name__
    )
