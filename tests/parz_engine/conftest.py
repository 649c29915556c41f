"""Shared fixtures and reusable steps for parz engine tests.

Every step here is built from the public constructors, plus ``Probe`` which
wraps any callable and records each call so tests can prove a step ran (or
never ran).
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from parz import create_parser, create_validator

# ---------------------------------------------------------------------------
# Probes
# ---------------------------------------------------------------------------


class Probe:
    """Call-recording wrapper around *fn*."""

    def __init__(self, fn: Callable[[Any], Any]):
        self.fn = fn
        self.calls: list[Any] = []
        self.__name__ = getattr(fn, "__name__", "probe")

    @property
    def called(self) -> bool:
        return bool(self.calls)

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        return self.fn(value)


# ---------------------------------------------------------------------------
# Plain callables
# ---------------------------------------------------------------------------


def parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def length_message(text: str) -> list[str]:
    return [f"String is not length 5, it is actually of length {len(text)}"]


# ---------------------------------------------------------------------------
# Reusable steps
# ---------------------------------------------------------------------------

length_is_5 = create_validator(lambda s: len(s) == 5, length_message, name="length_is_5")

length_is_1 = create_validator(lambda s: len(s) == 1, length_message, name="length_is_1")

less_than_ten = create_validator(
    lambda n: n < 10,
    lambda n: [f"Expected a number less than 10, but was actually {n}"],
    name="less_than_ten",
)

string_to_int = create_parser(
    parse_int, lambda s: [f"{s} cannot be parsed to an integer"], name="string_to_int"
)


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def probed_validator():
    """Factory: a failing-or-passing validator whose predicate and factory are probed."""

    def _make(passes: bool, message: str = "probe failed"):
        predicate = Probe(lambda _v: passes)
        error_fn = Probe(lambda _v: [message])
        return create_validator(predicate, error_fn), predicate, error_fn

    return _make


@pytest.fixture
def probed_parser():
    """Factory: a parser (``None`` result means failure) with probed callables."""

    def _make(transform: Callable[[Any], Any], message: str = "parse failed"):
        probe = Probe(transform)
        error_fn = Probe(lambda _v: [message])
        return create_parser(probe, error_fn), probe, error_fn

    return _make
