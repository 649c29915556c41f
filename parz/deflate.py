"""Deflate — collapse a keyed set of Results into one pipeline.

``deflate`` is the join half of a fork/join: several independent pipelines
are materialised, their Results gathered under caller-chosen keys, and the
record is re-entered into the chain engine::

    volume = (
        deflate({"length": length, "width": width, "height": height})
        .map_deflated(lambda r: r["length"] * r["width"] * r["height"])
        .value()
    )

Iteration order is the order of the mapping (or of the pairs supplied), so
the error list of a failed deflate is deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar

from .config import DEFAULT_CONFIG, ParzConfig
from .errors import DeflateInputError
from .outcome import ParseInvalid, ParseValid
from .pipeline import Pipeline, start_with
from .result import Fail, Result, Success
from .steps import Parser

logger = logging.getLogger(__name__)

U = TypeVar("U")
E = TypeVar("E")


class Deflated(Generic[E]):
    """A record of named Results awaiting aggregation.

    All entries succeeded → ``ParseValid`` over a plain ``dict`` of targets
    (same keys).  Any entry failed → ``ParseInvalid`` whose errors are every
    failing entry's errors concatenated in key order.
    """

    def __init__(
        self,
        record: Mapping[str, Result] | Iterable[tuple[str, Result]],
        config: ParzConfig = DEFAULT_CONFIG,
    ) -> None:
        items = record.items() if isinstance(record, Mapping) else record
        entries: dict[str, Result] = {}
        for key, entry in items:
            if not isinstance(entry, (Success, Fail)):
                raise DeflateInputError(key, entry)
            if key in entries:
                raise DeflateInputError(
                    key, entry, f"deflate key {key!r} appears more than once."
                )
            entries[key] = entry
        self.record: Mapping[str, Result] = MappingProxyType(entries)
        self.config = config

    def aggregate(self) -> ParseValid | ParseInvalid:
        """One synthesized Outcome for the record."""
        return self._collapse(self.record)

    def _collapse(self, record: Mapping[str, Result]) -> ParseValid | ParseInvalid:
        # step form of aggregate; record is the pipeline target, always self.record
        errors: list = []
        failed: list[str] = []
        for key, entry in record.items():
            if isinstance(entry, Fail):
                failed.append(key)
                errors.extend(entry.errors)

        if failed:
            logger.debug(
                "deflate: %d/%d entries failed (%s)", len(failed), len(record), failed
            )
            return ParseInvalid(errors)

        logger.debug("deflate: all %d entries succeeded", len(record))
        return ParseValid(record, {key: entry.target for key, entry in record.items()})

    def pipeline(self) -> Pipeline:
        """The pipeline over the original record, after the aggregation step."""
        return start_with(self.record, config=self.config).then(self._collapse)

    def map_deflated(self, fn: Callable[[dict[str, Any]], U]) -> Pipeline:
        """Aggregate, then apply *fn* to the unwrapped record.

        *fn* is expected to be total: its parser reports no domain errors,
        so a ``None`` from *fn* halts the pipeline with nothing to report.
        """
        total = Parser(
            fn,
            lambda _record: (),
            name=getattr(fn, "__name__", None),
            config=ParzConfig(
                check_outcomes=self.config.check_outcomes, require_errors=False
            ),
        )
        return self.pipeline().then(total)


def deflate(
    record: Mapping[str, Result] | Iterable[tuple[str, Result]],
    *,
    config: ParzConfig = DEFAULT_CONFIG,
) -> Deflated:
    """Gather named Results for aggregation (see ``Deflated``)."""
    return Deflated(record, config)
