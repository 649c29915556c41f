"""Parse steps backed by Pydantic models.

``create_model_parser(Model)`` turns a ``BaseModel`` subclass into a parse
step: mappings go through ``model_validate``, JSON text through
``model_validate_json``.  A ``ValidationError`` becomes a ``ParseInvalid``
carrying one ``"<loc>: <msg>"`` string per pydantic error, or whatever
*error_fn* builds from ``(value, exc)``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .config import DEFAULT_CONFIG, ParzConfig
from .outcome import ParseInvalid, ParseValid
from .steps import collect_errors

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def format_validation_errors(exc: ValidationError) -> list[str]:
    """One message per pydantic error, prefixed by its dotted location."""
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


class ModelParser(Generic[M]):
    """Parse step producing an instance of *model*."""

    def __init__(
        self,
        model: Type[M],
        error_fn: Optional[Callable[[Any, ValidationError], Sequence[Any]]] = None,
        name: Optional[str] = None,
        config: ParzConfig = DEFAULT_CONFIG,
    ) -> None:
        self.model = model
        self.error_fn = error_fn
        self.name = name or f"parse_{model.__name__}"
        self.config = config

    def __call__(self, value: Any) -> ParseValid | ParseInvalid:
        try:
            if isinstance(value, (str, bytes, bytearray)):
                parsed = self.model.model_validate_json(value)
            else:
                parsed = self.model.model_validate(value)
        except ValidationError as exc:
            logger.debug(
                "%s rejected input with %d error(s)", self.name, exc.error_count()
            )
            if self.error_fn is not None:
                raw = self.error_fn(value, exc)
            else:
                raw = format_validation_errors(exc)
            return ParseInvalid(collect_errors(self, value, raw, self.config))
        return ParseValid(value, parsed)

    def __repr__(self) -> str:
        return f"<ModelParser {self.name}>"


def create_model_parser(
    model: Type[M],
    error_fn: Optional[Callable[[Any, ValidationError], Sequence[Any]]] = None,
    *,
    name: Optional[str] = None,
    config: ParzConfig = DEFAULT_CONFIG,
) -> ModelParser[M]:
    """Build a parse step that validates its input into *model*."""
    return ModelParser(model, error_fn, name=name, config=config)
