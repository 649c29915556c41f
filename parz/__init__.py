"""Fail-aware transformation pipelines: validate, parse, and collect errors.

Public surface::

    from parz import (
        start_with,
        Pipeline,
        create_validator,
        create_parser,
        create_model_parser,
        deflate,
        Success,
        Fail,
        is_success,
        is_fail,
        ParzConfig,
    )

Validators fail *softly* (errors accumulate, the chain keeps flowing);
parsers fail *hard* (the chain halts, everything accumulated so far is kept).
"""

from .config import DEFAULT_CONFIG, ParzConfig
from .deflate import Deflated, deflate
from .errors import DeflateInputError, EmptyErrorsError, ParzError, StepContractError
from .models import ModelParser, create_model_parser, format_validation_errors
from .outcome import (
    Outcome,
    OutcomeKind,
    ParseInvalid,
    ParseValid,
    ValidationInvalid,
    ValidationValid,
    is_continuable,
    is_outcome,
    is_parse_invalid,
    is_parse_valid,
    is_validation_invalid,
    is_validation_valid,
)
from .pipeline import Pipeline, start_with
from .result import Fail, Result, ResultKind, Success, is_fail, is_success
from .steps import Parser, StepFn, Validator, create_parser, create_validator

__all__ = [
    "start_with",
    "Pipeline",
    "create_validator",
    "create_parser",
    "create_model_parser",
    "Validator",
    "Parser",
    "ModelParser",
    "StepFn",
    "format_validation_errors",
    "deflate",
    "Deflated",
    "Outcome",
    "OutcomeKind",
    "ParseValid",
    "ParseInvalid",
    "ValidationValid",
    "ValidationInvalid",
    "is_outcome",
    "is_continuable",
    "is_parse_valid",
    "is_parse_invalid",
    "is_validation_valid",
    "is_validation_invalid",
    "Result",
    "ResultKind",
    "Success",
    "Fail",
    "is_success",
    "is_fail",
    "ParzConfig",
    "DEFAULT_CONFIG",
    "ParzError",
    "StepContractError",
    "EmptyErrorsError",
    "DeflateInputError",
]
