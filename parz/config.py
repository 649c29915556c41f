"""Configuration for contract checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParzConfig:
    """Contract-check switches shared by pipelines and step constructors.

    ``check_outcomes`` — ``Pipeline.then`` raises ``StepContractError`` when
    a step returns a non-Outcome.  Disabled, the value is treated as a hard
    failure that contributes no errors.

    ``require_errors`` — steps built by ``create_validator`` /
    ``create_parser`` raise ``EmptyErrorsError`` when their error factory
    yields nothing.
    """

    check_outcomes: bool = True
    require_errors: bool = True


DEFAULT_CONFIG = ParzConfig()
