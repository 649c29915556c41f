"""Unit tests for the step constructors."""

from __future__ import annotations

import pytest

from parz import (
    EmptyErrorsError,
    ParseInvalid,
    ParseValid,
    ParzConfig,
    StepFn,
    StepContractError,
    ValidationInvalid,
    ValidationValid,
    create_parser,
    create_validator,
)
from tests.parz_engine.conftest import Probe, length_is_5, string_to_int


@pytest.mark.unit
class TestCreateValidator:
    def test_passing_predicate_yields_validation_valid(self):
        assert length_is_5("12345") == ValidationValid("12345", "12345")

    def test_failing_predicate_yields_validation_invalid(self):
        outcome = length_is_5("1")
        assert outcome == ValidationInvalid(
            "1", "1", ["String is not length 5, it is actually of length 1"]
        )

    def test_error_fn_not_called_on_success(self, probed_validator):
        step, predicate, error_fn = probed_validator(passes=True)
        step("value")
        assert predicate.calls == ["value"]
        assert not error_fn.called

    def test_error_fn_called_once_on_failure(self, probed_validator):
        step, _, error_fn = probed_validator(passes=False)
        step("value")
        assert error_fn.calls == ["value"]

    def test_truthy_predicate_result_passes(self):
        step = create_validator(lambda s: s.strip(), lambda s: ["blank"])
        assert isinstance(step("x"), ValidationValid)
        assert isinstance(step("  "), ValidationInvalid)

    def test_custom_error_objects_pass_through(self):
        error = {"mustBeValid": True, "isValid": False, "msg": "too big"}
        step = create_validator(lambda n: n < 10, lambda n: [error])
        assert step(11).errors == (error,)

    def test_name_defaults_to_predicate_name(self):
        def is_even(n):
            return n % 2 == 0

        step = create_validator(is_even, lambda n: ["odd"])
        assert step.name == "is_even"
        assert "is_even" in repr(step)

    def test_satisfies_step_protocol(self):
        assert isinstance(length_is_5, StepFn)


@pytest.mark.unit
class TestCreateParser:
    def test_successful_transform_yields_parse_valid(self):
        assert string_to_int("1") == ParseValid("1", 1)

    def test_none_yields_parse_invalid(self):
        assert string_to_int("a") == ParseInvalid(["a cannot be parsed to an integer"])

    def test_falsy_non_none_result_is_success(self):
        assert string_to_int("0") == ParseValid("0", 0)

    def test_error_fn_not_called_on_success(self, probed_parser):
        step, transform, error_fn = probed_parser(lambda v: v * 2)
        assert step(2) == ParseValid(2, 4)
        assert transform.calls == [2]
        assert not error_fn.called

    def test_type_may_change(self):
        step = create_parser(lambda s: s.split(","), lambda s: ["never"])
        assert step("a,b").target == ["a", "b"]


@pytest.mark.unit
class TestNonEmptyErrors:
    def test_empty_error_factory_raises(self):
        step = create_validator(lambda v: False, lambda v: [])
        with pytest.raises(EmptyErrorsError, match="no errors"):
            step("x")

    def test_empty_parser_error_factory_raises(self):
        step = create_parser(lambda v: None, lambda v: [], name="nothing")
        with pytest.raises(EmptyErrorsError) as exc_info:
            step("x")
        assert exc_info.value.value == "x"
        assert exc_info.value.step is step

    def test_empty_errors_allowed_when_not_required(self):
        config = ParzConfig(require_errors=False)
        step = create_parser(lambda v: None, lambda v: [], config=config)
        assert step("x") == ParseInvalid([])

    def test_user_exceptions_propagate(self):
        def explode(value):
            raise KeyError(value)

        step = create_parser(explode, lambda v: ["unused"])
        with pytest.raises(KeyError):
            step("x")

    @pytest.mark.parametrize("raw", ["too short", b"too short"])
    def test_bare_string_errors_rejected(self, raw):
        step = create_validator(lambda s: False, lambda s: raw, name="short")
        with pytest.raises(StepContractError, match="wrap it in a list") as exc_info:
            step("abc")
        assert exc_info.value.returned == raw

    def test_bare_string_parser_errors_rejected(self):
        step = create_parser(lambda s: None, lambda s: "unparseable")
        with pytest.raises(StepContractError):
            step("abc")

    def test_error_fn_probe_records_value(self):
        error_fn = Probe(lambda v: [f"bad {v}"])
        step = create_validator(lambda v: False, error_fn)
        assert step(3).errors == ("bad 3",)
        assert error_fn.calls == [3]
