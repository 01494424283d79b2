"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given

from resultant import (
    CapturedError,
    Err,
    InvariantViolation,
    Nothing,
    Ok,
    Result,
    SerializableOutcome,
    Some,
)
from resultant.types import Failure, Success
from tests.strategies import int_functions, integers, json_values, texts


class TestResultCreation:
    """Tests for Result constructors and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value in a Success outcome."""
        ok = Ok(42)
        assert ok.outcome == Success(42)

    def test_ok_with_none(self):
        """Ok can wrap None."""
        ok = Ok(None)
        assert ok.is_ok()
        assert ok.unwrap() is None

    def test_err_creation(self):
        """Err wraps an error in a Failure outcome."""
        err = Err("error message")
        assert err.outcome == Failure("error message")

    def test_err_with_exception(self):
        """Err keeps exception objects as they are."""
        exc = ValueError("something went wrong")
        assert Err(exc).unwrap_err() is exc

    def test_classmethod_constructors(self):
        """Result.success and Result.failure match Ok and Err."""
        assert Result.success(1) == Ok(1)
        assert Result.failure("x") == Err("x")

    def test_result_is_frozen(self):
        """Result instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.outcome = Success(100)  # type: ignore[misc]


class TestResultEquality:
    """Tests for Result equality, hashing and repr."""

    def test_ok_equality(self):
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_ok_not_equal_to_err(self):
        """Ok and Err holding the same payload are different."""
        assert Ok(42) != Err(42)

    def test_hashable(self):
        """Results with hashable payloads can be used in sets."""
        assert len({Ok(1), Ok(1), Err(1)}) == 2

    def test_repr(self):
        assert repr(Ok(1)) == "Ok(1)"
        assert repr(Err("boom")) == "Err('boom')"


class TestInspection:
    """Tests for is_ok, is_err, is_ok_and, is_err_and."""

    def test_is_ok_is_err(self, sample_ok, sample_err):
        assert sample_ok.is_ok() and not sample_ok.is_err()
        assert sample_err.is_err() and not sample_err.is_ok()

    def test_is_ok_and(self, sample_ok, sample_err):
        assert sample_ok.is_ok_and(lambda x: x > 40) is True
        assert sample_ok.is_ok_and(lambda x: x > 50) is False
        assert sample_err.is_ok_and(lambda x: True) is False

    def test_is_err_and(self, sample_ok, sample_err):
        assert sample_err.is_err_and(lambda e: e == "test error") is True
        assert sample_ok.is_err_and(lambda e: True) is False

    def test_predicate_not_called_on_other_slot(self, sample_err):
        calls = []
        sample_err.is_ok_and(calls.append)
        assert calls == []


class TestExtraction:
    """Tests for unwrap, expect, unwrap_or and friends."""

    def test_unwrap_ok(self, sample_ok):
        assert sample_ok.unwrap() == 42

    def test_unwrap_err_raises(self):
        """unwrap on a failure raises with the normalized failure."""
        with pytest.raises(InvariantViolation, match="Attempted to unwrap an 'Err' result: bad"):
            Err(ValueError("bad")).unwrap()

    def test_unwrap_err_keeps_payload(self):
        error = {"code": 7}
        with pytest.raises(InvariantViolation) as exc_info:
            Err(error).unwrap()
        assert exc_info.value.payload is error
        assert '{"code":7}' in str(exc_info.value)

    def test_expect(self, sample_ok, sample_err):
        assert sample_ok.expect("should not fail") == 42
        with pytest.raises(InvariantViolation, match="^custom message$"):
            sample_err.expect("custom message")

    def test_unwrap_or(self, sample_ok, sample_err):
        assert sample_ok.unwrap_or(0) == 42
        assert sample_err.unwrap_or(0) == 0

    def test_unwrap_or_else(self, sample_ok, sample_err):
        assert sample_ok.unwrap_or_else(len) == 42
        assert sample_err.unwrap_or_else(len) == len("test error")

    def test_unwrap_err(self, sample_ok, sample_err):
        assert sample_err.unwrap_err() == "test error"
        with pytest.raises(InvariantViolation, match="Attempted to unwrap 'Err' from an 'Ok' result."):
            sample_ok.unwrap_err()

    def test_expect_err(self, sample_ok, sample_err):
        assert sample_err.expect_err("unused") == "test error"
        with pytest.raises(InvariantViolation, match="wanted failure"):
            sample_ok.expect_err("wanted failure")

    def test_invariant_violation_is_runtime_error(self, sample_err):
        with pytest.raises(RuntimeError):
            sample_err.unwrap()


class TestTransformation:
    """Tests for map, map_err, and_then, or_else."""

    def test_map_ok(self):
        assert Ok(2).map(lambda x: x * 10) == Ok(20)

    def test_map_err_passthrough(self):
        calls = []
        assert Err("e").map(calls.append) == Err("e")
        assert calls == []

    def test_map_err_transforms_error(self):
        assert Err("error").map_err(str.upper) == Err("ERROR")

    def test_map_err_preserves_ok(self):
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_and_then_chains(self):
        def validate(x: int) -> Result[int, str]:
            return Ok(x) if x > 0 else Err("not positive")

        assert Ok(5).and_then(validate) == Ok(5)
        assert Ok(-1).and_then(validate) == Err("not positive")
        assert Err("original").and_then(validate) == Err("original")

    def test_or_else_recovers(self):
        assert Err("e").or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Ok(3).or_else(lambda e: Ok(0)) == Ok(3)

    def test_and_or(self):
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Err("a").and_(Ok(2)) == Err("a")
        assert Ok(1).or_(Ok(2)) == Ok(1)
        assert Err("a").or_(Ok(2)) == Ok(2)
        assert Err("a").or_(Err("b")) == Err("b")


class TestConversion:
    """Tests for ok, err and to_serializable."""

    def test_ok_to_option(self, sample_ok, sample_err):
        assert sample_ok.ok() == Some(42)
        assert sample_err.ok() == Nothing

    def test_err_to_option(self, sample_ok, sample_err):
        assert sample_err.err() == Some("test error")
        assert sample_ok.err() == Nothing

    def test_ok_none_to_option_is_present(self):
        """A success holding None converts to Some(None), not Nothing."""
        assert Ok(None).ok() == Some(None)

    def test_to_serializable_ok(self):
        assert Ok(3).to_serializable() == SerializableOutcome(value=3, ok=True)

    def test_to_serializable_err_normalizes(self):
        wire = Err(ValueError("bad input")).to_serializable()
        assert wire == SerializableOutcome(error="bad input", ok=False)

    def test_from_serializable_mapping(self):
        """A plain failing mapping decodes to a CapturedError with its message."""
        result = Result.from_serializable({"error": "x", "ok": False})
        error = result.unwrap_err()
        assert isinstance(error, CapturedError)
        assert error.message == "x"

    def test_from_serializable_ok_without_value(self):
        assert Result.from_serializable({"ok": True}) == Ok(None)

    def test_from_serializable_rejects_inconsistent_mapping(self):
        import msgspec

        with pytest.raises(msgspec.ValidationError):
            Result.from_serializable({"value": 1, "error": "x", "ok": True})


class TestResultLaws:
    """Property-based checks of the Result laws."""

    @given(integers)
    def test_unwrap_success(self, value):
        assert Ok(value).unwrap() == value

    @given(texts, integers)
    def test_unwrap_or_failure(self, error, default):
        assert Err(error).unwrap_or(default) == default

    @given(integers)
    def test_map_identity(self, value):
        assert Ok(value).map(lambda x: x) == Ok(value)

    @given(integers, int_functions, int_functions)
    def test_map_composition(self, value, f, g):
        assert Ok(value).map(f).map(g) == Ok(value).map(lambda x: g(f(x)))

    @given(integers, int_functions, int_functions)
    def test_and_then_associativity(self, value, f, g):
        def kf(x):
            return Ok(f(x))

        def kg(x):
            return Ok(g(x)) if x % 2 == 0 else Err(x)

        left = Ok(value).and_then(kf).and_then(kg)
        right = Ok(value).and_then(lambda x: kf(x).and_then(kg))
        assert left == right

    @given(json_values)
    def test_serializable_round_trip_success(self, value):
        assert Result.from_serializable(Ok(value).to_serializable()).unwrap() == value

    @given(texts)
    def test_serializable_round_trip_failure(self, message):
        result = Result.from_serializable(Err(message).to_serializable())
        assert result.unwrap_err() == CapturedError(message)
