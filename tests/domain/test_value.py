"""Tests for BoundedValue construction, comparison, and operators."""

from __future__ import annotations

import copy
import pickle

import pytest
from pydantic import ValidationError

from rangeint.domain.errors import BoundViolation, ErrorCode
from rangeint.domain.value import BoundedValue, construct
from tests.conftest import bv


class TestConstruct:
    @pytest.mark.parametrize("raw", range(1, 11))
    def test_round_trip(self, raw: int) -> None:
        result = construct(raw)
        assert result.ok is True
        assert result.unwrap().value == raw

    @pytest.mark.parametrize("raw", [0, 11, 12, 100, 255])
    def test_rejects_out_of_range(self, raw: int) -> None:
        result = construct(raw)
        assert result.is_err()
        assert result.value is None
        assert result.error is not None
        assert result.error.code == ErrorCode.OUT_OF_RANGE
        assert result.error.detail["raw"] == raw

    @pytest.mark.parametrize("raw", [-1, 256, 10_000])
    def test_rejects_beyond_storage_width(self, raw: int) -> None:
        result = construct(raw)
        assert result.is_err()
        assert result.error is not None
        assert result.error.detail["storage"] == "u8"

    def test_rejection_matches_bound_across_storage_width(self) -> None:
        """Out-of-range input is ordinary control flow, never an exception."""
        for raw in range(-5, 300):
            assert construct(raw).is_err() == (not 1 <= raw <= 10), raw

    @pytest.mark.parametrize("raw", [True, 3.0, "3", None])
    def test_non_int_is_type_error(self, raw: object) -> None:
        with pytest.raises(TypeError):
            construct(raw)  # type: ignore[arg-type]

    def test_classmethod_alias(self) -> None:
        assert BoundedValue.construct_from(4).unwrap() == construct(4).unwrap()


class TestDirectInstantiation:
    def test_valid(self) -> None:
        assert BoundedValue(value=5).value == 5

    @pytest.mark.parametrize("raw", [0, 11])
    def test_invalid_raises_validation_error(self, raw: int) -> None:
        with pytest.raises(ValidationError):
            BoundedValue(value=raw)

    def test_frozen(self) -> None:
        v = bv(3)
        with pytest.raises(ValidationError):
            v.value = 4  # type: ignore[misc]


class TestEqualityAndOrdering:
    def test_equal_values_compare_equal(self) -> None:
        assert bv(6) == bv(6)
        assert bv(6) != bv(7)

    def test_not_equal_to_plain_int(self) -> None:
        assert bv(3) != 3

    @pytest.mark.parametrize("a", range(1, 11))
    @pytest.mark.parametrize("b", [1, 5, 10])
    def test_ordering_matches_ints(self, a: int, b: int) -> None:
        assert (bv(a) < bv(b)) == (a < b)
        assert (bv(a) <= bv(b)) == (a <= b)
        assert (bv(a) > bv(b)) == (a > b)
        assert (bv(a) >= bv(b)) == (a >= b)
        assert (bv(a) == bv(b)) == (a == b)

    def test_sorting(self) -> None:
        values = [bv(7), bv(2), bv(10), bv(1)]
        assert [v.value for v in sorted(values)] == [1, 2, 7, 10]
        assert max(values) == bv(10)

    def test_ordering_with_int_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            bv(3) < 4  # noqa: B015

    def test_hashable_by_value(self) -> None:
        assert {bv(2), bv(2), bv(3)} == {bv(2), bv(3)}
        assert hash(bv(5)) == hash(bv(5))


class TestValueSemantics:
    def test_copy_is_equal(self) -> None:
        v = bv(8)
        assert copy.copy(v) == v
        assert copy.deepcopy(v) == v

    def test_repr_shows_value(self) -> None:
        assert repr(bv(6)) == "BoundedValue(value=6)"

    def test_int(self) -> None:
        assert int(bv(9)) == 9

    def test_operators_do_not_mutate_operands(self) -> None:
        a, b = bv(2), bv(4)
        _ = a + b
        assert (a.value, b.value) == (2, 4)


class TestOperators:
    def test_add(self) -> None:
        assert bv(2) + bv(4) == bv(6)

    def test_subtract(self) -> None:
        assert bv(4) - bv(2) == bv(2)

    def test_multiply(self) -> None:
        assert bv(4) * bv(2) == bv(8)

    def test_divide(self) -> None:
        assert bv(4) / bv(2) == bv(2)
        assert bv(4) // bv(2) == bv(2)

    def test_divide_truncates(self) -> None:
        assert bv(7) / bv(2) == bv(3)

    def test_bitwise_and(self) -> None:
        assert bv(3) & bv(2) == bv(2)

    def test_bitwise_or(self) -> None:
        assert bv(3) | bv(2) == bv(3)

    def test_bitwise_xor(self) -> None:
        assert bv(3) ^ bv(2) == bv(1)

    def test_result_is_new_instance(self) -> None:
        a, b = bv(5), bv(1)
        result = a * b
        assert result == a
        assert result is not a

    def test_result_type(self) -> None:
        assert type(bv(1) + bv(1)) is BoundedValue

    def test_mixing_with_int_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            bv(2) + 4  # type: ignore[operator]
        with pytest.raises(TypeError):
            4 + bv(2)  # type: ignore[operator]


class TestBoundViolation:
    def test_overflow_aborts(self) -> None:
        with pytest.raises(BoundViolation, match="BoundedValue is out of bounds! 11 was value"):
            bv(10) + bv(1)

    def test_underflow_to_zero_aborts(self) -> None:
        with pytest.raises(BoundViolation, match="BoundedValue is out of bounds! 0 was value"):
            bv(1) - bv(1)

    def test_negative_result_reaches_bound_check(self) -> None:
        """Subtraction is computed signed, so the bound check sees -1, not a wrapped 255."""
        with pytest.raises(BoundViolation, match="-1 was value") as exc_info:
            bv(1) - bv(2)
        assert exc_info.value.value == -1

    def test_multiply_overflow(self) -> None:
        with pytest.raises(BoundViolation, match="100 was value"):
            bv(10) * bv(10)

    def test_divide_to_zero(self) -> None:
        with pytest.raises(BoundViolation, match="0 was value"):
            bv(2) / bv(3)

    def test_bitwise_and_to_zero(self) -> None:
        with pytest.raises(BoundViolation, match="0 was value"):
            bv(4) & bv(2)

    def test_bitwise_or_overflow(self) -> None:
        with pytest.raises(BoundViolation, match="15 was value"):
            bv(8) | bv(7)

    def test_xor_self_is_zero(self) -> None:
        with pytest.raises(BoundViolation, match="0 was value"):
            bv(5) ^ bv(5)

    def test_not_caught_by_except_exception(self) -> None:
        assert not issubclass(BoundViolation, Exception)
        with pytest.raises(BoundViolation):
            try:
                bv(10) + bv(10)
            except Exception:  # noqa: BLE001
                pytest.fail("BoundViolation must not be an Exception")

    def test_carries_type_name_and_value(self) -> None:
        with pytest.raises(BoundViolation) as exc_info:
            bv(9) + bv(9)
        assert exc_info.value.type_name == "BoundedValue"
        assert exc_info.value.value == 18

    def test_pickle_round_trip(self) -> None:
        with pytest.raises(BoundViolation) as exc_info:
            bv(10) + bv(1)
        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert isinstance(restored, BoundViolation)
        assert restored.type_name == "BoundedValue"
        assert restored.value == 11
        assert str(restored) == "BoundedValue is out of bounds! 11 was value"

    def test_str_is_diagnostic_message(self) -> None:
        exc = BoundViolation("BoundedValue", 0)
        assert exc.args == ("BoundedValue", 0)
        assert str(exc) == "BoundedValue is out of bounds! 0 was value"

    def test_logs_critical(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("CRITICAL", logger="rangeint"):
            with pytest.raises(BoundViolation):
                bv(10) + bv(1)
        assert "11 was value" in caplog.text


class TestAssertInBounds:
    @pytest.mark.parametrize("raw", range(1, 11))
    def test_idempotent_on_live_values(self, raw: int) -> None:
        v = bv(raw)
        v.assert_in_bounds()
        v.assert_in_bounds()
        assert v.value == raw

    def test_fires_on_provisional_value(self) -> None:
        provisional = BoundedValue.model_construct(value=42)
        with pytest.raises(BoundViolation, match="42 was value"):
            provisional.assert_in_bounds()


class TestModelCopy:
    def test_plain_copy_is_equal(self) -> None:
        v = bv(3)
        assert v.model_copy() == v
        assert v.model_copy(deep=True) == v

    def test_in_range_update(self) -> None:
        assert bv(3).model_copy(update={"value": 9}) == bv(9)

    @pytest.mark.parametrize("raw", [0, 11, -1])
    def test_out_of_range_update_aborts(self, raw: int) -> None:
        with pytest.raises(BoundViolation, match=f"{raw} was value"):
            bv(3).model_copy(update={"value": raw})
