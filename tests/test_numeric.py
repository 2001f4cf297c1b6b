import math

import pytest

from shapekit.numeric import NumKind, cube, double, half, square

INT_KINDS = [NumKind.I32, NumKind.I64, NumKind.USIZE, NumKind.U32, NumKind.U64]


def test_documented_limits():
    assert NumKind.I32.max_value == 2147483647
    assert NumKind.U64.max_value == 18446744073709551615
    assert NumKind.U32.min_value == NumKind.U64.min_value == NumKind.USIZE.min_value
    assert NumKind.I32.from_float(3e9) == 2147483647
    assert NumKind.U64.from_float(1e30) == 18446744073709551615
    assert NumKind.U32.from_float(-5.0) == 0


@pytest.mark.parametrize("kind", INT_KINDS)
def test_from_float_whole_number(kind):
    assert NumKind.from_float(kind, 42.0) == 42


def test_from_float_pi_truncates():
    assert NumKind.I32.from_float(math.pi) == 3


def test_from_float_truncates_toward_zero():
    positive = NumKind.I64.from_float(2.5)
    negative = NumKind.I64.from_float(-2.5)
    assert negative == -positive
    assert 1.5 < positive < 2.5


@pytest.mark.parametrize("kind", INT_KINDS)
def test_from_float_saturates(kind):
    assert NumKind.from_float(kind, 1e30) == kind.max_value
    assert NumKind.from_float(kind, -1e30) == kind.min_value
    assert NumKind.from_float(kind, math.inf) == kind.max_value
    assert NumKind.from_float(kind, -math.inf) == kind.min_value


@pytest.mark.parametrize("kind", INT_KINDS)
def test_from_float_nan_is_zero(kind):
    assert NumKind.from_float(kind, math.nan) == NumKind.from_float(kind, 0.0)
    assert NumKind.from_float(kind, math.nan) == 0


def test_f32_rounding_is_idempotent():
    once = NumKind.F32.from_float(0.1)
    assert NumKind.F32.from_float(once) == once
    assert once != 0.1
    assert abs(once - 0.1) < 1e-8


def test_f32_overflow_is_infinite():
    assert NumKind.F32.from_float(1e300) == math.inf
    assert NumKind.F32.from_float(-1e300) == -math.inf


@pytest.mark.parametrize("kind", INT_KINDS)
@pytest.mark.parametrize("value", [0, 1, 17, 4096])
def test_to_float_round_trip(kind, value):
    as_float = NumKind.to_float(kind, value)
    assert as_float == float(value)
    assert NumKind.from_float(kind, as_float) == value


def test_add_overflow_raises():
    with pytest.raises(OverflowError):
        NumKind.I32.add(NumKind.I32.max_value, 1)


def test_unsigned_sub_below_zero_raises():
    with pytest.raises(OverflowError):
        NumKind.U32.sub(0, 1)


def test_mul_overflow_raises():
    with pytest.raises(OverflowError):
        NumKind.U64.mul(NumKind.U64.max_value, 2)


def test_integer_division_truncates():
    quotient = NumKind.I32.div(7, 2)
    assert quotient * 2 <= 7 < (quotient + 1) * 2
    assert NumKind.I32.div(-7, 2) == -quotient


def test_integer_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        NumKind.I64.div(5, 0)


def test_min_divided_by_minus_one_overflows():
    with pytest.raises(OverflowError):
        NumKind.I32.div(NumKind.I32.min_value, -1)


def test_float_division_by_zero_is_infinite():
    assert NumKind.F32.div(1.0, 0.0) == math.inf
    assert math.isnan(NumKind.F32.div(0.0, 0.0))


def test_validate_rejects_non_integers_for_int_kinds():
    with pytest.raises(TypeError):
        NumKind.I32.validate(1.5)
    with pytest.raises(TypeError):
        NumKind.I32.validate(True)
    with pytest.raises(TypeError):
        NumKind.F32.validate("1.0")


def test_validate_rejects_out_of_range():
    with pytest.raises(OverflowError):
        NumKind.U32.validate(-1)


@pytest.mark.parametrize("kind", [NumKind.I32, NumKind.U64, NumKind.F32])
def test_helpers_agree_with_arithmetic(kind):
    value = kind.from_float(6.0)
    assert square(value, kind) == kind.mul(value, value)
    assert cube(value, kind) == kind.mul(square(value, kind), value)
    assert double(value, kind) == kind.add(value, value)
    assert half(double(value, kind), kind) == value


def test_half_of_odd_integer_truncates():
    assert half(7, NumKind.I32) == NumKind.I32.div(7, 2)
    assert half(7.0, NumKind.F32) * 2 == 7.0