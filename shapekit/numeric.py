"""Numeric kinds with fixed-width semantics and helpers built on them."""

from __future__ import annotations

import math
import struct
from enum import Enum
from typing import Union

Number = Union[int, float]

_INT_BOUNDS = {
    "i32": (-(2**31), 2**31 - 1),
    "i64": (-(2**63), 2**63 - 1),
    "usize": (0, 2**64 - 1),
    "u32": (0, 2**32 - 1),
    "u64": (0, 2**64 - 1),
}

_F32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


def _to_f32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class NumKind(Enum):
    """A numeric representation: fixed-width integers or single-precision floats."""

    I32 = "i32"
    I64 = "i64"
    USIZE = "usize"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"

    @property
    def is_float(self) -> bool:
        return self is NumKind.F32

    @property
    def min_value(self) -> Number:
        if self.is_float:
            return -_F32_MAX
        return _INT_BOUNDS[self.value][0]

    @property
    def max_value(self) -> Number:
        if self.is_float:
            return _F32_MAX
        return _INT_BOUNDS[self.value][1]

    def _checked(self, result: int, operation: str) -> int:
        low, high = _INT_BOUNDS[self.value]
        if not low <= result <= high:
            raise OverflowError(f"attempt to {operation} with overflow ({self.value})")
        return result

    def validate(self, value: Number) -> Number:
        """Return ``value`` as a value of this kind, or raise if it cannot be one."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{self.value} requires a number, got {value!r}")
        if self.is_float:
            return _to_f32(float(value))
        if not isinstance(value, int):
            raise TypeError(f"{self.value} requires an integer, got {value!r}")
        low, high = _INT_BOUNDS[self.value]
        if not low <= value <= high:
            raise OverflowError(f"{value} is out of range for {self.value}")
        return value

    def from_float(self, value: float) -> Number:
        """Convert a float the way a numeric cast does: truncating and saturating."""
        value = float(value)
        if self.is_float:
            return _to_f32(value)
        low, high = _INT_BOUNDS[self.value]
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return high if value > 0 else low
        return min(max(math.trunc(value), low), high)

    def to_float(self, value: Number) -> float:
        """Widen a value of this kind to a double-precision float."""
        return float(self.validate(value))

    def add(self, left: Number, right: Number) -> Number:
        left, right = self.validate(left), self.validate(right)
        if self.is_float:
            return _to_f32(left + right)
        return self._checked(left + right, "add")

    def sub(self, left: Number, right: Number) -> Number:
        left, right = self.validate(left), self.validate(right)
        if self.is_float:
            return _to_f32(left - right)
        return self._checked(left - right, "subtract")

    def mul(self, left: Number, right: Number) -> Number:
        left, right = self.validate(left), self.validate(right)
        if self.is_float:
            return _to_f32(left * right)
        return self._checked(left * right, "multiply")

    def div(self, left: Number, right: Number) -> Number:
        left, right = self.validate(left), self.validate(right)
        if self.is_float:
            if right == 0:
                if left == 0 or math.isnan(left):
                    return math.nan
                return math.copysign(math.inf, left) * math.copysign(1.0, right)
            return _to_f32(left / right)
        if right == 0:
            raise ZeroDivisionError(f"attempt to divide by zero ({self.value})")
        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            quotient = -quotient
        return self._checked(quotient, "divide")


def square(value: Number, kind: NumKind) -> Number:
    """``value * value`` in the given kind."""
    return kind.mul(value, value)


def half(value: Number, kind: NumKind) -> Number:
    """``value / 2`` in the given kind."""
    return kind.div(value, kind.from_float(2.0))


def cube(value: Number, kind: NumKind) -> Number:
    """``value * value * value`` in the given kind."""
    return kind.mul(kind.mul(value, value), value)


def double(value: Number, kind: NumKind) -> Number:
    """``value * 2`` in the given kind."""
    return kind.mul(value, kind.from_float(2.0))