"""Signed 20.12 fixed-point numbers and the integer helpers behind them."""

from __future__ import annotations

import math

FRACTION_BITS = 12
ONE = 1 << FRACTION_BITS
DEGREES_IN_CIRCLE = 1 << 15

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((value - _INT32_MIN) % _INT32_SPAN) + _INT32_MIN


def _trunc_div(num: int, den: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(num) // abs(den)
    return -quotient if (num < 0) != (den < 0) else quotient


def int_to_fixed(value: int) -> int:
    """Raw fixed-point value of an integer."""
    return _wrap32(value << FRACTION_BITS)


def float_to_fixed(value: float) -> int:
    """Raw fixed-point value of a float, truncated toward zero."""
    return _wrap32(int(value * ONE))


def mulf32(a: int, b: int) -> int:
    """Multiply two raw fixed-point values."""
    return _wrap32((a * b) >> FRACTION_BITS)


def divf32(a: int, b: int) -> int:
    """Divide two raw fixed-point values, rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    return _wrap32(_trunc_div(a << FRACTION_BITS, b))


def sqrtf32(a: int) -> int:
    """Square root of a raw fixed-point value."""
    if a < 0:
        raise ValueError("square root of a negative fixed-point value")
    return math.isqrt(a << FRACTION_BITS)


def degrees_to_angle(degrees: int) -> int:
    """Convert whole degrees to a binary angle where a circle is 32768."""
    return _trunc_div(degrees * DEGREES_IN_CIRCLE, 360)


def _radians(angle: int) -> float:
    return (angle % DEGREES_IN_CIRCLE) * (2.0 * math.pi) / DEGREES_IN_CIRCLE


def cos_lerp(angle: int) -> int:
    """Raw fixed-point cosine of a binary angle."""
    return round(math.cos(_radians(angle)) * ONE)


def sin_lerp(angle: int) -> int:
    """Raw fixed-point sine of a binary angle."""
    return round(math.sin(_radians(angle)) * ONE)


def tan_lerp(angle: int) -> int:
    """Raw fixed-point tangent of a binary angle, clamped to 32 bits."""
    value = math.tan(_radians(angle)) * ONE
    return max(_INT32_MIN, min(_INT32_MAX, round(value)))


def _coerce(value: object) -> int | None:
    """Raw fixed-point value of a Fixed, int or float; None otherwise."""
    if isinstance(value, Fixed):
        return value.value
    if isinstance(value, int):
        return int_to_fixed(value)
    if isinstance(value, float):
        return float_to_fixed(value)
    return None


class Fixed:
    """An immutable signed fixed-point number with 12 fractional bits."""

    __slots__ = ("_value",)

    def __init__(self, value: Fixed | int | float = 0) -> None:
        raw = _coerce(value)
        if raw is None:
            raise TypeError(f"cannot make a fixed-point number from {type(value).__name__}")
        self._value = raw

    @classmethod
    def raw(cls, value: int) -> Fixed:
        """Build a number from its raw 32-bit representation."""
        obj = cls.__new__(cls)
        obj._value = _wrap32(int(value))
        return obj

    @property
    def value(self) -> int:
        """The raw 32-bit representation."""
        return self._value

    def to_int(self) -> int:
        """Integer part, rounding toward negative infinity."""
        return self._value >> FRACTION_BITS

    def to_float(self) -> float:
        return self._value / ONE

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"Fixed({self.to_float()!r})"

    def __hash__(self) -> int:
        return hash(self._value)

    # arithmetic

    def __add__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(self._value + raw)

    __radd__ = __add__

    def __sub__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(self._value - raw)

    def __rsub__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(raw - self._value)

    def __mul__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(mulf32(self._value, raw))

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(divf32(self._value, raw))

    def __rtruediv__(self, other: object) -> Fixed:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return Fixed.raw(divf32(raw, self._value))

    def __neg__(self) -> Fixed:
        return Fixed.raw(-self._value)

    def __pos__(self) -> Fixed:
        return self

    def __abs__(self) -> Fixed:
        return -self if self._value < 0 else self

    # comparison

    def __eq__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value == raw

    def __ne__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value != raw

    def __lt__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value < raw

    def __le__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value <= raw

    def __gt__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value > raw

    def __ge__(self, other: object) -> bool:
        raw = _coerce(other)
        if raw is None:
            return NotImplemented
        return self._value >= raw