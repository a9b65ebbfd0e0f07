"""Fixed-point math helpers: trigonometry in degrees, roots and distances."""

from __future__ import annotations

from .fixed import Fixed, cos_lerp, degrees_to_angle, sin_lerp, sqrtf32, tan_lerp
from .vec2 import Vec2


def fabs(value: Fixed) -> Fixed:
    """Absolute value of a fixed-point number."""
    return -value if value < 0 else value


def mod(num: int, den: int) -> int:
    """Integer remainder taking the sign of the numerator."""
    if den == 0:
        raise ZeroDivisionError("modulo by zero")
    remainder = abs(num) % abs(den)
    return -remainder if num < 0 else remainder


def cos(degrees: int) -> Fixed:
    return Fixed.raw(cos_lerp(degrees_to_angle(degrees)))


def sin(degrees: int) -> Fixed:
    return Fixed.raw(sin_lerp(degrees_to_angle(degrees)))


def tan(degrees: int) -> Fixed:
    return Fixed.raw(tan_lerp(degrees_to_angle(degrees)))


def sqrt(value: Fixed) -> Fixed:
    return Fixed.raw(sqrtf32(value.value))


def distance(p1: Vec2, p2: Vec2) -> Fixed:
    """Squared Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def distance_sqrt(p1: Vec2, p2: Vec2) -> Fixed:
    """Euclidean distance between two points."""
    return sqrt(distance(p1, p2))


def distance_manhattan(p1: Vec2, p2: Vec2) -> Fixed:
    """Sum of the absolute coordinate differences."""
    dx = Fixed(p1.x.to_float() - p2.x.to_float())
    dy = Fixed(p1.y.to_float() - p2.y.to_float())
    return fabs(dx) + fabs(dy)