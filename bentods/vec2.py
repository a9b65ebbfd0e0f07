"""Two-dimensional vector of fixed-point coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fixed import Fixed

_FIELDS = ("x", "y")


def _scalar(value: object) -> Fixed | None:
    if isinstance(value, (Fixed, int, float)):
        return Fixed(value)
    return None


@dataclass
class Vec2:
    """A point or direction; coordinates are always stored as Fixed."""

    x: Fixed = field(default_factory=Fixed)
    y: Fixed = field(default_factory=Fixed)

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIELDS:
            value = Fixed(value)
        super().__setattr__(name, value)

    def __mul__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        return Vec2(self.x * s, self.y * s)

    def __truediv__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        return Vec2(self.x / s, self.y / s)

    def __add__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        return Vec2(self.x + s, self.y + s)

    def __sub__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        return Vec2(self.x - s, self.y - s)

    def __imul__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        self.x, self.y = self.x * s, self.y * s
        return self

    def __itruediv__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        self.x, self.y = self.x / s, self.y / s
        return self

    def __iadd__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        self.x, self.y = self.x + s, self.y + s
        return self

    def __isub__(self, other: object) -> Vec2:
        s = _scalar(other)
        if s is None:
            return NotImplemented
        self.x, self.y = self.x - s, self.y - s
        return self