"""Axis-aligned rectangle with fixed-point position and size."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fixed import Fixed
from .vec2 import Vec2

_FIELDS = ("x", "y", "width", "height")


@dataclass
class Rect:
    """A rectangle anchored at its top-left corner."""

    x: Fixed = field(default_factory=Fixed)
    y: Fixed = field(default_factory=Fixed)
    width: Fixed = field(default_factory=Fixed)
    height: Fixed = field(default_factory=Fixed)

    def __setattr__(self, name: str, value: object) -> None:
        if name in _FIELDS:
            value = Fixed(value)
        super().__setattr__(name, value)

    @classmethod
    def sized(cls, width: Fixed | int | float, height: Fixed | int | float) -> Rect:
        """A rectangle of the given size at the origin."""
        return cls(0, 0, width, height)

    @property
    def left(self) -> Fixed:
        return self.x

    @property
    def right(self) -> Fixed:
        return self.x + self.width

    @property
    def top(self) -> Fixed:
        return self.y

    @property
    def bottom(self) -> Fixed:
        return self.y + self.height

    @property
    def min(self) -> Vec2:
        """Top-left corner."""
        return Vec2(self.left, self.top)

    @property
    def max(self) -> Vec2:
        """Bottom-right corner."""
        return Vec2(self.right, self.bottom)