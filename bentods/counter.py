"""A counter that wraps around between zero and a maximum."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fxmath import mod


@dataclass
class CircularCounter:
    """Counts over 0..max inclusive, wrapping in both directions."""

    max: int = 0
    value: int = field(default=0, init=False)

    def next(self) -> int:
        """Advance by one and return the new value."""
        self.value = mod(self.value + 1, self.max + 1)
        return self.value

    def prev(self) -> int:
        """Step back by one and return the new value."""
        self.value = mod(self.value + self.max, self.max + 1)
        return self.value