"""ARGB colour with 8 bits per channel and conversion to 15-bit colour."""

from __future__ import annotations

from dataclasses import dataclass, fields

_ALPHA_BIT = 0x8000


@dataclass(frozen=True)
class Color:
    """A colour stored as alpha, red, green and blue bytes."""

    a: int = 0
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            channel = getattr(self, f.name)
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"channel {f.name} out of range: {channel}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """An opaque colour."""
        return cls(255, r, g, b)

    @classmethod
    def from_argb(cls, value: int) -> Color:
        """Unpack a 32-bit 0xAARRGGBB value."""
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    def to_rgb255(self) -> int:
        """Pack into a 32-bit 0xAARRGGBB value."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_rgb15(self, alpha_threshold: int = 128) -> int:
        """Pack into 15-bit colour with the top bit set when opaque enough."""
        alpha_bit = _ALPHA_BIT if self.a >= alpha_threshold else 0
        return (
            alpha_bit
            | ((self.r >> 3) & 0x1F)
            | ((self.g >> 3) & 0x1F) << 5
            | ((self.b >> 3) & 0x1F) << 10
        )


Color.LIGHT_GRAY = Color(255, 200, 200, 200)
Color.GRAY = Color(255, 128, 128, 128)
Color.DARK_GRAY = Color(255, 80, 80, 80)
Color.YELLOW = Color(255, 253, 249, 0)
Color.GOLD = Color(255, 255, 203, 0)
Color.ORANGE = Color(255, 255, 161, 0)
Color.PINK = Color(255, 255, 109, 194)
Color.RED = Color(255, 230, 41, 55)
Color.MAROON = Color(255, 190, 33, 55)
Color.GREEN = Color(255, 0, 228, 48)
Color.LIME = Color(255, 0, 158, 47)
Color.DARK_GREEN = Color(255, 0, 117, 44)
Color.SKY_BLUE = Color(255, 102, 191, 255)
Color.BLUE = Color(255, 0, 121, 241)
Color.DARK_BLUE = Color(255, 0, 82, 172)
Color.PURPLE = Color(255, 200, 122, 255)
Color.VIOLET = Color(255, 135, 60, 190)
Color.DARK_PURPLE = Color(255, 112, 31, 126)
Color.BEIGE = Color(255, 211, 176, 131)
Color.BROWN = Color(255, 127, 106, 79)
Color.DARK_BROWN = Color(255, 76, 63, 47)
Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(255, 0, 0, 0)
Color.BLANK = Color(0, 0, 0, 0)
Color.MAGENTA = Color(255, 255, 0, 255)
Color.RAY_WHITE = Color(255, 245, 245, 245)