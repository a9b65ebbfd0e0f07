"""2D camera that maps between world and screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fixed import Fixed
from .matrix import Matrix
from .vec2 import Vec2


def _one() -> Fixed:
    return Fixed(1)


@dataclass
class Camera:
    """Offset, target, rotation in degrees and zoom factor."""

    offset: Vec2 = field(default_factory=Vec2)
    target: Vec2 = field(default_factory=Vec2)
    rotation: int = 0
    zoom: Fixed = field(default_factory=_one)

    def __post_init__(self) -> None:
        self.zoom = Fixed(self.zoom)

    def set(
        self,
        offset: Vec2,
        target: Vec2,
        rotation: int,
        zoom: Fixed | int | float,
    ) -> None:
        """Replace every camera parameter at once."""
        self.offset = Vec2(offset.x, offset.y)
        self.target = Vec2(target.x, target.y)
        self.rotation = int(rotation)
        self.zoom = Fixed(zoom)

    def matrix(self) -> Matrix:
        """The camera transform."""
        m_origin = Matrix.translation(-self.target.x, -self.target.y)
        m_rotation = Matrix.rotation(self.rotation)
        m_scale = Matrix.scale(self.zoom, self.zoom)
        m_translate = Matrix.translation(self.offset.x, self.offset.y)
        return m_origin * (m_scale * m_rotation) * m_translate

    def camera_to_screen(self, position: Vec2) -> Vec2:
        m = Matrix.translation(position.x, position.y) * self.matrix()
        return Vec2(m[2], m[5])

    def screen_to_camera(self, position: Vec2) -> Vec2:
        m = Matrix.translation(position.x, position.y) * self.matrix().inverse()
        return Vec2(m[2], m[5])