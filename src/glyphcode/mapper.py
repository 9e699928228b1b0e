"""Glyph space to machine space mapping."""

from dataclasses import dataclass

from .vector import Vector2


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps normalized glyph coordinates onto the machine around a baseline origin."""

    origin: Vector2
    font_size: float

    def absolute(self, point: Vector2) -> Vector2:
        return Vector2(self.absolute_x(point.x), self.absolute_y(point.y))

    def absolute_x(self, x: float) -> float:
        return self.origin.x + x * self.font_size

    def absolute_y(self, y: float) -> float:
        return self.origin.y + y * self.font_size

    def scale(self, length: float) -> float:
        return length * self.font_size
