"""Plane vector math."""

import math
from dataclasses import dataclass

from .errors import ConfigurationError, ZeroLengthError


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ConfigurationError(f"Non-finite vector ({self.x}, {self.y})")

    @classmethod
    def of(cls, value: "Vector2 | tuple[float, float]") -> "Vector2":
        """Coerce an (x, y) pair to a vector."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return self.invert()

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2":
        length = self.length()
        if length == 0:
            raise ZeroLengthError("Cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def invert(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product; positive when other is counterclockwise."""
        return self.x * other.y - self.y * other.x

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def perpendicular(self, clockwise: bool = False) -> "Vector2":
        """Rotate by 90 degrees."""
        if clockwise:
            return Vector2(self.y, -self.x)
        return Vector2(-self.y, self.x)

    def rotate(self, other: "Vector2") -> "Vector2":
        """Compose two rotations given as unit vectors (complex multiplication).

        The product is renormalized so repeated composition does not drift off
        the unit circle.
        """
        return Vector2(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        ).normalize()

    def clerp(self, to: "Vector2", amount: float, clockwise: bool) -> "Vector2":
        """Rotate this unit vector toward unit vector `to` by a fraction of the angle between them."""
        if amount >= 1:
            return to
        if amount <= 0:
            return self

        opposite = min(1.0, (to - self).length() * 0.5)
        angle = (-2 if clockwise else 2) * math.asin(opposite)
        step = Vector2(math.cos(angle * amount), math.sin(angle * amount))
        return self.rotate(step)

    def slerp(self, to: "Vector2", t: float) -> "Vector2":
        """Spherical-linear interpolation between two unit vectors in the plane."""
        if t <= 0:
            return self
        if t >= 1:
            return to

        theta = math.acos(max(-1.0, min(1.0, self.dot(to))))
        sin_theta = math.sin(theta)
        if sin_theta < 1e-12:
            return self
        a = math.sin((1 - t) * theta) / sin_theta
        b = math.sin(t * theta) / sin_theta
        return (self * a + to * b).normalize()


ZERO = Vector2(0.0, 0.0)
UNIT_X = Vector2(1.0, 0.0)
UNIT_Y = Vector2(0.0, 1.0)


def vec(value) -> Vector2:
    """Shorthand for Vector2.of."""
    return Vector2.of(value)
