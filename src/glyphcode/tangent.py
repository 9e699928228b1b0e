"""Tangent construction between points and circles.

Side flags follow one convention throughout: ``clockwise=True`` picks the tangent
on the clockwise side of the line of sight, i.e. the right-hand side when looking
from the point (or the first circle) toward the circle being touched. A path that
travels *counterclockwise* around a circle meets it on that side, so callers that
know the travel direction pass ``not clockwise``.
"""

import math
from dataclasses import dataclass

from .errors import NestedCirclesError, OverlappingCirclesError, PointInsideCircleError
from .vector import Vector2


@dataclass(frozen=True)
class Circle:
    center: Vector2
    radius: float


@dataclass(frozen=True)
class TangentPair:
    """Endpoints of a segment tangent to two circles."""

    first: Vector2
    second: Vector2

    def __iter__(self):
        yield self.first
        yield self.second


def tangent_point(point: Vector2, center: Vector2, radius: float, clockwise: bool) -> Vector2:
    """Point on the circle where a line from `point` touches it."""
    offset = center - point
    distance = offset.length()
    if distance < radius:
        raise PointInsideCircleError(
            f"Point ({point.x:.4f}, {point.y:.4f}) lies inside circle of radius {radius}"
        )

    alpha = math.asin(radius / distance) if distance > 0 else 0.0
    theta = offset.angle() + (-alpha if clockwise else alpha)
    reach = math.sqrt(max(0.0, distance * distance - radius * radius))
    return point + Vector2(math.cos(theta), math.sin(theta)) * reach


def tangent_points(a: Circle, b: Circle, a_clockwise: bool, b_clockwise: bool) -> TangentPair:
    """Segment tangent to both circles, touching each on the requested side.

    Equal flags give an outer tangent, opposite flags a crossing one.
    """
    between = b.center - a.center
    distance = between.length()

    if distance <= abs(a.radius - b.radius):
        raise NestedCirclesError("Can't draw a tangent line between circles that are inside each other")

    if a_clockwise == b_clockwise:
        if a.radius == b.radius:
            offset = between.perpendicular(clockwise=a_clockwise).normalize() * a.radius
            return TangentPair(a.center + offset, b.center + offset)

        # external homothetic center
        homothetic = (b.center * a.radius - a.center * b.radius) * (1 / (a.radius - b.radius))
        invert_a = invert_b = (homothetic - a.center).length() > (homothetic - b.center).length()
    else:
        if distance <= a.radius + b.radius:
            raise OverlappingCirclesError("Can't draw a crossing tangent line between circles that overlap")

        # internal homothetic center
        if a.radius == b.radius:
            homothetic = (a.center + b.center) * 0.5
        else:
            homothetic = (b.center * a.radius + a.center * b.radius) * (1 / (a.radius + b.radius))
        invert_a, invert_b = True, False

    return TangentPair(
        tangent_point(homothetic, a.center, a.radius, a_clockwise ^ invert_a),
        tangent_point(homothetic, b.center, b.radius, b_clockwise ^ invert_b),
    )
