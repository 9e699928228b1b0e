"""Corner rounding between three waypoints."""

import logging
import math
from dataclasses import dataclass

from .errors import ConfigurationError, ZeroLengthError
from .vector import Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arc:
    start: Vector2
    end: Vector2
    radius: float
    clockwise: bool
    center: Vector2


def round_corner(before: Vector2, corner: Vector2, after: Vector2, radius: float) -> Arc:
    """Build the fillet arc that replaces the corner of before -> corner -> after.

    When the edges are too short for the requested radius the tangent length is
    clamped to the shorter edge and the radius shrinks to match. Edges that
    continue straight on give a zero-length arc at the corner.
    """
    if radius <= 0:
        raise ConfigurationError(f"Corner radius must be positive, got {radius}")

    edge_in = before - corner
    edge_out = after - corner
    len_in, len_out = edge_in.length(), edge_out.length()
    if len_in == 0 or len_out == 0:
        raise ZeroLengthError("Cannot round a corner with a zero-length edge")

    # straight through, nothing to round
    if edge_in.cross(edge_out) == 0 and edge_in.dot(edge_out) < 0:
        return Arc(start=corner, end=corner, radius=0.0, clockwise=False, center=corner)

    half_angle = (edge_in.angle() - edge_out.angle()) / 2
    tan = abs(math.tan(half_angle))
    if tan == 0:
        raise ZeroLengthError("Cannot round a corner between collinear edges")
    segment = radius / tan

    shortest = min(len_in, len_out)
    if segment > shortest:
        logger.debug("Shrinking corner radius %.4f to fit edge %.4f", radius, shortest)
        segment = shortest
        radius = shortest * tan

    start = corner + edge_in * (segment / len_in)
    end = corner + edge_out * (segment / len_out)

    bisector = (start - corner) + (end - corner)
    center = corner + bisector.normalize() * math.hypot(segment, radius)

    sweep = math.atan2((start - center).cross(end - center), (start - center).dot(end - center))
    return Arc(start=start, end=end, radius=radius, clockwise=sweep < 0, center=center)
