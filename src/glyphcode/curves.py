"""Arc and circle approximation as polylines."""

import logging
import math
from collections.abc import Iterator

from .errors import ConfigurationError, ZeroLengthError
from .vector import Vector2

logger = logging.getLogger(__name__)


def _step_count(length: float, scale: float, tolerance: float) -> int:
    if tolerance <= 0:
        raise ConfigurationError(f"Chord tolerance must be positive, got {tolerance}")
    return math.ceil(scale * length / tolerance)


def arc_center(start: Vector2, end: Vector2, radius: float, clockwise: bool) -> Vector2:
    """Center of the arc of `radius` from `start` to `end` sweeping at most 180 degrees."""
    chord = end - start
    distance = chord.length()
    if distance == 0:
        raise ZeroLengthError("Arc start and end coincide")

    middle = (start + end) * 0.5
    sagitta = math.sqrt(max(0.0, radius * radius - distance * distance * 0.25))
    return middle + chord.perpendicular(clockwise=clockwise).normalize() * sagitta


def arc_steps(
    start: Vector2,
    end: Vector2,
    radius: float,
    clockwise: bool = True,
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Yield the points after `start` that trace an arc to `end`.

    Chords longer than the diameter are drawn as two half arcs of radius
    distance / 2 so that no single arc sweeps past 180 degrees. The last point
    yielded is always `end` itself.
    """
    if radius <= 0:
        raise ConfigurationError(f"Arc radius must be positive, got {radius}")

    chord = end - start
    distance = chord.length()
    if distance == 0:
        raise ZeroLengthError("Arc start and end coincide")

    if distance >= radius * 2:
        logger.debug("Splitting arc: chord %.4f exceeds diameter %.4f", distance, radius * 2)
        middle = (start + end) * 0.5
        bulge = middle - chord.perpendicular(clockwise=clockwise) * 0.5
        half = distance * 0.5
        yield from arc_steps(start, bulge, half, clockwise, scale, tolerance)
        yield from arc_steps(bulge, end, half, clockwise, scale, tolerance)
        return

    center = arc_center(start, end, radius, clockwise)
    length = radius * 2 * math.asin(min(1.0, distance * 0.5 / radius))
    steps = max(1, _step_count(length, scale, tolerance))

    from_unit = (start - center).normalize()
    to_unit = (end - center).normalize()
    for i in range(1, steps):
        yield center + from_unit.clerp(to_unit, i / steps, clockwise) * radius
    yield end


def circle_steps(
    start: Vector2,
    center: Vector2,
    clockwise: bool = True,
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Yield the points after `start` that trace a full circle back to `start`."""
    spoke = start - center
    radius = spoke.length()
    unit = spoke.normalize()

    quarters = [
        unit,
        unit.perpendicular(clockwise=clockwise),
        unit.invert(),
        unit.perpendicular(clockwise=not clockwise),
    ]
    steps = _step_count(2 * math.pi * radius, scale, tolerance)

    # too coarse for a circle, draw a square
    if steps <= 4:
        for quarter in quarters[1:]:
            yield center + quarter * radius
    else:
        for i in range(1, steps):
            quadrant = 4 * i // steps
            t = (i / steps - quadrant * 0.25) / 0.25
            direction = quarters[quadrant].slerp(quarters[(quadrant + 1) % 4], t)
            yield center + direction * radius
    yield start


def arc_points(start: Vector2, end: Vector2, radius: float, clockwise: bool = True,
               scale: float = 1.0, tolerance: float = 1.0) -> list[Vector2]:
    """Complete arc polyline from `start` to `end`."""
    return [start, *arc_steps(start, end, radius, clockwise, scale, tolerance)]


def circle_points(start: Vector2, center: Vector2, clockwise: bool = True,
                  scale: float = 1.0, tolerance: float = 1.0) -> list[Vector2]:
    """Complete closed circle polyline starting and ending at `start`."""
    return [start, *circle_steps(start, center, clockwise, scale, tolerance)]
