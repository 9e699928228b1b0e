"""Direction-continuous paths built from lines and arcs.

Every function yields glyph-space points following its start point; the caller
is expected to be at the start already with the pen engaged.
"""

from collections.abc import Iterator, Sequence

from .corner import round_corner
from .curves import arc_steps
from .errors import ConfigurationError
from .tangent import Circle, tangent_point, tangent_points
from .vector import Vector2


def polyline(
    points: Sequence[Vector2],
    round_corners: bool = False,
    corner_radius: float = 0.0,
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Connect three or more points with straight segments.

    Interior corners are drawn hard unless `round_corners` is set, in which case
    each becomes a fillet of `corner_radius`. A fillet may use at most half of an
    edge it shares with the next corner, so neighbouring fillets never overlap.
    """
    if len(points) < 3:
        raise ConfigurationError(f"Not enough points for multiple lines: {len(points)}")

    last = len(points) - 1
    previous = points[0]
    for i, (before, corner, after) in enumerate(zip(points, points[1:], points[2:]), 1):
        if round_corners:
            if i > 1:
                before = (before + corner) * 0.5
            if i + 1 < last:
                after = (corner + after) * 0.5
            arc = round_corner(before, corner, after, corner_radius)
            if arc.start != previous:
                yield arc.start
            previous = arc.end
            if arc.start != arc.end:
                yield from arc_steps(arc.start, arc.end, arc.radius, arc.clockwise, scale, tolerance)
        else:
            yield corner
    yield points[-1]


def line_into_arc(
    start: Vector2,
    center: Vector2,
    end: Vector2,
    clockwise: bool = True,
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Straight line from `start` that continues smoothly into an arc ending at `end`."""
    radius = (end - center).length()
    tangent = tangent_point(start, center, radius, not clockwise)
    yield tangent
    if tangent != end:
        yield from arc_steps(tangent, end, radius, clockwise, scale, tolerance)


def arc_into_arc(
    start: Vector2,
    start_center: Vector2,
    end: Vector2,
    end_center: Vector2,
    start_clockwise: bool = True,
    end_clockwise: bool = True,
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Arc around `start_center`, tangent line, then arc around `end_center` to `end`."""
    first = Circle(start_center, (start - start_center).length())
    second = Circle(end_center, (end - end_center).length())
    leave, enter = tangent_points(first, second, not start_clockwise, not end_clockwise)

    if leave != start:
        yield from arc_steps(start, leave, first.radius, start_clockwise, scale, tolerance)
    yield enter
    if enter != end:
        yield from arc_steps(enter, end, second.radius, end_clockwise, scale, tolerance)


def arc_chain(
    start: Vector2,
    end: Vector2,
    curves: Sequence[tuple[Vector2, float, bool]],
    scale: float = 1.0,
    tolerance: float = 1.0,
) -> Iterator[Vector2]:
    """Run through a chain of (center, radius, clockwise) arcs joined by common tangents."""
    if len(curves) < 2:
        raise ConfigurationError(f"Not enough curves for an arc chain: {len(curves)}")

    current = start
    for (a_center, a_radius, a_cw), (b_center, b_radius, b_cw) in zip(curves, curves[1:]):
        leave, enter = tangent_points(
            Circle(a_center, a_radius), Circle(b_center, b_radius), not a_cw, not b_cw
        )
        if leave != current:
            yield from arc_steps(current, leave, a_radius, a_cw, scale, tolerance)
        yield enter
        current = enter

    _, radius, clockwise = curves[-1]
    if current != end:
        yield from arc_steps(current, end, radius, clockwise, scale, tolerance)
