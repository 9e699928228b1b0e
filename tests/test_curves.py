import math

import pytest

from glyphcode.curves import arc_center, arc_points, arc_steps, circle_points
from glyphcode.errors import ConfigurationError, GeometricImpossibility
from glyphcode.vector import Vector2


ARCS = [
    (Vector2(0, 0), Vector2(1, 0), 1.0, True),
    (Vector2(0, 0), Vector2(1, 0), 1.0, False),
    (Vector2(0.25, 1), Vector2(0.25, 0.5), 0.25 + 1e-6, True),
    (Vector2(-3, 2), Vector2(1, -1.5), 4.0, False),
    (Vector2(0.624, 0.619), Vector2(0.287, 0.127), 0.6, True),
    (Vector2(10, 10), Vector2(10.1, 10.05), 0.07, False),
]


@pytest.mark.parametrize("start,end,radius,clockwise", ARCS)
def test_arc_points_stay_on_circle(start, end, radius, clockwise):
    points = arc_points(start, end, radius, clockwise, scale=10, tolerance=0.05)
    assert points[0] == start
    assert points[-1] == end
    assert len(points) >= 2

    center = arc_center(start, end, radius, clockwise)
    for p in points[1:-1]:
        assert (p - center).length() == pytest.approx(radius, abs=1e-9)


def test_clockwise_arc_bulges_up_when_moving_right():
    points = arc_points(Vector2(0, 0), Vector2(1, 0), 1.0, clockwise=True, tolerance=0.01)
    assert all(p.y > 0 for p in points[1:-1])
    points = arc_points(Vector2(0, 0), Vector2(1, 0), 1.0, clockwise=False, tolerance=0.01)
    assert all(p.y < 0 for p in points[1:-1])


def test_arc_step_count_follows_arc_length():
    # quarter circle, length pi/2
    steps = list(arc_steps(Vector2(1, 0), Vector2(0, 1), 1.0, False, scale=1, tolerance=0.1))
    assert len(steps) == 16
    steps = list(arc_steps(Vector2(1, 0), Vector2(0, 1), 1.0, False, scale=10, tolerance=0.1))
    assert len(steps) == 158


def test_short_arc_is_single_segment():
    steps = list(arc_steps(Vector2(0, 0), Vector2(0.01, 0), 1.0, True, scale=1, tolerance=1))
    assert steps == [Vector2(0.01, 0)]


def test_oversized_chord_splits_into_semicircle():
    start, end = Vector2(0, 0), Vector2(2, 0)
    points = arc_points(start, end, 0.5, clockwise=True, scale=1, tolerance=0.05)
    assert points[0] == start
    assert points[-1] == end
    assert Vector2(1, 1) in points
    for p in points:
        assert (p - Vector2(1, 0)).length() == pytest.approx(1.0, abs=1e-9)
        assert p.y >= 0


def test_exact_diameter_splits_toward_bulge():
    points = arc_points(Vector2(0, 1), Vector2(0, 0), 0.5, clockwise=True, tolerance=0.05)
    assert Vector2(0.5, 0.5) in points
    assert all(p.x >= -1e-12 for p in points)


def test_arc_rejects_bad_input():
    with pytest.raises(ConfigurationError):
        list(arc_steps(Vector2(0, 0), Vector2(1, 0), 0))
    with pytest.raises(ConfigurationError):
        list(arc_steps(Vector2(0, 0), Vector2(1, 0), -1))
    with pytest.raises(GeometricImpossibility):
        list(arc_steps(Vector2(1, 1), Vector2(1, 1), 1))
    with pytest.raises(ConfigurationError):
        list(arc_steps(Vector2(0, 0), Vector2(1, 0), 1, tolerance=0))


@pytest.mark.parametrize("clockwise", [True, False])
def test_circle_points_closed_and_round(clockwise):
    start, center = Vector2(1, 0), Vector2(0, 0)
    points = circle_points(start, center, clockwise, scale=1, tolerance=0.1)
    assert points[0] == start
    assert points[-1] == start
    assert len(points) == 1 + math.ceil(2 * math.pi / 0.1)
    for p in points:
        assert p.length() == pytest.approx(1.0, abs=1e-9)


def test_circle_direction():
    cw = circle_points(Vector2(1, 0), Vector2(0, 0), True, tolerance=0.1)
    ccw = circle_points(Vector2(1, 0), Vector2(0, 0), False, tolerance=0.1)
    assert cw[1].y < 0
    assert ccw[1].y > 0


def test_circle_offset_start_keeps_radius():
    center = Vector2(0.25, 0.75)
    start = Vector2(0.5, 0.75)
    for p in circle_points(start, center, True, scale=60, tolerance=1):
        assert (p - center).length() == pytest.approx(0.25, abs=1e-9)


def test_coarse_circle_becomes_square():
    points = circle_points(Vector2(1, 0), Vector2(0, 0), True, scale=1, tolerance=2)
    assert points == [
        Vector2(1, 0),
        Vector2(0, -1),
        Vector2(-1, 0),
        Vector2(0, 1),
        Vector2(1, 0),
    ]


def test_circle_around_own_start_fails():
    with pytest.raises(GeometricImpossibility):
        circle_points(Vector2(1, 1), Vector2(1, 1))
