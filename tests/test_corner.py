import pytest

from glyphcode.corner import round_corner
from glyphcode.curves import arc_center, arc_points
from glyphcode.errors import ConfigurationError
from glyphcode.vector import Vector2


def test_round_corner_with_room():
    corner = Vector2(1, 0)
    arc = round_corner(Vector2(0, 0), corner, Vector2(1, 1), 0.5)

    assert (arc.start - corner).length() == pytest.approx(0.5, abs=1e-12)
    assert (arc.end - corner).length() == pytest.approx(0.5, abs=1e-12)
    assert (arc.start.x, arc.start.y) == pytest.approx((0.5, 0), abs=1e-12)
    assert (arc.end.x, arc.end.y) == pytest.approx((1, 0.5), abs=1e-12)
    assert arc.radius == pytest.approx(0.5)
    assert (arc.center.x, arc.center.y) == pytest.approx((0.5, 0.5), abs=1e-12)
    assert arc.clockwise is False


def test_right_turn_is_clockwise():
    arc = round_corner(Vector2(0, 0), Vector2(1, 0), Vector2(1, -1), 0.25)
    assert arc.clockwise is True
    assert (arc.center.x, arc.center.y) == pytest.approx((0.75, -0.25), abs=1e-12)


def test_radius_shrinks_when_edge_too_short():
    arc = round_corner(Vector2(0, 0), Vector2(1, 0), Vector2(1, 0.2), 0.5)
    assert arc.radius == pytest.approx(0.2, abs=1e-12)
    assert (arc.start.x, arc.start.y) == pytest.approx((0.8, 0), abs=1e-12)
    assert (arc.end.x, arc.end.y) == pytest.approx((1, 0.2), abs=1e-12)


def test_fillet_renders_on_its_own_circle():
    arc = round_corner(Vector2(0, 0), Vector2(2, 0), Vector2(3, 2), 0.4)
    center = arc_center(arc.start, arc.end, arc.radius, arc.clockwise)
    assert (center.x, center.y) == pytest.approx((arc.center.x, arc.center.y), abs=1e-9)
    for p in arc_points(arc.start, arc.end, arc.radius, arc.clockwise, tolerance=0.01):
        assert (p - arc.center).length() == pytest.approx(arc.radius, abs=1e-9)


def test_non_positive_radius_fails():
    with pytest.raises(ConfigurationError):
        round_corner(Vector2(0, 0), Vector2(1, 0), Vector2(1, 1), 0)


def test_straight_through_corner_is_a_point():
    corner = Vector2(1, 0)
    arc = round_corner(Vector2(0, 0), corner, Vector2(2, 0), 0.1)
    assert arc.start == arc.end == corner
    assert arc.radius == 0
