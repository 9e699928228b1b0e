import math

import pytest

from glyphcode.errors import ConfigurationError, GeometricImpossibility
from glyphcode.vector import UNIT_X, UNIT_Y, Vector2


UNITS = [
    UNIT_X,
    UNIT_Y,
    Vector2(0.6, 0.8),
    Vector2(-0.8, 0.6),
    Vector2(math.cos(2.0), math.sin(2.0)),
]


@pytest.mark.parametrize("clockwise", [True, False])
def test_clerp_endpoints_are_exact(clockwise):
    for a in UNITS:
        for b in UNITS:
            assert a.clerp(b, 0, clockwise) == a
            assert a.clerp(b, 1, clockwise) == b
            assert a.clerp(b, -0.5, clockwise) == a
            assert a.clerp(b, 1.5, clockwise) == b


def test_clerp_halfway_counterclockwise():
    half = UNIT_X.clerp(UNIT_Y, 0.5, clockwise=False)
    assert half.x == pytest.approx(math.sqrt(0.5), abs=1e-12)
    assert half.y == pytest.approx(math.sqrt(0.5), abs=1e-12)


def test_clerp_halfway_clockwise():
    half = UNIT_Y.clerp(UNIT_X, 0.5, clockwise=True)
    assert half.x == pytest.approx(math.sqrt(0.5), abs=1e-12)
    assert half.y == pytest.approx(math.sqrt(0.5), abs=1e-12)


def test_clerp_stays_on_unit_circle():
    for i in range(1, 10):
        v = UNIT_X.clerp(Vector2(-0.8, 0.6), i / 10, clockwise=False)
        assert v.length() == pytest.approx(1.0, abs=1e-12)


def test_rotate_composes_angles_and_renormalizes():
    a = Vector2(math.cos(0.3), math.sin(0.3))
    b = Vector2(math.cos(0.4), math.sin(0.4))
    c = a.rotate(b)
    assert c.angle() == pytest.approx(0.7, abs=1e-12)
    assert c.length() == pytest.approx(1.0, abs=1e-15)


def test_arithmetic():
    a = Vector2(1, 2)
    b = Vector2(3, -1)
    assert a + b == Vector2(4, 1)
    assert a - b == Vector2(-2, 3)
    assert a * 2 == Vector2(2, 4)
    assert 2 * a == Vector2(2, 4)
    assert -a == Vector2(-1, -2)
    assert a.invert() == Vector2(-1, -2)
    assert Vector2(3, 4).length() == 5
    assert Vector2(3, 4).normalize() == Vector2(0.6, 0.8)


def test_perpendicular():
    assert Vector2(1, 0).perpendicular() == Vector2(0, 1)
    assert Vector2(1, 0).perpendicular(clockwise=True) == Vector2(0, -1)


def test_normalize_zero_length_fails():
    with pytest.raises(GeometricImpossibility):
        Vector2(0, 0).normalize()


def test_non_finite_rejected():
    with pytest.raises(ConfigurationError):
        Vector2(float("nan"), 0)
    with pytest.raises(ConfigurationError):
        Vector2(0, float("inf"))


def test_slerp_between_quadrants():
    mid = UNIT_X.slerp(UNIT_Y, 0.5)
    assert mid.x == pytest.approx(math.sqrt(0.5), abs=1e-12)
    assert mid.y == pytest.approx(math.sqrt(0.5), abs=1e-12)
    third = UNIT_X.slerp(UNIT_Y, 1 / 3)
    assert third.angle() == pytest.approx(math.pi / 6, abs=1e-12)
    assert UNIT_X.slerp(UNIT_Y, 0) == UNIT_X
    assert UNIT_X.slerp(UNIT_Y, 1) == UNIT_Y


def test_of_coerces_tuples():
    assert Vector2.of((1, 2)) == Vector2(1.0, 2.0)
    v = Vector2(3, 4)
    assert Vector2.of(v) is v
