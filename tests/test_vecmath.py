import math

import pytest

from quadkit.vecmath import Vec2, cartesian_to_polar, clamp, polar_to_cartesian


def test_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 7.0)
    assert (a + b) - b == a


def test_scalar_multiply_and_divide_round_trip():
    a = Vec2(3.0, -4.0)
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0


def test_negation():
    a = Vec2(3.0, -4.0)
    assert a + (-a) == Vec2(0.0, 0.0)


def test_length_of_three_four():
    assert Vec2(3.0, 4.0).length() == 5.0


def test_distance_is_symmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 5.0)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0.0


def test_polar_round_trip():
    point = Vec2(-2.0, 3.5)
    polar = cartesian_to_polar(point)
    back = polar_to_cartesian(polar.x, polar.y)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_polar_zero_angle():
    point = polar_to_cartesian(2.0, 0.0)
    assert point == Vec2(2.0, 0.0)


def test_cartesian_to_polar_angle():
    polar = cartesian_to_polar(Vec2(0.0, 2.0))
    assert polar.x == 2.0
    assert polar.y == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(5, 0, 3, 3), (-1, 0, 3, 0), (2, 0, 3, 2), (0.5, 0.0, 1.0, 0.5)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected