import math

import pytest

from minirt.vectors import Vec3


def test_add_then_sub_returns_original():
    a = Vec3(1.0, -2.0, 3.0)
    b = Vec3(4.0, 5.0, -6.0)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vec3(1.5, -2.5, 7.0)
    assert a + (-a) == Vec3(0.0, 0.0, 0.0)


def test_dot_with_self_is_squared_length():
    a = Vec3(2.0, -3.0, 6.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_length_of_known_vector():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert a.cross(b) == -b.cross(a)


def test_scale_by_two_equals_doubling():
    a = Vec3(1.25, -3.0, 0.5)
    assert a.scale(2.0) == a + a


@pytest.mark.parametrize(
    "vector",
    [Vec3(1.0, 2.0, 3.0), Vec3(-0.1, 0.0, 0.0), Vec3(100.0, -50.0, 25.0)],
)
def test_normalized_has_unit_length(vector):
    unit = vector.normalized()
    assert math.isclose(unit.length(), 1.0, rel_tol=1e-9)
    assert unit.dot(vector) == pytest.approx(vector.length())


def test_normalizing_zero_vector_keeps_it():
    assert Vec3().normalized() == Vec3(0.0, 0.0, 0.0)