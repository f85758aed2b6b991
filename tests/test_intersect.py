import pytest

from minirt.intersect import (
    closest_point_on_axis,
    cylinder_contains,
    cylinder_normal,
    find_cap_hit,
    find_cylinder_hit,
    infinite_cylinder_hit,
    plane_hit,
    sphere_hit,
)
from minirt.model import Cylinder, Plane, Sphere
from minirt.vectors import Vec3

ORIGIN = Vec3(0.0, 0.0, 0.0)
FORWARD = Vec3(0.0, 0.0, 1.0)
UP = Vec3(0.0, 1.0, 0.0)


def _standing_cylinder():
    return Cylinder(Vec3(0.0, 0.0, 10.0), UP, 2.0, 4.0, 0xFF0000)


def test_plane_hit_in_front():
    plane = Plane(Vec3(0.0, 0.0, 5.0), FORWARD, 0)
    assert plane_hit(ORIGIN, FORWARD, plane) == Vec3(0.0, 0.0, 5.0)


def test_plane_hit_parallel_is_none():
    plane = Plane(Vec3(0.0, 0.0, 5.0), FORWARD, 0)
    assert plane_hit(ORIGIN, UP, plane) is None


def test_plane_hit_behind_is_none():
    plane = Plane(Vec3(0.0, 0.0, -5.0), FORWARD, 0)
    assert plane_hit(ORIGIN, FORWARD, plane) is None


def test_sphere_hit_points_lie_on_sphere():
    sphere = Sphere(Vec3(0.0, 0.0, 10.0), 4.0, 0)
    far, near = sphere_hit(sphere, ORIGIN, FORWARD)
    for point in (far, near):
        assert (point - sphere.position).length() == pytest.approx(sphere.diameter / 2)
    assert far.z > near.z


def test_sphere_miss_and_tangent():
    sphere = Sphere(Vec3(0.0, 0.0, 10.0), 4.0, 0)
    assert sphere_hit(sphere, ORIGIN, UP) is None
    tangent = Sphere(Vec3(0.0, 2.0, 10.0), 4.0, 0)
    assert sphere_hit(tangent, ORIGIN, FORWARD) is None


def test_closest_point_on_axis_projects():
    cylinder = Cylinder(ORIGIN, UP, 2.0, 4.0, 0)
    point = closest_point_on_axis(
        Vec3(0.0, 2.0, 0.0), Vec3(0.0, -2.0, 0.0), Vec3(3.0, 1.0, 0.0), cylinder
    )
    assert point.x == pytest.approx(0.0, abs=1e-9)
    assert point.y == pytest.approx(1.0)
    assert point.z == pytest.approx(0.0, abs=1e-9)


def test_closest_point_on_axis_out_of_height_or_degenerate():
    cylinder = Cylinder(ORIGIN, UP, 2.0, 4.0, 0)
    start, end = Vec3(0.0, 2.0, 0.0), Vec3(0.0, -2.0, 0.0)
    assert closest_point_on_axis(start, end, Vec3(3.0, 5.0, 0.0), cylinder) is None
    assert closest_point_on_axis(start, start, Vec3(1.0, 1.0, 0.0), cylinder) is None


def test_cylinder_contains():
    cylinder = Cylinder(ORIGIN, UP, 2.0, 4.0, 0)
    assert cylinder_contains(cylinder, Vec3(1.0, 1.0, 0.0)) is True
    assert cylinder_contains(cylinder, Vec3(1.0, 3.0, 0.0)) is False


def test_infinite_cylinder_hit_on_side_and_nearest():
    cylinder = _standing_cylinder()
    point = infinite_cylinder_hit(ORIGIN, FORWARD, cylinder)
    radial = Vec3(point.x, 0.0, point.z - cylinder.position.z)
    assert radial.length() == pytest.approx(cylinder.diameter / 2)
    assert point.z < cylinder.position.z


def test_infinite_cylinder_misses():
    cylinder = _standing_cylinder()
    assert infinite_cylinder_hit(ORIGIN, Vec3(1.0, 0.0, 0.0), cylinder) is None
    assert infinite_cylinder_hit(ORIGIN, UP, cylinder) is None
    above = Vec3(0.0, 10.0, 0.0)
    assert infinite_cylinder_hit(above, FORWARD, cylinder) is None


def test_find_cap_hit_top():
    cylinder = _standing_cylinder()
    origin = Vec3(0.0, 10.0, 10.0)
    hit, dist = find_cap_hit(cylinder, -UP, origin)
    assert hit.normal == cylinder.axis
    assert hit.pos.y == pytest.approx(cylinder.position.y + cylinder.height / 2)
    assert dist == pytest.approx(origin.y - hit.pos.y)


def test_find_cap_hit_none_when_parallel():
    cylinder = _standing_cylinder()
    assert find_cap_hit(cylinder, FORWARD, ORIGIN) is None


def test_find_cylinder_hit_prefers_cap_from_above():
    cylinder = _standing_cylinder()
    hit = find_cylinder_hit(cylinder, -UP, Vec3(0.0, 10.0, 10.0))
    assert hit.normal == cylinder.axis


def test_find_cylinder_hit_side_normal_faces_ray():
    cylinder = _standing_cylinder()
    hit = find_cylinder_hit(cylinder, FORWARD, ORIGIN)
    assert hit.normal.x == pytest.approx(0.0, abs=1e-9)
    assert hit.normal.y == pytest.approx(0.0, abs=1e-9)
    assert hit.normal.z == pytest.approx(-1.0)
    assert hit.pos.z < cylinder.position.z


def test_find_cylinder_hit_miss():
    cylinder = _standing_cylinder()
    assert find_cylinder_hit(cylinder, Vec3(1.0, 0.0, 0.0), ORIGIN) is None


def test_cylinder_normal_is_radial_unit():
    cylinder = Cylinder(ORIGIN, UP, 2.0, 4.0, 0)
    normal = cylinder_normal(ORIGIN, Vec3(1.0, 0.5, 0.0), 2.0, cylinder)
    assert normal.length() == pytest.approx(1.0)
    assert normal.y == pytest.approx(0.0, abs=1e-9)
    assert normal.x > 0