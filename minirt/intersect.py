"""Ray intersections with planes, spheres and capped cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .fields import TINY_VALUE
from .model import Cylinder, Plane, Sphere
from .vectors import Vec3

FLT_MAX = 3.402823466e38
_DEGENERATE_LINE = 0.0001


@dataclass(frozen=True)
class Hit:
    """A point where a ray meets an object, with the surface normal when known."""

    pos: Vec3
    normal: Optional[Vec3] = None


def plane_hit(origin: Vec3, direction: Vec3, plane: Plane) -> Optional[Vec3]:
    """Point where the ray meets the plane in front of ``origin``, or None."""
    angle = plane.normal.dot(direction)
    if abs(angle) < TINY_VALUE:
        return None
    dist = (plane.point - origin).dot(plane.normal) / angle
    if dist < TINY_VALUE:
        return None
    return origin + direction.scale(dist)


def sphere_hit(
    sphere: Sphere, origin: Vec3, direction: Vec3
) -> Optional[Tuple[Vec3, Vec3]]:
    """Both points where the line through the ray meets the sphere, or None.

    The first point lies farther along the ray direction than the second.
    Tangent rays count as misses.
    """
    offset = origin - sphere.position
    a = direction.dot(direction)
    b = 2.0 * direction.dot(offset)
    radius = sphere.diameter / 2.0
    c = offset.dot(offset) - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant <= TINY_VALUE:
        return None
    root = math.sqrt(discriminant)
    far = origin + direction.scale((-b + root) / (2.0 * a))
    near = origin + direction.scale((-b - root) / (2.0 * a))
    return far, near


def closest_point_on_axis(
    start: Vec3, end: Vec3, point: Vec3, cylinder: Cylinder
) -> Optional[Vec3]:
    """Project ``point`` onto the line start..end.

    Returns None when the line is degenerate or the projection lies more
    than half the cylinder's height from its centre.
    """
    line = (end - start).normalized()
    dot = line.dot(line)
    if dot < _DEGENERATE_LINE:
        return None
    projection = start + line.scale((point - start).dot(line) / dot)
    if (projection - cylinder.position).length() > cylinder.height / 2:
        return None
    return projection


def cylinder_contains(cylinder: Cylinder, point: Vec3) -> bool:
    """True when ``point`` projects onto the cylinder's axis between its caps."""
    axis = cylinder.axis.normalized()
    half = cylinder.height / 2
    top = cylinder.position + axis.scale(half)
    bottom = cylinder.position + (-axis).scale(half)
    return closest_point_on_axis(top, bottom, point, cylinder) is not None


def _nearer(origin: Vec3, one: Vec3, two: Vec3) -> Vec3:
    if (origin - one).length() < (origin - two).length():
        return one
    return two


def infinite_cylinder_hit(
    origin: Vec3, direction: Vec3, cylinder: Cylinder
) -> Optional[Vec3]:
    """Nearest point of the cylinder's side surface met by the line, or None."""
    axis = cylinder.axis.normalized()
    one = direction - axis.scale(direction.dot(axis))
    relative = origin - cylinder.position
    two = relative - axis.scale(relative.dot(axis))
    a = one.dot(one)
    b = 2 * one.dot(two)
    radius = cylinder.diameter / 2
    c = two.dot(two) - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0 or a == 0:
        return None
    root = math.sqrt(discriminant)
    first = origin + direction.scale((-b + root) / (2 * a))
    second = origin + direction.scale((-b - root) / (2 * a))
    first_ok = cylinder_contains(cylinder, first)
    second_ok = cylinder_contains(cylinder, second)
    if first_ok and second_ok:
        return _nearer(origin, first, second)
    if first_ok:
        return first
    if second_ok:
        return second
    return None


def _cap_plane(cylinder: Cylinder, sign: int) -> Plane:
    normal = cylinder.axis.scale(sign).normalized()
    point = cylinder.position + normal.scale(cylinder.height / 2)
    return Plane(point, normal, cylinder.color)


def find_cap_hit(
    cylinder: Cylinder, direction: Vec3, origin: Vec3
) -> Optional[Tuple[Hit, float]]:
    """Nearest cap disc met by the ray and its distance from ``origin``, or None."""
    radius = cylinder.diameter / 2
    best: Optional[Tuple[Hit, float]] = None
    for sign in (1, -1):
        cap = _cap_plane(cylinder, sign)
        point = plane_hit(origin, direction, cap)
        if point is None or (cap.point - point).length() > radius:
            continue
        dist = (origin - point).length()
        if best is None or dist < best[1]:
            best = (Hit(point, cap.normal), dist)
    return best


def cylinder_normal(
    center: Vec3, hit_pos: Vec3, half_height: float, cylinder: Cylinder
) -> Vec3:
    """Unit normal of the cylinder's side at ``hit_pos``."""
    axis = cylinder.axis.normalized()
    end = center + axis.scale(half_height)
    start = center + axis.scale(-half_height)
    closest = closest_point_on_axis(start, end, hit_pos, cylinder)
    if closest is None:
        closest = Vec3(FLT_MAX, FLT_MAX, FLT_MAX)
    return (hit_pos - closest).normalized()


def find_cylinder_hit(
    cylinder: Cylinder, direction: Vec3, origin: Vec3
) -> Optional[Hit]:
    """Nearest hit on the cylinder's caps or side, with its normal, or None."""
    cap = find_cap_hit(cylinder, direction, origin)
    cap_distance = cap[1] if cap is not None else math.inf
    body = infinite_cylinder_hit(origin, direction, cylinder)
    body_distance = (origin - body).length() if body is not None else math.inf
    if cap is not None and cap_distance <= body_distance:
        return cap[0]
    if body is not None:
        normal = cylinder_normal(
            cylinder.position, body, cylinder.height / 2, cylinder
        )
        return Hit(body, normal)
    return None