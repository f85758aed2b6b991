"""Primary rays from the camera through image pixels."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from .intersect import Hit, find_cylinder_hit, plane_hit, sphere_hit
from .model import Camera, Cylinder, Plane, SceneObject, Sphere
from .vectors import Vec3

WINDOW_WIDTH = 1080
WINDOW_HEIGHT = 680
ASPECT_RATIO = WINDOW_WIDTH / WINDOW_HEIGHT


def screen_to_camera(
    x: float, y: float, aspect_ratio: float, fov: float
) -> Tuple[float, float]:
    """Map pixel coordinates to offsets on the camera's view plane."""
    half_view = math.tan(fov * (math.pi / 360))
    screen_x = (1.0 - (2.0 * (x + 0.5) / WINDOW_WIDTH)) * aspect_ratio * half_view
    screen_y = (1.0 - (2.0 * (y + 0.5) / WINDOW_HEIGHT)) * half_view
    return -screen_x, screen_y


def ray_direction(camera: Camera, x: float, y: float) -> Vec3:
    """Unit direction of the ray through view-plane offsets ``x``, ``y``."""
    angle = math.atan2(y, x)
    radius = math.hypot(x, y) * 0.5
    offset = camera.right.scale(radius * math.cos(angle)) + camera.up.scale(
        radius * math.sin(angle)
    )
    return (camera.forward + offset).normalized()


def sanity_check(origin: Vec3, direction: Vec3, point: Vec3) -> bool:
    """True when ``point`` lies on the side of ``origin`` that ``direction`` faces."""
    ahead = origin + direction
    behind = origin - direction
    return (ahead - point).length() <= (behind - point).length()


def find_sphere_hit(sphere: Sphere, direction: Vec3, camera: Camera) -> Optional[Hit]:
    """The sphere intersection nearer to the camera, or None."""
    points = sphere_hit(sphere, camera.position, direction)
    if points is None:
        return None
    first, second = points
    if (camera.position - first).length() < (camera.position - second).length():
        return Hit(first)
    return Hit(second)


def find_plane_hit(plane: Plane, direction: Vec3, camera: Camera) -> Optional[Hit]:
    """The plane intersection in front of the camera, or None."""
    point = plane_hit(camera.position, direction, plane)
    return Hit(point) if point is not None else None


def primary_hit(
    camera: Camera, obj: SceneObject, x: float, y: float
) -> Optional[Hit]:
    """Hit of the ray through pixel ``x``, ``y`` on ``obj``, if in front of the camera."""
    screen_x, screen_y = screen_to_camera(x, y, ASPECT_RATIO, camera.fov)
    direction = ray_direction(camera, screen_x, screen_y)
    hit: Optional[Hit]
    if isinstance(obj, Sphere):
        hit = find_sphere_hit(obj, direction, camera)
    elif isinstance(obj, Plane):
        hit = find_plane_hit(obj, direction, camera)
    elif isinstance(obj, Cylinder):
        hit = find_cylinder_hit(obj, direction, camera.position)
    else:
        hit = None
    if hit is None or not sanity_check(camera.position, direction, hit.pos):
        return None
    return hit