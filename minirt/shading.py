"""Surface normals, lighting, shadows and the final colour of a pixel."""

from __future__ import annotations

from .color import Color
from .fields import TINY_VALUE
from .intersect import Hit, cylinder_normal, find_cylinder_hit, plane_hit, sphere_hit
from .model import Cylinder, Plane, Scene, SceneObject, Sphere
from .rays import sanity_check
from .vectors import Vec3

_SHININESS = 80
_SPECULAR_DIVISOR = 1.5


def surface_normal(scene: Scene, obj: SceneObject, hit: Hit) -> Vec3:
    """Unit normal of ``obj`` at ``hit``; plane normals face the camera."""
    if isinstance(obj, Sphere):
        return (hit.pos - obj.position).normalized()
    if isinstance(obj, Plane):
        normal = obj.normal.normalized()
        front = obj.point + obj.normal
        back = obj.point - obj.normal
        camera = scene.camera.position
        if (back - camera).length() < (front - camera).length():
            return -normal
        return normal
    if isinstance(obj, Cylinder):
        if hit.normal is not None:
            return hit.normal.normalized()
        return cylinder_normal(obj.position, hit.pos, obj.height / 2, obj).normalized()
    raise TypeError(f"unsupported scene object: {type(obj).__name__}")


def _base_color(obj: SceneObject) -> Color:
    return Color.from_int(obj.color).normalized()


def ambient_term(scene: Scene, base: Color) -> Color:
    """Contribution of the ambient light to a surface of colour ``base``."""
    ambient_color = Color.from_int(scene.ambient.color).normalized()
    return ambient_color.multiply(base).scale(scene.ambient.ratio)


def specular(scene: Scene, hit: Hit, normal: Vec3) -> float:
    """Blinn-Phong highlight strength at ``hit``."""
    to_light = (scene.light.position - hit.pos).normalized()
    half = (to_light + -scene.camera.raw_direction).normalized()
    angle = max(half.dot(normal), 0.0)
    value = angle**_SHININESS / _SPECULAR_DIVISOR
    return 0.0 if value < TINY_VALUE else value


def brightness(scene: Scene, hit: Hit, normal: Vec3) -> float:
    """Diffuse light intensity at ``hit``, scaled by the light's ratio."""
    to_light = (scene.light.position - hit.pos).normalized()
    value = normal.dot(to_light) * scene.light.ratio
    return 0.0 if value < TINY_VALUE else value


def occludes(scene: Scene, hit: Hit, obj: SceneObject) -> bool:
    """True when ``obj`` lies between ``hit`` and the light."""
    light = scene.light.position
    to_light = light - hit.pos
    light_distance = to_light.length()
    direction = to_light.normalized()
    if isinstance(obj, Sphere):
        points = sphere_hit(obj, hit.pos, direction)
        if points is None:
            return False
        return any((light - point).length() < light_distance for point in points)
    if isinstance(obj, Plane):
        point = plane_hit(hit.pos, direction, obj)
        if point is None:
            return False
        if sanity_check(light, direction, point):
            return False
        return (light - point).length() < light_distance
    if isinstance(obj, Cylinder):
        blocker = find_cylinder_hit(obj, direction, hit.pos)
        if blocker is None:
            return False
        return (light - blocker.pos).length() < light_distance
    return False


def in_shadow(scene: Scene, hit: Hit, closest: SceneObject) -> bool:
    """True when any object other than ``closest`` blocks the light at ``hit``."""
    return any(
        occludes(scene, hit, obj) for obj in scene.objects if obj is not closest
    )


def pixel_color(
    scene: Scene, obj: SceneObject, hit: Hit, specular_enabled: bool = False
) -> Color:
    """Final colour of ``obj`` seen at ``hit``."""
    base = _base_color(obj)
    shadowed = in_shadow(scene, hit, obj)
    normal = surface_normal(scene, obj, hit)
    if shadowed:
        return ambient_term(scene, base)
    light_strength = brightness(scene, hit, normal)
    highlight = specular(scene, hit, normal)
    light_color = Color.from_int(scene.light.color).normalized().scale(light_strength)
    lit = base.multiply(light_color).add_scalar(highlight if specular_enabled else 0.0)
    return lit.add(ambient_term(scene, base))