"""Rendering a scene pixel by pixel and writing it as a plain PPM image."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional, Tuple, Union

from .fields import TINY_VALUE
from .intersect import Hit
from .model import Cylinder, Plane, Scene, SceneObject, Sphere
from .rays import WINDOW_HEIGHT, WINDOW_WIDTH, primary_hit
from .shading import pixel_color
from .vectors import Vec3

_DEGENERATE_LINE = 0.0001


def _inside_sphere(camera: Vec3, sphere: Sphere) -> bool:
    return (camera - sphere.position).length() <= sphere.diameter / 2


def _inside_plane(camera: Vec3, plane: Plane) -> bool:
    camera_to_plane = (plane.point - camera).normalized()
    return abs(camera_to_plane.dot(plane.normal.normalized())) <= TINY_VALUE


def _inside_cylinder(camera: Vec3, cylinder: Cylinder) -> bool:
    axis = cylinder.axis.normalized()
    reach = cylinder.diameter / 2
    start = cylinder.position + axis.scale(reach)
    end = cylinder.position + axis.scale(-reach)
    line = (end - start).normalized()
    dot = line.dot(line)
    if dot < _DEGENERATE_LINE:
        return False
    projection = start + line.scale((camera - start).dot(line) / dot)
    return (
        (projection - cylinder.position).length() < cylinder.height / 2
        and (camera - projection).length() < cylinder.diameter / 2
    )


def camera_inside(scene: Scene) -> bool:
    """True when the camera sits inside a sphere or cylinder, or lies on a plane."""
    camera = scene.camera.position
    for obj in scene.objects:
        if isinstance(obj, Sphere) and _inside_sphere(camera, obj):
            return True
        if isinstance(obj, Plane) and _inside_plane(camera, obj):
            return True
        if isinstance(obj, Cylinder) and _inside_cylinder(camera, obj):
            return True
    return False


def closest_hit(
    scene: Scene, x: float, y: float
) -> Optional[Tuple[SceneObject, Hit]]:
    """The object nearest to the camera along the ray through pixel ``x``, ``y``.

    On equal distances the object listed first wins. Returns None on a miss.
    """
    camera = scene.camera
    best: Optional[Tuple[SceneObject, Hit]] = None
    best_distance = 0.0
    for obj in scene.objects:
        hit = primary_hit(camera, obj, x, y)
        if hit is None:
            continue
        distance = (camera.position - hit.pos).length()
        if best is None or distance < best_distance:
            best = (obj, hit)
            best_distance = distance
    return best


def shade_pixel(
    scene: Scene, x: float, y: float, specular_enabled: bool = False
) -> int:
    """Packed 0xAARRGGBB colour of pixel ``x``, ``y``; 0 where nothing is hit."""
    found = closest_hit(scene, x, y)
    if found is None:
        return 0x000000
    obj, hit = found
    return pixel_color(scene, obj, hit, specular_enabled).to_int()


def render(scene: Scene, specular_enabled: bool = False) -> Iterator[List[int]]:
    """Yield the image row by row, top to bottom, as packed colours."""
    for y in range(WINDOW_HEIGHT):
        yield [shade_pixel(scene, x, y, specular_enabled) for x in range(WINDOW_WIDTH)]


def _pixel_line(color: int) -> str:
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return f"{red} {green} {blue} \n"


def write_ppm(
    scene: Scene,
    path: Union[str, os.PathLike],
    specular_enabled: bool = False,
) -> None:
    """Render ``scene`` into a plain-text (P3) PPM file at ``path``."""
    with open(path, "w", encoding="ascii", newline="\n") as out:
        out.write(f"P3\n{WINDOW_WIDTH} {WINDOW_HEIGHT}\n255\n")
        for row in render(scene, specular_enabled):
            out.writelines(_pixel_line(color) for color in row)