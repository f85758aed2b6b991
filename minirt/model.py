"""Scene elements: objects, camera, lights and the scene that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .fields import TINY_VALUE
from .vectors import Vec3


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and diameter."""

    position: Vec3
    diameter: float
    color: int


@dataclass(frozen=True)
class Plane:
    """An infinite plane through ``point`` with the given normal."""

    point: Vec3
    normal: Vec3
    color: int


@dataclass(frozen=True)
class Cylinder:
    """A capped cylinder centred on ``position`` along ``axis``."""

    position: Vec3
    axis: Vec3
    diameter: float
    height: float
    color: int


SceneObject = Union[Sphere, Plane, Cylinder]


@dataclass(frozen=True)
class Camera:
    """A viewpoint with an orthonormal basis and a field of view in degrees."""

    position: Vec3
    forward: Vec3
    up: Vec3
    right: Vec3
    raw_direction: Vec3
    fov: int


@dataclass(frozen=True)
class LightSource:
    """A point light with a brightness ratio in 0..1."""

    position: Vec3
    ratio: float
    color: int


@dataclass(frozen=True)
class AmbientLight:
    """Uniform light with a ratio in 0..1."""

    ratio: float
    color: int


@dataclass
class Scene:
    """Everything needed to render one image."""

    camera: Camera
    light: LightSource
    ambient: AmbientLight
    objects: List[SceneObject] = field(default_factory=list)


def build_camera(position: Vec3, direction: Vec3, fov: int) -> Camera:
    """Build a camera looking along ``direction`` with a right-handed basis."""
    forward = direction.normalized()
    if abs(forward.y) > 1.0 - TINY_VALUE:
        initial_up = Vec3(0.0, 0.0, -1.0 if forward.y < 0 else 1.0)
    else:
        initial_up = Vec3(0.0, 1.0, 0.0)
    right = forward.cross(initial_up).normalized()
    up = right.cross(forward).normalized()
    return Camera(
        position=position,
        forward=forward,
        up=up,
        right=right,
        raw_direction=direction,
        fov=fov,
    )