"""Reading scene description files into a :class:`Scene`."""

from __future__ import annotations

import os
from collections import Counter
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import ErrorKind, SceneError
from .fields import LineReader
from .model import (
    AmbientLight,
    Camera,
    Cylinder,
    LightSource,
    Plane,
    Scene,
    SceneObject,
    Sphere,
    build_camera,
)

_MAX_NAME_LENGTH = 62


class LineKind(Enum):
    """What a line of a scene file describes."""

    LIGHT_SOURCE = "L"
    AMBIENT_LIGHT = "A"
    CAMERA = "C"
    OBJECT = "object"
    INVALID = "invalid"


_SINGLE_ELEMENTS = {"L ": LineKind.LIGHT_SOURCE, "C ": LineKind.CAMERA, "A ": LineKind.AMBIENT_LIGHT}
_OBJECT_PREFIXES = ("sp ", "pl ", "cy ")


def identify_line(line: str) -> LineKind:
    """Classify a line by its identifier; lines of four characters or fewer are invalid."""
    if len(line) <= 4:
        return LineKind.INVALID
    kind = _SINGLE_ELEMENTS.get(line[:2])
    if kind is not None:
        return kind
    if line.startswith(_OBJECT_PREFIXES):
        return LineKind.OBJECT
    return LineKind.INVALID


def _invalid() -> SceneError:
    return SceneError(ErrorKind.INVALID_INPUT)


def _parse_sphere(reader: LineReader) -> Sphere:
    position = reader.read_vec3()
    diameter = reader.read_float()
    if diameter <= 0:
        raise _invalid()
    return Sphere(position, diameter, reader.read_color())


def _parse_plane(reader: LineReader) -> Plane:
    point = reader.read_vec3()
    normal = reader.read_unit_vector()
    return Plane(point, normal, reader.read_color())


def _parse_cylinder(reader: LineReader) -> Cylinder:
    position = reader.read_vec3()
    axis = reader.read_unit_vector()
    diameter = reader.read_float()
    if diameter <= 0:
        raise _invalid()
    height = reader.read_float()
    if height <= 0:
        raise _invalid()
    return Cylinder(position, axis, diameter, height, reader.read_color())


_OBJECT_PARSERS = {"sp": _parse_sphere, "pl": _parse_plane, "cy": _parse_cylinder}


class SceneBuilder:
    """Collects scene lines one at a time and builds the finished scene."""

    def __init__(self) -> None:
        self.camera: Optional[Camera] = None
        self.light: Optional[LightSource] = None
        self.ambient: Optional[AmbientLight] = None
        self.objects: list[SceneObject] = []
        self._seen: Counter[LineKind] = Counter()

    def _count(self, kind: LineKind) -> None:
        self._seen[kind] += 1
        if self._seen[kind] > 1:
            raise SceneError(ErrorKind.EXCESS_ELEMENTS)

    def _add_light(self, line: str) -> None:
        reader = LineReader(line, 2)
        position = reader.read_vec3()
        ratio = reader.read_float()
        if ratio > 1.0:
            raise _invalid()
        color = reader.read_color()
        if not reader.at_end():
            raise _invalid()
        self.light = LightSource(position, ratio, color)
        self._count(LineKind.LIGHT_SOURCE)

    def _add_ambient(self, line: str) -> None:
        reader = LineReader(line, 2)
        ratio = reader.read_float()
        color = reader.read_color()
        if ratio > 1.0:
            raise _invalid()
        if not reader.at_end():
            raise _invalid()
        self.ambient = AmbientLight(ratio, color)
        self._count(LineKind.AMBIENT_LIGHT)

    def _add_camera(self, line: str) -> None:
        reader = LineReader(line, 2)
        position = reader.read_vec3()
        direction = reader.read_unit_vector()
        fov = reader.read_degrees()
        if not reader.at_end():
            raise _invalid()
        self.camera = build_camera(position, direction, fov)
        self._count(LineKind.CAMERA)

    def _add_object(self, line: str) -> None:
        parse = _OBJECT_PARSERS.get(line[:2])
        if parse is None:
            raise _invalid()
        self.objects.append(parse(LineReader(line, 2)))

    def add_line(self, line: str) -> None:
        """Parse one line; raise :class:`SceneError` when it is not acceptable."""
        if not line:
            return
        if len(line) == 1:
            if line != "\n":
                raise SceneError(ErrorKind.OPEN_FAIL)
            return
        kind = identify_line(line)
        if kind is LineKind.LIGHT_SOURCE:
            self._add_light(line)
        elif kind is LineKind.AMBIENT_LIGHT:
            self._add_ambient(line)
        elif kind is LineKind.OBJECT:
            self._add_object(line)
        else:
            # Unrecognised lines are read with the camera rule, so they are
            # rejected as invalid input unless they happen to read as one.
            self._add_camera(line)

    def build(self) -> Scene:
        """Return the scene; raise if the ambient light, light or camera is missing."""
        if self.camera is None or self.light is None or self.ambient is None:
            raise SceneError(ErrorKind.MISSING_KEY_ELEMENTS)
        return Scene(self.camera, self.light, self.ambient, list(self.objects))


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a scene from lines; an empty string ends the input."""
    builder = SceneBuilder()
    for line in lines:
        if not line:
            break
        builder.add_line(line)
    return builder.build()


def _check_name(path: str) -> None:
    if len(path) > _MAX_NAME_LENGTH:
        raise SceneError(ErrorKind.ERROR_BIG_FILE_NAME)


def output_path(path: Union[str, os.PathLike]) -> str:
    """Name of the image file: the scene path with its last two characters replaced by ``ppm``."""
    name = os.fspath(path)
    _check_name(name)
    return name[: max(len(name) - 2, 0)] + "ppm"


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read and validate the scene file at ``path``."""
    name = os.fspath(path)
    _check_name(name)
    try:
        handle = open(name, encoding="latin-1", newline="")
    except OSError as err:
        raise SceneError(ErrorKind.OPEN_FAIL) from err
    with handle:
        return parse_lines(handle)