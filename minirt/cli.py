"""Command line entry point: render a ``.rt`` scene into a ``.ppm`` image."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .errors import ErrorKind, SceneError
from .parser import load_scene, output_path
from .render import camera_inside, write_ppm

_SPECULAR_FLAG = "--specular"


def validate_filename(name: str) -> bool:
    """True when the file name ends in ``.rt``."""
    return name.endswith(".rt")


def _error(message: str) -> int:
    sys.stderr.write(message)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    specular_enabled = _SPECULAR_FLAG in args
    args = [arg for arg in args if arg != _SPECULAR_FLAG]
    if len(args) != 1:
        return _error("Error\nOne map.rt expected as argument\n")
    name = args[0]
    if not validate_filename(name):
        return _error("Error\nWrong filename\n")
    try:
        scene = load_scene(name)
        if camera_inside(scene):
            raise SceneError(ErrorKind.INSIDE_OBJECT)
    except SceneError as err:
        return _error(err.kind.message())
    try:
        write_ppm(scene, output_path(name), specular_enabled)
    except OSError:
        return _error("Failed to make output file! :c\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())