"""Ray tracer that renders .rt scene descriptions to plain PPM images."""

__version__ = "1.0.0"
__all__ = [
    "cli",
    "color",
    "errors",
    "fields",
    "intersect",
    "model",
    "parser",
    "rays",
    "render",
    "shading",
    "vectors",
]