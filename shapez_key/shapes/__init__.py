"""Shape key representation and parsing module."""

from .shape import Shape, Layer, Quad, Subshape, Color
from .config import ShapeKeyFormat, DEFAULT_FORMAT
from .errors import ErrorKind, Diagnostic, ShapeKeyError, ordinal
from .parser import ShapeKeyParser, shapez_shape
from .encoder import ShapeKeyEncoder

__all__ = [
    "Shape",
    "Layer",
    "Quad",
    "Subshape",
    "Color",
    "ShapeKeyFormat",
    "DEFAULT_FORMAT",
    "ErrorKind",
    "Diagnostic",
    "ShapeKeyError",
    "ordinal",
    "ShapeKeyParser",
    "shapez_shape",
    "ShapeKeyEncoder",
]
