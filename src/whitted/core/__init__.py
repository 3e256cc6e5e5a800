"""Core value types and the image pipeline.

Components:
    geometry: Point and Vector value types
    color: Linear RGB colors
    matrix: 4x4 NumPy matrix helpers and general inverse
    transform: Affine transforms stored with their inverses
    ray: Rays and ray transformation
    canvas: Taichi-backed image buffer
    renderer: Row-by-row renderer with worker processes
"""

from .color import BLACK, BLUE, GREEN, RED, WHITE, Color
from .geometry import EPSILON, ORIGIN, Point, Vector
from .matrix import SingularMatrixError
from .ray import Ray
from .transform import Transform

# Note: canvas and renderer are NOT imported here. The renderer depends on the
# scene package, which itself imports from core.
#
#   from src.whitted.core.canvas import Canvas
#   from src.whitted.core.renderer import Renderer, RenderConfig

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Point",
    "Vector",
    "ORIGIN",
    "EPSILON",
    "Ray",
    "Transform",
    "SingularMatrixError",
]
