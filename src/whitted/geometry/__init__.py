"""Geometric primitives.

Components:
    shape: ShapeKind and the per-kind dispatch table
    sphere: Unit sphere intersection and normal
    plane: XZ plane intersection and normal
    object: Object, a shape placed by a transform and shaded by a material
"""

from .object import Object
from .shape import ShapeKind, local_intersect, local_normal_at

__all__ = [
    "Object",
    "ShapeKind",
    "local_intersect",
    "local_normal_at",
]
