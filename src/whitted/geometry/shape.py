"""Closed set of shape kinds and their dispatch table.

Each shape kind maps to a pair of object-space functions: one that returns
the ray parameters where an object-space ray crosses the surface, and one that
returns the (possibly unnormalized) surface normal at an object-space point.
Adding a primitive means adding a module with those two functions and one
entry in ``_SHAPE_TABLE``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from src.whitted.core.geometry import Point, Vector
from src.whitted.core.ray import Ray
from src.whitted.geometry.plane import intersect_plane, plane_normal
from src.whitted.geometry.sphere import intersect_sphere, sphere_normal

LocalIntersect = Callable[[Ray], list[float]]
LocalNormal = Callable[[Point], Vector]


class ShapeKind(Enum):
    """Primitive shapes understood by the renderer."""

    SPHERE = "sphere"
    PLANE = "plane"


_SHAPE_TABLE: dict[ShapeKind, tuple[LocalIntersect, LocalNormal]] = {
    ShapeKind.SPHERE: (intersect_sphere, sphere_normal),
    ShapeKind.PLANE: (intersect_plane, plane_normal),
}


def local_intersect(kind: ShapeKind, ray: Ray) -> list[float]:
    """Ray parameters where an object-space ray meets the shape, ascending."""
    return _SHAPE_TABLE[kind][0](ray)


def local_normal_at(kind: ShapeKind, point: Point) -> Vector:
    return _SHAPE_TABLE[kind][1](point)
