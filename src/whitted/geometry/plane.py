"""Infinite plane primitive in object space.

The plane is the local XZ plane (y = 0) with normal +Y everywhere.
"""

from __future__ import annotations

from src.whitted.core.geometry import EPSILON, Point, Vector
from src.whitted.core.ray import Ray

PLANE_NORMAL = Vector(0.0, 1.0, 0.0)


def intersect_plane(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the XZ plane.

    Rays parallel to the plane, including rays lying in it, never hit.

    Returns:
        A single ray parameter, or an empty list.
    """
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def plane_normal(point: Point) -> Vector:
    return PLANE_NORMAL
