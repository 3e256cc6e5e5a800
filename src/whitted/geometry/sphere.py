"""Unit sphere primitive in object space.

The sphere is centered at the origin with radius 1. Placement and size come
from the owning object's transform, so these functions only ever see rays
that were already mapped into object space.

Intersection solves the quadratic

    a*t^2 + b*t + c = 0
    a = d.d
    b = 2 * d.(o - center)
    c = (o - center).(o - center) - 1

and reports both roots in ascending order. A tangent ray yields two equal
roots rather than one.

Example:
    >>> from src.whitted.core.geometry import Point, Vector
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.geometry.sphere import intersect_sphere
    >>> intersect_sphere(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from src.whitted.core.geometry import ORIGIN, Point, Vector
from src.whitted.core.ray import Ray


def intersect_sphere(ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        ray: Ray in the sphere's object space. The direction need not be
            normalized.

    Returns:
        The ray parameters of the two crossings in ascending order, or an
        empty list when the ray misses.
    """
    sphere_to_ray = ray.origin - ORIGIN
    a = ray.direction.dot(ray.direction)
    if a == 0.0:
        return []
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    return [t1, t2]


def sphere_normal(point: Point) -> Vector:
    """Outward normal of the unit sphere at an object-space point (unnormalized)."""
    return point - ORIGIN
