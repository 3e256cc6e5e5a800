"""Ray data structure for the recursive shading pipeline.

A ray is a point of origin plus a direction. Points along the ray are found by
the parametric form ``origin + t * direction``; the parameter ``t`` is what
intersections are ordered by.

Example:
    >>> from src.whitted.core.geometry import Point, Vector
    >>> from src.whitted.core.ray import Ray
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(x=4.5, y=3.0, z=4.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.geometry import Point, Vector
from src.whitted.core.matrix import Matrix, transform_point, transform_vector


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. It is not required to be
            normalized; rays mapped into object space generally are not.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Map the ray through a 4x4 matrix.

        The origin is transformed as a point and the direction as a vector,
        so the direction is deliberately left unnormalized.
        """
        return Ray(transform_point(m, self.origin), transform_vector(m, self.direction))
