"""Point and vector value types for the CPU shading pipeline.

Points and vectors are kept as distinct types so the homogeneous weight is
carried by the type rather than by a fourth component: a Vector has w = 0
(translations do not move it) and a Point has w = 1.

The algebra is closed the usual way:

    Point - Point   -> Vector
    Point +/- Vector -> Point
    Vector +/- Vector -> Vector

Example:
    >>> from src.whitted.core.geometry import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(1.0, 0.0, 0.0)
    >>> p + v
    Point(x=2.0, y=2.0, z=3.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Offset used for plane parallelism tests and for nudging secondary ray
# origins off the surface they start from.
EPSILON = 1e-4


@dataclass(frozen=True, slots=True)
class Vector:
    """A direction in 3D space (homogeneous weight 0).

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float
    y: float
    z: float

    @property
    def w(self) -> float:
        return 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        inv = 1.0 / scalar
        return Vector(self.x * inv, self.y * inv, self.z * inv)

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        return self / self.magnitude()

    def dot(self, other: Vector) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the cross product self x other."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        """Reflect this vector about a surface normal.

        Args:
            normal: The surface normal (should be unit length).

        Returns:
            The reflected direction, self - normal * 2 * (self . normal).
        """
        return self - normal * (2.0 * self.dot(normal))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Point:
    """A location in 3D space (homogeneous weight 1).

    Attributes:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.
    """

    x: float
    y: float
    z: float

    @property
    def w(self) -> float:
        return 1.0

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ORIGIN = Point(0.0, 0.0, 0.0)
