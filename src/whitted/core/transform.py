"""Affine transforms paired with their inverses.

Every ``Transform`` stores the forward matrix ``m`` and its inverse ``minv``
side by side. Shapes, patterns and cameras only ever need the inverse (to map
world-space rays and points into local space) and, for normals, the transpose
of the inverse. Keeping both avoids inverting a matrix per ray.

The inverse is built algebraically wherever a closed form exists:

    translation(x, y, z)  -> translation(-x, -y, -z)
    scaling(x, y, z)      -> scaling(1/x, 1/y, 1/z)
    rotation_*(angle)     -> transpose of the rotation

Shearing and view transforms fall back to the general inverse in
``src.whitted.core.matrix``.

Composition follows matrix order: ``A * B`` applies ``B`` first, then ``A``.
The inverse of the product is ``B.minv @ A.minv``, so the pairing survives
composition without any further inversion.

Example:
    >>> from src.whitted.core.geometry import Point
    >>> from src.whitted.core.transform import Transform
    >>> t = Transform.translation(10, 5, 7) * Transform.scaling(5, 5, 5)
    >>> t.apply(Point(1, 0, 1))
    Point(x=15.0, y=5.0, z=12.0)
"""

from __future__ import annotations

import math

import numpy as np

from src.whitted.core.geometry import Point, Vector
from src.whitted.core.matrix import (
    Matrix,
    as_matrix,
    identity,
    inverse,
    transform_point,
    transform_vector,
)
from src.whitted.core.ray import Ray


def _frozen(m: Matrix) -> Matrix:
    m = np.array(m, dtype=np.float64)
    m.setflags(write=False)
    return m


class Transform:
    """An affine map and its exact inverse.

    Instances are immutable; the underlying arrays are read-only. Build
    transforms with the named constructors and combine them with ``*``.

    Attributes:
        m: The forward 4x4 matrix.
        minv: The inverse 4x4 matrix.
    """

    __slots__ = ("_m", "_minv")

    def __init__(self, m: Matrix | None = None, minv: Matrix | None = None) -> None:
        """Create a transform from a forward matrix and optionally its inverse.

        Args:
            m: Forward matrix. Defaults to the identity.
            minv: Inverse matrix. When omitted it is computed with the general
                matrix inverse.

        Raises:
            SingularMatrixError: If ``minv`` is omitted and ``m`` is singular.
        """
        m = identity() if m is None else as_matrix(m)
        if minv is None:
            minv = inverse(m)
        self._m = _frozen(m)
        self._minv = _frozen(minv)

    @property
    def m(self) -> Matrix:
        return self._m

    @property
    def minv(self) -> Matrix:
        return self._minv

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Transform:
        return cls(identity(), identity())

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Transform:
        m = identity()
        m[:3, 3] = (x, y, z)
        minv = identity()
        minv[:3, 3] = (-x, -y, -z)
        return cls(m, minv)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Transform:
        """Scale along each axis.

        Raises:
            ZeroDivisionError: If any factor is zero (the map is singular).
        """
        m = np.diag((x, y, z, 1.0)).astype(np.float64)
        minv = np.diag((1.0 / x, 1.0 / y, 1.0 / z, 1.0)).astype(np.float64)
        return cls(m, minv)

    @classmethod
    def rotation_x(cls, angle: float) -> Transform:
        """Rotate around the X axis by ``angle`` radians (left-handed)."""
        c, s = math.cos(angle), math.sin(angle)
        m = as_matrix(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return cls(m, m.T.copy())

    @classmethod
    def rotation_y(cls, angle: float) -> Transform:
        """Rotate around the Y axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        m = as_matrix(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return cls(m, m.T.copy())

    @classmethod
    def rotation_z(cls, angle: float) -> Transform:
        """Rotate around the Z axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        m = as_matrix(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return cls(m, m.T.copy())

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Transform:
        """Shear each coordinate in proportion to the other two.

        ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z,
        and so on.

        Raises:
            SingularMatrixError: If the shear collapses space.
        """
        m = as_matrix(
            [
                [1.0, xy, xz, 0.0],
                [yx, 1.0, yz, 0.0],
                [zx, zy, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return cls(m)

    @classmethod
    def view_transform(cls, from_point: Point, to: Point, up: Vector) -> Transform:
        """Orient the world relative to an eye.

        Builds the transform that moves the eye at ``from_point`` looking at
        ``to`` (with ``up`` roughly up) to the origin looking down -Z.

        Args:
            from_point: Eye position.
            to: Point the eye looks at.
            up: Approximate up direction; need not be normalized or
                orthogonal to the view direction.

        Raises:
            SingularMatrixError: If ``up`` is parallel to the view direction.
        """
        forward = (to - from_point).normalize()
        left = forward.cross(up.normalize())
        true_up = left.cross(forward)
        orientation = as_matrix(
            [
                [left.x, left.y, left.z, 0.0],
                [true_up.x, true_up.y, true_up.z, 0.0],
                [-forward.x, -forward.y, -forward.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        translate = identity()
        translate[:3, 3] = (-from_point.x, -from_point.y, -from_point.z)
        return cls(orientation @ translate)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def __mul__(self, other: Transform) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(self._m @ other._m, other._minv @ self._minv)

    def inverse(self) -> Transform:
        """Return the inverse transform (swaps the stored matrices)."""
        return Transform(self._minv, self._m)

    def transpose_inverse(self) -> Matrix:
        """The transpose of the inverse, used to carry normals to world space."""
        return self._minv.T

    def apply(self, value):
        """Apply the forward transform to a Point, Vector or Ray."""
        if isinstance(value, Point):
            return transform_point(self._m, value)
        if isinstance(value, Vector):
            return transform_vector(self._m, value)
        if isinstance(value, Ray):
            return value.transform(self._m)
        raise TypeError(f"Cannot transform object of type {type(value).__name__}")

    def apply_inverse(self, value):
        """Apply the inverse transform to a Point, Vector or Ray."""
        if isinstance(value, Point):
            return transform_point(self._minv, value)
        if isinstance(value, Vector):
            return transform_vector(self._minv, value)
        if isinstance(value, Ray):
            return value.transform(self._minv)
        raise TypeError(f"Cannot transform object of type {type(value).__name__}")

    def is_identity(self) -> bool:
        return bool(np.array_equal(self._m, np.eye(4)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m) and np.array_equal(self._minv, other._minv))

    def __hash__(self) -> int:
        return hash(tuple(self._m.ravel().tolist()))

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._m.tolist())
        return f"Transform([{rows}])"

    def __reduce__(self):
        # Arrays are read-only; rebuild through __init__ when pickled
        return (Transform, (np.array(self._m), np.array(self._minv)))
