"""4x4 matrix helpers built on NumPy.

Matrices are plain ``numpy.ndarray`` objects of shape (4, 4) and dtype
float64. This module provides the few operations the transform layer needs:
identity, transpose, multiplication against points and vectors, and a general
inverse for transforms whose inverse has no simple closed form (shearing, view
transforms).

A singular matrix cannot be inverted. That only happens when a scene is built
from a degenerate transform, so it is reported with ``SingularMatrixError``
and never recovered from inside the renderer.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.whitted.core.geometry import Point, Vector

Matrix = npt.NDArray[np.float64]

# Determinants smaller than this are treated as zero
SINGULAR_TOLERANCE = 1e-12


class SingularMatrixError(ArithmeticError):
    """Raised when inverting a matrix with no inverse."""


def identity() -> Matrix:
    """Return a new 4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def as_matrix(rows) -> Matrix:
    """Convert a nested sequence into a 4x4 float64 matrix.

    Raises:
        ValueError: If the input is not 4x4.
    """
    m = np.array(rows, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError(f"Expected a 4x4 matrix, got shape {m.shape}")
    return m


def transpose(m: Matrix) -> Matrix:
    return np.ascontiguousarray(m.T)


def inverse(m: Matrix) -> Matrix:
    """Invert a 4x4 matrix.

    Raises:
        SingularMatrixError: If the matrix is singular or numerically close
            to it.
    """
    if abs(np.linalg.det(m)) < SINGULAR_TOLERANCE:
        raise SingularMatrixError("Singular matrix")
    try:
        inv = np.linalg.inv(m)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("Singular matrix") from exc
    return np.ascontiguousarray(inv, dtype=np.float64)


def transform_point(m: Matrix, p: Point) -> Point:
    """Apply a matrix to a point (w = 1)."""
    r = m[:3, :3] @ (p.x, p.y, p.z) + m[:3, 3]
    return Point(float(r[0]), float(r[1]), float(r[2]))


def transform_vector(m: Matrix, v: Vector) -> Vector:
    """Apply a matrix to a vector (w = 0, translation ignored)."""
    r = m[:3, :3] @ (v.x, v.y, v.z)
    return Vector(float(r[0]), float(r[1]), float(r[2]))
