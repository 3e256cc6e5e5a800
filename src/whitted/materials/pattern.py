"""Procedural color patterns.

A pattern maps a point in pattern space to a color. Every pattern carries its
own transform, and is evaluated for a world point by mapping that point first
through the owning object's inverse transform and then through the pattern's
inverse transform.

Pattern kinds:
    STRIPE: ``a`` where floor(x) is even, ``b`` otherwise.
    GRADIENT: linear blend from ``a`` to ``b`` over the fractional part of x.
    RING: ``a`` where floor(sqrt(x^2 + z^2)) is even, ``b`` otherwise.
    CHECKERS: ``a`` where floor(x) + floor(y) + floor(z) is even.
    COORDINATE: the pattern-space point itself as a color. Useful for checking
        which space a pattern is evaluated in.

Example:
    >>> from src.whitted.core.color import BLACK, WHITE
    >>> from src.whitted.core.geometry import Point
    >>> from src.whitted.materials.pattern import Pattern
    >>> stripes = Pattern.stripe(WHITE, BLACK)
    >>> stripes.pattern_at(Point(1.0, 0.0, 0.0))
    Color(red=0.0, green=0.0, blue=0.0)
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from src.whitted.core.color import BLACK, WHITE, Color
from src.whitted.core.geometry import Point
from src.whitted.core.transform import Transform

if TYPE_CHECKING:
    from src.whitted.geometry.object import Object


class PatternKind(Enum):
    STRIPE = "stripe"
    GRADIENT = "gradient"
    RING = "ring"
    CHECKERS = "checkers"
    COORDINATE = "coordinate"


def _stripe(a: Color, b: Color, p: Point) -> Color:
    return a if math.floor(p.x) % 2 == 0 else b


def _gradient(a: Color, b: Color, p: Point) -> Color:
    fraction = p.x - math.floor(p.x)
    return a + (b - a) * fraction


def _ring(a: Color, b: Color, p: Point) -> Color:
    return a if math.floor(math.sqrt(p.x * p.x + p.z * p.z)) % 2 == 0 else b


def _checkers(a: Color, b: Color, p: Point) -> Color:
    total = math.floor(p.x) + math.floor(p.y) + math.floor(p.z)
    return a if total % 2 == 0 else b


def _coordinate(a: Color, b: Color, p: Point) -> Color:
    return Color(p.x, p.y, p.z)


_PATTERN_TABLE: dict[PatternKind, Callable[[Color, Color, Point], Color]] = {
    PatternKind.STRIPE: _stripe,
    PatternKind.GRADIENT: _gradient,
    PatternKind.RING: _ring,
    PatternKind.CHECKERS: _checkers,
    PatternKind.COORDINATE: _coordinate,
}


@dataclass(frozen=True)
class Pattern:
    """A two-color procedural pattern with its own transform.

    Attributes:
        kind: Which color function to evaluate.
        a: First color.
        b: Second color.
        transform: Placement of the pattern relative to its object.
    """

    kind: PatternKind
    a: Color = WHITE
    b: Color = BLACK
    transform: Transform = field(default_factory=Transform.identity)

    @classmethod
    def stripe(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.STRIPE, a, b)

    @classmethod
    def gradient(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.GRADIENT, a, b)

    @classmethod
    def ring(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.RING, a, b)

    @classmethod
    def checkers(cls, a: Color, b: Color) -> Pattern:
        return cls(PatternKind.CHECKERS, a, b)

    @classmethod
    def coordinate(cls) -> Pattern:
        return cls(PatternKind.COORDINATE)

    def with_transform(self, transform: Transform) -> Pattern:
        """Return a copy of this pattern placed by ``transform``."""
        return replace(self, transform=transform)

    def pattern_at(self, point: Point) -> Color:
        """Evaluate the pattern at a point already in pattern space."""
        return _PATTERN_TABLE[self.kind](self.a, self.b, point)

    def pattern_at_object(self, obj: Object, world_point: Point) -> Color:
        """Evaluate the pattern for a world-space point on ``obj``.

        Args:
            obj: The object the pattern is applied to.
            world_point: Point on the object's surface in world space.

        Returns:
            The pattern color after mapping the point through the object's
            and then the pattern's inverse transforms.
        """
        object_point = obj.transform.apply_inverse(world_point)
        pattern_point = self.transform.apply_inverse(object_point)
        return self.pattern_at(pattern_point)
