"""Intersection records, ordered hit lists and per-hit shading geometry.

This module provides:
    - Intersection: a ray parameter ``t`` paired with the object it hits.
    - Intersections: a collection that is kept sorted by ``t`` at all times.
    - Computations: the derived geometry the shader needs at one hit.
    - prepare_computations(): builds Computations, including the refractive
      indices on either side of the surface.

Ordering:
    Intersections sort by ascending t. NaN sorts after every real value and
    equal t values keep insertion order, so sorting is stable.

Refractive indices:
    n1 (the medium being left) and n2 (the medium being entered) depend on
    every intersection up to the hit, not just the hit itself. Walking the
    ordered list, each object is pushed on a containment list when the ray
    enters it and removed when the ray exits it. Entries are keyed by the
    object's identity token, never by value equality, so value-identical
    objects stay distinct.

Example:
    >>> from src.whitted.geometry.object import Object
    >>> from src.whitted.scene.intersection import Intersection, Intersections
    >>> s = Object.sphere()
    >>> xs = Intersections([Intersection(5.0, s), Intersection(-3.0, s)])
    >>> xs.hit()
    (1, Intersection(t=5.0, object=...))
"""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.geometry import EPSILON, Point, Vector
from src.whitted.core.ray import Ray

if TYPE_CHECKING:
    from src.whitted.geometry.object import Object

# Refractive index used when the ray is not inside any object
AMBIENT_INDEX = 1.0


@dataclass(frozen=True, slots=True)
class Intersection:
    """A candidate hit along a ray.

    Attributes:
        t: Ray parameter of the hit.
        object: The object that was hit.
    """

    t: float
    object: Object


def _sort_key(i: Intersection) -> tuple[bool, float]:
    # NaN last; NaN entries compare equal to one another
    return (math.isnan(i.t), i.t)


class Intersections(Sequence[Intersection]):
    """Intersections along one ray, always sorted by ascending t.

    Supports ``len``, indexing, slicing and iteration like a list. Items can
    only be added through ``add`` and ``extend``, which preserve the
    ordering.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = sorted(items, key=_sort_key)

    def add(self, intersection: Intersection) -> None:
        """Insert one intersection after any entries with the same t."""
        bisect.insort_right(self._items, intersection, key=_sort_key)

    def extend(self, items: Iterable[Intersection]) -> None:
        """Append many intersections and re-sort once (stable)."""
        self._items.extend(items)
        self._items.sort(key=_sort_key)

    def hit(self) -> tuple[int, Intersection] | None:
        """Find the visible hit.

        Returns:
            ``(index, intersection)`` for the first intersection with
            ``t >= 0``, or None if every intersection is behind the ray
            origin. The index is needed to resolve refractive indices.
        """
        for index, intersection in enumerate(self._items):
            if intersection.t >= 0.0:
                return index, intersection
        return None

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({self._items!r})"


@dataclass(frozen=True, slots=True)
class Computations:
    """Shading geometry derived for a single hit.

    Attributes:
        t: Ray parameter of the hit.
        object: The object that was hit.
        point: World-space hit point.
        eyev: Unit vector toward the eye (negated ray direction).
        normalv: Surface normal, flipped to face the eye.
        reflectv: Ray direction reflected about the normal.
        over_point: Point nudged along the normal; origin for shadow and
            reflection rays.
        under_point: Point nudged against the normal; origin for refraction
            rays.
        inside: True when the hit is on the inside of the surface.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Object
    point: Point
    eyev: Vector
    normalv: Vector
    reflectv: Vector
    over_point: Point
    under_point: Point
    inside: bool
    n1: float
    n2: float

    def schlick(self) -> float:
        """Schlick's approximation of the Fresnel reflectance at this hit.

        Returns:
            Fraction of light reflected, in [0, 1]. Exactly 1.0 under total
            internal reflection.
        """
        cos = self.eyev.dot(self.normalv)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(index: int, xs: Sequence[Intersection]) -> tuple[float, float]:
    containers: list[tuple[int, float]] = []
    n1 = n2 = AMBIENT_INDEX
    for i, intersection in enumerate(xs):
        if i == index:
            n1 = containers[-1][1] if containers else AMBIENT_INDEX

        obj = intersection.object
        position = next((k for k, (oid, _) in enumerate(containers) if oid == obj.id), None)
        if position is None:
            containers.append((obj.id, obj.material.refractive_index))
        else:
            del containers[position]

        if i == index:
            n2 = containers[-1][1] if containers else AMBIENT_INDEX
            break
    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    index: int | None = None,
    xs: Sequence[Intersection] | None = None,
) -> Computations:
    """Derive shading geometry for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        index: Position of ``hit`` within ``xs``. Looked up by identity when
            omitted.
        xs: The full ordered intersection list for the ray. When omitted the
            hit is treated as the only intersection.

    Returns:
        Computations for the hit.

    Raises:
        ValueError: If ``hit`` is not in ``xs`` or not at ``index``.
    """
    if xs is None:
        xs = [hit]
        index = 0
    elif index is None:
        index = next((k for k, i in enumerate(xs) if i is hit), None)
        if index is None:
            raise ValueError(f"{hit!r} is not in the intersection list")
    elif not (0 <= index < len(xs) and xs[index] is hit):
        raise ValueError(f"{hit!r} is not at position {index} of the intersection list")

    n1, n2 = _refractive_indices(index, xs)

    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.object.normal_at(point)
    inside = normalv.dot(eyev) < 0.0
    if inside:
        normalv = -normalv

    offset = normalv * EPSILON
    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        reflectv=ray.direction.reflect(normalv),
        over_point=point + offset,
        under_point=point - offset,
        inside=inside,
        n1=n1,
        n2=n2,
    )
