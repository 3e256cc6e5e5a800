"""Scene objects: a shape kind placed by a transform and shaded by a material.

Objects are immutable. The ``with_*`` builders return modified copies, and
every copy receives a fresh identity token. The token is what the
refractive-index bookkeeping uses to tell instances apart, so two objects
with identical shape, transform and material still compare equal by value
while keeping distinct ids.

Example:
    >>> from src.whitted.core.transform import Transform
    >>> from src.whitted.geometry.object import Object
    >>> ball = Object.sphere().with_transform(Transform.translation(0, 1, 0))
    >>> floor = Object.plane()
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace

from src.whitted.core.geometry import Point, Vector
from src.whitted.core.matrix import transform_vector
from src.whitted.core.ray import Ray
from src.whitted.core.transform import Transform
from src.whitted.geometry.shape import ShapeKind, local_intersect, local_normal_at
from src.whitted.materials.material import GLASS_INDEX, Material
from src.whitted.scene.intersection import Intersection

_object_ids = itertools.count(1)


def _next_object_id() -> int:
    return next(_object_ids)


@dataclass(frozen=True)
class Object:
    """One primitive in a scene.

    Attributes:
        shape: The primitive kind.
        transform: Object-to-world placement.
        material: Surface shading parameters.
        id: Process-unique identity token. Not part of value equality and
            preserved when the object is pickled.
    """

    shape: ShapeKind
    transform: Transform = field(default_factory=Transform.identity)
    material: Material = field(default_factory=Material)
    id: int = field(default_factory=_next_object_id, init=False, compare=False, repr=False)

    @classmethod
    def sphere(cls) -> Object:
        """A unit sphere at the origin with the default material."""
        return cls(ShapeKind.SPHERE)

    @classmethod
    def plane(cls) -> Object:
        """The XZ plane with the default material."""
        return cls(ShapeKind.PLANE)

    @classmethod
    def glass_sphere(cls) -> Object:
        """A fully transparent unit sphere with the refractive index of glass."""
        return cls(
            ShapeKind.SPHERE,
            material=Material(transparency=1.0, refractive_index=GLASS_INDEX),
        )

    def with_transform(self, transform: Transform) -> Object:
        return replace(self, transform=transform)

    def with_material(self, material: Material) -> Object:
        return replace(self, material=material)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this object.

        The ray is mapped into object space with the inverse transform and
        handed to the shape's intersection function.

        Args:
            ray: World-space ray.

        Returns:
            Intersections in ascending order of t. Empty on a miss.
        """
        local_ray = self.transform.apply_inverse(ray)
        return [Intersection(t, self) for t in local_intersect(self.shape, local_ray)]

    def normal_at(self, world_point: Point) -> Vector:
        """Compute the unit surface normal at a world-space point.

        The local normal is carried back to world space with the transpose of
        the inverse transform, which keeps it perpendicular to the surface
        under non-uniform scaling.

        Args:
            world_point: A point on the surface, in world space.

        Returns:
            The normalized world-space normal.
        """
        local_point = self.transform.apply_inverse(world_point)
        local_normal = local_normal_at(self.shape, local_point)
        world_normal = transform_vector(self.transform.transpose_inverse(), local_normal)
        return world_normal.normalize()
