"""Scene aggregate and recursive color composition.

The World owns the objects and lights of a scene and turns a ray into a
color:

    color_at(ray)
      -> intersect(ray)              every object, sorted once by t
      -> hit()                       nearest t >= 0, with its index
      -> prepare_computations()      point, normals, n1/n2
      -> shade_hit()
           sum over lights of Material.lighting (with shadow test)
           + reflected_color()       recursive, from over_point
           + refracted_color()       recursive, from under_point

Recursion is bounded by ``remaining``. Each reflected or refracted ray
spends one unit of the budget, and a branch with no budget left contributes
black. That budget is the only thing that stops two facing mirrors from
recursing forever.

The world must not be modified while rendering; every method here is a pure
function of the scene and its arguments.

Example:
    >>> from src.whitted.core.geometry import Point, Vector
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.scene.presets import default_world
    >>> world = default_world()
    >>> world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    Color(red=0.38066..., green=0.47583..., blue=0.2855...)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.whitted.core.color import BLACK, Color
from src.whitted.core.geometry import EPSILON, Point
from src.whitted.core.ray import Ray
from src.whitted.geometry.object import Object
from src.whitted.scene.intersection import (
    Computations,
    Intersections,
    prepare_computations,
)
from src.whitted.scene.light import PointLight

logger = logging.getLogger(__name__)

# Default recursion budget for reflection and refraction
MAX_DEPTH = 5


@dataclass
class World:
    """Objects and lights making up a scene.

    Attributes:
        objects: Scene primitives, in no particular order.
        lights: Point lights illuminating the scene.
    """

    objects: list[Object] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)

    def add_object(self, obj: Object) -> Object:
        """Add an object to the scene and return it."""
        self.objects.append(obj)
        logger.debug("Added %s object id=%d", obj.shape.value, obj.id)
        return obj

    def add_objects(self, objects: Iterable[Object]) -> None:
        for obj in objects:
            self.add_object(obj)

    def add_light(self, light: PointLight) -> PointLight:
        """Add a light to the scene and return it."""
        self.lights.append(light)
        logger.debug("Added point light at %s", light.position)
        return light

    # -------------------------------------------------------------------------
    # Intersection
    # -------------------------------------------------------------------------

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every object in the scene.

        Returns:
            All intersections across the scene, sorted by ascending t.
        """
        xs = Intersections()
        xs.extend(i for obj in self.objects for i in obj.intersect(ray))
        return xs

    def is_shadowed(self, light_position: Point, point: Point) -> bool:
        """Check whether anything lies between ``point`` and a light.

        Only hits strictly closer than the light count, so objects behind
        the light or behind the point never cast a shadow. A point at the
        light itself is lit.
        """
        v = light_position - point
        distance = v.magnitude()
        if distance < EPSILON:
            return False
        direction = v.normalize()

        hit = self.intersect(Ray(point, direction)).hit()
        return hit is not None and hit[1].t < distance

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def shade_hit(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Color at a prepared hit.

        Local Phong lighting is summed over every light; reflected and
        refracted contributions are added once, since they depend on the
        view direction rather than on any single light.

        Args:
            comps: Prepared hit geometry.
            remaining: Recursion budget for secondary rays.

        Returns:
            The unclamped color.
        """
        material = comps.object.material
        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(light.position, comps.over_point)
            surface = surface + material.lighting(
                comps.object,
                light,
                comps.over_point,
                comps.eyev,
                comps.normalv,
                shadowed,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        return surface + reflected + refracted

    def color_at(self, ray: Ray, remaining: int = MAX_DEPTH) -> Color:
        """Trace a ray into the scene.

        Args:
            ray: World-space ray.
            remaining: Recursion budget for secondary rays.

        Returns:
            The color seen along the ray, or black if nothing is hit.
        """
        xs = self.intersect(ray)
        found = xs.hit()
        if found is None:
            return BLACK
        index, hit = found
        comps = prepare_computations(hit, ray, index, xs)
        return self.shade_hit(comps, remaining)

    def reflected_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Color arriving along the mirror direction, scaled by reflectivity."""
        reflective = comps.object.material.reflective
        if reflective == 0.0 or remaining <= 0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_DEPTH) -> Color:
        """Color arriving through the surface, scaled by transparency.

        Applies Snell's law with the hit's n1/n2. Total internal reflection
        contributes black.
        """
        transparency = comps.object.material.transparency
        if transparency == 0.0 or remaining <= 0:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"
