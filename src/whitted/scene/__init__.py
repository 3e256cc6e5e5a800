"""Scene description and shading.

Components:
    intersection: Intersection lists, hit selection and per-hit Computations
    light: Point lights
    world: Scene aggregate and recursive color composition
    presets: default_world() and the example scenes

Note: world and presets are NOT imported here to avoid circular imports
(objects import the intersection module). Import them directly:

    from src.whitted.scene.world import World
    from src.whitted.scene.presets import default_world
"""

from .intersection import (
    Computations,
    Intersection,
    Intersections,
    prepare_computations,
)
from .light import PointLight

__all__ = [
    "Intersection",
    "Intersections",
    "Computations",
    "prepare_computations",
    "PointLight",
]
