"""Ready-made scenes.

This module provides:
    - default_world(): the small two-sphere world used throughout the tests.
    - Builders for the example scenes, each taking an image size and
      returning ``(world, camera)``.
    - SCENES: registry of builders by name, used by the command-line driver.

Most example scenes share one layout: a floor plane, up to three spheres of
decreasing size, a white light up and to the left, and a camera at
(0, 1.5, -5) looking at (0, 1, 0) with a 60 degree field of view.

Example:
    >>> from src.whitted.scene.presets import SCENES, build_scene
    >>> sorted(SCENES)[:3]
    ['checkered_plane', 'checkered_sphere', 'glass_sphere']
    >>> world, camera = build_scene("three_spheres", 400, 200)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from src.whitted.camera.camera import Camera
from src.whitted.core.color import BLACK, BLUE, WHITE, Color
from src.whitted.core.geometry import Point, Vector
from src.whitted.core.transform import Transform
from src.whitted.geometry.object import Object
from src.whitted.materials.material import GLASS_INDEX, Material
from src.whitted.materials.pattern import Pattern
from src.whitted.scene.light import PointLight
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

SceneBuilder = Callable[[int, int], tuple[World, Camera]]

# =============================================================================
# Shared scene parameters
# =============================================================================

DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 500
FIELD_OF_VIEW = math.pi / 3.0

LIGHT_POSITION = Point(-10.0, 10.0, -10.0)
FLOOR_COLOR = Color(1.0, 0.9, 0.9)
MIDDLE_COLOR = Color(0.1, 1.0, 0.5)
RIGHT_COLOR = Color(0.5, 1.0, 0.1)
LEFT_COLOR = Color(1.0, 0.8, 0.1)

MIDDLE_TRANSFORM = Transform.translation(-0.5, 1.0, 0.5)
RIGHT_TRANSFORM = Transform.translation(1.5, 0.5, -0.5) * Transform.scaling(0.5, 0.5, 0.5)
LEFT_TRANSFORM = Transform.translation(-1.5, 0.33, -0.75) * Transform.scaling(0.33, 0.33, 0.33)


def default_world() -> World:
    """Create the standard two-sphere test world.

    A unit sphere (color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2) encloses
    a concentric sphere of radius 0.5, lit by a white point light at
    (-10, 10, -10). A new world is returned on every call.
    """
    outer = Object.sphere().with_material(
        Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    )
    inner = Object.sphere().with_transform(Transform.scaling(0.5, 0.5, 0.5))
    return World(
        objects=[outer, inner],
        lights=[PointLight(LIGHT_POSITION, WHITE)],
    )


def _scene_light() -> PointLight:
    return PointLight(LIGHT_POSITION, WHITE)


def _scene_camera(width: int, height: int) -> Camera:
    view = Transform.view_transform(
        Point(0.0, 1.5, -5.0),
        Point(0.0, 1.0, 0.0),
        Vector(0.0, 1.0, 0.0),
    )
    return Camera(width, height, FIELD_OF_VIEW, view)


def _sphere(transform: Transform, color: Color, reflective: float = 0.0) -> Object:
    material = Material(color=color, diffuse=0.7, specular=0.3, reflective=reflective)
    return Object.sphere().with_transform(transform).with_material(material)


def _single_object_scene(obj: Object, width: int, height: int) -> tuple[World, Camera]:
    return World(objects=[obj], lights=[_scene_light()]), _scene_camera(width, height)


# =============================================================================
# Example scenes
# =============================================================================


def three_spheres(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    """Three spheres of varying reflectivity on a mirror floor."""
    floor = Object.plane().with_material(
        Material(color=FLOOR_COLOR, specular=0.0, reflective=1.0)
    )
    world = World(
        objects=[
            floor,
            _sphere(MIDDLE_TRANSFORM, MIDDLE_COLOR, reflective=0.5),
            _sphere(LEFT_TRANSFORM, LEFT_COLOR, reflective=0.3),
            _sphere(RIGHT_TRANSFORM, RIGHT_COLOR, reflective=0.1),
        ],
        lights=[_scene_light()],
    )
    return world, _scene_camera(width, height)


def three_spheres_and_wall(
    width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
) -> tuple[World, Camera]:
    """Three matte spheres in front of a blue back wall."""
    floor = Object.plane().with_material(Material(color=FLOOR_COLOR, specular=0.0))
    wall = (
        Object.plane()
        .with_material(Material(color=BLUE, specular=0.0))
        .with_transform(Transform.translation(0.0, 0.0, 10.0) * Transform.rotation_x(math.pi / 2.0))
    )
    world = World(
        objects=[
            floor,
            wall,
            _sphere(MIDDLE_TRANSFORM, MIDDLE_COLOR),
            _sphere(LEFT_TRANSFORM, LEFT_COLOR),
            _sphere(RIGHT_TRANSFORM, RIGHT_COLOR),
        ],
        lights=[_scene_light()],
    )
    return world, _scene_camera(width, height)


def patterned_floor(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    """Striped floor and a striped middle sphere."""
    floor = Object.plane().with_material(
        Material(specular=0.0, pattern=Pattern.stripe(WHITE, BLACK))
    )
    middle = Object.sphere().with_transform(MIDDLE_TRANSFORM).with_material(
        Material(
            pattern=Pattern.stripe(MIDDLE_COLOR, Color(1.0, 0.1, 0.5)),
            diffuse=0.7,
            specular=0.3,
        )
    )
    world = World(
        objects=[
            floor,
            middle,
            _sphere(LEFT_TRANSFORM, LEFT_COLOR),
            _sphere(RIGHT_TRANSFORM, RIGHT_COLOR),
        ],
        lights=[_scene_light()],
    )
    return world, _scene_camera(width, height)


def _patterned_plane(pattern: Pattern, width: int, height: int) -> tuple[World, Camera]:
    floor = Object.plane().with_material(Material(specular=0.0, pattern=pattern))
    return _single_object_scene(floor, width, height)


def checkered_plane(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    return _patterned_plane(Pattern.checkers(WHITE, BLACK), width, height)


def gradient_plane(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    return _patterned_plane(Pattern.gradient(WHITE, BLACK), width, height)


def ring_plane(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    return _patterned_plane(Pattern.ring(WHITE, BLACK), width, height)


def checkered_sphere(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    """A rotated sphere with small checkers."""
    pattern = Pattern.checkers(WHITE, BLACK).with_transform(Transform.scaling(0.25, 0.25, 0.25))
    sphere = (
        Object.sphere()
        .with_transform(MIDDLE_TRANSFORM * Transform.rotation_y(math.pi / 4.0))
        .with_material(Material(pattern=pattern))
    )
    return _single_object_scene(sphere, width, height)


def gradient_sphere(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    sphere = Object.sphere().with_transform(MIDDLE_TRANSFORM).with_material(
        Material(pattern=Pattern.gradient(WHITE, BLACK))
    )
    return _single_object_scene(sphere, width, height)


def ring_sphere(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    sphere = Object.sphere().with_transform(MIDDLE_TRANSFORM).with_material(
        Material(pattern=Pattern.ring(WHITE, BLACK))
    )
    return _single_object_scene(sphere, width, height)


def glass_sphere(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> tuple[World, Camera]:
    """A glass ball with an air bubble over a checkered floor, against a wall.

    Exercises refraction through nested transparent solids.
    """
    floor = Object.plane().with_material(
        Material(pattern=Pattern.checkers(WHITE, Color(0.2, 0.2, 0.2)), specular=0.0)
    )
    wall = (
        Object.plane()
        .with_material(Material(color=Color(0.6, 0.7, 0.9), specular=0.0))
        .with_transform(Transform.translation(0.0, 0.0, 10.0) * Transform.rotation_x(math.pi / 2.0))
    )
    glass = Material(
        color=Color(0.1, 0.1, 0.1),
        ambient=0.0,
        diffuse=0.1,
        specular=1.0,
        shininess=300.0,
        reflective=0.1,
        transparency=0.9,
        refractive_index=GLASS_INDEX,
    )
    ball = Object.sphere().with_transform(MIDDLE_TRANSFORM).with_material(glass)
    bubble = (
        Object.sphere()
        .with_transform(MIDDLE_TRANSFORM * Transform.scaling(0.5, 0.5, 0.5))
        .with_material(glass.with_refractive_index(1.0000034))
    )
    world = World(
        objects=[
            floor,
            wall,
            ball,
            bubble,
            _sphere(RIGHT_TRANSFORM, RIGHT_COLOR),
        ],
        lights=[_scene_light()],
    )
    return world, _scene_camera(width, height)


SCENES: dict[str, SceneBuilder] = {
    "three_spheres": three_spheres,
    "three_spheres_and_wall": three_spheres_and_wall,
    "patterned_floor": patterned_floor,
    "checkered_plane": checkered_plane,
    "checkered_sphere": checkered_sphere,
    "gradient_plane": gradient_plane,
    "gradient_sphere": gradient_sphere,
    "ring_plane": ring_plane,
    "ring_sphere": ring_sphere,
    "glass_sphere": glass_sphere,
}


def build_scene(
    name: str, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
) -> tuple[World, Camera]:
    """Build a registered scene by name.

    Raises:
        ValueError: If no scene has that name.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(
            f"Unknown scene '{name}'. Available scenes: {', '.join(sorted(SCENES))}"
        ) from None
    world, camera = builder(width, height)
    logger.info(
        "Built scene '%s': %d objects, %d lights, %dx%d",
        name,
        len(world.objects),
        len(world.lights),
        width,
        height,
    )
    return world, camera
