"""Pinhole camera that maps pixels to world-space rays.

The camera sits at the origin of its own space looking down -Z at a canvas
one unit away. Its transform is a view transform (see
``Transform.view_transform``) that orients the world relative to the eye, so
rays are generated in camera space and carried to world space with the
inverse transform.

Canvas geometry:
    half_view   = tan(field_of_view / 2)
    aspect      = hsize / vsize
    half_width  = half_view          (aspect >= 1)
                = half_view * aspect (aspect < 1)
    half_height = half_view / aspect (aspect >= 1)
                = half_view          (aspect < 1)
    pixel_size  = 2 * half_width / hsize

Pixel (0, 0) is the top-left corner; rays pass through pixel centers.

Example:
    >>> import math
    >>> from src.whitted.camera.camera import Camera
    >>> from src.whitted.core.geometry import Point, Vector
    >>> from src.whitted.core.transform import Transform
    >>> camera = Camera(
    ...     hsize=200,
    ...     vsize=125,
    ...     field_of_view=math.pi / 2,
    ...     transform=Transform.view_transform(
    ...         Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)
    ...     ),
    ... )
    >>> ray = camera.ray_for_pixel(100, 62)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.whitted.core.color import Color
from src.whitted.core.geometry import ORIGIN, Point
from src.whitted.core.ray import Ray
from src.whitted.core.transform import Transform
from src.whitted.scene.world import MAX_DEPTH

if TYPE_CHECKING:
    from src.whitted.core.canvas import Canvas
    from src.whitted.scene.world import World

logger = logging.getLogger(__name__)


@dataclass
class Camera:
    """A pinhole camera.

    Attributes:
        hsize: Horizontal size of the image in pixels.
        vsize: Vertical size of the image in pixels.
        field_of_view: Angle (radians) covered by the wider image axis.
        transform: View transform placing the camera in the world.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Transform = field(default_factory=Transform.identity)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(
                f"Camera size must be positive, got {self.hsize}x{self.vsize}"
            )
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(
                f"Field of view must be between 0 and pi radians, got {self.field_of_view}"
            )

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / self.hsize

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Build the world-space ray through the center of pixel (x, y).

        Args:
            x: Column, 0 at the left edge.
            y: Row, 0 at the top edge.

        Returns:
            A ray with a normalized direction.
        """
        xoffset = (x + 0.5) * self.pixel_size
        yoffset = (y + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self.transform.apply_inverse(Point(world_x, world_y, -1.0))
        origin = self.transform.apply_inverse(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def rays_for_row(self, y: int) -> Iterator[Ray]:
        for x in range(self.hsize):
            yield self.ray_for_pixel(x, y)

    def render_row(self, world: World, y: int, remaining: int = MAX_DEPTH) -> list[Color]:
        """Trace every pixel of row ``y`` and return the colors left to right."""
        return [world.color_at(ray, remaining) for ray in self.rays_for_row(y)]

    def render(self, world: World, remaining: int = MAX_DEPTH) -> Canvas:
        """Render the world serially into a new canvas.

        Requires Taichi to be initialized, since the canvas is a Taichi field.
        For progress reporting or multiple processes use
        ``src.whitted.core.renderer.Renderer``.
        """
        from src.whitted.core.canvas import Canvas

        logger.info("Rendering %dx%d image (depth %d)", self.hsize, self.vsize, remaining)
        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            image.write_row(y, self.render_row(world, y, remaining))
        return image
