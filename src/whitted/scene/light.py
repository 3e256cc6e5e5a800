"""Light sources."""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.color import Color
from src.whitted.core.geometry import Point


@dataclass(frozen=True, slots=True)
class PointLight:
    """A point light with no size.

    Attributes:
        position: World-space location of the light.
        intensity: Color and brightness of the emitted light.
    """

    position: Point
    intensity: Color
