"""Surface material and Phong local illumination.

A material holds the shading coefficients for one object: a flat color or a
pattern, the Phong ambient/diffuse/specular/shininess terms, and the
coefficients that drive secondary rays (reflective, transparency,
refractive_index).

Key model:
    effective = base_color * light.intensity
    ambient   = effective * ambient
    diffuse   = effective * diffuse * (lightv . normalv)
    specular  = light.intensity * specular * (reflectv . eyev) ^ shininess

Diffuse and specular vanish when the point is in shadow or the light is
behind the surface. The result is not clamped.

Common refractive indices:
    - Vacuum: 1.0
    - Air: 1.00029
    - Water: 1.333
    - Glass: 1.52
    - Diamond: 2.417

Example:
    >>> from src.whitted.core.color import Color
    >>> from src.whitted.materials.material import Material
    >>> red = Material(color=Color(1.0, 0.2, 0.2), specular=0.3)
    >>> mirror = Material().with_reflective(1.0)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from src.whitted.core.color import BLACK, WHITE, Color
from src.whitted.core.geometry import Point, Vector
from src.whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from src.whitted.geometry.object import Object
    from src.whitted.scene.light import PointLight

VACUUM_INDEX = 1.0
GLASS_INDEX = 1.5
WATER_INDEX = 1.333
DIAMOND_INDEX = 2.417


@dataclass(frozen=True)
class Material:
    """Shading parameters for one object.

    Attributes:
        color: Flat surface color, used when no pattern is set.
        pattern: Optional procedural pattern overriding ``color``.
        ambient: Ambient coefficient (>= 0).
        diffuse: Diffuse coefficient (>= 0).
        specular: Specular coefficient (>= 0).
        shininess: Specular exponent (>= 0).
        reflective: Fraction of reflected light, in [0, 1].
        transparency: Fraction of refracted light, in [0, 1].
        refractive_index: Index of refraction (> 0).
    """

    color: Color = WHITE
    pattern: Pattern | None = None
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM_INDEX

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {getattr(self, name)}")
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"Reflective must be in [0, 1], got {self.reflective}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Transparency must be in [0, 1], got {self.transparency}")
        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Index of refraction must be positive, got {self.refractive_index}"
            )

    # -------------------------------------------------------------------------
    # Builders (each returns a validated copy)
    # -------------------------------------------------------------------------

    def with_color(self, color: Color) -> Material:
        return replace(self, color=color)

    def with_pattern(self, pattern: Pattern | None) -> Material:
        return replace(self, pattern=pattern)

    def with_reflective(self, reflective: float) -> Material:
        return replace(self, reflective=reflective)

    def with_transparency(self, transparency: float, refractive_index: float | None = None) -> Material:
        if refractive_index is None:
            return replace(self, transparency=transparency)
        return replace(self, transparency=transparency, refractive_index=refractive_index)

    def with_refractive_index(self, refractive_index: float) -> Material:
        return replace(self, refractive_index=refractive_index)

    def evolve(self, **changes) -> Material:
        """Return a copy with arbitrary fields replaced."""
        return replace(self, **changes)

    # -------------------------------------------------------------------------
    # Shading
    # -------------------------------------------------------------------------

    def color_at(self, obj: Object, point: Point) -> Color:
        """Base color at a world point: the pattern if set, else the flat color."""
        if self.pattern is not None:
            return self.pattern.pattern_at_object(obj, point)
        return self.color

    def lighting(
        self,
        obj: Object,
        light: PointLight,
        point: Point,
        eyev: Vector,
        normalv: Vector,
        in_shadow: bool = False,
    ) -> Color:
        """Compute Phong illumination from one light at a surface point.

        Args:
            obj: The object being shaded (needed to place the pattern).
            light: The light source.
            point: World-space surface point.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal facing the eye.
            in_shadow: Whether the light is blocked at this point.

        Returns:
            The unclamped sum of ambient, diffuse and specular terms.
        """
        effective_color = self.color_at(obj, point) * light.intensity
        ambient = effective_color * self.ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if in_shadow or light_dot_normal < 0.0:
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * (self.specular * factor)

        return ambient + diffuse + specular
