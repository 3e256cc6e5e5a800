"""RGB color type used throughout shading.

Colors are unclamped linear floats. Values above 1.0 are legal and common
(specular highlights, several lights); clamping and gamma happen only when an
image is prepared for display or export (see ``src.whitted.preview``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """A linear RGB color.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar scale or component-wise (Hadamard) product
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_tuple(cls, rgb) -> Color:
        r, g, b = rgb
        return cls(float(r), float(g), float(b))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
