"""Image buffer for rendered pixels.

The canvas stores linear, unclamped RGB floats in a Taichi vector field of
shape (width, height). Pixel (0, 0) is the top-left corner, matching the
camera's pixel iteration order, so no vertical flip is needed when the buffer
is exported.

Clamping, gamma and 8-bit conversion happen on the exported array in
``src.whitted.preview``. The shading pipeline itself never touches Taichi.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.core.canvas import Canvas
    >>> from src.whitted.core.color import Color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Color(red=1.0, green=0.0, blue=0.0)
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.whitted.core.color import Color

# Largest accepted width or height
MAX_CANVAS_SIZE = 4096


@ti.kernel
def _fill_field(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for x, y in pixels:
        pixels[x, y] = ti.Vector([r, g, b])


@ti.kernel
def _write_row_kernel(pixels: ti.template(), y: ti.i32, row: ti.types.ndarray()):
    for x in range(row.shape[0]):
        pixels[x, y] = ti.Vector([row[x, 0], row[x, 1], row[x, 2]])


class Canvas:
    """A width x height grid of linear RGB colors.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int, fill: Color | None = None) -> None:
        """Allocate a canvas.

        Args:
            width: Image width in pixels (1 to MAX_CANVAS_SIZE).
            height: Image height in pixels (1 to MAX_CANVAS_SIZE).
            fill: Initial color for every pixel. Defaults to black.

        Raises:
            ValueError: If either dimension is outside the supported range.
        """
        if not (1 <= width <= MAX_CANVAS_SIZE and 1 <= height <= MAX_CANVAS_SIZE):
            raise ValueError(
                f"Canvas dimensions ({width}x{height}) must be between 1 and "
                f"{MAX_CANVAS_SIZE} on each axis"
            )
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        if fill is not None:
            self.fill(fill)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self):
        """The underlying Taichi vector field, indexed [x, y]."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside canvas of size {self._width}x{self._height}"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color at column x, row y.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color at column x, row y.

        Values come back at float32 precision.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def write_row(self, y: int, colors: Sequence[Color]) -> None:
        """Write a full row of colors in one kernel launch.

        Args:
            y: Row index.
            colors: Exactly ``width`` colors, left to right.

        Raises:
            IndexError: If y is outside the canvas.
            ValueError: If the number of colors does not match the width.
        """
        self._check_bounds(0, y)
        if len(colors) != self._width:
            raise ValueError(f"Row has {len(colors)} colors, expected {self._width}")
        row = np.array([c.as_tuple() for c in colors], dtype=np.float32)
        _write_row_kernel(self._pixels, y, row)

    def fill(self, color: Color) -> None:
        _fill_field(self._pixels, color.red, color.green, color.blue)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return the linear image as an array of shape (height, width, 3)."""
        image = self._pixels.to_numpy()
        return np.ascontiguousarray(np.transpose(image, (1, 0, 2)), dtype=np.float32)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
