"""Image export for rendered canvases.

Images are written as 8-bit PNG through Pillow after the display pipeline
in ``src.whitted.preview.display`` (tone mapping, gamma, clamp). Channel
values are rounded, so a linear 0.5 with gamma 1.0 becomes 128.

Example:
    >>> from src.whitted.preview.export import save_png
    >>> canvas = renderer.render()
    >>> save_png(canvas, "three_spheres.png", gamma=1.0)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.whitted.preview.display import ToneMapMethod, process_image_for_display

if TYPE_CHECKING:
    from src.whitted.core.canvas import Canvas

logger = logging.getLogger(__name__)


def image_to_uint8(
    image: npt.NDArray[np.float32],
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    exposure: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to rounded 8-bit channels.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: Tone mapping method.
        gamma: Gamma value.
        exposure: Exposure for the "exposure" tone map.

    Returns:
        Array of shape (H, W, 3), dtype uint8.
    """
    processed = process_image_for_display(
        image,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )
    return np.floor(processed * 255.0 + 0.5).astype(np.uint8)


def save_png_from_array(
    image: npt.NDArray[np.float32],
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    exposure: float = 1.0,
) -> None:
    """Save a linear (H, W, 3) float image as an 8-bit PNG."""
    image_uint8 = image_to_uint8(image, tone_map=tone_map, gamma=gamma, exposure=exposure)
    PILImage.fromarray(image_uint8).save(filepath)
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], filepath)


def save_png(
    canvas: Canvas,
    filepath: str | Path,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    exposure: float = 1.0,
) -> None:
    """Save a rendered canvas as an 8-bit PNG.

    Args:
        canvas: The rendered canvas.
        filepath: Output path (should end in .png).
        tone_map: Tone mapping method ("none", "reinhard" or "exposure").
        gamma: Gamma value (2.2 for sRGB-like output, 1.0 for linear).
        exposure: Exposure for the "exposure" tone map.
    """
    save_png_from_array(
        canvas.to_numpy(),
        filepath,
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )


def compute_rmse(
    image_a: npt.NDArray[np.floating],
    image_b: npt.NDArray[np.floating],
) -> float:
    """Root mean squared error between two images of the same shape.

    Raises:
        ValueError: If the shapes differ.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")
    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
