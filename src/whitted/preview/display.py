"""Display pipeline and Matplotlib preview for rendered canvases.

The shading core produces unclamped linear colors. Before an image is shown
or saved it goes through:
    1. Optional tone mapping (Reinhard or exposure) to compress bright values
    2. Gamma encoding
    3. Clamping to [0, 1]

Example:
    >>> from src.whitted.preview.display import show_preview
    >>> canvas = camera.render(world)
    >>> show_preview(canvas, tone_map="reinhard")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from src.whitted.core.canvas import Canvas

ToneMapMethod = Literal["none", "reinhard", "exposure"]
TONE_MAP_METHODS: tuple[str, ...] = ("none", "reinhard", "exposure")


def tone_map_reinhard(image: npt.NDArray[np.float32]) -> npt.NDArray[np.float32]:
    """Compress linear values with c / (1 + c).

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        Tone mapped image in [0, 1).
    """
    image = np.maximum(image, 0.0)
    return (image / (1.0 + image)).astype(np.float32)


def tone_map_exposure(
    image: npt.NDArray[np.float32],
    exposure: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Compress linear values with 1 - exp(-c * exposure).

    Higher exposure brightens the image.
    """
    image = np.maximum(image, 0.0)
    return (1.0 - np.exp(-image * exposure)).astype(np.float32)


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Encode a [0, 1] image with out = in ** (1 / gamma).

    Values are clamped first so negative inputs cannot produce NaN.
    A gamma of 1.0 returns the input unchanged.

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    if gamma == 1.0:
        return image
    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma).astype(np.float32)


def process_image_for_display(
    image: npt.NDArray[np.float32],
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    exposure: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Run the full display pipeline on a linear image.

    Args:
        image: Linear image array of shape (H, W, 3).
        tone_map: "none", "reinhard" or "exposure".
        gamma: Gamma value; 1.0 keeps values linear.
        exposure: Exposure for the "exposure" tone map.

    Returns:
        Image in [0, 1], dtype float32.

    Raises:
        ValueError: If ``tone_map`` is not a known method.
    """
    if tone_map == "reinhard":
        result = tone_map_reinhard(image)
    elif tone_map == "exposure":
        result = tone_map_exposure(image, exposure)
    elif tone_map == "none":
        result = np.array(image, dtype=np.float32, copy=True)
    else:
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)
    return np.clip(result, 0.0, 1.0).astype(np.float32)


def show_preview(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 2.2,
    exposure: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (10, 5),
    block: bool = True,
) -> None:
    """Show a rendered canvas in a Matplotlib window.

    Args:
        canvas: The rendered canvas.
        tone_map: Tone mapping method.
        gamma: Gamma value.
        exposure: Exposure for the "exposure" tone map.
        title: Window title. Defaults to the image size.
        figsize: Figure size in inches.
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(
        canvas.to_numpy(),
        tone_map=tone_map,
        gamma=gamma,
        exposure=exposure,
    )

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")
    if title is None:
        title = f"Render Preview - {canvas.width}x{canvas.height}"
        if tone_map != "none":
            title += f" ({tone_map})"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)
