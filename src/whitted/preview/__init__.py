"""Display and export of rendered canvases.

Components:
    display: Tone mapping, gamma and Matplotlib preview
    export: PNG export with Pillow and image comparison

Example:
    >>> from src.whitted.preview import save_png, show_preview
    >>> canvas = renderer.render()
    >>> show_preview(canvas, tone_map="reinhard")
    >>> save_png(canvas, "output.png", gamma=2.2)
"""

from src.whitted.preview.display import (
    TONE_MAP_METHODS,
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    show_preview,
    tone_map_exposure,
    tone_map_reinhard,
)
from src.whitted.preview.export import (
    compute_rmse,
    image_to_uint8,
    save_png,
    save_png_from_array,
)

__all__ = [
    "show_preview",
    "tone_map_reinhard",
    "tone_map_exposure",
    "apply_gamma",
    "process_image_for_display",
    "ToneMapMethod",
    "TONE_MAP_METHODS",
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
    "compute_rmse",
]
