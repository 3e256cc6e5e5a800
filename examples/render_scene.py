#!/usr/bin/env python3
"""Render one of the example scenes to a PNG file.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        Scene to render (default: three_spheres)
    --list              List available scenes and exit
    --width WIDTH       Image width in pixels (default: 1000)
    --height HEIGHT     Image height in pixels (default: 500)
    --depth DEPTH       Reflection/refraction recursion depth (default: 5)
    --workers N         Worker processes, 0 for every CPU (default: 1)
    --output OUTPUT     Output file path (default: <scene>.png)
    --gamma GAMMA       Gamma for the PNG (default: 1.0, linear)
    --tone-map METHOD   none, reinhard or exposure (default: none)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene --scene glass_sphere --width 400 --height 200 --workers 0
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    from src.whitted.preview.display import TONE_MAP_METHODS
    from src.whitted.scene.world import MAX_DEPTH

    parser = argparse.ArgumentParser(
        description="Render an example scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default="three_spheres",
        help="Scene to render (default: three_spheres)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available scenes and exit",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=1000,
        help="Image width in pixels (default: 1000)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=500,
        help="Image height in pixels (default: 500)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Reflection/refraction recursion depth (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes, 0 for every CPU (default: 1)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file path (default: <scene>.png)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma applied before saving (default: 1.0)",
    )
    parser.add_argument(
        "--tone-map",
        choices=TONE_MAP_METHODS,
        default="none",
        help="Tone mapping method (default: none)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_scene(
    scene: str = "three_spheres",
    width: int = 1000,
    height: int = 500,
    depth: int = 5,
    workers: int = 1,
    output_path: str | None = None,
    gamma: float = 1.0,
    tone_map: str = "none",
    quiet: bool = False,
) -> Path:
    """Render a registered scene and save it as PNG.

    Args:
        scene: Name of a scene in ``SCENES``.
        width: Image width in pixels.
        height: Image height in pixels.
        depth: Recursion budget for secondary rays.
        workers: Worker processes (0 for every CPU).
        output_path: Output file path; defaults to ``<scene>.png``.
        gamma: Gamma applied before saving.
        tone_map: Tone mapping method.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.whitted.core.renderer import RenderConfig, Renderer
    from src.whitted.preview.export import save_png
    from src.whitted.scene.presets import build_scene

    if not quiet:
        print(f"Creating scene '{scene}' ({width}x{height})...")

    world, camera = build_scene(scene, width, height)
    renderer = Renderer(camera, world, RenderConfig(max_depth=depth, workers=workers))

    if not quiet:
        print(f"Rendering with {renderer.config.process_count} process(es), depth {depth}...")

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (done / total) * 100 if total > 0 else 0
            rows_per_sec = done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {done}/{total} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = renderer.render(callback=progress_callback)

    if not quiet:
        print()

    output_file = Path(output_path if output_path is not None else f"{scene}.png")
    save_png(canvas, output_file, tone_map=tone_map, gamma=gamma)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.list:
        from src.whitted.scene.presets import SCENES

        for name in sorted(SCENES):
            print(name)
        return 0

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_scene(
            scene=args.scene,
            width=args.width,
            height=args.height,
            depth=args.depth,
            workers=args.workers,
            output_path=args.output,
            gamma=args.gamma,
            tone_map=args.tone_map,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
