"""Row-by-row renderer with progress reporting and optional worker processes.

This module provides a convenient wrapper around ``Camera`` and ``World``
that supports:
- Rendering a whole image into a Taichi-backed ``Canvas``
- Progress callbacks after each finished row
- A generator interface for UIs that want to interleave other work
- Parallel rendering across worker processes

Every pixel is independent and the world is read-only while rendering, so
rows can be traced in any order by any process. With ``workers > 1`` a
``multiprocessing`` pool (spawn context) receives the camera and world once
per worker through its initializer; workers return finished rows and only
the parent process writes into the canvas.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.core.renderer import RenderConfig, Renderer
    >>> from src.whitted.scene.presets import build_scene
    >>>
    >>> world, camera = build_scene("three_spheres", 200, 100)
    >>> renderer = Renderer(camera, world, RenderConfig(workers=4))
    >>> canvas = renderer.render(callback=lambda done, total: None)
"""

from __future__ import annotations

import logging
import multiprocessing
import os
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass

from src.whitted.camera.camera import Camera
from src.whitted.core.canvas import Canvas
from src.whitted.core.color import Color
from src.whitted.scene.world import MAX_DEPTH, World

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


@dataclass
class RenderConfig:
    """Settings for a render.

    Attributes:
        max_depth: Recursion budget for reflected and refracted rays.
        workers: Number of processes. 1 renders in the calling process;
            0 uses every available CPU.
        chunk_rows: Rows handed to a worker per task.
    """

    max_depth: int = MAX_DEPTH
    workers: int = 1
    chunk_rows: int = 1

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers < 0:
            raise ValueError(f"workers must be non-negative, got {self.workers}")
        if self.chunk_rows < 1:
            raise ValueError(f"chunk_rows must be at least 1, got {self.chunk_rows}")

    @property
    def process_count(self) -> int:
        """Resolved number of processes."""
        if self.workers == 0:
            return os.cpu_count() or 1
        return self.workers


# Worker state, set once per process by the pool initializer
_worker_state: dict = {}


def _init_worker(camera: Camera, world: World, max_depth: int) -> None:
    _worker_state["camera"] = camera
    _worker_state["world"] = world
    _worker_state["max_depth"] = max_depth


def _render_row_task(y: int) -> tuple[int, list[Color]]:
    camera: Camera = _worker_state["camera"]
    world: World = _worker_state["world"]
    return y, camera.render_row(world, y, _worker_state["max_depth"])


class Renderer:
    """Render a world through a camera into a canvas.

    Attributes:
        camera: The camera generating primary rays.
        world: The scene being rendered.
        config: Render settings.
    """

    def __init__(self, camera: Camera, world: World, config: RenderConfig | None = None) -> None:
        self.camera = camera
        self.world = world
        self.config = config if config is not None else RenderConfig()
        self._canvas: Canvas | None = None

    @property
    def width(self) -> int:
        return self.camera.hsize

    @property
    def height(self) -> int:
        return self.camera.vsize

    @property
    def canvas(self) -> Canvas | None:
        """Canvas of the most recent render, or None before the first one."""
        return self._canvas

    def render_row(self, y: int) -> list[Color]:
        """Trace one row in the calling process.

        Raises:
            IndexError: If y is not a valid row.
        """
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} is outside image of height {self.height}")
        return self.camera.render_row(self.world, y, self.config.max_depth)

    def render(self, callback: ProgressCallback | None = None) -> Canvas:
        """Render every row into a new canvas.

        Args:
            callback: Optional function called after each finished row with
                (rows_done, total_rows).

        Returns:
            The finished canvas (also available as ``renderer.canvas``).

        Example:
            >>> def progress(done, total):
            ...     print(f"Progress: {done}/{total} rows")
            >>> canvas = renderer.render(callback=progress)
        """
        for done, total in self.render_progressive():
            if callback is not None:
                callback(done, total)
        return self._canvas

    def render_progressive(self) -> Generator[tuple[int, int], None, None]:
        """Render every row, yielding progress after each one.

        A new canvas is allocated at the start; it fills in as rows finish,
        in whatever order the workers complete them.

        Yields:
            Tuple of (rows_done, total_rows).
        """
        total = self.height
        self._canvas = Canvas(self.width, total)
        processes = min(self.config.process_count, total)
        logger.info(
            "Rendering %dx%d with %d process(es), max depth %d",
            self.width,
            total,
            processes,
            self.config.max_depth,
        )
        start = time.perf_counter()

        if processes <= 1:
            for y in range(total):
                self._canvas.write_row(y, self.render_row(y))
                yield (y + 1, total)
        else:
            ctx = multiprocessing.get_context("spawn")
            initargs = (self.camera, self.world, self.config.max_depth)
            with ctx.Pool(processes=processes, initializer=_init_worker, initargs=initargs) as pool:
                done = 0
                rows = pool.imap_unordered(
                    _render_row_task, range(total), chunksize=self.config.chunk_rows
                )
                for y, row in rows:
                    self._canvas.write_row(y, row)
                    done += 1
                    yield (done, total)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.width}, height={self.height}, "
            f"max_depth={self.config.max_depth}, workers={self.config.workers})"
        )
