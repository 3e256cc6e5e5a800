"""Tests for the row renderer.

Tests cover:
- RenderConfig validation
- Serial rendering with progress callbacks
- The progressive generator
- Rendering with worker processes (slow)
"""

import os

import numpy as np
import pytest

DEFAULT_HIT_COLOR = (0.38066, 0.47583, 0.2855)


class TestRenderConfig:
    """Tests for render settings."""

    def test_defaults(self):
        """Test the default settings."""
        from src.whitted.core.renderer import RenderConfig
        from src.whitted.scene.world import MAX_DEPTH

        config = RenderConfig()
        assert config.max_depth == MAX_DEPTH
        assert config.workers == 1
        assert config.chunk_rows == 1
        assert config.process_count == 1

    def test_zero_workers_uses_every_cpu(self):
        """Test that workers=0 resolves to the CPU count."""
        from src.whitted.core.renderer import RenderConfig

        assert RenderConfig(workers=0).process_count == (os.cpu_count() or 1)

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"max_depth": -1}, "max_depth must be non-negative"),
            ({"workers": -2}, "workers must be non-negative"),
            ({"chunk_rows": 0}, "chunk_rows must be at least 1"),
        ],
    )
    def test_invalid_settings(self, kwargs, message):
        """Test that invalid settings are rejected."""
        from src.whitted.core.renderer import RenderConfig

        with pytest.raises(ValueError, match=message):
            RenderConfig(**kwargs)


class TestSerialRender:
    """Tests for rendering in the calling process."""

    def test_canvas_is_none_before_render(self, world, default_camera):
        """Test that no canvas exists until a render starts."""
        from src.whitted.core.renderer import Renderer

        renderer = Renderer(default_camera, world)
        assert renderer.canvas is None
        assert renderer.width == 11
        assert renderer.height == 11

    def test_render_with_callback(self, world, default_camera):
        """Test that the callback sees every row and the image is correct."""
        from src.whitted.core.renderer import Renderer

        progress = []
        renderer = Renderer(default_camera, world)
        canvas = renderer.render(callback=lambda done, total: progress.append((done, total)))

        assert progress == [(y, 11) for y in range(1, 12)]
        assert canvas is renderer.canvas
        assert canvas.pixel_at(5, 5).as_tuple() == pytest.approx(DEFAULT_HIT_COLOR, abs=1e-4)

    def test_matches_camera_render(self, world, default_camera):
        """Test that the renderer produces the same image as Camera.render."""
        from src.whitted.core.renderer import Renderer

        expected = default_camera.render(world).to_numpy()
        actual = Renderer(default_camera, world).render().to_numpy()
        assert np.array_equal(actual, expected)

    def test_render_progressive(self, world, default_camera):
        """Test that the generator yields once per row."""
        from src.whitted.core.renderer import Renderer

        renderer = Renderer(default_camera, world)
        steps = list(renderer.render_progressive())
        assert steps[-1] == (11, 11)
        assert len(steps) == 11

    def test_depth_zero_disables_reflection(self):
        """Test that max_depth 0 removes reflections from a mirror floor."""
        from src.whitted.core.renderer import RenderConfig, Renderer
        from src.whitted.scene.presets import build_scene

        world, camera = build_scene("three_spheres", 16, 8)
        flat = Renderer(camera, world, RenderConfig(max_depth=0)).render().to_numpy()
        deep = Renderer(camera, world, RenderConfig(max_depth=3)).render().to_numpy()
        assert not np.array_equal(flat, deep)

    def test_render_row_bounds(self, world, default_camera):
        """Test that rows outside the image are rejected."""
        from src.whitted.core.renderer import Renderer

        renderer = Renderer(default_camera, world)
        assert len(renderer.render_row(0)) == 11
        with pytest.raises(IndexError):
            renderer.render_row(11)

    def test_repr(self, world, default_camera):
        """Test the renderer repr."""
        from src.whitted.core.renderer import RenderConfig, Renderer

        renderer = Renderer(default_camera, world, RenderConfig(max_depth=2, workers=3))
        assert repr(renderer) == "Renderer(width=11, height=11, max_depth=2, workers=3)"


@pytest.mark.slow
class TestParallelRender:
    """Tests for rendering with worker processes."""

    def test_workers_match_serial(self):
        """Test that a multi-process render equals the serial one."""
        from src.whitted.core.renderer import RenderConfig, Renderer
        from src.whitted.preview.export import compute_rmse
        from src.whitted.scene.presets import build_scene

        world, camera = build_scene("glass_sphere", 24, 12)
        serial = Renderer(camera, world).render().to_numpy()

        progress = []
        renderer = Renderer(camera, world, RenderConfig(workers=2, chunk_rows=2))
        parallel = renderer.render(callback=lambda done, total: progress.append(done)).to_numpy()

        assert progress == list(range(1, 13))
        assert compute_rmse(serial, parallel) == 0.0
