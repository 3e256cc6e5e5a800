"""Pytest configuration for ray tracer tests.

Provides Taichi initialization, which must happen once per session, and a
few shared scene fixtures.
"""

import math

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Canvas buffers are Taichi fields, so the runtime must exist before any
    test allocates one. Repeated ti.init() calls would invalidate fields
    created by earlier tests.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def world():
    """A fresh copy of the default two-sphere world."""
    from src.whitted.scene.presets import default_world

    return default_world()


@pytest.fixture
def default_camera():
    """An 11x11 camera looking at the origin from z = -5."""
    from src.whitted.camera.camera import Camera
    from src.whitted.core.geometry import Point, Vector
    from src.whitted.core.transform import Transform

    view = Transform.view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0))
    return Camera(11, 11, math.pi / 2, view)
