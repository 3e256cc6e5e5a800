"""Unit tests for plane intersection and normals."""

import pytest


class TestPlane:
    """Tests for the XZ plane primitive."""

    def test_normal_is_constant(self):
        """Test that the normal is +Y everywhere."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.geometry.object import Object

        p = Object.plane()
        for point in [Point(0, 0, 0), Point(10, 0, -10), Point(-5, 0, 150)]:
            assert p.normal_at(point) == Vector(0, 1, 0)

    def test_parallel_ray_misses(self):
        """Test a ray parallel to the plane."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0, 10, 0), Vector(0, 0, 1))) == []

    def test_coplanar_ray_misses(self):
        """Test a ray lying in the plane."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0, 0, 0), Vector(0, 0, 1))) == []

    def test_nearly_parallel_ray_misses(self):
        """Test that directions within EPSILON of parallel are treated as parallel."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0, 1, 0), Vector(1, -5e-5, 0))) == []

    def test_ray_from_above(self):
        """Test a ray hitting the plane from above."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.object import Object

        p = Object.plane()
        xs = p.intersect(Ray(Point(0, 1, 0), Vector(0, -1, 0)))
        assert len(xs) == 1
        assert xs[0].t == 1.0
        assert xs[0].object is p

    def test_ray_from_below(self):
        """Test a ray hitting the plane from below."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.object import Object

        p = Object.plane()
        xs = p.intersect(Ray(Point(0, -1, 0), Vector(0, 1, 0)))
        assert [i.t for i in xs] == [1.0]

    def test_transformed_plane(self):
        """Test a plane rotated into a wall."""
        import math

        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        wall = Object.plane().with_transform(
            Transform.translation(0, 0, 10) * Transform.rotation_x(math.pi / 2)
        )
        xs = wall.intersect(Ray(Point(0, 0, 0), Vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([10.0])
        assert wall.normal_at(Point(0, 0, 10)).as_tuple() == pytest.approx((0, 0, 1), abs=1e-12)
