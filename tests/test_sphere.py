"""Unit tests for sphere intersection and normals.

Tests cover:
- Ray hitting the unit sphere from outside, tangent, inside and behind
- Intersecting transformed spheres through Object
- Surface normals, including under non-uniform scaling
- Object identity versus value equality
"""

import math
import pickle

import pytest


class TestUnitSphereIntersection:
    """Tests for the object-space intersection function."""

    def test_ray_through_center(self):
        """Test two hits symmetric about the center."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0, 0, -5), Vector(0, 0, 1))) == [4.0, 6.0]

    def test_tangent_ray_gives_two_equal_hits(self):
        """Test that a tangent ray reports the same t twice."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0, 1, -5), Vector(0, 0, 1))) == [5.0, 5.0]

    def test_ray_misses(self):
        """Test that a negative discriminant gives no hits."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0, 2, -5), Vector(0, 0, 1))) == []

    def test_ray_starts_inside(self):
        """Test a ray from the center hits behind and ahead."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0, 0, 0), Vector(0, 0, 1))) == [-1.0, 1.0]

    def test_sphere_behind_ray(self):
        """Test that both hits are negative when the sphere is behind."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0, 0, 5), Vector(0, 0, 1))) == [-6.0, -4.0]


class TestObjectSphereIntersection:
    """Tests for intersecting placed spheres."""

    def test_intersections_reference_the_object(self):
        """Test that each intersection records the sphere it hit."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.geometry.object import Object

        s = Object.sphere()
        xs = s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert len(xs) == 2
        assert xs[0].object is s
        assert xs[1].object is s

    def test_scaled_sphere(self):
        """Test intersecting a sphere of radius 2."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        s = Object.sphere().with_transform(Transform.scaling(2, 2, 2))
        xs = s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        """Test that a sphere moved out of the way is missed."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        s = Object.sphere().with_transform(Transform.translation(5, 0, 0))
        assert s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1))) == []


class TestSphereNormal:
    """Tests for sphere surface normals."""

    @pytest.mark.parametrize(
        "point, expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_normal_on_axes(self, point, expected):
        """Test normals at points on each axis."""
        from src.whitted.core.geometry import Point
        from src.whitted.geometry.object import Object

        n = Object.sphere().normal_at(Point(*point))
        assert n.as_tuple() == pytest.approx(expected)

    def test_normal_is_normalized(self):
        """Test the normal at a non-axial point is unit length."""
        from src.whitted.core.geometry import Point
        from src.whitted.geometry.object import Object

        k = math.sqrt(3) / 3
        n = Object.sphere().normal_at(Point(k, k, k))
        assert n.as_tuple() == pytest.approx((k, k, k))
        assert abs(n.magnitude() - 1.0) < 1e-12

    def test_normal_on_translated_sphere(self):
        """Test the normal of a sphere moved up by one unit."""
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        s = Object.sphere().with_transform(Transform.translation(0, 1, 0))
        n = s.normal_at(Point(0, 1.70711, -0.70711))
        assert n.as_tuple() == pytest.approx((0, 0.70711, -0.70711), abs=1e-5)

    def test_normal_on_squashed_rotated_sphere(self):
        """Test that normals use the transpose of the inverse transform."""
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        t = Transform.scaling(1, 0.5, 1) * Transform.rotation_z(math.pi / 5)
        s = Object.sphere().with_transform(t)
        k = math.sqrt(2) / 2
        n = s.normal_at(Point(0, k, -k))
        assert n.as_tuple() == pytest.approx((0, 0.97014, -0.24254), abs=1e-5)

    def test_normals_are_unit_length_under_scaling(self):
        """Test that normals stay unit length on a stretched sphere."""
        from src.whitted.core.geometry import Point, Vector
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        s = Object.sphere().with_transform(Transform.scaling(3, 0.5, 1.5))
        for direction in [Vector(0, 0, 1), Vector(0.2, 0.1, 1), Vector(-0.3, 0.05, 1)]:
            ray = Ray(Point(0, 0, -10), direction.normalize())
            for hit in s.intersect(ray):
                n = s.normal_at(ray.position(hit.t))
                assert abs(n.magnitude() - 1.0) < 1e-9


class TestObjectIdentity:
    """Tests for object identity tokens."""

    def test_equal_values_distinct_ids(self):
        """Test that two default spheres are equal by value but distinct."""
        from src.whitted.geometry.object import Object

        a = Object.sphere()
        b = Object.sphere()
        assert a == b
        assert a.id != b.id

    def test_builder_copy_gets_new_id(self):
        """Test that with_* copies receive a fresh identity."""
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object

        a = Object.sphere()
        b = a.with_transform(Transform.translation(1, 0, 0))
        assert b.id != a.id
        assert a.transform.is_identity()

    def test_id_survives_pickling(self):
        """Test that the identity token is preserved across processes."""
        from src.whitted.geometry.object import Object

        a = Object.glass_sphere()
        restored = pickle.loads(pickle.dumps(a))
        assert restored.id == a.id
        assert restored == a

    def test_glass_sphere(self):
        """Test the glass sphere helper."""
        from src.whitted.geometry.object import Object

        s = Object.glass_sphere()
        assert s.transform.is_identity()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5
