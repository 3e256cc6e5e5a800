"""Unit tests for procedural patterns."""

import pytest


class TestStripe:
    """Tests for the stripe pattern."""

    def test_constant_in_y_and_z(self):
        """Test that stripes only vary along x."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.materials.pattern import Pattern

        pattern = Pattern.stripe(WHITE, BLACK)
        for point in [Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0), Point(0, 0, 1), Point(0, 0, 2)]:
            assert pattern.pattern_at(point) == WHITE

    @pytest.mark.parametrize(
        "x, expected_white",
        [(0.0, True), (0.9, True), (1.0, False), (-0.1, False), (-1.0, False), (-1.1, True)],
    )
    def test_alternates_in_x(self, x, expected_white):
        """Test that stripes alternate on integer boundaries."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.materials.pattern import Pattern

        pattern = Pattern.stripe(WHITE, BLACK)
        assert pattern.pattern_at(Point(x, 0, 0)) == (WHITE if expected_white else BLACK)

    def test_object_transform(self):
        """Test that the object's transform scales the pattern."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object
        from src.whitted.materials.pattern import Pattern

        obj = Object.sphere().with_transform(Transform.scaling(2, 2, 2))
        pattern = Pattern.stripe(WHITE, BLACK)
        assert pattern.pattern_at_object(obj, Point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        """Test that the pattern's own transform scales it."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object
        from src.whitted.materials.pattern import Pattern

        pattern = Pattern.stripe(WHITE, BLACK).with_transform(Transform.scaling(2, 2, 2))
        assert pattern.pattern_at_object(Object.sphere(), Point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test that both transforms apply, object first."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object
        from src.whitted.materials.pattern import Pattern

        obj = Object.sphere().with_transform(Transform.scaling(2, 2, 2))
        pattern = Pattern.stripe(WHITE, BLACK).with_transform(Transform.translation(0.5, 0, 0))
        assert pattern.pattern_at_object(obj, Point(2.5, 0, 0)) == WHITE


class TestOtherPatterns:
    """Tests for gradient, ring and checkers."""

    @pytest.mark.parametrize("x, level", [(0.0, 1.0), (0.25, 0.75), (0.5, 0.5), (0.75, 0.25)])
    def test_gradient(self, x, level):
        """Test linear interpolation between the two colors."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.materials.pattern import Pattern

        pattern = Pattern.gradient(WHITE, BLACK)
        assert pattern.pattern_at(Point(x, 0, 0)).as_tuple() == pytest.approx((level,) * 3)

    def test_ring(self):
        """Test that rings extend in both x and z."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.materials.pattern import Pattern

        pattern = Pattern.ring(WHITE, BLACK)
        assert pattern.pattern_at(Point(0, 0, 0)) == WHITE
        assert pattern.pattern_at(Point(1, 0, 0)) == BLACK
        assert pattern.pattern_at(Point(0, 0, 1)) == BLACK
        assert pattern.pattern_at(Point(0.708, 0, 0.708)) == BLACK

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_checkers_repeat_along_each_axis(self, axis):
        """Test that checkers flip at integer boundaries on every axis."""
        from src.whitted.core.color import BLACK, WHITE
        from src.whitted.core.geometry import Point
        from src.whitted.materials.pattern import Pattern

        def along(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return Point(*coords)

        pattern = Pattern.checkers(WHITE, BLACK)
        assert pattern.pattern_at(along(0.0)) == WHITE
        assert pattern.pattern_at(along(0.99)) == WHITE
        assert pattern.pattern_at(along(1.01)) == BLACK


class TestCoordinatePattern:
    """Tests for the coordinate pattern used to check pattern space."""

    def test_object_transform(self):
        """Test that the point is mapped into object space."""
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object
        from src.whitted.materials.pattern import Pattern

        obj = Object.sphere().with_transform(Transform.scaling(2, 2, 2))
        color = Pattern.coordinate().pattern_at_object(obj, Point(2, 3, 4))
        assert color.as_tuple() == pytest.approx((1, 1.5, 2))

    def test_object_and_pattern_transform(self):
        """Test that the point is mapped through both inverse transforms."""
        from src.whitted.core.geometry import Point
        from src.whitted.core.transform import Transform
        from src.whitted.geometry.object import Object
        from src.whitted.materials.pattern import Pattern

        obj = Object.sphere().with_transform(Transform.scaling(2, 2, 2))
        pattern = Pattern.coordinate().with_transform(Transform.translation(0.5, 1, 1.5))
        color = pattern.pattern_at_object(obj, Point(2.5, 3, 3.5))
        assert color.as_tuple() == pytest.approx((0.75, 0.5, 0.25))
