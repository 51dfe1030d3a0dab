"""Tests for geometry models, math and polygon utilities."""
import pytest

from house_interiors.models import Point2D, Vector3, Rect2D, Opening, SceneNode
from house_interiors.utils.math_utils import (
    angle_between,
    euler_to_matrix3,
    interior_peak_height,
    ridge_height,
    transform_point,
    trs_matrix,
)
from house_interiors.utils.polygon_utils import (
    clip_polygon_convex,
    point_in_convex_polygon,
    polygon_area,
    polygon_signed_area,
)


def square(size=2.0):
    return [Point2D(0, 0), Point2D(size, 0), Point2D(size, size), Point2D(0, size)]


class TestVector3:

    def test_cross_is_right_handed(self):
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
        assert Vector3(0, 0, -1).cross(Vector3(0, 1, 0)) == Vector3(1, 0, 0)

    def test_arithmetic(self):
        v = Vector3(1, 2, 3) + Vector3(1, 1, 1) * 2
        assert v == Vector3(3, 4, 5)
        assert 2 * Vector3(1, 0, 0) == Vector3(2, 0, 0)
        assert Vector3(3, 4, 0).length() == pytest.approx(5.0)

    def test_lerp_midpoint(self):
        assert Vector3(0, 0, 0).lerp(Vector3(2, 4, 6), 0.5) == Vector3(1, 2, 3)


class TestRectAndOpening:

    def test_rect_contains_is_half_open(self):
        rect = Rect2D(0, 0, 2, 2)
        assert rect.contains(0, 0)
        assert rect.contains(1.99, 1.99)
        assert not rect.contains(2, 1)
        assert not rect.contains(1, 2)

    def test_from_bounds(self):
        rect = Rect2D.from_bounds(45.0, 0.6, 58.5, 4.9)
        assert rect.width == pytest.approx(13.5)
        assert rect.y_max == pytest.approx(4.9)

    def test_opening_extents(self):
        opening = Opening(width=2.5, height=3.0, center_v=5.5)
        assert (opening.u_min, opening.u_max) == (-1.25, 1.25)
        assert (opening.v_min, opening.v_max) == (4.0, 7.0)


class TestRoofMath:

    def test_ridge_height(self):
        assert ridge_height(4.0, 12.5, 5.0 / 12.0) == pytest.approx(9.208333, abs=1e-5)

    def test_interior_peak_interpolates(self):
        peak = interior_peak_height(4.0, 9.208333, 12.5, 5.0)
        assert peak == pytest.approx(6.083333, abs=1e-5)

    def test_interior_peak_clamps(self):
        assert interior_peak_height(4.0, 9.0, 10.0, 20.0) == pytest.approx(9.0)
        assert interior_peak_height(4.0, 9.0, 0.0, 5.0) == pytest.approx(9.0)

    def test_angle_between(self):
        assert angle_between(Vector3(1, 0, 0), Vector3(0, 1, 0)) == pytest.approx(90.0)
        assert angle_between(Vector3(1, 0, 0), Vector3(0, 0, 0)) == 0.0


class TestTransforms:

    def test_rotation_order_is_x_then_y_then_z(self):
        # X then Y: +Y -> +Z (about X) -> +X (about Y)
        r = euler_to_matrix3(Vector3(90, 90, 0))
        point = [sum(r[i][k] * v for k, v in enumerate((0, 1, 0))) for i in range(3)]
        assert point == pytest.approx([1.0, 0.0, 0.0], abs=1e-9)

    def test_trs_scales_then_translates(self):
        m = trs_matrix(Vector3(1, 2, 3), Vector3(0, 0, 0), Vector3(2, 2, 2))
        assert transform_point(m, (1, 1, 1)) == pytest.approx((3, 4, 5))

    def test_world_transform_composes_parents(self):
        root = SceneNode("Root", position=Vector3(10, 0, 0))
        child = root.add_child(SceneNode("Child", position=Vector3(0, 0, 1), rotation=Vector3(0, 90, 0)))
        leaf = child.add_child(SceneNode("Leaf", position=Vector3(0, 0, 1)))
        # Yaw 90 turns +Z into +X
        assert transform_point(leaf.world_matrix(), (0, 0, 0)) == pytest.approx((11.0, 0.0, 1.0))


class TestPolygonUtils:

    def test_signed_area_orientation(self):
        ring = square()
        assert polygon_signed_area(ring) == pytest.approx(4.0)
        assert polygon_signed_area(list(reversed(ring))) == pytest.approx(-4.0)

    def test_point_in_convex_polygon(self):
        ring = square()
        assert point_in_convex_polygon(Point2D(1, 1), ring)
        assert point_in_convex_polygon(Point2D(2, 1), ring)
        assert not point_in_convex_polygon(Point2D(2.1, 1), ring)

    def test_clip_partial_overlap(self):
        subject = [Point2D(1, 1), Point2D(3, 1), Point2D(3, 3), Point2D(1, 3)]
        clipped = clip_polygon_convex(subject, square())
        assert polygon_area(clipped) == pytest.approx(1.0)

    def test_clip_disjoint_is_empty(self):
        subject = [Point2D(5, 5), Point2D(6, 5), Point2D(6, 6), Point2D(5, 6)]
        assert polygon_area(clip_polygon_convex(subject, square())) == pytest.approx(0.0)
