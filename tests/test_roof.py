"""Tests for roof, interior shell and truss geometry."""
import math

import pytest

from house_interiors.config import AtticDimensions
from house_interiors.generators.roof import build_interior_shell, build_roof_exterior, valley_geometry
from house_interiors.generators.trusses import (
    build_trusses,
    build_wing_trusses,
    rafter_geometry,
    truss_stations,
)
from house_interiors.models import Material, Vector3

from conftest import names

SHINGLES = Material("Shingles")
WOOD = Material("Wood")


def polygon(parent, name):
    node = parent.find(name)
    assert node is not None, name
    return node


class TestDimensions:

    def test_heights_are_ordered(self, attic_dims):
        assert attic_dims.main_ridge_height == pytest.approx(4.0 + 12.5 * 5.0 / 12.0)
        assert attic_dims.wing_ridge_height == pytest.approx(4.0 + 10.0 * 5.0 / 12.0)
        assert attic_dims.knee_wall_height < attic_dims.ceiling_peak_height < attic_dims.main_ridge_height
        assert attic_dims.wing_ridge_height < attic_dims.main_ridge_height

    def test_ridge_grows_with_slope(self):
        low = AtticDimensions(slope_ratio=0.3)
        high = AtticDimensions(slope_ratio=0.6)
        assert high.main_ridge_height > low.main_ridge_height

    def test_counts(self, attic_dims):
        assert attic_dims.truss_count == 11
        assert attic_dims.plank_count == 50
        assert attic_dims.wing_plank_count == 40


class TestValley:

    def test_points(self, attic_dims):
        valley = valley_geometry(attic_dims)
        assert valley.eave_front == Vector3(12.5, 4.0, 10.0)
        assert valley.eave_back == Vector3(12.5, 4.0, -10.0)
        assert valley.peak.y == pytest.approx(attic_dims.main_ridge_height)
        assert valley.wing_peak.x == pytest.approx(22.5)
        assert valley.outer_front.x == pytest.approx(32.5)

    def test_valley_edges_shared(self, parent, attic_dims):
        roof = build_roof_exterior(parent, attic_dims, SHINGLES, WOOD)
        valley = valley_geometry(attic_dims)

        def owners(a, b):
            edge = {a.as_tuple(), b.as_tuple()}
            found = []
            for node in roof.children:
                verts = node.mesh.vertices
                edges = [{verts[i], verts[(i + 1) % len(verts)]} for i in range(len(verts))]
                if edge in edges:
                    found.append(node.name)
            return found

        assert owners(valley.peak, valley.eave_front) == ["Main_RightFront", "Wing_ValleyFront"]
        assert owners(valley.peak, valley.eave_back) == ["Main_RightBack", "Wing_ValleyBack"]
        assert owners(valley.wing_peak, valley.peak) == ["Wing_ValleyFront", "Wing_ValleyBack"]


class TestRoofExterior:

    def test_polygon_names(self, parent, attic_dims):
        roof = build_roof_exterior(parent, attic_dims, SHINGLES, WOOD)
        assert roof.name == "RoofGeometry"
        assert names(roof) == [
            "Main_Left",
            "Main_RightFront",
            "Main_RightBack",
            "Wing_ValleyFront",
            "Wing_ValleyBack",
            "Wing_OuterSide",
            "Gable_MainFront",
            "Gable_MainBack",
            "Gable_WingSide",
        ]

    def test_slopes_face_up(self, parent, attic_dims):
        roof = build_roof_exterior(parent, attic_dims, SHINGLES, WOOD)
        for node in roof.children:
            if node.mesh.material is SHINGLES:
                assert node.mesh.face_normal(0)[1] > 0, node.name

    def test_gables_face_out(self, parent, attic_dims):
        roof = build_roof_exterior(parent, attic_dims, SHINGLES, WOOD)
        assert polygon(roof, "Gable_MainFront").mesh.face_normal(0) == pytest.approx((0.0, 0.0, 1.0))
        assert polygon(roof, "Gable_MainBack").mesh.face_normal(0) == pytest.approx((0.0, 0.0, -1.0))


class TestInteriorShell:

    def test_pieces(self, parent, attic_dims, material):
        build_interior_shell(parent, attic_dims, material)
        assert names(parent) == [
            "Wall_Left",
            "Wall_Right_Front",
            "Wall_Right_Back",
            "Wall_Wing_Outer",
            "Wall_Wing_Front",
            "Wall_Wing_Back",
            "KneeWall_Left",
            "KneeWall_Right",
            "Ceiling_Flat",
            "Ceiling_Angled_Left",
            "Ceiling_Angled_Right",
            "Front_BelowOpening",
            "Front_LeftOpening",
            "Front_RightOpening",
            "BackWall",
        ]

    def test_ceilings_face_down(self, parent, attic_dims, material):
        build_interior_shell(parent, attic_dims, material)
        for name in ("Ceiling_Flat", "Ceiling_Angled_Left", "Ceiling_Angled_Right"):
            assert polygon(parent, name).mesh.face_normal(0)[1] < 0, name

    def test_angled_ceiling_endpoints(self, parent, attic_dims, material):
        build_interior_shell(parent, attic_dims, material)
        ys = {round(v[1], 6) for v in polygon(parent, "Ceiling_Angled_Left").mesh.vertices}
        assert ys == {round(attic_dims.knee_wall_height, 6), round(attic_dims.ceiling_peak_height, 6)}

    def test_knee_walls_face_room(self, parent, attic_dims, material):
        build_interior_shell(parent, attic_dims, material)
        assert polygon(parent, "KneeWall_Left").mesh.face_normal(0)[0] > 0
        assert polygon(parent, "KneeWall_Right").mesh.face_normal(0)[0] < 0


class TestTrusses:

    def test_stations(self):
        stations = truss_stations(40.0, 3.5)
        assert len(stations) == 10
        assert stations[0] == pytest.approx(-16.5)
        assert stations[-1] == pytest.approx(15.0)

    def test_invalid_spacing(self):
        with pytest.raises(ValueError):
            truss_stations(40.0, 0.0)

    def test_counts_follow_dimensions(self, parent):
        dims = AtticDimensions(truss_spacing=2.5)
        assert len(build_trusses(parent, dims, WOOD)) == dims.truss_count - 1
        assert len(build_wing_trusses(parent, dims, WOOD)) == dims.wing_truss_count - 1
        assert dims.wing_truss_count == 8

    def test_rafter_geometry(self):
        rafter = rafter_geometry(Vector3(-5, 4, 0), Vector3(0, 6.5, 0))
        assert rafter.length == pytest.approx(math.hypot(5, 2.5))
        assert rafter.angle == pytest.approx(math.degrees(math.atan2(2.5, 5)))
        assert rafter.center == Vector3(-2.5, 5.25, 0)

    def test_main_trusses(self, parent, attic_dims):
        stations = build_trusses(parent, attic_dims, WOOD)
        assert [s.name for s in stations] == [f"Truss_{i:02d}" for i in range(1, 11)]
        assert names(stations[0]) == ["Stud_Left", "Stud_Right", "CollarTie", "Rafter_L", "Rafter_R", "CenterSupport"]

        rise = attic_dims.ceiling_peak_height - attic_dims.knee_wall_height
        expected = math.degrees(math.atan2(rise, 5.0))
        left = stations[0].find("Rafter_L")
        right = stations[0].find("Rafter_R")
        assert left.rotation.z == pytest.approx(expected)
        assert right.rotation.z == pytest.approx(-expected)
        assert left.scale.x == pytest.approx(math.hypot(5.0, rise))

    def test_wing_trusses(self, parent, attic_dims):
        stations = build_wing_trusses(parent, attic_dims, WOOD)
        assert len(stations) == 4
        assert all(s.position.x == pytest.approx(22.5) for s in stations)
        assert names(stations[0]) == ["WingRafter_L", "WingRafter_R"]
