"""Tests for the primitive mesh factory."""
import pytest

from house_interiors.generators.primitives import (
    add_collider,
    add_light,
    delete_faces_facing,
    extrude_boundary_to_plane,
    make_box,
    make_empty,
    make_polygon,
)
from house_interiors.models import Vector3


class TestMakeBox:

    def test_unit_cube_scaled_by_node(self, parent, material):
        box = make_box(parent, "Box", Vector3(2, 3, 4), Vector3(1, 1, 1), material)
        assert box.parent is parent
        assert box.mesh.vertex_count() == 8
        assert box.mesh.face_count() == 6
        assert box.scale == Vector3(2, 3, 4)
        assert box.mesh.compute_bounds() == ((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5))

    def test_baked_size(self, parent, material):
        box = make_box(parent, "Box", Vector3(2, 3, 4), Vector3(0, 0, 0), material, bake_size=True)
        assert box.scale == Vector3(1, 1, 1)
        assert box.mesh.compute_bounds() == ((-1.0, -1.5, -2.0), (1.0, 1.5, 2.0))

    def test_faces_point_outward(self, parent, material):
        box = make_box(parent, "Box", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        mesh = box.mesh
        for i, face in enumerate(mesh.faces):
            center = [sum(mesh.vertices[v][k] for v in face) / 4 for k in range(3)]
            normal = mesh.face_normal(i)
            assert sum(c * n for c, n in zip(center, normal)) > 0

    def test_shared_material_reference(self, parent, material):
        a = make_box(parent, "A", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        b = make_box(parent, "B", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        assert a.mesh.material is b.mesh.material is material


class TestMakePolygon:

    def test_fan_triangulation(self, parent, material):
        points = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(1, 1, 0), Vector3(0.5, 1.5, 0), Vector3(0, 1, 0)]
        node = make_polygon(parent, "Pent", points, material)
        assert node.mesh.vertices == [(p.x, p.y, p.z) for p in points]
        assert node.mesh.faces == [[0, 1, 2], [0, 2, 3], [0, 3, 4]]
        assert len(node.mesh.uvs) == 5

    def test_winding_sets_normal(self, parent, material):
        ccw = [Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(1, 1, 0)]
        node = make_polygon(parent, "Tri", ccw, material)
        assert node.mesh.face_normal(0) == pytest.approx((0.0, 0.0, 1.0))

    def test_too_few_points(self, parent, material):
        assert make_polygon(parent, "Line", [Vector3(0, 0, 0), Vector3(1, 0, 0)], material) is None
        assert parent.children == []


class TestComponents:

    def test_empty_and_collider(self, parent):
        node = add_collider(make_empty(parent, "Empty", Vector3(1, 2, 3)))
        assert node.mesh is None
        assert node.position == Vector3(1, 2, 3)
        assert node.components == {"collider": "mesh"}

    def test_light_defaults(self, parent):
        node = add_light(make_empty(parent, "Bulb"))
        assert node.components["light"] == {
            "type": "point",
            "range": 25.0,
            "color": [1.0, 0.9, 0.75],
            "intensity": 1.8,
            "shadows": "soft",
        }


class TestExtrusion:

    def test_delete_bottom_face_and_extrude(self, parent, material):
        box = make_box(parent, "Tread", Vector3(1, 0.2, 4), Vector3(0, 3, 0), material, bake_size=True)
        mesh = box.mesh

        removed = delete_faces_facing(mesh, Vector3(0, -1, 0))
        assert len(removed) == 1
        assert mesh.face_count() == 5

        added = extrude_boundary_to_plane(mesh, removed[0], -3.0)
        assert added == 5
        assert mesh.vertex_count() == 12
        assert mesh.face_count() == 10
        assert mesh.compute_bounds()[0][1] == pytest.approx(-3.0)
        assert mesh.validate() == []

    def test_cap_faces_down(self, parent, material):
        box = make_box(parent, "Tread", Vector3(1, 0.2, 1), Vector3(0, 0, 0), material, bake_size=True)
        loop = delete_faces_facing(box.mesh, Vector3(0, -1, 0))[0]
        extrude_boundary_to_plane(box.mesh, loop, -2.0)
        assert box.mesh.face_normal(box.mesh.face_count() - 1) == pytest.approx((0.0, -1.0, 0.0))

    def test_short_loop_ignored(self, parent, material):
        box = make_box(parent, "Box", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        assert extrude_boundary_to_plane(box.mesh, [0, 1], -1.0) == 0
