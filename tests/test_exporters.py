"""Tests for OBJ/MTL and JSON hierarchy export."""
import json

import pytest

from house_interiors.commands import generate_attic, generate_basement
from house_interiors.io.hierarchy_exporter import (
    HIERARCHY_FORMAT,
    dict_to_scene,
    export_hierarchy,
    load_hierarchy,
    scene_to_dict,
)
from house_interiors.io.material_library import MaterialLibrary
from house_interiors.io.obj_exporter import (
    export_obj,
    export_obj_with_materials,
    group_name,
    mesh_nodes,
    validate_obj_file,
)
from house_interiors.models import Material, SceneNode, Vector3
from house_interiors.generators.primitives import make_box


def read_lines(path, prefix):
    with open(path, encoding="utf-8") as f:
        return [line for line in f if line.startswith(prefix)]


class TestObjExport:

    def test_basement_obj_is_valid(self, scene, config, tmp_path):
        root = generate_basement(scene, config)
        path = export_obj_with_materials(root, str(tmp_path), "basement")

        assert validate_obj_file(path) == []
        groups = read_lines(path, "g ")
        assert len(groups) == len(mesh_nodes(root))
        assert (tmp_path / "basement.mtl").exists()
        assert read_lines(path, "mtllib") == ["mtllib basement.mtl\n"]

    def test_attic_obj_with_uvs(self, scene, config, tmp_path):
        root = generate_attic(scene, config)
        path = export_obj_with_materials(root, str(tmp_path), "attic")
        assert validate_obj_file(path) == []
        assert read_lines(path, "vt ")

    def test_world_space_vertices(self, tmp_path, material):
        root = SceneNode("Root", position=Vector3(10, 0, 0))
        make_box(root, "Box", Vector3(2, 2, 2), Vector3(0, 1, 0), material)
        path = str(tmp_path / "box.obj")

        stats = export_obj(root, path)
        assert stats.total_vertices == 8
        assert stats.total_faces == 6
        xs = sorted({float(line.split()[1]) for line in read_lines(path, "v ")})
        assert xs == pytest.approx([9.0, 11.0])

    def test_triangulate(self, tmp_path, material):
        root = SceneNode("Root")
        make_box(root, "Box", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        stats = export_obj(root, str(tmp_path / "tri.obj"), triangulate=True)
        assert stats.total_faces == 12

    def test_group_name_is_path(self, material):
        root = SceneNode("Attic")
        child = root.add_child(SceneNode("Floor"))
        box = make_box(child, "Plank_00", Vector3(1, 1, 1), Vector3(0, 0, 0), material)
        assert group_name(box) == "Attic.Floor.Plank_00"

    def test_mtl_contents(self, scene, config, tmp_path):
        root = generate_basement(scene, config)
        export_obj_with_materials(root, str(tmp_path), "basement")
        materials = read_lines(tmp_path / "basement.mtl", "newmtl")
        assert sorted(m.split()[1] for m in materials) == ["Concrete", "White", "Wood"]

    def test_validate_missing_file(self, tmp_path):
        assert validate_obj_file(str(tmp_path / "missing.obj"))

    def test_validate_bad_index(self, tmp_path):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 4\n", encoding="utf-8")
        errors = validate_obj_file(str(path))
        assert any("out of range" in e for e in errors)


class TestHierarchyExport:

    def test_round_trip(self, scene, config, tmp_path):
        root = generate_attic(scene, config)
        path = str(tmp_path / "attic.json")

        count = export_hierarchy(root, path)
        loaded = load_hierarchy(path)

        assert count == root.node_count()
        assert scene_to_dict(loaded) == scene_to_dict(root)

    def test_layout(self, scene, config):
        data = scene_to_dict(generate_basement(scene, config))
        assert data["format"] == HIERARCHY_FORMAT
        assert data["version"] == 1
        assert set(data["materials"]) == {"Concrete", "White", "Wood"}
        assert data["root"]["name"] == "Basement_Root"
        json.dumps(data)

    def test_light_components_survive(self, scene, config, tmp_path):
        root = generate_basement(scene, config)
        path = str(tmp_path / "basement.json")
        export_hierarchy(root, path)
        loaded = load_hierarchy(path)
        bulb = loaded.find("Lights_Root").find("Bulb_SW")
        assert bulb.components["light"]["color"] == [1.0, 0.9, 0.75]

    def test_resolve_through_library(self, material):
        root = SceneNode("Root")
        make_box(root, "Box", Vector3(1, 1, 1), Vector3(0, 0, 0), Material("Unknown"))
        library = MaterialLibrary()
        loaded = dict_to_scene(scene_to_dict(root), library)
        assert loaded.children[0].mesh.material is library.fallback
        assert library.missing == {"Unknown"}

    def test_rejects_foreign_data(self):
        with pytest.raises(ValueError):
            dict_to_scene({"format": "something-else", "version": 1})
        with pytest.raises(ValueError):
            dict_to_scene({"format": HIERARCHY_FORMAT, "version": 99})

    def test_load_drops_degenerate_faces(self):
        data = {
            "format": HIERARCHY_FORMAT,
            "version": 1,
            "materials": {},
            "root": {
                "name": "Root",
                "position": [0, 0, 0],
                "rotation": [0, 0, 0],
                "scale": [1, 1, 1],
                "mesh": {
                    "vertices": [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
                    "faces": [[0, 1, 2], [0, 1], [0, 1, 7]],
                    "uvs": [],
                    "material": None,
                },
                "children": [],
            },
        }
        loaded = dict_to_scene(data)
        assert loaded.mesh.faces == [[0, 1, 2]]
        assert loaded.mesh.validate() == []
