"""Tests for the assembled attic."""
import pytest

from house_interiors.commands import generate_attic
from house_interiors.config import GeneratorConfig
from house_interiors.generators.attic import ATTIC_CATEGORIES

from conftest import names


@pytest.fixture
def attic(scene, config):
    return generate_attic(scene, config)


class TestAtticStructure:

    def test_root_and_categories(self, attic, scene):
        assert attic.name == "Attic"
        assert scene.roots == [attic]
        assert names(attic) == list(ATTIC_CATEGORIES)

    def test_deck_planks_have_colliders(self, attic, attic_dims):
        planks = attic.find("Floor").children
        assert len(planks) == attic_dims.plank_count + attic_dims.wing_plank_count
        assert all(p.components.get("collider") == "mesh" for p in planks)
        assert planks[0].name == "Plank_00"
        assert planks[-1].name == "WingPlank_39"

    def test_trusses(self, attic):
        trusses = names(attic.find("Trusses"))
        assert len([n for n in trusses if n.startswith("Truss_")]) == 10
        assert len([n for n in trusses if n.startswith("WingTruss_")]) == 4

    def test_roof_and_shell(self, attic):
        assert names(attic.find("RoofShell_Exterior")) == ["RoofGeometry"]
        shell = names(attic.find("InteriorShell"))
        assert "Front_LeftOpening" in shell
        assert "Front_AboveOpening" not in shell
        assert "BackWall" in shell

    def test_hatch_windows_vent(self, attic, attic_dims):
        assert len(attic.find("Hatch").children) == 4
        assert names(attic.find("Windows")) == ["GableWindow_Front", "GableWindow_Back"]
        vent = attic.find("Vent").children[0]
        assert vent.name == "GableVent"
        assert vent.position.y == pytest.approx(attic_dims.main_ridge_height - attic_dims.gable_vent_size)

    def test_lights(self, attic, attic_dims):
        bulbs = attic.find("Lights").children
        assert [b.name for b in bulbs] == ["AtticBulb_1", "AtticBulb_2"]
        assert [b.position.z for b in bulbs] == pytest.approx([10.0, -10.0])
        for bulb in bulbs:
            assert bulb.mesh is None
            assert bulb.position.y == pytest.approx(attic_dims.knee_wall_height - attic_dims.light_drop)
            assert bulb.components["light"]["type"] == "point"

    def test_props_avoid_hatch(self, attic, attic_dims):
        props = attic.find("Props").children
        assert len(props) == 15
        zone = attic_dims.hatch_clear_zone
        for prop in props:
            assert prop.name.startswith("Box_")
            assert not zone.contains(prop.position.x, prop.position.z)

    def test_materials(self, attic):
        roof = attic.find("RoofShell_Exterior").children[0]
        assert roof.find("Main_Left").mesh.material.name == "Shingles"
        assert roof.find("Gable_MainFront").mesh.material.name == "Wood"
        assert attic.find("Floor").children[0].mesh.material.name == "White"


class TestAtticConfig:

    def test_no_props(self, scene, tmp_path):
        attic = generate_attic(scene, GeneratorConfig(prop_count=0, output_dir=str(tmp_path)))
        assert attic.find("Props").children == []

    def test_seed_changes_props(self, tmp_path):
        from house_interiors.models import Scene

        a = generate_attic(Scene(), GeneratorConfig(seed=1, output_dir=str(tmp_path)))
        b = generate_attic(Scene(), GeneratorConfig(seed=2, output_dir=str(tmp_path)))
        pos_a = [p.position for p in a.find("Props").children]
        pos_b = [p.position for p in b.find("Props").children]
        assert pos_a != pos_b

    def test_all_meshes_valid(self, attic):
        for node in attic.walk():
            if node.mesh is not None:
                assert node.mesh.validate() == [], node.path()
