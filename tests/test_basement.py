"""Tests for the assembled basement."""
import pytest

from house_interiors.commands import generate_basement
from house_interiors.config import GeneratorConfig
from house_interiors.generators.basement import BASEMENT_CATEGORIES, FURNITURE

from conftest import names


@pytest.fixture
def basement(scene, config):
    return generate_basement(scene, config)


class TestBasementStructure:

    def test_root_and_categories(self, basement):
        assert basement.name == "Basement_Root"
        assert names(basement) == list(BASEMENT_CATEGORIES)

    def test_node_count(self, basement):
        # root, 7 categories, 3 floors, 7 walls, 12 steps, landing,
        # 25 joists, 6 utilities, 3 bulbs + 3 pull chains, 4 furniture
        assert basement.node_count() == 72

    def test_floor(self, basement):
        floors = {n.name: n for n in basement.find("Floor_Root").children}
        assert set(floors) == {"Floor_Main", "Floor_West_Front", "Floor_West_Back_Fill"}
        assert floors["Floor_Main"].scale.x == pytest.approx(55.0)
        assert floors["Floor_West_Front"].scale.z == pytest.approx(14.0)
        assert floors["Floor_West_Back_Fill"].scale.z == pytest.approx(16.0)

    def test_walls(self, basement):
        walls = names(basement.find("Walls_Root"))
        assert walls == [
            "EastWall_BelowOpening",
            "EastWall_LeftOpening",
            "EastWall_RightOpening",
            "EastWall_AboveOpening",
            "Wall_North",
            "Wall_South",
            "Wall_West",
        ]

    def test_stairs(self, basement):
        stairs = names(basement.find("Stairs_Root"))
        assert stairs[:2] == ["Step_1", "Step_2"]
        assert stairs[-1] == "Landing"
        assert len(stairs) == 13

    def test_joists(self, basement):
        joists = names(basement.find("Joists_Root"))
        assert len(joists) == 25
        assert joists[:2] == ["Joist_Trimmer_1", "Joist_Trimmer_2"]

    def test_lights(self, basement):
        lights = basement.find("Lights_Root")
        bulb = lights.find("Bulb_Landing")
        chain = lights.find("Pullchain_Landing")
        assert bulb.components["light"]["range"] == 25.0
        assert chain.position.y == pytest.approx(bulb.position.y - 0.5)
        assert len([n for n in names(lights) if n.startswith("Bulb_")]) == 3

    def test_furniture_rests_on_floor(self, basement):
        props = basement.find("Props_Root").children
        assert [p.name for p in props] == [f[0] for f in FURNITURE]
        for prop in props:
            assert prop.position.y - prop.scale.y * 0.5 == pytest.approx(0.0)

    def test_materials(self, basement):
        assert basement.find("Walls_Root").children[0].mesh.material.name == "Concrete"
        assert basement.find("Stairs_Root").children[0].mesh.material.name == "Wood"


class TestStairStrategyConfig:

    def test_riser_box(self, scene, tmp_path):
        basement = generate_basement(scene, GeneratorConfig(stair_strategy="riser_box", output_dir=str(tmp_path)))
        stairs = names(basement.find("Stairs_Root"))
        assert len([n for n in stairs if n.startswith("Riser_")]) == 12
        assert basement.node_count() == 84

    def test_invalid_strategy(self):
        with pytest.raises(ValueError):
            GeneratorConfig(stair_strategy="ladder")
