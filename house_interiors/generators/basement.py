"""
Basement assembly for House Interiors Generator.

The basement occupies x in [0, length_x], z in [0, depth_z] with its floor
at ground_y. Everything is built from boxes: floor slabs, the perimeter
walls (east wall cut around its window), the stair run and landing, the
joist grid above the walls, utilities, light placeholders and furniture.
"""

from typing import Dict, List, Optional
import logging

from ..config import (
    BasementDimensions,
    GeneratorConfig,
    MATERIAL_SURFACE,
    MATERIAL_WOOD,
    MATERIAL_CONCRETE,
)
from ..io.material_library import MaterialLibrary
from ..models.geometry import Vector3, UP, FORWARD
from ..models.material import Material
from ..models.scene import SceneNode
from .joists import build_joists
from .openings import WallFrame, build_slab_wall
from .primitives import make_box, make_empty, add_light
from .stairs import StairStrategy, build_stairs, build_landing, get_stair_strategy

logger = logging.getLogger(__name__)

BASEMENT_ROOT_NAME = "Basement_Root"

BASEMENT_CATEGORIES = (
    "Joists_Root",
    "Walls_Root",
    "Floor_Root",
    "Stairs_Root",
    "Utilities_Root",
    "Lights_Root",
    "Props_Root",
)

# (name, center x, center y above ground, center z, size); cylinders are
# approximated by their bounding boxes
UTILITIES = (
    ("SupportPost", 30.0, 3.5, 15.0, Vector3(0.5, 7.0, 0.5)),
    ("BreakerPanel", 7.5, 4.0, 29.45, Vector3(1.0, 1.5, 0.1)),
    ("WaterHeater", 55.0, 3.0, 25.0, Vector3(2.0, 6.0, 2.0)),
    ("SumpPit", 55.0, -0.25, 25.0, Vector3(1.5, 0.5, 1.5)),
    ("FloorDrain", 55.0, 0.09, 25.0, Vector3(0.5, 0.02, 0.5)),
    ("SumpPumpSwitch", 55.0, 1.0, 25.0, Vector3(0.2, 0.2, 0.2)),
)

# (location, x, bulb y, z); the pull chain hangs 0.5 below the bulb
LIGHT_FIXTURES = (
    ("Landing", 2.5, 6.5, 12.5),
    ("Midroom", 30.0, 6.8, 8.0),
    ("SW", 8.0, 6.8, 25.0),
)

PULLCHAIN_DROP = 0.5
PULLCHAIN_SIZE = 0.1

# (name, center x, center z, size); furniture rests on the floor
FURNITURE = (
    ("FilingCab_Barricade", 18.0, 12.0, Vector3(6.0, 2.5, 1.0)),
    ("DeskStack", 40.0, 7.0, Vector3(5.0, 3.0, 2.5)),
    ("ChairPile", 47.0, 12.0, Vector3(4.0, 4.0, 4.0)),
    ("Copier", 35.0, 23.0, Vector3(3.0, 2.0, 3.0)),
)


def build_floor(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    """Floor slabs: the main slab plus the west strip split front/back."""
    t = dims.slab_thickness
    y = dims.ground_y + t * 0.5
    ws = dims.west_strip_width
    main_width = dims.length_x - ws
    back_depth = dims.depth_z - dims.west_front_depth

    return [
        make_box(parent, "Floor_Main", Vector3(main_width, t, dims.depth_z),
                 Vector3(ws + main_width * 0.5, y, dims.depth_z * 0.5), material),
        make_box(parent, "Floor_West_Front", Vector3(ws, t, dims.west_front_depth),
                 Vector3(ws * 0.5, y, dims.west_front_depth * 0.5), material),
        make_box(parent, "Floor_West_Back_Fill", Vector3(ws, t, back_depth),
                 Vector3(ws * 0.5, y, dims.west_front_depth + back_depth * 0.5), material),
    ]


def build_walls(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    """
    Perimeter walls.

    The east wall is a slab wall cut around the window; north, south and
    west walls are solid boxes.
    """
    h = dims.wall_height
    t = dims.wall_thickness
    cy = dims.wall_center_y
    ws = dims.west_strip_width
    north_width = dims.length_x - ws

    east_frame = WallFrame(Vector3(dims.east_wall_x, dims.ground_y, dims.depth_z * 0.5), FORWARD, UP)
    nodes = build_slab_wall(
        parent, "EastWall", east_frame, dims.depth_z, h, t, material, opening=dims.east_window,
    )

    nodes.append(make_box(parent, "Wall_North", Vector3(north_width, h, t),
                          Vector3(ws + north_width * 0.5, cy, dims.depth_z - t * 0.5), material))
    nodes.append(make_box(parent, "Wall_South", Vector3(dims.length_x, h, t),
                          Vector3(dims.length_x * 0.5, cy, t * 0.5), material))
    nodes.append(make_box(parent, "Wall_West", Vector3(t, h, dims.depth_z),
                          Vector3(t * 0.5, cy, dims.depth_z * 0.5), material))
    return nodes


def build_utilities(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    return [
        make_box(parent, name, size, Vector3(x, dims.ground_y + y, z), material)
        for name, x, y, z, size in UTILITIES
    ]


def build_light_fixtures(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    """Bulb placeholders (light metadata) with a pull-chain box under each."""
    nodes = []
    for location, x, y, z in LIGHT_FIXTURES:
        bulb = make_empty(parent, f"Bulb_{location}", Vector3(x, dims.ground_y + y, z))
        nodes.append(add_light(bulb))
        nodes.append(make_box(
            parent,
            f"Pullchain_{location}",
            Vector3(PULLCHAIN_SIZE, PULLCHAIN_SIZE, PULLCHAIN_SIZE),
            Vector3(x, dims.ground_y + y - PULLCHAIN_DROP, z),
            material,
        ))
    return nodes


def build_furniture(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    return [
        make_box(parent, name, size, Vector3(x, dims.ground_y + size.y * 0.5, z), material)
        for name, x, z, size in FURNITURE
    ]


def build_basement(
    root: SceneNode,
    dims: BasementDimensions,
    materials: MaterialLibrary,
    config: GeneratorConfig,
    strategy: Optional[StairStrategy] = None
) -> Dict[str, SceneNode]:
    """
    Build the whole basement under root.

    Args:
        root: Staged, detached root node
        dims: Basement dimensions
        materials: Material library
        config: Run configuration
        strategy: Stair fill strategy (default: config.stair_strategy)

    Returns:
        Category parents by name
    """
    if strategy is None:
        strategy = get_stair_strategy(config.stair_strategy)

    concrete = materials.get(MATERIAL_CONCRETE)
    wood = materials.get(MATERIAL_WOOD)
    surface = materials.get(MATERIAL_SURFACE)

    parents = {name: make_empty(root, name) for name in BASEMENT_CATEGORIES}

    build_floor(parents["Floor_Root"], dims, concrete)
    build_walls(parents["Walls_Root"], dims, concrete)
    build_stairs(parents["Stairs_Root"], dims, wood, strategy)
    build_landing(parents["Stairs_Root"], dims, concrete)
    build_joists(parents["Joists_Root"], dims, wood)
    build_utilities(parents["Utilities_Root"], dims, surface)
    build_light_fixtures(parents["Lights_Root"], dims, surface)
    build_furniture(parents["Props_Root"], dims, surface)

    logger.info(f"Basement built: {root.node_count()} nodes, stairs '{strategy.name}'")
    return parents
