"""
Attic assembly for House Interiors Generator.

Builds the complete attic under a staged root node:
1. Category parents (RoofShell_Exterior, InteriorShell, Floor, ...)
2. Deck planks, hatch frame, exterior roof, interior shell
3. Trusses (main block and wing)
4. Gable window/vent boxes, light placeholders
5. Scattered props, seeded from the run configuration
"""

from typing import Dict, List
import logging
import random

from ..config import (
    AtticDimensions,
    GeneratorConfig,
    PROP_SIZE_X,
    PROP_SIZE_Y,
    PROP_SIZE_Z,
    PROP_SPREAD,
    MATERIAL_SURFACE,
    MATERIAL_SHINGLES,
    MATERIAL_WOOD,
)
from ..io.material_library import MaterialLibrary
from ..models.geometry import Vector3
from ..models.material import Material
from ..models.scene import SceneNode
from .primitives import make_box, make_empty, add_collider, add_light
from .roof import build_roof_exterior, build_interior_shell
from .trusses import build_trusses, build_wing_trusses
from .scatter import scatter_placements, scatter_props

logger = logging.getLogger(__name__)

ATTIC_ROOT_NAME = "Attic"

ATTIC_CATEGORIES = (
    "RoofShell_Exterior",
    "InteriorShell",
    "Floor",
    "Trusses",
    "Hatch",
    "Windows",
    "Vent",
    "Lights",
    "Props",
)


def build_deck(parent: SceneNode, dims: AtticDimensions, material: Material) -> List[SceneNode]:
    """
    Lay deck planks across the main block and the wing.

    Main planks run along Z for the full main length; wing planks start at
    the main block's +X side and run the wing length. Every plank gets a
    collider.
    """
    pw = dims.plank_width
    t = dims.deck_thickness
    y = t * 0.5

    planks = []
    for i in range(dims.plank_count):
        x = -dims.main_half_width + pw * 0.5 + i * pw
        planks.append(add_collider(make_box(
            parent, f"Plank_{i:02d}", Vector3(pw, t, dims.main_length), Vector3(x, y, 0.0), material,
        )))

    for i in range(dims.wing_plank_count):
        x = dims.main_half_width + pw * 0.5 + i * pw
        planks.append(add_collider(make_box(
            parent, f"WingPlank_{i:02d}", Vector3(pw, t, dims.wing_length), Vector3(x, y, 0.0), material,
        )))

    return planks


def build_hatch(parent: SceneNode, dims: AtticDimensions, material: Material) -> List[SceneNode]:
    """Frame the floor hatch with four boxes resting on the deck."""
    t = dims.hatch_frame_thickness
    w = dims.hatch_width
    l = dims.hatch_length
    cz = dims.hatch_center_z
    y = dims.deck_thickness + t * 0.5

    return [
        make_box(parent, "Hatch_Back", Vector3(w, t, t), Vector3(0.0, y, cz - l * 0.5), material),
        make_box(parent, "Hatch_Front", Vector3(w, t, t), Vector3(0.0, y, cz + l * 0.5), material),
        make_box(parent, "Hatch_Left", Vector3(t, t, l), Vector3(-w * 0.5, y, cz), material),
        make_box(parent, "Hatch_Right", Vector3(t, t, l), Vector3(w * 0.5, y, cz), material),
    ]


def build_gable_details(
    window_parent: SceneNode,
    vent_parent: SceneNode,
    dims: AtticDimensions,
    material: Material
) -> List[SceneNode]:
    """Gable window boxes at both main gables and a vent under the front ridge."""
    ml = dims.main_half_length
    window_size = Vector3(dims.gable_window_width, dims.gable_window_height, dims.gable_window_depth)
    s = dims.gable_vent_size

    return [
        make_box(window_parent, "GableWindow_Front", window_size,
                 Vector3(0.0, dims.gable_window_center_y, ml), material),
        make_box(window_parent, "GableWindow_Back", window_size,
                 Vector3(0.0, dims.gable_window_center_y, -ml), material),
        make_box(vent_parent, "GableVent", Vector3(s, s, dims.gable_vent_depth),
                 Vector3(0.0, dims.main_ridge_height - s, ml), material),
    ]


def build_lights(parent: SceneNode, dims: AtticDimensions) -> List[SceneNode]:
    """
    Bulb placeholders hanging below the knee-wall top.

    Bulbs alternate between the front and back quarter of the main block.
    """
    y = dims.knee_wall_height - dims.light_drop
    z = dims.main_length * 0.25

    bulbs = []
    for i in range(dims.light_count):
        sign = 1.0 if i % 2 == 0 else -1.0
        bulb = make_empty(parent, f"AtticBulb_{i + 1}", Vector3(0.0, y, sign * z))
        bulbs.append(add_light(bulb))

    return bulbs


def build_props(
    parent: SceneNode,
    dims: AtticDimensions,
    material: Material,
    config: GeneratorConfig,
    rng: random.Random
) -> List[SceneNode]:
    """Scatter storage boxes over the flat-ceiling band, clear of the hatch."""
    spread = dims.flat_ceiling_width * PROP_SPREAD

    placements = scatter_placements(
        rng,
        config.prop_count,
        (-spread, spread),
        (-dims.main_half_length, dims.main_half_length),
        (PROP_SIZE_X, PROP_SIZE_Y, PROP_SIZE_Z),
        dims.hatch_clear_zone,
        dims.deck_thickness,
        max_attempts=config.scatter_max_attempts,
    )
    return scatter_props(parent, placements, material)


def build_attic(
    root: SceneNode,
    dims: AtticDimensions,
    materials: MaterialLibrary,
    config: GeneratorConfig,
    rng: random.Random
) -> Dict[str, SceneNode]:
    """
    Build the whole attic under root.

    Args:
        root: Staged, detached root node
        dims: Attic dimensions
        materials: Material library
        config: Run configuration
        rng: Random source for props

    Returns:
        Category parents by name
    """
    surface = materials.get(MATERIAL_SURFACE)
    shingles = materials.get(MATERIAL_SHINGLES)
    wood = materials.get(MATERIAL_WOOD)

    parents = {name: make_empty(root, name) for name in ATTIC_CATEGORIES}

    build_deck(parents["Floor"], dims, surface)
    build_hatch(parents["Hatch"], dims, surface)
    build_roof_exterior(parents["RoofShell_Exterior"], dims, shingles, wood)
    build_interior_shell(parents["InteriorShell"], dims, surface)
    build_trusses(parents["Trusses"], dims, wood)
    build_wing_trusses(parents["Trusses"], dims, wood)
    build_gable_details(parents["Windows"], parents["Vent"], dims, surface)
    build_lights(parents["Lights"], dims)
    build_props(parents["Props"], dims, surface, config, rng)

    logger.info(
        f"Attic built: {root.node_count()} nodes, "
        f"{len(parents['Props'].children)}/{config.prop_count} props placed"
    )
    return parents
