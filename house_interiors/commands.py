"""
Named generation commands for House Interiors Generator.

Each command runs one full regeneration of its structure in a scene:
materials are resolved, dimensions built, a seeded random source created,
and the structure swapped in as a single undo step. The CLI and the
Blender operators both go through these.
"""

from typing import Callable, Dict, Optional
import logging
import random

from .config import AtticDimensions, BasementDimensions, GeneratorConfig, DEFAULT_CONFIG
from .generators.attic import build_attic, ATTIC_ROOT_NAME
from .generators.basement import build_basement, BASEMENT_ROOT_NAME
from .io.material_library import MaterialLibrary, load_material_library
from .models.scene import Scene, SceneNode
from .processing.regeneration import StructureRegenerator

logger = logging.getLogger(__name__)


def load_materials(config: GeneratorConfig) -> MaterialLibrary:
    """Material library for a run: the configured JSON file, or the built-ins."""
    if config.materials_path:
        return load_material_library(config.materials_path)
    return MaterialLibrary()


def generate_attic(
    scene: Scene,
    config: Optional[GeneratorConfig] = None,
    dims: Optional[AtticDimensions] = None,
    materials: Optional[MaterialLibrary] = None
) -> SceneNode:
    """
    Regenerate the attic.

    Args:
        scene: Scene to modify
        config: Run configuration (default: DEFAULT_CONFIG)
        dims: Attic dimensions (default: AtticDimensions())
        materials: Material library (default: loaded from config)

    Returns:
        The new "Attic" root
    """
    config = config or DEFAULT_CONFIG
    dims = dims or AtticDimensions()
    if materials is None:
        materials = load_materials(config)
    rng = random.Random(config.seed)

    logger.info(f"Generating attic (seed={config.seed}, props={config.prop_count})")
    regenerator = StructureRegenerator(scene, ATTIC_ROOT_NAME, "Generate Attic")
    return regenerator.run(lambda root: build_attic(root, dims, materials, config, rng))


def generate_basement(
    scene: Scene,
    config: Optional[GeneratorConfig] = None,
    dims: Optional[BasementDimensions] = None,
    materials: Optional[MaterialLibrary] = None
) -> SceneNode:
    """
    Regenerate the basement.

    Args:
        scene: Scene to modify
        config: Run configuration (default: DEFAULT_CONFIG)
        dims: Basement dimensions (default: BasementDimensions())
        materials: Material library (default: loaded from config)

    Returns:
        The new "Basement_Root" root
    """
    config = config or DEFAULT_CONFIG
    dims = dims or BasementDimensions()
    if materials is None:
        materials = load_materials(config)

    logger.info(f"Generating basement (stairs={config.stair_strategy})")
    regenerator = StructureRegenerator(scene, BASEMENT_ROOT_NAME, "Generate Basement")
    return regenerator.run(lambda root: build_basement(root, dims, materials, config))


COMMANDS: Dict[str, Callable[..., SceneNode]] = {
    "attic": generate_attic,
    "basement": generate_basement,
}
