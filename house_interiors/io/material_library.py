"""
Material library for House Interiors Generator.

Resolves named materials for the generators. A missing name never fails a
run: the documented fallback material (Default-Diffuse) is substituted and
a warning is logged.

Library file format (JSON):
    {
        "materials": [
            {"name": "White", "color": [1, 1, 1, 1], "metallic": 0.0, "glossiness": 0.2}
        ]
    }
"""

from typing import Dict, Iterable, Optional, Set
import json
import logging

from ..models.material import Material, DEFAULT_MATERIAL

logger = logging.getLogger(__name__)


# Built-in materials available without a library file
BUILTIN_MATERIALS = (
    Material("White", color=(1.0, 1.0, 1.0, 1.0), metallic=0.0, glossiness=0.2),
    Material("Shingles", color=(0.35, 0.33, 0.32, 1.0), metallic=0.0, glossiness=0.1),
    Material("Wood", color=(0.62, 0.47, 0.31, 1.0), metallic=0.0, glossiness=0.15),
    Material("Concrete", color=(0.6, 0.6, 0.58, 1.0), metallic=0.0, glossiness=0.05),
)


class MaterialLibrary:
    """
    Named material lookup with fallback substitution.
    """

    def __init__(
        self,
        materials: Optional[Iterable[Material]] = None,
        fallback: Material = DEFAULT_MATERIAL
    ):
        """
        Initialize library.

        Args:
            materials: Materials to register (defaults to BUILTIN_MATERIALS)
            fallback: Material substituted for missing names
        """
        self.fallback = fallback
        self._materials: Dict[str, Material] = {}
        self._missing: Set[str] = set()

        for material in (BUILTIN_MATERIALS if materials is None else materials):
            self.register(material)

    def register(self, material: Material) -> None:
        """Add or replace a material by name."""
        self._materials[material.name] = material

    def has(self, name: str) -> bool:
        return name in self._materials

    def get(self, name: str) -> Material:
        """
        Get a material by name.

        Missing names resolve to the fallback material; the first miss per
        name is logged as a warning.
        """
        material = self._materials.get(name)
        if material is not None:
            return material

        if name not in self._missing:
            self._missing.add(name)
            logger.warning(
                f"Material '{name}' not found. Using {self.fallback.name}."
            )
        return self.fallback

    def resolve(self, name: str) -> Material:
        """
        Resolve a material name read back from an exported hierarchy.

        The fallback name itself resolves silently.
        """
        if name == self.fallback.name:
            return self.fallback
        return self.get(name)

    @property
    def missing(self) -> Set[str]:
        """Names that were requested but not found."""
        return set(self._missing)

    def names(self):
        return sorted(self._materials)

    def __len__(self) -> int:
        return len(self._materials)


def load_material_library(filepath: str, include_builtin: bool = True) -> MaterialLibrary:
    """
    Load a material library from a JSON file.

    Args:
        filepath: Path to library JSON
        include_builtin: If True, file entries are layered over the built-ins

    Returns:
        MaterialLibrary

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a valid library
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    entries = data.get('materials') if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Material library {filepath} has no 'materials' list")

    library = MaterialLibrary(BUILTIN_MATERIALS if include_builtin else ())

    for i, entry in enumerate(entries):
        if 'name' not in entry:
            raise ValueError(f"Material entry {i} in {filepath} has no name")

        color = tuple(float(c) for c in entry.get('color', (1.0, 1.0, 1.0, 1.0)))
        if len(color) == 3:
            color = color + (1.0,)
        if len(color) != 4:
            raise ValueError(f"Material '{entry['name']}' color must have 3 or 4 components")

        library.register(Material(
            name=str(entry['name']),
            color=color,
            metallic=float(entry.get('metallic', 0.0)),
            glossiness=float(entry.get('glossiness', 0.2)),
        ))

    logger.info(f"Loaded {len(entries)} materials from {filepath}")
    return library
