"""
Material model for House Interiors Generator.

Materials are shared references: many meshes point at one Material and
none of them own it.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Material:
    """Named surface material."""
    name: str
    color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    metallic: float = 0.0
    glossiness: float = 0.2


# Fallback substituted when a requested material is missing
DEFAULT_MATERIAL_NAME = "Default-Diffuse"
DEFAULT_MATERIAL = Material(
    name=DEFAULT_MATERIAL_NAME,
    color=(0.8, 0.8, 0.8, 1.0),
    metallic=0.0,
    glossiness=0.5,
)
