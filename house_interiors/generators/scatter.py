"""
Scatter placement for House Interiors Generator.

Rejection-samples positions for filler boxes inside an X/Z range while
keeping their centers out of a forbidden rectangle. The random source is
injected so a fixed seed reproduces the same layout.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import random

from ..config import SCATTER_MAX_ATTEMPTS, PROP_MAX_YAW_DEG
from ..models.geometry import Vector3, Rect2D
from ..models.material import Material
from ..models.scene import SceneNode
from .primitives import make_box

logger = logging.getLogger(__name__)

Range = Tuple[float, float]


@dataclass(frozen=True)
class Placement:
    """An accepted scatter item."""
    index: int
    position: Vector3
    size: Vector3
    yaw: float  # Degrees about Y


def scatter_placements(
    rng: random.Random,
    count: int,
    x_range: Range,
    z_range: Range,
    size_ranges: Sequence[Range],
    clear_zone: Optional[Rect2D],
    base_y: float,
    max_attempts: int = SCATTER_MAX_ATTEMPTS,
    max_yaw: float = PROP_MAX_YAW_DEG
) -> List[Placement]:
    """
    Place up to count items outside a clear zone.

    Per item the size is sampled once, then positions are drawn uniformly
    until one falls outside clear_zone or max_attempts draws have been
    made; in the latter case the item is skipped. Accepted items rest on
    base_y and get a uniform yaw in [0, max_yaw).

    Args:
        rng: Random source
        count: Number of items to attempt
        x_range: (min, max) X for centers
        z_range: (min, max) Z for centers
        size_ranges: (min, max) per axis for X, Y, Z sizes
        clear_zone: Forbidden rectangle on (x, z), or None
        base_y: Floor elevation items rest on
        max_attempts: Position draws per item
        max_yaw: Exclusive upper bound of the yaw

    Returns:
        Accepted placements; index is the item's attempt index
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    (sx_min, sx_max), (sy_min, sy_max), (sz_min, sz_max) = size_ranges

    placements = []
    for i in range(count):
        size = Vector3(
            rng.uniform(sx_min, sx_max),
            rng.uniform(sy_min, sy_max),
            rng.uniform(sz_min, sz_max),
        )

        position = None
        for _ in range(max_attempts):
            x = rng.uniform(*x_range)
            z = rng.uniform(*z_range)
            if clear_zone is None or not clear_zone.contains(x, z):
                position = Vector3(x, base_y + size.y * 0.5, z)
                break

        if position is None:
            logger.debug(f"Scatter item {i}: no free position after {max_attempts} attempts, skipped")
            continue

        # random() is in [0, 1) so the yaw never reaches max_yaw
        placements.append(Placement(i, position, size, rng.random() * max_yaw))

    logger.debug(f"Scattered {len(placements)}/{count} items")
    return placements


def scatter_props(
    parent: SceneNode,
    placements: Sequence[Placement],
    material: Material
) -> List[SceneNode]:
    """Create one Box_{index:02d} node per placement."""
    return [
        make_box(
            parent,
            f"Box_{p.index:02d}",
            p.size,
            p.position,
            material,
            rotation=Vector3(0.0, p.yaw, 0.0),
        )
        for p in placements
    ]
