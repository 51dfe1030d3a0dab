"""
Floor joist generator for House Interiors Generator.

Joists run along X on top of the basement walls, one row every
joist_spacing along Z. Rows that cross the stairwell opening are split
into two shorter joists (_A before the opening, _B after it), and two
trimmer joists frame the opening's long edges.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from ..config import BasementDimensions
from ..models.geometry import Vector3, Rect2D
from ..models.material import Material
from ..models.scene import SceneNode
from .primitives import make_box

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoistSegment:
    """One joist: an X-aligned member at a fixed Z."""
    name: str
    z: float
    x_start: float
    x_end: float
    is_trimmer: bool = False

    @property
    def length(self) -> float:
        return self.x_end - self.x_start

    @property
    def center_x(self) -> float:
        return (self.x_start + self.x_end) * 0.5


def layout_joists(
    span_start: float,
    span_end: float,
    first: float,
    spacing: float,
    limit: float,
    opening: Optional[Rect2D] = None
) -> List[JoistSegment]:
    """
    Lay out the joist grid.

    Rows are placed at first, first + spacing, ... while below limit. A row
    strictly inside the opening's Z band becomes two segments,
    [span_start, opening.x_min] and [opening.x_max, span_end]; every other
    row spans the full width. With an opening, two trimmers span its X range
    at its Z bounds and come first in the result.

    Args:
        span_start: X where joists start
        span_end: X where joists end
        first: Z of the first row
        spacing: Z distance between rows
        limit: Exclusive Z limit for rows
        opening: Optional opening (X by Z)

    Returns:
        Joist segments
    """
    if spacing <= 0:
        raise ValueError(f"Joist spacing must be positive, got {spacing}")

    segments: List[JoistSegment] = []

    if opening is not None:
        segments.append(JoistSegment("Joist_Trimmer_1", opening.y_min, opening.x_min, opening.x_max, True))
        segments.append(JoistSegment("Joist_Trimmer_2", opening.y_max, opening.x_min, opening.x_max, True))

    row = 0
    z = first
    while z < limit:
        name = f"Joist_{z:.2f}"
        if opening is not None and opening.y_min < z < opening.y_max:
            segments.append(JoistSegment(f"{name}_A", z, span_start, opening.x_min))
            segments.append(JoistSegment(f"{name}_B", z, opening.x_max, span_end))
        else:
            segments.append(JoistSegment(name, z, span_start, span_end))

        row += 1
        z = first + row * spacing

    return segments


def build_joists(parent: SceneNode, dims: BasementDimensions, material: Material) -> List[SceneNode]:
    """
    Build the joist grid with the stairwell opening.

    Args:
        parent: Parent node (Joists_Root)
        dims: Basement dimensions
        material: Shared material

    Returns:
        Created joist nodes
    """
    segments = layout_joists(
        0.0,
        dims.length_x,
        dims.joist_first_z,
        dims.joist_spacing,
        dims.depth_z,
        dims.stair_opening,
    )

    nodes = []
    for seg in segments:
        if seg.length <= 0:
            logger.debug(f"Skipping joist '{seg.name}': zero length")
            continue

        nodes.append(make_box(
            parent,
            seg.name,
            Vector3(seg.length, dims.joist_height, dims.joist_thickness),
            Vector3(seg.center_x, dims.joist_y, seg.z),
            material,
        ))

    logger.debug(f"Built {len(nodes)} joists")
    return nodes
