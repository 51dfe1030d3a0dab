"""
Roof geometry for House Interiors Generator.

Builds the exterior roof of the L-shaped attic (main gabled block plus one
perpendicular wing) and the interior shell underneath it.

Design assumptions:
- The main ridge runs along Z at x = 0
- Exactly one wing, attached to the main block's +X side and centered on
  z = 0; its ridge runs along X
- Each valley edge (main peak to a valley eave point) is shared by one
  main right-side slope and one wing valley-side triangle, so the roof
  closes without seams

Winding: every polygon is ordered so its right-handed normal points to the
side that should be seen (roof outward, interior shell into the room).
"""

from dataclasses import dataclass
from typing import List
import logging

from ..config import AtticDimensions
from ..models.geometry import Vector3, Opening, RIGHT, UP, FORWARD
from ..models.material import Material
from ..models.scene import SceneNode
from ..utils.math_utils import ridge_height, interior_peak_height
from .openings import WallFrame, build_wall
from .primitives import make_empty, make_polygon

logger = logging.getLogger(__name__)

__all__ = [
    'ridge_height',
    'interior_peak_height',
    'ValleyGeometry',
    'valley_geometry',
    'build_roof_exterior',
    'build_interior_shell',
]

LEFT = Vector3(-1.0, 0.0, 0.0)
BACKWARD = Vector3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class ValleyGeometry:
    """
    Shared points where the main roof meets the wing roof.

    Attributes:
        peak: Main ridge point above the wing's center line
        eave_front: Valley eave point on the wing's +Z side
        eave_back: Valley eave point on the wing's -Z side
        wing_peak: Wing ridge point
        outer_front: eave_front pushed out to the wing's outer wall
        outer_back: eave_back pushed out to the wing's outer wall
    """
    peak: Vector3
    eave_front: Vector3
    eave_back: Vector3
    wing_peak: Vector3
    outer_front: Vector3
    outer_back: Vector3


def valley_geometry(dims: AtticDimensions) -> ValleyGeometry:
    """
    Compute valley intersection points between the main roof and the wing.

    Only a single perpendicular wing centered on the main block is
    supported.
    """
    mw = dims.main_half_width
    wl = dims.wing_length * 0.5
    ww = dims.wing_width * 0.5

    eave_front = Vector3(mw, dims.eave_height, wl)
    eave_back = Vector3(mw, dims.eave_height, -wl)

    return ValleyGeometry(
        peak=Vector3(0.0, dims.main_ridge_height, 0.0),
        eave_front=eave_front,
        eave_back=eave_back,
        wing_peak=Vector3(mw + ww, dims.wing_ridge_height, 0.0),
        outer_front=eave_front + RIGHT * dims.wing_width,
        outer_back=eave_back + RIGHT * dims.wing_width,
    )


def build_roof_exterior(
    parent: SceneNode,
    dims: AtticDimensions,
    shingles: Material,
    wood: Material
) -> SceneNode:
    """
    Build roof slopes and gable ends under a "RoofGeometry" child.

    Args:
        parent: Category parent (RoofShell_Exterior)
        dims: Attic dimensions
        shingles: Material for slopes
        wood: Material for gable ends

    Returns:
        The RoofGeometry node
    """
    mw = dims.main_half_width
    ml = dims.main_half_length
    eave = dims.eave_height
    ridge = dims.main_ridge_height
    valley = valley_geometry(dims)

    roof = make_empty(parent, "RoofGeometry")

    make_polygon(roof, "Main_Left", [
        Vector3(-mw, eave, -ml),
        Vector3(-mw, eave, ml),
        Vector3(0.0, ridge, ml),
        Vector3(0.0, ridge, -ml),
    ], shingles)
    make_polygon(roof, "Main_RightFront", [
        Vector3(mw, eave, ml),
        valley.eave_front,
        valley.peak,
        Vector3(0.0, ridge, ml),
    ], shingles)
    make_polygon(roof, "Main_RightBack", [
        Vector3(0.0, ridge, -ml),
        valley.peak,
        valley.eave_back,
        Vector3(mw, eave, -ml),
    ], shingles)
    # Wing valley side, split at the main peak so each valley edge is shared
    # with one main slope
    make_polygon(roof, "Wing_ValleyFront", [
        valley.eave_front, valley.wing_peak, valley.peak,
    ], shingles)
    make_polygon(roof, "Wing_ValleyBack", [
        valley.peak, valley.wing_peak, valley.eave_back,
    ], shingles)
    make_polygon(roof, "Wing_OuterSide", [
        valley.outer_front, valley.outer_back, valley.wing_peak,
    ], shingles)

    make_polygon(roof, "Gable_MainFront", [
        Vector3(-mw, eave, ml),
        Vector3(mw, eave, ml),
        Vector3(0.0, ridge, ml),
    ], wood)
    make_polygon(roof, "Gable_MainBack", [
        Vector3(mw, eave, -ml),
        Vector3(-mw, eave, -ml),
        Vector3(0.0, ridge, -ml),
    ], wood)
    # Underside of the wing's outer slope
    make_polygon(roof, "Gable_WingSide", [
        valley.outer_back, valley.outer_front, valley.wing_peak,
    ], wood)

    logger.debug(f"Built roof exterior: {len(roof.children)} polygons, ridge {ridge:.3f}")
    return roof


def build_interior_shell(
    parent: SceneNode,
    dims: AtticDimensions,
    material: Material
) -> List[SceneNode]:
    """
    Build the interior shell: perimeter walls, knee walls, ceilings and
    end walls (front with the gable window opening, back solid).

    Args:
        parent: Category parent (InteriorShell)
        dims: Attic dimensions
        material: Shared surface material

    Returns:
        Created nodes
    """
    mw = dims.main_half_width
    ml = dims.main_half_length
    wl = dims.wing_length * 0.5
    ww = dims.wing_width
    eave = dims.eave_height
    knee = dims.knee_wall_height
    hw = dims.flat_ceiling_width * 0.5
    peak = dims.ceiling_peak_height

    nodes: List[SceneNode] = []

    # Perimeter walls (right wall split around the wing junction)
    right_span = ml - wl
    walls = [
        ("Wall_Left", WallFrame(Vector3(-mw, 0.0, 0.0), BACKWARD, UP), dims.main_length),
        ("Wall_Right_Front", WallFrame(Vector3(mw, 0.0, (wl + ml) * 0.5), FORWARD, UP), right_span),
        ("Wall_Right_Back", WallFrame(Vector3(mw, 0.0, -(wl + ml) * 0.5), FORWARD, UP), right_span),
        ("Wall_Wing_Outer", WallFrame(Vector3(mw + ww, 0.0, 0.0), FORWARD, UP), dims.wing_length),
        ("Wall_Wing_Front", WallFrame(Vector3(mw + ww * 0.5, 0.0, wl), LEFT, UP), ww),
        ("Wall_Wing_Back", WallFrame(Vector3(mw + ww * 0.5, 0.0, -wl), RIGHT, UP), ww),
    ]
    for name, frame, width in walls:
        nodes.extend(build_wall(parent, name, frame, width, eave, material))

    # Knee walls face the room between them
    nodes.extend(build_wall(
        parent, "KneeWall_Left", WallFrame(Vector3(-hw, 0.0, 0.0), BACKWARD, UP),
        dims.main_length, knee, material,
    ))
    nodes.extend(build_wall(
        parent, "KneeWall_Right", WallFrame(Vector3(hw, 0.0, 0.0), FORWARD, UP),
        dims.main_length, knee, material,
    ))

    # Ceilings face down
    ceilings = [
        ("Ceiling_Flat", [
            Vector3(-hw, knee, ml),
            Vector3(-hw, knee, -ml),
            Vector3(hw, knee, -ml),
            Vector3(hw, knee, ml),
        ]),
        ("Ceiling_Angled_Left", [
            Vector3(-hw, knee, -ml),
            Vector3(0.0, peak, -ml),
            Vector3(0.0, peak, ml),
            Vector3(-hw, knee, ml),
        ]),
        ("Ceiling_Angled_Right", [
            Vector3(hw, knee, -ml),
            Vector3(hw, knee, ml),
            Vector3(0.0, peak, ml),
            Vector3(0.0, peak, -ml),
        ]),
    ]
    for name, points in ceilings:
        node = make_polygon(parent, name, points, material)
        if node is not None:
            nodes.append(node)

    # End walls: front carries the gable window opening, back is solid
    window = Opening(
        width=dims.gable_window_width,
        height=dims.gable_window_height,
        center_v=dims.gable_window_center_y,
    )
    nodes.extend(build_wall(
        parent, "Front", WallFrame(Vector3(0.0, 0.0, ml), LEFT, UP),
        dims.flat_ceiling_width, knee, material, opening=window, apex_height=peak,
    ))
    nodes.extend(build_wall(
        parent, "BackWall", WallFrame(Vector3(0.0, 0.0, -ml), RIGHT, UP),
        dims.flat_ceiling_width, knee, material, apex_height=peak,
    ))

    logger.debug(f"Built interior shell: {len(nodes)} polygons, ceiling peak {peak:.3f}")
    return nodes
