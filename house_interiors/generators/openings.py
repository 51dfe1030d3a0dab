"""
Wall and opening decomposition for House Interiors Generator.

A wall is described in its own 2D frame: u runs across the wall and is
centered on 0, v runs up from the wall base at 0. An opening (window, door)
is cut by splitting the wall into up to four strips around it:

    +-----------------------+
    |         above         |
    +------+-------+--------+
    | left |opening| right  |
    +------+-------+--------+
    |         below         |
    +-----------------------+

Gable walls end in a peak at apex_height; their outline is the pentagon
(bl, br, tr, peak, tl) and the "above" strip rises to the peak.

Splitting is pure interval arithmetic on the opening's extents. An opening
that leaves the wall outline gives degenerate strips; build_wall detects
this and clips each strip to the outline before emitting geometry.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from ..models.geometry import Point2D, Vector3, Opening
from ..models.material import Material
from ..models.scene import SceneNode
from ..utils.polygon_utils import (
    polygon_area,
    point_in_convex_polygon,
    clip_polygon_convex,
)
from .primitives import make_box, make_polygon

logger = logging.getLogger(__name__)

# Piece names (strip order)
PIECE_WALL = "wall"
PIECE_BELOW = "below"
PIECE_LEFT = "left"
PIECE_RIGHT = "right"
PIECE_ABOVE = "above"

_EPSILON = 1e-6


@dataclass
class WallPiece:
    """
    One polygon of a decomposed wall.

    Attributes:
        name: Piece name ("wall", "below", "left", "right", "above")
        points: Outline in the wall's (u, v) frame, counter-clockwise
        bounds: (u_min, v_min, u_max, v_max) strip the piece was split from
    """
    name: str
    points: List[Point2D] = field(default_factory=list)
    bounds: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def area(self) -> float:
        return polygon_area(self.points)

    def is_degenerate(self) -> bool:
        """True if the piece has no usable area."""
        return len(self.points) < 3 or self.area() <= _EPSILON


@dataclass(frozen=True)
class WallFrame:
    """
    Placement of a wall's (u, v) frame in 3D.

    The wall's front face (the side a counter-clockwise (u, v) outline
    faces) points along u_axis x v_axis.
    """
    origin: Vector3
    u_axis: Vector3
    v_axis: Vector3

    @property
    def normal(self) -> Vector3:
        return self.u_axis.cross(self.v_axis)

    def point(self, u: float, v: float) -> Vector3:
        """Map a local (u, v) coordinate to 3D."""
        return self.origin + self.u_axis * u + self.v_axis * v

    def to_3d(self, points: Sequence[Point2D]) -> List[Vector3]:
        return [self.point(p.x, p.y) for p in points]


def wall_outline(width: float, height: float, apex_height: Optional[float] = None) -> List[Point2D]:
    """
    Outline of a wall, counter-clockwise.

    Args:
        width: Wall width (u spans -width/2 .. width/2)
        height: Wall (eave) height
        apex_height: Peak height for a gable wall, or None

    Returns:
        Rectangle (bl, br, tr, tl) or pentagon (bl, br, tr, peak, tl)
    """
    hw = width * 0.5
    bl = Point2D(-hw, 0.0)
    br = Point2D(hw, 0.0)
    tr = Point2D(hw, height)
    tl = Point2D(-hw, height)

    if apex_height is None:
        return [bl, br, tr, tl]
    return [bl, br, tr, Point2D(0.0, apex_height), tl]


def _rect(u0: float, v0: float, u1: float, v1: float) -> List[Point2D]:
    return [Point2D(u0, v0), Point2D(u1, v0), Point2D(u1, v1), Point2D(u0, v1)]


def decompose_wall(
    width: float,
    height: float,
    opening: Optional[Opening] = None,
    apex_height: Optional[float] = None
) -> List[WallPiece]:
    """
    Split a wall into the polygons that surround an opening.

    Without an opening the result is a single piece (the wall outline).
    With an opening the result is four pieces in the order below, left,
    right, above. "below" and "above" span the full wall width; "left" and
    "right" span the opening's height band. For a gable wall "above" is the
    5-point polygon (otl, otr, tr, peak, tl).

    Args:
        width: Wall width
        height: Wall (eave) height
        opening: Optional opening in the wall's (u, v) frame
        apex_height: Peak height for a gable wall, or None

    Returns:
        List of WallPiece
    """
    hw = width * 0.5
    top = height if apex_height is None else apex_height

    if opening is None:
        return [WallPiece(PIECE_WALL, wall_outline(width, height, apex_height), (-hw, 0.0, hw, top))]

    u0, u1 = opening.u_min, opening.u_max
    v0, v1 = opening.v_min, opening.v_max

    pieces = [
        WallPiece(PIECE_BELOW, _rect(-hw, 0.0, hw, v0), (-hw, 0.0, hw, v0)),
        WallPiece(PIECE_LEFT, _rect(-hw, v0, u0, v1), (-hw, v0, u0, v1)),
        WallPiece(PIECE_RIGHT, _rect(u1, v0, hw, v1), (u1, v0, hw, v1)),
    ]

    if apex_height is None:
        above = _rect(-hw, v1, hw, height)
    else:
        above = [
            Point2D(-hw, v1),
            Point2D(hw, v1),
            Point2D(hw, height),
            Point2D(0.0, apex_height),
            Point2D(-hw, height),
        ]
    pieces.append(WallPiece(PIECE_ABOVE, above, (-hw, v1, hw, top)))

    return pieces


def opening_fits(
    width: float,
    height: float,
    opening: Opening,
    apex_height: Optional[float] = None
) -> bool:
    """
    Check that the plain interval split around an opening stays inside the
    wall outline.

    On a gable wall an opening that rises above the eave fails even when
    its corners sit under the slopes: the side strips then reach above the
    eave corners and the "above" piece folds over itself.
    """
    if opening.width <= 0 or opening.height <= 0:
        return False

    outline = wall_outline(width, height, apex_height)
    return all(
        point_in_convex_polygon(p, outline)
        for piece in decompose_wall(width, height, opening, apex_height)
        for p in piece.points
    )


def clip_pieces_to_outline(pieces: Sequence[WallPiece], outline: Sequence[Point2D]) -> List[WallPiece]:
    """
    Clip each piece's strip to a convex wall outline.

    Pieces whose strip is inverted or lies fully outside the outline are
    dropped.

    Args:
        pieces: Pieces from decompose_wall
        outline: Convex wall outline, counter-clockwise

    Returns:
        Clipped pieces with at least 3 points and non-zero area
    """
    result = []
    for piece in pieces:
        u0, v0, u1, v1 = piece.bounds
        if u1 - u0 <= _EPSILON or v1 - v0 <= _EPSILON:
            logger.debug(f"Dropping wall piece '{piece.name}': empty strip")
            continue

        points = clip_polygon_convex(_rect(u0, v0, u1, v1), outline)
        clipped = WallPiece(piece.name, points)
        if clipped.is_degenerate():
            logger.debug(f"Dropping wall piece '{piece.name}': outside wall outline")
            continue

        us = [p.x for p in points]
        vs = [p.y for p in points]
        clipped.bounds = (min(us), min(vs), max(us), max(vs))
        result.append(clipped)

    return result


def piece_node_name(prefix: str, piece_name: str) -> str:
    """Node name for a piece: the prefix alone, or "{prefix}_{Piece}Opening"."""
    if piece_name == PIECE_WALL:
        return prefix
    return f"{prefix}_{piece_name.capitalize()}Opening"


def build_wall(
    parent: SceneNode,
    prefix: str,
    frame: WallFrame,
    width: float,
    height: float,
    material: Material,
    opening: Optional[Opening] = None,
    apex_height: Optional[float] = None
) -> List[SceneNode]:
    """
    Build a thin (polygon) wall, cut around an optional opening.

    Args:
        parent: Parent node
        prefix: Node name prefix
        frame: Placement of the wall's (u, v) frame
        width: Wall width
        height: Wall (eave) height
        material: Shared material
        opening: Optional opening
        apex_height: Peak height for a gable wall, or None

    Returns:
        Created polygon nodes
    """
    pieces = decompose_wall(width, height, opening, apex_height)

    if opening is not None and not opening_fits(width, height, opening, apex_height):
        logger.info(f"Opening in '{prefix}' exceeds the wall outline; clipping wall pieces")
        pieces = clip_pieces_to_outline(pieces, wall_outline(width, height, apex_height))

    nodes = []
    for piece in pieces:
        if piece.is_degenerate():
            logger.debug(f"Skipping wall piece '{piece.name}' of '{prefix}': zero area")
            continue

        node = make_polygon(parent, piece_node_name(prefix, piece.name), frame.to_3d(piece.points), material)
        if node is not None:
            nodes.append(node)

    return nodes


def _axis_extent(axis: Vector3, length: float) -> Vector3:
    return Vector3(abs(axis.x) * length, abs(axis.y) * length, abs(axis.z) * length)


def build_slab_wall(
    parent: SceneNode,
    prefix: str,
    frame: WallFrame,
    width: float,
    height: float,
    thickness: float,
    material: Material,
    opening: Optional[Opening] = None
) -> List[SceneNode]:
    """
    Build a solid rectangular wall as boxes, cut around an optional opening.

    The frame's axes must be world-axis aligned. Each strip becomes one box
    of the given thickness, centered on the wall plane.

    Args:
        parent: Parent node
        prefix: Node name prefix
        frame: Placement of the wall's (u, v) frame
        width: Wall width
        height: Wall height
        thickness: Wall thickness along the frame normal
        material: Shared material
        opening: Optional opening

    Returns:
        Created box nodes
    """
    pieces = decompose_wall(width, height, opening)

    if opening is not None and not opening_fits(width, height, opening):
        logger.info(f"Opening in '{prefix}' exceeds the wall outline; clipping wall pieces")
        pieces = clip_pieces_to_outline(pieces, wall_outline(width, height))

    nodes = []
    for piece in pieces:
        u0, v0, u1, v1 = piece.bounds
        du = u1 - u0
        dv = v1 - v0
        if du <= _EPSILON or dv <= _EPSILON:
            logger.debug(f"Skipping slab piece '{piece.name}' of '{prefix}': zero extent")
            continue

        size = (
            _axis_extent(frame.u_axis, du)
            + _axis_extent(frame.v_axis, dv)
            + _axis_extent(frame.normal, thickness)
        )
        center = frame.point((u0 + u1) * 0.5, (v0 + v1) * 0.5)
        nodes.append(make_box(parent, piece_node_name(prefix, piece.name), size, center, material))

    return nodes
