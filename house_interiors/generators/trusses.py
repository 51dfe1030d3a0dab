r"""
Roof truss generator for House Interiors Generator.

Each truss station is an empty node placed along the block's length; its
members are boxes in the station's local frame (x across the block, y up):

        /\            Rafter_L / Rafter_R meet at the ceiling peak
       /||\           CenterSupport from the collar tie to the peak
      /_||_\          CollarTie across the flat ceiling at knee height
      |    |          Stud_Left / Stud_Right up to knee height

Rafters are boxes whose long axis is X, rotated about Z to follow the
slope from their start point to the apex.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from ..config import AtticDimensions
from ..models.geometry import Vector3, RIGHT
from ..models.material import Material
from ..models.scene import SceneNode
from ..utils.math_utils import angle_between
from .primitives import make_box, make_empty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RafterGeometry:
    """Placement of one rafter between a start point and the apex."""
    center: Vector3
    length: float
    angle: float  # Degrees between +X and (apex - start)


def truss_stations(length: float, spacing: float, count: Optional[int] = None) -> List[float]:
    """
    Offsets of the truss stations along a block.

    Stations sit at -length/2 + i * spacing for i = 1 .. count - 1, so none
    lands on the block's end walls.

    Args:
        length: Block length
        spacing: Distance between stations
        count: Number of spacing intervals (default: floor(length / spacing))

    Returns:
        Station offsets, ascending
    """
    if spacing <= 0:
        raise ValueError(f"Truss spacing must be positive, got {spacing}")

    if count is None:
        count = int(length // spacing)
    return [-length * 0.5 + i * spacing for i in range(1, count)]


def rafter_geometry(start: Vector3, apex: Vector3) -> RafterGeometry:
    """
    Center, length and slope angle of a rafter from start to apex.

    Args:
        start: Rafter foot
        apex: Rafter top

    Returns:
        RafterGeometry (center is the midpoint)
    """
    return RafterGeometry(
        center=start.lerp(apex, 0.5),
        length=start.distance_to(apex),
        angle=angle_between(RIGHT, apex - start),
    )


def _add_rafter_pair(
    station: SceneNode,
    names: tuple,
    half_width: float,
    foot_y: float,
    apex_y: float,
    thickness: float,
    material: Material
) -> None:
    left_start = Vector3(-half_width, foot_y, 0.0)
    right_start = Vector3(half_width, foot_y, 0.0)
    apex = Vector3(0.0, apex_y, 0.0)

    left = rafter_geometry(left_start, apex)
    right = rafter_geometry(right_start, apex)

    # Both rafters share the left rafter's slope angle, mirrored
    make_box(
        station, names[0], Vector3(left.length, thickness, thickness), left.center, material,
        rotation=Vector3(0.0, 0.0, left.angle),
    )
    make_box(
        station, names[1], Vector3(left.length, thickness, thickness), right.center, material,
        rotation=Vector3(0.0, 0.0, -left.angle),
    )


def build_trusses(parent: SceneNode, dims: AtticDimensions, material: Material) -> List[SceneNode]:
    """
    Build the main block's trusses.

    Args:
        parent: Category parent (Trusses)
        dims: Attic dimensions
        material: Shared material

    Returns:
        Created station nodes
    """
    t = dims.truss_member_thickness
    knee = dims.knee_wall_height
    hw = dims.flat_ceiling_width * 0.5
    peak = dims.ceiling_peak_height

    stations = []
    for i, z in enumerate(truss_stations(dims.main_length, dims.truss_spacing, dims.truss_count), start=1):
        station = make_empty(parent, f"Truss_{i:02d}", Vector3(0.0, 0.0, z))

        make_box(station, "Stud_Left", Vector3(t, knee, t), Vector3(-hw, knee * 0.5, 0.0), material)
        make_box(station, "Stud_Right", Vector3(t, knee, t), Vector3(hw, knee * 0.5, 0.0), material)
        make_box(station, "CollarTie", Vector3(dims.flat_ceiling_width, t, t), Vector3(0.0, knee, 0.0), material)

        _add_rafter_pair(station, ("Rafter_L", "Rafter_R"), hw, knee, peak, t, material)

        make_box(
            station, "CenterSupport",
            Vector3(t, peak - knee, t),
            Vector3(0.0, knee + (peak - knee) * 0.5, 0.0),
            material,
        )
        stations.append(station)

    logger.debug(f"Built {len(stations)} main trusses")
    return stations


def build_wing_trusses(parent: SceneNode, dims: AtticDimensions, material: Material) -> List[SceneNode]:
    """
    Build the wing's trusses (rafter pairs only) from the wing eaves to the
    wing ridge.
    """
    t = dims.truss_member_thickness
    center_x = dims.main_half_width + dims.wing_width * 0.5

    stations = []
    for i, z in enumerate(truss_stations(dims.wing_length, dims.truss_spacing, dims.wing_truss_count), start=1):
        station = make_empty(parent, f"WingTruss_{i:02d}", Vector3(center_x, 0.0, z))
        _add_rafter_pair(
            station, ("WingRafter_L", "WingRafter_R"),
            dims.wing_width * 0.5, dims.eave_height, dims.wing_ridge_height, t, material,
        )
        stations.append(station)

    logger.debug(f"Built {len(stations)} wing trusses")
    return stations
