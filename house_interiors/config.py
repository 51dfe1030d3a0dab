"""
Configuration constants for House Interiors Generator.

Contains the dimensional constants that drive attic and basement
generation (1 unit = 1 ft), the immutable dimension models built from
them, and the runtime configuration for a generation run.
"""

from dataclasses import dataclass
from typing import Optional
import math

from .models.geometry import Rect2D, Opening
from .utils.math_utils import ridge_height, interior_peak_height


# =============================================================================
# ATTIC: BUILDING BLOCKS
# =============================================================================

# Main block (ridge runs along Z)
ATTIC_MAIN_LENGTH = 40.0
ATTIC_MAIN_WIDTH = 25.0

# Wing block, attached perpendicular to the main block's +X side, centered
ATTIC_WING_LENGTH = 20.0
ATTIC_WING_WIDTH = 20.0

# Wall top / roof eave elevation
ATTIC_EAVE_HEIGHT = 4.0

# Roof pitch as rise over run (5 in 12)
ROOF_SLOPE_RATIO = 5.0 / 12.0

# =============================================================================
# ATTIC: STRUCTURE
# =============================================================================

ATTIC_DECK_THICKNESS = 0.0625
ATTIC_PLANK_WIDTH = 0.5          # 6-inch planks

KNEE_WALL_HEIGHT = 4.0           # Vertical knee-wall height
FLAT_CEILING_WIDTH = 10.0        # Width of flat center ceiling

TRUSS_SPACING = 3.5
TRUSS_MEMBER_THICKNESS = 0.33

# =============================================================================
# ATTIC: HATCH, GABLE DETAILS, LIGHTS, PROPS
# =============================================================================

HATCH_WIDTH = 2.5
HATCH_LENGTH = 4.5
HATCH_DIST_FROM_REAR_WALL = 6.0
HATCH_FRAME_THICKNESS = 0.25

GABLE_WINDOW_WIDTH = 2.5
GABLE_WINDOW_HEIGHT = 3.0
GABLE_WINDOW_CENTER_Y = 5.5
GABLE_WINDOW_DEPTH = 0.5

GABLE_VENT_SIZE = 1.5
GABLE_VENT_DEPTH = 0.2

ATTIC_LIGHT_COUNT = 2
ATTIC_LIGHT_DROP = 1.0           # Below knee-wall top

# Point light carried by every bulb placeholder
LIGHT_TYPE = "point"
LIGHT_RANGE = 25.0
LIGHT_COLOR = (1.0, 0.9, 0.75)
LIGHT_INTENSITY = 1.8
LIGHT_SHADOWS = "soft"

# Props keep clear of a 5 x 7 zone around the hatch
PROP_CLEAR_ZONE_WIDTH = 5.0
PROP_CLEAR_ZONE_LENGTH = 7.0
PROP_COUNT = 15
PROP_SIZE_X = (1.0, 2.5)
PROP_SIZE_Y = (1.0, 2.0)
PROP_SIZE_Z = (1.0, 2.5)
PROP_SPREAD = 0.45               # Fraction of the flat ceiling width either side
PROP_MAX_YAW_DEG = 90.0

# Rejection-sampling budget per scattered item
SCATTER_MAX_ATTEMPTS = 100

# =============================================================================
# BASEMENT
# =============================================================================

BASEMENT_GROUND_Y = 0.0
BASEMENT_SLAB_THICKNESS = 0.1

BASEMENT_WALL_HEIGHT = 7.0
BASEMENT_WALL_THICKNESS = 0.5
BASEMENT_LENGTH_X = 60.0
BASEMENT_DEPTH_Z = 30.0

# West strip (x < 5) is floored separately, split at z = 14
BASEMENT_WEST_STRIP_WIDTH = 5.0
BASEMENT_WEST_FRONT_DEPTH = 14.0

# East wall window
EAST_WALL_X = 59.75
EAST_WINDOW_SILL = 4.0
EAST_WINDOW_HEIGHT = 1.5
EAST_WINDOW_WIDTH = 3.0
EAST_WINDOW_CENTER_Z = 15.0

# Stairs
STAIR_COUNT = 12
STAIR_RUN = 12.0
STAIR_WIDTH = 4.0
STAIR_TOP_X = 58.0
STAIR_CENTER_Z = 2.75
STAIR_TREAD_THICKNESS = 0.15
STAIR_LANDING_DEPTH = 3.0
DEFAULT_STAIR_STRATEGY = "extrude"

# Joists
JOIST_HEIGHT = 0.8
JOIST_THICKNESS = 0.125
JOIST_SPACING = 1.5
JOIST_FIRST_Z = 0.75

# Stairwell opening in the joist grid
STAIR_OPENING_START_X = 45.0
STAIR_OPENING_END_X = 58.5
STAIR_OPENING_START_Z = 0.6
STAIR_OPENING_END_Z = 4.9

# =============================================================================
# MATERIAL NAMES
# =============================================================================

MATERIAL_SURFACE = "White"       # Deck, interior shell, hatch, props
MATERIAL_SHINGLES = "Shingles"   # Roof slopes
MATERIAL_WOOD = "Wood"           # Gables, trusses, joists, stairs
MATERIAL_CONCRETE = "Concrete"   # Basement slabs and walls

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

# OBJ export precision (decimal places)
OBJ_VERTEX_PRECISION = 6
OBJ_UV_PRECISION = 6

EXPORT_FORMATS = ("obj", "json", "both")


# =============================================================================
# DIMENSION MODELS
# =============================================================================

@dataclass(frozen=True)
class AtticDimensions:
    """
    Immutable attic measurements.

    Derived values are properties so they are recomputed from the base
    measurements on every access.
    """
    main_length: float = ATTIC_MAIN_LENGTH
    main_width: float = ATTIC_MAIN_WIDTH
    wing_length: float = ATTIC_WING_LENGTH
    wing_width: float = ATTIC_WING_WIDTH
    eave_height: float = ATTIC_EAVE_HEIGHT
    slope_ratio: float = ROOF_SLOPE_RATIO
    deck_thickness: float = ATTIC_DECK_THICKNESS
    plank_width: float = ATTIC_PLANK_WIDTH
    knee_wall_height: float = KNEE_WALL_HEIGHT
    flat_ceiling_width: float = FLAT_CEILING_WIDTH
    truss_spacing: float = TRUSS_SPACING
    truss_member_thickness: float = TRUSS_MEMBER_THICKNESS
    hatch_width: float = HATCH_WIDTH
    hatch_length: float = HATCH_LENGTH
    hatch_dist_from_rear_wall: float = HATCH_DIST_FROM_REAR_WALL
    hatch_frame_thickness: float = HATCH_FRAME_THICKNESS
    gable_window_width: float = GABLE_WINDOW_WIDTH
    gable_window_height: float = GABLE_WINDOW_HEIGHT
    gable_window_center_y: float = GABLE_WINDOW_CENTER_Y
    gable_window_depth: float = GABLE_WINDOW_DEPTH
    gable_vent_size: float = GABLE_VENT_SIZE
    gable_vent_depth: float = GABLE_VENT_DEPTH
    light_count: int = ATTIC_LIGHT_COUNT
    light_drop: float = ATTIC_LIGHT_DROP
    prop_clear_width: float = PROP_CLEAR_ZONE_WIDTH
    prop_clear_length: float = PROP_CLEAR_ZONE_LENGTH

    @property
    def main_half_width(self) -> float:
        return self.main_width * 0.5

    @property
    def main_half_length(self) -> float:
        return self.main_length * 0.5

    @property
    def main_ridge_height(self) -> float:
        """Ridge elevation of the main block."""
        return ridge_height(self.eave_height, self.main_half_width, self.slope_ratio)

    @property
    def wing_ridge_height(self) -> float:
        """Ridge elevation of the wing block."""
        return ridge_height(self.eave_height, self.wing_width * 0.5, self.slope_ratio)

    @property
    def ceiling_peak_height(self) -> float:
        """Apex of the angled interior ceiling above the flat ceiling band."""
        return interior_peak_height(
            self.eave_height,
            self.main_ridge_height,
            self.main_half_width,
            self.flat_ceiling_width * 0.5,
        )

    @property
    def truss_count(self) -> int:
        """Number of truss stations (floor(length / spacing))."""
        return int(math.floor(self.main_length / self.truss_spacing))

    @property
    def wing_truss_count(self) -> int:
        return int(math.floor(self.wing_length / self.truss_spacing))

    @property
    def plank_count(self) -> int:
        return int(math.floor(self.main_width / self.plank_width))

    @property
    def wing_plank_count(self) -> int:
        return int(math.floor(self.wing_width / self.plank_width))

    @property
    def hatch_center_z(self) -> float:
        """Z of the hatch center, measured from the rear (-Z) wall."""
        return -self.main_half_length + self.hatch_dist_from_rear_wall

    @property
    def hatch_clear_zone(self) -> Rect2D:
        """Floor rectangle around the hatch that props must avoid."""
        return Rect2D(
            -self.prop_clear_width * 0.5,
            self.hatch_center_z - self.prop_clear_length * 0.5,
            self.prop_clear_width,
            self.prop_clear_length,
        )


@dataclass(frozen=True)
class BasementDimensions:
    """
    Immutable basement measurements.

    Derived values are properties so they are recomputed from the base
    measurements on every access.
    """
    ground_y: float = BASEMENT_GROUND_Y
    slab_thickness: float = BASEMENT_SLAB_THICKNESS
    wall_height: float = BASEMENT_WALL_HEIGHT
    wall_thickness: float = BASEMENT_WALL_THICKNESS
    length_x: float = BASEMENT_LENGTH_X
    depth_z: float = BASEMENT_DEPTH_Z
    west_strip_width: float = BASEMENT_WEST_STRIP_WIDTH
    west_front_depth: float = BASEMENT_WEST_FRONT_DEPTH
    east_wall_x: float = EAST_WALL_X
    east_window_sill: float = EAST_WINDOW_SILL
    east_window_height: float = EAST_WINDOW_HEIGHT
    east_window_width: float = EAST_WINDOW_WIDTH
    east_window_center_z: float = EAST_WINDOW_CENTER_Z
    stair_count: int = STAIR_COUNT
    stair_run: float = STAIR_RUN
    stair_width: float = STAIR_WIDTH
    stair_top_x: float = STAIR_TOP_X
    stair_center_z: float = STAIR_CENTER_Z
    tread_thickness: float = STAIR_TREAD_THICKNESS
    landing_depth: float = STAIR_LANDING_DEPTH
    joist_height: float = JOIST_HEIGHT
    joist_thickness: float = JOIST_THICKNESS
    joist_spacing: float = JOIST_SPACING
    joist_first_z: float = JOIST_FIRST_Z
    opening_start_x: float = STAIR_OPENING_START_X
    opening_end_x: float = STAIR_OPENING_END_X
    opening_start_z: float = STAIR_OPENING_START_Z
    opening_end_z: float = STAIR_OPENING_END_Z

    @property
    def riser_height(self) -> float:
        """Rise per step (wall height evenly divided)."""
        return self.wall_height / self.stair_count

    @property
    def tread_depth(self) -> float:
        """Run per step."""
        return self.stair_run / self.stair_count

    @property
    def wall_center_y(self) -> float:
        return self.ground_y + self.wall_height * 0.5

    @property
    def joist_y(self) -> float:
        """Joist center elevation (joists sit on top of the walls)."""
        return self.ground_y + self.wall_height + self.joist_height * 0.5

    @property
    def landing_x(self) -> float:
        """Landing center X, one half landing depth past the last tread."""
        return (self.stair_top_x - self.stair_run) - self.landing_depth * 0.5

    @property
    def east_window(self) -> Opening:
        """East wall window in the wall's (u, v) frame (u along +Z from mid-wall)."""
        return Opening(
            width=self.east_window_width,
            height=self.east_window_height,
            center_v=self.east_window_sill + self.east_window_height * 0.5,
            center_u=self.east_window_center_z - self.depth_z * 0.5,
        )

    @property
    def stair_opening(self) -> Rect2D:
        """Stairwell opening in the joist grid (X by Z)."""
        return Rect2D.from_bounds(
            self.opening_start_x,
            self.opening_start_z,
            self.opening_end_x,
            self.opening_end_z,
        )


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """
    Runtime configuration for a generation run.

    This class holds the parameters that can be adjusted per run via CLI
    arguments, the Blender panel, or programmatically. All geometry comes
    from the dimension models above.
    """

    # Random seed for prop scattering
    seed: int = 12345

    # Stair ground-fill strategy: "extrude" or "riser_box"
    stair_strategy: str = DEFAULT_STAIR_STRATEGY

    # Scatter
    prop_count: int = PROP_COUNT
    scatter_max_attempts: int = SCATTER_MAX_ATTEMPTS

    # Materials: optional JSON material library
    materials_path: Optional[str] = None

    # Export
    output_dir: str = "./output"
    export_format: str = "obj"

    # Debug
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.prop_count < 0:
            raise ValueError("prop_count must be non-negative")

        if self.scatter_max_attempts < 1:
            raise ValueError("scatter_max_attempts must be at least 1")

        if self.stair_strategy not in ("extrude", "riser_box"):
            raise ValueError(
                f"stair_strategy must be 'extrude' or 'riser_box', got '{self.stair_strategy}'"
            )

        if self.export_format not in EXPORT_FORMATS:
            raise ValueError(f"export_format must be one of {EXPORT_FORMATS}")


# Default configuration instance
DEFAULT_CONFIG = GeneratorConfig()
