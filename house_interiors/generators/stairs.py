"""
Stair generator for House Interiors Generator.

The stair run descends along -X from the top of the basement wall to the
floor. Each step is a tread box; what fills the space under a tread is a
pluggable StairStrategy:

- ExtrudeFillStrategy ("extrude", default): the tread's underside face is
  deleted and its open boundary extruded straight down to the ground,
  giving one solid column per step.
- RiserBoxStrategy ("riser_box"): a separate riser box under each tread,
  filling the gap down to the next tread's top (ground for the last step).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Type
import logging

from ..config import BasementDimensions, DEFAULT_STAIR_STRATEGY
from ..models.geometry import Vector3
from ..models.material import Material
from ..models.scene import SceneNode
from .primitives import make_box, delete_faces_facing, extrude_boundary_to_plane

logger = logging.getLogger(__name__)

DOWN = Vector3(0.0, -1.0, 0.0)

_EPSILON = 1e-6


@dataclass(frozen=True)
class StepLayout:
    """
    Placement of one step.

    Attributes:
        index: 0-based step index from the top
        top_y: Elevation of the tread's walking surface
        x_min: Low X edge of the tread
        x_max: High X edge of the tread
    """
    index: int
    top_y: float
    x_min: float
    x_max: float

    @property
    def depth(self) -> float:
        return self.x_max - self.x_min

    @property
    def center_x(self) -> float:
        return (self.x_min + self.x_max) * 0.5

    @property
    def name(self) -> str:
        return f"Step_{self.index + 1}"


def layout_steps(
    riser_height: float,
    tread_depth: float,
    count: int,
    top_x: float,
    ground_y: float
) -> List[StepLayout]:
    """
    Lay out the treads of a straight stair run.

    Step i (0-based) has its top at ground_y + (count - i) * riser_height
    and spans [top_x - (i + 1) * tread_depth, top_x - i * tread_depth].
    Every value comes from the step index, so the last step's top sits one
    riser above the ground and the rises sum to count * riser_height.

    Args:
        riser_height: Rise per step
        tread_depth: Run per step
        count: Number of steps
        top_x: X of the top edge of the first step
        ground_y: Floor elevation

    Returns:
        Steps from the top down
    """
    if count < 1:
        raise ValueError(f"Stair step count must be at least 1, got {count}")

    return [
        StepLayout(
            index=i,
            top_y=ground_y + (count - i) * riser_height,
            x_min=top_x - (i + 1) * tread_depth,
            x_max=top_x - i * tread_depth,
        )
        for i in range(count)
    ]


def _make_tread(
    parent: SceneNode,
    step: StepLayout,
    dims: BasementDimensions,
    material: Material,
    bake_size: bool = False
) -> SceneNode:
    return make_box(
        parent,
        step.name,
        Vector3(step.depth, dims.tread_thickness, dims.stair_width),
        Vector3(step.center_x, step.top_y - dims.tread_thickness * 0.5, dims.stair_center_z),
        material,
        bake_size=bake_size,
    )


class StairStrategy(ABC):
    """Fills the space under one tread."""

    name: str = ""

    @abstractmethod
    def build_step(
        self,
        parent: SceneNode,
        step: StepLayout,
        next_top_y: float,
        dims: BasementDimensions,
        material: Material
    ) -> List[SceneNode]:
        """
        Build one step.

        Args:
            parent: Parent node
            step: Step placement
            next_top_y: Top of the next step down (ground for the last step)
            dims: Basement dimensions
            material: Shared material

        Returns:
            Created nodes (tread first)
        """


class ExtrudeFillStrategy(StairStrategy):
    """Tread box with its underside extruded down to the ground plane."""

    name = "extrude"

    def build_step(self, parent, step, next_top_y, dims, material):
        tread = _make_tread(parent, step, dims, material, bake_size=True)

        # Ground plane in the tread's local frame
        plane_y = dims.ground_y - tread.position.y
        underside_y = -dims.tread_thickness * 0.5

        if plane_y >= underside_y - _EPSILON:
            logger.debug(f"{step.name}: tread already reaches the ground, no fill")
            return [tread]

        removed = delete_faces_facing(tread.mesh, DOWN)
        for loop in removed:
            extrude_boundary_to_plane(tread.mesh, loop, plane_y)

        return [tread]


class RiserBoxStrategy(StairStrategy):
    """Tread box plus a riser box from the next tread's top up to the tread."""

    name = "riser_box"

    def build_step(self, parent, step, next_top_y, dims, material):
        tread = _make_tread(parent, step, dims, material)

        riser_top = step.top_y - dims.tread_thickness
        riser_height = riser_top - next_top_y
        if riser_height <= _EPSILON:
            return [tread]

        riser = make_box(
            parent,
            f"Riser_{step.index + 1}",
            Vector3(step.depth, riser_height, dims.stair_width),
            Vector3(step.center_x, next_top_y + riser_height * 0.5, dims.stair_center_z),
            material,
        )
        return [tread, riser]


STAIR_STRATEGIES: Dict[str, Type[StairStrategy]] = {
    ExtrudeFillStrategy.name: ExtrudeFillStrategy,
    RiserBoxStrategy.name: RiserBoxStrategy,
}


def get_stair_strategy(name: str) -> StairStrategy:
    """
    Resolve a stair strategy by name.

    Raises:
        ValueError: If the name is unknown
    """
    strategy_cls = STAIR_STRATEGIES.get(name)
    if strategy_cls is None:
        raise ValueError(
            f"Unknown stair strategy '{name}'. Choose from: {', '.join(sorted(STAIR_STRATEGIES))}"
        )
    return strategy_cls()


def build_stairs(
    parent: SceneNode,
    dims: BasementDimensions,
    material: Material,
    strategy: Optional[StairStrategy] = None
) -> List[SceneNode]:
    """
    Build the stair run.

    Args:
        parent: Parent node (Stairs_Root)
        dims: Basement dimensions
        material: Shared material
        strategy: Fill strategy (default: the configured default strategy)

    Returns:
        Created nodes
    """
    if strategy is None:
        strategy = get_stair_strategy(DEFAULT_STAIR_STRATEGY)

    steps = layout_steps(
        dims.riser_height,
        dims.tread_depth,
        dims.stair_count,
        dims.stair_top_x,
        dims.ground_y,
    )

    nodes = []
    for i, step in enumerate(steps):
        next_top_y = steps[i + 1].top_y if i + 1 < len(steps) else dims.ground_y
        nodes.extend(strategy.build_step(parent, step, next_top_y, dims, material))

    logger.debug(f"Built {len(steps)} steps with '{strategy.name}' fill")
    return nodes


def build_landing(parent: SceneNode, dims: BasementDimensions, material: Material) -> SceneNode:
    """Slab-thick landing at the foot of the stair run."""
    return make_box(
        parent,
        "Landing",
        Vector3(dims.landing_depth, dims.slab_thickness, dims.stair_width),
        Vector3(dims.landing_x, dims.ground_y + dims.slab_thickness * 0.5, dims.stair_center_z),
        material,
    )
