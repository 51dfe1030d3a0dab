"""
Geometry generators for House Interiors Generator.

Contains the primitive mesh factory, wall/opening decomposition, roof and
truss geometry, stair and joist layout, scatter placement, and the attic
and basement assemblers that orchestrate them.
"""

from .primitives import (
    make_box,
    make_polygon,
    make_empty,
    add_collider,
    add_light,
    delete_faces_facing,
    extrude_boundary_to_plane,
)
from .openings import (
    WallPiece,
    WallFrame,
    decompose_wall,
    build_wall,
    build_slab_wall,
)
from .roof import (
    ValleyGeometry,
    valley_geometry,
    build_roof_exterior,
    build_interior_shell,
)
from .trusses import RafterGeometry, truss_stations, rafter_geometry, build_trusses, build_wing_trusses
from .stairs import (
    StepLayout,
    StairStrategy,
    ExtrudeFillStrategy,
    RiserBoxStrategy,
    layout_steps,
    get_stair_strategy,
    build_stairs,
    build_landing,
)
from .joists import JoistSegment, layout_joists, build_joists
from .scatter import Placement, scatter_placements, scatter_props
from .attic import build_attic, ATTIC_ROOT_NAME
from .basement import build_basement, BASEMENT_ROOT_NAME

__all__ = [
    'make_box',
    'make_polygon',
    'make_empty',
    'add_collider',
    'add_light',
    'delete_faces_facing',
    'extrude_boundary_to_plane',
    'WallPiece',
    'WallFrame',
    'decompose_wall',
    'build_wall',
    'build_slab_wall',
    'ValleyGeometry',
    'valley_geometry',
    'build_roof_exterior',
    'build_interior_shell',
    'RafterGeometry',
    'truss_stations',
    'rafter_geometry',
    'build_trusses',
    'build_wing_trusses',
    'StepLayout',
    'StairStrategy',
    'ExtrudeFillStrategy',
    'RiserBoxStrategy',
    'layout_steps',
    'get_stair_strategy',
    'build_stairs',
    'build_landing',
    'JoistSegment',
    'layout_joists',
    'build_joists',
    'Placement',
    'scatter_placements',
    'scatter_props',
    'build_attic',
    'ATTIC_ROOT_NAME',
    'build_basement',
    'BASEMENT_ROOT_NAME',
]
