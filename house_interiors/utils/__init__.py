"""
Utility functions for House Interiors Generator.
"""

from .math_utils import (
    clamp,
    lerp,
    angle_between,
    ridge_height,
    interior_peak_height,
    euler_to_matrix3,
    trs_matrix,
    transform_point,
)
from .polygon_utils import (
    polygon_signed_area,
    polygon_area,
    point_in_convex_polygon,
    clip_polygon_convex,
    remove_duplicate_points,
)

__all__ = [
    # Math
    'clamp',
    'lerp',
    'angle_between',
    'ridge_height',
    'interior_peak_height',
    'euler_to_matrix3',
    'trs_matrix',
    'transform_point',
    # Polygons
    'polygon_signed_area',
    'polygon_area',
    'point_in_convex_polygon',
    'clip_polygon_convex',
    'remove_duplicate_points',
]
