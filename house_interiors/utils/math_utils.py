"""
Mathematical utilities for House Interiors Generator.

Provides interpolation, angle measurement and the small amount of
transform math needed to place node-local geometry in world space.

Rotation convention:
    Euler angles in degrees, XYZ order (rotate about X, then Y, then Z,
    all about the parent's fixed axes). Positive angles are
    counter-clockwise when looking down the axis towards the origin.
"""

from typing import TYPE_CHECKING, List, Sequence, Tuple
import math

if TYPE_CHECKING:
    from ..models.geometry import Vector3

Matrix4 = List[List[float]]


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def angle_between(a: 'Vector3', b: 'Vector3') -> float:
    """
    Unsigned angle between two vectors in degrees, in [0, 180].

    Returns 0.0 if either vector has zero length.
    """
    len_a = a.length()
    len_b = b.length()
    if len_a < 1e-12 or len_b < 1e-12:
        return 0.0

    cos_angle = clamp(a.dot(b) / (len_a * len_b), -1.0, 1.0)
    return math.degrees(math.acos(cos_angle))


def ridge_height(eave_height: float, half_span: float, slope_ratio: float) -> float:
    """
    Ridge elevation of a symmetric pitched roof.

    Args:
        eave_height: Elevation of the eave (wall top)
        half_span: Horizontal distance from eave to ridge
        slope_ratio: Rise over run (e.g. 5/12)
    """
    return eave_height + half_span * slope_ratio


def interior_peak_height(
    eave_height: float,
    ridge: float,
    half_span: float,
    interior_half_width: float
) -> float:
    """
    Peak of an interior ceiling narrower than the full roof span.

    Linear interpolation between eave_height and ridge proportional to
    interior_half_width / half_span (clamped to [0, 1]): eave_height at 0,
    ridge at the full half span.
    """
    if half_span <= 0:
        return ridge
    t = clamp(interior_half_width / half_span, 0.0, 1.0)
    return lerp(eave_height, ridge, t)


def euler_to_matrix3(rotation_deg: 'Vector3') -> List[List[float]]:
    """
    Build a 3x3 rotation matrix from XYZ Euler angles in degrees.

    R = Rz * Ry * Rx
    """
    rx = math.radians(rotation_deg.x)
    ry = math.radians(rotation_deg.y)
    rz = math.radians(rotation_deg.z)

    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)

    return [
        [cz * cy, cz * sy * sx - sz * cx, cz * sy * cx + sz * sx],
        [sz * cy, sz * sy * sx + cz * cx, sz * sy * cx - cz * sx],
        [-sy, cy * sx, cy * cx],
    ]


def trs_matrix(position: 'Vector3', rotation_deg: 'Vector3', scale: 'Vector3') -> Matrix4:
    """
    Build a 4x4 local-to-parent matrix (scale, then rotate, then translate).
    """
    r = euler_to_matrix3(rotation_deg)
    s = (scale.x, scale.y, scale.z)
    return [
        [r[0][0] * s[0], r[0][1] * s[1], r[0][2] * s[2], position.x],
        [r[1][0] * s[0], r[1][1] * s[1], r[1][2] * s[2], position.y],
        [r[2][0] * s[0], r[2][1] * s[1], r[2][2] * s[2], position.z],
        [0.0, 0.0, 0.0, 1.0],
    ]


def identity_matrix() -> Matrix4:
    """4x4 identity matrix."""
    return [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]


def matrix_multiply(a: Matrix4, b: Matrix4) -> Matrix4:
    """Multiply two 4x4 matrices (a * b)."""
    return [
        [sum(a[i][k] * b[k][j] for k in range(4)) for j in range(4)]
        for i in range(4)
    ]


def transform_point(matrix: Matrix4, point: Sequence[float]) -> Tuple[float, float, float]:
    """Apply a 4x4 affine matrix to a 3D point."""
    x, y, z = point[0], point[1], point[2]
    return (
        matrix[0][0] * x + matrix[0][1] * y + matrix[0][2] * z + matrix[0][3],
        matrix[1][0] * x + matrix[1][1] * y + matrix[1][2] * z + matrix[1][3],
        matrix[2][0] * x + matrix[2][1] * y + matrix[2][2] * z + matrix[2][3],
    )
