"""
Core geometry types for House Interiors Generator.

Provides Point2D, Vector3, Rect2D and Opening used throughout the generators.
Coordinates are Y-up: X runs across the building, Z along it.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import math


@dataclass(frozen=True, slots=True)
class Point2D:
    """2D point in a wall's local (u, v) frame."""
    x: float
    y: float

    def __sub__(self, other: 'Point2D') -> 'Point2D':
        """Vector subtraction."""
        return Point2D(self.x - other.x, self.y - other.y)

    def __add__(self, other: 'Point2D') -> 'Point2D':
        """Vector addition."""
        return Point2D(self.x + other.x, self.y + other.y)

    def cross(self, other: 'Point2D') -> float:
        """2D cross product (returns scalar z-component)."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True, slots=True)
class Vector3:
    """3D point or direction in a node's local frame."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: 'Vector3') -> 'Vector3':
        """Vector addition."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        """Vector subtraction."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> 'Vector3':
        """Uniform scale."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Cross product (right-handed)."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def distance_to(self, other: 'Vector3') -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def lerp(self, other: 'Vector3', t: float) -> 'Vector3':
        """Linear interpolation towards other (t=0 -> self, t=1 -> other)."""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


ZERO = Vector3(0.0, 0.0, 0.0)
ONE = Vector3(1.0, 1.0, 1.0)
RIGHT = Vector3(1.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Rect2D:
    """
    Axis-aligned rectangle on the floor plane.

    The first axis is world X, the second is world Z. (x, y) is the min
    corner; containment is half-open on the max edges.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def x_min(self) -> float:
        return self.x

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_min(self) -> float:
        return self.y

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Area of the rectangle."""
        return self.width * self.height

    def contains(self, px: float, py: float) -> bool:
        """Check if point is inside (min edges inclusive, max edges exclusive)."""
        return self.x_min <= px < self.x_max and self.y_min <= py < self.y_max

    @staticmethod
    def from_bounds(x_min: float, y_min: float, x_max: float, y_max: float) -> 'Rect2D':
        """Create a rectangle from min/max bounds."""
        return Rect2D(x_min, y_min, x_max - x_min, y_max - y_min)


@dataclass(frozen=True, slots=True)
class Opening:
    """
    Rectangular opening in a wall's local 2D frame.

    Attributes:
        width: Opening width along the wall
        height: Opening height
        center_v: Height of the opening center above the wall base
        center_u: Horizontal offset of the opening center from the wall center
    """
    width: float
    height: float
    center_v: float
    center_u: float = 0.0

    @property
    def u_min(self) -> float:
        return self.center_u - self.width * 0.5

    @property
    def u_max(self) -> float:
        return self.center_u + self.width * 0.5

    @property
    def v_min(self) -> float:
        return self.center_v - self.height * 0.5

    @property
    def v_max(self) -> float:
        return self.center_v + self.height * 0.5
