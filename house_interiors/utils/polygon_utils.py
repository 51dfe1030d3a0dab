"""
Polygon utilities for House Interiors Generator.

2D helpers for wall outlines in a wall's local (u, v) frame: shoelace
areas, containment in a convex outline, and convex clipping.
"""

from typing import List, Sequence

from ..models.geometry import Point2D


EPSILON = 1e-9


def polygon_signed_area(ring: Sequence[Point2D]) -> float:
    """
    Compute signed area using shoelace formula.

    Args:
        ring: List of polygon vertices

    Returns:
        Signed area (positive = CCW, negative = CW)
    """
    n = len(ring)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += ring[i].x * ring[j].y
        area -= ring[j].x * ring[i].y

    return area / 2.0


def polygon_area(ring: Sequence[Point2D]) -> float:
    """Absolute area of a polygon."""
    return abs(polygon_signed_area(ring))


def point_in_convex_polygon(point: Point2D, ring: Sequence[Point2D], tolerance: float = 1e-6) -> bool:
    """
    Test if point is inside (or on the edge of) a convex CCW ring.

    Args:
        point: Point to test
        ring: Convex polygon vertices, counter-clockwise
        tolerance: Allowed distance outside an edge, in edge-length units

    Returns:
        True if point is inside or on edge
    """
    n = len(ring)
    if n < 3:
        return False

    for i in range(n):
        a = ring[i]
        b = ring[(i + 1) % n]
        if (b - a).cross(point - a) < -tolerance:
            return False

    return True


def clip_polygon_convex(subject: Sequence[Point2D], clip: Sequence[Point2D]) -> List[Point2D]:
    """
    Clip a polygon against a convex CCW ring (Sutherland-Hodgman).

    Args:
        subject: Polygon to clip
        clip: Convex clip ring, counter-clockwise

    Returns:
        Clipped polygon vertices (may be fewer than 3 if nothing is left)
    """
    output = list(subject)
    n = len(clip)

    for i in range(n):
        if not output:
            break

        a = clip[i]
        edge = clip[(i + 1) % n] - a
        source = output
        output = []

        for j in range(len(source)):
            current = source[j]
            previous = source[j - 1]
            current_in = edge.cross(current - a) >= -EPSILON
            previous_in = edge.cross(previous - a) >= -EPSILON

            if current_in:
                if not previous_in:
                    output.append(_edge_intersection(previous, current, a, edge))
                output.append(current)
            elif previous_in:
                output.append(_edge_intersection(previous, current, a, edge))

    return remove_duplicate_points(output)


def remove_duplicate_points(ring: Sequence[Point2D], tolerance: float = 1e-6) -> List[Point2D]:
    """
    Drop consecutive near-duplicate vertices (including last vs first).

    Args:
        ring: Polygon vertices
        tolerance: Coordinate distance below which points are merged

    Returns:
        Cleaned ring
    """
    result: List[Point2D] = []
    for p in ring:
        if result and _close(result[-1], p, tolerance):
            continue
        result.append(p)

    while len(result) > 1 and _close(result[0], result[-1], tolerance):
        result.pop()

    return result


def _edge_intersection(p: Point2D, q: Point2D, a: Point2D, edge: Point2D) -> Point2D:
    """Intersection of segment p-q with the infinite line through a along edge."""
    d = q - p
    denom = edge.cross(d)
    if abs(denom) < EPSILON:
        return q
    t = (p - a).cross(edge) / denom
    return Point2D(p.x + d.x * t, p.y + d.y * t)


def _close(a: Point2D, b: Point2D, tolerance: float) -> bool:
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance
