"""Point and rectangle containment tests over a room polygon.

The polygon is the resolved vertex sequence read as a closed ring, whether
or not the drawn polyline actually returns to its start.

Rectangle containment samples the four corners only. An edge that slices
through a rectangle without enclosing one of its corners goes unnoticed;
this is a known limitation of the layout engine and changing it would
change which boards get placed.
"""

from __future__ import annotations

from typing import Sequence

from ..value_objects import BoundingBox, Point2D

__all__ = [
    "BOUNDARY_TOLERANCE",
    "point_in_polygon",
    "polygon_area",
    "polygon_bounds",
    "rectangle_in_polygon",
]

# Points closer than this to an edge count as lying on it (meters).
BOUNDARY_TOLERANCE = 1e-9


def _on_segment(p: Point2D, a: Point2D, b: Point2D) -> bool:
    cross = (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)
    seg_len = a.distance_to(b)
    if seg_len == 0:
        return p.distance_to(a) <= BOUNDARY_TOLERANCE
    if abs(cross) / seg_len > BOUNDARY_TOLERANCE:
        return False
    return (
        min(a.x, b.x) - BOUNDARY_TOLERANCE <= p.x <= max(a.x, b.x) + BOUNDARY_TOLERANCE
        and min(a.y, b.y) - BOUNDARY_TOLERANCE
        <= p.y
        <= max(a.y, b.y) + BOUNDARY_TOLERANCE
    )


def point_in_polygon(point: Point2D, polygon: Sequence[Point2D]) -> bool:
    """Ray-casting parity test.

    Points on the boundary are inside. Polygons with fewer than three
    vertices contain nothing.

    Args:
        point: Point to test.
        polygon: Vertices of the ring in order.

    Returns:
        True if the point is inside or on the boundary.
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        pi = polygon[i]
        pj = polygon[j]
        if _on_segment(point, pj, pi):
            return True
        if (pi.y > point.y) != (pj.y > point.y):
            x_cross = (pj.x - pi.x) * (point.y - pi.y) / (pj.y - pi.y) + pi.x
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def rectangle_in_polygon(
    origin: Point2D, width: float, height: float, polygon: Sequence[Point2D]
) -> bool:
    """True if all four corners of the rectangle pass ``point_in_polygon``.

    Args:
        origin: Top-left corner of the rectangle.
        width: Extent along X.
        height: Extent along Y.
        polygon: Vertices of the ring in order.
    """
    corners = (
        origin,
        Point2D(origin.x + width, origin.y),
        Point2D(origin.x + width, origin.y + height),
        Point2D(origin.x, origin.y + height),
    )
    return all(point_in_polygon(corner, polygon) for corner in corners)


def polygon_area(polygon: Sequence[Point2D]) -> float:
    """Absolute area of the ring using the shoelace formula."""
    n = len(polygon)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        area += a.x * b.y - b.x * a.y
    return abs(area) / 2.0


def polygon_bounds(polygon: Sequence[Point2D]) -> BoundingBox:
    """Axis-aligned bounds of the polygon vertices."""
    return BoundingBox.from_points(polygon)
