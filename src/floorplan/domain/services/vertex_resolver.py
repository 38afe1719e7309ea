"""Resolution of wall segments into absolute plan vertices."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from ..value_objects import Point2D

__all__ = ["WallLike", "resolve_vertices", "wall_vector"]


class WallLike(Protocol):
    """Anything with a length (meters) and an absolute angle (degrees)."""

    length: float
    angle: float


def wall_vector(wall: WallLike) -> tuple[float, float]:
    """Direction vector of a wall scaled by its length."""
    angle_rad = math.radians(wall.angle)
    return math.cos(angle_rad) * wall.length, math.sin(angle_rad) * wall.length


def resolve_vertices(
    walls: Sequence[WallLike], auto_close: bool = False
) -> tuple[Point2D, ...]:
    """Turn an ordered wall sequence into absolute vertices.

    Vertex 0 is the origin and vertex ``i`` is the cumulative sum of the
    vectors of walls ``0..i-1``, so the result always has
    ``len(walls) + 1`` entries.

    With ``auto_close`` the last vertex is overwritten with the origin
    whenever there are at least two vertices. Only the drawn geometry
    changes; the walls keep their stored length and angle.

    Args:
        walls: Ordered walls.
        auto_close: Snap the final vertex onto the first one.

    Returns:
        Tuple of vertices in traversal order.
    """
    points: list[Point2D] = [Point2D(0.0, 0.0)]
    cx = 0.0
    cy = 0.0
    for wall in walls:
        dx, dy = wall_vector(wall)
        cx += dx
        cy += dy
        points.append(Point2D(cx, cy))

    if auto_close and len(points) > 1:
        points[-1] = points[0]

    return tuple(points)
