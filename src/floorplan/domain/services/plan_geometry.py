"""Derived plan geometry used by renderers and validation.

- view bounds with padding around the drawn walls
- dimension labels placed at wall midpoints
- the plan outline as a vector path in pixel space
- closure gap and self-intersection checks
"""

from __future__ import annotations

import math
from typing import Sequence

from ..value_objects import BoundingBox, GeometryError, Point2D, WallLabel
from .vertex_resolver import WallLike, resolve_vertices

__all__ = [
    "DEFAULT_PADDING",
    "DEFAULT_SCALE",
    "closure_gap",
    "find_self_intersections",
    "to_pixels",
    "vector_path",
    "view_bounds",
    "wall_labels",
]

DEFAULT_PADDING = 0.5  # meters around the drawn walls
DEFAULT_SCALE = 120.0  # pixels per meter


def view_bounds(
    vertices: Sequence[Point2D], padding: float = DEFAULT_PADDING
) -> BoundingBox:
    """Bounds of the vertices grown by ``padding`` meters on every side."""
    if not vertices:
        return BoundingBox(0.0, 0.0, 1.0, 1.0)
    return BoundingBox.from_points(vertices).expand(padding)


def wall_labels(
    walls: Sequence[WallLike], vertices: Sequence[Point2D]
) -> list[WallLabel]:
    """Dimension labels at the midpoint of each drawn wall.

    The label angle follows the drawn segment, which differs from the
    wall's stored angle only for an auto-closed last wall. The text always
    shows the stored (nominal) length.
    """
    labels: list[WallLabel] = []
    for i, wall in enumerate(walls):
        if i + 1 >= len(vertices):
            break
        a = vertices[i]
        b = vertices[i + 1]
        labels.append(
            WallLabel(
                wall_index=i,
                position=Point2D((a.x + b.x) / 2, (a.y + b.y) / 2),
                angle=math.degrees(math.atan2(b.y - a.y, b.x - a.x)),
                text=f"{wall.length:.2f} m",
            )
        )
    return labels


def to_pixels(meters: float, scale: float = DEFAULT_SCALE) -> float:
    """Convert meters to pixels."""
    return meters * scale


def _fmt(value: float) -> str:
    # Shortest round-trip repr, without the trailing ".0" on integers.
    text = repr(round(value, 6) + 0.0)
    return text[:-2] if text.endswith(".0") else text


def vector_path(vertices: Sequence[Point2D], scale: float = DEFAULT_SCALE) -> str:
    """Plan outline as an SVG path string (move/line commands in pixels)."""
    commands = []
    for i, p in enumerate(vertices):
        op = "M" if i == 0 else "L"
        commands.append(f"{op} {_fmt(to_pixels(p.x, scale))} {_fmt(to_pixels(p.y, scale))}")
    return " ".join(commands)


def closure_gap(walls: Sequence[WallLike]) -> float:
    """Distance from the unsnapped end of the last wall back to the origin."""
    points = resolve_vertices(walls, auto_close=False)
    return points[-1].distance_to(points[0])


def _cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    """Cross product of vectors (o->a) and (o->b)."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _segments_cross(a1: Point2D, a2: Point2D, b1: Point2D, b2: Point2D) -> bool:
    # Strict inequalities exclude touching endpoints.
    d1 = _cross(a1, a2, b1)
    d2 = _cross(a1, a2, b2)
    d3 = _cross(b1, b2, a1)
    d4 = _cross(b1, b2, a2)
    return d1 * d2 < 0 and d3 * d4 < 0


def find_self_intersections(
    vertices: Sequence[Point2D], closed: bool = False
) -> list[GeometryError]:
    """Find pairs of non-adjacent walls that cross each other.

    Args:
        vertices: Resolved vertices (wall ``i`` runs from vertex ``i`` to ``i+1``).
        closed: Treat the first and last wall as adjacent.

    Returns:
        One GeometryError per crossing pair.
    """
    errors: list[GeometryError] = []
    segment_count = len(vertices) - 1
    for i in range(segment_count):
        for j in range(i + 2, segment_count):
            if closed and i == 0 and j == segment_count - 1:
                continue
            if _segments_cross(vertices[i], vertices[i + 1], vertices[j], vertices[j + 1]):
                errors.append(
                    GeometryError(
                        wall_indices=(i, j),
                        message=f"Wall {i} intersects with wall {j}",
                        error_type="intersection",
                    )
                )
    return errors
