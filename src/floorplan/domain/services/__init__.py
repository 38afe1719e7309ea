"""Domain services for plan geometry and board layout."""

from .board_packer import DEFAULT_STEP, MIN_STEP, LaminateBoardPacker, layout_stats
from .containment import (
    point_in_polygon,
    polygon_area,
    polygon_bounds,
    rectangle_in_polygon,
)
from .plan_geometry import (
    DEFAULT_PADDING,
    DEFAULT_SCALE,
    closure_gap,
    find_self_intersections,
    to_pixels,
    vector_path,
    view_bounds,
    wall_labels,
)
from .vertex_resolver import WallLike, resolve_vertices, wall_vector

__all__ = [
    "DEFAULT_PADDING",
    "DEFAULT_SCALE",
    "DEFAULT_STEP",
    "LaminateBoardPacker",
    "MIN_STEP",
    "WallLike",
    "closure_gap",
    "find_self_intersections",
    "layout_stats",
    "point_in_polygon",
    "polygon_area",
    "polygon_bounds",
    "rectangle_in_polygon",
    "resolve_vertices",
    "to_pixels",
    "vector_path",
    "view_bounds",
    "wall_labels",
    "wall_vector",
]
