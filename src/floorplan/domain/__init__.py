"""Domain layer - plan geometry and laminate layout."""

from .entities import SAMPLE_WALLS, FloorPlan, Wall, snap_orthogonal
from .services import (
    LaminateBoardPacker,
    layout_stats,
    point_in_polygon,
    polygon_area,
    rectangle_in_polygon,
    resolve_vertices,
    vector_path,
    view_bounds,
    wall_labels,
)
from .value_objects import (
    BoardConfig,
    BoardPiece,
    BoundingBox,
    GeometryError,
    InstallationDirection,
    LayoutStats,
    Point2D,
    WallLabel,
)

__all__ = [
    "SAMPLE_WALLS",
    "BoardConfig",
    "BoardPiece",
    "BoundingBox",
    "FloorPlan",
    "GeometryError",
    "InstallationDirection",
    "LaminateBoardPacker",
    "LayoutStats",
    "Point2D",
    "Wall",
    "WallLabel",
    "layout_stats",
    "point_in_polygon",
    "polygon_area",
    "rectangle_in_polygon",
    "resolve_vertices",
    "snap_orthogonal",
    "vector_path",
    "view_bounds",
    "wall_labels",
]
