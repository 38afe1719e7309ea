"""Application commands."""

from __future__ import annotations

import logging
from functools import lru_cache

from floorplan.application.config import (
    FloorPlanConfiguration,
    config_to_board_config,
    config_to_floor_plan,
)
from floorplan.application.dtos import PlanOutput, WallRecord
from floorplan.domain.entities import FloorPlan, Wall
from floorplan.domain.services import (
    DEFAULT_PADDING,
    DEFAULT_SCALE,
    LaminateBoardPacker,
    layout_stats,
    polygon_area,
    polygon_bounds,
    resolve_vertices,
    vector_path,
    view_bounds,
    wall_labels,
)
from floorplan.domain.value_objects import MIN_ROOM_AREA, BoardConfig, GeometryError

logger = logging.getLogger(__name__)

# Largest hidden auto-close gap (meters) not reported as a geometry error.
CLOSURE_TOLERANCE = 0.01


class GenerateFloorPlanCommand:
    """Derives drawing data and a board layout from a floor plan.

    Every call recomputes from scratch; results are memoized on the
    structural value of the inputs (wall snapshots, auto-close flag, board
    configuration and drawing options), so repeated calls with unchanged
    inputs return the same PlanOutput object.
    """

    def __init__(
        self,
        packer: LaminateBoardPacker | None = None,
        cache_size: int = 64,
    ) -> None:
        """Initialize the command.

        Args:
            packer: Board packer to use (default step of 0.1 m).
            cache_size: Number of distinct inputs to remember.
        """
        self._packer = packer or LaminateBoardPacker()
        self._compute = lru_cache(maxsize=cache_size)(self._compute_uncached)

    def execute(
        self,
        plan: FloorPlan,
        board_config: BoardConfig | None = None,
        *,
        scale: float = DEFAULT_SCALE,
        padding: float = DEFAULT_PADDING,
    ) -> PlanOutput:
        """Compute the plan output.

        Args:
            plan: Walls and auto-close flag.
            board_config: Flooring configuration, or None to skip the layout.
            scale: Pixels per meter for the vector path.
            padding: Margin in meters around the drawn walls.

        Returns:
            The derived PlanOutput.
        """
        walls = tuple(WallRecord(id=w.id, length=w.length, angle=w.angle) for w in plan.walls)
        return self._compute(walls, plan.auto_close, board_config, scale, padding)

    def execute_from_config(self, config: FloorPlanConfiguration) -> PlanOutput:
        """Compute the plan output described by a configuration."""
        return self.execute(
            config_to_floor_plan(config),
            config_to_board_config(config),
            scale=config.output.scale,
            padding=config.output.padding,
        )

    def cache_info(self):
        """Hit/miss statistics of the result cache."""
        return self._compute.cache_info()

    def clear_cache(self) -> None:
        """Forget all memoized results."""
        self._compute.cache_clear()

    def _compute_uncached(
        self,
        walls: tuple[WallRecord, ...],
        auto_close: bool,
        board_config: BoardConfig | None,
        scale: float,
        padding: float,
    ) -> PlanOutput:
        logger.debug(
            "Computing plan: %d walls, auto_close=%s, flooring=%s",
            len(walls),
            auto_close,
            board_config is not None,
        )
        vertices = resolve_vertices(walls, auto_close=auto_close)
        room_bounds = polygon_bounds(vertices)
        room_area = polygon_area(vertices)
        if room_area < MIN_ROOM_AREA:
            room_area = 0.0

        geometry_errors = self._geometry_errors(walls, auto_close)

        pieces = ()
        stats = None
        if board_config is not None:
            pieces = self._packer.pack(vertices, room_bounds, board_config)
            stats = layout_stats(pieces, room_area=room_area or None)
            logger.debug(
                "Placed %d pieces (%d cut), %.2f m2",
                stats.count,
                stats.cut_count,
                stats.total_area,
            )

        return PlanOutput(
            walls=walls,
            vertices=vertices,
            auto_close=auto_close,
            labels=tuple(wall_labels(walls, vertices)),
            room_bounds=room_bounds,
            view_bounds=view_bounds(vertices, padding),
            scale=scale,
            path=vector_path(vertices, scale),
            room_area=room_area,
            board_config=board_config,
            pieces=pieces,
            stats=stats,
            geometry_errors=tuple(geometry_errors),
        )

    def _geometry_errors(
        self, walls: tuple[WallRecord, ...], auto_close: bool
    ) -> list[GeometryError]:
        plan = FloorPlan(
            walls=[Wall(length=w.length, angle=w.angle, id=w.id) for w in walls],
            auto_close=auto_close,
            closure_tolerance=CLOSURE_TOLERANCE,
        )
        return plan.validate_geometry()
