"""Plan computation endpoints."""

from fastapi import APIRouter

from floorplan.application.config import load_config_from_dict
from floorplan.application.dtos import PlanOutput
from floorplan.domain.value_objects import BoundingBox, Point2D
from floorplan.web.dependencies import PlanCommandDep
from floorplan.web.schemas.requests import PlanRequest
from floorplan.web.schemas.responses import (
    BoardPieceSchema,
    BoundsSchema,
    GeometryWarningSchema,
    LayoutStatsSchema,
    PlanOutputSchema,
    PointSchema,
    WallLabelSchema,
    WallSchema,
)

router = APIRouter(prefix="/plan", tags=["plan"])


def _point(point: Point2D) -> PointSchema:
    return PointSchema(x=point.x, y=point.y)


def _bounds(bounds: BoundingBox) -> BoundsSchema:
    return BoundsSchema(
        min_x=bounds.min_x,
        min_y=bounds.min_y,
        max_x=bounds.max_x,
        max_y=bounds.max_y,
    )


def plan_output_to_schema(output: PlanOutput) -> PlanOutputSchema:
    """Convert a PlanOutput to its response schema."""
    stats = None
    if output.stats is not None:
        stats = LayoutStatsSchema(
            count=output.stats.count,
            full_count=output.stats.full_count,
            cut_count=output.stats.cut_count,
            total_area=output.stats.total_area,
            coverage_percentage=output.stats.coverage_percentage,
        )

    return PlanOutputSchema(
        walls=[WallSchema(id=w.id, length=w.length, angle=w.angle) for w in output.walls],
        vertices=[_point(v) for v in output.vertices],
        labels=[
            WallLabelSchema(
                wall_index=label.wall_index,
                position=_point(label.position),
                angle=label.angle,
                text=label.text,
            )
            for label in output.labels
        ],
        room_bounds=_bounds(output.room_bounds),
        view_bounds=_bounds(output.view_bounds),
        room_area=output.room_area,
        scale=output.scale,
        path=output.path,
        pieces=[
            BoardPieceSchema(
                row=p.row,
                x=p.x,
                y=p.y,
                length=p.length,
                width=p.width,
                is_cut=p.is_cut,
                original_length=p.original_length,
            )
            for p in output.pieces
        ],
        stats=stats,
        warnings=[
            GeometryWarningSchema(
                error_type=e.error_type,
                wall_indices=list(e.wall_indices),
                message=e.message,
            )
            for e in output.geometry_errors
        ],
    )


@router.post("", response_model=PlanOutputSchema)
async def compute_plan(request: PlanRequest, command: PlanCommandDep) -> PlanOutputSchema:
    """Compute vertices, labels, path and board layout for a configuration.

    Raises:
        ConfigError: If the configuration is invalid (mapped to 422).
    """
    config = load_config_from_dict(request.config)
    return plan_output_to_schema(command.execute_from_config(config))
