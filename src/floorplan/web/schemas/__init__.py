"""Pydantic schemas for the REST API."""

from floorplan.web.schemas.requests import ConfigValidateRequest, PlanRequest
from floorplan.web.schemas.responses import (
    BoardPieceSchema,
    BoundsSchema,
    ExportFormatsSchema,
    GeometryWarningSchema,
    LayoutStatsSchema,
    PlanOutputSchema,
    PointSchema,
    ValidationResultSchema,
    WallLabelSchema,
    WallSchema,
)

__all__ = [
    "BoardPieceSchema",
    "BoundsSchema",
    "ConfigValidateRequest",
    "ExportFormatsSchema",
    "GeometryWarningSchema",
    "LayoutStatsSchema",
    "PlanOutputSchema",
    "PlanRequest",
    "PointSchema",
    "ValidationResultSchema",
    "WallLabelSchema",
    "WallSchema",
]
