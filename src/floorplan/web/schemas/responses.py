"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """A vertex in meters."""

    x: float
    y: float


class BoundsSchema(BaseModel):
    """Axis-aligned bounds in meters."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


class WallSchema(BaseModel):
    """A wall as entered."""

    id: str
    length: float = Field(..., description="Length in meters")
    angle: float = Field(..., description="Angle in degrees")


class WallLabelSchema(BaseModel):
    """Dimension label placed at a wall midpoint."""

    wall_index: int
    position: PointSchema
    angle: float = Field(..., description="Drawn angle of the wall in degrees")
    text: str


class BoardPieceSchema(BaseModel):
    """A placed board."""

    row: int
    x: float = Field(..., description="Left edge in meters")
    y: float = Field(..., description="Top edge in meters")
    length: float = Field(..., description="Length along the board direction")
    width: float = Field(..., description="Width across the board direction")
    is_cut: bool
    original_length: float | None = Field(
        default=None, description="Length of the board it was cut from"
    )


class LayoutStatsSchema(BaseModel):
    """Layout summary."""

    count: int
    full_count: int
    cut_count: int
    total_area: float = Field(..., description="Covered area in square meters")
    coverage_percentage: float | None = None


class GeometryWarningSchema(BaseModel):
    """Crossing walls or a large auto-close gap."""

    error_type: str
    wall_indices: list[int]
    message: str


class PlanOutputSchema(BaseModel):
    """Response for plan computation."""

    walls: list[WallSchema]
    vertices: list[PointSchema]
    labels: list[WallLabelSchema]
    room_bounds: BoundsSchema
    view_bounds: BoundsSchema
    room_area: float = Field(..., description="Area in square meters")
    scale: float = Field(..., description="Pixels per meter of the path")
    path: str = Field(..., description="Plan outline as SVG path data in pixels")
    pieces: list[BoardPieceSchema] = Field(default_factory=list)
    stats: LayoutStatsSchema | None = None
    warnings: list[GeometryWarningSchema] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")
