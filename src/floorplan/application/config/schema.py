"""Pydantic models for floor plan configuration files.

A configuration file describes the walls of a plan, an optional laminate
flooring setup and output preferences:

    {
        "schema_version": "1.0",
        "plan": {
            "walls": [{"length": 3.77, "angle": 0}, {"length": 3.79, "angle": 90}],
            "auto_close": true
        },
        "flooring": {"board_length": 1.2, "board_width": 0.2},
        "output": {"format": "all", "scale": 120}
    }
"""

from __future__ import annotations

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from floorplan.domain.entities import snap_orthogonal

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

MIN_BOARD_SIZE = 0.01  # meters
MAX_WALL_LENGTH = 1000.0  # meters

OutputFormat = Literal["all", "vertices", "walls", "boards", "stats", "json", "svg"]


class WallConfig(BaseModel):
    """Configuration for a single wall.

    Attributes:
        id: Optional stable identifier (generated when omitted).
        length: Wall length in meters.
        angle: Absolute direction in degrees (0 = right, 90 = down).
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: str | None = Field(default=None, min_length=1, description="Wall identifier")
    length: float = Field(..., gt=0, le=MAX_WALL_LENGTH, description="Wall length in meters")
    angle: float = Field(default=0.0, description="Absolute angle in degrees")


class PlanConfig(BaseModel):
    """Wall sequence and drawing options.

    Attributes:
        walls: Ordered walls; the first starts at the origin.
        auto_close: Snap the last vertex onto the origin.
        orthogonal: Round every angle to a multiple of 90 degrees.
    """

    model_config = ConfigDict(extra="forbid")

    walls: list[WallConfig] = Field(default_factory=list)
    auto_close: bool = False
    orthogonal: bool = False

    @field_validator("walls")
    @classmethod
    def validate_unique_ids(cls, v: list[WallConfig]) -> list[WallConfig]:
        """Reject duplicate wall ids."""
        ids = [w.id for w in v if w.id is not None]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate wall ids: {', '.join(duplicates)}")
        return v

    @model_validator(mode="after")
    def apply_orthogonal(self) -> "PlanConfig":
        """Snap angles when orthogonal mode is on."""
        if self.orthogonal:
            self.walls = [
                w.model_copy(update={"angle": snap_orthogonal(w.angle)}) for w in self.walls
            ]
        return self


class FlooringConfig(BaseModel):
    """Laminate flooring configuration.

    Attributes:
        enabled: Whether to compute a board layout.
        board_length: Board length in meters.
        board_width: Board width in meters.
        expansion_gap: Margin left along the walls in meters.
        min_cut_length: Shortest acceptable cut piece in meters.
        max_cut_length: Longest acceptable cut piece in meters.
        row_joint_offset: Stagger of every other row in meters.
        installation_direction: Axis the boards run along.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    enabled: bool = True
    board_length: float = Field(
        default=1.2, ge=MIN_BOARD_SIZE, le=10.0, description="Board length in meters"
    )
    board_width: float = Field(
        default=0.2, ge=MIN_BOARD_SIZE, le=2.0, description="Board width in meters"
    )
    expansion_gap: float = Field(default=0.0, ge=0, description="Gap along walls in meters")
    min_cut_length: float | None = Field(default=None, ge=MIN_BOARD_SIZE)
    max_cut_length: float | None = Field(default=None, ge=MIN_BOARD_SIZE)
    row_joint_offset: float = Field(default=0.0, ge=0, description="Row stagger in meters")
    installation_direction: Literal["along-width", "along-length"] = "along-width"

    @model_validator(mode="after")
    def validate_cut_range(self) -> "FlooringConfig":
        """Ensure min_cut_length does not exceed max_cut_length."""
        if (
            self.min_cut_length is not None
            and self.max_cut_length is not None
            and self.min_cut_length > self.max_cut_length
        ):
            raise ValueError(
                f"min_cut_length ({self.min_cut_length}) exceeds "
                f"max_cut_length ({self.max_cut_length})"
            )
        return self


class OutputConfig(BaseModel):
    """Output preferences.

    Attributes:
        format: Console output format.
        scale: Pixels per meter for vector output.
        padding: Margin around the plan in exported drawings, in meters.
        formats: Export formats for multi-format output.
        output_dir: Directory for exported files.
        project_name: Base name for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = "all"
    scale: float = Field(default=120.0, ge=20, le=300, description="Pixels per meter")
    padding: float = Field(default=0.5, ge=0, description="Drawing margin in meters")
    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None
    project_name: str = "floorplan"


class FloorPlanConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        plan: Walls and drawing options.
        flooring: Optional laminate layout configuration.
        output: Output preferences.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    plan: PlanConfig
    flooring: FlooringConfig | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of them."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
