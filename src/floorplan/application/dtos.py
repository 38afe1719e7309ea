"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from floorplan.domain.value_objects import (
    BoardConfig,
    BoardPiece,
    BoundingBox,
    GeometryError,
    LayoutStats,
    Point2D,
    WallLabel,
)


@dataclass
class WallInput:
    """Input DTO for a wall typed in by a user."""

    length: float
    angle: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not math.isfinite(self.length):
            errors.append("Length must be a finite number")
        elif self.length <= 0:
            errors.append("Length must be positive")
        if not math.isfinite(self.angle):
            errors.append("Angle must be a finite number")
        return errors

    @classmethod
    def parse(cls, text: str) -> WallInput:
        """Parse ``LENGTH@ANGLE`` (angle optional), e.g. ``3.77@90``.

        Raises:
            ValueError: If the text is not in that form.
        """
        length_text, _, angle_text = text.partition("@")
        try:
            length = float(length_text)
            angle = float(angle_text) if angle_text else 0.0
        except ValueError:
            raise ValueError(f"Invalid wall '{text}', expected LENGTH@ANGLE") from None
        return cls(length=length, angle=angle)


@dataclass(frozen=True)
class WallRecord:
    """Snapshot of a wall as it was when a plan was computed."""

    id: str
    length: float
    angle: float


@dataclass(frozen=True)
class PlanOutput:
    """Everything derived from a plan: drawing data and board layout.

    Attributes:
        walls: Wall snapshots in traversal order.
        vertices: Resolved vertices (``len(walls) + 1`` entries).
        auto_close: Whether the last vertex was snapped onto the origin.
        labels: Dimension labels at wall midpoints.
        room_bounds: Bounds of the vertices.
        view_bounds: Room bounds grown by the drawing padding.
        scale: Pixels per meter used for ``path``.
        path: Plan outline as move/line commands in pixels.
        room_area: Area of the vertex ring in square meters.
        board_config: Flooring configuration, None when flooring is off.
        pieces: Placed boards (empty when flooring is off).
        stats: Layout summary, None when flooring is off.
        geometry_errors: Crossing walls and auto-close gaps.
    """

    walls: tuple[WallRecord, ...]
    vertices: tuple[Point2D, ...]
    auto_close: bool
    labels: tuple[WallLabel, ...]
    room_bounds: BoundingBox
    view_bounds: BoundingBox
    scale: float
    path: str
    room_area: float
    board_config: BoardConfig | None = None
    pieces: tuple[BoardPiece, ...] = ()
    stats: LayoutStats | None = None
    geometry_errors: tuple[GeometryError, ...] = field(default_factory=tuple)

    @property
    def has_layout(self) -> bool:
        """True when a board layout was computed."""
        return self.board_config is not None

    @property
    def view_bounds_px(self) -> tuple[float, float, float, float]:
        """View bounds as (x, y, width, height) in pixels."""
        b = self.view_bounds
        return (
            b.min_x * self.scale,
            b.min_y * self.scale,
            b.width * self.scale,
            b.height * self.scale,
        )
