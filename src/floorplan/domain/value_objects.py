"""Value objects for the floor plan domain.

All geometry is expressed in meters. Angles are degrees measured from the
positive X axis, clockwise in screen space (Y grows downward).

All dataclasses are frozen (immutable) so they can be hashed and used as
cache keys for layout recomputation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

# Rings with a smaller area (square meters) are treated as collapsed.
MIN_ROOM_AREA = 1e-9


class InstallationDirection(str, Enum):
    """Axis the boards run parallel to."""

    ALONG_WIDTH = "along-width"
    ALONG_LENGTH = "along-length"


@dataclass(frozen=True)
class Point2D:
    """2D point in plan coordinate space.

    Negative values are valid; vertex 0 of every plan is the origin.
    """

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point in meters."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in plan coordinates.

    Attributes:
        min_x: Left edge in meters.
        min_y: Top edge in meters.
        max_x: Right edge in meters.
        max_y: Bottom edge in meters.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point2D]) -> BoundingBox:
        """Smallest box containing all points.

        Raises:
            ValueError: If no points are given.
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(
            min_x=min(p.x for p in pts),
            min_y=min(p.y for p in pts),
            max_x=max(p.x for p in pts),
            max_y=max(p.y for p in pts),
        )

    @property
    def width(self) -> float:
        """Extent along X in meters."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Extent along Y in meters."""
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        """True when the box has no positive area."""
        return self.width <= 0 or self.height <= 0

    def expand(self, padding: float) -> BoundingBox:
        """Grow the box outward by ``padding`` on all four sides."""
        return BoundingBox(
            min_x=self.min_x - padding,
            min_y=self.min_y - padding,
            max_x=self.max_x + padding,
            max_y=self.max_y + padding,
        )

    def shrink(self, gap: float) -> BoundingBox:
        """Shrink the box inward by ``gap`` on all four sides.

        The result may be inverted (``is_empty``) if the gap is larger than
        half the box.
        """
        return self.expand(-gap)


@dataclass(frozen=True)
class BoardConfig:
    """Laminate board configuration.

    Attributes:
        board_length: Nominal board length in meters.
        board_width: Nominal board width in meters.
        expansion_gap: Margin left unfilled along the room boundary.
        min_cut_length: Shortest cut piece worth installing (optional).
        max_cut_length: Longest allowed cut piece (optional).
        row_joint_offset: Stagger applied at the start of every other row.
        installation_direction: Axis the boards run parallel to.
    """

    board_length: float = 1.2
    board_width: float = 0.2
    expansion_gap: float = 0.0
    min_cut_length: float | None = None
    max_cut_length: float | None = None
    row_joint_offset: float = 0.0
    installation_direction: InstallationDirection = InstallationDirection.ALONG_WIDTH

    def __post_init__(self) -> None:
        if self.board_length <= 0 or self.board_width <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.expansion_gap < 0:
            raise ValueError("Expansion gap must be non-negative")
        if self.row_joint_offset < 0:
            raise ValueError("Row joint offset must be non-negative")
        if self.min_cut_length is not None and self.min_cut_length <= 0:
            raise ValueError("Minimum cut length must be positive")
        if self.max_cut_length is not None and self.max_cut_length <= 0:
            raise ValueError("Maximum cut length must be positive")
        if (
            self.min_cut_length is not None
            and self.max_cut_length is not None
            and self.min_cut_length > self.max_cut_length
        ):
            raise ValueError("Minimum cut length cannot exceed maximum cut length")
        # Accept plain strings coming from config layers.
        if not isinstance(self.installation_direction, InstallationDirection):
            object.__setattr__(
                self,
                "installation_direction",
                InstallationDirection(self.installation_direction),
            )


@dataclass(frozen=True)
class BoardPiece:
    """A placed board, full length or cut.

    ``length`` always runs along the installation direction and ``width``
    across it; ``placed_width``/``placed_height`` give the footprint in plan
    axes.

    Attributes:
        length: Piece length in meters.
        width: Piece width in meters.
        x: Left edge of the piece in meters.
        y: Top edge of the piece in meters.
        is_cut: True if the piece is shorter than a full board.
        original_length: Length of the board it was cut from (cut pieces only).
        direction: Installation direction the piece was laid in.
        row: Zero-based row index.
    """

    length: float
    width: float
    x: float
    y: float
    is_cut: bool = False
    original_length: float | None = None
    direction: InstallationDirection = InstallationDirection.ALONG_WIDTH
    row: int = 0

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0:
            raise ValueError("Board piece dimensions must be positive")
        if self.is_cut and self.original_length is None:
            raise ValueError("Cut pieces must record their original length")
        if not self.is_cut and self.original_length is not None:
            raise ValueError("Only cut pieces carry an original length")

    @property
    def position(self) -> Point2D:
        """Top-left corner of the piece."""
        return Point2D(self.x, self.y)

    @property
    def placed_width(self) -> float:
        """Extent along X (accounts for installation direction)."""
        if self.direction is InstallationDirection.ALONG_LENGTH:
            return self.width
        return self.length

    @property
    def placed_height(self) -> float:
        """Extent along Y (accounts for installation direction)."""
        if self.direction is InstallationDirection.ALONG_LENGTH:
            return self.length
        return self.width

    @property
    def area(self) -> float:
        """Covered area in square meters."""
        return self.length * self.width


@dataclass(frozen=True)
class LayoutStats:
    """Summary of a board layout.

    Attributes:
        count: Number of placed pieces.
        cut_count: Number of pieces flagged as cut.
        total_area: Sum of piece areas in square meters.
        room_area: Area of the room polygon, when known.
    """

    count: int
    cut_count: int
    total_area: float
    room_area: float | None = None

    @property
    def full_count(self) -> int:
        """Number of uncut boards."""
        return self.count - self.cut_count

    @property
    def coverage_percentage(self) -> float | None:
        """Covered share of the room area, or None without a usable room area."""
        if self.room_area is None or self.room_area < MIN_ROOM_AREA:
            return None
        return self.total_area / self.room_area * 100


@dataclass(frozen=True)
class WallLabel:
    """Dimension label drawn at the midpoint of a wall.

    Attributes:
        wall_index: Index of the wall in the plan.
        position: Midpoint of the drawn segment.
        angle: Drawn direction of the segment in degrees.
        text: Label text (nominal wall length).
    """

    wall_index: int
    position: Point2D
    angle: float
    text: str


@dataclass(frozen=True)
class GeometryError:
    """A geometry issue detected in a plan.

    Attributes:
        wall_indices: Indices of the walls involved.
        message: Human-readable description.
        error_type: Category ("intersection" or "closure").
    """

    wall_indices: tuple[int, ...]
    message: str
    error_type: str
