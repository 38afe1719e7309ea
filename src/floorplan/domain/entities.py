"""Domain entities for floor plans."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from .services.plan_geometry import closure_gap, find_self_intersections
from .services.vertex_resolver import resolve_vertices
from .value_objects import GeometryError, Point2D

_wall_ids = itertools.count(1)

# Starting outline of a new plan: an L-shaped room, in meters and degrees.
SAMPLE_WALLS: tuple[tuple[float, float], ...] = (
    (3.77, 0.0),
    (3.79, 90.0),
    (2.77, 180.0),
    (1.0, 270.0),
    (1.0, 180.0),
    (2.79, 270.0),
)


def _next_wall_id() -> str:
    return f"w{next(_wall_ids)}"


def snap_orthogonal(angle: float) -> float:
    """Round an angle to the nearest multiple of 90 degrees."""
    return float(round(angle / 90) * 90)


@dataclass
class Wall:
    """A directed wall segment.

    Attributes:
        length: Length of the wall in meters.
        angle: Absolute direction in degrees (0 = +X, 90 = +Y, screen space).
        id: Stable identifier used by editing operations.
    """

    length: float
    angle: float = 0.0
    id: str = field(default_factory=_next_wall_id)

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Wall length must be positive")


@dataclass
class FloorPlan:
    """An ordered sequence of walls forming a polyline.

    The first wall starts at the origin. Each following wall starts where
    the previous one ended. Vertices are always derived from the walls and
    never stored.

    Attributes:
        walls: Ordered wall segments.
        auto_close: Snap the final vertex onto the origin when resolving.
        closure_tolerance: Largest hidden gap (meters) considered closed.
    """

    walls: list[Wall] = field(default_factory=list)
    auto_close: bool = False
    closure_tolerance: float = 0.01

    @classmethod
    def sample(cls, auto_close: bool = False) -> FloorPlan:
        """A new plan pre-filled with the sample L-shaped outline."""
        return cls(
            walls=[Wall(length=length, angle=angle) for length, angle in SAMPLE_WALLS],
            auto_close=auto_close,
        )

    def add_wall(self, length: float = 1.0, angle: float | None = None) -> Wall:
        """Append a wall, continuing the last wall's direction by default."""
        if angle is None:
            angle = self.walls[-1].angle if self.walls else 0.0
        wall = Wall(length=length, angle=angle)
        self.walls.append(wall)
        return wall

    def get_wall(self, wall_id: str) -> Wall:
        """Look up a wall by id.

        Raises:
            KeyError: If no wall has the given id.
        """
        for wall in self.walls:
            if wall.id == wall_id:
                return wall
        raise KeyError(f"Unknown wall id: {wall_id}")

    def update_wall(
        self,
        wall_id: str,
        *,
        length: float | None = None,
        angle: float | None = None,
        orthogonal: bool = False,
    ) -> Wall:
        """Edit a wall in place.

        Args:
            wall_id: Id of the wall to edit.
            length: New length in meters (unchanged if None).
            angle: New angle in degrees (unchanged if None).
            orthogonal: Snap the new angle to a multiple of 90 degrees.

        Raises:
            KeyError: If no wall has the given id.
            ValueError: If the new length is not positive.
        """
        wall = self.get_wall(wall_id)
        if length is not None:
            if length <= 0:
                raise ValueError("Wall length must be positive")
            wall.length = length
        if angle is not None:
            wall.angle = snap_orthogonal(angle) if orthogonal else angle
        return wall

    def remove_wall(self, wall_id: str) -> Wall:
        """Remove a wall by id and return it.

        Raises:
            KeyError: If no wall has the given id.
        """
        wall = self.get_wall(wall_id)
        self.walls.remove(wall)
        return wall

    def vertices(self) -> tuple[Point2D, ...]:
        """Resolve the wall sequence into absolute vertices."""
        return resolve_vertices(self.walls, auto_close=self.auto_close)

    @property
    def closure_gap(self) -> float:
        """Distance between the unsnapped end point and the origin."""
        return closure_gap(self.walls)

    @property
    def is_closed(self) -> bool:
        """Whether the drawn polyline returns to the origin."""
        if not self.walls:
            return False
        return self.auto_close or self.closure_gap <= self.closure_tolerance

    def validate_geometry(self) -> list[GeometryError]:
        """Check for crossing walls and, when auto-closing, a hidden gap."""
        errors = find_self_intersections(self.vertices(), closed=self.is_closed)
        if self.auto_close and self.walls and self.closure_gap > self.closure_tolerance:
            last = len(self.walls) - 1
            errors.append(
                GeometryError(
                    wall_indices=(last,),
                    message=(
                        f"Auto-close moves the end of wall {last} by "
                        f"{self.closure_gap:.3f} m"
                    ),
                    error_type="closure",
                )
            )
        return errors
