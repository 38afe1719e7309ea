"""Row-by-row laminate board packing.

Boards are laid in rows across a rectangular floor region (the room's
bounding box shrunk by the expansion gap). Each row is filled from its
leading edge with full boards; the last board of a row is cut to the
remaining span. Every candidate is checked against the room polygon and
shortened in fixed steps until it fits, so rooms that are not rectangles
still get covered up to their walls.

Odd rows start with a short starter piece of ``row_joint_offset`` so end
joints of neighbouring rows do not line up.

The packer is a pure function of its inputs: identical calls return
identical pieces in row-major order.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

from ..value_objects import (
    BoardConfig,
    BoardPiece,
    BoundingBox,
    InstallationDirection,
    LayoutStats,
    Point2D,
)
from .containment import rectangle_in_polygon

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_STEP",
    "MAX_LAYOUT_CANDIDATES",
    "MIN_STEP",
    "LaminateBoardPacker",
    "layout_stats",
]

DEFAULT_STEP = 0.1  # meters
MIN_STEP = 0.001  # meters; floor for the retry step
EPSILON = 1e-9  # absorbs floating point drift in span comparisons
MAX_LAYOUT_CANDIDATES = 200_000  # rows plus candidates across one layout

_FitCheck = Callable[[float, float], bool]


class LaminateBoardPacker:
    """Fills a floor region with staggered rows of boards.

    Attributes:
        step: Decrement used when shrinking a candidate that does not fit,
            and the distance the cursor skips when a candidate is abandoned.
        max_iterations: Optional cap on candidates tried per row. When None
            the cap is derived from the row span and the smallest possible
            cursor advance.
        max_candidates: Cap on rows plus candidates across a whole layout.
            Reaching it ends the layout early with a warning.
    """

    def __init__(
        self,
        step: float = DEFAULT_STEP,
        max_iterations: int | None = None,
        max_candidates: int = MAX_LAYOUT_CANDIDATES,
    ) -> None:
        """Initialize the packer.

        Args:
            step: Retry step in meters. Values below ``MIN_STEP`` are raised
                to it.
            max_iterations: Optional explicit cap on candidates per row.
            max_candidates: Cap on rows plus candidates per layout.

        Raises:
            ValueError: If step is not a positive finite number, or
                max_iterations or max_candidates is not positive.
        """
        if not (step > 0 and math.isfinite(step)):
            raise ValueError("Packing step must be a positive finite number")
        if max_iterations is not None and max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if max_candidates < 1:
            raise ValueError("max_candidates must be at least 1")
        self.step = max(step, MIN_STEP)
        self.max_iterations = max_iterations
        self.max_candidates = max_candidates

    def pack(
        self,
        polygon: Sequence[Point2D],
        bounding_box: BoundingBox,
        config: BoardConfig,
    ) -> tuple[BoardPiece, ...]:
        """Lay boards over the bounding box, keeping those inside the polygon.

        Args:
            polygon: Room vertices read as a closed ring.
            bounding_box: Region to fill, before the expansion gap.
            config: Board dimensions, gap, cut limits and direction.

        Returns:
            Placed pieces in row-major order. Empty when the polygon has
            fewer than three vertices or the gap leaves no floor.
        """
        if len(polygon) < 3:
            logger.debug("Polygon has %d vertices, nothing to pack", len(polygon))
            return ()

        floor = bounding_box.shrink(config.expansion_gap)
        if floor.is_empty:
            logger.debug("Expansion gap %.3f leaves no floor area", config.expansion_gap)
            return ()

        if config.installation_direction is InstallationDirection.ALONG_LENGTH:
            primary = (floor.min_y, floor.max_y)
            secondary = (floor.min_x, floor.max_x)
        else:
            primary = (floor.min_x, floor.max_x)
            secondary = (floor.min_y, floor.max_y)

        pieces: list[BoardPiece] = []
        candidates_left = self.max_candidates
        row = 0
        while True:
            row_start = secondary[0] + row * config.board_width
            if row_start >= secondary[1] - EPSILON:
                break
            if candidates_left <= 0:
                logger.warning(
                    "Layout stopped at row %d after %d candidates", row, self.max_candidates
                )
                break
            row_width = min(config.board_width, secondary[1] - row_start)
            row_pieces, tried = self._pack_row(
                polygon,
                config,
                row,
                row_start,
                row_width,
                primary[0],
                primary[1],
                candidates_left,
            )
            candidates_left -= max(1, tried)
            logger.debug(
                "Row %d at %.3f: %d pieces (%d cut)",
                row,
                row_start,
                len(row_pieces),
                sum(1 for p in row_pieces if p.is_cut),
            )
            pieces.extend(row_pieces)
            row += 1

        return tuple(pieces)

    def _pack_row(
        self,
        polygon: Sequence[Point2D],
        config: BoardConfig,
        row: int,
        row_start: float,
        row_width: float,
        floor_start: float,
        floor_end: float,
        candidates_left: int,
    ) -> tuple[list[BoardPiece], int]:
        """Fill one row from its leading edge to ``floor_end``.

        Returns the placed pieces and the number of candidates tried, which
        never exceeds ``candidates_left``.
        """
        direction = config.installation_direction

        def fits(position: float, length: float) -> bool:
            x, y, w, h = _footprint(direction, position, row_start, length, row_width)
            return rectangle_in_polygon(Point2D(x, y), w, h, polygon)

        def make_piece(position: float, length: float, is_cut: bool) -> BoardPiece:
            x, y, _, _ = _footprint(direction, position, row_start, length, row_width)
            return BoardPiece(
                length=length,
                width=row_width,
                x=x,
                y=y,
                is_cut=is_cut,
                original_length=config.board_length if is_cut else None,
                direction=direction,
                row=row,
            )

        pieces: list[BoardPiece] = []
        cursor = floor_start

        if row % 2 == 1 and config.row_joint_offset > 0:
            starter = self._starter_length(fits, config, floor_start, floor_end)
            if starter is not None:
                is_cut = starter < config.board_length - EPSILON
                pieces.append(make_piece(cursor, starter, is_cut))
                cursor += starter

        limit = min(self._iteration_limit(floor_end - floor_start, config), candidates_left)
        iterations = 0
        while cursor < floor_end - EPSILON:
            if iterations >= limit:
                logger.warning(
                    "Row %d stopped after %d candidates at %.3f", row, iterations, cursor
                )
                break
            iterations += 1

            remaining = floor_end - cursor
            length = config.board_length
            is_cut = False
            if length > remaining + EPSILON:
                length = remaining
                is_cut = True

            fitted = self._shrink_to_fit(fits, cursor, length)
            if fitted is None:
                cursor += self.step
                continue
            if fitted < length:
                is_cut = True
            length = fitted

            if is_cut and config.max_cut_length is not None and length > config.max_cut_length:
                fitted = self._shrink_to_fit(fits, cursor, config.max_cut_length)
                if fitted is None:
                    cursor += self.step
                    continue
                length = fitted

            if (
                is_cut
                and config.min_cut_length is not None
                and length < config.min_cut_length - EPSILON
            ):
                cursor += self.step
                continue

            pieces.append(make_piece(cursor, length, is_cut))
            cursor += length

        return pieces, iterations

    def _starter_length(
        self,
        fits: _FitCheck,
        config: BoardConfig,
        floor_start: float,
        floor_end: float,
    ) -> float | None:
        """Length of the stagger piece for an odd row, or None if rejected."""
        length = min(config.row_joint_offset, config.board_length, floor_end - floor_start)
        if config.max_cut_length is not None:
            length = min(length, config.max_cut_length)
        if not fits(floor_start, length):
            return None
        if config.min_cut_length is not None and length < config.min_cut_length - EPSILON:
            return None
        return length

    def _shrink_to_fit(self, fits: _FitCheck, position: float, length: float) -> float | None:
        """Shorten a candidate in ``step`` decrements until it fits.

        Returns None once the candidate would drop to ``step`` or below.
        """
        candidate = length
        while not fits(position, candidate):
            candidate -= self.step
            if candidate <= self.step:
                return None
        return candidate

    def _iteration_limit(self, span: float, config: BoardConfig) -> int:
        """Upper bound on candidates per row.

        Every candidate advances the cursor by at least the smallest of the
        step, the board length and the maximum cut length.
        """
        if self.max_iterations is not None:
            return self.max_iterations
        smallest_advance = min(self.step, config.board_length)
        if config.max_cut_length is not None:
            smallest_advance = min(smallest_advance, config.max_cut_length)
        return math.ceil(span / smallest_advance) + 2


def _footprint(
    direction: InstallationDirection,
    position: float,
    row_start: float,
    length: float,
    width: float,
) -> tuple[float, float, float, float]:
    """Map (along-row, across-row) coordinates to an (x, y, w, h) rectangle."""
    if direction is InstallationDirection.ALONG_LENGTH:
        return row_start, position, width, length
    return position, row_start, length, width


def layout_stats(
    pieces: Sequence[BoardPiece], room_area: float | None = None
) -> LayoutStats:
    """Summarize a layout: piece count, cut count and covered area."""
    return LayoutStats(
        count=len(pieces),
        cut_count=sum(1 for p in pieces if p.is_cut),
        total_area=sum(p.area for p in pieces),
        room_area=room_area,
    )
