"""Console formatters for floor plans and board layouts."""

from __future__ import annotations

from floorplan.application.dtos import PlanOutput
from floorplan.domain.services import point_in_polygon
from floorplan.domain.value_objects import BoardPiece, LayoutStats, Point2D


class VertexTableFormatter:
    """Formats resolved vertices as a table."""

    def format(self, output: PlanOutput) -> str:
        lines = [
            "VERTICES",
            "=" * 40,
            f"{'#':<6} {'X (m)':>12} {'Y (m)':>12}",
            "-" * 40,
        ]
        for index, vertex in enumerate(output.vertices):
            lines.append(f"{index:<6} {vertex.x:>12.3f} {vertex.y:>12.3f}")
        lines.append("-" * 40)
        if output.auto_close and len(output.vertices) > 1:
            lines.append("Last vertex snapped onto the origin (auto-close)")
        return "\n".join(lines)


class WallTableFormatter:
    """Formats walls with their stored and drawn dimensions."""

    def format(self, output: PlanOutput) -> str:
        """Format walls as a table.

        The drawn length differs from the stored length only for an
        auto-closed last wall.
        """
        if not output.walls:
            return "No walls in plan."

        lines = [
            "WALLS",
            "=" * 60,
            f"{'Id':<12} {'Length (m)':>12} {'Angle':>10} {'Drawn (m)':>12}",
            "-" * 60,
        ]
        for index, wall in enumerate(output.walls):
            drawn = output.vertices[index].distance_to(output.vertices[index + 1])
            lines.append(
                f"{wall.id:<12} {wall.length:>12.2f} {wall.angle:>10.1f} {drawn:>12.2f}"
            )
        lines.append("-" * 60)
        lines.append(f"Perimeter: {sum(w.length for w in output.walls):.2f} m")
        lines.append(f"Area: {output.room_area:.2f} m2")

        for error in output.geometry_errors:
            lines.append(f"WARNING: {error.message}")

        return "\n".join(lines)


class BoardLayoutFormatter:
    """Formats placed boards as a table, one line per piece."""

    def format(self, pieces: tuple[BoardPiece, ...]) -> str:
        if not pieces:
            return "No boards placed."

        lines = [
            "BOARD LAYOUT",
            "=" * 70,
            f"{'Row':<5} {'X (m)':>9} {'Y (m)':>9} {'Length':>9} {'Width':>9} {'Cut from':>12}",
            "-" * 70,
        ]
        for piece in pieces:
            cut_from = f"{piece.original_length:.3f}" if piece.is_cut else ""
            lines.append(
                f"{piece.row:<5} {piece.x:>9.3f} {piece.y:>9.3f} "
                f"{piece.length:>9.3f} {piece.width:>9.3f} {cut_from:>12}"
            )
        lines.append("-" * 70)
        return "\n".join(lines)


class LayoutStatsFormatter:
    """Formats the layout summary."""

    def format(self, stats: LayoutStats | None) -> str:
        if stats is None:
            return "Flooring not configured."

        lines = [
            "LAYOUT SUMMARY",
            "=" * 40,
            f"  Boards placed:  {stats.count}",
            f"  Full boards:    {stats.full_count}",
            f"  Cut boards:     {stats.cut_count}",
            f"  Covered area:   {stats.total_area:.2f} m2",
        ]
        coverage = stats.coverage_percentage
        if coverage is not None:
            lines.append(f"  Room area:      {stats.room_area:.2f} m2")
            lines.append(f"  Coverage:       {coverage:.1f}%")
        return "\n".join(lines)


class PlanDiagramFormatter:
    """Formats an ASCII silhouette of the room.

    Each character cell is sampled at its center: cells covered by a board
    are drawn as ``=`` (``~`` for cut boards), other cells inside the room
    as ``.``, and cells outside as blanks.
    """

    def format(self, output: PlanOutput, width: int = 60) -> str:
        if len(output.vertices) < 3 or output.room_bounds.width <= 0:
            return "No room to display."

        bounds = output.room_bounds
        cell = bounds.width / width
        # Terminal cells are about twice as tall as wide.
        height = max(1, round(bounds.height / (cell * 2)))
        cell_h = bounds.height / height if bounds.height > 0 else cell * 2

        lines = ["PLAN DIAGRAM", "=" * width]
        for row in range(height):
            y = bounds.min_y + (row + 0.5) * cell_h
            chars = []
            for col in range(width):
                x = bounds.min_x + (col + 0.5) * cell
                chars.append(self._cell_char(output, Point2D(x, y)))
            lines.append("".join(chars).rstrip())
        lines.append("=" * width)
        lines.append(f"{bounds.width:.2f} m x {bounds.height:.2f} m")
        return "\n".join(lines)

    def _cell_char(self, output: PlanOutput, point: Point2D) -> str:
        for piece in output.pieces:
            if (
                piece.x <= point.x <= piece.x + piece.placed_width
                and piece.y <= point.y <= piece.y + piece.placed_height
            ):
                return "~" if piece.is_cut else "="
        if point_in_polygon(point, output.vertices):
            return "."
        return " "
