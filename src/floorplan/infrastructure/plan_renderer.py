"""SVG rendering of floor plans and their board layouts.

The drawing uses screen coordinates: one meter is ``scale`` pixels and the
Y axis points down, matching the angles walls are entered with.
"""

from __future__ import annotations

from floorplan.application.dtos import PlanOutput
from floorplan.domain.value_objects import BoardPiece, WallLabel

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'


class PlanRenderer:
    """Renders a PlanOutput as a standalone SVG document.

    Attributes:
        full_board_fill: Fill color for uncut boards.
        cut_board_fill: Fill color for cut boards.
        board_stroke: Stroke color for board outlines.
        wall_stroke: Stroke color for the plan outline.
        text_color: Color for dimension labels.
        show_boards: Whether to draw the board layout.
        show_labels: Whether to draw wall dimension labels.
        show_vertices: Whether to mark each vertex with a dot.
    """

    def __init__(
        self,
        full_board_fill: str = "#DEB887",  # Burlywood
        cut_board_fill: str = "#F4A460",  # Sandy brown
        board_stroke: str = "#8B4513",  # Saddle brown
        wall_stroke: str = "#000000",
        text_color: str = "#333333",
        show_boards: bool = True,
        show_labels: bool = True,
        show_vertices: bool = False,
    ) -> None:
        self.full_board_fill = full_board_fill
        self.cut_board_fill = cut_board_fill
        self.board_stroke = board_stroke
        self.wall_stroke = wall_stroke
        self.text_color = text_color
        self.show_boards = show_boards
        self.show_labels = show_labels
        self.show_vertices = show_vertices

    def render(self, output: PlanOutput) -> str:
        """Generate the SVG document.

        Args:
            output: Computed plan output; its scale and view bounds size
                the drawing.

        Returns:
            SVG document as a string, starting with an XML declaration.
        """
        vx, vy, vw, vh = output.view_bounds_px
        stroke_width = max(1.0, output.scale * 0.01)

        parts: list[str] = [
            XML_HEADER,
            f'<svg width="{vw:.2f}" height="{vh:.2f}" '
            f'viewBox="{vx:.2f} {vy:.2f} {vw:.2f} {vh:.2f}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="{vx:.2f}" y="{vy:.2f}" width="{vw:.2f}" height="{vh:.2f}" '
            f'fill="white"/>',
        ]

        if self.show_boards and output.pieces:
            parts.append("")
            parts.append("  <!-- Boards -->")
            parts.append('  <g id="boards">')
            for piece in output.pieces:
                parts.append(self._render_board(piece, output.scale))
            parts.append("  </g>")

        if output.path:
            parts.append("")
            parts.append("  <!-- Walls -->")
            parts.append(
                f'  <path d="{output.path}" fill="none" '
                f'stroke="{self.wall_stroke}" stroke-width="{stroke_width:.2f}" '
                f'stroke-linejoin="round"/>'
            )

        if self.show_vertices:
            parts.append("")
            parts.append("  <!-- Vertices -->")
            radius = stroke_width * 2
            for vertex in output.vertices:
                parts.append(
                    f'  <circle cx="{vertex.x * output.scale:.2f}" '
                    f'cy="{vertex.y * output.scale:.2f}" r="{radius:.2f}" '
                    f'fill="{self.wall_stroke}"/>'
                )

        if self.show_labels and output.labels:
            parts.append("")
            parts.append("  <!-- Wall dimensions -->")
            font_size = max(8.0, output.scale * 0.1)
            for label in output.labels:
                parts.append(self._render_label(label, output.scale, font_size))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_board(self, piece: BoardPiece, scale: float) -> str:
        x = piece.x * scale
        y = piece.y * scale
        w = piece.placed_width * scale
        h = piece.placed_height * scale
        fill = self.cut_board_fill if piece.is_cut else self.full_board_fill
        return (
            f'    <rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
            f'fill="{fill}" stroke="{self.board_stroke}" stroke-width="0.5"/>'
        )

    def _render_label(self, label: WallLabel, scale: float, font_size: float) -> str:
        """Render a dimension label rotated along its wall.

        Labels on walls pointing left are flipped so the text never reads
        upside down.
        """
        x = label.position.x * scale
        y = label.position.y * scale
        angle = label.angle
        if angle > 90 or angle < -90:
            angle -= 180 if angle > 0 else -180
        return (
            f'  <text x="{x:.2f}" y="{y - font_size * 0.4:.2f}" '
            f'transform="rotate({angle:.2f} {x:.2f} {y:.2f})" '
            f'text-anchor="middle" font-family="Arial, sans-serif" '
            f'font-size="{font_size:.1f}" fill="{self.text_color}">{label.text}</text>'
        )
