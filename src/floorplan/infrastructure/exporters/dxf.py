"""DXF format exporter for floor plans.

Generates 2D DXF files (R2010 format) in meters with the wall outline,
board outlines and dimension labels on separate layers.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units
from ezdxf.enums import TextEntityAlignment

from floorplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from floorplan.application.dtos import PlanOutput
    from floorplan.domain.value_objects import BoardPiece, WallLabel


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "WALLS": {"color": 7},  # White - plan outline
    "BOARDS": {"color": 3},  # Green - full boards
    "CUTS": {"color": 1},  # Red - cut boards
    "LABELS": {"color": 5},  # Blue - wall dimensions
}

LABEL_HEIGHT = 0.08  # meters


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports plans to DXF for CAD tools.

    The DXF Y axis points up while plans are entered in screen space, so
    Y coordinates are mirrored (``-y``) to keep the drawing the right way up.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, include_boards: bool = True, include_labels: bool = True) -> None:
        self.include_boards = include_boards
        self.include_labels = include_labels

    def export(self, output: PlanOutput, path: Path) -> None:
        doc = self._build_document(output)
        doc.saveas(path)
        logger.info("Exported DXF to %s", path)

    def export_string(self, output: PlanOutput) -> str:
        doc = self._build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _build_document(self, output: PlanOutput) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.M
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])

        msp = doc.modelspace()
        self._draw_walls(msp, output)
        if self.include_boards:
            for piece in output.pieces:
                self._draw_board(msp, piece)
        if self.include_labels:
            for label in output.labels:
                self._draw_label(msp, label)
        return doc

    def _draw_walls(self, msp: Modelspace, output: PlanOutput) -> None:
        if len(output.vertices) < 2:
            return
        points = [(v.x, -v.y) for v in output.vertices]
        msp.add_lwpolyline(points, dxfattribs={"layer": "WALLS"})

    def _draw_board(self, msp: Modelspace, piece: BoardPiece) -> None:
        x = piece.x
        y = -piece.y
        w = piece.placed_width
        h = -piece.placed_height
        points = [
            (x, y),
            (x + w, y),
            (x + w, y + h),
            (x, y + h),
        ]
        layer = "CUTS" if piece.is_cut else "BOARDS"
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})

    def _draw_label(self, msp: Modelspace, label: WallLabel) -> None:
        msp.add_text(
            label.text,
            height=LABEL_HEIGHT,
            rotation=-label.angle,
            dxfattribs={"layer": "LABELS"},
        ).set_placement(
            (label.position.x, -label.position.y),
            align=TextEntityAlignment.BOTTOM_CENTER,
        )


__all__ = ["DxfExporter", "LAYERS"]
