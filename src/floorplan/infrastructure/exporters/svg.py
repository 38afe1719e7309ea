"""SVG exporter for floor plan drawings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from floorplan.infrastructure.exporters.base import ExporterRegistry
from floorplan.infrastructure.plan_renderer import PlanRenderer

if TYPE_CHECKING:
    from floorplan.application.dtos import PlanOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports the plan outline, dimension labels and boards as SVG.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        show_boards: bool = True,
        show_labels: bool = True,
        show_vertices: bool = False,
    ) -> None:
        self.renderer = PlanRenderer(
            show_boards=show_boards,
            show_labels=show_labels,
            show_vertices=show_vertices,
        )

    def export(self, output: PlanOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported SVG to %s", path)

    def export_string(self, output: PlanOutput) -> str:
        return self.renderer.render(output)
