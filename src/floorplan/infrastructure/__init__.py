"""Infrastructure layer - formatters, rendering and file exporters."""

from .exporters import (
    DxfExporter,
    ExportManager,
    ExporterRegistry,
    JsonPlanExporter,
    SvgExporter,
    UnsupportedFormatError,
    plan_to_dict,
)
from .formatters import (
    BoardLayoutFormatter,
    LayoutStatsFormatter,
    PlanDiagramFormatter,
    VertexTableFormatter,
    WallTableFormatter,
)
from .plan_renderer import PlanRenderer

__all__ = [
    "BoardLayoutFormatter",
    "DxfExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonPlanExporter",
    "LayoutStatsFormatter",
    "PlanDiagramFormatter",
    "PlanRenderer",
    "SvgExporter",
    "UnsupportedFormatError",
    "VertexTableFormatter",
    "WallTableFormatter",
    "plan_to_dict",
]
