"""Exporter framework for floor plan outputs.

- Exporter Protocol: the interface every exporter implements
- ExporterRegistry: central registry for format discovery
- ExportManager: writes one file per requested format

Registered exporters:
- dxf: DXF R2010 drawing for CAD tools
- json: plan, layout and warnings as a JSON document
- svg: plan drawing with boards and dimension labels

Usage:
    from floorplan.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")().export_string(plan_output)

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["svg", "json"], plan_output, project_name="apartment")
"""

from floorplan.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

# Import exporters to trigger registration
from floorplan.infrastructure.exporters.dxf import DxfExporter
from floorplan.infrastructure.exporters.plan_json import JsonPlanExporter, plan_to_dict
from floorplan.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonPlanExporter",
    "SvgExporter",
    "UnsupportedFormatError",
    "plan_to_dict",
]
