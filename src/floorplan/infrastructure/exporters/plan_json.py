"""JSON exporter for floor plans and board layouts.

The document carries a schema version, the walls as entered, the drawn
vertices, the vector path, the placed boards, the layout summary and any
geometry warnings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from floorplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from floorplan.application.dtos import PlanOutput
    from floorplan.domain.value_objects import BoardConfig, BoardPiece, BoundingBox


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


def plan_to_dict(output: PlanOutput) -> dict[str, Any]:
    """Convert a PlanOutput to plain JSON-compatible data."""
    result: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "walls": [
            {"id": w.id, "length": w.length, "angle": w.angle} for w in output.walls
        ],
        "auto_close": output.auto_close,
        "vertices": [{"x": v.x, "y": v.y} for v in output.vertices],
        "labels": [
            {
                "wall_index": label.wall_index,
                "x": label.position.x,
                "y": label.position.y,
                "angle": label.angle,
                "text": label.text,
            }
            for label in output.labels
        ],
        "room": {
            "area": output.room_area,
            "bounds": _bbox_to_dict(output.room_bounds),
        },
        "view": {
            "bounds": _bbox_to_dict(output.view_bounds),
            "scale": output.scale,
            "path": output.path,
        },
        "flooring": None,
        "warnings": [
            {
                "type": error.error_type,
                "walls": list(error.wall_indices),
                "message": error.message,
            }
            for error in output.geometry_errors
        ],
    }

    if output.board_config is not None and output.stats is not None:
        stats = output.stats
        result["flooring"] = {
            "config": _board_config_to_dict(output.board_config),
            "pieces": [_piece_to_dict(p) for p in output.pieces],
            "stats": {
                "count": stats.count,
                "full_count": stats.full_count,
                "cut_count": stats.cut_count,
                "total_area": stats.total_area,
                "coverage_percentage": stats.coverage_percentage,
            },
        }

    return result


def _bbox_to_dict(bbox: BoundingBox) -> dict[str, float]:
    return {
        "min_x": bbox.min_x,
        "min_y": bbox.min_y,
        "max_x": bbox.max_x,
        "max_y": bbox.max_y,
    }


def _board_config_to_dict(config: BoardConfig) -> dict[str, Any]:
    return {
        "board_length": config.board_length,
        "board_width": config.board_width,
        "expansion_gap": config.expansion_gap,
        "min_cut_length": config.min_cut_length,
        "max_cut_length": config.max_cut_length,
        "row_joint_offset": config.row_joint_offset,
        "installation_direction": config.installation_direction.value,
    }


def _piece_to_dict(piece: BoardPiece) -> dict[str, Any]:
    data: dict[str, Any] = {
        "row": piece.row,
        "x": piece.x,
        "y": piece.y,
        "length": piece.length,
        "width": piece.width,
        "is_cut": piece.is_cut,
    }
    if piece.is_cut:
        data["original_length"] = piece.original_length
    return data


@ExporterRegistry.register("json")
class JsonPlanExporter:
    """Exports plans as JSON documents.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: PlanOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported JSON to %s", path)

    def export_string(self, output: PlanOutput) -> str:
        return json.dumps(plan_to_dict(output), indent=self.indent)
