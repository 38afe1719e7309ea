"""Unit tests for the exporter framework and the registered exporters.

These tests verify:
- Registry lookups and the error raised for unknown formats
- SVG, JSON and DXF output content
- ExportManager file naming and all-or-nothing validation
"""

from __future__ import annotations

import json
from pathlib import Path

import ezdxf
import pytest

from floorplan.application import GenerateFloorPlanCommand, PlanOutput
from floorplan.domain import BoardConfig, FloorPlan
from floorplan.infrastructure.exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonPlanExporter,
    SvgExporter,
    UnsupportedFormatError,
    plan_to_dict,
)


@pytest.fixture
def plain_output(rectangle_plan: FloorPlan) -> PlanOutput:
    return GenerateFloorPlanCommand().execute(rectangle_plan)


@pytest.fixture
def floored_output(rectangle_plan: FloorPlan) -> PlanOutput:
    return GenerateFloorPlanCommand().execute(
        rectangle_plan, BoardConfig(row_joint_offset=0.4, expansion_gap=0.01)
    )


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "json", "svg"]

    @pytest.mark.parametrize(
        "name, cls", [("svg", SvgExporter), ("json", JsonPlanExporter), ("dxf", DxfExporter)]
    )
    def test_get(self, name: str, cls: type) -> None:
        assert ExporterRegistry.get(name) is cls
        assert ExporterRegistry.is_registered(name)
        assert isinstance(cls(), Exporter)

    def test_unknown_format(self) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExporterRegistry.get("pdf")
        error = exc_info.value
        assert error.format_name == "pdf"
        assert error.available == ["dxf", "json", "svg"]
        assert "Available formats: dxf, json, svg" in str(error)

    def test_unsupported_format_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            ExporterRegistry.get("stl")

    def test_media_types(self) -> None:
        assert SvgExporter.media_type == "image/svg+xml"
        assert JsonPlanExporter.media_type == "application/json"
        assert DxfExporter.media_type == "application/dxf"


class TestSvgExporter:
    """Tests for SvgExporter."""

    def test_export_string(self, floored_output: PlanOutput) -> None:
        svg = SvgExporter().export_string(floored_output)
        assert "<svg" in svg
        assert '<g id="boards">' in svg

    def test_options_forwarded(self, floored_output: PlanOutput) -> None:
        svg = SvgExporter(show_boards=False, show_vertices=True).export_string(floored_output)
        assert '<g id="boards">' not in svg
        assert "<circle" in svg


class TestJsonPlanExporter:
    """Tests for plan_to_dict and JsonPlanExporter."""

    def test_plain_plan(self, plain_output: PlanOutput) -> None:
        data = plan_to_dict(plain_output)
        assert data["schema_version"] == "1.0"
        assert data["walls"][0] == {"id": "a", "length": 4.0, "angle": 0.0}
        assert len(data["vertices"]) == 5
        assert data["room"]["area"] == pytest.approx(12.0)
        assert data["view"]["path"] == plain_output.path
        assert data["flooring"] is None
        assert data["warnings"] == []

    def test_flooring_section(self, floored_output: PlanOutput) -> None:
        flooring = plan_to_dict(floored_output)["flooring"]
        assert flooring["config"]["expansion_gap"] == 0.01
        assert flooring["config"]["installation_direction"] == "along-width"
        assert flooring["stats"]["count"] == len(floored_output.pieces)
        assert len(flooring["pieces"]) == len(floored_output.pieces)
        cut = [p for p in flooring["pieces"] if p["is_cut"]]
        full = [p for p in flooring["pieces"] if not p["is_cut"]]
        assert cut and all(p["original_length"] == 1.2 for p in cut)
        assert full and all("original_length" not in p for p in full)

    def test_export_string_is_valid_json(self, floored_output: PlanOutput) -> None:
        text = JsonPlanExporter(indent=None).export_string(floored_output)
        assert "\n" not in text
        assert json.loads(text)["auto_close"] is False

    def test_export_file(self, plain_output: PlanOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        JsonPlanExporter().export(plain_output, path)
        assert json.loads(path.read_text(encoding="utf-8"))["walls"][1]["id"] == "b"


class TestDxfExporter:
    """Tests for DxfExporter."""

    def test_layers_and_entities(self, floored_output: PlanOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(floored_output, path)

        doc = ezdxf.readfile(path)
        msp = doc.modelspace()
        for layer in ("WALLS", "BOARDS", "CUTS", "LABELS"):
            assert doc.layers.has_entry(layer)

        walls = msp.query('LWPOLYLINE[layer=="WALLS"]')
        boards = msp.query('LWPOLYLINE[layer=="BOARDS"]')
        cuts = msp.query('LWPOLYLINE[layer=="CUTS"]')
        labels = msp.query('TEXT[layer=="LABELS"]')

        assert len(walls) == 1
        assert len(boards) + len(cuts) == len(floored_output.pieces)
        assert len(cuts) == floored_output.stats.cut_count
        assert len(labels) == 4

    def test_y_axis_is_mirrored(self, plain_output: PlanOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.dxf"
        DxfExporter().export(plain_output, path)
        outline = ezdxf.readfile(path).modelspace().query("LWPOLYLINE").first
        ys = [point[1] for point in outline.get_points("xy")]
        assert min(ys) == pytest.approx(-3.0)
        assert max(ys) == pytest.approx(0.0, abs=1e-9)

    def test_optional_layers(self, floored_output: PlanOutput) -> None:
        text = DxfExporter(include_boards=False, include_labels=False).export_string(
            floored_output
        )
        assert "SECTION" in text
        assert "4.00 m" not in text

    def test_export_string_has_labels(self, plain_output: PlanOutput) -> None:
        assert "4.00 m" in DxfExporter().export_string(plain_output)


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, floored_output: PlanOutput, tmp_path: Path) -> None:
        out_dir = tmp_path / "nested" / "out"
        results = ExportManager(out_dir).export_all(
            ["svg", "json", "dxf"], floored_output, project_name="kitchen"
        )

        assert results == {
            "svg": out_dir / "kitchen.svg",
            "json": out_dir / "kitchen.json",
            "dxf": out_dir / "kitchen.dxf",
        }
        assert all(path.exists() for path in results.values())

    def test_unknown_format_writes_nothing(
        self, plain_output: PlanOutput, tmp_path: Path
    ) -> None:
        with pytest.raises(UnsupportedFormatError):
            ExportManager(tmp_path / "out").export_all(["svg", "pdf"], plain_output)
        assert not (tmp_path / "out").exists()

    def test_default_project_name(self, plain_output: PlanOutput, tmp_path: Path) -> None:
        results = ExportManager(tmp_path).export_all(["svg"], plain_output)
        assert results["svg"].name == "floorplan.svg"
