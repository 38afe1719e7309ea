"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from floorplan.application.config import load_config_from_dict
from floorplan.infrastructure.exporters import ExporterRegistry
from floorplan.web.dependencies import PlanCommandDep
from floorplan.web.schemas.requests import PlanRequest
from floorplan.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_plan(
    format_name: str,
    request: PlanRequest,
    command: PlanCommandDep,
) -> Response:
    """Export a plan in the requested format as a file download.

    Raises:
        UnsupportedFormatError: If the format is unknown (mapped to 400).
        ConfigError: If the configuration is invalid (mapped to 422).
    """
    exporter_class = ExporterRegistry.get(format_name)
    config = load_config_from_dict(request.config)
    output = command.execute_from_config(config)

    exporter = exporter_class()
    filename = f"{config.output.project_name}.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(output),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
