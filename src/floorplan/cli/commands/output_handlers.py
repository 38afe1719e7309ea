"""Output handling for the floorplan CLI.

Console output goes through the formatters; file output goes through the
exporter registry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from floorplan.infrastructure import (
    BoardLayoutFormatter,
    LayoutStatsFormatter,
    PlanDiagramFormatter,
    VertexTableFormatter,
    WallTableFormatter,
)
from floorplan.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from floorplan.application.dtos import PlanOutput

__all__ = [
    "echo_output",
    "handle_multi_format_export",
]


def echo_output(result: PlanOutput, output_format: str) -> None:
    """Print a plan to stdout in the requested console format.

    Args:
        result: The computed plan.
        output_format: One of all, vertices, walls, boards, stats, json, svg.
    """
    if output_format in ("json", "svg"):
        exporter = ExporterRegistry.get(output_format)()
        typer.echo(exporter.export_string(result))
        return

    sections: list[str] = []
    if output_format in ("all", "walls"):
        sections.append(WallTableFormatter().format(result))
    if output_format in ("all", "vertices"):
        sections.append(VertexTableFormatter().format(result))
    if output_format == "all":
        sections.append(PlanDiagramFormatter().format(result))
    if output_format in ("all", "boards") and result.has_layout:
        sections.append(BoardLayoutFormatter().format(result.pieces))
    if output_format in ("all", "stats"):
        sections.append(LayoutStatsFormatter().format(result.stats))

    typer.echo("\n\n".join(sections))


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: PlanOutput,
) -> dict[str, Path]:
    """Handle multi-format export via the --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files (default: cwd).
        project_name: Project name for file naming.
        result: The plan to export.

    Returns:
        Mapping of format name to written file.

    Raises:
        typer.Exit: With code 1 on unknown formats or export failures.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.strip().lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if not ExporterRegistry.is_registered(f)]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files
