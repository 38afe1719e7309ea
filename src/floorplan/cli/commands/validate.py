"""Validate command for checking plan configuration files.

Loads a JSON configuration, summarizes the plan it describes and lists
blocking errors and warnings, with warnings grouped by the part of the
file they concern (wall geometry or flooring).
"""

from pathlib import Path
from typing import Annotated

import typer

from floorplan.application.config import (
    ConfigError,
    FloorPlanConfiguration,
    ValidationResult,
    load_config,
    validate_config,
)

# Warning groups, keyed by the top-level section of the JSON path.
_WARNING_GROUPS = (("plan", "Geometry warnings"), ("flooring", "Flooring warnings"))


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a floor plan configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        floorplan validate apartment.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    typer.echo(_plan_summary(config))
    typer.echo()

    result = validate_config(config)
    _display_validation_result(result)

    raise typer.Exit(code=result.exit_code)


def _plan_summary(config: FloorPlanConfiguration) -> str:
    plan = config.plan
    parts = [f"{len(plan.walls)} wall(s)"]
    if plan.auto_close:
        parts.append("auto-closed")
    if plan.orthogonal:
        parts.append("orthogonal")
    flooring = config.flooring
    if flooring is not None and flooring.enabled:
        parts.append(
            f"flooring {flooring.board_length:g} x {flooring.board_width:g} m boards, "
            f"{flooring.installation_direction}"
        )
    else:
        parts.append("no flooring")
    return "Plan: " + ", ".join(parts)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            where = detail["path"] or "(root)"
            if "wall" in detail:
                where = f"{where} [{detail['wall']}]"
            typer.echo(f"  {where}: {detail['message']}", err=True)
            if detail.get("value") is not None:
                typer.echo(f"    Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    for section, title in _WARNING_GROUPS:
        warnings = [w for w in result.warnings if w.path.split(".")[0] == section]
        if not warnings:
            continue
        typer.echo(f"{title}:")
        for warning in warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
