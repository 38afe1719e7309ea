"""Typer CLI for floor plans and laminate layouts."""

from pathlib import Path
from typing import Annotated, Any

import typer

from floorplan.application import GenerateFloorPlanCommand, PlanOutput, WallInput
from floorplan.application.config import (
    ConfigError,
    FloorPlanConfiguration,
    PlanConfig,
    load_config,
    merge_config_with_cli,
)
from floorplan.cli.commands import (
    echo_output,
    handle_multi_format_export,
    validate_command,
)
from floorplan.domain import SAMPLE_WALLS
from floorplan.infrastructure import (
    BoardLayoutFormatter,
    LayoutStatsFormatter,
    VertexTableFormatter,
)

app = typer.Typer(
    name="floorplan",
    help="Draw floor plans from wall lengths and angles and lay out laminate boards.",
)

app.command(name="validate")(validate_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
WallOption = Annotated[
    list[str] | None,
    typer.Option(
        "--wall",
        "-w",
        help="Wall as LENGTH@ANGLE in meters and degrees, repeat in order (e.g. -w 4@0 -w 3@90)",
    ),
]
SampleOption = Annotated[
    bool,
    typer.Option("--sample", help="Start from the sample L-shaped room"),
]
AutoCloseOption = Annotated[
    bool | None,
    typer.Option("--auto-close/--no-auto-close", help="Snap the last vertex onto the origin"),
]
OrthogonalOption = Annotated[
    bool | None,
    typer.Option("--orthogonal/--free-angles", help="Round angles to multiples of 90 degrees"),
]
BoardLengthOption = Annotated[
    float | None, typer.Option("--board-length", help="Board length in meters")
]
BoardWidthOption = Annotated[
    float | None, typer.Option("--board-width", help="Board width in meters")
]
ExpansionGapOption = Annotated[
    float | None, typer.Option("--expansion-gap", help="Gap along the walls in meters")
]
MinCutOption = Annotated[
    float | None, typer.Option("--min-cut", help="Shortest acceptable cut piece in meters")
]
MaxCutOption = Annotated[
    float | None, typer.Option("--max-cut", help="Longest acceptable cut piece in meters")
]
RowOffsetOption = Annotated[
    float | None, typer.Option("--row-offset", help="Stagger of every other row in meters")
]
DirectionOption = Annotated[
    str | None,
    typer.Option("--direction", help="Board direction: along-width or along-length"),
]


def _wall_overrides(walls: list[str] | None, sample: bool) -> list[dict[str, Any]] | None:
    """Turn --wall / --sample options into wall dictionaries for the merger."""
    if walls:
        result: list[dict[str, Any]] = []
        for text in walls:
            try:
                wall = WallInput.parse(text)
            except ValueError as e:
                typer.echo(f"Error: {e}", err=True)
                raise typer.Exit(code=1)
            errors = wall.validate()
            if errors:
                for error in errors:
                    typer.echo(f"Error: wall '{text}': {error}", err=True)
                raise typer.Exit(code=1)
            result.append({"length": wall.length, "angle": wall.angle})
        return result
    if sample:
        return [{"length": length, "angle": angle} for length, angle in SAMPLE_WALLS]
    return None


def _resolve_config(
    config_file: Path | None,
    walls: list[str] | None,
    sample: bool,
    **overrides: Any,
) -> FloorPlanConfiguration:
    """Load the config file (if any) and apply CLI overrides on top."""
    wall_dicts = _wall_overrides(walls, sample)

    try:
        if config_file is not None:
            config = load_config(config_file)
        elif wall_dicts is not None:
            config = FloorPlanConfiguration(plan=PlanConfig())
        else:
            typer.echo(
                "Error: one of --config, --wall or --sample is required",
                err=True,
            )
            raise typer.Exit(code=1)

        return merge_config_with_cli(config, walls=wall_dicts, **overrides)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _compute(config: FloorPlanConfiguration) -> PlanOutput:
    return GenerateFloorPlanCommand().execute_from_config(config)


@app.command()
def generate(
    config_file: ConfigOption = None,
    walls: WallOption = None,
    sample: SampleOption = False,
    auto_close: AutoCloseOption = None,
    orthogonal: OrthogonalOption = None,
    flooring: Annotated[
        bool | None,
        typer.Option("--flooring/--no-flooring", help="Compute a laminate board layout"),
    ] = None,
    board_length: BoardLengthOption = None,
    board_width: BoardWidthOption = None,
    expansion_gap: ExpansionGapOption = None,
    min_cut: MinCutOption = None,
    max_cut: MaxCutOption = None,
    row_offset: RowOffsetOption = None,
    direction: DirectionOption = None,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: all, vertices, walls, boards, stats, json, svg",
        ),
    ] = None,
    scale: Annotated[
        float | None,
        typer.Option("--scale", help="Pixels per meter for SVG output (20-300)"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,json,dxf (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Generate a floor plan and, optionally, its board layout.

    Walls come from a configuration file, from --wall options, or from
    the sample room. CLI options override values from the file.

    Examples:
        floorplan generate --sample --auto-close
        floorplan generate -w 4@0 -w 3@90 -w 4@180 -w 3@270 --flooring
        floorplan generate --config apartment.json --row-offset 0.4 --format boards
        floorplan generate --config apartment.json --output-formats svg,dxf --output-dir ./out
    """
    config = _resolve_config(
        config_file,
        walls,
        sample,
        auto_close=auto_close,
        orthogonal=orthogonal,
        flooring_enabled=flooring,
        board_length=board_length,
        board_width=board_width,
        expansion_gap=expansion_gap,
        min_cut_length=min_cut,
        max_cut_length=max_cut,
        row_joint_offset=row_offset,
        installation_direction=direction,
        output_format=output_format,
        scale=scale,
    )
    result = _compute(config)

    if output_formats is None and config.output.formats:
        output_formats = ",".join(config.output.formats)
    if output_formats:
        if output_dir is None and config.output.output_dir:
            output_dir = Path(config.output.output_dir)
        handle_multi_format_export(
            output_formats,
            output_dir,
            project_name or config.output.project_name,
            result,
        )
        return

    echo_output(result, config.output.format)


@app.command()
def vertices(
    walls: Annotated[
        list[str],
        typer.Argument(help="Walls as LENGTH@ANGLE, in drawing order"),
    ],
    auto_close: AutoCloseOption = None,
    orthogonal: OrthogonalOption = None,
) -> None:
    """Print the vertices of a wall sequence.

    Example:
        floorplan vertices 4@0 3@90 4@180 3@270
    """
    config = _resolve_config(
        None, walls, False, auto_close=auto_close, orthogonal=orthogonal
    )
    typer.echo(VertexTableFormatter().format(_compute(config)))


@app.command()
def layout(
    config_file: ConfigOption = None,
    walls: WallOption = None,
    sample: SampleOption = False,
    auto_close: AutoCloseOption = None,
    board_length: BoardLengthOption = None,
    board_width: BoardWidthOption = None,
    expansion_gap: ExpansionGapOption = None,
    min_cut: MinCutOption = None,
    max_cut: MaxCutOption = None,
    row_offset: RowOffsetOption = None,
    direction: DirectionOption = None,
) -> None:
    """Print the board layout and its summary.

    Flooring is always enabled; board options override the config file.

    Example:
        floorplan layout --sample --row-offset 0.4 --expansion-gap 0.01
    """
    config = _resolve_config(
        config_file,
        walls,
        sample,
        auto_close=auto_close,
        flooring_enabled=True,
        board_length=board_length,
        board_width=board_width,
        expansion_gap=expansion_gap,
        min_cut_length=min_cut,
        max_cut_length=max_cut,
        row_joint_offset=row_offset,
        installation_direction=direction,
    )
    result = _compute(config)
    typer.echo(BoardLayoutFormatter().format(result.pieces))
    typer.echo()
    typer.echo(LayoutStatsFormatter().format(result.stats))


if __name__ == "__main__":
    app()
