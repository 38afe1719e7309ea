"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from floorplan.application.config.loader import load_config_from_dict
from floorplan.application.config.schema import FloorPlanConfiguration


def merge_config_with_cli(
    config: FloorPlanConfiguration,
    *,
    walls: list[dict[str, Any]] | None = None,
    auto_close: bool | None = None,
    orthogonal: bool | None = None,
    flooring_enabled: bool | None = None,
    board_length: float | None = None,
    board_width: float | None = None,
    expansion_gap: float | None = None,
    min_cut_length: float | None = None,
    max_cut_length: float | None = None,
    row_joint_offset: float | None = None,
    installation_direction: str | None = None,
    output_format: str | None = None,
    scale: float | None = None,
) -> FloorPlanConfiguration:
    """Merge CLI arguments with configuration values.

    Board options given on the command line create a flooring section if
    the configuration has none.

    Args:
        config: The base configuration to merge with
        walls: Replacement wall list (``{"length": .., "angle": ..}`` dicts)
        auto_close: Override for plan.auto_close
        orthogonal: Override for plan.orthogonal
        flooring_enabled: Override for flooring.enabled
        board_length: Override for flooring.board_length
        board_width: Override for flooring.board_width
        expansion_gap: Override for flooring.expansion_gap
        min_cut_length: Override for flooring.min_cut_length
        max_cut_length: Override for flooring.max_cut_length
        row_joint_offset: Override for flooring.row_joint_offset
        installation_direction: Override for flooring.installation_direction
        output_format: Override for output.format
        scale: Override for output.scale

    Returns:
        A new, re-validated FloorPlanConfiguration

    Raises:
        ConfigError: If an override makes the configuration invalid.

    Example:
        >>> merged = merge_config_with_cli(config, board_length=1.38)
        >>> merged.flooring.board_length
        1.38
    """
    data = config.model_dump()

    plan = data["plan"]
    if walls is not None:
        plan["walls"] = walls
    if auto_close is not None:
        plan["auto_close"] = auto_close
    if orthogonal is not None:
        plan["orthogonal"] = orthogonal

    flooring_overrides = {
        "enabled": flooring_enabled,
        "board_length": board_length,
        "board_width": board_width,
        "expansion_gap": expansion_gap,
        "min_cut_length": min_cut_length,
        "max_cut_length": max_cut_length,
        "row_joint_offset": row_joint_offset,
        "installation_direction": installation_direction,
    }
    flooring_overrides = {k: v for k, v in flooring_overrides.items() if v is not None}
    if flooring_overrides:
        flooring = data.get("flooring") or {}
        flooring.update(flooring_overrides)
        data["flooring"] = flooring

    output = data["output"]
    if output_format is not None:
        output["format"] = output_format
    if scale is not None:
        output["scale"] = scale

    return load_config_from_dict(data)
