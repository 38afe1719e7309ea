"""Conversion from configuration models to domain objects."""

from floorplan.application.config.schema import FloorPlanConfiguration
from floorplan.domain.entities import FloorPlan, Wall
from floorplan.domain.value_objects import BoardConfig, InstallationDirection


def config_to_floor_plan(config: FloorPlanConfiguration) -> FloorPlan:
    """Build a FloorPlan aggregate from the plan section.

    Walls without an explicit id are named after their position
    (``wall-0``, ``wall-1``, ...) so the same file always yields the same ids.
    """
    walls = [
        Wall(
            length=wall_config.length,
            angle=wall_config.angle,
            id=wall_config.id if wall_config.id is not None else f"wall-{index}",
        )
        for index, wall_config in enumerate(config.plan.walls)
    ]
    return FloorPlan(walls=walls, auto_close=config.plan.auto_close)


def config_to_board_config(config: FloorPlanConfiguration) -> BoardConfig | None:
    """Build a BoardConfig, or None when flooring is absent or disabled."""
    flooring = config.flooring
    if flooring is None or not flooring.enabled:
        return None
    return BoardConfig(
        board_length=flooring.board_length,
        board_width=flooring.board_width,
        expansion_gap=flooring.expansion_gap,
        min_cut_length=flooring.min_cut_length,
        max_cut_length=flooring.max_cut_length,
        row_joint_offset=flooring.row_joint_offset,
        installation_direction=InstallationDirection(flooring.installation_direction),
    )
