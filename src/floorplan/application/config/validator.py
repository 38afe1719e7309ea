"""Validation structures and plan/flooring checks.

Schema errors are caught while loading. The checks here look at the
resolved geometry. Flooring that cannot place a single board (no room
polygon, or an expansion gap wider than the room) is a blocking error;
configurations that only produce surprising drawings or layouts get
warnings.
"""

from dataclasses import dataclass, field
from typing import Any

from floorplan.application.config.adapter import (
    config_to_board_config,
    config_to_floor_plan,
)
from floorplan.application.config.schema import FloorPlanConfiguration
from floorplan.domain.services import polygon_bounds
from floorplan.domain.value_objects import InstallationDirection


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "plan.walls[0].length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_plan_geometry(config: FloorPlanConfiguration) -> ValidationResult:
    """Warn about empty plans, crossing walls and hidden closure gaps."""
    result = ValidationResult()
    plan = config_to_floor_plan(config)

    if not plan.walls:
        result.add_warning(
            path="plan.walls",
            message="Plan has no walls",
            suggestion="Add at least three walls to describe a room",
        )
        return result

    for error in plan.validate_geometry():
        if error.error_type == "intersection":
            i, j = error.wall_indices
            result.add_warning(
                path=f"plan.walls[{j}]",
                message=error.message,
                suggestion=f"Check the length and angle of walls {i} and {j}",
            )
        else:
            result.add_warning(
                path="plan.auto_close",
                message=error.message,
                suggestion="Adjust the last wall so the plan closes on its own",
            )

    return result


def check_flooring_advisories(config: FloorPlanConfiguration) -> ValidationResult:
    """Reject flooring with no floor to cover and warn about wasteful settings."""
    result = ValidationResult()
    board_config = config_to_board_config(config)
    if board_config is None:
        return result

    plan = config_to_floor_plan(config)
    vertices = plan.vertices()
    if len(vertices) < 3:
        result.add_error(
            path="plan.walls",
            message="Flooring needs at least two walls to enclose a floor",
            value=len(plan.walls),
        )
        return result

    if not plan.is_closed:
        result.add_warning(
            path="plan.auto_close",
            message=(
                f"Plan is open (end is {plan.closure_gap:.3f} m from the start); "
                "the layout treats it as closed"
            ),
            suggestion="Enable auto_close or adjust the walls to close the room",
        )

    bounds = polygon_bounds(vertices)
    floor = bounds.shrink(board_config.expansion_gap)
    if floor.is_empty:
        result.add_error(
            path="flooring.expansion_gap",
            message=(
                "Expansion gap leaves no floor "
                f"in a {bounds.width:.2f} x {bounds.height:.2f} m room"
            ),
            value=board_config.expansion_gap,
        )
        return result

    if board_config.installation_direction is InstallationDirection.ALONG_LENGTH:
        run = floor.height
    else:
        run = floor.width
    if board_config.board_length > run:
        result.add_warning(
            path="flooring.board_length",
            message=(
                f"Board length of {board_config.board_length} m exceeds the "
                f"{run:.2f} m run of the room; every board will be cut"
            ),
            suggestion="Consider switching installation_direction",
        )

    if board_config.row_joint_offset >= board_config.board_length:
        result.add_warning(
            path="flooring.row_joint_offset",
            message=(
                f"Row joint offset of {board_config.row_joint_offset} m is not "
                f"shorter than the board ({board_config.board_length} m)"
            ),
            suggestion="Use an offset of about a third of the board length",
        )

    if (
        board_config.min_cut_length is not None
        and board_config.min_cut_length > board_config.board_length
    ):
        result.add_warning(
            path="flooring.min_cut_length",
            message="Minimum cut length exceeds the board length; no cut pieces will be placed",
        )

    return result


def validate_config(config: FloorPlanConfiguration) -> ValidationResult:
    """Run all advisory checks on a loaded configuration."""
    result = ValidationResult()
    result.merge(check_plan_geometry(config))
    result.merge(check_flooring_advisories(config))
    return result
