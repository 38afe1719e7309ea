"""Configuration schema and loading system for floor plans.

Public API:
    - FloorPlanConfiguration: Root configuration model
    - PlanConfig / WallConfig: Wall sequence configuration
    - FlooringConfig: Laminate board configuration
    - OutputConfig: Output preferences
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - merge_config_with_cli: Apply CLI overrides
    - ConfigError: Exception for configuration errors
    - ValidationResult / ValidationError / ValidationWarning
    - validate_config: Run advisory checks
    - config_to_floor_plan / config_to_board_config: Domain conversion

Example:
    >>> from pathlib import Path
    >>> from floorplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("apartment.json"))
    ...     print(f"{len(config.plan.walls)} walls")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from floorplan.application.config.adapter import (
    config_to_board_config,
    config_to_floor_plan,
)
from floorplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from floorplan.application.config.merger import merge_config_with_cli
from floorplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    FloorPlanConfiguration,
    FlooringConfig,
    OutputConfig,
    PlanConfig,
    WallConfig,
)
from floorplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_flooring_advisories,
    check_plan_geometry,
    validate_config,
)

__all__ = [
    "ConfigError",
    "FloorPlanConfiguration",
    "FlooringConfig",
    "OutputConfig",
    "PlanConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WallConfig",
    "check_flooring_advisories",
    "check_plan_geometry",
    "config_to_board_config",
    "config_to_floor_plan",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
