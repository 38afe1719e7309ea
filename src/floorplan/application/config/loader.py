"""Configuration file loader.

Reads JSON plan files and turns every failure (missing file, unreadable
file, bad JSON, schema violations) into a ConfigError. Schema errors are
reported per field as JSON paths; errors inside a wall also name the wall
by its position and, when the file gives one, its id, since a plan with a
dozen walls is hard to debug from ``plan.walls[7]`` alone.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from floorplan.application.config.schema import FloorPlanConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: One dictionary per problem. Validation details carry
            ``path``, ``message``, ``value``, ``error_type`` and, for wall
            fields, ``wall``; JSON details carry ``line`` and ``column``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic location as a JSON path, e.g. ``plan.walls[2].length``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _wall_label(loc: tuple[str | int, ...], data: Any) -> str | None:
    """Name the wall a location points into, or None outside the wall list.

    ``("plan", "walls", 2, "length")`` becomes ``"wall 2 (w3)"`` when the
    third wall has id ``w3``, and ``"wall 2"`` when it has none.
    """
    if len(loc) < 3 or loc[:2] != ("plan", "walls") or not isinstance(loc[2], int):
        return None
    index = loc[2]
    try:
        wall_id = data["plan"]["walls"][index].get("id")
    except (KeyError, IndexError, TypeError, AttributeError):
        wall_id = None
    if isinstance(wall_id, str) and wall_id:
        return f"wall {index} ({wall_id})"
    return f"wall {index}"


def _validate(data: Any, path: Path | None) -> FloorPlanConfiguration:
    """Validate parsed JSON against the schema, raising ConfigError."""
    try:
        return FloorPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details: list[dict[str, Any]] = []
        lines = ["Configuration validation failed:"]
        for err in e.errors():
            detail = {
                "path": _json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            where = detail["path"] or "(root)"
            wall = _wall_label(err["loc"], data)
            if wall is not None:
                detail["wall"] = wall
                where = f"{where} [{wall}]"
            value = detail["value"]
            if value is None or isinstance(value, (dict, list)):
                lines.append(f"  - {where}: {err['msg']}")
            else:
                lines.append(f"  - {where}: {err['msg']} (got: {value!r})")
            details.append(detail)
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        ) from None


def load_config(path: Path) -> FloorPlanConfiguration:
    """Load and validate a floor plan configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated FloorPlanConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        ) from None
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from None

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> FloorPlanConfiguration:
    """Validate a configuration given as a dictionary (API requests).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)
