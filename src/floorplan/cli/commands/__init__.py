"""CLI command implementations for the floorplan application.

- validate: Validate a configuration file
- output_handlers: Console output and multi-format export
"""

from floorplan.cli.commands.output_handlers import (
    echo_output,
    handle_multi_format_export,
)
from floorplan.cli.commands.validate import validate_command

__all__ = [
    "echo_output",
    "handle_multi_format_export",
    "validate_command",
]
