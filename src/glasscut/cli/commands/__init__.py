"""CLI command implementations for the glasscut application.

This package contains subcommands for the glasscut CLI, including:
- validate: Validate a job file
- stock: List stock sizes for a glass type
"""

from glasscut.cli.commands.stock import stock_command
from glasscut.cli.commands.validate import validate_command

__all__ = ["stock_command", "validate_command"]
