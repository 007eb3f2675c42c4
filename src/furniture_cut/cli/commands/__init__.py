"""CLI command implementations for the furniture-cut application.

This package contains subcommands for the furniture-cut CLI, including:
- validate: Validate a cut request file
"""

from furniture_cut.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
