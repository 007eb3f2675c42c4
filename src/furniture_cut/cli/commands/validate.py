"""Validate command for checking cut request files.

This module provides the `validate` command that checks a JSON cut request
for syntax and field errors without running the packer.
"""

from pathlib import Path
from typing import Annotated

import typer

from furniture_cut.application.config import ConfigError, load_cut_request


def validate_command(
    request_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON cut request to validate"),
    ],
) -> None:
    """Validate a cut request file.

    Checks the request file for:
    - JSON syntax errors
    - Structural errors (elements not a list of objects)
    - Field rules (required values, positive sizes, non-negative depth)

    Exit codes:
        0 - Request is valid
        1 - Request has errors

    Example:
        furniture-cut validate wardrobe.json
    """
    typer.echo(f"Validating {request_file}...")
    typer.echo()

    try:
        request = load_cut_request(request_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    errors = request.validate()
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    element_count = len(request.elements or [])
    typer.echo(
        f"Validation passed. {element_count} element(s) on a "
        f"{request.sheet_width}x{request.sheet_height} sheet."
    )


def display_load_error(error: ConfigError) -> None:
    """Display a request or configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
