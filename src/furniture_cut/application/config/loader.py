"""Configuration and request file loading with comprehensive error handling.

This module loads JSON configuration files and JSON cut request files. It
handles file system errors, JSON parsing errors, and Pydantic validation
errors with clear, actionable error messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from furniture_cut.application.config.schema import CutterConfiguration
from furniture_cut.application.dtos import CutRequestInput


class ConfigError(Exception):
    """Exception raised for configuration and request file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("packing", "split_rule"))
        'packing.split_rule'
        >>> _format_json_path(("elements", 0, "width"))
        'elements[0].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message dictionaries."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path, kind: str) -> Any:
    """Read and parse a JSON file.

    Args:
        path: File to read.
        kind: Human-readable file kind for error messages.

    Raises:
        ConfigError: If the file is missing, unreadable or not valid JSON.
    """
    if not path.exists():
        raise ConfigError(
            message=f"{kind} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {kind.lower()} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {kind.lower()} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {kind.lower()} file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def load_config(path: Path) -> CutterConfiguration:
    """Load and validate a configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated CutterConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the specific error category.

    Example:
        >>> try:
        ...     config = load_config(Path("cutter.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    data = _read_json(path, "Config")

    try:
        return CutterConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> CutterConfiguration:
    """Load and validate a configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return CutterConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def load_cut_request(path: Path) -> CutRequestInput:
    """Load a cut request document from a JSON file.

    Only the document structure is checked here. Field rules (required
    values, positive sizes) are left to ``CutRequestInput.validate()`` so
    every violated rule is reported together.

    Raises:
        ConfigError: If the file cannot be read or is not a request object.
    """
    data = _read_json(path, "Request")

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Request file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    try:
        return CutRequestInput.from_dict(data)
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid request in {path}: {e}",
            error_type="validation",
            path=path,
            details=[{"path": "elements", "message": str(e)}],
        )
