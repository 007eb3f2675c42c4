"""Pydantic models for the furniture-cut configuration file.

A configuration file is a JSON document such as::

    {
        "schema_version": "1.0",
        "packing": {"split_rule": "shorter_axis"},
        "defaults": {"sheet_width": 2800, "sheet_height": 2070},
        "logging": {"level": "INFO"},
        "web": {"packing_timeout_seconds": 5.0},
        "rendering": {"scale": 0.25}
    }

Every section is optional.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from furniture_cut.domain import SplitRule

# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PackingConfigSchema(BaseModel):
    """Packing engine options.

    Attributes:
        split_rule: Which leftover takes the corner region when a free
            rectangle is split.
    """

    model_config = ConfigDict(extra="forbid")

    split_rule: SplitRule = Field(
        default=SplitRule.SHORTER_AXIS, description="Free rectangle split rule"
    )


class SheetDefaultsSchema(BaseModel):
    """Sheet size used when a CLI request does not name one.

    Defaults to a standard 2800x2070 mm chipboard sheet.
    """

    model_config = ConfigDict(extra="forbid")

    sheet_width: int = Field(default=2800, ge=1, description="Sheet width")
    sheet_height: int = Field(default=2070, ge=1, description="Sheet height")


class LoggingConfigSchema(BaseModel):
    """Logging options."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class WebConfigSchema(BaseModel):
    """REST API options.

    Attributes:
        packing_timeout_seconds: Deadline for one packing run. When it
            elapses the request fails with 503 and the late result is
            discarded. None disables the deadline.
    """

    model_config = ConfigDict(extra="forbid")

    packing_timeout_seconds: float | None = Field(default=None, gt=0)


class RenderingConfigSchema(BaseModel):
    """Cut diagram rendering options."""

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=0.25, gt=0, le=100, description="Pixels per unit")
    show_labels: bool = True
    show_dimensions: bool = True


class CutterConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor".
        packing: Packing engine options.
        defaults: Default sheet size for the CLI.
        logging: Logging options.
        web: REST API options.
        rendering: Cut diagram options.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    packing: PackingConfigSchema = Field(default_factory=PackingConfigSchema)
    defaults: SheetDefaultsSchema = Field(default_factory=SheetDefaultsSchema)
    logging: LoggingConfigSchema = Field(default_factory=LoggingConfigSchema)
    web: WebConfigSchema = Field(default_factory=WebConfigSchema)
    rendering: RenderingConfigSchema = Field(default_factory=RenderingConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
