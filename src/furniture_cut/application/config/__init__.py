"""Configuration loading and validation."""

from furniture_cut.application.config.adapter import config_to_packing_config
from furniture_cut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_cut_request,
)
from furniture_cut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutterConfiguration,
    LoggingConfigSchema,
    PackingConfigSchema,
    RenderingConfigSchema,
    SheetDefaultsSchema,
    WebConfigSchema,
)

__all__ = [
    "ConfigError",
    "CutterConfiguration",
    "LoggingConfigSchema",
    "PackingConfigSchema",
    "RenderingConfigSchema",
    "SUPPORTED_VERSIONS",
    "SheetDefaultsSchema",
    "WebConfigSchema",
    "config_to_packing_config",
    "load_config",
    "load_config_from_dict",
    "load_cut_request",
]
