"""Adapters from configuration models to domain configuration."""

from furniture_cut.application.config.schema import CutterConfiguration
from furniture_cut.domain import PackingConfig


def config_to_packing_config(config: CutterConfiguration | None) -> PackingConfig:
    """Convert the Pydantic packing section to the engine dataclass.

    Returns the engine defaults when no configuration is given.
    """
    if config is None:
        return PackingConfig()
    return PackingConfig(split_rule=config.packing.split_rule)
