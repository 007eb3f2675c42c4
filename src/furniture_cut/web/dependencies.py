"""FastAPI dependency injection for cutting services."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from furniture_cut.application.commands import CutSheetCommand
from furniture_cut.application.config import CutterConfiguration, load_config
from furniture_cut.application.factory import ServiceFactory, get_factory

CONFIG_ENV_VAR = "FURNITURE_CUT_CONFIG"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> CutterConfiguration:
    """Load settings from the file named by FURNITURE_CUT_CONFIG.

    Raises:
        ConfigError: If the variable names an unreadable or invalid file.
    """
    config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return CutterConfiguration()
    logger.info("Loading configuration from %s", config_path)
    return load_config(Path(config_path))


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory(get_settings())


def get_cut_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> CutSheetCommand:
    """Dependency for CutSheetCommand."""
    return factory.create_cut_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
CutCommandDep = Annotated[CutSheetCommand, Depends(get_cut_command)]
