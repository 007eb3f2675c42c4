"""Pytest configuration and shared fixtures for furniture-cut tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from furniture_cut.application.commands import CutSheetCommand
    from furniture_cut.application.factory import ServiceFactory


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def service_factory() -> "ServiceFactory":
    """Create a ServiceFactory with default configuration.

    Each test gets its own factory and therefore its own empty repository.
    """
    from furniture_cut.application.factory import get_factory

    return get_factory()


@pytest.fixture
def cut_command(service_factory: "ServiceFactory") -> "CutSheetCommand":
    """Create a CutSheetCommand wired through the factory."""
    return service_factory.create_cut_command()


@pytest.fixture
def cut_request_data() -> dict:
    """A valid cut request document as sent by API clients."""
    return {
        "sheetWidth": 100,
        "sheetHeight": 50,
        "elements": [
            {"id": 1, "width": 60, "height": 50, "depth": 18},
            {"id": 2, "width": 40, "height": 20, "depth": 18},
            {"id": 3, "width": 40, "height": 30, "depth": 18},
        ],
    }
