"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from furniture_cut.application.config import CutterConfiguration, config_to_packing_config

if TYPE_CHECKING:
    from furniture_cut.application.commands import CutSheetCommand
    from furniture_cut.application.mapper import PlacementMapper
    from furniture_cut.contracts import CuttingSheetRepositoryProtocol, PackerProtocol


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so the web layer, the CLI and tests
    build commands the same way. Services are created lazily and cached;
    the repository in particular must be shared by every command created
    from one factory.

    Attributes:
        config: Configuration the services are built from.
    """

    config: CutterConfiguration = field(default_factory=CutterConfiguration)

    _packer: PackerProtocol | None = field(default=None, init=False, repr=False)
    _mapper: PlacementMapper | None = field(default=None, init=False, repr=False)
    _repository: CuttingSheetRepositoryProtocol | None = field(
        default=None, init=False, repr=False
    )

    def get_packer(self) -> PackerProtocol:
        """Get or create the packing engine."""
        if self._packer is None:
            from furniture_cut.domain import MaxRectsPacker

            self._packer = MaxRectsPacker(config_to_packing_config(self.config))
        return self._packer

    def get_mapper(self) -> PlacementMapper:
        """Get or create the placement mapper."""
        if self._mapper is None:
            from furniture_cut.application.mapper import PlacementMapper

            self._mapper = PlacementMapper()
        return self._mapper

    def get_repository(self) -> CuttingSheetRepositoryProtocol:
        """Get or create the cutting sheet repository."""
        if self._repository is None:
            from furniture_cut.infrastructure.repository import (
                InMemoryCuttingSheetRepository,
            )

            self._repository = InMemoryCuttingSheetRepository()
        return self._repository

    def create_cut_command(self) -> CutSheetCommand:
        """Create a CutSheetCommand wired to this factory's services."""
        from furniture_cut.application.commands import CutSheetCommand

        return CutSheetCommand(
            repository=self.get_repository(),
            packer=self.get_packer(),
            mapper=self.get_mapper(),
        )


def get_factory(config: CutterConfiguration | None = None) -> ServiceFactory:
    """Create a ServiceFactory for the given configuration."""
    return ServiceFactory(config=config or CutterConfiguration())
