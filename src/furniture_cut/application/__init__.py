"""Application layer - use cases, DTOs and configuration."""

from .commands import CutSheetCommand
from .dtos import CutOutput, CutRequestInput, FurnitureBodyInput, PackingFailureReport
from .factory import ServiceFactory, get_factory
from .mapper import PlacementMapper

__all__ = [
    "CutOutput",
    "CutRequestInput",
    "CutSheetCommand",
    "FurnitureBodyInput",
    "PackingFailureReport",
    "PlacementMapper",
    "ServiceFactory",
    "get_factory",
]
