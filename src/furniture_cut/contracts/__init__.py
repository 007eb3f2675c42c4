"""Contracts shared between layers."""

from .protocols import CuttingSheetRepositoryProtocol, PackerProtocol

__all__ = [
    "CuttingSheetRepositoryProtocol",
    "PackerProtocol",
]
