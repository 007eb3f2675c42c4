"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Application commands depend on these protocols so the packer and the
persistence collaborator can be swapped in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from furniture_cut.domain import CuttingSheet, PackingResult, Piece


@runtime_checkable
class PackerProtocol(Protocol):
    """Protocol for the sheet packing engine.

    Implementations must be pure: no I/O, no state kept between calls.
    """

    def pack(
        self,
        sheet_width: int,
        sheet_height: int,
        pieces: Sequence[Piece],
    ) -> PackingResult:
        """Place pieces on a sheet.

        Args:
            sheet_width: Sheet width, at least 1.
            sheet_height: Sheet height, at least 1.
            pieces: Pieces in request order.

        Returns:
            PackingSuccess or PackingFailure.
        """
        ...


@runtime_checkable
class CuttingSheetRepositoryProtocol(Protocol):
    """Protocol for storing cutting results.

    The repository owns identifier assignment for sheets and their placed
    elements.
    """

    def save(self, sheet: CuttingSheet) -> CuttingSheet:
        """Store a sheet, assigning identifiers, and return it."""
        ...

    def get(self, sheet_id: int) -> CuttingSheet:
        """Return a stored sheet.

        Raises:
            CuttingSheetNotFoundError: If no sheet has this identifier.
        """
        ...

    def list_all(self) -> list[CuttingSheet]:
        """Return every stored sheet ordered by identifier."""
        ...

    def delete(self, sheet_id: int) -> bool:
        """Delete a sheet and its elements; return whether it existed."""
        ...
