"""Application commands (use cases) for sheet cutting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from furniture_cut.domain import CuttingSheet, MaxRectsPacker, PackingResult

from .dtos import CutOutput, CutRequestInput
from .mapper import PlacementMapper

if TYPE_CHECKING:
    from furniture_cut.contracts import CuttingSheetRepositoryProtocol, PackerProtocol

logger = logging.getLogger(__name__)


class CutSheetCommand:
    """Command to lay out furniture elements on a stock sheet.

    Validates the request, runs the packer, maps the outcome and stores
    successful layouts. Packing failures are returned, never stored.
    """

    def __init__(
        self,
        repository: CuttingSheetRepositoryProtocol,
        packer: PackerProtocol | None = None,
        mapper: PlacementMapper | None = None,
    ) -> None:
        self.repository = repository
        self.packer = packer or MaxRectsPacker()
        self.mapper = mapper or PlacementMapper()

    def execute(self, request: CutRequestInput) -> CutOutput:
        """Execute the cutting command.

        Args:
            request: Raw cutting request.

        Returns:
            CutOutput with validation errors, a packing failure report, or
            the stored cutting sheet.
        """
        errors = self.validate(request)
        if errors:
            return CutOutput(errors=errors)
        return self.complete(request, self.pack(request))

    def validate(self, request: CutRequestInput) -> list[str]:
        """Return every field rule the request violates."""
        errors = request.validate()
        if errors:
            logger.info("Rejected cut request: %s", "; ".join(errors))
        return errors

    def pack(self, request: CutRequestInput) -> PackingResult:
        """Run the packer on a validated request.

        Nothing is stored, so a caller that gives up waiting can drop the
        result without side effects.

        Raises:
            PackingPreconditionError: If the request was not validated first.
        """
        pieces = self.mapper.to_pieces(request.elements or [])
        logger.info(
            "Cutting %d elements from %sx%s sheet",
            len(pieces),
            request.sheet_width,
            request.sheet_height,
        )
        return self.packer.pack(request.sheet_width, request.sheet_height, pieces)

    def complete(self, request: CutRequestInput, result: PackingResult) -> CutOutput:
        """Map a packing result and store it if every element was placed."""
        mapped = self.mapper.map(request.sheet_width, request.sheet_height, result)

        if isinstance(mapped, CuttingSheet):
            stored = self.repository.save(mapped)
            logger.info(
                "Placed %d elements on sheet %s (%.1f%% waste)",
                stored.element_count,
                stored.id,
                stored.waste_percentage,
            )
            return CutOutput(cutting_sheet=stored)

        logger.warning(mapped.message)
        return CutOutput(failure=mapped)

    def get_sheet(self, sheet_id: int) -> CuttingSheet:
        """Return a stored cutting sheet.

        Raises:
            CuttingSheetNotFoundError: If the identifier is unknown.
        """
        return self.repository.get(sheet_id)

    def list_sheets(self) -> list[CuttingSheet]:
        """Return every stored cutting sheet."""
        return self.repository.list_all()

    def delete_sheet(self, sheet_id: int) -> bool:
        """Delete a stored cutting sheet; return whether it existed."""
        deleted = self.repository.delete(sheet_id)
        if deleted:
            logger.info("Deleted cutting sheet %s", sheet_id)
        return deleted
