"""Translation between packing engine values and cutting results."""

from __future__ import annotations

from typing import Sequence

from furniture_cut.domain import (
    CuttingSheet,
    PackingFailure,
    PackingResult,
    PackingSuccess,
    Piece,
    PlacedElement,
)

from .dtos import FurnitureBodyInput, PackingFailureReport


class PlacementMapper:
    """Maps engine input and output to the externally visible shapes.

    Requests go in as validated ``FurnitureBodyInput`` elements and come out
    either as a ``CuttingSheet`` aggregate or as a ``PackingFailureReport``.
    """

    def to_pieces(self, elements: Sequence[FurnitureBodyInput]) -> list[Piece]:
        """Convert validated request elements to engine pieces, in order."""
        return [
            Piece(
                piece_id=element.id,
                width=element.width,
                height=element.height,
                depth=element.depth or 0,
            )
            for element in elements
        ]

    def to_cutting_sheet(
        self,
        sheet_width: int,
        sheet_height: int,
        success: PackingSuccess,
    ) -> CuttingSheet:
        """Build the sheet aggregate, keeping engine placement order."""
        sheet = CuttingSheet(width=sheet_width, height=sheet_height)
        for placement in success.placements:
            sheet.add_placed_element(
                PlacedElement(
                    furniture_body_id=placement.piece_id,
                    x=placement.x,
                    y=placement.y,
                    width=placement.width,
                    height=placement.height,
                )
            )
        return sheet

    def to_failure_report(
        self,
        sheet_width: int,
        sheet_height: int,
        failure: PackingFailure,
    ) -> PackingFailureReport:
        """Build the report naming every element that was not placed."""
        return PackingFailureReport(
            sheet_width=sheet_width,
            sheet_height=sheet_height,
            unplaced_element_ids=failure.unplaced_piece_ids,
        )

    def map(
        self,
        sheet_width: int,
        sheet_height: int,
        result: PackingResult,
    ) -> CuttingSheet | PackingFailureReport:
        """Map either engine outcome to its external shape."""
        if isinstance(result, PackingSuccess):
            return self.to_cutting_sheet(sheet_width, sheet_height, result)
        return self.to_failure_report(sheet_width, sheet_height, result)
