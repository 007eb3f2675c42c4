"""In-memory storage for cutting results."""

from __future__ import annotations

import copy
import itertools
import logging
import threading

from furniture_cut.domain import CuttingSheet

logger = logging.getLogger(__name__)


class CuttingSheetNotFoundError(Exception):
    """Raised when a cutting sheet identifier is unknown."""

    def __init__(self, sheet_id: int) -> None:
        self.sheet_id = sheet_id
        super().__init__(f"Cutting sheet {sheet_id} not found")


class InMemoryCuttingSheetRepository:
    """Thread-safe in-memory repository with sequence-generated identifiers.

    Sheets and placed elements draw identifiers from separate sequences.
    Stored sheets are deep copies, so callers never share mutable state
    with the store or with each other.
    """

    def __init__(self) -> None:
        self._sheets: dict[int, CuttingSheet] = {}
        self._sheet_ids = itertools.count(1)
        self._element_ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, sheet: CuttingSheet) -> CuttingSheet:
        """Store a sheet, assigning identifiers where missing.

        Args:
            sheet: Sheet to store. Its identifiers are updated in place.

        Returns:
            The same sheet, now carrying identifiers.
        """
        with self._lock:
            if sheet.id is None:
                sheet.assign_id(next(self._sheet_ids))
            else:
                sheet.assign_id(sheet.id)
            for element in sheet.placed_elements:
                if element.id is None:
                    element.id = next(self._element_ids)
            self._sheets[sheet.id] = copy.deepcopy(sheet)

        logger.debug(
            "Stored cutting sheet %s with %d elements",
            sheet.id,
            sheet.element_count,
        )
        return sheet

    def get(self, sheet_id: int) -> CuttingSheet:
        """Return a copy of a stored sheet.

        Raises:
            CuttingSheetNotFoundError: If no sheet has this identifier.
        """
        with self._lock:
            stored = self._sheets.get(sheet_id)
            if stored is None:
                raise CuttingSheetNotFoundError(sheet_id)
            return copy.deepcopy(stored)

    def list_all(self) -> list[CuttingSheet]:
        """Return copies of every stored sheet ordered by identifier."""
        with self._lock:
            return [copy.deepcopy(self._sheets[key]) for key in sorted(self._sheets)]

    def delete(self, sheet_id: int) -> bool:
        """Delete a sheet; return True if it existed."""
        with self._lock:
            return self._sheets.pop(sheet_id, None) is not None
