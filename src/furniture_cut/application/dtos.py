"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from furniture_cut.domain import CuttingSheet


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class FurnitureBodyInput:
    """Input DTO for one furniture-body element of a cut request."""

    id: Any = None
    width: Any = None
    height: Any = None
    depth: Any = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FurnitureBodyInput:
        """Build from a raw mapping; missing keys are left unset."""
        return cls(
            id=data.get("id"),
            width=data.get("width"),
            height=data.get("height"),
            depth=data.get("depth", 0),
        )

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.id is None:
            errors.append("Furniture element ID is required")
        elif not _is_int(self.id):
            errors.append("Furniture element ID must be an integer")

        # A missing dimension counts as zero
        width = 0 if self.width is None else self.width
        height = 0 if self.height is None else self.height
        depth = 0 if self.depth is None else self.depth

        if not _is_int(width):
            errors.append("Width must be an integer")
        elif width < 1:
            errors.append("Width must be positive")
        if not _is_int(height):
            errors.append("Height must be an integer")
        elif height < 1:
            errors.append("Height must be positive")
        if not _is_int(depth):
            errors.append("Depth must be an integer")
        elif depth < 0:
            errors.append("Depth cannot be negative")
        return errors


@dataclass
class CutRequestInput:
    """Input DTO for a sheet cutting request."""

    sheet_width: Any = None
    sheet_height: Any = None
    elements: list[FurnitureBodyInput] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CutRequestInput:
        """Build from a request document with camelCase keys.

        Raises:
            ValueError: If ``elements`` is not a list of objects.
        """
        raw_elements = data.get("elements")
        elements: list[FurnitureBodyInput] | None = None
        if raw_elements is not None:
            if not isinstance(raw_elements, list):
                raise ValueError("elements must be a list")
            elements = []
            for index, raw in enumerate(raw_elements):
                if not isinstance(raw, Mapping):
                    raise ValueError(f"elements[{index}] must be an object")
                elements.append(FurnitureBodyInput.from_dict(raw))
        return cls(
            sheet_width=data.get("sheetWidth"),
            sheet_height=data.get("sheetHeight"),
            elements=elements,
        )

    def validate(self) -> list[str]:
        """Validate the whole request and return every violated rule.

        Element messages are prefixed with the element position so several
        failing elements stay distinguishable in one combined message.
        """
        errors: list[str] = []
        errors.extend(self._validate_dimension(self.sheet_width, "Sheet width"))
        errors.extend(self._validate_dimension(self.sheet_height, "Sheet height"))

        if not self.elements:
            errors.append("Elements list cannot be empty")
        else:
            for index, element in enumerate(self.elements):
                errors.extend(
                    f"elements[{index}]: {message}" for message in element.validate()
                )
        return errors

    @staticmethod
    def _validate_dimension(value: Any, label: str) -> list[str]:
        if value is None:
            return [f"{label} is required"]
        if not _is_int(value):
            return [f"{label} must be an integer"]
        if value < 1:
            return [f"{label} must be positive"]
        return []


@dataclass(frozen=True)
class PackingFailureReport:
    """Elements of a valid request that could not be placed on the sheet.

    Attributes:
        sheet_width: Width of the requested sheet.
        sheet_height: Height of the requested sheet.
        unplaced_element_ids: Identifiers of every element left over.
    """

    sheet_width: int
    sheet_height: int
    unplaced_element_ids: tuple[int, ...]

    @property
    def message(self) -> str:
        ids = ", ".join(str(element_id) for element_id in self.unplaced_element_ids)
        count = len(self.unplaced_element_ids)
        return (
            f"{count} element(s) could not be placed on the "
            f"{self.sheet_width}x{self.sheet_height} sheet: {ids}"
        )


@dataclass
class CutOutput:
    """Output DTO for a cutting request.

    Exactly one of these holds: ``errors`` is non-empty (request rejected),
    ``failure`` is set (valid request that does not fit), or
    ``cutting_sheet`` is set (every element placed and stored).
    """

    cutting_sheet: CuttingSheet | None = None
    failure: PackingFailureReport | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the request passed validation."""
        return len(self.errors) == 0

    @property
    def is_packed(self) -> bool:
        """Check if every element was placed."""
        return self.cutting_sheet is not None
