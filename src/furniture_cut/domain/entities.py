"""Domain entities for cutting results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PlacedElement:
    """A furniture element with its calculated position on a cutting sheet.

    Attributes:
        furniture_body_id: Identifier of the requested element.
        x: Horizontal position of the top-left corner.
        y: Vertical position of the top-left corner.
        width: Placed width.
        height: Placed height.
        id: Identifier assigned when the owning sheet is stored.
        cutting_sheet_id: Identifier of the owning sheet. This is a lookup
            key only; the sheet owns its elements, not the other way round.
    """

    furniture_body_id: int
    x: int
    y: int
    width: int
    height: int
    id: int | None = None
    cutting_sheet_id: int | None = None

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass
class CuttingSheet:
    """A stock sheet together with the elements cut from it.

    Attributes:
        width: Sheet width.
        height: Sheet height.
        id: Identifier assigned by the repository, None until stored.
        placed_elements: Elements placed on this sheet, in packing order.
    """

    width: int
    height: int
    id: int | None = None
    placed_elements: list[PlacedElement] = field(default_factory=list)

    def add_placed_element(self, element: PlacedElement) -> None:
        """Append an element and stamp it with this sheet's identifier."""
        element.cutting_sheet_id = self.id
        self.placed_elements.append(element)

    def assign_id(self, sheet_id: int) -> None:
        """Set the sheet identifier and propagate it to every element."""
        self.id = sheet_id
        for element in self.placed_elements:
            element.cutting_sheet_id = sheet_id

    @property
    def area(self) -> int:
        """Total sheet area."""
        return self.width * self.height

    @property
    def used_area(self) -> int:
        """Area covered by placed elements."""
        return sum(element.area for element in self.placed_elements)

    @property
    def waste_area(self) -> int:
        """Area left uncovered."""
        return self.area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the sheet that is waste."""
        if self.area == 0:
            return 0.0
        return (1 - self.used_area / self.area) * 100

    @property
    def element_count(self) -> int:
        return len(self.placed_elements)
