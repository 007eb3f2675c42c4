"""Value objects for sheet cutting.

All dataclasses are frozen (immutable) so a packing run can share them freely
between threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PackingPreconditionError(Exception):
    """Raised when malformed input reaches the packing engine.

    Request validation rejects non-positive sheet sizes, empty element lists
    and non-positive piece dimensions long before packing starts. Seeing one
    of those inside the engine is an integration defect, not a piece that
    does not fit, so it is never reported as a packing failure.
    """


class SplitRule(str, Enum):
    """How a consumed free rectangle is cut into its two leftovers.

    The corner beyond the placed piece always goes to exactly one of the
    leftovers so free rectangles never overlap.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    SHORTER_AXIS = "shorter_axis"


@dataclass(frozen=True)
class Piece:
    """A furniture-body element waiting to be placed on a sheet.

    Attributes:
        piece_id: Caller-supplied element identifier. Duplicates are legal.
        width: Width in sheet units, fixed orientation.
        height: Height in sheet units, fixed orientation.
        depth: Material thickness, carried through untouched.
    """

    piece_id: int
    width: int
    height: int
    depth: int = 0

    def __post_init__(self) -> None:
        if self.width < 1:
            raise PackingPreconditionError(
                f"Piece {self.piece_id} width must be positive, got {self.width}"
            )
        if self.height < 1:
            raise PackingPreconditionError(
                f"Piece {self.piece_id} height must be positive, got {self.height}"
            )
        if self.depth < 0:
            raise PackingPreconditionError(
                f"Piece {self.piece_id} depth cannot be negative, got {self.depth}"
            )

    @property
    def area(self) -> int:
        """Area covered by the piece."""
        return self.width * self.height


@dataclass(frozen=True)
class Placement:
    """A piece seated at a position on the sheet.

    Coordinates are the top-left corner, 0-based, with y growing downwards.

    Attributes:
        piece_id: Identifier of the source piece.
        x: Horizontal offset from the left sheet edge.
        y: Vertical offset from the top sheet edge.
        width: Placed width, always the piece width.
        height: Placed height, always the piece height.
    """

    piece_id: int
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Position coordinates must be non-negative")

    @property
    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        """Area covered by the placement."""
        return self.width * self.height

    def overlaps(self, other: Placement) -> bool:
        """Check whether the interiors of two placements intersect.

        Placements that only share an edge do not overlap.
        """
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass(frozen=True)
class FreeRectangle:
    """Unoccupied sheet area tracked during one packing run."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        """True for degenerate rectangles with no width or no height."""
        return self.width <= 0 or self.height <= 0

    def fits(self, piece: Piece) -> bool:
        """Check whether the piece fits in its given orientation."""
        return piece.width <= self.width and piece.height <= self.height

    def contains(self, other: FreeRectangle) -> bool:
        """Check whether ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )
