"""Sheet packing engine.

This module places furniture pieces on a single stock sheet using a
best-area-fit heuristic over free rectangles (the MaxRects selection rule
with guillotine splits):

1. Start with one free rectangle covering the whole sheet.
2. Seat pieces largest area first (stable, so equal areas keep input order).
3. Put each piece in the free rectangle that leaves the least area over,
   preferring the topmost and then leftmost rectangle on ties.
4. Split the consumed rectangle into a right and a bottom leftover that do
   not overlap, so free rectangles stay pairwise disjoint, and never keep a
   free rectangle contained in another.

Pieces that fit nowhere are collected and reported, never raised. The engine
keeps no state between calls, so independent runs may execute concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from .value_objects import (
    FreeRectangle,
    PackingPreconditionError,
    Piece,
    Placement,
    SplitRule,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackingConfig:
    """Configuration for the packing engine.

    Attributes:
        split_rule: Which leftover receives the corner region when a free
            rectangle is split.
    """

    split_rule: SplitRule = SplitRule.SHORTER_AXIS


@dataclass(frozen=True)
class PackingSuccess:
    """Every piece was placed.

    Attributes:
        placements: Placements in processing order (area descending, then
            input order).
    """

    placements: tuple[Placement, ...]

    @property
    def is_success(self) -> bool:
        return True

    @property
    def used_area(self) -> int:
        """Total area covered by placements."""
        return sum(p.area for p in self.placements)


@dataclass(frozen=True)
class PackingFailure:
    """At least one piece could not be seated.

    Attributes:
        unplaced_piece_ids: Identifiers of every piece left over, in
            processing order.
    """

    unplaced_piece_ids: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.unplaced_piece_ids:
            raise ValueError("A packing failure must name at least one piece")

    @property
    def is_success(self) -> bool:
        return False


PackingResult = PackingSuccess | PackingFailure


def split_free_rectangle(
    free: FreeRectangle,
    piece: Piece,
    rule: SplitRule = SplitRule.SHORTER_AXIS,
) -> tuple[FreeRectangle, FreeRectangle]:
    """Split a free rectangle around a piece placed at its top-left corner.

    Returns the right and the bottom leftover. They never overlap each
    other or the piece, and together with the piece they cover ``free``
    exactly. Either leftover may be empty.

    Args:
        free: Rectangle the piece was placed in.
        piece: The placed piece.
        rule: Which leftover takes the corner region.

    Returns:
        Tuple of (right leftover, bottom leftover).
    """
    leftover_width = free.width - piece.width
    leftover_height = free.height - piece.height

    if rule is SplitRule.SHORTER_AXIS:
        horizontal = leftover_width <= leftover_height
    else:
        horizontal = rule is SplitRule.HORIZONTAL

    if horizontal:
        # Bottom leftover runs the full free width
        right = FreeRectangle(
            free.x + piece.width, free.y, leftover_width, piece.height
        )
        bottom = FreeRectangle(
            free.x, free.y + piece.height, free.width, leftover_height
        )
    else:
        # Right leftover runs the full free height
        right = FreeRectangle(
            free.x + piece.width, free.y, leftover_width, free.height
        )
        bottom = FreeRectangle(
            free.x, free.y + piece.height, piece.width, leftover_height
        )
    return right, bottom


class FreeRectangleSet:
    """Free rectangles of one packing run, stored as a flat arena.

    Removal swaps the last rectangle into the vacated slot, so positions in
    the arena are not stable. Nothing depends on them: best-fit selection
    uses an explicit (leftover, y, x) key.
    """

    def __init__(self, width: int, height: int) -> None:
        self._rects: list[FreeRectangle] = [FreeRectangle(0, 0, width, height)]

    def __len__(self) -> int:
        return len(self._rects)

    def __iter__(self) -> Iterator[FreeRectangle]:
        return iter(self._rects)

    @property
    def total_area(self) -> int:
        return sum(rect.area for rect in self._rects)

    def find_best_fit(self, piece: Piece) -> int | None:
        """Return the arena index of the best-area-fit rectangle, if any."""
        best_index: int | None = None
        best_key: tuple[int, int, int] | None = None
        for index, rect in enumerate(self._rects):
            if not rect.fits(piece):
                continue
            key = (rect.area - piece.area, rect.y, rect.x)
            if best_key is None or key < best_key:
                best_index = index
                best_key = key
        return best_index

    def take(self, index: int) -> FreeRectangle:
        """Remove and return the rectangle at ``index``."""
        last = self._rects.pop()
        if index == len(self._rects):
            return last
        taken = self._rects[index]
        self._rects[index] = last
        return taken

    def add(self, rect: FreeRectangle) -> bool:
        """Add a rectangle unless it is degenerate or already covered.

        Keeps the set free of contained rectangles one insertion at a time:
        a rectangle inside an existing one (including an identical one) is
        not added, and existing rectangles inside the new one are dropped.
        Each call is linear in the size of the set.

        Returns:
            True if the rectangle was added.
        """
        if rect.is_empty:
            return False
        if any(other.contains(rect) for other in self._rects):
            return False
        self._rects = [other for other in self._rects if not rect.contains(other)]
        self._rects.append(rect)
        return True


class MaxRectsPacker:
    """Places pieces on one sheet with best-area-fit over free rectangles.

    Selection follows MaxRects best-area-fit. Consumed rectangles are cut
    guillotine-style into two disjoint leftovers rather than into maximal
    overlapping ones.

    Attributes:
        config: Packing configuration.
    """

    def __init__(self, config: PackingConfig | None = None) -> None:
        self.config = config or PackingConfig()

    def pack(
        self,
        sheet_width: int,
        sheet_height: int,
        pieces: Sequence[Piece],
    ) -> PackingResult:
        """Place every piece on a sheet of the given size.

        Args:
            sheet_width: Sheet width, at least 1.
            sheet_height: Sheet height, at least 1.
            pieces: Pieces to place, in request order.

        Returns:
            PackingSuccess with all placements, or PackingFailure naming
            every piece that could not be placed.

        Raises:
            PackingPreconditionError: If the sheet size is not positive or
                no pieces were given.
        """
        self._check_preconditions(sheet_width, sheet_height, pieces)

        ordered = self._sort_by_area(pieces)
        free = FreeRectangleSet(sheet_width, sheet_height)
        placements: list[Placement] = []
        unplaced: list[int] = []

        logger.debug(
            "Packing %d pieces onto %dx%d sheet",
            len(ordered),
            sheet_width,
            sheet_height,
        )

        for piece in ordered:
            index = free.find_best_fit(piece)
            if index is None:
                logger.debug(
                    "Piece %s (%dx%d) does not fit any of %d free rectangles",
                    piece.piece_id,
                    piece.width,
                    piece.height,
                    len(free),
                )
                unplaced.append(piece.piece_id)
                continue

            placements.append(self.place(free, index, piece))

        if unplaced:
            logger.debug("%d pieces left unplaced", len(unplaced))
            return PackingFailure(unplaced_piece_ids=tuple(unplaced))

        return PackingSuccess(placements=tuple(placements))

    def place(self, free: FreeRectangleSet, index: int, piece: Piece) -> Placement:
        """Seat a piece in the free rectangle at ``index`` and split the rest.

        The rectangle is taken out of ``free`` and its non-empty leftovers
        are added back.
        """
        target = free.take(index)
        for leftover in split_free_rectangle(target, piece, self.config.split_rule):
            free.add(leftover)
        return Placement(
            piece_id=piece.piece_id,
            x=target.x,
            y=target.y,
            width=piece.width,
            height=piece.height,
        )

    def _check_preconditions(
        self,
        sheet_width: int,
        sheet_height: int,
        pieces: Sequence[Piece],
    ) -> None:
        if sheet_width < 1 or sheet_height < 1:
            raise PackingPreconditionError(
                f"Sheet dimensions must be positive, got "
                f"{sheet_width}x{sheet_height}"
            )
        if not pieces:
            raise PackingPreconditionError("At least one piece is required")

    def _sort_by_area(self, pieces: Sequence[Piece]) -> list[Piece]:
        """Sort pieces by area, largest first, keeping input order on ties."""
        return sorted(pieces, key=lambda p: -p.area)


def pack(
    sheet_width: int,
    sheet_height: int,
    pieces: Sequence[Piece],
    config: PackingConfig | None = None,
) -> PackingResult:
    """Pack pieces onto a sheet with a fresh packer."""
    return MaxRectsPacker(config).pack(sheet_width, sheet_height, pieces)
