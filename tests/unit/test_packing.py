"""Tests for the MaxRects sheet packing engine.

Tests cover:
- Free rectangle splitting under each split rule
- Free rectangle arena bookkeeping (best fit, swap removal, containment)
- The free rectangle invariants after every placement of a run
- Placement scenarios with hand-checked coordinates
- Packing failures collecting every unplaced piece
- Precondition faults for malformed input
- Geometric properties over a mixed-size fixture
"""

from __future__ import annotations

import random

import pytest

from furniture_cut.domain import (
    FreeRectangle,
    FreeRectangleSet,
    MaxRectsPacker,
    PackingConfig,
    PackingFailure,
    PackingPreconditionError,
    PackingSuccess,
    Piece,
    Placement,
    SplitRule,
    pack,
    split_free_rectangle,
)


# =============================================================================
# Helpers and fixtures
# =============================================================================


def rects_overlap(a: FreeRectangle, b: FreeRectangle) -> bool:
    return a.x < b.right and b.x < a.right and a.y < b.bottom and b.y < a.bottom


def empty_free_set() -> FreeRectangleSet:
    """Create a free rectangle set with nothing in it."""
    free = FreeRectangleSet(1, 1)
    free.take(0)
    return free


@pytest.fixture
def packer() -> MaxRectsPacker:
    """Create a packer with the default configuration."""
    return MaxRectsPacker()


@pytest.fixture
def mixed_pieces() -> list[Piece]:
    """Twelve pieces of assorted sizes, generated from a fixed seed."""
    rng = random.Random(20240611)
    return [
        Piece(piece_id=i, width=rng.randint(100, 400), height=rng.randint(100, 300))
        for i in range(1, 13)
    ]


# =============================================================================
# split_free_rectangle
# =============================================================================


class TestSplitFreeRectangle:
    """Tests for splitting a consumed free rectangle."""

    def test_shorter_axis_gives_corner_to_right_when_width_left_is_larger(self) -> None:
        """A wide leftover takes the full free height."""
        free = FreeRectangle(0, 0, 100, 100)
        right, bottom = split_free_rectangle(free, Piece(1, 30, 60))

        assert right == FreeRectangle(30, 0, 70, 100)
        assert bottom == FreeRectangle(0, 60, 30, 40)

    def test_shorter_axis_gives_corner_to_bottom_when_height_left_is_larger(self) -> None:
        """A tall leftover takes the full free width."""
        free = FreeRectangle(0, 0, 100, 100)
        right, bottom = split_free_rectangle(free, Piece(1, 60, 30))

        assert right == FreeRectangle(60, 0, 40, 30)
        assert bottom == FreeRectangle(0, 30, 100, 70)

    def test_horizontal_rule(self) -> None:
        free = FreeRectangle(0, 0, 100, 100)
        right, bottom = split_free_rectangle(free, Piece(1, 30, 60), SplitRule.HORIZONTAL)

        assert right == FreeRectangle(30, 0, 70, 60)
        assert bottom == FreeRectangle(0, 60, 100, 40)

    def test_vertical_rule(self) -> None:
        free = FreeRectangle(0, 0, 100, 100)
        right, bottom = split_free_rectangle(free, Piece(1, 60, 30), SplitRule.VERTICAL)

        assert right == FreeRectangle(60, 0, 40, 100)
        assert bottom == FreeRectangle(0, 30, 60, 70)

    def test_split_respects_free_rectangle_offset(self) -> None:
        free = FreeRectangle(10, 20, 50, 40)
        right, bottom = split_free_rectangle(free, Piece(1, 20, 10), SplitRule.HORIZONTAL)

        assert right == FreeRectangle(30, 20, 30, 10)
        assert bottom == FreeRectangle(10, 30, 50, 30)

    @pytest.mark.parametrize("rule", list(SplitRule))
    def test_leftovers_are_disjoint_and_cover_free_area(self, rule: SplitRule) -> None:
        """Piece plus leftovers tile the free rectangle exactly."""
        free = FreeRectangle(5, 5, 90, 70)
        piece = Piece(1, 40, 25)
        right, bottom = split_free_rectangle(free, piece, rule)

        assert not rects_overlap(right, bottom)
        assert free.contains(right)
        assert free.contains(bottom)
        assert piece.area + right.area + bottom.area == free.area

    def test_exact_fit_leaves_only_empty_leftovers(self) -> None:
        right, bottom = split_free_rectangle(FreeRectangle(0, 0, 10, 10), Piece(1, 10, 10))

        assert right.is_empty
        assert bottom.is_empty


# =============================================================================
# FreeRectangleSet
# =============================================================================


class TestFreeRectangleSet:
    """Tests for the free rectangle arena."""

    def test_starts_with_whole_sheet(self) -> None:
        free = FreeRectangleSet(30, 20)

        assert list(free) == [FreeRectangle(0, 0, 30, 20)]
        assert free.total_area == 600

    def test_add_drops_degenerate_rectangles(self) -> None:
        free = empty_free_set()
        free.add(FreeRectangle(0, 0, 0, 10))
        free.add(FreeRectangle(0, 0, 10, 0))

        assert len(free) == 0

    def test_take_swaps_last_rectangle_into_slot(self) -> None:
        """Removal moves the last rectangle into the vacated position."""
        free = FreeRectangleSet(10, 10)
        free.add(FreeRectangle(20, 0, 5, 5))
        free.add(FreeRectangle(30, 0, 5, 5))

        taken = free.take(0)

        assert taken == FreeRectangle(0, 0, 10, 10)
        assert list(free) == [FreeRectangle(30, 0, 5, 5), FreeRectangle(20, 0, 5, 5)]

    def test_take_last_rectangle(self) -> None:
        free = FreeRectangleSet(10, 10)
        free.add(FreeRectangle(20, 0, 5, 5))

        assert free.take(1) == FreeRectangle(20, 0, 5, 5)
        assert list(free) == [FreeRectangle(0, 0, 10, 10)]

    def test_find_best_fit_prefers_least_leftover_area(self) -> None:
        free = empty_free_set()
        free.add(FreeRectangle(0, 0, 40, 40))
        free.add(FreeRectangle(50, 0, 30, 30))

        assert free.find_best_fit(Piece(1, 30, 30)) == 1

    def test_find_best_fit_breaks_ties_by_top_then_left(self) -> None:
        """Equal leftovers go to the smallest y, then the smallest x."""
        free = empty_free_set()
        free.add(FreeRectangle(0, 50, 20, 20))
        free.add(FreeRectangle(50, 0, 20, 20))
        free.add(FreeRectangle(25, 0, 20, 20))

        assert free.find_best_fit(Piece(1, 20, 20)) == 2

    def test_find_best_fit_returns_none_when_nothing_fits(self) -> None:
        free = FreeRectangleSet(10, 10)

        assert free.find_best_fit(Piece(1, 11, 5)) is None
        assert free.find_best_fit(Piece(1, 5, 11)) is None

    def test_add_drops_rectangles_inside_the_new_one(self) -> None:
        free = empty_free_set()
        free.add(FreeRectangle(10, 10, 5, 5))
        free.add(FreeRectangle(20, 20, 5, 5))

        assert free.add(FreeRectangle(0, 0, 50, 50))
        assert free.add(FreeRectangle(60, 0, 10, 10))

        assert list(free) == [FreeRectangle(0, 0, 50, 50), FreeRectangle(60, 0, 10, 10)]

    def test_add_skips_rectangle_inside_an_existing_one(self) -> None:
        free = FreeRectangleSet(50, 50)

        assert not free.add(FreeRectangle(10, 10, 5, 5))
        assert list(free) == [FreeRectangle(0, 0, 50, 50)]

    def test_add_keeps_one_of_identical_rectangles(self) -> None:
        free = FreeRectangleSet(10, 10)

        assert not free.add(FreeRectangle(0, 0, 10, 10))
        assert list(free) == [FreeRectangle(0, 0, 10, 10)]


# =============================================================================
# MaxRectsPacker scenarios
# =============================================================================


class TestMaxRectsPackerScenarios:
    """Hand-checked packing scenarios."""

    def test_single_piece_goes_to_origin(self, packer: MaxRectsPacker) -> None:
        result = packer.pack(100, 100, [Piece(1, 10, 10)])

        assert isinstance(result, PackingSuccess)
        assert result.placements == (Placement(1, 0, 0, 10, 10),)

    def test_oversized_piece_is_reported(self, packer: MaxRectsPacker) -> None:
        """A piece wider than the sheet is never force-fit."""
        result = packer.pack(10, 10, [Piece(7, 20, 5)])

        assert isinstance(result, PackingFailure)
        assert result.unplaced_piece_ids == (7,)

    def test_two_pieces_tile_the_sheet(self, packer: MaxRectsPacker) -> None:
        result = packer.pack(20, 10, [Piece(1, 10, 10), Piece(2, 10, 10)])

        assert isinstance(result, PackingSuccess)
        assert result.placements == (
            Placement(1, 0, 0, 10, 10),
            Placement(2, 10, 0, 10, 10),
        )
        assert result.used_area == 200

    def test_pieces_processed_largest_first(self, packer: MaxRectsPacker) -> None:
        """Placement order is area descending, not request order."""
        pieces = [Piece(1, 60, 50), Piece(2, 40, 20), Piece(3, 40, 30)]

        result = packer.pack(100, 50, pieces)

        assert isinstance(result, PackingSuccess)
        assert result.placements == (
            Placement(1, 0, 0, 60, 50),
            Placement(3, 60, 0, 40, 30),
            Placement(2, 60, 30, 40, 20),
        )
        assert result.used_area == 100 * 50

    def test_equal_areas_keep_request_order(self, packer: MaxRectsPacker) -> None:
        pieces = [Piece(5, 10, 10), Piece(3, 10, 10), Piece(9, 10, 10)]

        result = packer.pack(30, 10, pieces)

        assert isinstance(result, PackingSuccess)
        assert [p.piece_id for p in result.placements] == [5, 3, 9]
        assert [p.x for p in result.placements] == [0, 10, 20]

    def test_best_area_fit_picks_tightest_rectangle(self, packer: MaxRectsPacker) -> None:
        """The small piece lands in the bottom strip, which it fills exactly."""
        result = packer.pack(100, 60, [Piece(1, 60, 40), Piece(2, 30, 20)])

        assert isinstance(result, PackingSuccess)
        assert result.placements[1] == Placement(2, 0, 40, 30, 20)

    def test_duplicate_ids_are_placed_separately(self, packer: MaxRectsPacker) -> None:
        result = packer.pack(20, 10, [Piece(4, 10, 10), Piece(4, 10, 10)])

        assert isinstance(result, PackingSuccess)
        assert [p.piece_id for p in result.placements] == [4, 4]

    def test_depth_does_not_affect_placement(self, packer: MaxRectsPacker) -> None:
        thin = packer.pack(50, 50, [Piece(1, 20, 30, depth=0)])
        thick = packer.pack(50, 50, [Piece(1, 20, 30, depth=18)])

        assert thin == thick


class TestMaxRectsPackerFailures:
    """Tests for packing failures."""

    def test_failure_lists_every_unplaced_piece(self, packer: MaxRectsPacker) -> None:
        """Packing continues past the first unplaced piece."""
        pieces = [Piece(1, 20, 5), Piece(2, 5, 20), Piece(3, 5, 5)]

        result = packer.pack(10, 10, pieces)

        assert isinstance(result, PackingFailure)
        assert result.unplaced_piece_ids == (1, 2)

    def test_piece_blocked_by_earlier_placements(self, packer: MaxRectsPacker) -> None:
        result = packer.pack(10, 10, [Piece(1, 10, 10), Piece(2, 1, 1)])

        assert isinstance(result, PackingFailure)
        assert result.unplaced_piece_ids == (2,)

    def test_pieces_are_never_rotated(self, packer: MaxRectsPacker) -> None:
        """A 5x20 piece does not fit a 20x10 sheet even though 20x5 would."""
        result = packer.pack(20, 10, [Piece(1, 5, 20)])

        assert isinstance(result, PackingFailure)

    def test_failure_requires_at_least_one_id(self) -> None:
        with pytest.raises(ValueError, match="at least one piece"):
            PackingFailure(unplaced_piece_ids=())

    def test_results_report_success_flag(self) -> None:
        assert PackingSuccess(placements=()).is_success
        assert not PackingFailure(unplaced_piece_ids=(1,)).is_success


class TestMaxRectsPackerPreconditions:
    """Malformed input reaching the engine is a fault, not a failure."""

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_sheet_raises(
        self, packer: MaxRectsPacker, width: int, height: int
    ) -> None:
        with pytest.raises(PackingPreconditionError, match="Sheet dimensions"):
            packer.pack(width, height, [Piece(1, 1, 1)])

    def test_empty_piece_list_raises(self, packer: MaxRectsPacker) -> None:
        with pytest.raises(PackingPreconditionError, match="At least one piece"):
            packer.pack(10, 10, [])


# =============================================================================
# Properties over a mixed-size fixture
# =============================================================================


class TestPackingProperties:
    """Geometric properties every successful layout must satisfy."""

    SHEET_WIDTH = 2800
    SHEET_HEIGHT = 2070

    @pytest.fixture(params=list(SplitRule))
    def result(self, request: pytest.FixtureRequest, mixed_pieces: list[Piece]) -> PackingSuccess:
        packer = MaxRectsPacker(PackingConfig(split_rule=request.param))
        outcome = packer.pack(self.SHEET_WIDTH, self.SHEET_HEIGHT, mixed_pieces)
        assert isinstance(outcome, PackingSuccess)
        return outcome

    def test_no_overlap(self, result: PackingSuccess) -> None:
        placements = result.placements
        for i, a in enumerate(placements):
            for b in placements[i + 1 :]:
                assert not a.overlaps(b), f"{a} overlaps {b}"

    def test_containment(self, result: PackingSuccess) -> None:
        for placement in result.placements:
            assert placement.x >= 0 and placement.y >= 0
            assert placement.right <= self.SHEET_WIDTH
            assert placement.bottom <= self.SHEET_HEIGHT

    def test_completeness(self, result: PackingSuccess, mixed_pieces: list[Piece]) -> None:
        placed = sorted(p.piece_id for p in result.placements)
        assert placed == sorted(p.piece_id for p in mixed_pieces)

    def test_placements_keep_piece_dimensions(
        self, result: PackingSuccess, mixed_pieces: list[Piece]
    ) -> None:
        sizes = {p.piece_id: (p.width, p.height) for p in mixed_pieces}
        for placement in result.placements:
            assert (placement.width, placement.height) == sizes[placement.piece_id]

    def test_area_conservation(self, result: PackingSuccess) -> None:
        assert result.used_area <= self.SHEET_WIDTH * self.SHEET_HEIGHT

    def test_order_is_area_descending(self, result: PackingSuccess) -> None:
        areas = [p.area for p in result.placements]
        assert areas == sorted(areas, reverse=True)

    def test_determinism(self, mixed_pieces: list[Piece]) -> None:
        first = pack(self.SHEET_WIDTH, self.SHEET_HEIGHT, mixed_pieces)
        second = pack(self.SHEET_WIDTH, self.SHEET_HEIGHT, list(mixed_pieces))

        assert first == second

    def test_oversize_piece_always_rejected(self, mixed_pieces: list[Piece]) -> None:
        pieces = [*mixed_pieces, Piece(99, self.SHEET_WIDTH + 1, 10)]

        result = pack(self.SHEET_WIDTH, self.SHEET_HEIGHT, pieces)

        assert isinstance(result, PackingFailure)
        assert 99 in result.unplaced_piece_ids


# =============================================================================
# Free rectangle invariants over whole runs
# =============================================================================


class TestFreeRectangleInvariants:
    """The free set stays disjoint and accounts for all unused area."""

    WIDTH = 120
    HEIGHT = 120

    @pytest.mark.parametrize("seed", range(25))
    @pytest.mark.parametrize("rule", list(SplitRule))
    def test_invariants_hold_after_every_placement(self, rule: SplitRule, seed: int) -> None:
        rng = random.Random(seed)
        pieces = [
            Piece(piece_id=i, width=rng.randint(5, 40), height=rng.randint(5, 40))
            for i in range(1, 31)
        ]
        packer = MaxRectsPacker(PackingConfig(split_rule=rule))
        free = FreeRectangleSet(self.WIDTH, self.HEIGHT)
        placed_area = 0

        for piece in sorted(pieces, key=lambda p: -p.area):
            index = free.find_best_fit(piece)
            if index is None:
                continue
            placed_area += packer.place(free, index, piece).area

            rects = list(free)
            for i, a in enumerate(rects):
                assert not a.is_empty
                assert a.x >= 0 and a.y >= 0
                assert a.right <= self.WIDTH and a.bottom <= self.HEIGHT
                for b in rects[i + 1 :]:
                    assert not rects_overlap(a, b), f"{a} overlaps {b}"
                    assert not a.contains(b) and not b.contains(a)
            assert free.total_area + placed_area == self.WIDTH * self.HEIGHT

    def test_place_matches_pack(self, mixed_pieces: list[Piece]) -> None:
        packer = MaxRectsPacker()
        free = FreeRectangleSet(2800, 2070)

        placements = []
        for piece in sorted(mixed_pieces, key=lambda p: -p.area):
            index = free.find_best_fit(piece)
            assert index is not None
            placements.append(packer.place(free, index, piece))

        assert packer.pack(2800, 2070, mixed_pieces) == PackingSuccess(tuple(placements))

    def test_many_small_pieces_complete(self) -> None:
        rng = random.Random(7)
        pieces = [
            Piece(piece_id=i, width=rng.randint(5, 60), height=rng.randint(5, 60))
            for i in range(1, 1001)
        ]

        result = pack(5000, 5000, pieces)

        assert isinstance(result, PackingSuccess)
        assert len(result.placements) == 1000
