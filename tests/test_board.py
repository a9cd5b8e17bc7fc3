"""Tests for snake_board - wrap arithmetic and random cells."""

import random

import pytest

from snake_board import Board, clamp_wrap, random_cell


class TestClampWrap:
    def test_in_range_is_unchanged(self):
        assert clamp_wrap(0, 20) == 0
        assert clamp_wrap(7, 20) == 7
        assert clamp_wrap(19, 20) == 19

    def test_one_past_upper_edge_wraps_to_zero(self):
        assert clamp_wrap(20, 20) == 0
        assert clamp_wrap(21, 20) == 1

    def test_one_below_lower_edge_wraps_to_last(self):
        assert clamp_wrap(-1, 20) == 19
        assert clamp_wrap(-2, 20) == 18

    def test_large_overshoot_stays_in_range(self):
        assert clamp_wrap(-45, 20) == 15
        assert clamp_wrap(65, 20) == 5

    @pytest.mark.parametrize("size", [1, 2, 5, 20])
    def test_always_in_range_and_idempotent(self, size):
        for coord in range(-3 * size - 1, 3 * size + 2):
            wrapped = clamp_wrap(coord, size)
            assert 0 <= wrapped < size
            assert clamp_wrap(wrapped, size) == wrapped


class TestRandomCell:
    def test_cells_within_board(self):
        rng = random.Random(0)
        for _ in range(500):
            x, y = random_cell(7, rng)
            assert 0 <= x < 7
            assert 0 <= y < 7

    def test_seeded_rng_is_reproducible(self):
        a = [random_cell(20, random.Random(5)) for _ in range(3)]
        b = [random_cell(20, random.Random(5)) for _ in range(3)]
        assert a == b

    def test_every_cell_reachable_on_small_board(self):
        rng = random.Random(1)
        seen = {random_cell(3, rng) for _ in range(1_000)}
        assert len(seen) == 9


class TestBoard:
    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError, match="size"):
            Board(0)
        with pytest.raises(ValueError):
            Board(-4)

    def test_size_and_cells_count(self):
        board = Board(20)
        assert board.size == 20
        assert board.cells_count == 400

    def test_contains(self):
        board = Board(5)
        assert board.contains((0, 0))
        assert board.contains((4, 4))
        assert not board.contains((5, 0))
        assert not board.contains((-1, 2))

    def test_wrap_cell(self):
        board = Board(20)
        assert board.wrap((20, -1)) == (0, 19)
        assert board.wrap((3, 4)) == (3, 4)

    def test_random_cell_uses_given_rng(self):
        board = Board(10)
        assert board.random_cell(random.Random(3)) == random_cell(10, random.Random(3))
