"""Tests for the coordinate-indexed board."""

from __future__ import annotations

import pytest

from idiomctl.domain.board import MAX_SIDE, Board
from idiomctl.domain.errors import InvalidInputError, OutOfBoundsError


class TestBoard:
    def test_set_and_get(self) -> None:
        board = Board(2, 3)
        board.set(0, 0, 1)
        board.set(1, 0, 1)
        assert board.get(0, 0) == 1
        assert board.get(1, 0) == 1
        assert board.get(0, 1) is None

    def test_starts_empty(self) -> None:
        board = Board(2, 3)
        assert board.rows() == ((None, None, None), (None, None, None))

    def test_set_touches_single_cell(self) -> None:
        board = Board(2, 2)
        board.set(1, 1, "K")
        assert board.rows() == ((None, None), (None, "K"))

    def test_overwrite(self) -> None:
        board = Board(1, 1)
        board.set(0, 0, "P")
        board.set(0, 0, "Q")
        assert board.get(0, 0) == "Q"

    def test_clear_cell(self) -> None:
        board = Board(1, 1)
        board.set(0, 0, "P")
        board.set(0, 0, None)
        assert board.get(0, 0) is None

    @pytest.mark.parametrize("row, column", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_get_out_of_bounds(self, row: int, column: int) -> None:
        with pytest.raises(OutOfBoundsError):
            Board(2, 3).get(row, column)

    def test_set_out_of_bounds_leaves_board_unchanged(self) -> None:
        board = Board(2, 3)
        with pytest.raises(OutOfBoundsError):
            board.set(2, 0, 1)
        assert all(cell is None for row in board.rows() for cell in row)

    def test_out_of_bounds_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Board(1, 1).get(5, 5)

    @pytest.mark.parametrize("height, width", [(0, 3), (3, 0), (-1, 2)])
    def test_non_positive_dimensions(self, height: int, width: int) -> None:
        with pytest.raises(InvalidInputError):
            Board(height, width)

    @pytest.mark.parametrize(
        "height, width", [(MAX_SIDE + 1, 1), (1, MAX_SIDE + 1), (10**8, 10**8)]
    )
    def test_oversized_dimensions(self, height: int, width: int) -> None:
        with pytest.raises(InvalidInputError, match="between 1 and"):
            Board(height, width)

    def test_largest_board(self) -> None:
        board = Board(MAX_SIDE, MAX_SIDE)
        board.set(MAX_SIDE - 1, MAX_SIDE - 1, "K")
        assert board.get(MAX_SIDE - 1, MAX_SIDE - 1) == "K"

    def test_dimensions(self) -> None:
        board = Board(8, 8)
        assert (board.height, board.width) == (8, 8)

    def test_rows_is_a_snapshot(self) -> None:
        board = Board(1, 1)
        snapshot = board.rows()
        board.set(0, 0, "R")
        assert snapshot == ((None,),)
