"""Coordinate-indexed grid, e.g. a chess board.

Cells are addressed with an explicit ``get(row, column)`` /
``set(row, column, piece)`` pair instead of nesting single-index lookups.
Negative indices are rejected rather than wrapping around.
"""

from __future__ import annotations

from typing import Any

from idiomctl.domain.errors import InvalidInputError, OutOfBoundsError

MAX_SIDE = 1024


class Board:
    """A fixed ``height x width`` grid of optional pieces."""

    def __init__(self, height: int, width: int) -> None:
        if not (0 < height <= MAX_SIDE and 0 < width <= MAX_SIDE):
            msg = f"Board sides must be between 1 and {MAX_SIDE}, got {height}x{width}"
            raise InvalidInputError(msg)
        self._height = height
        self._width = width
        self._cells: list[list[Any | None]] = [[None] * width for _ in range(height)]

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self._height and 0 <= column < self._width):
            msg = (
                f"({row}, {column}) is outside the {self._height}x{self._width} board"
            )
            raise OutOfBoundsError(msg)

    def get(self, row: int, column: int) -> Any | None:
        """Return the piece at (*row*, *column*), or None for an empty cell."""
        self._check(row, column)
        return self._cells[row][column]

    def set(self, row: int, column: int, piece: Any | None) -> None:
        """Place *piece* at (*row*, *column*), replacing whatever was there."""
        self._check(row, column)
        self._cells[row][column] = piece

    def rows(self) -> tuple[tuple[Any | None, ...], ...]:
        """Snapshot of the grid, top row first."""
        return tuple(tuple(row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Board(height={self._height}, width={self._width})"
