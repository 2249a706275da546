"""Tile grid holding the obstacles of a level."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Union


class Cell(str, Enum):
    """Kinds of tile a grid cell can hold."""

    EMPTY = "e"
    SPIKE = "s"
    WALL = "w"
    BREAKABLE = "b"
    PLATFORM = "p"
    PIT = "h"


CellLike = Union[Cell, str]


class ObstacleGrid:
    """A rectangular grid of cells, addressed by row and column, all empty at first."""

    def __init__(self, cells_x: int, cells_y: int) -> None:
        if cells_x <= 0 or cells_y <= 0:
            raise ValueError("grid dimensions must be positive")
        self.cells_x = cells_x
        self.cells_y = cells_y
        self._cells = [[Cell.EMPTY] * cells_x for _ in range(cells_y)]

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.cells_y and 0 <= col < self.cells_x):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")

    def place(self, row: int, col: int, kind: CellLike) -> None:
        """Put an obstacle of the given kind in a cell, replacing what was there."""
        self._check_bounds(row, col)
        self._cells[row][col] = Cell(kind)

    def check(self, row: int, col: int, kind: CellLike) -> bool:
        """Tell whether the cell holds the given kind of obstacle."""
        return self.cell(row, col) is Cell(kind)

    def cell(self, row: int, col: int) -> Cell:
        """Return the kind of obstacle in a cell."""
        self._check_bounds(row, col)
        return self._cells[row][col]

    def __iter__(self) -> Iterator[tuple[Cell, ...]]:
        return (tuple(row) for row in self._cells)