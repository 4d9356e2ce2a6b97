"""
Grid storage: a size x size board of cell values.

Cells hold 0 (empty), 1 (X) or 2 (O), the same digits used by the flat
serialized form, e.g. "100020000" for a 3x3 board with X in the corner and
O in the centre. A cell only ever goes from empty to a mark.
"""
from __future__ import annotations

import math
import numbers
from typing import List, Tuple

import numpy as np

from .config import EMPTY, Mark
from .errors import CellOccupied, InvalidSize, OutOfBounds

Cell = Tuple[int, int]


class Grid:
    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size <= 0:
            raise InvalidSize(f"Grid size must be a positive integer, got {size!r}")
        self._size = int(size)
        self._cells = np.zeros((self._size, self._size), dtype=np.int8)
        self._empty = self._size * self._size

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, i, j) -> bool:
        for v in (i, j):
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                return False
            if v < 0 or v >= self._size:
                return False
        return True

    def _check_bounds(self, i, j) -> None:
        # numpy would happily wrap negative indices
        if not self.in_bounds(i, j):
            raise OutOfBounds(i, j, self._size)

    def is_empty(self, i: int, j: int) -> bool:
        self._check_bounds(i, j)
        return bool(self._cells[i, j] == EMPTY)

    def place(self, i: int, j: int, mark: Mark) -> None:
        self._check_bounds(i, j)
        if mark not in (Mark.X, Mark.O):
            raise ValueError(f"Not a player mark: {mark!r}")
        if self._cells[i, j] != EMPTY:
            raise CellOccupied(i, j)
        self._cells[i, j] = int(mark)
        self._empty -= 1

    def remaining_empty_count(self) -> int:
        return self._empty

    def __getitem__(self, cell: Cell) -> int:
        i, j = cell
        self._check_bounds(i, j)
        return int(self._cells[i, j])

    def empty_cells(self) -> List[Cell]:
        return [(int(i), int(j)) for i, j in np.argwhere(self._cells == EMPTY)]

    def rows(self) -> List[List[int]]:
        return self._cells.tolist()

    def copy(self) -> "Grid":
        other = Grid(self._size)
        other._cells = self._cells.copy()
        other._empty = self._empty
        return other

    def serialize(self) -> str:
        return ''.join(str(v) for v in self._cells.ravel().tolist())

    @classmethod
    def deserialize(cls, board_str: str) -> "Grid":
        """Rebuild a grid from its flat digit form; the length must be a perfect square."""
        raw = board_str.strip()
        size = math.isqrt(len(raw))
        if size == 0 or size * size != len(raw):
            raise ValueError(f"Board string length {len(raw)} is not a perfect square")
        if any(c not in "012" for c in raw):
            raise ValueError("Board string must contain only 0/1/2")
        grid = cls(size)
        for idx, c in enumerate(raw):
            if c != '0':
                grid.place(idx // size, idx % size, Mark(int(c)))
        return grid

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, board={self.serialize()!r})"
