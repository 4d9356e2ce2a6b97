"""
Win detection for arbitrary grid size and line length.

Each scan starts on the border and walks one direction with a running
counter of consecutive cells holding the mark. The counter resets on any
other cell and the scan stops the moment it reaches the line length.
Starts are generated per border position so every row, every column and
every diagonal touching the border is walked at least once. A few
diagonals are walked twice (from the top row and from a side column).
"""
from typing import Iterator, List, Optional, Tuple

from .config import Mark
from .grid import Cell, Grid

ROW = (0, 1)
COL = (1, 0)
DIAG_DOWN_RIGHT = (1, 1)
DIAG_DOWN_LEFT = (1, -1)

Scan = Tuple[Cell, Tuple[int, int]]


def iter_scans(size: int) -> Iterator[Scan]:
    """Yield (start, step) pairs covering every line of a size x size grid."""
    last = size - 1
    for pos in range(size):
        yield (pos, 0), ROW
        yield (0, pos), COL
        yield (pos, 0), DIAG_DOWN_RIGHT
        yield (0, pos), DIAG_DOWN_RIGHT
        yield (0, pos), DIAG_DOWN_LEFT
        yield (pos, last), DIAG_DOWN_LEFT


def _scan_line(cells: List[List[int]], mark: int, start: Cell, step: Tuple[int, int],
               line_length: int) -> Optional[List[Cell]]:
    size = len(cells)
    i, j = start
    di, dj = step
    run: List[Cell] = []
    while 0 <= i < size and 0 <= j < size:
        if cells[i][j] == mark:
            run.append((i, j))
            if len(run) >= line_length:
                return run
        else:
            run = []
        i += di
        j += dj
    return None


def find_winning_line(grid: Grid, mark: int, line_length: int) -> Optional[List[Cell]]:
    """Return the first run of line_length cells holding mark, or None."""
    if mark not in (Mark.X, Mark.O):
        raise ValueError(f"Not a player mark: {mark!r}")
    if line_length < 1:
        raise ValueError(f"line_length must be positive, got {line_length}")
    cells = grid.rows()
    for start, step in iter_scans(grid.size):
        run = _scan_line(cells, mark, start, step, line_length)
        if run is not None:
            return run
    return None


def has_winning_line(grid: Grid, mark: int, line_length: int) -> bool:
    return find_winning_line(grid, mark, line_length) is not None
