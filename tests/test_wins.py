import pytest

from ninarow.config import EMPTY, Mark
from ninarow.grid import Grid
from ninarow.wins import find_winning_line, has_winning_line, iter_scans


def _grid(size, cells, mark=Mark.X):
    g = Grid(size)
    for i, j in cells:
        g.place(i, j, mark)
    return g


def test_row_win_3x3():
    g = _grid(3, [(0, 0), (0, 1), (0, 2)])
    assert has_winning_line(g, Mark.X, 3)
    assert not has_winning_line(g, Mark.O, 3)


def test_diagonal_win_3x3():
    g = _grid(3, [(0, 0), (1, 1), (2, 2)])
    assert has_winning_line(g, Mark.X, 3)


def test_diagonal_on_5x5_depends_on_line_length():
    g = _grid(5, [(0, 0), (1, 1), (2, 2), (3, 3)])
    assert has_winning_line(g, Mark.X, 4)
    assert not has_winning_line(g, Mark.X, 5)


def test_empty_grid_never_wins():
    g = Grid(7)
    assert not has_winning_line(g, Mark.X, 3)
    assert not has_winning_line(g, Mark.O, 3)


@pytest.mark.parametrize(
    "cells,expected",
    [
        ([(4, 0), (4, 1), (4, 2)], True),  # bottom row
        ([(0, 4), (1, 4), (2, 4)], True),  # right column
        ([(2, 4), (3, 3), (4, 2)], True),  # anti-diagonal starting on the right border
        ([(3, 4), (4, 3), (2, 0)], False),  # broken, no win
        ([(0, 2), (1, 1), (2, 0)], True),  # anti-diagonal from the top row
        ([(2, 0), (3, 1), (4, 2)], True),  # diagonal starting on the left border
        ([(0, 2), (1, 3), (2, 4)], True),  # diagonal starting on the top row
    ],
)
def test_border_lines_5x5(cells, expected):
    g = _grid(5, cells)
    assert has_winning_line(g, Mark.X, 3) is expected


def test_counter_resets_on_opponent_mark():
    g = Grid.deserialize("1121100000000000")  # x x o x / x . . . on a 4x4
    assert not has_winning_line(g, Mark.X, 3)
    g.place(2, 0, Mark.X)
    assert has_winning_line(g, Mark.X, 3)


def test_longer_run_counts_as_win():
    g = _grid(6, [(2, j) for j in range(6)])
    assert has_winning_line(g, Mark.X, 4)


def test_find_winning_line_returns_cells():
    g = _grid(4, [(3, 0), (2, 1), (1, 2)])
    line = find_winning_line(g, Mark.X, 3)
    assert line is not None
    assert sorted(line) == [(1, 2), (2, 1), (3, 0)]
    assert find_winning_line(g, Mark.O, 3) is None


def test_line_length_must_be_positive():
    with pytest.raises(ValueError):
        has_winning_line(Grid(3), Mark.X, 0)


def test_scans_cover_every_cell_in_every_direction():
    size = 6
    for step in [(0, 1), (1, 0), (1, 1), (1, -1)]:
        seen = set()
        for (i, j), s in iter_scans(size):
            if s != step:
                continue
            while 0 <= i < size and 0 <= j < size:
                seen.add((i, j))
                i += s[0]
                j += s[1]
        assert len(seen) == size * size, step


def test_detection_does_not_mutate_grid():
    g = _grid(3, [(0, 0), (1, 1)])
    before = g.serialize()
    has_winning_line(g, Mark.X, 3)
    has_winning_line(g, Mark.O, 3)
    assert g.serialize() == before


def test_full_length_anti_diagonal_on_largest_grid():
    g = Grid(100)
    for k in range(100):
        g.place(k, 99 - k, Mark.O)
    assert has_winning_line(g, Mark.O, 100)
    assert not has_winning_line(g, Mark.O, 101)
    assert not has_winning_line(g, Mark.X, 3)


@pytest.mark.parametrize("mark", [EMPTY, 3, "x", None])
def test_only_player_marks_are_checked(mark):
    with pytest.raises(ValueError):
        has_winning_line(Grid(3), mark, 3)
    with pytest.raises(ValueError):
        find_winning_line(Grid(3), mark, 3)
