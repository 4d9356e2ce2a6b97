"""
Text rendering of a grid and of the final outcome.

Row and column labels are single digits, so only indices 0-9 are labelled;
larger grids print their remaining rows and columns without labels.
"""
from typing import List

from .config import symbol_for
from .game import GameState
from .grid import Grid

MAX_LABEL = 10

OUTCOME_MESSAGES = {
    GameState.WINNER_A: "First wins!",
    GameState.WINNER_B: "Second wins!",
    GameState.DRAW: "Draw.",
    GameState.ABORTED: "Game aborted.",
}


def render_grid(grid: Grid) -> str:
    lines: List[str] = []
    header = ''.join(str(j) for j in range(min(grid.size, MAX_LABEL)))
    lines.append(' ' + header)
    for i, row in enumerate(grid.rows()):
        label = str(i) if i < MAX_LABEL else ''
        lines.append(label + ''.join(symbol_for(v) for v in row))
    return '\n'.join(lines)


def outcome_message(state: GameState) -> str:
    try:
        return OUTCOME_MESSAGES[state]
    except KeyError:
        raise ValueError(f"Not a terminal state: {state}") from None
