"""
Players: one move per turn on the shared grid.

Every player writes only to in-bounds empty cells and checks for a win on
its own mark right after writing. The result of a turn is WIN or CONTINUE;
the game loop maps WIN to the winner state for the player's seat.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Tuple

from .config import GameConfig, Mark
from .errors import CellOccupied, IllegalMove, OutOfBounds
from .grid import Grid
from .wins import has_winning_line

MoveSource = Callable[[Grid, Mark], Tuple[int, int]]
RejectHandler = Callable[[int, int, str], None]
Strategy = Callable[[Grid, Mark], Tuple[int, int]]


class MoveResult(Enum):
    CONTINUE = "continue"
    WIN = "win"


class Player(ABC):
    def __init__(self) -> None:
        self.mark: Optional[Mark] = None
        self.is_first = True
        self.config: Optional[GameConfig] = None

    def init(self, config: GameConfig, mark: Mark) -> None:
        self.config = config
        self.mark = Mark(mark)
        self.is_first = self.mark == config.first_mark

    @abstractmethod
    def move(self, grid: Grid) -> MoveResult:
        """Make exactly one move (or none, for the automated stub) on grid."""

    def _require_init(self) -> GameConfig:
        if self.config is None or self.mark is None:
            raise IllegalMove(f"{type(self).__name__}.move called before init")
        return self.config

    def _place(self, grid: Grid, i: int, j: int) -> None:
        try:
            grid.place(i, j, self.mark)
        except (OutOfBounds, CellOccupied) as e:
            raise IllegalMove(f"{type(self).__name__} ({self.mark.symbol}) tried an illegal move: {e}") from e

    def _check_win(self, grid: Grid) -> MoveResult:
        if has_winning_line(grid, self.mark, self.config.line_length):
            return MoveResult.WIN
        return MoveResult.CONTINUE

    def __repr__(self) -> str:
        mark = self.mark.symbol if self.mark is not None else None
        return f"{type(self).__name__}(mark={mark!r})"


class HumanPlayer(Player):
    """Interactive player fed by a coordinate source.

    read_move(grid, mark) is asked repeatedly until it names an in-bounds
    empty cell. Rejected coordinates are reported to on_rejected, if given,
    and never escape this player.
    """

    def __init__(self, read_move: MoveSource, on_rejected: Optional[RejectHandler] = None):
        super().__init__()
        self._read_move = read_move
        self._on_rejected = on_rejected

    def _reject(self, i, j, reason: str) -> None:
        logging.warning("Rejected move (%s, %s) for %s: %s", i, j, self.mark.symbol, reason)
        if self._on_rejected is not None:
            self._on_rejected(i, j, reason)

    def move(self, grid: Grid) -> MoveResult:
        self._require_init()
        while True:
            i, j = self._read_move(grid, self.mark)
            if not grid.in_bounds(i, j):
                self._reject(i, j, "out of bounds")
                continue
            if not grid.is_empty(i, j):
                self._reject(i, j, "occupied")
                continue
            break
        self._place(grid, i, j)
        return self._check_win(grid)


class AutomatedPlayer(Player):
    """Computer-controlled seat.

    Without a strategy this is the baseline stub: it makes no move and always
    reports CONTINUE. A strategy(grid, mark) -> (i, j) turns it into a real
    player; an illegal choice is fatal (IllegalMove).
    """

    def __init__(self, strategy: Optional[Strategy] = None):
        super().__init__()
        self.strategy = strategy
        self._own: Optional[Grid] = None

    def init(self, config: GameConfig, mark: Mark) -> None:
        super().init(config, mark)
        # private view of this player's own moves, for strategies to build on
        self._own = Grid(config.size)

    @property
    def own_moves(self) -> Optional[Grid]:
        return self._own

    def move(self, grid: Grid) -> MoveResult:
        self._require_init()
        if self.strategy is None:
            return MoveResult.CONTINUE
        i, j = self.strategy(grid, self.mark)
        self._place(grid, i, j)
        self._own.place(i, j, self.mark)
        return self._check_win(grid)
