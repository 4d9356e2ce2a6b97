"""
The turn-taking game loop.

States: AWAITING_MOVE_A -> AWAITING_MOVE_B -> ... until one of the terminal
states WINNER_A, WINNER_B, DRAW or ABORTED. A win reported on the move that
also fills the last cell is a win, not a draw: the win is checked first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import GameConfig
from .errors import GameAborted, IllegalMove, InvalidConfiguration
from .grid import Grid
from .players import MoveResult, Player


class GameState(Enum):
    AWAITING_MOVE_A = "awaiting_move_a"
    AWAITING_MOVE_B = "awaiting_move_b"
    WINNER_A = "winner_a"
    WINNER_B = "winner_b"
    DRAW = "draw"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self not in (GameState.AWAITING_MOVE_A, GameState.AWAITING_MOVE_B)


@dataclass(frozen=True)
class GameResult:
    state: GameState
    grid: Grid
    turns: int


class Game:
    def __init__(self, config: GameConfig, first: Player, second: Player,
                 grid: Optional[Grid] = None):
        if grid is not None and grid.size != config.size:
            raise InvalidConfiguration(
                f"Grid size {grid.size} does not match configured size {config.size}"
            )
        if grid is not None and grid.remaining_empty_count() == 0:
            raise InvalidConfiguration("Cannot start a game on a full grid")
        self.config = config
        self.players = (first, second)
        self.state = GameState.AWAITING_MOVE_A
        if grid is None:
            self.grid = Grid(config.size)
            self.remaining = config.cell_count
        else:
            # resume from a partly filled board
            self.grid = grid
            self.remaining = grid.remaining_empty_count()
        self.turns = 0

    @property
    def active_index(self) -> int:
        return 0 if self.state is GameState.AWAITING_MOVE_A else 1

    def step(self) -> GameState:
        if self.state.is_terminal:
            raise IllegalMove(f"Game already finished: {self.state.value}")
        idx = self.active_index
        player = self.players[idx]
        try:
            result = player.move(self.grid)
        except GameAborted:
            logging.info("Game aborted during move of %r", player)
            self.state = GameState.ABORTED
            return self.state
        self.turns += 1
        logging.debug("turn=%d player=%r result=%s board=%s",
                      self.turns, player, result.value, self.grid.serialize())

        if result is MoveResult.WIN:
            self.state = GameState.WINNER_A if idx == 0 else GameState.WINNER_B
        else:
            self.remaining -= 1
            if self.remaining == 0:
                self.state = GameState.DRAW
            elif idx == 0:
                self.state = GameState.AWAITING_MOVE_B
            else:
                self.state = GameState.AWAITING_MOVE_A
        return self.state

    def run(self) -> GameResult:
        while not self.state.is_terminal:
            self.step()
        logging.info("Game over after %d turns: %s", self.turns, self.state.value)
        return GameResult(state=self.state, grid=self.grid, turns=self.turns)


def start_game(config: GameConfig, first: Player, second: Player) -> GameResult:
    """Initialise both seats, create the grid, and play to a terminal state."""
    first.init(config, config.first_mark)
    second.init(config, config.second_mark)
    logging.info("Starting %dx%d game, %d in a row to win", config.size, config.size,
                 config.line_length)
    return Game(config, first, second).run()
