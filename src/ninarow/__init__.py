"""ninarow package.

Engine for a generalized n-in-a-row grid game: grid storage, win detection,
players, the game loop, and a small terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .config import GameConfig, Mark, resolve_config
from .errors import (
    CellOccupied,
    GameAborted,
    IllegalMove,
    InvalidConfiguration,
    InvalidSize,
    NinarowError,
    OutOfBounds,
)
from .game import Game, GameResult, GameState, start_game
from .grid import Grid
from .players import AutomatedPlayer, HumanPlayer, MoveResult, Player
from .wins import find_winning_line, has_winning_line

__all__ = [
    "GameConfig",
    "Mark",
    "resolve_config",
    "Grid",
    "has_winning_line",
    "find_winning_line",
    "Player",
    "HumanPlayer",
    "AutomatedPlayer",
    "MoveResult",
    "Game",
    "GameState",
    "GameResult",
    "start_game",
    "NinarowError",
    "InvalidConfiguration",
    "InvalidSize",
    "OutOfBounds",
    "CellOccupied",
    "IllegalMove",
    "GameAborted",
]
