"""
Reference strategies for AutomatedPlayer.

No lookahead: these only pick a legal cell, which is all the automated
player contract requires.
"""
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .config import Mark
from .errors import IllegalMove
from .grid import Grid


def first_empty(grid: Grid, mark: Mark) -> Tuple[int, int]:
    """First empty cell in row-major order."""
    for i in range(grid.size):
        for j in range(grid.size):
            if grid.is_empty(i, j):
                return i, j
    raise IllegalMove("No empty cell left")


class RandomStrategy:
    """Uniform choice over the empty cells, reproducible under a seed."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def __call__(self, grid: Grid, mark: Mark) -> Tuple[int, int]:
        cells = grid.empty_cells()
        if not cells:
            raise IllegalMove("No empty cell left")
        return cells[int(self.rng.integers(len(cells)))]


# name -> factory(seed); "none" keeps the automated stub
STRATEGIES: Dict[str, Callable[[Optional[int]], Optional[Callable]]] = {
    'none': lambda seed: None,
    'first-empty': lambda seed: first_empty,
    'random': lambda seed: RandomStrategy(seed),
}


def make_strategy(name: str, seed: Optional[int] = None):
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown strategy: {name}") from None
    return factory(seed)
