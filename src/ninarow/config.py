"""
Session configuration: marks, grid size and the line length needed to win.

A GameConfig is validated once, when it is built, and is immutable afterwards.
Values can come from the CLI, from the terminal, or from the environment
(NINAROW_SIZE / NINAROW_LINE_LENGTH), in that order of precedence.
"""
from __future__ import annotations

import numbers
import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .errors import InvalidConfiguration

MIN_SIZE = 3
MAX_SIZE = 100
MIN_LINE_LENGTH = 3

DEFAULT_SIZE = 3
DEFAULT_LINE_LENGTH = 3

EMPTY = 0
EMPTY_SYMBOL = '.'


class Mark(IntEnum):
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return 'x' if self is Mark.X else 'o'

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


def symbol_for(value: int) -> str:
    """Display symbol for a raw cell value (0, 1 or 2)."""
    if value == EMPTY:
        return EMPTY_SYMBOL
    return Mark(value).symbol


@dataclass(frozen=True)
class GameConfig:
    size: int = DEFAULT_SIZE
    line_length: int = DEFAULT_LINE_LENGTH
    first_mark: Mark = Mark.X
    second_mark: Mark = Mark.O

    def __post_init__(self) -> None:
        for name in ('size', 'line_length'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))
        if self.size < MIN_SIZE or self.size > MAX_SIZE:
            raise InvalidConfiguration(
                f"Grid size is {self.size}; expected {MIN_SIZE} -- {MAX_SIZE}"
            )
        if self.line_length < MIN_LINE_LENGTH or self.line_length > self.size:
            raise InvalidConfiguration(
                f"Line length is {self.line_length}; expected {MIN_LINE_LENGTH} -- {self.size}"
            )
        if self.first_mark == self.second_mark:
            raise InvalidConfiguration("Players must use distinct marks")

    @property
    def marks(self) -> tuple:
        return (self.first_mark, self.second_mark)

    @property
    def cell_count(self) -> int:
        return self.size * self.size


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from None


def resolve_config(size: Optional[int] = None, line_length: Optional[int] = None) -> GameConfig:
    """Build a GameConfig from explicit values, then the environment, then defaults.

    Explicit arguments win over NINAROW_SIZE / NINAROW_LINE_LENGTH. A missing
    line length defaults to 3, which is always valid for a valid size.
    """
    if size is None:
        size = _env_int("NINAROW_SIZE")
    if line_length is None:
        line_length = _env_int("NINAROW_LINE_LENGTH")
    return GameConfig(
        size=DEFAULT_SIZE if size is None else size,
        line_length=DEFAULT_LINE_LENGTH if line_length is None else line_length,
    )
