"""
Terminal I/O for interactive sessions: coordinates, session settings and
seat selection. End of input or Ctrl-C while waiting raises GameAborted.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO, Tuple

from .config import MAX_SIZE, MIN_LINE_LENGTH, MIN_SIZE, GameConfig, Mark
from .errors import GameAborted, InvalidConfiguration
from .grid import Grid
from .render import render_grid

RETRY_PROMPT = "Try again (i, j):"


class ConsoleInput:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._retrying = False

    def _write(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def _readline(self) -> str:
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            raise GameAborted("Interrupted while waiting for input") from None
        if line == '':
            raise GameAborted("Input closed")
        return line.strip()

    def _read_ints(self, count: int) -> Tuple[int, ...]:
        parts = self._readline().replace(',', ' ').split()
        if len(parts) != count:
            raise ValueError(f"expected {count} integers, got {len(parts)}")
        return tuple(int(p) for p in parts)

    def read_move(self, grid: Grid, mark: Mark) -> Tuple[int, int]:
        if not self._retrying:
            self._write(render_grid(grid))
            self._write(f"Human player {mark.symbol} move (i, j):")
        self._retrying = False
        while True:
            try:
                i, j = self._read_ints(2)
                return i, j
            except ValueError:
                self._write(RETRY_PROMPT)

    def notify_rejected(self, i, j, reason: str) -> None:
        self._retrying = True
        self._write(RETRY_PROMPT)

    def _read_int(self, prompt: str) -> int:
        self._write(prompt)
        while True:
            try:
                (value,) = self._read_ints(1)
                return value
            except ValueError:
                self._write("Please enter a single integer:")

    def read_config(self) -> GameConfig:
        """Ask for size, then line length; validation is GameConfig's."""
        size = self._read_int(f"Grid size ({MIN_SIZE} -- {MAX_SIZE}):")
        if size < MIN_SIZE or size > MAX_SIZE:
            raise InvalidConfiguration(f"Grid size is {size}")
        line_length = self._read_int(f"Number of cells to win ({MIN_LINE_LENGTH} -- {size}):")
        return GameConfig(size=size, line_length=line_length)

    def ask_yes_no(self, question: str) -> bool:
        self._write(f"{question} (y/n)")
        return self._readline().lower() in ('y', 'yes')

    def show(self, text: str) -> None:
        self._write(text)
