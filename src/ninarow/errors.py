"""
Exception taxonomy for the engine.

Configuration errors abort a session before any grid exists. Bounds and
occupancy errors come from the Grid; human players recover from them by
asking again, everything else treats them as contract violations.
"""


class NinarowError(Exception):
    """Base class for every engine error."""


class InvalidConfiguration(NinarowError, ValueError):
    """Grid size or line length outside the supported range."""


class InvalidSize(NinarowError, ValueError):
    """A grid was requested with a non-positive size."""


class OutOfBounds(NinarowError, IndexError):
    def __init__(self, i, j, size: int):
        super().__init__(f"Cell ({i}, {j}) is outside a {size}x{size} grid")
        self.i = i
        self.j = j
        self.size = size


class CellOccupied(NinarowError, ValueError):
    def __init__(self, i: int, j: int):
        super().__init__(f"Cell ({i}, {j}) is already marked")
        self.i = i
        self.j = j


class IllegalMove(NinarowError, RuntimeError):
    """A player implementation bypassed the validity check (programming defect)."""


class GameAborted(NinarowError):
    """Raised from a pending move when input is interrupted or exhausted."""
