"""
Exceptions raised by the game engine.
"""


class GameError(Exception):
    """Base class for engine errors."""


class ExhaustedBoard(GameError):
    """Raised when no free cell is left to place an apple or snake on."""

    def __init__(self, occupied: int, size: int):
        super().__init__(f"No free cell left: {occupied} of {size} cells occupied.")
        self.occupied = occupied
        self.size = size


class InvalidDirection(GameError, ValueError):
    """Raised when a raw value does not name one of UP, DOWN, LEFT, RIGHT."""

    def __init__(self, raw):
        super().__init__(f"Not a direction: {raw!r}")
        self.raw = raw
