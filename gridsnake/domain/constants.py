"""
Game constants for gridsnake.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. Screen coordinates: y grows downwards."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self):
        return DELTAS[self]

    @property
    def reverse(self) -> "Direction":
        return OPPOSITES[self]


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}


class GameStatus(str, Enum):
    RUNNING = "RUNNING"
    OVER = "OVER"


# Reasons a game can end
OVER_WALL = "wall"
OVER_SELF = "self"
OVER_BOARD_FULL = "board_full"

GAME_OVER_MESSAGE = "Game Over. Press any key."
BOARD_FULL_MESSAGE = "Board full. You win! Press any key."

# Session defaults
DEFAULT_TICK_HZ = 10
