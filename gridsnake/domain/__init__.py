"""
Domain entities for the gridsnake game engine.

This module contains the core game entities that are independent of
rendering, input and scheduling concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    Direction, GameStatus,
    OVER_WALL, OVER_SELF, OVER_BOARD_FULL,
)
from .errors import GameError, ExhaustedBoard, InvalidDirection
from .cell import Cell, Bounds
from .snake import Snake, to_direction
from .apple import Apple
from .placement import RandomPlacement

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Direction', 'GameStatus',
    'OVER_WALL', 'OVER_SELF', 'OVER_BOARD_FULL',
    'GameError', 'ExhaustedBoard', 'InvalidDirection',
    'Cell', 'Bounds',
    'Snake', 'to_direction',
    'Apple',
    'RandomPlacement',
]
