"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Union

from .cell import Cell
from .constants import Direction
from .errors import InvalidDirection


def to_direction(raw: Union[Direction, str]) -> Direction:
    """Coerce a Direction or its name ("up", "UP") to a Direction."""
    if isinstance(raw, Direction):
        return raw
    try:
        return Direction(str(raw).upper())
    except ValueError:
        raise InvalidDirection(raw) from None


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of cells from the tail at index 0 to the head at the end
        direction: current heading, or None until the player picks one
    """

    def __init__(self, positions: Iterable[Cell], direction: Optional[Direction] = None):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")
        self.direction = direction

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction}>"

    @property
    def head(self) -> Cell:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def cells(self) -> List[Cell]:
        return list(self.positions)

    def next_head(self, direction: Optional[Direction] = None) -> Cell:
        """
        The cell the head moves to on the next tick.

        Uses the current heading unless a direction is given. With no heading
        the snake stands still and the head itself is returned.
        """
        direction = direction or self.direction
        if direction is None:
            return self.head
        return self.head.offset(direction)

    def contains(self, cell: Cell) -> bool:
        return cell in self.positions

    def move(self, grow: bool = False) -> None:
        """Advance one cell; keep the tail when growing."""
        next_head = self.next_head()
        if next_head == self.head:
            return

        self.positions.append(next_head)
        if not grow:
            self.positions.popleft()

    def set_direction(self, requested: Union[Direction, str]) -> bool:
        """
        Change the heading unless the request is a 180 degree turn.

        Returns:
            True if the heading now equals the request.

        Raises:
            InvalidDirection: if the request does not name a direction.
        """
        requested = to_direction(requested)
        if self.direction is not None and requested is self.direction.reverse:
            return False
        self.direction = requested
        return True
