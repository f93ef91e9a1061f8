"""
Random placement of apples and snakes on free cells.
"""

import random
from typing import Iterable, Optional

from .cell import Bounds, Cell
from .errors import ExhaustedBoard


class RandomPlacement:
    """
    Picks a free cell uniformly at random.

    Pass a seeded random.Random to make placement reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def choose(self, bounds: Bounds, occupied: Iterable[Cell] = ()) -> Cell:
        """
        Return a random in-bounds cell that is not occupied.

        Raises:
            ExhaustedBoard: if every cell of the board is occupied.
        """
        occupied = set(occupied)
        available = [cell for cell in bounds.cells() if cell not in occupied]
        if not available:
            raise ExhaustedBoard(len(occupied), bounds.size)
        return available[self.rng.randrange(len(available))]
