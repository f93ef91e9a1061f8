"""
Cell and Bounds value types for the board.
"""

from dataclasses import dataclass
from typing import Iterator

from .constants import Direction


@dataclass(frozen=True)
class Cell:
    """An (x, y) grid coordinate, compared by value."""

    x: int
    y: int

    def offset(self, direction: Direction) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Bounds:
    """
    The finite board [0..max_x] x [0..max_y].

    Attributes:
        max_x: largest valid x coordinate
        max_y: largest valid y coordinate
    """

    max_x: int
    max_y: int

    def __post_init__(self):
        if self.max_x < 0 or self.max_y < 0:
            raise ValueError(f"Board maxima must be non-negative, got ({self.max_x}, {self.max_y}).")
        if self.size < 2:
            raise ValueError("Board must hold at least two cells (one apple and one snake).")

    @classmethod
    def from_surface(cls, width: int, height: int, scale: int = 1) -> "Bounds":
        """Derive the board from a drawing surface size and a cell scale."""
        if scale < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}.")
        return cls(width // scale - 1, height // scale - 1)

    @property
    def width(self) -> int:
        return self.max_x + 1

    @property
    def height(self) -> int:
        return self.max_y + 1

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x <= self.max_x and 0 <= cell.y <= self.max_y

    def cells(self) -> Iterator[Cell]:
        """Every in-bounds cell, column by column."""
        for x in range(self.max_x + 1):
            for y in range(self.max_y + 1):
                yield Cell(x, y)
