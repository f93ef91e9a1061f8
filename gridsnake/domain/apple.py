"""
Apple entity for the game engine.
"""

from .cell import Cell


class Apple:
    """A single apple. The caller guarantees it is placed on a free cell."""

    def __init__(self, position: Cell):
        self.position = position

    def relocate(self, cell: Cell) -> None:
        self.position = cell

    def __repr__(self):
        return f"<Apple position={self.position}>"
