"""
Tests for the domain entities: cells, bounds, snake, apple and placement.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake.domain import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    Apple,
    Bounds,
    Cell,
    Direction,
    ExhaustedBoard,
    GameError,
    InvalidDirection,
    RandomPlacement,
    Snake,
    to_direction,
)


class TestCell:
    """Tests for the Cell value type."""

    def test_equality_is_by_value(self):
        """Two cells with the same coordinates are equal and hash alike."""
        assert Cell(1, 2) == Cell(1, 2)
        assert len({Cell(1, 2), Cell(1, 2)}) == 1

    def test_offset_uses_screen_coordinates(self):
        """UP decreases y, DOWN increases y."""
        cell = Cell(3, 3)
        assert cell.offset(UP) == Cell(3, 2)
        assert cell.offset(DOWN) == Cell(3, 4)
        assert cell.offset(LEFT) == Cell(2, 3)
        assert cell.offset(RIGHT) == Cell(4, 3)

    def test_cell_unpacks(self):
        x, y = Cell(4, 7)
        assert (x, y) == (4, 7)

    def test_cell_is_immutable(self):
        with pytest.raises(AttributeError):
            Cell(0, 0).x = 1


class TestBounds:
    """Tests for board bounds."""

    def test_from_surface(self):
        """Maxima are floor(size / scale) - 1."""
        bounds = Bounds.from_surface(400, 300, 20)
        assert bounds.max_x == 19
        assert bounds.max_y == 14

    def test_from_surface_floors_partial_cells(self):
        bounds = Bounds.from_surface(105, 99, 10)
        assert (bounds.max_x, bounds.max_y) == (9, 8)

    def test_contains(self):
        bounds = Bounds(4, 4)
        assert bounds.contains(Cell(0, 0))
        assert bounds.contains(Cell(4, 4))
        assert not bounds.contains(Cell(5, 2))
        assert not bounds.contains(Cell(-1, 0))
        assert not bounds.contains(Cell(0, 5))

    def test_cells_covers_board_column_by_column(self):
        bounds = Bounds(1, 2)
        cells = list(bounds.cells())
        assert len(cells) == bounds.size == 6
        assert cells[:3] == [Cell(0, 0), Cell(0, 1), Cell(0, 2)]

    def test_rejects_scale_below_one(self):
        with pytest.raises(ValueError):
            Bounds.from_surface(100, 100, 0)

    def test_rejects_surface_smaller_than_a_cell(self):
        with pytest.raises(ValueError):
            Bounds.from_surface(10, 100, 20)

    def test_rejects_single_cell_board(self):
        """An apple and a snake must both fit."""
        with pytest.raises(ValueError):
            Bounds(0, 0)


class TestDirection:
    """Tests for direction parsing."""

    def test_valid_moves(self):
        assert VALID_MOVES == {UP, DOWN, LEFT, RIGHT}

    def test_reverse_pairs(self):
        assert UP.reverse is DOWN
        assert DOWN.reverse is UP
        assert LEFT.reverse is RIGHT
        assert RIGHT.reverse is LEFT

    def test_to_direction_accepts_names(self):
        assert to_direction("left") is LEFT
        assert to_direction("UP") is UP
        assert to_direction(Direction.DOWN) is DOWN

    def test_to_direction_rejects_unknown(self):
        with pytest.raises(InvalidDirection) as exc_info:
            to_direction("sideways")
        assert exc_info.value.raw == "sideways"

    def test_invalid_direction_is_a_value_error(self):
        assert issubclass(InvalidDirection, ValueError)
        assert issubclass(InvalidDirection, GameError)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake starts with one cell and no heading."""
        snake = Snake([Cell(5, 5)])
        assert snake.cells == [Cell(5, 5)]
        assert snake.direction is None
        assert len(snake) == 1

    def test_snake_requires_a_cell(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_head_is_last_cell(self):
        snake = Snake([Cell(1, 1), Cell(1, 2), Cell(1, 3)])
        assert snake.head == Cell(1, 3)

    def test_next_head_without_direction_is_head(self):
        snake = Snake([Cell(2, 2)])
        assert snake.next_head() == Cell(2, 2)

    def test_next_head_follows_heading(self):
        snake = Snake([Cell(2, 2)], direction=LEFT)
        assert snake.next_head() == Cell(1, 2)

    def test_next_head_with_explicit_direction(self):
        snake = Snake([Cell(2, 2)], direction=LEFT)
        assert snake.next_head(UP) == Cell(2, 1)

    def test_contains(self):
        snake = Snake([Cell(1, 1), Cell(1, 2)])
        assert snake.contains(Cell(1, 1))
        assert not snake.contains(Cell(1, 3))

    def test_move_shifts_body(self):
        """Scenario: [(1,1),(1,2)] heading DOWN becomes [(1,2),(1,3)]."""
        snake = Snake([Cell(1, 1), Cell(1, 2)], direction=DOWN)
        assert not snake.contains(snake.next_head())
        snake.move(grow=False)
        assert snake.cells == [Cell(1, 2), Cell(1, 3)]

    def test_move_grow_keeps_tail(self):
        snake = Snake([Cell(0, 0)], direction=RIGHT)
        snake.move(grow=True)
        assert snake.cells == [Cell(0, 0), Cell(1, 0)]

    def test_move_without_heading_is_noop(self):
        """An idle snake keeps its length whether or not it grows."""
        snake = Snake([Cell(3, 3)])
        snake.move(grow=False)
        snake.move(grow=True)
        assert snake.cells == [Cell(3, 3)]

    @pytest.mark.parametrize("grow, delta", [(False, 0), (True, 1)])
    def test_move_length(self, grow, delta):
        snake = Snake([Cell(1, 1), Cell(2, 1), Cell(3, 1)], direction=RIGHT)
        snake.move(grow=grow)
        assert len(snake) == 3 + delta

    def test_set_direction_from_unset(self):
        snake = Snake([Cell(0, 0)])
        assert snake.set_direction(DOWN) is True
        assert snake.direction is DOWN

    @pytest.mark.parametrize("current", [UP, DOWN, LEFT, RIGHT])
    def test_set_direction_rejects_reversal(self, current):
        snake = Snake([Cell(2, 2)], direction=current)
        assert snake.set_direction(current.reverse) is False
        assert snake.direction is current

    @pytest.mark.parametrize("current, turn", [(UP, LEFT), (UP, RIGHT), (LEFT, UP), (LEFT, DOWN)])
    def test_set_direction_allows_perpendicular(self, current, turn):
        snake = Snake([Cell(2, 2)], direction=current)
        assert snake.set_direction(turn) is True
        assert snake.direction is turn

    def test_set_direction_same_heading(self):
        snake = Snake([Cell(2, 2)], direction=RIGHT)
        assert snake.set_direction(RIGHT) is True
        assert snake.direction is RIGHT

    def test_set_direction_invalid_leaves_heading(self):
        snake = Snake([Cell(2, 2)], direction=RIGHT)
        with pytest.raises(InvalidDirection):
            snake.set_direction("diagonal")
        assert snake.direction is RIGHT


class TestApple:
    """Tests for the Apple class."""

    def test_relocate(self):
        apple = Apple(Cell(0, 0))
        apple.relocate(Cell(3, 1))
        assert apple.position == Cell(3, 1)


class TestRandomPlacement:
    """Tests for random free-cell placement."""

    def test_returns_only_free_cell(self):
        bounds = Bounds(1, 1)
        occupied = [Cell(0, 0), Cell(0, 1), Cell(1, 0)]
        assert RandomPlacement().choose(bounds, occupied) == Cell(1, 1)

    def test_never_returns_occupied_cell(self):
        bounds = Bounds(3, 3)
        occupied = {Cell(x, y) for x in range(4) for y in range(2)}
        placement = RandomPlacement(random.Random(42))
        for _ in range(100):
            cell = placement.choose(bounds, occupied)
            assert cell not in occupied
            assert bounds.contains(cell)

    def test_covers_all_free_cells(self):
        bounds = Bounds(1, 1)
        placement = RandomPlacement(random.Random(0))
        seen = {placement.choose(bounds, [Cell(0, 0)]) for _ in range(200)}
        assert seen == {Cell(0, 1), Cell(1, 0), Cell(1, 1)}

    def test_seeded_placement_is_reproducible(self):
        bounds = Bounds(9, 9)
        first = RandomPlacement(random.Random(7))
        second = RandomPlacement(random.Random(7))
        assert [first.choose(bounds) for _ in range(10)] == [second.choose(bounds) for _ in range(10)]

    def test_full_board_raises(self):
        bounds = Bounds(1, 0)
        with pytest.raises(ExhaustedBoard) as exc_info:
            RandomPlacement().choose(bounds, [Cell(0, 0), Cell(1, 0)])
        assert exc_info.value.size == 2
