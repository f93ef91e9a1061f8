import logging
from typing import Callable, List, Optional

from gridsnake.domain import (
    Apple,
    Bounds,
    Cell,
    Direction,
    ExhaustedBoard,
    GameStatus,
    InvalidDirection,
    OVER_BOARD_FULL,
    OVER_SELF,
    OVER_WALL,
    RandomPlacement,
    Snake,
)
from gridsnake.domain.constants import BOARD_FULL_MESSAGE, GAME_OVER_MESSAGE
from gridsnake.services.input_adapter import InputChannel, parse_key
from gridsnake.services.scheduler import ManualTicker, Ticker

logger = logging.getLogger(__name__)

Painter = Callable[["GameState"], None]


class GameState:
    """
    Manages:
      - Board bounds
      - The snake and the apple
      - The RUNNING / OVER state machine
      - The ticker that drives step()
      - Painting after every state change

    The renderer and the input adapter only ever hold a reference to this
    object; the snake and apple are never shared.
    """

    def __init__(
        self,
        bounds: Bounds,
        placement: Optional[RandomPlacement] = None,
        ticker: Optional[Ticker] = None,
        painter: Optional[Painter] = None,
        input_channel: Optional[InputChannel] = None,
    ):
        self.bounds = bounds
        self.placement = placement or RandomPlacement()
        self.ticker = ticker or ManualTicker()
        self.painter = painter
        self.input_channel = input_channel

        self.snake: Optional[Snake] = None
        self.apple: Optional[Apple] = None
        self.status = GameStatus.RUNNING
        self.over_reason: Optional[str] = None
        self.games_played = 0

        self.set_up()

    @classmethod
    def from_surface(cls, width: int, height: int, scale: int = 1, **kwargs) -> "GameState":
        """Create a game sized for a drawing surface of width x height pixels."""
        return cls(Bounds.from_surface(width, height, scale), **kwargs)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def over(self) -> bool:
        return self.status is GameStatus.OVER

    @property
    def loop_active(self) -> bool:
        return self.ticker.active

    @property
    def score(self) -> int:
        """Apples eaten in the current game."""
        return len(self.snake) - 1

    @property
    def message(self) -> Optional[str]:
        """Text to show over the board, or None while running."""
        if not self.over:
            return None
        if self.over_reason == OVER_BOARD_FULL:
            return BOARD_FULL_MESSAGE
        return GAME_OVER_MESSAGE

    def occupied(self) -> List[Cell]:
        cells: List[Cell] = []
        if self.apple is not None:
            cells.append(self.apple.position)
        if self.snake is not None:
            cells.extend(self.snake.positions)
        return cells

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def set_up(self) -> None:
        """Place a fresh apple and a fresh one-cell snake for a new game."""
        self.stop()
        self.snake = None
        self.apple = None

        # The apple goes first; the snake only has to avoid the apple.
        self.apple = Apple(self.placement.choose(self.bounds, self.occupied()))
        self.snake = Snake([self.placement.choose(self.bounds, self.occupied())])

        self.status = GameStatus.RUNNING
        self.over_reason = None
        self.games_played += 1
        logger.info(
            "Game %d set up: snake at %s, apple at %s",
            self.games_played, self.snake.head, self.apple.position,
        )

        self.paint()

    def run(self) -> None:
        """Start the game loop."""
        self.ticker.start(self.step)

    def stop(self) -> None:
        """Stop the game loop."""
        if self.ticker.active:
            self.ticker.stop()

    def step(self) -> GameStatus:
        """
        Advance the game state by one tick.

          1) Compute where the head goes next
          2) Wall or self collision ends the game
          3) Eating the apple grows the snake and moves the apple
          4) Otherwise the snake shifts one cell
          5) Paint, and stop the loop once the game is over
        """
        if self.over:
            logger.debug("Game is already over; ignoring step()")
            return self.status

        head = self.snake.head
        next_head = self.snake.next_head()

        if next_head == head:
            # No heading yet: the snake idles in place.
            self.snake.move()
        elif not self.bounds.contains(next_head):
            self._end(OVER_WALL)
        elif self.snake.contains(next_head):
            self._end(OVER_SELF)
        elif next_head == self.apple.position:
            self.snake.move(grow=True)
            try:
                self.apple.relocate(self.placement.choose(self.bounds, self.snake.positions))
            except ExhaustedBoard as exc:
                logger.info("%s", exc)
                self._end(OVER_BOARD_FULL)
            else:
                logger.debug("Apple eaten; moved to %s", self.apple.position)
        else:
            self.snake.move()

        self.paint()

        if self.over:
            self.stop()

        return self.status

    def _end(self, reason: str) -> None:
        self.status = GameStatus.OVER
        self.over_reason = reason
        logger.info("Game over (%s) with score %d", reason, self.score)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def attach(self) -> None:
        """Start receiving key events from the input channel."""
        if self.input_channel is None:
            raise RuntimeError("No input channel to attach to.")
        self.input_channel.subscribe(self.handle_key)

    def detach(self) -> None:
        if self.input_channel is not None:
            self.input_channel.unsubscribe(self.handle_key)

    def handle_key(self, raw_key: str) -> None:
        """Handle one key press: steer the snake, then restart or start the loop."""
        self.on_direction_input(raw_key)
        self.on_any_input()

    def on_direction_input(self, raw_key: str) -> Optional[Direction]:
        """
        Steer the snake with a raw key.

        Returns:
            The direction the key maps to, or None if the key is not a direction.
        """
        try:
            direction = parse_key(raw_key)
        except InvalidDirection:
            logger.debug("Ignoring non-direction key %r", raw_key)
            return None
        self.snake.set_direction(direction)
        return direction

    def on_any_input(self) -> None:
        if self.over:
            self.set_up()
        elif not self.loop_active:
            self.run()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def paint(self) -> None:
        if self.painter is not None:
            self.painter(self)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        o = snake body
        @ = snake head
        (0,0) is the top left, matching screen coordinates.
        """
        board = [['.' for _ in range(self.bounds.width)] for _ in range(self.bounds.height)]

        ax, ay = self.apple.position
        board[ay][ax] = 'A'

        for x, y in self.snake.positions:
            board[y][x] = 'o'
        hx, hy = self.snake.head
        board[hy][hx] = '@'

        rows = [''.join(row) for row in board]
        if self.over:
            rows.append(self.message)
        return "\n".join(rows)

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, snake={self.snake!r}, "
            f"apple={self.apple!r}, score={self.score}>"
        )
