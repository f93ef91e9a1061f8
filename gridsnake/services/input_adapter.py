"""
Keyboard input adapter.

Maps raw key names from the front-ends (browser-style names, curses names and
WASD) to directions, and carries key events to subscribers through an explicit
InputChannel owned by the composing application.
"""

import logging
from typing import Callable, Dict, List

from gridsnake.domain.constants import UP, DOWN, LEFT, RIGHT, Direction
from gridsnake.domain.errors import InvalidDirection

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, Direction] = {
    # Browser KeyboardEvent.key names
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    # curses.keyname() values
    "KEY_UP": UP,
    "KEY_DOWN": DOWN,
    "KEY_LEFT": LEFT,
    "KEY_RIGHT": RIGHT,
    # WASD
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    # Direction names
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

KeyHandler = Callable[[str], None]


def parse_key(raw_key: str) -> Direction:
    """
    Map a raw key name to a direction.

    Raises:
        InvalidDirection: if the key is not bound to a direction.
    """
    direction = KEY_BINDINGS.get(raw_key)
    if direction is None and isinstance(raw_key, str) and len(raw_key) == 1:
        direction = KEY_BINDINGS.get(raw_key.lower())
    if direction is None:
        raise InvalidDirection(raw_key)
    return direction


class InputChannel:
    """Delivers raw key events to subscribed handlers, in subscription order."""

    def __init__(self):
        self._handlers: List[KeyHandler] = []

    def subscribe(self, handler: KeyHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: KeyHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def subscribers(self) -> int:
        return len(self._handlers)

    def publish(self, raw_key: str) -> None:
        logger.debug("Key event: %r", raw_key)
        for handler in list(self._handlers):
            handler(raw_key)
