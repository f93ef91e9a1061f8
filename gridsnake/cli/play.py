#!/usr/bin/env python3
"""
Play gridsnake in the terminal.

Controls:
    - Arrow keys or WASD to steer
    - Any key starts the game, and restarts it after game over
    - q to quit

Usage:
    python -m gridsnake.cli.play --width 400 --height 300 --scale 20 --hz 10
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional

from gridsnake import config
from gridsnake.game import GameState
from gridsnake.services.input_adapter import InputChannel
from gridsnake.services.scheduler import ScheduleTicker

logger = logging.getLogger(__name__)

QUIT_KEYS = {"q", "Q"}


class CursesView:
    """Paints the text board into a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def __call__(self, state: GameState) -> None:
        self.stdscr.erase()
        lines = state.print_board().split("\n")
        lines.append(f"Score: {state.score}   (q to quit)")
        for row, line in enumerate(lines):
            try:
                self.stdscr.addstr(row, 0, line)
            except curses.error:
                # Terminal smaller than the board; draw what fits.
                break
        self.stdscr.refresh()


def play(stdscr, args: argparse.Namespace) -> int:
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)

    ticker = ScheduleTicker(hz=args.hz)
    channel = InputChannel()
    game = GameState.from_surface(
        args.width,
        args.height,
        args.scale,
        ticker=ticker,
        painter=CursesView(stdscr),
        input_channel=channel,
    )
    game.attach()

    session = {"quit": False}

    def poll() -> None:
        code = stdscr.getch()
        if code == -1:
            return
        key = curses.keyname(code).decode("ascii", "replace")
        if key in QUIT_KEYS:
            session["quit"] = True
            return
        channel.publish(key)

    try:
        ticker.run_until(lambda: session["quit"], poll=poll)
    finally:
        game.stop()
        game.detach()

    return game.score


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play gridsnake in the terminal.")
    parser.add_argument("--width", type=int, default=config.SURFACE_WIDTH,
                        help=f"Surface width in pixels (default: {config.SURFACE_WIDTH})")
    parser.add_argument("--height", type=int, default=config.SURFACE_HEIGHT,
                        help=f"Surface height in pixels (default: {config.SURFACE_HEIGHT})")
    parser.add_argument("--scale", type=int, default=config.SCALE,
                        help=f"Pixels per cell (default: {config.SCALE})")
    parser.add_argument("--hz", type=float, default=config.TICK_HZ,
                        help=f"Ticks per second (default: {config.TICK_HZ})")
    parser.add_argument("--log-file", default="gridsnake.log",
                        help="Where to write logs while the terminal is in use")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)

    args = parser.parse_args(argv)

    # curses owns the terminal, so logs go to a file.
    logging.basicConfig(
        level=args.log_level.upper(),
        format=config.LOG_FORMAT,
        filename=args.log_file,
    )

    try:
        score = curses.wrapper(play, args)
    except ValueError as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
