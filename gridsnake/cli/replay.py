#!/usr/bin/env python3
"""
CLI tool to play a scripted key sequence headlessly and save it as a GIF

Every key is delivered through the input channel, then the game is ticked
--ticks-per-key times before the next key.

Usage:
    python -m gridsnake.cli.replay RIGHT RIGHT DOWN DOWN LEFT
    python -m gridsnake.cli.replay ArrowRight d s --seed 7 --output run.gif

Examples:
    # Small board, fixed seed, three ticks per key
    python -m gridsnake.cli.replay RIGHT UP --width 100 --height 100 --scale 20 --seed 1 --ticks-per-key 3

    # Keep ticking after the last key until the snake hits something
    python -m gridsnake.cli.replay LEFT --trailing-ticks 50
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from gridsnake import config
from gridsnake.domain import RandomPlacement
from gridsnake.game import GameState
from gridsnake.services.frame_renderer import FrameRenderer
from gridsnake.services.input_adapter import InputChannel
from gridsnake.services.scheduler import ManualTicker

logger = logging.getLogger(__name__)


def run_replay(
    keys: List[str],
    width: int,
    height: int,
    scale: int,
    seed: Optional[int] = None,
    ticks_per_key: int = 1,
    trailing_ticks: int = 0,
    renderer: Optional[FrameRenderer] = None,
) -> GameState:
    """
    Play `keys` against a fresh game and return the final state.

    Args:
        keys: raw key names, delivered in order
        width, height: drawing surface size in pixels
        scale: pixels per board cell
        seed: seed for apple and snake placement
        ticks_per_key: ticks delivered after each key
        trailing_ticks: extra ticks after the last key
        renderer: optional painter that records every frame
    """
    ticker = ManualTicker()
    channel = InputChannel()
    game = GameState.from_surface(
        width,
        height,
        scale,
        placement=RandomPlacement(random.Random(seed)),
        ticker=ticker,
        painter=renderer,
        input_channel=channel,
    )
    game.attach()
    try:
        for key in keys:
            channel.publish(key)
            ticker.tick(ticks_per_key)
        ticker.tick(trailing_ticks)
    finally:
        game.detach()

    logger.info(f"Replay finished: status={game.status.value}, score={game.score}")
    return game


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Play a scripted key sequence and save the frames as a GIF',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('keys', nargs='*', help='Key names, e.g. RIGHT ArrowUp w')
    parser.add_argument('--width', type=int, default=config.SURFACE_WIDTH,
                        help=f'Surface width in pixels (default: {config.SURFACE_WIDTH})')
    parser.add_argument('--height', type=int, default=config.SURFACE_HEIGHT,
                        help=f'Surface height in pixels (default: {config.SURFACE_HEIGHT})')
    parser.add_argument('--scale', type=int, default=config.SCALE,
                        help=f'Pixels per cell (default: {config.SCALE})')
    parser.add_argument('--seed', type=int, default=None, help='Placement seed')
    parser.add_argument('--ticks-per-key', type=int, default=1,
                        help='Ticks after each key (default: 1)')
    parser.add_argument('--trailing-ticks', type=int, default=0,
                        help='Ticks after the last key (default: 0)')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Write the frames to this GIF file')
    parser.add_argument('--fps', type=float, default=config.TICK_HZ,
                        help=f'GIF playback speed (default: {config.TICK_HZ})')
    parser.add_argument('--log-level', default=config.LOG_LEVEL)

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    try:
        renderer = FrameRenderer(scale=args.scale) if args.output else None
        game = run_replay(
            args.keys,
            width=args.width,
            height=args.height,
            scale=args.scale,
            seed=args.seed,
            ticks_per_key=args.ticks_per_key,
            trailing_ticks=args.trailing_ticks,
            renderer=renderer,
        )
        if renderer is not None:
            renderer.save_gif(args.output, fps=args.fps)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 1

    print(game.print_board())
    print(f"Score: {game.score}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
