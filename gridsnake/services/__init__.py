"""
Adapters around the game engine: tick sources, keyboard input and rendering.
"""

from .scheduler import Ticker, ManualTicker, ScheduleTicker
from .input_adapter import InputChannel, KEY_BINDINGS, parse_key
from .frame_renderer import FrameRenderer, ColorScheme

__all__ = [
    'Ticker',
    'ManualTicker',
    'ScheduleTicker',
    'InputChannel',
    'KEY_BINDINGS',
    'parse_key',
    'FrameRenderer',
    'ColorScheme',
]
