"""
gridsnake - a single-player grid snake game engine.
"""

from .game import GameState

__all__ = ['GameState']
