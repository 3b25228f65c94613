"""YABOG - yet another breakout game.

Usage:
    >>> from yabog import BreakoutMode
    >>> game = BreakoutMode(lambda: (500, 500), seed=1)
"""

from .game_mode import BreakoutMode, GameConfig

__version__ = "0.1.0"

__all__ = [
    'BreakoutMode',
    'GameConfig',
]
