"""YABOG skins for rendering."""

from .base import BreakoutSkin
from .flat import FlatSkin

__all__ = [
    'BreakoutSkin',
    'FlatSkin',
]
