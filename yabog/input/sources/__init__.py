"""Control sources."""

from .base import ControlSource
from .keyboard import KeyboardControlSource

__all__ = [
    'ControlSource',
    'KeyboardControlSource',
]
