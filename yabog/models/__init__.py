"""
Data models for YABOG.

Usage:
    >>> from yabog.models import Point2D, Rectangle
    >>> from yabog.models.primitives import Color
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
    Rectangle,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Color',
    'Rectangle',
]
