"""YABOG physics and collision resolution."""

from .collision import (
    resolve_collision,
    collide_ball,
)

__all__ = [
    'resolve_collision',
    'collide_ball',
]
