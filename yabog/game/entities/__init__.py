"""YABOG game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .block import Block, BlockKind

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Block', 'BlockKind',
]
