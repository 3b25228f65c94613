"""Flat skin - every entity is a filled rectangle."""

from typing import TYPE_CHECKING

import pygame

from yabog.models import Color, Rectangle
from yabog.palette import BACKGROUND_COLOR, PADDLE_COLOR, BALL_COLOR

from .base import BreakoutSkin

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.block import Block


class FlatSkin(BreakoutSkin):
    """Renders the game as plain filled rectangles.

    - Background: white
    - Paddle and balls: dark blue
    - Blocks: red, orange once damaged, green for bonus blocks
    """

    NAME = "flat"
    DESCRIPTION = "Filled rectangles on a white background"

    def _fill(self, screen: pygame.Surface, rect: Rectangle, color: Color) -> None:
        pygame.draw.rect(screen, color.as_rgb_tuple, rect.as_tuple)

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR.as_rgb_tuple)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        self._fill(screen, paddle.rect, PADDLE_COLOR)

    def render_block(self, block: 'Block', screen: pygame.Surface) -> None:
        if block.is_destroyed:
            return
        self._fill(screen, block.rect, block.color)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        self._fill(screen, ball.rect, BALL_COLOR)
