"""Base class for YABOG skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.block import Block


class BreakoutSkin(ABC):
    """Base class for game skins.

    The game calls render_background() once per frame and then draws
    the paddle, every block and every ball, in that order.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the frame.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_block(self, block: 'Block', screen: pygame.Surface) -> None:
        """Render a block (block.color reflects its kind and lives).

        Args:
            block: Block to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render a ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass
