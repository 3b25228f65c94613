"""YABOG - breakout with a growing number of balls.

Features:
- Keyboard paddle, one ball to start, more on demand
- Two-hit blocks, a few of them marked as bonus blocks
- No win or lose state: the game runs until the window is closed
"""

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import pygame

from .config import screen_center
from .game.board import BoardConfig, init_blocks
from .game.entities.ball import Ball, BallConfig
from .game.entities.block import Block
from .game.entities.paddle import Paddle, PaddleConfig
from .game.physics.collision import collide_ball
from .game.skins import BreakoutSkin, FlatSkin
from .input import ControlState
from .logging import get_logger
from .models import Point2D

log = get_logger('game_mode')

ScreenSize = Callable[[], Tuple[float, float]]


@dataclass
class GameConfig:
    """Everything needed to set up a session."""

    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    # Destroying a bonus block adds a ball where the block was
    spawn_ball_on_bonus_death: bool = False


class BreakoutMode:
    """Owns the paddle, the blocks and the balls and steps them each frame.

    Per frame the host calls handle_input(), update() and render(). The
    screen size is asked for every frame, so a resizable window works.
    """

    NAME = "YABOG"
    DESCRIPTION = "Yet another breakout game."
    VERSION = "0.1.0"

    def __init__(
        self,
        screen_size: ScreenSize,
        config: Optional[GameConfig] = None,
        skin: Optional[BreakoutSkin] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """Initialize a session.

        Args:
            screen_size: Callable returning the current (width, height)
            config: Session configuration (defaults to GameConfig())
            skin: Renderer (defaults to FlatSkin)
            rng: Random source for board layout and ball angles
            seed: Seed for a new random source when rng is not given
        """
        self._screen_size = screen_size
        self._config = config or GameConfig()
        self._skin: BreakoutSkin = skin or FlatSkin()
        self._rng = rng or random.Random(seed)

        self._controls = ControlState()
        self._paddle: Optional[Paddle] = None
        self._blocks: List[Block] = []
        self._balls: List[Ball] = []

        self._init_session()

    def _init_session(self) -> None:
        """Paddle centred, full board, one ball in the middle."""
        width, height = self._screen_size()

        self._paddle = Paddle(self._config.paddle, width, height)
        self._blocks = init_blocks(width, self._rng, self._config.board)
        self._balls = []
        self.spawn_ball()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def blocks(self) -> List[Block]:
        """Blocks still on the board (copy)."""
        return list(self._blocks)

    @property
    def balls(self) -> List[Ball]:
        """All balls in play (copy)."""
        return list(self._balls)

    def spawn_ball(self, position: Optional[Point2D] = None) -> Ball:
        """Add a ball.

        Args:
            position: Top-left corner for the ball (defaults to screen centre)

        Returns:
            The new ball
        """
        if position is None:
            cx, cy = screen_center(*self._screen_size())
            position = Point2D(x=cx, y=cy)

        ball = Ball.spawn(position, self._rng, self._config.ball)
        self._balls.append(ball)
        log.debug("Spawned ball %d at %s", len(self._balls), position)
        return ball

    def handle_input(self, controls: ControlState) -> None:
        """Store this frame's controls.

        Args:
            controls: Control snapshot from the active source
        """
        self._controls = controls

    def update(self, dt: float) -> None:
        """Advance the simulation by one frame.

        Args:
            dt: Delta time in seconds
        """
        width, _ = self._screen_size()

        if self._controls.spawn_pressed:
            self.spawn_ball()
            self._controls = self._controls.without_spawn()

        self._paddle.update(dt, self._controls, width)

        self._balls = [ball.update(dt, width) for ball in self._balls]

        self._handle_collisions()
        self._remove_dead_blocks()

    def _handle_collisions(self) -> None:
        """Resolve every ball against the paddle, then against every block.

        A ball may hit several blocks in the same frame.
        """
        paddle_rect = self._paddle.rect

        for index, ball in enumerate(self._balls):
            _, ball = collide_ball(ball, paddle_rect)

            for i, block in enumerate(self._blocks):
                hit, ball = collide_ball(ball, block.rect)
                if hit:
                    self._blocks[i] = block.hit()

            self._balls[index] = ball

    def _remove_dead_blocks(self) -> None:
        """Drop blocks whose lives ran out."""
        alive: List[Block] = []
        for block in self._blocks:
            if not block.is_destroyed:
                alive.append(block)
                continue

            log.debug("Destroyed %r", block)
            if block.is_bonus and self._config.spawn_ball_on_bonus_death:
                self._spawn_from_block(block)

        self._blocks = alive

    def _spawn_from_block(self, block: Block) -> None:
        """Spawn a ball centred on a destroyed bonus block."""
        size = self._config.ball.size
        center = block.rect.center
        self.spawn_ball(Point2D(x=center.x - size * 0.5, y=center.y - size * 0.5))

    def render(self, screen: pygame.Surface) -> None:
        """Render the frame: background, paddle, blocks, balls.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render_background(screen)

        self._skin.render_paddle(self._paddle, screen)

        for block in self._blocks:
            self._skin.render_block(block, screen)

        for ball in self._balls:
            self._skin.render_ball(ball, screen)

    def reset(self) -> None:
        """Start over with a fresh board and a single ball."""
        log.info("Resetting session")
        self._controls = ControlState()
        self._init_session()
