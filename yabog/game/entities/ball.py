"""Ball entity with velocity-based movement.

The ball stores a direction-like velocity (unit length when spawned) and
moves along it at a constant speed. Wall and ceiling handling is a set
of corrective snaps rather than true reflections:

- left wall: x snaps to 1, velocity untouched
- right wall: x snaps to -1, velocity untouched (the next update then
  snaps it to 1, so the ball reappears at the left wall)
- ceiling: vertical velocity forced to +1
- no floor: a ball that leaves the bottom keeps going forever
"""

import random
from dataclasses import dataclass

from yabog.config import (
    BALL_SIZE, BALL_SPEED, BALL_LEFT_WALL_SNAP_X, BALL_RIGHT_WALL_SNAP_X,
)
from yabog.models import Point2D, Rectangle, Vector2D


@dataclass
class BallConfig:
    """Ball configuration."""

    size: float = BALL_SIZE
    speed: float = BALL_SPEED   # pixels/second per unit of velocity


class Ball:
    """Ball with velocity-based movement."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        velocity: Vector2D,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Left edge X position
            y: Top edge Y position
            velocity: Direction of travel, scaled by config.speed when moving
        """
        self._config = config
        self._rect = Rectangle(x=x, y=y, width=config.size, height=config.size)
        self._velocity = velocity

    @classmethod
    def spawn(
        cls,
        position: Point2D,
        rng: random.Random,
        config: BallConfig = None,
    ) -> 'Ball':
        """Create a ball heading downward at a random angle.

        Args:
            position: Top-left corner of the new ball
            rng: Random source for the horizontal component
            config: Ball configuration (defaults to BallConfig())

        Returns:
            New Ball with unit-length velocity
        """
        config = config or BallConfig()
        velocity = Vector2D(x=rng.uniform(-1.0, 1.0), y=1.0).normalize()
        return cls(config, position.x, position.y, velocity)

    @property
    def rect(self) -> Rectangle:
        return self._rect

    @property
    def x(self) -> float:
        return self._rect.x

    @property
    def y(self) -> float:
        return self._rect.y

    @property
    def velocity(self) -> Vector2D:
        return self._velocity

    @property
    def speed(self) -> float:
        """Configured travel speed in pixels/second."""
        return self._config.speed

    @property
    def config(self) -> BallConfig:
        return self._config

    def update(self, dt: float, screen_width: float) -> 'Ball':
        """Move the ball and apply the wall and ceiling snaps.

        Args:
            dt: Delta time in seconds
            screen_width: Current screen width

        Returns:
            New Ball with updated position (and velocity, at the ceiling)
        """
        x = self._rect.x + self._velocity.x * dt * self._config.speed
        y = self._rect.y + self._velocity.y * dt * self._config.speed
        vx = self._velocity.x
        vy = self._velocity.y

        if x < 0:
            x = BALL_LEFT_WALL_SNAP_X

        if x > screen_width - self._rect.width:
            x = BALL_RIGHT_WALL_SNAP_X

        if y < 0:
            vy = 1.0

        return Ball(self._config, x, y, Vector2D(x=vx, y=vy))

    def with_motion(self, rect: Rectangle, velocity: Vector2D) -> 'Ball':
        """Ball at the given rectangle's position with the given velocity."""
        return Ball(self._config, rect.x, rect.y, velocity)

    def __repr__(self) -> str:
        return (f"Ball(x={self._rect.x:.1f}, y={self._rect.y:.1f}, "
                f"v=({self._velocity.x:.3f}, {self._velocity.y:.3f}))")
