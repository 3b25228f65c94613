"""Paddle entity driven by the left/right keys.

The paddle slides horizontally at a constant speed while a direction key
is held and stops as soon as it is released.
"""

from dataclasses import dataclass

from yabog.config import (
    PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_BOTTOM_OFFSET,
)
from yabog.input.control_state import ControlState
from yabog.logging import get_logger
from yabog.models import Rectangle

log = get_logger('paddle')


@dataclass
class PaddleConfig:
    """Paddle configuration."""

    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    speed: float = PADDLE_SPEED          # pixels/second
    bottom_offset: float = PADDLE_BOTTOM_OFFSET


class Paddle:
    """Keyboard-driven paddle, kept inside the screen horizontally."""

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle centred near the bottom of the screen.

        Args:
            config: Paddle configuration
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
        """
        self._config = config
        self._x = 0.0
        self._y = 0.0
        self.reset(screen_width, screen_height)

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top edge Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def speed(self) -> float:
        return self._config.speed

    @property
    def rect(self) -> Rectangle:
        """Get paddle bounding rectangle."""
        return Rectangle(
            x=self._x,
            y=self._y,
            width=self._config.width,
            height=self._config.height,
        )

    def update(self, dt: float, controls: ControlState, screen_width: float) -> None:
        """Move paddle according to the held keys and clamp it to the screen.

        Args:
            dt: Delta time in seconds
            controls: This frame's controls
            screen_width: Current screen width
        """
        self._x += controls.horizontal * dt * self._config.speed

        if self._x < 0:
            log.debug("Colliding with left")
            self._x = 0.0

        if self._x > screen_width - self._config.width:
            log.debug("Colliding with right")
            self._x = screen_width - self._config.width

    def reset(self, screen_width: float, screen_height: float) -> None:
        """Re-centre the paddle for a screen of the given size."""
        self._x = screen_width / 2 - self._config.width * 0.5
        self._y = screen_height - self._config.bottom_offset
