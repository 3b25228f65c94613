"""Configuration for YABOG.

Contains window settings, entity sizes and speeds, and the board layout.
"""

from typing import Tuple

# Window (default, can be overridden from the command line)
WINDOW_TITLE: str = "YABOG"
SCREEN_WIDTH: int = 500
SCREEN_HEIGHT: int = 500
FPS: int = 60

# Ball
BALL_SIZE: float = 50.0
BALL_SPEED: float = 400.0  # pixels/second along a unit velocity

# Paddle
PADDLE_WIDTH: float = 150.0
PADDLE_HEIGHT: float = 40.0
PADDLE_SPEED: float = 700.0  # pixels/second
PADDLE_BOTTOM_OFFSET: float = 100.0  # distance from top edge to screen bottom

# Blocks
BLOCK_WIDTH: float = 100.0
BLOCK_HEIGHT: float = 40.0
BLOCK_LIVES: int = 2

# Board layout
BOARD_COLUMNS: int = 6
BOARD_ROWS: int = 6
BOARD_PADDING: float = 1.0
BOARD_TOP_MARGIN: float = 50.0
BONUS_BLOCK_COUNT: int = 3

# Ball-side wall snap targets
BALL_LEFT_WALL_SNAP_X: float = 1.0
BALL_RIGHT_WALL_SNAP_X: float = -1.0


def screen_center(width: float, height: float) -> Tuple[float, float]:
    """Center point of a screen of the given size."""
    return width * 0.5, height * 0.5
