"""Board layout for YABOG.

Lays the blocks out in a centred grid and turns a few random ones into
bonus blocks.
"""

import random
from dataclasses import dataclass
from typing import List

from yabog.config import (
    BLOCK_WIDTH, BLOCK_HEIGHT,
    BOARD_COLUMNS, BOARD_ROWS, BOARD_PADDING, BOARD_TOP_MARGIN, BONUS_BLOCK_COUNT,
)
from yabog.logging import get_logger
from yabog.models import Point2D

from .entities.block import Block, BlockKind

log = get_logger('board')


@dataclass(frozen=True)
class BoardConfig:
    """Grid dimensions and bonus block count."""

    columns: int = BOARD_COLUMNS
    rows: int = BOARD_ROWS
    block_width: float = BLOCK_WIDTH
    block_height: float = BLOCK_HEIGHT
    padding: float = BOARD_PADDING       # Gap after each block on both axes
    top_margin: float = BOARD_TOP_MARGIN
    bonus_blocks: int = BONUS_BLOCK_COUNT

    def __post_init__(self):
        """Validate grid settings."""
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f'Board needs at least one column and row, got {self.columns}x{self.rows}'
            )
        if self.padding < 0:
            raise ValueError(f'Padding must be non-negative, got {self.padding}')
        if self.bonus_blocks < 0:
            raise ValueError(f'Bonus block count must be non-negative, got {self.bonus_blocks}')

    @property
    def cell_width(self) -> float:
        return self.block_width + self.padding

    @property
    def cell_height(self) -> float:
        return self.block_height + self.padding

    @property
    def block_count(self) -> int:
        return self.columns * self.rows


def board_origin(screen_width: float, config: BoardConfig) -> Point2D:
    """Top-left corner of the grid, centred horizontally.

    The grid may be wider than the screen, in which case the origin has
    a negative X.
    """
    return Point2D(
        x=(screen_width - config.cell_width * config.columns) * 0.5,
        y=config.top_margin,
    )


def init_blocks(
    screen_width: float,
    rng: random.Random,
    config: BoardConfig = None,
) -> List[Block]:
    """Build the starting board.

    Blocks are placed row-major: block i sits in column i % columns,
    row i // columns. Afterwards ``bonus_blocks`` indices are drawn with
    replacement and those blocks become bonus blocks, so a repeated draw
    leaves fewer bonus blocks than requested.

    Args:
        screen_width: Current screen width
        rng: Random source for the bonus picks
        config: Grid settings (defaults to BoardConfig())

    Returns:
        List of blocks in row-major order
    """
    config = config or BoardConfig()
    origin = board_origin(screen_width, config)

    blocks: List[Block] = []
    for i in range(config.block_count):
        col = i % config.columns
        row = i // config.columns
        position = origin + Point2D(x=col * config.cell_width, y=row * config.cell_height)
        blocks.append(Block(
            position,
            BlockKind.REGULAR,
            width=config.block_width,
            height=config.block_height,
        ))

    picks = []
    for _ in range(config.bonus_blocks):
        index = rng.randrange(len(blocks))
        blocks[index] = blocks[index].with_kind(BlockKind.SPAWN_BALL_ON_DEATH)
        picks.append(index)

    log.info("Board %dx%d at %s, bonus blocks %s",
             config.columns, config.rows, origin, picks)
    return blocks
