"""Block entity.

A block takes a fixed number of hits and is removed once its lives run
out. Its kind decides whether it is a plain block or a bonus block.
"""

from enum import Enum

from yabog.config import BLOCK_WIDTH, BLOCK_HEIGHT, BLOCK_LIVES
from yabog.models import Color, Point2D, Rectangle
from yabog.palette import block_color


class BlockKind(Enum):
    """What a block is."""

    REGULAR = "regular"
    SPAWN_BALL_ON_DEATH = "spawn_ball_on_death"   # Bonus block


class Block:
    """A block on the board."""

    def __init__(
        self,
        position: Point2D,
        kind: BlockKind = BlockKind.REGULAR,
        lives: int = BLOCK_LIVES,
        width: float = BLOCK_WIDTH,
        height: float = BLOCK_HEIGHT,
    ):
        """Initialize block.

        Args:
            position: Top-left corner
            kind: Block kind
            lives: Hits left before the block is destroyed
            width: Block width
            height: Block height
        """
        self._rect = Rectangle(x=position.x, y=position.y, width=width, height=height)
        self._kind = kind
        self._lives = lives

    @property
    def rect(self) -> Rectangle:
        return self._rect

    @property
    def position(self) -> Point2D:
        return self._rect.position

    @property
    def kind(self) -> BlockKind:
        return self._kind

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def is_bonus(self) -> bool:
        return self._kind == BlockKind.SPAWN_BALL_ON_DEATH

    @property
    def is_destroyed(self) -> bool:
        """A block with no lives left is dead and leaves the board."""
        return self._lives <= 0

    @property
    def color(self) -> Color:
        """Colour derived from kind and lives."""
        return block_color(self._kind, self._lives)

    def hit(self) -> 'Block':
        """Apply a hit to the block.

        Returns:
            New Block with one life fewer
        """
        return Block(
            self.position, self._kind, self._lives - 1,
            self._rect.width, self._rect.height,
        )

    def with_kind(self, kind: BlockKind) -> 'Block':
        """Same block, different kind."""
        return Block(
            self.position, kind, self._lives,
            self._rect.width, self._rect.height,
        )

    def __repr__(self) -> str:
        return (f"Block(x={self._rect.x:.1f}, y={self._rect.y:.1f}, "
                f"kind={self._kind.value}, lives={self._lives})")
