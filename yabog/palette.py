"""
Colour palette for YABOG.

All entity colours come from here. Block colour communicates game state to
the player, so the (kind, lives) -> colour mapping lives in exactly one
function, block_color().
"""

from typing import TYPE_CHECKING

from yabog.models import Color

if TYPE_CHECKING:
    from yabog.game.entities.block import BlockKind

WHITE = Color(r=255, g=255, b=255)
RED = Color(r=230, g=41, b=55)
ORANGE = Color(r=255, g=161, b=0)
GREEN = Color(r=0, g=228, b=48)
DARKBLUE = Color(r=0, g=82, b=172)

BACKGROUND_COLOR = WHITE
PADDLE_COLOR = DARKBLUE
BALL_COLOR = DARKBLUE


def block_color(kind: 'BlockKind', lives: int) -> Color:
    """Colour for a block of the given kind with the given lives left.

    Regular blocks are red while undamaged and orange once hit. Bonus
    blocks are always green.

    Args:
        kind: Block kind
        lives: Remaining lives, at least 1

    Returns:
        Colour to draw the block with

    Raises:
        ValueError: If lives < 1 (dead blocks are never drawn)
    """
    # Local import: entities import this module for their colour property
    from yabog.game.entities.block import BlockKind

    if lives < 1:
        raise ValueError(f'Block with {lives} lives has no colour')

    if kind == BlockKind.SPAWN_BALL_ON_DEATH:
        return GREEN
    if lives >= 2:
        return RED
    return ORANGE
