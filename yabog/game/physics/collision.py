"""Collision resolution for YABOG.

One AABB procedure handles ball-paddle and ball-block contacts: detect
the overlap, push the moving rectangle out along the shallower axis and
point its velocity away from the obstacle on that axis.
"""

from typing import Tuple, TYPE_CHECKING

from yabog.models import Rectangle, Vector2D

if TYPE_CHECKING:
    from ..entities.ball import Ball


def resolve_collision(
    a: Rectangle,
    velocity: Vector2D,
    b: Rectangle,
) -> Tuple[bool, Rectangle, Vector2D]:
    """AABB collision with positional correction.

    When the overlap is wider than it is tall the contact is treated as
    top/bottom and resolved on Y; otherwise (equal extents included) it
    is resolved on X. Along the chosen axis A is moved out by the overlap
    depth and its velocity is set to point away from B with unchanged
    magnitude.

    Args:
        a: Moving rectangle
        velocity: Velocity of the moving rectangle
        b: Obstacle rectangle (never modified)

    Returns:
        Tuple of (collided, resolved rectangle, resolved velocity).
        Without a collision the inputs are returned unchanged.
    """
    intersection = a.intersection(b)
    if intersection is None:
        return False, a, velocity

    to_signum = (b.center - a.center).signum()

    if intersection.width > intersection.height:
        # Bounce on y
        new_a = a.translate(0.0, -to_signum.y * intersection.height)
        new_velocity = Vector2D(x=velocity.x, y=-to_signum.y * abs(velocity.y))
    else:
        # Bounce on x
        new_a = a.translate(-to_signum.x * intersection.width, 0.0)
        new_velocity = Vector2D(x=-to_signum.x * abs(velocity.x), y=velocity.y)

    return True, new_a, new_velocity


def collide_ball(ball: 'Ball', obstacle: Rectangle) -> Tuple[bool, 'Ball']:
    """Resolve a ball against a fixed obstacle.

    Args:
        ball: Ball to resolve
        obstacle: Paddle or block rectangle

    Returns:
        Tuple of (collided, updated ball)
    """
    collided, rect, velocity = resolve_collision(ball.rect, ball.velocity, obstacle)
    if not collided:
        return False, ball
    return True, ball.with_motion(rect, velocity)
