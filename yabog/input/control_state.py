"""
Control State - the player's input for one frame.

Uses a frozen dataclass so a snapshot can be handed to the game and
kept without the source changing it underneath.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ControlState:
    """Immutable snapshot of the controls for a single frame.

    Attributes:
        left_held: Left key is currently down
        right_held: Right key is currently down
        spawn_pressed: Spawn key went down this frame (edge-triggered)
    """
    left_held: bool = False
    right_held: bool = False
    spawn_pressed: bool = False

    @property
    def horizontal(self) -> float:
        """Resolved horizontal direction: -1, 0 or +1.

        Holding both keys cancels out, same as holding neither.
        """
        if self.left_held and not self.right_held:
            return -1.0
        if self.right_held and not self.left_held:
            return 1.0
        return 0.0

    def without_spawn(self) -> 'ControlState':
        """Same held keys with the spawn edge consumed."""
        return ControlState(self.left_held, self.right_held, False)

    def __str__(self) -> str:
        return (f"ControlState(left={self.left_held}, right={self.right_held}, "
                f"spawn={self.spawn_pressed})")
