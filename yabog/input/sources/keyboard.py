"""
Keyboard Control Source - arrow keys move the paddle, space adds a ball.
"""
from typing import Any, Callable, Optional, Sequence

import pygame

from yabog.input.control_state import ControlState
from yabog.input.sources.base import ControlSource
from yabog.logging import get_logger

log = get_logger('keyboard')


class KeyboardControlSource(ControlSource):
    """Keyboard control source.

    Held keys are read fresh on every poll. The spawn key is latched from
    KEYDOWN events so a single press yields exactly one spawn, no matter
    how long the key stays down.
    """

    def __init__(
        self,
        left: int = pygame.K_LEFT,
        right: int = pygame.K_RIGHT,
        spawn: int = pygame.K_SPACE,
        key_state: Optional[Callable[[], Sequence[bool]]] = None,
    ):
        """Initialize the keyboard source.

        Args:
            left: Key code that moves the paddle left
            right: Key code that moves the paddle right
            spawn: Key code that spawns an extra ball
            key_state: Callable returning the held-key table
                (defaults to pygame.key.get_pressed)
        """
        self._left = left
        self._right = right
        self._spawn = spawn
        self._key_state = key_state or pygame.key.get_pressed
        self._spawn_latched = False

    def handle_event(self, event: Any) -> None:
        """Latch spawn-key presses."""
        if event.type == pygame.KEYDOWN and event.key == self._spawn:
            log.trace("Spawn key pressed")
            self._spawn_latched = True

    def poll(self) -> ControlState:
        """Snapshot held keys and consume the spawn latch."""
        keys = self._key_state()
        state = ControlState(
            left_held=bool(keys[self._left]),
            right_held=bool(keys[self._right]),
            spawn_pressed=self._spawn_latched,
        )
        self._spawn_latched = False
        return state

    def clear(self) -> None:
        """Forget any pending spawn press."""
        self._spawn_latched = False
