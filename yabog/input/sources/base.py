"""
Abstract base class for control sources.

Lets the game run from the keyboard, from a scripted sequence in tests,
or from anything else that can answer "which keys are down".
"""

from abc import ABC, abstractmethod
from typing import Any

from yabog.input.control_state import ControlState


class ControlSource(ABC):
    """Abstract base class for control sources.

    Subclasses must implement:
        - poll(): Return the controls for the current frame
        - handle_event(event): Observe one windowing event

    Examples:
        >>> class IdleSource(ControlSource):
        ...     def poll(self) -> ControlState:
        ...         return ControlState()
        ...     def handle_event(self, event) -> None:
        ...         pass
    """

    @abstractmethod
    def poll(self) -> ControlState:
        """Get the control snapshot for this frame.

        Edge-triggered inputs reported here must not be reported again
        by the next poll.

        Returns:
            ControlState for the current frame
        """
        pass

    @abstractmethod
    def handle_event(self, event: Any) -> None:
        """Observe a single windowing event.

        Args:
            event: Event from the presentation layer (pygame event)
        """
        pass
