"""Input handling: per-frame control snapshots and their sources."""

from .control_state import ControlState
from .sources import ControlSource, KeyboardControlSource

__all__ = [
    'ControlState',
    'ControlSource',
    'KeyboardControlSource',
]
