"""
Tests for control snapshots and control sources.

Tests cover:
- ControlState direction resolution
- ControlSource ABC
- KeyboardControlSource held keys and edge-triggered spawn
"""

from collections import defaultdict
from dataclasses import FrozenInstanceError

import pygame
import pytest

from yabog.input import ControlSource, ControlState, KeyboardControlSource


def held(*keys):
    """Key table with the given keys down."""
    table = defaultdict(bool)
    for key in keys:
        table[key] = True
    return lambda: table


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class MockControlSource(ControlSource):
    """Scripted control source for testing."""

    def __init__(self, states):
        self.states = list(states)
        self.events = []

    def poll(self) -> ControlState:
        return self.states.pop(0) if self.states else ControlState()

    def handle_event(self, event) -> None:
        self.events.append(event)


class TestControlState:

    @pytest.mark.parametrize("left, right, expected", [
        (True, False, -1.0),
        (False, True, 1.0),
        (True, True, 0.0),
        (False, False, 0.0),
    ])
    def test_horizontal(self, left, right, expected):
        assert ControlState(left_held=left, right_held=right).horizontal == expected

    def test_without_spawn(self):
        state = ControlState(left_held=True, spawn_pressed=True).without_spawn()
        assert state == ControlState(left_held=True)

    def test_frozen(self):
        state = ControlState()
        with pytest.raises(FrozenInstanceError):
            state.left_held = True  # type: ignore


class TestControlSourceABC:

    def test_cannot_instantiate_directly(self):
        with pytest.raises(TypeError):
            ControlSource()  # type: ignore

    def test_mock_source_implements_interface(self):
        source = MockControlSource([ControlState(right_held=True)])
        assert isinstance(source, ControlSource)
        assert source.poll().right_held
        assert source.poll() == ControlState()


class TestKeyboardControlSource:

    def test_nothing_held(self):
        source = KeyboardControlSource(key_state=held())
        assert source.poll() == ControlState()

    def test_held_keys(self):
        source = KeyboardControlSource(key_state=held(pygame.K_LEFT, pygame.K_RIGHT))
        state = source.poll()
        assert state.left_held
        assert state.right_held
        assert not state.spawn_pressed

    def test_spawn_reported_once_per_press(self):
        source = KeyboardControlSource(key_state=held(pygame.K_SPACE))
        assert not source.poll().spawn_pressed

        source.handle_event(keydown(pygame.K_SPACE))
        assert source.poll().spawn_pressed
        assert not source.poll().spawn_pressed

    def test_other_keys_do_not_spawn(self):
        source = KeyboardControlSource(key_state=held())
        source.handle_event(keydown(pygame.K_a))
        source.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
        assert not source.poll().spawn_pressed

    def test_custom_bindings(self):
        source = KeyboardControlSource(
            left=pygame.K_a, right=pygame.K_d, spawn=pygame.K_w,
            key_state=held(pygame.K_a),
        )
        source.handle_event(keydown(pygame.K_w))
        assert source.poll() == ControlState(left_held=True, spawn_pressed=True)

    def test_clear_drops_pending_spawn(self):
        source = KeyboardControlSource(key_state=held())
        source.handle_event(keydown(pygame.K_SPACE))
        source.clear()
        assert not source.poll().spawn_pressed
