"""Shared pytest fixtures for YABOG tests."""
import os
import random

# Headless pygame for render tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from yabog.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Each test starts from the environment's logging configuration."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def surface():
    """Off-screen surface the size of the default window."""
    return pygame.Surface((500, 500))
