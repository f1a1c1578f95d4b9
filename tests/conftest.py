"""
Shared fixtures for the test suite.

SDL is pointed at its dummy video and audio drivers before pygame is
imported, so every test runs headless and without a sound card.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((320, 200))
    yield screen
    pygame.display.quit()
