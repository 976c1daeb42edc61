import os

# Run pygame without a real screen or sound card.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from src.snake.config import DEFAULT_SETTINGS, RIGHT, GameStatus
from src.snake.game import Food, GameState


@pytest.fixture
def settings():
    return DEFAULT_SETTINGS


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def playing_state():
    """The canonical start position with food parked out of the way."""
    return GameState(
        snake=((10, 10), (9, 10), (8, 10)),
        food=Food(position=(0, 0), kind="apple", score=10),
        direction=RIGHT,
        pending_direction=RIGHT,
        score=0,
        status=GameStatus.PLAYING,
    )
