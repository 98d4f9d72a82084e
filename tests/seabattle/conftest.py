from __future__ import annotations

import random

import pytest

from seabattle.game.app.dispatch import IntentDispatcher
from seabattle.game.core.models import Player
from seabattle.game.core.state import GameState, create_initial_state
from tests.seabattle.helpers import make_play_state, place_layout


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def placed_state() -> GameState:
    return place_layout(create_initial_state(), Player.YOU)


@pytest.fixture
def play_state() -> GameState:
    return make_play_state()


@pytest.fixture
def dispatcher(seeded_rng: random.Random) -> IntentDispatcher:
    return IntentDispatcher(seeded_rng)
