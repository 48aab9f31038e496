"""Shared fixtures for the Tank Battle test-suite."""

import random

import pytest

from tank_battle.game import Game
from tank_battle.models.tank import Tank


def make_sitting_duck(x, y, hp=60):
    """An enemy that neither moves nor fires."""
    return Tank(
        x=x, y=y, speed=0, hp=hp, max_hp=60,
        last_shoot_time=0, shoot_cooldown=10**9,
    )


class ScriptedRandom(random.Random):
    """A ``random.Random`` whose ``random()`` replays fixed values."""

    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self._values = list(values) or [0.5]
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory: ``scripted_rng(0.0, 0.5)`` -> ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def sitting_duck():
    """Factory: ``sitting_duck(x, y, hp)`` -> an inert enemy Tank."""
    return make_sitting_duck


@pytest.fixture
def quiet_game():
    """A seeded game with no walls and one parked enemy far from the player.

    The parked enemy cannot move and is out of firing range, so it keeps
    the wave from being cleared without interfering.
    """
    game = Game(rng=random.Random(1234))
    game.walls = []
    game.enemies = [make_sitting_duck(40, 40)]
    game.drain_events()
    return game
