import random

import pytest

from termsnake.config import Difficulty
from termsnake.game import GameRound


class ScriptedRng:
    """Stands in for random.Random; randrange() replays the given values."""

    def __init__(self, values):
        self.values = iter(values)

    def randrange(self, n):
        value = next(self.values)
        assert 0 <= value < n
        return value


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng([x, y, ...]) builds a ScriptedRng."""
    return ScriptedRng


@pytest.fixture
def game():
    round_ = GameRound(difficulty=Difficulty.NORMAL, rng=random.Random(1234))
    round_.food = (0, 19)
    return round_
