"""Terminal Snake on a wrapped 20x20 grid."""

from .config import Difficulty
from .game import GameRound, RoundSignal, RoundSnapshot, tick_interval
from .grid import Grid, wrap
from .snake import Snake, StepOutcome

__all__ = [
    "Difficulty",
    "GameRound",
    "Grid",
    "RoundSignal",
    "RoundSnapshot",
    "Snake",
    "StepOutcome",
    "tick_interval",
    "wrap",
]
