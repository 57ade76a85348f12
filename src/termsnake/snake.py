# snake.py
from collections import deque
from enum import Enum
from typing import Deque, Iterator, Tuple
import logging

from .config import START
from .errors import SnakeTerminatedError
from .grid import GRID, Grid, Direction, Position

logger = logging.getLogger(__name__)


class StepOutcome(Enum):
    BLOCKED = "blocked"    # candidate head is already part of the body
    GREW = "grew"          # ate the food, tail kept
    ADVANCED = "advanced"  # plain move, tail dropped


class Snake:
    """
    Ordered segment sequence, head first.

    The body never overlaps itself: a move into an occupied cell is refused
    before anything is inserted, and the snake is terminated instead.
    """

    def __init__(self, grid: Grid = GRID, start: Position = START):
        self.grid = grid
        self._segments: Deque[Position] = deque()
        self.alive = True
        self.reset(start)

    def reset(self, start: Position) -> None:
        self._segments = deque([start])
        self.alive = True

    # ---------- Queries ----------
    @property
    def head(self) -> Position:
        return self._segments[0]

    @property
    def tail(self) -> Position:
        return self._segments[-1]

    @property
    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._segments)

    def contains(self, pos: Position) -> bool:
        return pos in self._segments

    def __contains__(self, pos: Position) -> bool:
        return self.contains(pos)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Position]:
        return iter(tuple(self._segments))

    # ---------- Movement ----------
    def step(self, direction: Direction, food: Position) -> StepOutcome:
        """Move one cell in `direction`, growing if the new head lands on `food`."""
        if not self.alive:
            raise SnakeTerminatedError("snake is terminated; reset() it first")

        candidate = self.grid.move(self.head, direction)

        # Self collision: leave the body untouched
        if self.contains(candidate):
            self.alive = False
            logger.debug("blocked at %s (length %d)", candidate, len(self))
            return StepOutcome.BLOCKED

        self._segments.appendleft(candidate)
        if candidate == food:
            return StepOutcome.GREW

        self._segments.pop()
        return StepOutcome.ADVANCED
