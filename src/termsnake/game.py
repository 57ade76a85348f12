# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging
import random

from .config import (
    START, RIGHT,
    SCORE_PER_FOOD, POINTS_PER_LEVEL, LEVEL_SPEEDUP_MS, MIN_TICK_MS,
    Difficulty,
)
from .errors import RoundOverError
from .grid import GRID, Grid, Direction, Position
from .snake import Snake, StepOutcome

logger = logging.getLogger(__name__)


class RoundSignal(Enum):
    CONTINUE = "continue"
    SCORED = "scored"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def spawn_food(snake: Snake, grid: Grid, rng: random.Random) -> Position:
    # Rejection sampling; only terminates while the grid has a free cell.
    while True:
        fx = rng.randrange(grid.width)
        fy = rng.randrange(grid.height)
        if not snake.contains((fx, fy)):
            return (fx, fy)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def tick_interval(difficulty: Difficulty, level: int) -> int:
    """Milliseconds between two moves; each level shaves LEVEL_SPEEDUP_MS off the base."""
    return max(MIN_TICK_MS, difficulty.base_ms - (level - 1) * LEVEL_SPEEDUP_MS)


# ---------- State ----------
@dataclass(frozen=True)
class RoundSnapshot:
    width: int
    height: int
    segments: Tuple[Position, ...]   # head at index 0
    food: Position
    score: int
    level: int
    difficulty: Difficulty
    game_over: bool


class GameRound:
    """
    One round of play: the snake, the food, score/level and the game-over flag.

    Difficulty survives setup_round() so the menu choice carries over from
    one round to the next.
    """

    def __init__(
        self,
        grid: Grid = GRID,
        difficulty: Difficulty = Difficulty.NORMAL,
        rng: Optional[random.Random] = None,
    ):
        self.grid = grid
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(grid, START)
        self.food: Position = START
        self.score = 0
        self.level = 1
        self.direction: Direction = RIGHT
        self.pending: Direction = RIGHT
        self.game_over = False
        self.place_food()

    def setup_round(self, difficulty: Optional[Difficulty] = None) -> None:
        if difficulty is not None:
            self.difficulty = difficulty
        self.snake.reset(START)
        self.score = 0
        self.level = 1
        self.direction = RIGHT
        self.pending = RIGHT
        self.game_over = False
        self.place_food()
        logger.info("round started (difficulty=%s, food=%s)", self.difficulty.label, self.food)

    def place_food(self) -> Position:
        self.food = spawn_food(self.snake, self.grid, self.rng)
        logger.debug("food placed at %s", self.food)
        return self.food

    # ---------- Input / Update ----------
    def steer(self, direction: Direction) -> bool:
        """Queue a turn for the next move; 180° reversals are refused."""
        if is_opposite(direction, self.direction):
            return False
        self.pending = direction
        return True

    def advance(self, direction: Optional[Direction] = None) -> RoundSignal:
        if self.game_over:
            raise RoundOverError("round is over; call setup_round() to play again")
        if direction is not None:
            self.steer(direction)

        # Commit direction once per tick
        self.direction = self.pending
        outcome = self.snake.step(self.direction, self.food)

        if outcome is StepOutcome.BLOCKED:
            self.game_over = True
            logger.info("game over: score=%d level=%d length=%d",
                        self.score, self.level, len(self.snake))
            return RoundSignal.GAME_OVER

        if outcome is StepOutcome.GREW:
            self.score += SCORE_PER_FOOD
            if self.score % POINTS_PER_LEVEL == 0:
                self.level += 1
                logger.info("level %d reached", self.level)
            self.place_food()
            return RoundSignal.SCORED

        return RoundSignal.CONTINUE

    def end(self, reason: str = "quit") -> None:
        """Stop the round without a collision (player quit)."""
        self.game_over = True
        logger.info("round ended: %s (score=%d)", reason, self.score)

    # ---------- Read-only views ----------
    @property
    def tick_ms(self) -> int:
        return tick_interval(self.difficulty, self.level)

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            width=self.grid.width,
            height=self.grid.height,
            segments=self.snake.segments,
            food=self.food,
            score=self.score,
            level=self.level,
            difficulty=self.difficulty,
            game_over=self.game_over,
        )
