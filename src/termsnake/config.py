from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Grid (fixed policy) -----
GRID_W, GRID_H = 20, 20
START = (GRID_W // 2, 5)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Scoring & pacing -----
SCORE_PER_FOOD = 10
POINTS_PER_LEVEL = 50
LEVEL_SPEEDUP_MS = 10
MIN_TICK_MS = 50
POLL_MS = 10  # input is sampled this often inside one tick

HIGHSCORE_FILE = "highscore.txt"


# ----- Difficulty -----
class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def label(self) -> str:
        return DIFFICULTY_TABLE[self][0]

    @property
    def base_ms(self) -> int:
        return DIFFICULTY_TABLE[self][1]


# difficulty -> (label, base tick in ms)
DIFFICULTY_TABLE = {
    Difficulty.EASY: ("Easy", 800),
    Difficulty.NORMAL: ("Normal", 500),
    Difficulty.HARD: ("Hard", 300),
}


# ----- Runtime tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    difficulty: Difficulty = Difficulty.NORMAL
    highscore_path: str = HIGHSCORE_FILE
    log_file: Optional[str] = None
    log_level: str = "WARNING"
