# grid.py
from dataclasses import dataclass
from typing import Tuple

from .config import GRID_W, GRID_H

Position = Tuple[int, int]
Direction = Tuple[int, int]


def wrap(coord: int, axis_length: int) -> int:
    """
    Bring a coordinate that stepped one cell off an edge back onto the grid.

    Movement is always one cell per tick, so a single correction is enough:
    -1 becomes axis_length - 1 and axis_length becomes 0.
    """
    if coord < 0:
        return coord + axis_length
    if coord >= axis_length:
        return coord - axis_length
    return coord


@dataclass(frozen=True)
class Grid:
    """Toroidal width x height board; every axis wraps."""
    width: int = GRID_W
    height: int = GRID_H

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be positive, got {self.width}x{self.height}")

    @property
    def cells(self) -> int:
        return self.width * self.height

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def move(self, pos: Position, direction: Direction) -> Position:
        x, y = pos
        dx, dy = direction
        return (wrap(x + dx, self.width), wrap(y + dy, self.height))


GRID = Grid()
