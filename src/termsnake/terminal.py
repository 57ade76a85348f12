# terminal.py
"""
curses front end: text frame rendering, key translation and the menus.

Nothing here holds game state; it reads RoundSnapshot values and hands
direction/quit events back to the caller.
"""
from enum import Enum
from typing import List, Optional, Tuple, Union
import curses
import logging

from .config import UP, DOWN, LEFT, RIGHT, Difficulty
from .errors import TerminalTooSmallError
from .game import RoundSnapshot
from .grid import Direction

logger = logging.getLogger(__name__)

QUIT = "quit"
Event = Union[Direction, str, None]

WALL, FOOD, BODY, EMPTY = "#", "F", "O", " "

# Status line with a 4-digit score, 3-digit level and 5-digit best, plus the
# last screen column, which curses cannot write to at the bottom-right.
STATUS_COLS = len("Score: 9990  Level: 400  High Score: 99990  Mode: Normal") + 1

KEY_MAP = {
    ord("w"): UP, ord("W"): UP, curses.KEY_UP: UP,
    ord("s"): DOWN, ord("S"): DOWN, curses.KEY_DOWN: DOWN,
    ord("a"): LEFT, ord("A"): LEFT, curses.KEY_LEFT: LEFT,
    ord("d"): RIGHT, ord("D"): RIGHT, curses.KEY_RIGHT: RIGHT,
}
QUIT_KEYS = {ord("x"), ord("X")}

# menu key -> difficulty
DIFFICULTY_KEYS = {
    ord("1"): Difficulty.EASY,
    ord("2"): Difficulty.NORMAL,
    ord("3"): Difficulty.HARD,
}


class MenuChoice(Enum):
    START = "start"
    DIFFICULTY = "difficulty"
    EXIT = "exit"


MENU_KEYS = {
    ord("1"): MenuChoice.START,
    ord("2"): MenuChoice.DIFFICULTY,
    ord("3"): MenuChoice.EXIT,
}


# ---------- Pure helpers ----------
def translate_key(key: int) -> Event:
    """Map a curses key code to a direction, QUIT, or None for anything else."""
    if key in QUIT_KEYS:
        return QUIT
    return KEY_MAP.get(key)


def status_line(snapshot: RoundSnapshot, high_score: int) -> str:
    return (
        f"Score: {snapshot.score}  Level: {snapshot.level}  "
        f"High Score: {high_score}  Mode: {snapshot.difficulty.label}"
    )


def render_lines(snapshot: RoundSnapshot, high_score: int) -> List[str]:
    """Full text frame: bordered board followed by the status line."""
    body = set(snapshot.segments)
    border = WALL * (snapshot.width + 2)
    lines = [border]
    for y in range(snapshot.height):
        row = []
        for x in range(snapshot.width):
            if (x, y) == snapshot.food:
                row.append(FOOD)
            elif (x, y) in body:
                row.append(BODY)
            else:
                row.append(EMPTY)
        lines.append(WALL + "".join(row) + WALL)
    lines.append(border)
    lines.append(status_line(snapshot, high_score))
    return lines


def min_terminal_size(width: int, height: int) -> Tuple[int, int]:
    """(rows, cols) needed for the board, its border and the status line."""
    return height + 3, max(width + 2, STATUS_COLS)


# ---------- curses ----------
class CursesFrontend:
    def __init__(self, stdscr, board: Tuple[int, int]):
        self.stdscr = stdscr
        width, height = board
        needed = min_terminal_size(width, height)
        rows, cols = stdscr.getmaxyx()
        if rows < needed[0] or cols < needed[1]:
            raise TerminalTooSmallError(needed, (rows, cols))

        curses.curs_set(0)
        stdscr.keypad(True)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_GREEN, -1)   # Snake
            curses.init_pair(2, curses.COLOR_RED, -1)     # Food
            curses.init_pair(3, curses.COLOR_YELLOW, -1)  # Border/Text
        self.attrs = {
            BODY: curses.color_pair(1) | curses.A_BOLD,
            FOOD: curses.color_pair(2) | curses.A_BOLD,
            WALL: curses.color_pair(3),
        }

    # --- play ---
    def poll(self) -> Event:
        """Non-blocking: at most one event, None when no key is waiting."""
        self.stdscr.nodelay(True)
        key = self.stdscr.getch()
        if key == -1:
            return None
        return translate_key(key)

    def draw(self, snapshot: RoundSnapshot, high_score: int) -> None:
        self.stdscr.erase()
        lines = render_lines(snapshot, high_score)
        cols = self.stdscr.getmaxyx()[1]
        for y, line in enumerate(lines[:-1]):
            for x, ch in enumerate(line):
                self.stdscr.addch(y, x, ord(ch), self.attrs.get(ch, 0))
        self.stdscr.addnstr(len(lines) - 1, 0, lines[-1], cols - 1, curses.A_BOLD)
        self.stdscr.refresh()

    # --- menus ---
    def _screen(self, lines: List[str]) -> None:
        self.stdscr.erase()
        rows, cols = self.stdscr.getmaxyx()
        # Keep the prompt visible on short terminals
        for y, line in enumerate(lines[-(rows - 1):]):
            self.stdscr.addnstr(y, 0, line, cols - 1)
        self.stdscr.refresh()

    def _choose(self, lines: List[str], keys: dict):
        # Invalid keys are ignored and the prompt stays up
        self._screen(lines)
        self.stdscr.nodelay(False)
        while True:
            key = self.stdscr.getch()
            if key in keys:
                return keys[key]
            logger.debug("ignored menu key %r", key)

    def main_menu(self, difficulty: Difficulty) -> MenuChoice:
        return self._choose([
            "===== SNAKE GAME =====",
            f"1. Start Game (Current Mode: {difficulty.label})",
            "2. Change Difficulty",
            "3. Exit",
            "",
            "Controls: WASD or Arrow Keys",
            "Quit: X",
            "Select (1, 2, or 3): ",
        ], MENU_KEYS)

    def select_difficulty(self) -> Difficulty:
        return self._choose([
            "===== SELECT DIFFICULTY =====",
            f"1. Easy (Very Slow - {Difficulty.EASY.base_ms}ms)",
            f"2. Normal (Slow - {Difficulty.NORMAL.base_ms}ms)",
            f"3. Hard (Medium - {Difficulty.HARD.base_ms}ms)",
            "Select (1, 2, or 3): ",
        ], DIFFICULTY_KEYS)

    def game_over(self, snapshot: RoundSnapshot, high_score: int) -> bool:
        """Show the final board with the result; True means play again."""
        board = render_lines(snapshot, high_score)
        result = [
            "",
            "GAME OVER!",
            f"Your Score: {snapshot.score}",
            f"High Score: {high_score}",
            "1. Play Again",
            "2. Exit",
            "Select (1 or 2): ",
        ]
        rows = self.stdscr.getmaxyx()[0]
        if len(board) + len(result) > rows - 1:
            # Not enough rows for the final board; keep only its status line
            board = board[-1:]
        return self._choose(board + result, {ord("1"): True, ord("2"): False})
