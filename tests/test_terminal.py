"""Tests for termsnake.terminal - key translation and text frames (no curses screen needed)."""

import curses

import pytest

from termsnake.config import UP, DOWN, LEFT, RIGHT, Difficulty
from termsnake.errors import TerminalTooSmallError
from termsnake.game import RoundSnapshot
from termsnake.terminal import (
    QUIT, CursesFrontend, MenuChoice, min_terminal_size, render_lines, status_line,
    translate_key,
)


def make_snapshot(**overrides):
    fields = dict(
        width=3, height=2,
        segments=((1, 0), (0, 0)),
        food=(2, 1),
        score=20, level=1,
        difficulty=Difficulty.NORMAL,
        game_over=False,
    )
    fields.update(overrides)
    return RoundSnapshot(**fields)


class TestTranslateKey:
    @pytest.mark.parametrize("key,expected", [
        (ord("w"), UP), (ord("W"), UP), (curses.KEY_UP, UP),
        (ord("s"), DOWN), (ord("S"), DOWN), (curses.KEY_DOWN, DOWN),
        (ord("a"), LEFT), (ord("A"), LEFT), (curses.KEY_LEFT, LEFT),
        (ord("d"), RIGHT), (ord("D"), RIGHT), (curses.KEY_RIGHT, RIGHT),
    ])
    def test_directions(self, key, expected):
        assert translate_key(key) == expected

    def test_quit(self):
        assert translate_key(ord("x")) == QUIT
        assert translate_key(ord("X")) == QUIT

    @pytest.mark.parametrize("key", [ord("q"), ord("1"), ord(" "), 27])
    def test_other_keys_ignored(self, key):
        assert translate_key(key) is None


class TestRenderLines:
    def test_frame(self):
        lines = render_lines(make_snapshot(), high_score=50)
        assert lines[:4] == [
            "#####",
            "#OO #",
            "#  F#",
            "#####",
        ]

    def test_status_line(self):
        snap = make_snapshot(score=60, level=2, difficulty=Difficulty.HARD)
        assert status_line(snap, 100) == "Score: 60  Level: 2  High Score: 100  Mode: Hard"
        assert render_lines(snap, 100)[-1] == status_line(snap, 100)

    def test_full_board_dimensions(self):
        snap = make_snapshot(width=20, height=20, segments=((10, 5),), food=(0, 0))
        lines = render_lines(snap, 0)
        assert len(lines) == 23
        assert all(len(line) == 22 for line in lines[:-1])
        assert lines[6][11] == "O"
        assert lines[1][1] == "F"


class FakeScreen:
    def __init__(self, rows, cols):
        self.size = (rows, cols)

    def getmaxyx(self):
        return self.size


class TestCursesFrontend:
    def test_min_terminal_size(self):
        assert min_terminal_size(20, 20) == (23, 57)

    def test_too_small_terminal(self):
        with pytest.raises(TerminalTooSmallError) as excinfo:
            CursesFrontend(FakeScreen(10, 40), (20, 20))
        assert excinfo.value.needed == (23, 57)
        assert excinfo.value.got == (10, 40)


class ScriptedScreen(FakeScreen):
    """curses window stand-in: getch() replays keys, text writes are recorded."""

    def __init__(self, rows, cols, keys=()):
        super().__init__(rows, cols)
        self.keys = list(keys)
        self.text = []
        self.nodelay_calls = []

    def keypad(self, flag):
        pass

    def nodelay(self, flag):
        self.nodelay_calls.append(flag)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def erase(self):
        self.text = []

    def addnstr(self, y, x, text, n, attr=0):
        self.text.append(text[:n])

    def addch(self, y, x, ch, attr=0):
        pass

    def refresh(self):
        pass


@pytest.fixture
def no_curses(monkeypatch):
    """Lets CursesFrontend be built without initscr()."""
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    monkeypatch.setattr(curses, "color_pair", lambda n: 0)


class TestMenus:
    def test_invalid_key_reprompts(self, no_curses):
        screen = ScriptedScreen(24, 80, keys=[ord("9"), ord("q"), ord("1")])
        frontend = CursesFrontend(screen, (20, 20))
        assert frontend.main_menu(Difficulty.NORMAL) is MenuChoice.START
        assert screen.keys == []
        assert screen.nodelay_calls == [False]

    def test_select_difficulty(self, no_curses):
        screen = ScriptedScreen(24, 80, keys=[ord("x"), ord("3")])
        frontend = CursesFrontend(screen, (20, 20))
        assert frontend.select_difficulty() is Difficulty.HARD

    def test_game_over_fits_a_24_row_terminal(self, no_curses):
        """The prompt and the status line stay on screen when the board does not fit."""
        screen = ScriptedScreen(24, 80, keys=[ord("5"), ord("2")])
        frontend = CursesFrontend(screen, (20, 20))
        snap = make_snapshot(width=20, height=20, segments=((10, 5),), food=(0, 0), score=30)

        assert frontend.game_over(snap, 90) is False
        assert screen.text[0] == status_line(snap, 90)
        assert "GAME OVER!" in screen.text
        assert screen.text[-1] == "Select (1 or 2): "

    def test_game_over_shows_board_when_it_fits(self, no_curses):
        screen = ScriptedScreen(40, 80, keys=[ord("1")])
        frontend = CursesFrontend(screen, (20, 20))
        snap = make_snapshot(width=20, height=20, segments=((10, 5),), food=(0, 0))

        assert frontend.game_over(snap, 0) is True
        assert screen.text[0] == "#" * 22
        assert len(screen.text) == 23 + 7


class TestPoll:
    @pytest.mark.parametrize("keys,expected", [
        ([], None),
        ([ord("w")], UP),
        ([curses.KEY_RIGHT], RIGHT),
        ([ord("X")], QUIT),
        ([ord("p")], None),
    ])
    def test_poll(self, no_curses, keys, expected):
        screen = ScriptedScreen(24, 80, keys=keys)
        frontend = CursesFrontend(screen, (20, 20))
        assert frontend.poll() == expected
        assert screen.nodelay_calls == [True]

    def test_poll_reads_one_key_at_a_time(self, no_curses):
        screen = ScriptedScreen(24, 80, keys=[ord("a"), ord("s")])
        frontend = CursesFrontend(screen, (20, 20))
        assert frontend.poll() == LEFT
        assert frontend.poll() == DOWN
        assert frontend.poll() is None

    def test_status_line_fits_minimum_width(self, no_curses):
        rows, cols = min_terminal_size(20, 20)
        snap = make_snapshot(score=3990, level=80, difficulty=Difficulty.NORMAL)
        assert len(status_line(snap, 99990)) <= cols - 1
