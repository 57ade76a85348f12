# main.py
import argparse
import curses
import logging
import os
import random
import sys
from typing import List, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # type: ignore  # noqa: E402

from .config import POLL_MS, Config, Difficulty  # noqa: E402
from .errors import TerminalTooSmallError  # noqa: E402
from .game import GameRound  # noqa: E402
from .grid import GRID  # noqa: E402
from .highscore import HighScoreStore  # noqa: E402
from .terminal import QUIT, CursesFrontend, MenuChoice  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=Difficulty.NORMAL.value,
        choices=[d.value for d in Difficulty],
        help="starting difficulty (can be changed from the menu)",
    )
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=Config.highscore_path,
        help="file holding the high score as a single integer",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="write logs here; curses owns the screen so stderr only gets warnings",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="defaults to DEBUG with --log-file, WARNING otherwise",
    )
    args = parser.parse_args(argv)

    log_level = args.log_level or ("DEBUG" if args.log_file else "WARNING")
    return Config(
        seed=args.seed,
        difficulty=Difficulty(args.difficulty),
        highscore_path=args.highscore_file,
        log_file=args.log_file,
        log_level=log_level,
    )


def setup_logging(cfg: Config) -> None:
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if cfg.log_file:
        logging.basicConfig(filename=cfg.log_file, level=cfg.log_level, format=fmt)
    else:
        logging.basicConfig(stream=sys.stderr, level=cfg.log_level, format=fmt)


def run_round(frontend: CursesFrontend, game: GameRound, scores: HighScoreStore,
              clock: "pygame.time.Clock") -> None:
    """Poll input every POLL_MS, move once per tick interval, until game over or quit."""
    last_move = pygame.time.get_ticks()
    frontend.draw(game.snapshot(), scores.best)

    while not game.game_over:
        # 1) input
        event = frontend.poll()
        if event == QUIT:
            game.end("quit")
            break
        if event is not None:
            game.steer(event)

        # 2) update, gated on the difficulty/level tick
        now = pygame.time.get_ticks()
        if now - last_move >= game.tick_ms:
            game.advance()
            last_move = now

            # 3) render
            frontend.draw(game.snapshot(), scores.best)

        clock.tick(1000 // POLL_MS)


def play(stdscr, cfg: Config, scores: HighScoreStore) -> None:
    frontend = CursesFrontend(stdscr, (GRID.width, GRID.height))
    game = GameRound(GRID, cfg.difficulty, random.Random(cfg.seed))
    clock = pygame.time.Clock()

    while True:
        choice = frontend.main_menu(game.difficulty)
        if choice is MenuChoice.EXIT:
            return
        if choice is MenuChoice.DIFFICULTY:
            game.difficulty = frontend.select_difficulty()
            logger.info("difficulty set to %s", game.difficulty.label)
            continue

        game.setup_round()
        run_round(frontend, game, scores, clock)

        if scores.record(game.score):
            logger.info("new high score %d", game.score)
        if not frontend.game_over(game.snapshot(), scores.best):
            return


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    setup_logging(cfg)

    scores = HighScoreStore(cfg.highscore_path)
    scores.load()

    pygame.init()
    try:
        curses.wrapper(play, cfg, scores)
    except TerminalTooSmallError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        scores.flush()
        pygame.quit()

    print("\nThanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
