# highscore.py
from pathlib import Path
from typing import Union
import logging

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Best score kept in a text file holding a single integer.

    A missing or garbled file counts as 0. record() writes through as soon as
    the best improves; flush() writes again at exit if a save is outstanding.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.best = 0
        self._dirty = False

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("no high score file at %s, starting from 0", self.path)
            self.best = 0
            return self.best
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            self.best = 0
            return self.best

        tokens = text.split()
        try:
            value = int(tokens[0]) if tokens else 0
        except ValueError:
            logger.warning("ignoring malformed high score file %s: %r", self.path, text[:32])
            value = 0

        self.best = max(value, 0)
        self._dirty = False
        logger.info("loaded high score %d from %s", self.best, self.path)
        return self.best

    def save(self, score: int) -> bool:
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as exc:
            logger.error("could not save high score to %s: %s", self.path, exc)
            self._dirty = True
            return False
        self._dirty = False
        logger.info("saved high score %d to %s", score, self.path)
        return True

    def record(self, score: int) -> bool:
        """Returns True if `score` is a new best."""
        if score <= self.best:
            return False
        self.best = score
        self._dirty = True
        self.save(score)
        return True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def flush(self) -> None:
        if self._dirty:
            self.save(self.best)
