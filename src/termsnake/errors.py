"""Exceptions raised by termsnake."""


class SnakeError(Exception):
    """Base class for every termsnake error."""


class SnakeTerminatedError(SnakeError, RuntimeError):
    """step() was called on a snake that already collided with itself."""


class RoundOverError(SnakeError, RuntimeError):
    """advance() was called after the round reached game over."""


class TerminalTooSmallError(SnakeError):
    def __init__(self, needed, got):
        self.needed = needed
        self.got = got
        super().__init__(
            f"terminal too small: need at least {needed[0]}x{needed[1]}, got {got[0]}x{got[1]}"
        )
