"""Reading single key presses and turning them into commands."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Union

from babarules.types import Direction

_ESCAPE = "\x1b"

_KEY_MAP = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
    "r": Direction.RESET,
    _ESCAPE: Direction.PAUSE,
}


def key_to_direction(key: Union[str, bytes, int]) -> Direction:
    """Map one key to a command; unknown keys give ``Direction.NONE``."""
    if isinstance(key, int):
        key = chr(key)
    elif isinstance(key, bytes):
        key = key.decode("latin-1")
    return _KEY_MAP.get(key, Direction.NONE)


def _read_key() -> str:
    """Read one key press from the terminal without waiting for Enter."""
    try:
        import msvcrt
    except ImportError:
        msvcrt = None
    if msvcrt is not None:
        return msvcrt.getwch()

    if not sys.stdin.isatty():
        return sys.stdin.read(1)

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class InputManager:
    """Reads key presses and remembers the last command."""

    def __init__(self, read_key: Callable[[], Union[str, bytes, int]] = _read_key) -> None:
        self._read_key = read_key
        self.last_input = Direction.NONE

    def get_input(self) -> Direction:
        """Wait for a key, store its command as the last input and return it."""
        self.last_input = key_to_direction(self._read_key())
        return self.last_input