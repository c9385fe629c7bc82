"""
Curses keyboard input source.
"""

import curses
import logging
import threading
from typing import Dict, Optional

from .base import InputSource, Key

logger = logging.getLogger(__name__)

CTRL_C = 3
CTRL_P = 16
ESCAPE = 27

KEY_BINDINGS: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    CTRL_P: Key.PAUSE,
    ord('p'): Key.PAUSE,
    ord('P'): Key.PAUSE,
    ord(' '): Key.PAUSE,
    CTRL_C: Key.QUIT,
    ESCAPE: Key.QUIT,
    ord('q'): Key.QUIT,
    ord('Q'): Key.QUIT,
}


class InputInitError(RuntimeError):
    """The terminal could not be put into keyboard input mode."""


class CursesInput(InputSource):
    """
    Reads key presses from a 1x1 window of its own, so that getch never
    refreshes the window the renderer draws into.

    The terminal is switched to raw mode so Ctrl-C and Ctrl-P arrive as
    key codes instead of signals. `lock` is shared with the renderer and
    guards every non-blocking curses call.
    """

    def __init__(self, lock: Optional[threading.Lock] = None):
        self.lock = lock or threading.Lock()
        try:
            with self.lock:
                curses.raw()
                curses.noecho()
                self.window = curses.newwin(1, 1, 0, 0)
                self.window.keypad(True)
                # Flush the new window once; getch only refreshes touched windows.
                self.window.refresh()
        except curses.error as e:
            raise InputInitError(f"Could not initialize keyboard input: {e}") from e

    def read_key(self, timeout: float) -> Optional[Key]:
        with self.lock:
            self.window.timeout(max(0, int(timeout * 1000)))
        code = self.window.getch()
        if code == -1:
            return None
        key = KEY_BINDINGS.get(code)
        if key is None:
            logger.debug("Ignoring unbound key code %s", code)
        return key

    def close(self) -> None:
        try:
            with self.lock:
                curses.noraw()
        except curses.error as e:
            logger.warning("Could not restore terminal input mode: %s", e)
