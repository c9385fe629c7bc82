"""
Renderers that draw game snapshots to the terminal.
"""

import threading
from typing import Optional

from domain.game_state import GameState


class Renderer:
    """
    Base class/interface for frame output.

    Each call must fully replace the previous frame.
    """

    def draw(self, state: GameState) -> None:
        raise NotImplementedError


class CursesRenderer(Renderer):
    """
    Draws the score line and the board into a curses window.

    The whole frame is drawn under `lock`, which the input source shares,
    so no other curses call runs between erase() and refresh().
    """

    def __init__(self, window, lock: Optional[threading.Lock] = None):
        self.window = window
        self.lock = lock or threading.Lock()

    def draw(self, state: GameState) -> None:
        with self.lock:
            self.window.erase()
            self.window.addstr(0, 0, f"Score: {state.score}")
            for offset, line in enumerate(state.print_board().split("\n"), start=1):
                self.window.addstr(offset, 0, line)
            self.window.refresh()
