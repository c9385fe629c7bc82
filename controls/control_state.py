"""
Control signals shared between the input listener thread and the game loop.
"""

import threading
from typing import NamedTuple

from domain.constants import SNAKE_START_DIRECTION
from domain.location import Location


class ControlSnapshot(NamedTuple):
    direction: Location
    paused: bool
    quit_requested: bool


class ControlState:
    """
    Direction, pause and quit signals guarded by a single lock.

    The input listener writes direction and pause; either side may request
    quit. The game loop reads everything once per tick through snapshot().
    """

    def __init__(self, direction: Location = SNAKE_START_DIRECTION):
        self._lock = threading.Lock()
        self._direction = Location(*direction)
        self._paused = False
        self._quit = threading.Event()

    @property
    def direction(self) -> Location:
        with self._lock:
            return self._direction

    def set_direction(self, direction: Location) -> None:
        direction = Location(*direction)
        with self._lock:
            self._direction = direction

    @property
    def paused(self) -> bool:
        with self._lock:
            return self._paused

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return the new value."""
        with self._lock:
            self._paused = not self._paused
            return self._paused

    @property
    def quit_requested(self) -> bool:
        return self._quit.is_set()

    def request_quit(self) -> None:
        self._quit.set()

    def wait_for_quit(self, timeout: float) -> bool:
        """Sleep up to `timeout` seconds, returning early if quit is requested."""
        return self._quit.wait(timeout)

    def snapshot(self) -> ControlSnapshot:
        with self._lock:
            return ControlSnapshot(self._direction, self._paused, self._quit.is_set())

    def __repr__(self):
        direction, paused, quit_requested = self.snapshot()
        return f"<ControlState direction={tuple(direction)}, paused={paused}, quit={quit_requested}>"
