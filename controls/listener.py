"""
Input listener - translates key events into control signals on a
background thread.
"""

import logging
import threading
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from .base import InputSource, Key
from .control_state import ControlState

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    Key.UP: UP,
    Key.DOWN: DOWN,
    Key.LEFT: LEFT,
    Key.RIGHT: RIGHT,
}

POLL_TIMEOUT_SECONDS = 0.25


class InputListener:
    """
    Runs an input source on a daemon thread and writes the decoded keys
    into a ControlState. Never touches the board or the snake.
    """

    def __init__(self, source: InputSource, control: ControlState, poll_timeout: float = POLL_TIMEOUT_SECONDS):
        self.source = source
        self.control = control
        self.poll_timeout = poll_timeout
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Input listener already started.")
        self._thread = threading.Thread(target=self._run, name="input-listener", daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Input listener did not stop within %.2fs", timeout)

    def dispatch(self, key: Key) -> None:
        """Apply a single key event to the control state."""
        if key in KEY_DIRECTIONS:
            # Reversing into the neck is allowed; the self-collision check catches it.
            self.control.set_direction(KEY_DIRECTIONS[key])
        elif key is Key.PAUSE:
            paused = self.control.toggle_pause()
            logger.info("Game %s", "paused" if paused else "resumed")
        elif key is Key.QUIT:
            logger.info("Quit requested from keyboard")
            self.control.request_quit()

    def _run(self) -> None:
        while not self._stop.is_set() and not self.control.quit_requested:
            try:
                key = self.source.read_key(self.poll_timeout)
            except Exception as e:
                logger.error("Input source failed: %s", e)
                self.control.request_quit()
                return
            if key is not None:
                self.dispatch(key)
