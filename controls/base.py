"""
Base input source interface for the input listener.
"""

from enum import Enum
from typing import Optional


class Key(Enum):
    """Logical key events understood by the game."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    QUIT = "quit"


class InputSource:
    """
    Base class/interface for keyboard input.

    Each source delivers one key event at a time, blocking until one
    arrives or the timeout elapses.
    """

    def read_key(self, timeout: float) -> Optional[Key]:
        """
        Wait for the next key event.

        Args:
            timeout: Maximum number of seconds to block

        Returns:
            The decoded Key, or None if nothing relevant was pressed in time
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any resources held by the source."""
