"""
Input handling for the terminal snake game.

This module contains the shared control state and the input sources and
listener that feed it from the keyboard.
"""

from .base import InputSource, Key
from .control_state import ControlState, ControlSnapshot
from .listener import InputListener, KEY_DIRECTIONS

__all__ = [
    'InputSource',
    'Key',
    'ControlState',
    'ControlSnapshot',
    'InputListener',
    'KEY_DIRECTIONS',
]
