"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (curses, threads, process exit).
"""

from .constants import UP, DOWN, LEFT, RIGHT, STILL, VALID_MOVES, Cell, GRID_SIZE
from .location import Location
from .board import Board
from .snake import Snake, TickOutcome
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STILL', 'VALID_MOVES', 'Cell', 'GRID_SIZE',
    'Location',
    'Board',
    'Snake',
    'TickOutcome',
    'GameState',
]
