"""
Game constants for the terminal snake game.
"""

from enum import Enum

from .location import Location

# Movement directions as (row, col) vectors
UP = Location(-1, 0)
DOWN = Location(1, 0)
LEFT = Location(0, -1)
RIGHT = Location(0, 1)
STILL = Location(0, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}


class Cell(Enum):
    """Contents of a single board cell."""

    EMPTY = "empty"
    FOOD = "food"
    SNAKE = "snake"


# Game settings
GRID_SIZE = 20
TICK_INTERVAL_MS = 100
POINTS_PER_SEGMENT = 100
SNAKE_ORIGIN = Location(0, 0)
SNAKE_START_DIRECTION = DOWN

# Process exit codes
EXIT_GAME_OVER = 0
EXIT_INIT_FAILURE = 1
EXIT_QUIT = 2
