"""
Board entity - the square cell grid the snake moves on.
"""

import random
from typing import Iterable, List, Optional

from .constants import Cell
from .location import Location


class Board:
    """
    A square grid of cells holding at most one food cell.

    Attributes:
        size: width and height of the grid
        grid: rows of Cell values, indexed grid[row][col]
        food: location of the food cell, or None when no food is placed
    """

    def __init__(self, size: int, rng: Optional[random.Random] = None):
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        self.size = size
        self.grid: List[List[Cell]] = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]
        self.food: Optional[Location] = None
        self.rng = rng or random.Random()

    @classmethod
    def initialize(
        cls,
        size: int,
        rng: Optional[random.Random] = None,
        occupied: Iterable[Location] = (),
    ) -> "Board":
        """Create an empty board with one food cell away from `occupied`."""
        board = cls(size, rng=rng)
        board.place_food(occupied)
        return board

    @property
    def capacity(self) -> int:
        """Longest snake the board allows before the game is won."""
        return self.size * self.size - 1

    def contains(self, location: Location) -> bool:
        return 0 <= location.row < self.size and 0 <= location.col < self.size

    def cell(self, location: Location) -> Cell:
        return self.grid[location.row][location.col]

    def set_cell(self, location: Location, value: Cell) -> None:
        if not isinstance(value, Cell):
            raise TypeError(f"Board cells hold Cell values, got {value!r}.")
        self.grid[location.row][location.col] = value

    def free_cells(self, occupied: Iterable[Location] = ()) -> List[Location]:
        """Return every EMPTY cell that is not in `occupied`, row by row."""
        taken = set(occupied)
        return [
            Location(row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.grid[row][col] is Cell.EMPTY and (row, col) not in taken
        ]

    def food_count(self) -> int:
        return sum(row.count(Cell.FOOD) for row in self.grid)

    def remove_food(self) -> None:
        if self.food is not None and self.cell(self.food) is Cell.FOOD:
            self.set_cell(self.food, Cell.EMPTY)
        self.food = None

    def place_food(self, occupied: Iterable[Location] = ()) -> Optional[Location]:
        """
        Move the food to a uniformly random free cell.

        Any existing food is removed first, so exactly one food cell exists
        afterwards. Cells marked SNAKE and cells in `occupied` are never
        chosen.

        Returns:
            The new food location, or None if the board has no free cell left.
        """
        self.remove_food()
        candidates = self.free_cells(occupied)
        if not candidates:
            return None
        self.place_food_at(self.rng.choice(candidates))
        return self.food

    def place_food_at(self, location: Location) -> None:
        """Put the food at a specific cell, replacing any existing food."""
        if not self.contains(location):
            raise ValueError(f"Food out of bounds at {tuple(location)}.")
        if self.cell(location) is Cell.SNAKE:
            raise ValueError(f"Cannot place food on the snake at {tuple(location)}.")
        self.remove_food()
        self.set_cell(location, Cell.FOOD)
        self.food = Location(*location)

    def __repr__(self):
        return f"<Board size={self.size}, food={self.food}>"
