"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .location import Location


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick: number of simulation steps applied so far
        phase: name of the game loop phase ("running", "paused", "terminal")
        size: board width and height
        segments: snake locations, head first
        food: location of the food cell, if any
        score: score at this tick
        direction: direction the snake moved in last
    """

    tick: int
    phase: str
    size: int
    segments: Tuple[Location, ...]
    food: Optional[Location]
    score: int
    direction: Location

    @property
    def head(self) -> Location:
        return self.segments[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        '#' = wall
        ' o' = snake segment
        ' *' = food
        Row 0 is printed first.
        """
        board = [['  ' for _ in range(self.size)] for _ in range(self.size)]

        if self.food is not None:
            board[self.food.row][self.food.col] = ' *'

        for row, col in self.segments:
            board[row][col] = ' o'

        border = '##' * (self.size + 1)
        result = [border]
        for row in board:
            result.append('#' + ''.join(row) + '#')
        result.append(border)

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, phase={self.phase}, head={tuple(self.head)}, "
            f"food={self.food}, score={self.score}>"
        )
