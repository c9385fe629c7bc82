"""
Snake entity for the game engine.
"""

from collections import deque
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .constants import Cell, POINTS_PER_SEGMENT, SNAKE_ORIGIN, SNAKE_START_DIRECTION, STILL
from .location import Location


class TickOutcome(Enum):
    """Result of advancing the snake by one tick."""

    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    OUT_OF_BOUNDS = "wall"
    SELF_COLLISION = "self"
    BOARD_FULL = "board_full"

    @property
    def is_terminal(self) -> bool:
        return self in (TickOutcome.OUT_OF_BOUNDS, TickOutcome.SELF_COLLISION, TickOutcome.BOARD_FULL)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Locations from head at index 0 to tail at the end
        direction: the direction used on the last tick
    """

    def __init__(
        self,
        positions: Optional[List[Tuple[int, int]]] = None,
        direction: Location = SNAKE_START_DIRECTION,
    ):
        if positions is None:
            positions = [SNAKE_ORIGIN]
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(Location(*p) for p in positions)
        self.direction = Location(*direction)

    @property
    def head(self) -> Location:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Location:
        return self.positions[-1]

    @property
    def length(self) -> int:
        return len(self.positions)

    @property
    def score(self) -> int:
        return POINTS_PER_SEGMENT * (len(self.positions) - 1)

    def compute_next_head(self, direction: Location) -> Location:
        return self.head.shifted(direction)

    def is_in_bounds(self, location: Location, board: Board) -> bool:
        return board.contains(location)

    def will_eat_food(self, board: Board, direction: Location) -> bool:
        return board.food is not None and self.compute_next_head(direction) == board.food

    def will_collide_self(self, board: Board, direction: Location) -> bool:
        """
        True if the next head lands on the body.

        Reads the SNAKE cells of the board. The tail is excluded: it vacates
        its cell during the same tick, so following it is legal.
        """
        next_head = self.compute_next_head(direction)
        if not board.contains(next_head):
            return False
        return board.cell(next_head) is Cell.SNAKE and next_head != self.tail

    def clear_previous(self, board: Board) -> None:
        for location in self.positions:
            board.set_cell(location, Cell.EMPTY)

    def render(self, board: Board) -> None:
        for location in self.positions:
            board.set_cell(location, Cell.SNAKE)

    def _shift(self, next_head: Location) -> None:
        # Every segment takes its predecessor's position; the old tail drops off.
        self.positions.appendleft(next_head)
        self.positions.pop()

    def _grow(self) -> None:
        # The new tail sits on the old tail and is left behind by the next shift.
        self.positions.append(self.tail)

    def advance(self, board: Board, direction: Location) -> TickOutcome:
        """
        Move the snake one step and report what happened.

        Terminal outcomes (wall, self) leave both the snake and the board
        untouched. Eating grows the snake by one segment and respawns the
        food; filling the board ends the game with BOARD_FULL.
        """
        direction = Location(*direction)
        if direction == STILL:
            return TickOutcome.IDLE

        next_head = self.compute_next_head(direction)
        if not self.is_in_bounds(next_head, board):
            return TickOutcome.OUT_OF_BOUNDS
        if self.will_collide_self(board, direction):
            return TickOutcome.SELF_COLLISION

        self.direction = direction
        eats = self.will_eat_food(board, direction)

        self.clear_previous(board)
        if eats:
            board.remove_food()
            self._grow()
        self._shift(next_head)
        self.render(board)

        if not eats:
            return TickOutcome.MOVED
        if len(self.positions) >= board.capacity:
            return TickOutcome.BOARD_FULL
        if board.place_food(self.positions) is None:
            return TickOutcome.BOARD_FULL
        return TickOutcome.ATE

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={len(self.positions)}, direction={tuple(self.direction)}>"
