"""
Tests for domain/snake.py - movement, growth and collisions.
"""

import copy
import os
import random
import sys
from collections import deque
from unittest.mock import patch

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.board import Board
from domain.constants import Cell, UP, DOWN, LEFT, RIGHT, STILL
from domain.location import Location
from domain.snake import Snake, TickOutcome


def make_board(size, snake, food):
    board = Board(size, rng=random.Random(42))
    snake.render(board)
    board.place_food_at(Location(*food))
    return board


def snake_cells(board):
    return {
        Location(r, c)
        for r in range(board.size)
        for c in range(board.size)
        if board.grid[r][c] is Cell.SNAKE
    }


class TestSnakeBasics:
    """Tests for construction and derived values."""

    def test_default_snake(self):
        snake = Snake()
        assert list(snake.positions) == [Location(0, 0)]
        assert snake.direction == DOWN
        assert snake.length == 1
        assert snake.score == 0

    def test_positions_is_deque(self):
        assert isinstance(Snake([(5, 5)]).positions, deque)

    def test_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_score_is_hundred_per_extra_segment(self):
        assert Snake([(0, 0), (0, 1), (0, 2)]).score == 200

    def test_empty_snake_is_rejected(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_compute_next_head(self):
        snake = Snake([(2, 2)])
        assert snake.compute_next_head(UP) == (1, 2)
        assert snake.compute_next_head(DOWN) == (3, 2)
        assert snake.compute_next_head(LEFT) == (2, 1)
        assert snake.compute_next_head(RIGHT) == (2, 3)


class TestLookahead:
    """Tests for the predicates evaluated before a move."""

    def test_will_eat_food(self):
        snake = Snake([(2, 2)], RIGHT)
        board = make_board(5, snake, food=(2, 3))
        assert snake.will_eat_food(board, RIGHT)
        assert not snake.will_eat_food(board, DOWN)

    def test_will_collide_self_ignores_vacating_tail(self):
        snake = Snake([(2, 2), (2, 3), (3, 3), (3, 2)])
        board = make_board(5, snake, food=(0, 0))
        assert not snake.will_collide_self(board, DOWN)

    def test_will_collide_self_detects_body(self):
        snake = Snake([(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)])
        board = make_board(5, snake, food=(0, 0))
        assert snake.will_collide_self(board, DOWN)

    def test_will_collide_self_reads_board_cells(self):
        """The check follows the board grid; an off-board head never collides."""
        snake = Snake([(0, 2), (1, 2), (1, 3), (0, 3)])
        board = make_board(5, snake, food=(4, 4))
        assert snake.will_collide_self(board, UP) is False
        assert snake.will_collide_self(board, RIGHT) is False

        board.set_cell(Location(0, 1), Cell.SNAKE)
        assert snake.will_collide_self(board, LEFT) is True

    def test_is_in_bounds(self):
        snake = Snake([(0, 0)])
        board = Board(5)
        assert snake.is_in_bounds(Location(4, 4), board)
        assert not snake.is_in_bounds(Location(5, 0), board)
        assert not snake.is_in_bounds(Location(0, -1), board)


class TestAdvance:
    """Tests for the per-tick transition."""

    def test_plain_move_shifts_every_segment(self):
        """Head moves, each other segment takes its predecessor's old position."""
        snake = Snake([(2, 2), (2, 1), (2, 0)], RIGHT)
        board = make_board(5, snake, food=(0, 4))
        before = list(snake.positions)

        assert snake.advance(board, RIGHT) is TickOutcome.MOVED

        assert snake.length == 3
        assert list(snake.positions) == [Location(2, 3)] + before[:-1]
        assert board.cell(Location(2, 0)) is Cell.EMPTY
        assert snake_cells(board) == set(snake.positions)
        assert board.food_count() == 1

    def test_four_ticks_down_then_wall(self):
        """size=5, start (0,0) moving down, food at (4,4)."""
        snake = Snake()
        board = make_board(5, snake, food=(4, 4))

        for _ in range(4):
            assert snake.advance(board, DOWN) is TickOutcome.MOVED
        assert snake.head == (4, 0)
        assert snake.length == 1

        assert snake.advance(board, DOWN) is TickOutcome.OUT_OF_BOUNDS
        assert snake.head == (4, 0)
        assert snake.score == 0

    def test_eating_food_grows_and_respawns(self):
        """length 1 at (2,2) moving right into food at (2,3)."""
        snake = Snake([(2, 2)], RIGHT)
        board = make_board(5, snake, food=(2, 3))

        assert snake.advance(board, RIGHT) is TickOutcome.ATE

        assert snake.head == (2, 3)
        assert list(snake.positions) == [Location(2, 3), Location(2, 2)]
        assert snake.score == 100
        assert board.food is not None
        assert board.food not in (Location(2, 2), Location(2, 3))
        assert board.cell(board.food) is Cell.FOOD
        assert board.food_count() == 1
        assert snake_cells(board) == {Location(2, 3), Location(2, 2)}

    def test_growth_keeps_old_tail(self):
        snake = Snake([(1, 1), (1, 0)], RIGHT)
        board = make_board(5, snake, food=(1, 2))

        snake.advance(board, RIGHT)

        assert list(snake.positions) == [Location(1, 2), Location(1, 1), Location(1, 0)]

    @pytest.mark.parametrize("start,direction", [
        ((0, 2), UP),
        ((4, 2), DOWN),
        ((2, 0), LEFT),
        ((2, 4), RIGHT),
    ])
    def test_out_of_bounds_leaves_state_untouched(self, start, direction):
        snake = Snake([start], direction)
        board = make_board(5, snake, food=(1, 1))
        grid_before = copy.deepcopy(board.grid)

        assert snake.advance(board, direction) is TickOutcome.OUT_OF_BOUNDS

        assert list(snake.positions) == [Location(*start)]
        assert board.grid == grid_before

    def test_self_collision(self):
        snake = Snake([(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)], LEFT)
        board = make_board(5, snake, food=(0, 0))
        before = list(snake.positions)

        outcome = snake.advance(board, DOWN)

        assert outcome is TickOutcome.SELF_COLLISION
        assert outcome.is_terminal
        assert list(snake.positions) == before
        assert snake.score == 400

    def test_following_the_tail_is_legal(self):
        snake = Snake([(2, 2), (2, 3), (3, 3), (3, 2)], LEFT)
        board = make_board(5, snake, food=(0, 0))

        assert snake.advance(board, DOWN) is TickOutcome.MOVED

        assert list(snake.positions) == [Location(3, 2), Location(2, 2), Location(2, 3), Location(3, 3)]
        assert snake_cells(board) == set(snake.positions)

    def test_reversing_into_the_neck_collides(self):
        snake = Snake([(2, 2), (2, 1), (2, 0)], RIGHT)
        board = make_board(5, snake, food=(0, 0))
        assert snake.advance(board, LEFT) is TickOutcome.SELF_COLLISION

    def test_two_segment_reversal_swaps_head_and_tail(self):
        snake = Snake([(2, 2), (2, 1)], RIGHT)
        board = make_board(5, snake, food=(0, 0))

        assert snake.advance(board, LEFT) is TickOutcome.MOVED

        assert list(snake.positions) == [Location(2, 1), Location(2, 2)]

    def test_still_direction_is_idle(self):
        snake = Snake([(2, 2)], STILL)
        board = make_board(5, snake, food=(0, 0))
        grid_before = copy.deepcopy(board.grid)

        assert snake.advance(board, STILL) is TickOutcome.IDLE
        assert snake.head == (2, 2)
        assert board.grid == grid_before

    def test_filling_the_board_ends_the_game(self):
        snake = Snake([(0, 1), (0, 0)], DOWN)
        board = make_board(2, snake, food=(1, 1))

        outcome = snake.advance(board, DOWN)

        assert outcome is TickOutcome.BOARD_FULL
        assert outcome.is_terminal
        assert snake.length == board.capacity
        assert snake.score == 200

    def test_no_room_for_food_ends_the_game(self):
        snake = Snake([(2, 2)], RIGHT)
        board = make_board(5, snake, food=(2, 3))
        with patch.object(board, "place_food", return_value=None):
            assert snake.advance(board, RIGHT) is TickOutcome.BOARD_FULL

    def test_advance_records_direction(self):
        snake = Snake([(2, 2)], DOWN)
        board = make_board(5, snake, food=(0, 0))
        snake.advance(board, RIGHT)
        assert snake.direction == RIGHT
