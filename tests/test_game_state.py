"""
Tests for domain/game_state.py and the curses renderer.
"""

import os
import sys
import threading
from unittest.mock import MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import RIGHT
from domain.game_state import GameState
from domain.location import Location
from services.renderer import CursesRenderer


def make_state(**overrides):
    values = dict(
        tick=3,
        phase="running",
        size=3,
        segments=(Location(0, 1), Location(0, 0)),
        food=Location(2, 2),
        score=100,
        direction=RIGHT,
    )
    values.update(overrides)
    return GameState(**values)


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_print_board(self):
        assert make_state().print_board().split("\n") == [
            "########",
            "# o o  #",
            "#      #",
            "#     *#",
            "########",
        ]

    def test_print_board_without_food(self):
        board = make_state(food=None).print_board()
        assert "*" not in board

    def test_head(self):
        assert make_state().head == (0, 1)

    def test_snapshots_compare_by_value(self):
        assert make_state() == make_state()
        assert make_state() != make_state(tick=4)

    def test_snapshot_is_frozen(self):
        with pytest.raises(AttributeError):
            make_state().score = 5

    def test_repr(self):
        assert "score=100" in repr(make_state())


class TestCursesRenderer:
    """Tests for drawing a frame into a curses window."""

    def test_draw_replaces_whole_frame(self):
        window = MagicMock()
        CursesRenderer(window).draw(make_state())

        window.erase.assert_called_once()
        window.addstr.assert_any_call(0, 0, "Score: 100")
        window.addstr.assert_any_call(2, 0, "# o o  #")
        # score line plus five board lines
        assert window.addstr.call_count == 6
        window.refresh.assert_called_once()

    def test_draw_holds_the_screen_lock(self):
        lock = threading.Lock()
        held = []
        window = MagicMock()
        window.erase.side_effect = lambda: held.append(lock.locked())

        CursesRenderer(window, lock=lock).draw(make_state())

        assert held == [True]
        assert lock.locked() is False
