import argparse
import curses
import logging
import random
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from config import Settings, configure_logging, load_settings
from controls.control_state import ControlState
from controls.curses_input import CursesInput, InputInitError
from controls.listener import InputListener
from domain.board import Board
from domain.constants import EXIT_GAME_OVER, EXIT_INIT_FAILURE, EXIT_QUIT, GRID_SIZE, TICK_INTERVAL_MS
from domain.game_state import GameState
from domain.snake import Snake, TickOutcome
from services.renderer import CursesRenderer, Renderer

logger = logging.getLogger(__name__)

QUIT_REASON = "quit"

REASON_MESSAGES = {
    QUIT_REASON: "Quit by player.",
    TickOutcome.OUT_OF_BOUNDS.value: "You hit the wall.",
    TickOutcome.SELF_COLLISION.value: "You ran into yourself.",
    TickOutcome.BOARD_FULL.value: "You filled the board!",
}


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class GameResult:
    reason: str
    score: int
    length: int
    ticks: int

    @property
    def exit_code(self) -> int:
        return EXIT_QUIT if self.reason == QUIT_REASON else EXIT_GAME_OVER


class SnakeGame:
    """
    Manages:
      - Board and snake
      - The RUNNING / PAUSED / TERMINAL state machine
      - Reading control signals once per tick
      - Best-effort rendering
    """
    def __init__(
        self,
        size: int = GRID_SIZE,
        tick_interval: float = TICK_INTERVAL_MS / 1000.0,
        control: Optional[ControlState] = None,
        renderer: Optional[Renderer] = None,
        rng: Optional[random.Random] = None,
        snake: Optional[Snake] = None,
        board: Optional[Board] = None,
    ):
        self.snake = snake or Snake()
        if board is None:
            board = Board.initialize(size, rng=rng, occupied=self.snake.positions)
        self.board = board
        self.snake.render(self.board)

        self.tick_interval = tick_interval
        self.control = control or ControlState(direction=self.snake.direction)
        self.renderer = renderer
        self.phase = Phase.RUNNING
        self.tick_count = 0
        self.result: Optional[GameResult] = None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick_count,
            phase=self.phase.value,
            size=self.board.size,
            segments=tuple(self.snake.positions),
            food=self.board.food,
            score=self.snake.score,
            direction=self.snake.direction,
        )

    def tick(self) -> Optional[TickOutcome]:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Quit requested -> end the game
          3) Paused -> skip the step and the render
          4) Advance the snake in the latest direction
          5) End the game on a terminal outcome, otherwise redraw
        """
        if self.phase is Phase.TERMINAL:
            return None

        direction, paused, quit_requested = self.control.snapshot()
        if quit_requested:
            self.end_game(QUIT_REASON)
            return None
        if paused:
            self.phase = Phase.PAUSED
            return None
        self.phase = Phase.RUNNING

        outcome = self.snake.advance(self.board, direction)
        self.tick_count += 1
        logger.debug("Tick %d: %s, head at %s", self.tick_count, outcome.value, tuple(self.snake.head))

        if outcome.is_terminal:
            self.end_game(outcome.value)
        else:
            self._render()
        return outcome

    def run(self) -> GameResult:
        """Tick at a fixed rate until the game reaches a terminal state."""
        self._render()
        while self.phase is not Phase.TERMINAL:
            self.tick()
            if self.phase is Phase.TERMINAL:
                break
            self.control.wait_for_quit(self.tick_interval)
        return self.result

    def end_game(self, reason: str) -> None:
        if self.phase is Phase.TERMINAL:
            return
        self.phase = Phase.TERMINAL
        self.result = GameResult(
            reason=reason,
            score=self.snake.score,
            length=self.snake.length,
            ticks=self.tick_count,
        )
        # Lets the input listener wind down.
        self.control.request_quit()
        logger.info("Game Over: %s (score %d after %d ticks)", reason, self.result.score, self.tick_count)

    def _render(self) -> None:
        if self.renderer is None:
            return
        try:
            self.renderer.draw(self.get_current_state())
        except Exception as e:
            logger.warning("Could not render tick %d: %s", self.tick_count, e)


def run_game(stdscr, settings: Settings) -> GameResult:
    """
    Wire a game to a curses screen and play it to the end.

    Raises:
        InputInitError: if keyboard input cannot be set up; no tick runs.
    """
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal does not support hiding the cursor")

    screen_lock = threading.Lock()
    source = CursesInput(lock=screen_lock)
    control = ControlState()
    game = SnakeGame(
        size=settings.grid_size,
        tick_interval=settings.tick_interval,
        control=control,
        renderer=CursesRenderer(stdscr, lock=screen_lock),
        rng=random.Random(settings.seed),
    )
    listener = InputListener(source, control)
    listener.start()
    try:
        return game.run()
    finally:
        listener.stop()
        source.close()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys move, p pauses, q quits."
    )
    parser.add_argument("--size", type=int, required=False, default=None,
                        help="Width and height of the board (default: SNAKE_GRID_SIZE or 20)")
    parser.add_argument("--tick-ms", type=int, required=False, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 100)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--log-file", type=str, required=False, default=None,
                        help="Write logs to this file")
    parser.add_argument("--log-level", type=str, required=False, default=None,
                        help="Log level, e.g. DEBUG or INFO")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    return load_settings().override(
        grid_size=args.size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_INIT_FAILURE
    configure_logging(settings)

    if not sys.stdin.isatty():
        logger.error("Standard input is not a terminal")
        print("Snake needs an interactive terminal.", file=sys.stderr)
        return EXIT_INIT_FAILURE

    try:
        result = curses.wrapper(run_game, settings)
    except (InputInitError, curses.error) as e:
        logger.error("Could not start the game: %s", e)
        print(f"Could not start the game: {e}", file=sys.stderr)
        return EXIT_INIT_FAILURE

    print("Game Over")
    print(REASON_MESSAGES.get(result.reason, result.reason))
    print(f"Score: {result.score}")
    print(f"Length: {result.length}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
