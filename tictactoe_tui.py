"""
Interactive terminal TicTacToe.

Two players share one keyboard:
1. Move the cursor with the arrow keys or h/j/k/l
2. Press Enter, x or o to place the current player's mark
3. Press r to start again, q to quit

Run this script (or the `tictactoe` command) to play.
"""

import curses
import locale
import logging
import sys

from rich.traceback import install

from logic.game_state import GameState
from terminal.board_view import BoardView, TerminalIOError
from terminal.config import TerminalConfig, configure_logging
from terminal.keys import KeyCommand, map_key

logger = logging.getLogger(__name__)


class TicTacToeApp:
    """
    Main controller for the interactive game.

    Loop:
    1. Draw the current state
    2. Wait for a key press
    3. Apply it to the game state
    4. Repeat until the players quit
    """

    def __init__(self, screen, config=TerminalConfig):
        self.screen = screen
        self.config = config
        self.game_state = GameState()
        self.view = BoardView(screen, config)
        self.is_running = False

    def run(self):
        """Run until the players press q."""
        self.is_running = True
        while self.is_running:
            self.view.draw(self.game_state)
            self.handle_key(self._read_key())

    def handle_key(self, code: int):
        """Apply one key press to the game state."""
        action = map_key(code)

        if action.command == KeyCommand.MOVE_CURSOR:
            self.game_state.move_cursor(action.direction)
        elif action.command == KeyCommand.CONFIRM:
            outcome = self.game_state.select()
            logger.debug("Select at %s: %s", self.game_state.cursor, outcome.kind.value)
        elif action.command == KeyCommand.RESET:
            self.game_state.reset()
        elif action.command == KeyCommand.QUIT:
            self.is_running = False

    def _read_key(self) -> int:
        code = self.screen.getch()
        if code == -1:
            raise TerminalIOError("Could not read from the terminal")
        return code


def play(screen):
    """Set up the screen and run one session. Called by curses.wrapper."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")
    screen.keypad(True)

    app = TicTacToeApp(screen)
    app.view.setup_colors()
    app.run()


def main() -> int:
    install(show_locals=False)
    configure_logging()
    locale.setlocale(locale.LC_ALL, "")

    logger.info("Starting interactive game")
    try:
        curses.wrapper(play)
    except TerminalIOError as e:
        logger.error("Terminal failure: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass

    print("Thanks for playing tic tac toe!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
