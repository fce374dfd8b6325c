"""
Terminal configuration for TicTacToe.
Key bindings, screen layout and messages for both game variants.

Logging is off by default because the game owns the terminal.
Set TICTACTOE_LOG_FILE to write a debug log, e.g.:
    TICTACTOE_LOG_FILE=ttt.log tictactoe
"""

import curses
import logging
import os


class TerminalConfig:
    """
    Configuration class for the terminal UI.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # ==================== KEY BINDINGS ====================
    # Arrow keys and vi keys are aliases for the same four directions
    KEYS_UP = (curses.KEY_UP, ord("k"))
    KEYS_DOWN = (curses.KEY_DOWN, ord("j"))
    KEYS_LEFT = (curses.KEY_LEFT, ord("h"))
    KEYS_RIGHT = (curses.KEY_RIGHT, ord("l"))
    KEYS_SELECT = (curses.KEY_ENTER, ord("\n"), ord("\r"), ord("x"), ord("o"))
    KEYS_RESET = (ord("r"),)
    KEYS_QUIT = (ord("q"),)

    # ==================== SCREEN LAYOUT ====================
    # Each cell is a bordered box, laid out on a fixed grid
    CELL_WIDTH = 10
    CELL_HEIGHT = 4

    # Status box sits under the grid
    STATUS_TOP = CELL_HEIGHT * BOARD_SIZE  # 12
    STATUS_WIDTH = 64
    STATUS_HEIGHT = 4

    # Text shown inside a cell
    CURSOR_LABEL = "__"
    EMPTY_LABEL = " "

    # (text, is_key) segments of the legend in the status box border
    LEGEND = [
        (" Move ", False),
        ("<Arrow/h/j/k/l>", True),
        (" Select ", False),
        ("<Enter>/x/o", True),
        (" Reset ", False),
        ("<R>", True),
        (" Quit ", False),
        ("<Q> ", True),
    ]

    # ==================== CONSOLE SETTINGS ====================
    PROMPT = "Player {player}, enter row and column (0-2): "
    INVALID_INPUT = "Invalid input"
    WELCOME = "Welcome to tic tac toe!"

    # ==================== LOGGING ====================
    LOG_FILE_ENV = "TICTACTOE_LOG_FILE"
    LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    """Send log records to the file named by TICTACTOE_LOG_FILE, if set."""
    log_file = os.environ.get(TerminalConfig.LOG_FILE_ENV)
    if not log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return

    level_name = os.environ.get(TerminalConfig.LOG_LEVEL_ENV, "DEBUG").upper()
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level_name, logging.DEBUG),
        format=TerminalConfig.LOG_FORMAT,
    )
