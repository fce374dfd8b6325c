"""
Terminal module for TicTacToe.
Handles key input, screen drawing and terminal settings.
"""

from .config import TerminalConfig, configure_logging
from .keys import KeyAction, KeyCommand, map_key
from .board_view import BoardView, TerminalIOError, format_board, cell_label
