"""
Logic module for terminal TicTacToe.
Handles game state and rules, shared by the interactive and console games.
"""

from .board import Cell, Player, empty_board
from .game_state import (
    GameState,
    Direction,
    Move,
    MoveOutcome,
    OutcomeKind,
    MoveError,
    InvalidMoveError,
)
from .move_validator import parse_move
from .win_checker import has_winner, is_draw, get_winning_line, WINNING_LINES
