"""
Win checker for terminal TicTacToe.
Checks if a player has won or if the board is full.

Both checks are pure functions of a board snapshot so the interactive
and console variants share exactly the same rules.
"""

from typing import Optional, List, Tuple

import numpy as np

from .board import Cell, Player


# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


def get_winning_line(
    board: np.ndarray,
    player: Player
) -> Optional[List[Tuple[int, int]]]:
    """
    Get the first line fully held by the player.

    Args:
        board: 3x3 array of Cell values.
        player: The player to check.

    Returns:
        The line as list of (row, col), or None.
    """
    mark = player.mark
    for line in WINNING_LINES:
        if all(board[row, col] == mark for row, col in line):
            return line
    return None


def has_winner(board: np.ndarray, player: Player) -> bool:
    """True if any row, column or diagonal is all the player's mark."""
    return get_winning_line(board, player) is not None


def is_draw(board: np.ndarray) -> bool:
    """
    True if no cell is empty.

    Callers check has_winner first; a full board can still hold a win.
    """
    return bool(np.all(board != Cell.EMPTY))
