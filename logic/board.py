"""
Board primitives for terminal TicTacToe.
Cell values, the two players and the empty 3x3 board.
"""

from enum import Enum, IntEnum

import numpy as np

BOARD_SIZE = 3


class Cell(IntEnum):
    """What a board position holds."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self == Cell.EMPTY else self.name


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The cell value this player writes on the board."""
        return Cell.X if self == Player.X else Cell.O


def empty_board() -> np.ndarray:
    """A fresh 3x3 board with every cell EMPTY."""
    return np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY, dtype=np.int8)
