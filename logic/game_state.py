"""
Game state management for terminal TicTacToe.
Tracks the board, current player, cursor and status message.

apply_move is the one place where the move rules are checked; both the
interactive and the console games go through it.
"""

import logging
from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .board import BOARD_SIZE, Cell, Player, empty_board
from .win_checker import has_winner, is_draw

logger = logging.getLogger(__name__)

START_MESSAGE = "Let's start. X's turn"


class Direction(Enum):
    """Cursor directions as (row, col) deltas."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class MoveError(Enum):
    """Why a move was refused."""
    INVALID_FORMAT = "Invalid input"
    OUT_OF_RANGE = "Spot is off the board"
    CELL_OCCUPIED = "Spot already occupied"
    GAME_OVER = "Game is over, press r to play again"


class InvalidMoveError(ValueError):
    """Raised when a move request cannot be turned into a legal move."""

    def __init__(self, error: MoveError, detail: Optional[str] = None):
        self.error = error
        super().__init__(detail or error.value)


class OutcomeKind(Enum):
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of applying a move.

    Derived from the state after the move, never stored.
    """
    kind: OutcomeKind
    error: Optional[MoveError] = None    # Set for REJECTED
    winner: Optional[Player] = None      # Set for WIN

    @classmethod
    def rejected(cls, error: MoveError) -> "MoveOutcome":
        return cls(OutcomeKind.REJECTED, error=error)

    @property
    def is_accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.kind in (OutcomeKind.WIN, OutcomeKind.DRAW)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe round.

    Tracks:
    - The 3x3 board
    - Current player
    - Cursor position (used by the interactive UI)
    - Status message shown to the players
    - Move record and result of the round
    """

    board: np.ndarray = field(default_factory=empty_board)
    current_player: Player = Player.X
    cursor: Tuple[int, int] = (0, 0)
    message: str = START_MESSAGE

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_game_over: bool = False

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player == other.current_player
            and self.cursor == other.cursor
            and self.message == other.message
            and self.moves == other.moves
            and self.winner == other.winner
            and self.is_game_over == other.is_game_over
        )

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def cell(self, row: int, col: int) -> Cell:
        return Cell(int(self.board[row, col]))

    def apply_move(self, row: int, col: int) -> MoveOutcome:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The MoveOutcome. Rejected moves leave the board and the
            current player untouched.
        """
        if self.is_game_over:
            return self._reject(MoveError.GAME_OVER, row, col)

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return self._reject(MoveError.OUT_OF_RANGE, row, col)

        if self.board[row, col] != Cell.EMPTY:
            return self._reject(MoveError.CELL_OCCUPIED, row, col)

        player = self.current_player
        self.board[row, col] = player.mark
        self.moves.append(Move(player, row, col))
        logger.debug("%s plays (%d, %d)", player.value, row, col)

        # Win is checked before draw: a full board that completes a line is a win
        if has_winner(self.board, player):
            self.winner = player
            self.is_game_over = True
            self.message = f"{player.value} wins the match"
            logger.info("%s wins after %d moves", player.value, self.move_count)
            return MoveOutcome(OutcomeKind.WIN, winner=player)

        if is_draw(self.board):
            self.is_game_over = True
            self.message = "draw"
            logger.info("Round ends in a draw")
            return MoveOutcome(OutcomeKind.DRAW)

        self.current_player = player.opposite()
        self.message = f"{self.current_player.value}'s turn"
        return MoveOutcome(OutcomeKind.ACCEPTED)

    def select(self) -> MoveOutcome:
        """Play the cell under the cursor."""
        row, col = self.cursor
        return self.apply_move(row, col)

    def _reject(self, error: MoveError, row: int, col: int) -> MoveOutcome:
        logger.debug("Rejected (%s, %s) for %s: %s",
                     row, col, self.current_player.value, error.name)
        # The win/draw announcement stays up until reset
        if error != MoveError.GAME_OVER:
            self.message = error.value
        return MoveOutcome.rejected(error)

    def reset(self):
        """Start a new round from an empty board."""
        self.board = empty_board()
        self.current_player = Player.X
        self.cursor = (0, 0)
        self.message = START_MESSAGE
        self.moves = []
        self.winner = None
        self.is_game_over = False
        logger.debug("Board reset")

    def move_cursor(self, direction: Direction):
        """Move the cursor one cell, stopping at the board edge."""
        d_row, d_col = direction.value
        row, col = self.cursor
        self.cursor = (
            min(max(row + d_row, 0), BOARD_SIZE - 1),
            min(max(col + d_col, 0), BOARD_SIZE - 1),
        )
