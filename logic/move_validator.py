"""
Move validator for terminal TicTacToe.
Turns typed console text into board coordinates.

Only the format is checked here. Range, occupancy and game-over are
decided by GameState.apply_move.
"""

from typing import Tuple

from .game_state import MoveError, InvalidMoveError


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a typed move such as "1 2".

    Exactly two non-negative ASCII integers separated by whitespace.

    Raises:
        InvalidMoveError: with INVALID_FORMAT if the text is not two numbers.
    """
    tokens = text.split()
    if len(tokens) != 2:
        raise InvalidMoveError(
            MoveError.INVALID_FORMAT,
            f"Expected 2 numbers, got {len(tokens)}"
        )

    if not all(token.isascii() and token.isdigit() for token in tokens):
        raise InvalidMoveError(
            MoveError.INVALID_FORMAT,
            f"Not a pair of non-negative numbers: {text.strip()!r}"
        )

    return int(tokens[0]), int(tokens[1])
