"""
Console TicTacToe.

Players type "row col" (e.g. "1 2") on their turn. The board is printed
before every prompt and the game ends as soon as someone wins or the
board fills up.
"""

import logging
import sys
from typing import Optional

from rich.traceback import install

from logic.board import Player
from logic.game_state import GameState, MoveOutcome
from logic.move_validator import parse_move, InvalidMoveError
from terminal.board_view import format_board
from terminal.config import TerminalConfig, configure_logging

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Line-based game loop on stdin/stdout.
    """

    def __init__(self, config=TerminalConfig):
        self.config = config
        self.game_state = GameState()

    def take_turn(self) -> MoveOutcome:
        """
        Ask the current player until they make a move the game accepts.

        Returns:
            The accepted MoveOutcome.

        Raises:
            EOFError: if input ends.
        """
        player = self.game_state.current_player
        while True:
            print(format_board(self.game_state))
            text = input(self.config.PROMPT.format(player=player.value))

            try:
                row, col = parse_move(text)
            except InvalidMoveError as e:
                logger.debug("Bad input %r: %s", text, e)
                print(self.config.INVALID_INPUT)
                continue

            outcome = self.game_state.apply_move(row, col)
            if outcome.is_accepted:
                return outcome

            logger.debug("Move (%d, %d) refused: %s", row, col, outcome.error.name)
            print(self.config.INVALID_INPUT)

    def play(self) -> Optional[Player]:
        """
        Play one round to the end.

        Returns:
            The winner, or None for a draw.
        """
        print(self.config.WELCOME)
        while True:
            outcome = self.take_turn()

            if outcome.is_terminal:
                print(format_board(self.game_state))
                if outcome.winner is not None:
                    print(f"Player {outcome.winner.value} wins!")
                else:
                    print("It's a draw!")
                return outcome.winner


def main() -> int:
    install(show_locals=False)
    configure_logging()

    game = ConsoleGame()
    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
