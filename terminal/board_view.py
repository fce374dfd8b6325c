"""
Board rendering for TicTacToe.

BoardView draws the interactive screen with curses:
- 3x3 grid of bordered cells, cursor shown on empty cells
- Winning line highlighted once a round is won
- Status box with the current message and a key legend

format_board() gives the plain text grid used by the console game.
"""

import curses
from typing import Iterable, Optional, Set, Tuple

from logic.board import Cell
from logic.game_state import GameState
from logic.win_checker import get_winning_line
from .config import TerminalConfig


class TerminalIOError(RuntimeError):
    """The terminal could not be read from or drawn on."""


def cell_label(game_state: GameState, row: int, col: int,
               config=TerminalConfig) -> str:
    """Text shown inside one cell of the interactive grid."""
    cell = game_state.cell(row, col)
    if cell != Cell.EMPTY:
        return f" {cell.symbol} "
    if (row, col) == game_state.cursor:
        return config.CURSOR_LABEL
    return config.EMPTY_LABEL


def format_board(game_state: GameState) -> str:
    """
    Get a text representation of the board grid.

    Args:
        game_state: The game state.

    Returns:
        Bordered grid with row and column numbers.
    """
    size = game_state.board.shape[0]
    separator = "  +" + "---+" * size

    lines = ["    " + "   ".join(str(col) for col in range(size))]
    lines.append(separator)
    for row in range(size):
        row_str = "|".join(f" {game_state.cell(row, col).symbol} " for col in range(size))
        lines.append(f"{row} |{row_str}|")
        lines.append(separator)
    return "\n".join(lines)


class BoardView:
    """
    Draws a GameState on a curses window.
    """

    TOO_SMALL = "Terminal too small, please enlarge it"

    def __init__(self, screen, config=TerminalConfig):
        """
        Args:
            screen: The curses window to draw on (usually stdscr).
            config: Layout and legend settings.
        """
        self.screen = screen
        self.config = config

        # Plain attributes until setup_colors() runs inside curses
        self.cell_attr = curses.A_NORMAL
        self.key_attr = curses.A_BOLD
        self.win_attr = curses.A_REVERSE

    @property
    def min_size(self) -> Tuple[int, int]:
        """(rows, cols) the full screen needs."""
        rows = self.config.STATUS_TOP + self.config.STATUS_HEIGHT + 1
        cols = max(self.config.STATUS_WIDTH,
                   self.config.CELL_WIDTH * self.config.BOARD_SIZE)
        return rows, cols

    def setup_colors(self):
        """Pick colors once curses is initialised."""
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_CYAN, -1)
        curses.init_pair(2, curses.COLOR_BLUE, -1)
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_CYAN)
        self.cell_attr = curses.color_pair(1) | curses.A_BOLD
        self.key_attr = curses.color_pair(2) | curses.A_BOLD
        self.win_attr = curses.color_pair(3) | curses.A_BOLD

    def draw(self, game_state: GameState):
        """
        Redraw the whole screen.

        Raises:
            TerminalIOError: if curses fails to write.
        """
        try:
            self.screen.erase()
            rows, cols = self.screen.getmaxyx()
            min_rows, min_cols = self.min_size
            if rows < min_rows or cols < min_cols:
                self.screen.addstr(0, 0, self.TOO_SMALL[:max(cols - 1, 0)])
            else:
                self._draw_grid(game_state)
                self._draw_status(game_state.message)
            self.screen.refresh()
        except curses.error as e:
            raise TerminalIOError(f"Could not draw the board: {e}") from e

    def _draw_grid(self, game_state: GameState):
        winning: Set[Tuple[int, int]] = set()
        if game_state.winner is not None:
            winning = set(get_winning_line(game_state.board, game_state.winner) or [])

        width, height = self.config.CELL_WIDTH, self.config.CELL_HEIGHT
        for row in range(self.config.BOARD_SIZE):
            for col in range(self.config.BOARD_SIZE):
                attr = self.win_attr if (row, col) in winning else self.cell_attr
                self._draw_box(row * height, col * width, height, width)
                self._draw_centered(row * height + 1, col * width, width,
                                    cell_label(game_state, row, col, self.config),
                                    attr)

    def _draw_status(self, message: str):
        top = self.config.STATUS_TOP
        width, height = self.config.STATUS_WIDTH, self.config.STATUS_HEIGHT
        self._draw_box(top, 0, height, width)
        self._draw_centered(top + 1, 0, width, message, self.cell_attr)
        self._draw_legend(top + height - 1, width, self.config.LEGEND)

    def _draw_legend(self, y: int, width: int, segments: Iterable[Tuple[str, bool]]):
        segments = list(segments)
        length = sum(len(text) for text, _ in segments)
        x = max((width - length) // 2, 1)
        for text, is_key in segments:
            self.screen.addstr(y, x, text, self.key_attr if is_key else curses.A_NORMAL)
            x += len(text)

    def _draw_box(self, y: int, x: int, height: int, width: int):
        inner = width - 2
        self.screen.addstr(y, x, "┌" + "─" * inner + "┐")
        for offset in range(1, height - 1):
            self.screen.addstr(y + offset, x, "│")
            self.screen.addstr(y + offset, x + width - 1, "│")
        self.screen.addstr(y + height - 1, x, "└" + "─" * inner + "┘")

    def _draw_centered(self, y: int, x: int, width: int, text: str,
                       attr: Optional[int] = None):
        inner = width - 2
        text = text[:inner]
        start = x + 1 + (inner - len(text)) // 2
        self.screen.addstr(y, start, text, curses.A_NORMAL if attr is None else attr)
