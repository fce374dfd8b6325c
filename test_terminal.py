"""
Tests for the terminal module and the interactive game loop.
Curses drawing is checked against an in-memory fake screen.
"""

import curses

import pytest

from logic import Direction, GameState, Player
import tictactoe_tui
from tictactoe_tui import TicTacToeApp
from terminal import (
    BoardView,
    KeyCommand,
    TerminalConfig,
    TerminalIOError,
    cell_label,
    format_board,
    map_key,
)


class FakeScreen:
    """Minimal stand-in for a curses window."""

    def __init__(self, keys=(), rows=24, cols=80):
        self.keys = list(keys)
        self.rows = rows
        self.cols = cols
        self.erase()

    def erase(self):
        self.grid = [[" "] * self.cols for _ in range(self.rows)]
        self.attrs = [[0] * self.cols for _ in range(self.rows)]

    def getmaxyx(self):
        return self.rows, self.cols

    def addstr(self, y, x, text, attr=0):
        if y >= self.rows or x + len(text) > self.cols:
            raise curses.error("addwstr() returned ERR")
        for offset, ch in enumerate(text):
            self.grid[y][x + offset] = ch
            self.attrs[y][x + offset] = attr

    def refresh(self):
        pass

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def line(self, y):
        return "".join(self.grid[y])


def keys(text):
    return [ord(ch) for ch in text]


class TestKeys:

    @pytest.mark.parametrize("codes, direction", [
        ((curses.KEY_UP, ord("k")), Direction.UP),
        ((curses.KEY_DOWN, ord("j")), Direction.DOWN),
        ((curses.KEY_LEFT, ord("h")), Direction.LEFT),
        ((curses.KEY_RIGHT, ord("l")), Direction.RIGHT),
    ])
    def test_direction_aliases(self, codes, direction):
        for code in codes:
            action = map_key(code)
            assert action.command == KeyCommand.MOVE_CURSOR
            assert action.direction == direction

    @pytest.mark.parametrize("code", [ord("\n"), ord("\r"), curses.KEY_ENTER, ord("x"), ord("o")])
    def test_confirm_aliases(self, code):
        assert map_key(code).command == KeyCommand.CONFIRM

    def test_reset_and_quit(self):
        assert map_key(ord("r")).command == KeyCommand.RESET
        assert map_key(ord("q")).command == KeyCommand.QUIT

    @pytest.mark.parametrize("code", [ord("z"), ord("Q"), curses.KEY_RESIZE, 0])
    def test_other_keys_ignored(self, code):
        assert map_key(code).command == KeyCommand.IGNORED


class TestBoardView:

    def test_cell_labels(self):
        game = GameState()
        assert cell_label(game, 0, 0) == TerminalConfig.CURSOR_LABEL
        assert cell_label(game, 1, 1) == TerminalConfig.EMPTY_LABEL

        game.apply_move(0, 0)
        assert cell_label(game, 0, 0) == " X "

    def test_draw_grid_and_status(self):
        screen = FakeScreen()
        game = GameState()
        game.apply_move(0, 2)

        BoardView(screen).draw(game)

        assert screen.line(0).startswith("┌" + "─" * 8 + "┐")
        assert screen.line(1)[4:6] == "__"
        assert screen.line(1)[24] == "X"
        assert "O's turn" in screen.line(TerminalConfig.STATUS_TOP + 1)
        legend = screen.line(TerminalConfig.STATUS_TOP + TerminalConfig.STATUS_HEIGHT - 1)
        assert "<Arrow/h/j/k/l>" in legend
        assert "Quit" in legend

    def test_winning_line_highlighted(self):
        screen = FakeScreen()
        game = GameState()
        for row, col in [(0, 0), (1, 0), (1, 1), (2, 0), (2, 2)]:
            game.apply_move(row, col)
        assert game.winner == Player.X

        view = BoardView(screen)
        view.draw(game)

        # Mark sits in the middle of the label row of each cell
        def mark_attr(row, col):
            y = row * TerminalConfig.CELL_HEIGHT + 1
            x = col * TerminalConfig.CELL_WIDTH + 4
            assert screen.line(y)[x] in ("X", "O")
            return screen.attrs[y][x]

        for row, col in [(0, 0), (1, 1), (2, 2)]:
            assert mark_attr(row, col) == view.win_attr
        for row, col in [(1, 0), (2, 0)]:
            assert mark_attr(row, col) == view.cell_attr

    def test_too_small_terminal(self):
        screen = FakeScreen(rows=10, cols=30)
        BoardView(screen).draw(GameState())
        assert screen.line(0).startswith("Terminal too small")

    def test_draw_failure_is_terminal_error(self):
        class BrokenScreen(FakeScreen):
            def addstr(self, y, x, text, attr=0):
                raise curses.error("boom")

        with pytest.raises(TerminalIOError):
            BoardView(BrokenScreen()).draw(GameState())

    def test_format_board(self):
        game = GameState()
        game.apply_move(0, 0)
        game.apply_move(2, 1)
        lines = format_board(game).splitlines()
        assert lines[0] == "    0   1   2"
        assert lines[1] == "  +---+---+---+"
        assert lines[2] == "0 | X |   |   |"
        assert lines[6] == "2 |   | O |   |"
        assert len(lines) == 8


class TestTicTacToeApp:

    def test_navigate_select_and_quit(self):
        screen = FakeScreen(keys=keys("ll\nq"))
        app = TicTacToeApp(screen)
        app.run()

        assert not app.is_running
        assert app.game_state.cursor == (0, 2)
        assert app.game_state.moves[0].row == 0 and app.game_state.moves[0].col == 2
        assert app.game_state.current_player == Player.O

    def test_occupied_cell_shows_message(self):
        app = TicTacToeApp(FakeScreen())
        for code in keys("xo"):
            app.handle_key(code)
        assert app.game_state.move_count == 1
        assert app.game_state.current_player == Player.O
        assert app.game_state.message == "Spot already occupied"

    def test_win_then_reset(self):
        app = TicTacToeApp(FakeScreen())
        # X: top row, O: middle row
        for code in keys("x" "j" "x" "kl" "x" "j" "x" "kl" "x"):
            app.handle_key(code)
        assert app.game_state.winner == Player.X
        assert app.game_state.message == "X wins the match"

        app.handle_key(ord("r"))
        assert app.game_state == GameState()

    def test_ignored_key_changes_nothing(self):
        app = TicTacToeApp(FakeScreen())
        app.handle_key(ord("z"))
        assert app.game_state == GameState()

    def test_read_failure_raises(self):
        app = TicTacToeApp(FakeScreen(keys=[]))
        with pytest.raises(TerminalIOError):
            app.run()


class TestMain:

    def test_clean_quit_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr(tictactoe_tui.curses, "wrapper", lambda func: None)
        monkeypatch.setattr(tictactoe_tui.locale, "setlocale", lambda *args: None)

        assert tictactoe_tui.main() == 0
        assert "Thanks for playing" in capsys.readouterr().out

    def test_terminal_failure_exits_one(self, monkeypatch, capsys):
        def broken_wrapper(func):
            raise TerminalIOError("gone")

        monkeypatch.setattr(tictactoe_tui.curses, "wrapper", broken_wrapper)
        monkeypatch.setattr(tictactoe_tui.locale, "setlocale", lambda *args: None)

        assert tictactoe_tui.main() == 1
        assert "ERROR: gone" in capsys.readouterr().err
