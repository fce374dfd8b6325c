"""
Key mapping for the interactive TicTacToe UI.

curses only reports key presses, so every code handed to map_key is a
new press. Release and auto-repeat signals never get this far.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from logic.game_state import Direction
from .config import TerminalConfig


class KeyCommand(Enum):
    MOVE_CURSOR = "move_cursor"
    CONFIRM = "confirm"
    RESET = "reset"
    QUIT = "quit"
    IGNORED = "ignored"


@dataclass(frozen=True)
class KeyAction:
    """What one key press asks the game to do."""
    command: KeyCommand
    direction: Optional[Direction] = None   # Only for MOVE_CURSOR


IGNORED = KeyAction(KeyCommand.IGNORED)


def _build_keymap(config=TerminalConfig) -> dict:
    keymap = {}
    for codes, direction in (
        (config.KEYS_UP, Direction.UP),
        (config.KEYS_DOWN, Direction.DOWN),
        (config.KEYS_LEFT, Direction.LEFT),
        (config.KEYS_RIGHT, Direction.RIGHT),
    ):
        for code in codes:
            keymap[code] = KeyAction(KeyCommand.MOVE_CURSOR, direction)

    for code in config.KEYS_SELECT:
        keymap[code] = KeyAction(KeyCommand.CONFIRM)
    for code in config.KEYS_RESET:
        keymap[code] = KeyAction(KeyCommand.RESET)
    for code in config.KEYS_QUIT:
        keymap[code] = KeyAction(KeyCommand.QUIT)
    return keymap


KEYMAP = _build_keymap()


def map_key(code: int) -> KeyAction:
    """Translate a curses key code into a KeyAction."""
    return KEYMAP.get(code, IGNORED)
