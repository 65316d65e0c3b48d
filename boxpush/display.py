"""Terminal drawing of a board and key handling for the game screen."""

from __future__ import annotations

import curses
from typing import Optional

from .board import Board, Direction

TOO_SMALL = "Too small!"

_KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


def help_text() -> str:
    """The usage message shown for -h."""
    return (
        "USAGE\n"
        "    ./my_sokoban map\n"
        "DESCRIPTION\n"
        "    map  file representing the warehouse map, containing '#' for walls,\n"
        "         'P' for the player, 'X' for boxes and 'O' for storage locations.\n"
    )


def key_to_direction(key: int) -> Optional[Direction]:
    """The direction an arrow key stands for, or None for any other key."""
    return _KEY_DIRECTIONS.get(key)


def _put(screen, y: int, x: int, text: str) -> None:
    if y < 0 or x < 0:
        return
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def render(screen, board: Board) -> None:
    """Draw the board centred on the screen, or a notice if it does not fit."""
    rows, cols = screen.getmaxyx()
    if rows < board.height or cols < board.width:
        _put(screen, rows // 2, cols // 2 - len(TOO_SMALL), TOO_SMALL)
        return
    top = rows // 2 - board.height // 2
    left = cols // 2 - board.width // 2
    for offset, line in enumerate(board.overlay_rows()):
        _put(screen, top + offset, left, line)