"""The single-map game: load a map, play it until it is won or lost."""

from __future__ import annotations

import curses
import sys
from enum import Enum
from typing import Optional, Sequence

from .board import Board, MapError, load_board
from .display import help_text, key_to_direction, render

RESTART_KEY = ord(" ")


class Outcome(Enum):
    """How a game ended; the value is the exit status."""

    WON = 0
    LOST = 1


def _load(path) -> Board:
    board = load_board(path)
    board.validate()
    return board


def play(screen, path) -> Outcome:
    """Play the map at path on screen; space reloads it from the file."""
    screen.clear()
    board = _load(path)
    key = -1
    while True:
        if key == RESTART_KEY:
            board = _load(path)
            key = -1
        direction = key_to_direction(key)
        if direction is not None:
            board.move(direction)
        render(screen, board)
        screen.refresh()
        if board.is_won():
            return Outcome.WON
        if board.is_lost():
            return Outcome.LOST
        key = screen.getch()
        screen.clear()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1 and args[0].startswith("-h"):
        print(help_text(), end="")
        return 0
    if len(args) != 1:
        sys.stderr.write(help_text())
        return 84
    path = args[0]
    try:
        _load(path)
        outcome = curses.wrapper(play, path)
    except MapError as exc:
        print(exc)
        return 84
    return outcome.value


if __name__ == "__main__":
    sys.exit(main())