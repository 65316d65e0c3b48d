"""The menu-driven game: a main menu, a level selector and level results."""

from __future__ import annotations

import curses
import sys
from typing import Optional, Sequence

from .display import help_text
from .game import Outcome, play

ENTER = 10
SPACE = ord(" ")
ESCAPE = 27

MENU_TITLE = "MY_SOKOBAN PROJECT"
MENU_CHOICES = ("Play", "Level selector", "Exit")
SELECTOR_TITLE = "LEVEL SELECTOR"
LEVEL_CHOICES = ("1", "2", "<Return to menu")
ESC_PROMPT = "Press ESC to return to the menu"

LEVELS = {1: "map/level1.txt", 2: "map/level2.txt"}


def _put(screen, y: int, x: int, text: str, attr: int = 0) -> None:
    if y < 0 or x < 0:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def move_highlight(key: int, highlight: int, count: int) -> int:
    """Move a highlighted entry up or down, staying within count entries."""
    if key == curses.KEY_UP:
        highlight = max(highlight - 1, 0)
    if key == curses.KEY_DOWN:
        highlight = min(highlight + 1, count - 1)
    return highlight


def choose(screen, title: str, choices: Sequence[str]) -> int:
    """Show a boxed list of choices and return the index picked with Enter."""
    screen.clear()
    screen.box()
    screen.refresh()
    _put(screen, 1, 1, title)
    highlight = 0
    key = -1
    while key != ENTER:
        for index, choice in enumerate(choices):
            attr = curses.A_REVERSE if index == highlight else 0
            _put(screen, index + 2, 1, choice, attr)
        key = screen.getch()
        highlight = move_highlight(key, highlight, len(choices))
    return highlight


def level_path(level: int) -> Optional[str]:
    """The map file of a level, or None past the last level."""
    return LEVELS.get(level)


def result_screen(screen, title: str, prompt: str) -> int:
    """Show a level result until space or escape is pressed; return that key."""
    key = -1
    while key not in (SPACE, ESCAPE):
        screen.clear()
        rows, cols = screen.getmaxyx()
        _put(screen, rows // 2, cols // 2 - len(title) // 2, title)
        _put(screen, rows // 2 + 2, cols // 2 - len(prompt) // 2, prompt)
        _put(screen, rows // 2 + 3, cols // 2 - len(ESC_PROMPT) // 2, ESC_PROMPT)
        screen.refresh()
        key = screen.getch()
    return key


def _play_from(screen, level: int) -> int:
    """Play levels from the given one; return the level to resume from."""
    while True:
        path = level_path(level)
        if path is None:
            return 1
        if play(screen, path) is Outcome.WON:
            key = result_screen(screen, "LEVEL COMPLETED", "Press SPACE for the next level")
            if key == SPACE:
                level += 1
                continue
        else:
            key = result_screen(screen, "LEVEL FAILED", "Press SPACE to retry")
            if key == SPACE:
                continue
        return level


def run(screen) -> None:
    """Drive the main menu until Exit is chosen."""
    level = 1
    while True:
        choice = choose(screen, MENU_TITLE, MENU_CHOICES)
        if choice == 2:
            screen.clear()
            return
        if choice == 1:
            pick = choose(screen, SELECTOR_TITLE, LEVEL_CHOICES)
            if pick == 2:
                continue
            level = pick + 1
        level = _play_from(screen, level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the menu-driven game."""
    from .board import MapError

    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1 and args[0].startswith("-h"):
        print(help_text(), end="")
        return 0
    try:
        curses.wrapper(run)
    except MapError as exc:
        print(exc)
        return 84
    return 0


if __name__ == "__main__":
    sys.exit(main())