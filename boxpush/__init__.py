"""Terminal box-pushing warehouse puzzle: board logic, curses display, a single-map game and a menu-driven game."""

__version__ = "0.1.0"
__all__ = ["board", "display", "game", "menu"]