"""Warehouse board: parsing, validation, player moves and end-of-game checks."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from typing import Iterable, Union

WALL = "#"
FLOOR = " "
BOX = "X"
GOAL = "O"
PLAYER = "P"

ALLOWED_CHARS = frozenset({WALL, FLOOR, BOX, GOAL, PLAYER, "\n"})
MAX_MAP_BYTES = 10000


class MapError(Exception):
    """Raised when a map file cannot be read or does not describe a valid board."""


class Direction(Enum):
    """A move of the player, as a (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]


class Board:
    """A sokoban board.

    The live cells change as the player moves and pushes boxes; the cells as
    first loaded are kept to know where the storage locations are.
    """

    def __init__(self, rows: Iterable[str]) -> None:
        row_list = [str(row) for row in rows]
        self._cells = [list(row) for row in row_list]
        self._objectives = tuple(row_list)
        self.player = self._find_player()

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """Build a board from the text of a map file, one row per line."""
        text = text.split("\0", 1)[0]
        return cls(text.split("\n"))

    @property
    def rows(self) -> list[str]:
        """The live rows, with the player and boxes where they are now."""
        return ["".join(row) for row in self._cells]

    @property
    def objectives(self) -> tuple[str, ...]:
        """The rows as they were loaded."""
        return self._objectives

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return max((len(row) for row in self._cells), default=0)

    def _find_player(self) -> tuple[int, int]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell == PLAYER:
                    return (r, c)
        raise MapError("No player starting pos found")

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self._cells) and 0 <= col < len(self._cells[row]):
            return self._cells[row][col]
        return ""

    def _objective(self, row: int, col: int) -> str:
        if 0 <= row < len(self._objectives) and 0 <= col < len(self._objectives[row]):
            return self._objectives[row][col]
        return ""

    def validate(self) -> None:
        """Raise MapError on the first character that has no meaning on a map."""
        for row in self._cells:
            for cell in row:
                if cell not in ALLOWED_CHARS:
                    raise MapError(f"Incorrect character in map file found : {cell}")

    def move(self, direction: Direction) -> bool:
        """Move the player one step, pushing a box if one is in the way.

        Returns whether the player moved.
        """
        start = self.player
        r, c = start
        self._cells[r][c] = FLOOR
        tr, tc = r + direction.drow, c + direction.dcol
        target = self._cell(tr, tc)
        if target in (FLOOR, GOAL):
            self.player = (tr, tc)
        elif target == BOX:
            br, bc = tr + direction.drow, tc + direction.dcol
            beyond = self._cell(br, bc)
            if beyond and beyond not in (WALL, BOX):
                self._cells[br][bc] = BOX
                self.player = (tr, tc)
        pr, pc = self.player
        self._cells[pr][pc] = PLAYER
        return self.player != start

    def _boxes(self):
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell == BOX:
                    yield r, c

    def is_won(self) -> bool:
        """True when every box sits on a storage location."""
        return all(self._objective(r, c) == GOAL for r, c in self._boxes())

    def _is_stuck(self, r: int, c: int) -> bool:
        if self._objective(r, c) == GOAL:
            return False
        up = self._cell(r - 1, c) == WALL
        down = self._cell(r + 1, c) == WALL
        left = self._cell(r, c - 1) == WALL
        right = self._cell(r, c + 1) == WALL
        return (up or down) and (left or right)

    def is_lost(self) -> bool:
        """True when every box is wedged in a corner away from storage."""
        return all(self._is_stuck(r, c) for r, c in self._boxes())

    def overlay_rows(self) -> list[str]:
        """The live rows with uncovered storage locations drawn back in."""
        result = []
        for r, row in enumerate(self._cells):
            drawn = [
                GOAL
                if self._objective(r, c) == GOAL and cell not in (BOX, PLAYER)
                else cell
                for c, cell in enumerate(row)
            ]
            result.append("".join(drawn))
        return result


def load_board(path: Union[str, "PathLike[str]"]) -> Board:
    """Read a map file (at most MAX_MAP_BYTES of it) into a board."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(MAX_MAP_BYTES)
    except OSError as exc:
        raise MapError("Error while opening file") from exc
    return Board.from_text(data.decode("latin-1"))