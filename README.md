# boxpush

boxpush is a warehouse puzzle for the terminal. You push every box onto a
storage location. You cannot pull a box. The game runs in a curses screen,
and you play it with the arrow keys. It needs a platform where Python's
`curses` module is available, such as Linux or macOS.

## Installing

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Map files

A map is a plain text file, and each line of the file is one row of the
warehouse. The game reads at most the first 10000 bytes of the file.

| Character | Meaning           |
|-----------|-------------------|
| `#`       | wall              |
| ` `       | floor             |
| `P`       | player start      |
| `X`       | box               |
| `O`       | storage location  |

Example:

```
#######
#     #
# PX O#
#     #
#######
```

A map must contain a `P`. It must also contain only the characters in the
table above. If a map breaks either rule, or the file cannot be opened, the
game prints the error and exits with status 84.

## Playing a single map

```
boxpush path/to/map.txt
boxpush -h
```

You can also start it with `python -m boxpush.game path/to/map.txt`.

- `-h` prints the usage text and exits with status 0. If you give no
  argument, or more than one, the usage text goes to standard error and
  the exit status is 84.
- The arrow keys move the player. The player pushes a box when the square
  behind the box is not a wall and not another box.
- Space reloads the map from the file, which restarts the level.
- The game exits with status 0 when every box is on a storage location.
- The game exits with status 1 when every box is stuck against two walls
  at a corner and is not on storage.
- If the terminal is smaller than the map, the screen shows "Too small!"
  in place of the board.

## Menu mode

```
boxpush-menu
```

You can also start it with `python -m boxpush.menu`.

The main menu offers **Play**, **Level selector** and **Exit**. Use the
up and down arrow keys to move the highlight, and press Enter to choose.
The level selector lists levels `1` and `2`, plus `<Return to menu`.
The levels are read from `map/level1.txt` and `map/level2.txt`, relative
to the current directory.

- When you complete a level, press Space to go to the next level or Esc
  to go back to the menu. If you complete level 2 and press Space, you go
  back to the menu, and Play starts again from level 1.
- When you fail a level, press Space to retry it or Esc to go back to the
  menu.
- If a level file is missing or invalid, the program prints the error and
  exits with status 84.

## Using it as a library

```python
from boxpush.board import Board, Direction

board = Board.from_text("#####\n#PXO#\n#####")
board.validate()
board.move(Direction.RIGHT)
assert board.is_won()
```

`boxpush.board` provides the following:

- `Board.from_text(text)` builds a board. If the map has no player, it
  raises `MapError`.
- `Board.validate()` raises `MapError` when it finds the first character
  that is not allowed on a map.
- `Board.move(direction)` moves the player, pushing a box if one is in the
  way. It returns whether the player moved.
- `Board.is_won()` and `Board.is_lost()` check whether the game has ended.
- `Board.rows` holds the current rows and `Board.objectives` holds the
  rows as loaded. `Board.overlay_rows()` returns the current rows with
  each uncovered storage location drawn back in. `Board.player` is the
  player's `(row, column)`, and `Board.height` and `Board.width` give the
  board's size.
- `load_board(path)` reads a map file and returns a `Board`. It raises
  `MapError` if the file cannot be opened or has no player. It does not
  check the characters, so call `validate()` to do that.

`boxpush.display` provides `help_text()`, `key_to_direction(key)` and
`render(screen, board)`. `boxpush.game.play(screen, path)` plays one map
on a curses screen and returns an `Outcome` (`WON` or `LOST`).

## What it does not do

- The package contains no map files. Menu mode needs you to supply
  `map/level1.txt` and `map/level2.txt`.
- Menu mode has only those two levels.
- The game has no undo, and it does not save progress or scores.