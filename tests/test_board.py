import pytest

from boxpush.board import MAX_MAP_BYTES, Board, Direction, MapError, load_board


def test_rows_follow_lines():
    text = "#####\n#P X#\n#####"
    board = Board.from_text(text)
    assert board.rows == text.split("\n")
    assert board.height == len(text.split("\n"))


def test_trailing_newline_adds_empty_row():
    board = Board.from_text("#P#\n")
    assert board.rows[-1] == ""
    assert board.rows[0] == "#P#"


def test_text_stops_at_nul():
    board = Board.from_text("#P#\0garbage")
    assert board.rows == ["#P#"]


def test_width_is_longest_row():
    board = Board.from_text("###\n#P####\n#")
    assert board.width == len("#P####")


def test_player_found():
    text = "#####\n#  P#\n#####"
    board = Board.from_text(text)
    r, c = board.player
    assert board.rows[r][c] == "P"
    assert text.split("\n")[r].index("P") == c


def test_missing_player_raises():
    with pytest.raises(MapError, match="No player starting pos found"):
        Board.from_text("####\n#  #\n####")


def test_validate_rejects_unknown_character():
    board = Board.from_text("#####\n#P?X#\n#####")
    with pytest.raises(MapError, match=r"Incorrect character in map file found : \?"):
        board.validate()


def test_validate_accepts_valid_map():
    text = "#####\n#PXO#\n#####"
    board = Board.from_text(text)
    board.validate()
    assert board.rows == text.split("\n")


def test_move_into_floor():
    board = Board.from_text("#####\n#P  #\n#####")
    r, c = board.player
    assert board.move(Direction.RIGHT) is True
    assert board.player == (r, c + 1)
    assert board.rows[r][c] == " "
    assert board.rows[r][c + 1] == "P"


def test_wall_blocks():
    text = "#####\n#P  #\n#####"
    board = Board.from_text(text)
    start = board.player
    assert board.move(Direction.LEFT) is False
    assert board.move(Direction.UP) is False
    assert board.player == start
    assert board.rows == text.split("\n")


def test_push_box():
    board = Board.from_text("######\n#PX  #\n######")
    r, c = board.player
    assert board.move(Direction.RIGHT) is True
    assert board.player == (r, c + 1)
    assert board.rows[r][c + 2] == "X"
    assert board.rows[r][c + 1] == "P"


def test_box_blocked_by_box():
    text = "######\n#PXX #\n######"
    board = Board.from_text(text)
    start = board.player
    assert board.move(Direction.RIGHT) is False
    assert board.player == start
    assert board.rows == text.split("\n")


def test_box_blocked_by_wall():
    text = "####\n#PX#\n####"
    board = Board.from_text(text)
    assert board.move(Direction.RIGHT) is False
    assert board.rows == text.split("\n")


def test_vertical_moves_are_inverse():
    text = "#####\n#   #\n# P #\n#   #\n#####"
    board = Board.from_text(text)
    start = board.player
    assert board.move(Direction.DOWN) is True
    assert board.move(Direction.UP) is True
    assert board.player == start
    assert board.rows == text.split("\n")


def test_push_onto_goal_wins():
    board = Board.from_text("#####\n#PXO#\n#####")
    assert board.is_won() is False
    board.move(Direction.RIGHT)
    assert board.is_won() is True


def test_goal_shown_after_player_leaves():
    board = Board.from_text("#####\n#PO #\n#####")
    r, c = board.player
    board.move(Direction.RIGHT)
    assert board.overlay_rows()[r][c + 1] == "P"
    board.move(Direction.RIGHT)
    assert board.rows[r][c + 1] == " "
    assert board.overlay_rows()[r][c + 1] == "O"


def test_cornered_box_loses():
    board = Board.from_text("#####\n#X P#\n#  O#\n#####")
    assert board.is_lost() is True
    assert board.is_won() is False


def test_free_box_not_lost():
    board = Board.from_text("######\n#    #\n# X P#\n#   O#\n######")
    assert board.is_lost() is False


def test_cornered_box_on_goal_not_lost():
    board = Board.from_text("#####\n#OXP#\n#####")
    board.move(Direction.LEFT)
    assert board.is_lost() is False
    assert board.is_won() is True


def test_objectives_unchanged_by_moves():
    text = "######\n#PX O#\n######"
    board = Board.from_text(text)
    board.move(Direction.RIGHT)
    assert board.objectives == tuple(text.split("\n"))


def test_load_board_round_trip(tmp_path):
    text = "#####\n#PXO#\n#####\n"
    path = tmp_path / "level.txt"
    path.write_text(text)
    board = load_board(path)
    assert board.rows == text.split("\n")


def test_load_board_reads_limited_bytes(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text("#P#\n" + "#" * (MAX_MAP_BYTES * 2))
    board = load_board(path)
    total = sum(len(row) for row in board.rows) + board.height - 1
    assert total == MAX_MAP_BYTES


def test_load_board_missing_file(tmp_path):
    with pytest.raises(MapError, match="Error while opening file"):
        load_board(tmp_path / "absent.txt")