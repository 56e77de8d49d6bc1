import io

import pytest

from tourkit.board import BOARD_SIZE, Arrow, Board, Point


def test_new_board_is_all_zero():
    board = Board()
    assert board.size == BOARD_SIZE
    assert all(board[x, y] == 0 for x in range(board.size) for y in range(board.size))


def test_set_and_get_round_trip():
    board = Board(5)
    board[1, 2] = 7
    board[Point(3, 2)] = 1
    assert board[1, 2] == 7
    assert board[Point(1, 2)] == 7
    assert board[3, 2] == 1
    assert board[2, 1] == 0


def test_in_bounds():
    board = Board(4)
    assert board.in_bounds(0, 0)
    assert board.in_bounds(3, 3)
    assert not board.in_bounds(4, 0)
    assert not board.in_bounds(0, -1)


@pytest.mark.parametrize("pos", [(-1, 0), (0, 8), (8, 8)])
def test_out_of_bounds_access_raises(pos):
    board = Board()
    with pytest.raises(IndexError):
        board[pos]
    with pytest.raises(IndexError):
        board[pos] = 1
    assert all(board[x, y] == 0 for x in range(board.size) for y in range(board.size))


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Board(0)


def test_str_format_small_board():
    assert str(Board(2)) == "0 0 \n0 0 \n"


def test_str_has_one_line_per_row():
    board = Board(3)
    board[0, 1] = 9
    lines = str(board).splitlines()
    assert len(lines) == 3
    assert lines[0].split() == ["0", "9", "0"]


def test_print_board_to_file_matches_str():
    board = Board(3)
    board[2, 2] = 4
    buffer = io.StringIO()
    board.print_board(buffer)
    assert buffer.getvalue() == str(board)


def test_print_board_defaults_to_stdout(capsys):
    board = Board(2)
    board[0, 0] = 1
    board.print_board()
    assert capsys.readouterr().out == str(board)


def test_point_and_arrow_values():
    arrow = Arrow(Point(0, 0), Point(1, 2), True)
    assert arrow.end == (1, 2)
    assert arrow.end.y == 2
    assert arrow == Arrow(Point(0, 0), Point(1, 2), True)
    assert arrow != Arrow(Point(1, 2), Point(0, 0), False)