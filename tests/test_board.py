import pytest

from ttt_duel.board import CORNERS, EDGES, Board, Mark, coords_of, index_of
from ttt_duel.errors import CellOccupied, OutOfRange, TicTacToeError


def test_new_board_is_empty(empty_board):
    assert len(empty_board) == 9
    assert all(v == Mark.EMPTY for v in empty_board)
    assert empty_board.empty_cells() == list(range(9))
    assert not empty_board.is_full()


def test_set_then_get_round_trips_coordinates(empty_board):
    empty_board.set(1, 2, Mark.X)
    assert empty_board.get(1, 2) == Mark.X
    assert empty_board[5] == Mark.X
    assert empty_board.to_string() == "000001000"


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, -1), (0, 3), (5, 5)])
def test_get_and_set_out_of_range(empty_board, row, col):
    with pytest.raises(OutOfRange):
        empty_board.get(row, col)
    with pytest.raises(OutOfRange):
        empty_board.set(row, col, Mark.O)
    assert empty_board.empty_cells() == list(range(9))


def test_set_on_occupied_cell_fails_and_leaves_board_unchanged(empty_board):
    empty_board.set(0, 0, Mark.X)
    before = empty_board.copy()
    with pytest.raises(CellOccupied) as exc:
        empty_board.set(0, 0, Mark.O)
    assert (exc.value.row, exc.value.col) == (0, 0)
    assert exc.value.mark == Mark.X
    assert empty_board == before
    assert empty_board.get(0, 0) == Mark.X


def test_errors_share_a_base_class():
    assert issubclass(CellOccupied, TicTacToeError)
    assert issubclass(OutOfRange, IndexError)
    assert issubclass(CellOccupied, ValueError)


def test_placing_empty_is_rejected(empty_board):
    with pytest.raises(ValueError):
        empty_board.set(1, 1, Mark.EMPTY)


def test_place_uses_flat_index(empty_board):
    empty_board.place(8, Mark.O)
    assert empty_board.get(2, 2) == Mark.O
    with pytest.raises(OutOfRange):
        empty_board.place(9, Mark.O)


def test_is_full_and_clear(full_draw_board):
    assert full_draw_board.is_full()
    assert full_draw_board.empty_cells() == []
    full_draw_board.clear()
    assert full_draw_board == Board()


def test_copy_is_independent(empty_board):
    c = empty_board.copy()
    c.place(4, Mark.X)
    assert empty_board[4] == Mark.EMPTY


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", "00000000", "000000003"])
def test_from_string_rejects_malformed(bad):
    with pytest.raises(ValueError):
        Board.from_string(bad)


def test_from_string_and_counts():
    b = Board.from_string("100020000")
    assert b.get(0, 0) == Mark.X
    assert b.get(1, 1) == Mark.O
    assert b.count(Mark.X) == 1 and b.count(Mark.O) == 1
    assert b.to_list() == [1, 0, 0, 0, 2, 0, 0, 0, 0]


def test_index_helpers():
    assert index_of(2, 1) == 7
    assert coords_of(5) == (1, 2)
    assert set(CORNERS) | set(EDGES) | {4} == set(range(9))
    with pytest.raises(OutOfRange):
        coords_of(-1)


def test_mark_parse_and_opponent():
    assert Mark.parse("x") == Mark.X
    assert Mark.parse("2") == Mark.O
    assert Mark.X.opponent() == Mark.O
    with pytest.raises(ValueError):
        Mark.parse("Z")
    with pytest.raises(ValueError):
        Mark.EMPTY.opponent()
