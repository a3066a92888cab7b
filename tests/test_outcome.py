import pytest

from ttt_duel.board import Board, Mark
from ttt_duel.outcome import (
    WIN_LINES,
    RoundStatus,
    has_line,
    is_terminal,
    round_outcome,
    terminal_score,
    winning_line,
)


def test_line_table_is_rows_cols_diagonals():
    assert len(WIN_LINES) == 8
    assert WIN_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WIN_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WIN_LINES[6:] == ((0, 4, 8), (2, 4, 6))


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_each_filled_line_is_detected(line, mark):
    b = Board()
    for i in line:
        b.place(i, mark)
    assert has_line(b, mark)
    assert not has_line(b, mark.opponent())
    assert winning_line(b, mark) == line
    out = round_outcome(b)
    assert out.status == RoundStatus.WIN
    assert out.winner == mark
    assert out.line == line


def test_terminal_score_is_depth_adjusted():
    b = Board.from_string("111220000")
    assert terminal_score(b, Mark.X, Mark.O, 0) == 10
    assert terminal_score(b, Mark.X, Mark.O, 3) == 7
    assert terminal_score(b, Mark.O, Mark.X, 0) == -10
    assert terminal_score(b, Mark.O, Mark.X, 4) == -6
    assert is_terminal(b, Mark.X, Mark.O)


def test_degenerate_board_with_two_lines():
    b = Board.from_string("111222000")
    assert has_line(b, Mark.X) and has_line(b, Mark.O)
    # the AI mark is checked first
    assert terminal_score(b, Mark.X, Mark.O, 2) == 8
    assert terminal_score(b, Mark.O, Mark.X, 2) == 8
    assert round_outcome(b).winner == Mark.X
    assert round_outcome(b, last_mover=Mark.O).winner == Mark.O


def test_full_board_without_line_is_a_draw(full_draw_board):
    assert terminal_score(full_draw_board, Mark.X, Mark.O, 0) == 0
    assert is_terminal(full_draw_board, Mark.X, Mark.O)
    out = round_outcome(full_draw_board)
    assert out.status == RoundStatus.DRAW
    assert out.is_over
    assert out.winner is None
    assert str(out) == "draw"


def test_open_position_is_ongoing():
    b = Board.from_string("100020000")
    assert terminal_score(b, Mark.X, Mark.O, 5) == 0
    assert not is_terminal(b, Mark.X, Mark.O)
    out = round_outcome(b)
    assert out.status == RoundStatus.ONGOING
    assert not out.is_over


def test_helpers_accept_plain_lists():
    cells = [2, 0, 0, 2, 0, 0, 2, 1, 1]
    assert has_line(cells, Mark.O)
    assert winning_line(cells, Mark.O) == (0, 3, 6)
    assert str(round_outcome(cells)) == "win(O)"
