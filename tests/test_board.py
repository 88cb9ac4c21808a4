import pytest

from wordle_game.core.board import Board, EmptyRow, EvaluatedRow, match, non_match


def _row(*slots):
    return EvaluatedRow(tuple(slots))


def test_new_board_is_all_empty():
    board = Board(4, 5)
    assert len(board) == 5
    assert board.height == 5
    assert board.width == 4
    assert board.filled == 0
    assert board.rows == tuple(EmptyRow(4) for _ in range(5))


def test_rows_fill_in_order():
    board = Board(2, 3)
    board.add_word(_row(match("a"), non_match("x")), 0)
    board.add_word(_row(match("a"), match("b")), 1)
    assert board.filled == 2
    assert board.guesses == ("ax", "ab")
    assert isinstance(board.rows[2], EmptyRow)


def test_rows_are_never_rewritten():
    board = Board(1, 2)
    board.add_word(_row(match("a")), 0)
    with pytest.raises(ValueError):
        board.add_word(_row(non_match("b")), 0)


def test_rows_cannot_skip_ahead():
    board = Board(1, 3)
    with pytest.raises(ValueError):
        board.add_word(_row(match("a")), 1)


def test_full_board_rejects_more_rows():
    board = Board(1, 1)
    board.add_word(_row(match("a")), 0)
    with pytest.raises(ValueError):
        board.add_word(_row(match("a")), 1)


def test_row_width_must_match():
    board = Board(2, 1)
    with pytest.raises(ValueError):
        board.add_word(_row(match("a")), 0)


def test_rows_view_is_a_copy():
    board = Board(1, 1)
    rows = board.rows
    board.add_word(_row(match("a")), 0)
    assert rows == (EmptyRow(1),)
