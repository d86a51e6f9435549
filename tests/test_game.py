"""Unit tests for board snapshots and outcome detection."""

import pytest

from xoengine.game import (
    EMPTY,
    IN_PROGRESS,
    TIE,
    WINNING_LINES,
    Board,
    Outcome,
    available_moves,
    evaluate,
    side_to_move,
)


def _board(text: str) -> Board:
    # "XO.XO...." style, '.' for empty
    return Board.from_cells(None if c == "." else c for c in text)


def test_empty_board_is_in_progress():
    outcome = evaluate(Board())
    assert outcome == IN_PROGRESS
    assert not outcome.terminal


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", ["X", "O"])
def test_each_line_wins(line, player):
    cells = [EMPTY] * 9
    for idx in line:
        cells[idx] = player
    outcome = evaluate(Board.from_cells(cells))
    assert outcome == Outcome.win(player)
    assert outcome.terminal


def test_full_board_without_line_is_tie():
    board = _board("XOXXOOOXX")
    assert evaluate(board) == TIE
    assert evaluate(board).terminal


def test_last_cell_decides_between_tie_and_win():
    board = _board("XOXOXOOX.")
    assert evaluate(board) == IN_PROGRESS
    assert evaluate(board.place(8, "O")) == TIE
    # X completes the 0-4-8 diagonal instead
    assert evaluate(board.place(8, "X")) == Outcome.win("X")


def test_two_winning_lines_resolve_by_line_order():
    # O holds the top row, X the middle row; rows are checked top first.
    board = _board("OOOXXX...")
    assert evaluate(board) == Outcome.win("O")


def test_board_rejects_wrong_size():
    with pytest.raises(ValueError):
        Board.from_cells(["X"] * 8)
    with pytest.raises(ValueError):
        Board.from_cells([None] * 10)


def test_board_rejects_unknown_mark():
    with pytest.raises(ValueError):
        Board.from_cells(["Z"] + [None] * 8)


def test_board_normalizes_cells():
    board = Board.from_cells(["x", "o", "", None, " ", "X", "O", None, None])
    assert board.cells == ("X", "O", EMPTY, EMPTY, EMPTY, "X", "O", EMPTY, EMPTY)


def test_place_returns_new_board():
    board = Board()
    after = board.place(4, "X")
    assert board == Board()
    assert after[4] == "X"


def test_place_rejects_occupied_and_out_of_range():
    board = Board().place(0, "X")
    with pytest.raises(ValueError):
        board.place(0, "O")
    with pytest.raises(ValueError):
        board.place(9, "O")


def test_side_to_move_alternates():
    board = Board()
    assert side_to_move(board) == "X"
    board = board.place(4, "X")
    assert side_to_move(board) == "O"
    board = board.place(0, "O")
    assert side_to_move(board) == "X"


def test_available_moves_are_ascending_empty_cells():
    board = _board("X...O...X")
    assert available_moves(board) == [1, 2, 3, 5, 6, 7]


def test_reachability_check():
    assert _board("XO.......").is_reachable()
    assert _board("X........").is_reachable()
    assert not _board("XX.......").is_reachable()
    assert not _board("O........").is_reachable()
