import pytest

from shapegames.tictactoe import Outcome, TicTacToe


def test_new_board_is_empty_and_in_progress():
    game = TicTacToe()
    assert len(game.empty_cells()) == 9
    assert game.outcome() is Outcome.IN_PROGRESS


def test_place_on_taken_square_fails():
    game = TicTacToe()
    assert game.place_x(1, 1) is True
    assert game.place_x(1, 1) is False
    assert game.place_o(1, 1) is False
    assert (1, 1) not in game.empty_cells()


def test_row_win_for_x():
    game = TicTacToe()
    for col in range(3):
        game.place_x(0, col)
    assert game.outcome() is Outcome.X_WON


def test_column_win_for_o():
    game = TicTacToe()
    for row in range(3):
        game.place_o(row, 2)
    assert game.outcome() is Outcome.O_WON


@pytest.mark.parametrize(
    "cells", [[(0, 0), (1, 1), (2, 2)], [(2, 0), (1, 1), (0, 2)]]
)
def test_diagonal_wins(cells):
    game = TicTacToe()
    for row, col in cells:
        game.place_o(row, col)
    assert game.outcome() is Outcome.O_WON


def test_x_line_takes_precedence():
    game = TicTacToe()
    for col in range(3):
        game.place_x(0, col)
        game.place_o(2, col)
    assert game.outcome() is Outcome.X_WON


def test_full_board_without_line_is_tie():
    game = TicTacToe()
    layout = ["xox", "xoo", "oxx"]
    for r, line in enumerate(layout):
        for c, mark in enumerate(line):
            (game.place_x if mark == "x" else game.place_o)(r, c)
    assert game.empty_cells() == []
    assert game.outcome() is Outcome.TIE


def test_reset_clears_board():
    game = TicTacToe()
    game.place_x(0, 0)
    game.place_o(2, 2)
    game.reset()
    assert len(game.empty_cells()) == 9
    assert game.place_o(0, 0) is True


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0)])
def test_off_board_raises(row, col):
    with pytest.raises(IndexError):
        TicTacToe().place_x(row, col)