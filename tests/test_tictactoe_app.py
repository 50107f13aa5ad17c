import random

import pytest

from shapegames.tictactoe import Outcome, TicTacToe
from shapegames.tictactoe_app import (
    cell_center,
    cell_from_point,
    computer_move,
    status_message,
)

ALL_CELLS = [(r, c) for r in range(3) for c in range(3)]


def test_points_below_board_are_ignored():
    assert cell_from_point(100, 375) is None
    assert cell_from_point(600, 479) is None


def test_boundary_pixels_belong_to_lower_square():
    assert cell_from_point(213, 125) == cell_from_point(0, 0)
    assert cell_from_point(426, 250) == cell_from_point(300, 200)


def test_pixel_after_boundary_moves_to_next_square():
    row, col = cell_from_point(213, 0)
    assert cell_from_point(214, 0) == (row, col + 1)
    row, col = cell_from_point(0, 250)
    assert cell_from_point(0, 251) == (row + 1, col)


def test_top_left_center():
    assert cell_center(0, 0) == (106, 62)


@pytest.mark.parametrize("cell", ALL_CELLS)
def test_center_maps_back_to_its_cell(cell):
    assert cell_from_point(*cell_center(*cell)) == cell


def test_computer_move_takes_an_empty_square():
    game = TicTacToe()
    game.place_x(1, 1)
    before = game.empty_cells()
    move = computer_move(game, random.Random(3))
    assert move in before
    assert move not in game.empty_cells()
    assert game.place_x(*move) is False


def test_computer_move_is_reproducible_with_seed():
    first, second = TicTacToe(), TicTacToe()
    assert computer_move(first, random.Random(42)) == computer_move(
        second, random.Random(42)
    )


def test_computer_fills_board_then_refuses():
    game = TicTacToe()
    rng = random.Random(7)
    moves = {computer_move(game, rng) for _ in range(9)}
    assert moves == set(ALL_CELLS)
    assert game.outcome() is Outcome.O_WON
    with pytest.raises(ValueError):
        computer_move(game, rng)


def test_status_messages():
    assert status_message(Outcome.TIE) == (
        "The game is a tie -- screen will close shortly",
        (1, 400),
    )
    assert status_message(Outcome.X_WON)[0] == "X won the game-- screen will close shortly"
    assert status_message(Outcome.O_WON)[0] == "O won the game-- screen will close shortly"
    assert status_message(Outcome.IN_PROGRESS) == ("Pick a Square", (420, 440))