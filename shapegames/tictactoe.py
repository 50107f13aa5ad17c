"""Board state and rules for a 3x3 game of tic-tac-toe."""

from __future__ import annotations

from enum import Enum

SIZE = 3

_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 1), (1, 1), (2, 1)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 2), (1, 2), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
)


class Mark(Enum):
    """Content of a single square."""

    EMPTY = "n"
    X = "x"
    O = "o"  # noqa: E741


class Outcome(Enum):
    """State of a game as judged from its board."""

    IN_PROGRESS = "in progress"
    X_WON = "x won"
    O_WON = "o won"
    TIE = "tie"


class TicTacToe:
    """A 3x3 board on which X and O take squares."""

    def __init__(self):
        self._board: list[list[Mark]] = []
        self.reset()

    def reset(self):
        """Empty every square."""
        self._board = [[Mark.EMPTY] * SIZE for _ in range(SIZE)]

    def _place(self, row, col, mark):
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"square ({row}, {col}) is off the board")
        if self._board[row][col] is not Mark.EMPTY:
            return False
        self._board[row][col] = mark
        return True

    def place_x(self, row, col):
        """Put an X on an empty square; return False if it was taken."""
        return self._place(row, col, Mark.X)

    def place_o(self, row, col):
        """Put an O on an empty square; return False if it was taken."""
        return self._place(row, col, Mark.O)

    def _has_line(self, mark):
        return any(
            all(self._board[r][c] is mark for r, c in line) for line in _LINES
        )

    def outcome(self):
        """Judge the board; a line of X is checked before a line of O."""
        if self._has_line(Mark.X):
            return Outcome.X_WON
        if self._has_line(Mark.O):
            return Outcome.O_WON
        if not self.empty_cells():
            return Outcome.TIE
        return Outcome.IN_PROGRESS

    def empty_cells(self):
        """Return the (row, col) of every empty square, row by row."""
        return [
            (r, c)
            for r, row in enumerate(self._board)
            for c, mark in enumerate(row)
            if mark is Mark.EMPTY
        ]