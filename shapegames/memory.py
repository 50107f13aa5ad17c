"""Board and turn rules for a shape-matching memory game."""

from __future__ import annotations

import random
from enum import IntEnum

ROWS = 5
COLS = 5
TOTAL_PAIRS = 12
STATUS_CELL = (4, 4)
HIDE_DELAY = 1.5


class Shape(IntEnum):
    """Shapes that can sit in a cell; EMPTY marks the status cell."""

    EMPTY = 0
    CIRCLE = 1
    TRIANGLE = 2
    RECTANGLE = 3
    DIAMOND = 4
    OVAL = 5
    OCTAGON = 6
    STAR = 7
    CROSS = 8
    ARROW = 9
    HEXAGON = 10
    PENTAGON = 11
    HEART = 12


def _in_bounds(row, col):
    return 0 <= row < ROWS and 0 <= col < COLS


class MemoryBoard:
    """The hidden layout of shapes on a 5x5 grid."""

    def __init__(self):
        self._cells = [[Shape.EMPTY] * COLS for _ in range(ROWS)]

    def get(self, row, col):
        """Return the shape at a cell, or EMPTY outside the grid."""
        if not _in_bounds(row, col):
            return Shape.EMPTY
        return self._cells[row][col]

    def set(self, row, col, shape):
        """Place a shape at a cell; cells outside the grid are ignored."""
        if _in_bounds(row, col):
            self._cells[row][col] = Shape(shape)

    def same(self, first, second):
        """Tell whether two (row, col) cells hold the same shape."""
        return self.get(*first) == self.get(*second)

    def clear(self):
        """Set every cell to EMPTY."""
        self._cells = [[Shape.EMPTY] * COLS for _ in range(ROWS)]

    def fill_random(self, num_pairs=TOTAL_PAIRS, rng=None):
        """Lay out num_pairs shape pairs at random, leaving the status cell empty."""
        if not 0 <= num_pairs <= TOTAL_PAIRS:
            raise ValueError(f"num_pairs must be between 0 and {TOTAL_PAIRS}")
        rng = rng if rng is not None else random.Random()
        deck = [Shape(i) for i in range(1, num_pairs + 1) for _ in range(2)]
        deck += [Shape.EMPTY] * (2 * TOTAL_PAIRS - len(deck))
        rng.shuffle(deck)
        cards = iter(deck)
        for r in range(ROWS):
            for c in range(COLS):
                self._cells[r][c] = (
                    Shape.EMPTY if (r, c) == STATUS_CELL else next(cards)
                )


class MemoryGame:
    """Selection, matching and hiding of cards on a MemoryBoard."""

    def __init__(self, board):
        self.board = board
        self.played: set[tuple[int, int]] = set()
        self.matched = 0
        self.remaining = TOTAL_PAIRS
        self._first: tuple[int, int] | None = None
        self._second: tuple[int, int] | None = None
        self._waiting_since: float | None = None

    def _hide(self):
        self._first = None
        self._second = None
        self._waiting_since = None

    def click(self, row, col, now):
        """Handle a click on a cell at time now (seconds)."""
        if not _in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the grid")
        if self._waiting_since is not None:
            self._hide()
        cell = (row, col)
        if cell == STATUS_CELL or cell in self.played:
            return
        if self._first is None:
            self._first = cell
            return
        if cell == self._first:
            return
        self._second = cell
        if self.board.same(self._first, cell):
            self.played.update((self._first, cell))
            self.matched += 1
            self.remaining -= 1
            self._hide()
        else:
            self._waiting_since = now

    def update(self, now):
        """Hide a mismatched pair once it has been shown long enough."""
        if self._waiting_since is not None and now - self._waiting_since >= HIDE_DELAY:
            self._hide()

    def revealed(self):
        """Return the currently selected, unmatched cells."""
        return tuple(cell for cell in (self._first, self._second) if cell is not None)

    def won(self):
        """Tell whether every pair has been found."""
        return self.remaining == 0