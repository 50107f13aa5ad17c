import pytest

from shapegames.memory import COLS, ROWS, STATUS_CELL
from shapegames.memory_app import cell_center
from shapegames.shapes import CELL_SIZE, STATUS_BACKGROUND, cell_at

ALL_CELLS = [(r, c) for r in range(ROWS) for c in range(COLS)]


@pytest.mark.parametrize("cell", ALL_CELLS)
def test_center_maps_back_to_its_cell(cell):
    assert cell_at(*cell_center(*cell)) == cell


@pytest.mark.parametrize("cell", ALL_CELLS)
def test_center_is_halfway_across_cell(cell):
    row, col = cell
    x, y = cell_center(row, col)
    assert x - col * CELL_SIZE == (col + 1) * CELL_SIZE - x
    assert y - row * CELL_SIZE == (row + 1) * CELL_SIZE - y


def test_neighbouring_centers_are_one_cell_apart():
    x0, y0 = cell_center(1, 1)
    x1, _ = cell_center(1, 2)
    _, y1 = cell_center(2, 1)
    assert x1 - x0 == CELL_SIZE
    assert y1 - y0 == CELL_SIZE


def test_status_cell_center_lies_in_status_background():
    x, y = cell_center(*STATUS_CELL)
    assert STATUS_BACKGROUND.x1 < x < STATUS_BACKGROUND.x2
    assert STATUS_BACKGROUND.y1 < y < STATUS_BACKGROUND.y2