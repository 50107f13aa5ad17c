import pygame
import pytest

from shapegames.memory import COLS, ROWS, Shape
from shapegames.shapes import (
    CELL_SIZE,
    GRAY,
    SHAPE_COLORS,
    WHITE,
    Circle,
    Line,
    Rectangle,
    Triangle,
    cell_at,
    fan_triangles,
    grid_lines,
    matched_mark,
    render,
    shape_primitives,
    status_lines,
)


def test_cell_at_corners_and_clamping():
    assert cell_at(0, 0) == (0, 0)
    assert cell_at(CELL_SIZE * COLS - 1, CELL_SIZE * ROWS - 1) == (ROWS - 1, COLS - 1)
    assert cell_at(CELL_SIZE * 10, -5) == (0, COLS - 1)
    assert cell_at(CELL_SIZE - 1, CELL_SIZE) == (1, 0)


def test_grid_lines():
    lines = grid_lines()
    assert len(lines) == (ROWS + 1) + (COLS + 1)
    assert all(line.color == WHITE and line.thickness == 2 for line in lines)
    assert lines[0] == Line((0, 0), (0, ROWS * CELL_SIZE), WHITE, 2)


def test_fan_triangles_wraps_around():
    pts = [(0, 0), (10, 0), (10, 10), (0, 10)]
    tris = fan_triangles(pts, (5, 5), WHITE)
    assert len(tris) == len(pts)
    assert all(t.points[0] == (5, 5) for t in tris)
    assert tris[-1].points[1:] == ((0, 10), (0, 0))


def test_empty_shape_draws_nothing():
    assert shape_primitives(Shape.EMPTY, 60, 60) == []


@pytest.mark.parametrize("shape", [s for s in Shape if s is not Shape.EMPTY])
def test_every_shape_uses_its_color(shape):
    prims = shape_primitives(shape, 60, 60)
    assert prims
    assert {p.color for p in prims} == {SHAPE_COLORS[shape]}


@pytest.mark.parametrize(
    "shape,count",
    [(Shape.DIAMOND, 4), (Shape.OCTAGON, 8), (Shape.STAR, 10), (Shape.HEXAGON, 6), (Shape.PENTAGON, 5)],
)
def test_polygon_fan_sizes(shape, count):
    prims = shape_primitives(shape, 60, 60)
    assert len(prims) == count
    assert all(isinstance(p, Triangle) and p.points[0] == (60, 60) for p in prims)


def test_circle_and_star_tip():
    assert shape_primitives(Shape.CIRCLE, 60, 180) == [Circle((60, 180), 40, SHAPE_COLORS[Shape.CIRCLE])]
    tip = shape_primitives(Shape.STAR, 60, 60)[0].points[1]
    assert tip == pytest.approx((60, 20))


def test_matched_mark_is_gray_cross():
    lines = matched_mark(60, 60)
    assert len(lines) == 2
    assert all(line.color == GRAY and line.thickness == 3 for line in lines)


def test_status_lines():
    (first, pos1), (second, pos2) = status_lines(3, 9)
    assert first == "Matched: 3"
    assert second == "Left: 9"
    assert pos2 == (pos1[0], pos1[1] + 30)


def test_render_draws_pixels():
    surface = pygame.Surface((50, 50))
    render(surface, [Rectangle(10, 10, 40, 40, (255, 0, 0))])
    assert tuple(surface.get_at((25, 25)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_render_circle_and_line():
    surface = pygame.Surface((50, 50))
    render(surface, [Circle((25, 25), 10, (0, 255, 0)), Line((0, 45), (49, 45), (0, 0, 255), 3)])
    assert tuple(surface.get_at((25, 25)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((20, 45)))[:3] == (0, 0, 255)


def test_render_rejects_unknown():
    with pytest.raises(TypeError):
        render(pygame.Surface((5, 5)), ["not a primitive"])