"""Drawing primitives for the memory game's grid, shapes and status cell."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from shapegames.memory import COLS, ROWS, Shape

CELL_SIZE = 120

Color = tuple
Point = tuple

WHITE = (255, 255, 255)
GRAY = (100, 100, 100)
STATUS_GREEN = (0, 80, 0)

SHAPE_COLORS = {
    Shape.CIRCLE: (255, 0, 0),
    Shape.TRIANGLE: (0, 255, 0),
    Shape.RECTANGLE: (0, 0, 255),
    Shape.DIAMOND: (255, 255, 0),
    Shape.OVAL: (255, 0, 255),
    Shape.OCTAGON: (0, 255, 255),
    Shape.STAR: (255, 128, 0),
    Shape.CROSS: (128, 255, 0),
    Shape.ARROW: (0, 128, 255),
    Shape.HEXAGON: (255, 128, 128),
    Shape.PENTAGON: (128, 128, 255),
    Shape.HEART: (255, 64, 128),
}


@dataclass(frozen=True)
class Circle:
    """A circle; width 0 fills it, otherwise it is an outline."""

    center: Point
    radius: float
    color: Color
    width: float = 0


@dataclass(frozen=True)
class Triangle:
    """A filled triangle."""

    points: tuple
    color: Color


@dataclass(frozen=True)
class Rectangle:
    """A filled rectangle between two corners."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color


@dataclass(frozen=True)
class Ellipse:
    """A filled, axis-aligned ellipse."""

    center: Point
    rx: float
    ry: float
    color: Color


@dataclass(frozen=True)
class Line:
    """A straight line of a given thickness."""

    start: Point
    end: Point
    color: Color
    thickness: float = 1


STATUS_BACKGROUND = Rectangle(
    4 * CELL_SIZE + 1, 4 * CELL_SIZE + 1, 5 * CELL_SIZE - 1, 5 * CELL_SIZE - 1, STATUS_GREEN
)


def fan_triangles(points, center, color):
    """Split a polygon into triangles fanned out from its center."""
    pts = [tuple(p) for p in points]
    return [
        Triangle((tuple(center), a, b), color)
        for a, b in zip(pts, pts[1:] + pts[:1])
    ]


def _ring(x, y, radius, count, offset_deg):
    step = 360 / count
    return [
        (
            x + radius * math.cos(math.radians(i * step + offset_deg)),
            y + radius * math.sin(math.radians(i * step + offset_deg)),
        )
        for i in range(count)
    ]


def _star(x, y, color):
    outer = _ring(x, y, 40, 5, -90)
    inner = _ring(x, y, 18, 5, -54)
    points = [p for pair in zip(outer, inner) for p in pair]
    return fan_triangles(points, (x, y), color)


def _octagon(x, y, color):
    s, r = 18, 40
    points = [
        (x - s, y - r), (x + s, y - r), (x + r, y - s), (x + r, y + s),
        (x + s, y + r), (x - s, y + r), (x - r, y + s), (x - r, y - s),
    ]
    return fan_triangles(points, (x, y), color)


def shape_primitives(shape, x, y):
    """Return the primitives that draw a shape centred on (x, y)."""
    shape = Shape(shape)
    if shape is Shape.EMPTY:
        return []
    color = SHAPE_COLORS[shape]
    center = (x, y)
    match shape:
        case Shape.CIRCLE:
            return [Circle(center, 40, color)]
        case Shape.TRIANGLE:
            return [Triangle(((x, y - 40), (x - 40, y + 40), (x + 40, y + 40)), color)]
        case Shape.RECTANGLE:
            return [Rectangle(x - 35, y - 25, x + 35, y + 25, color)]
        case Shape.DIAMOND:
            points = [(x, y - 40), (x + 30, y), (x, y + 40), (x - 30, y)]
            return fan_triangles(points, center, color)
        case Shape.OVAL:
            return [Ellipse(center, 40, 25, color)]
        case Shape.OCTAGON:
            return _octagon(x, y, color)
        case Shape.STAR:
            return _star(x, y, color)
        case Shape.CROSS:
            return [
                Rectangle(x - 10, y - 35, x + 10, y + 35, color),
                Rectangle(x - 35, y - 10, x + 35, y + 10, color),
            ]
        case Shape.ARROW:
            return [
                Triangle(((x, y - 40), (x - 30, y), (x + 30, y)), color),
                Rectangle(x - 12, y, x + 12, y + 35, color),
            ]
        case Shape.HEXAGON:
            return fan_triangles(_ring(x, y, 38, 6, -30), center, color)
        case Shape.PENTAGON:
            return fan_triangles(_ring(x, y, 38, 5, -90), center, color)
        case Shape.HEART:
            return [
                Circle((x - 18, y - 10), 20, color),
                Circle((x + 18, y - 10), 20, color),
                Triangle(((x - 38, y - 2), (x + 38, y - 2), (x, y + 40)), color),
            ]
    return []


def matched_mark(x, y):
    """Return the gray X drawn over a matched cell."""
    return [
        Line((x - 35, y - 35), (x + 35, y + 35), GRAY, 3),
        Line((x + 35, y - 35), (x - 35, y + 35), GRAY, 3),
    ]


def grid_lines():
    """Return the white lines of the grid, vertical first."""
    vertical = [
        Line((i * CELL_SIZE, 0), (i * CELL_SIZE, ROWS * CELL_SIZE), WHITE, 2)
        for i in range(COLS + 1)
    ]
    horizontal = [
        Line((0, i * CELL_SIZE), (COLS * CELL_SIZE, i * CELL_SIZE), WHITE, 2)
        for i in range(ROWS + 1)
    ]
    return vertical + horizontal


def cell_at(mx, my):
    """Map a pixel position to a (row, col), clamped to the grid."""
    row = min(max(int(my) // CELL_SIZE, 0), ROWS - 1)
    col = min(max(int(mx) // CELL_SIZE, 0), COLS - 1)
    return row, col


def status_lines(matched, remaining):
    """Return (text, position) pairs for the status cell."""
    x = 4 * CELL_SIZE + 10
    y = 4 * CELL_SIZE + 20
    return [(f"Matched: {matched}", (x, y)), (f"Left: {remaining}", (x, y + 30))]


def render(surface, primitives):
    """Draw primitives onto a pygame surface in order."""
    for prim in primitives:
        match prim:
            case Circle(center=c, radius=r, color=col, width=w):
                pygame.draw.circle(surface, col, c, r, int(round(w)))
            case Triangle(points=pts, color=col):
                pygame.draw.polygon(surface, col, pts)
            case Rectangle(x1=x1, y1=y1, x2=x2, y2=y2, color=col):
                left, top = min(x1, x2), min(y1, y2)
                rect = pygame.Rect(left, top, abs(x2 - x1), abs(y2 - y1))
                pygame.draw.rect(surface, col, rect)
            case Ellipse(center=(cx, cy), rx=rx, ry=ry, color=col):
                pygame.draw.ellipse(surface, col, pygame.Rect(cx - rx, cy - ry, 2 * rx, 2 * ry))
            case Line(start=a, end=b, color=col, thickness=t):
                pygame.draw.line(surface, col, a, b, max(1, int(round(t))))
            case _:
                raise TypeError(f"cannot draw {prim!r}")