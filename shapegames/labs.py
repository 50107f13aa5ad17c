"""Small drawing and input demos: a house, a steerable pointer, quadrant clicks and a ship."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

import pygame

from shapegames.shapes import Circle, Line, Rectangle, Triangle, render

WIDTH = 640
HEIGHT = 480
SHIP_SIZE = 64

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)

SKY_BLUE = (135, 206, 235)
WALL_BROWN = (139, 69, 19)
ROOF_RED = (178, 34, 34)
DOOR_BROWN = (85, 45, 10)

SHIP_SILVER = (180, 190, 210)
SHIP_RED = (200, 40, 40)
SHIP_ORANGE = (240, 150, 30)
SPACE = (10, 10, 30)

HOUSE_DELAY_MS = 5000
STEP = 10
OBJECT_RADIUS = 20
FONT_SIZE = 20


def house_scene():
    """Return the background colour and the primitives of the house picture."""
    primitives = [
        Rectangle(200, 200, 450, 400, WALL_BROWN),
        Triangle(((180, 200), (470, 200), (325, 100)), ROOF_RED),
        Rectangle(290, 300, 360, 400, DOOR_BROWN),
        Circle((550, 80), 50, YELLOW),
    ]
    return SKY_BLUE, primitives


class Direction(Enum):
    """Heading of the pointer: the step it moves and where its line reaches."""

    UP = (0, -STEP, 0, -30)
    DOWN = (0, STEP, 0, 30)
    RIGHT = (STEP, 0, 30, 0)
    LEFT = (-STEP, 0, -30, 0)
    UP_LEFT = (-STEP, -STEP, -25, -25)
    DOWN_RIGHT = (STEP, STEP, 25, 25)
    UP_RIGHT = (STEP, -STEP, 25, -25)
    DOWN_LEFT = (-STEP, STEP, -25, 25)

    def __init__(self, dx, dy, reach_x, reach_y):
        self.step = (dx, dy)
        self.reach = (reach_x, reach_y)


_KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "right": Direction.RIGHT,
    "left": Direction.LEFT,
    "u": Direction.UP_LEFT,
    "d": Direction.DOWN_RIGHT,
    "r": Direction.UP_RIGHT,
    "l": Direction.DOWN_LEFT,
}


@dataclass
class Pointer:
    """A position on screen and the direction it last moved in."""

    x: int = WIDTH // 2
    y: int = HEIGHT // 2
    direction: Direction = Direction.UP

    def move(self, key):
        """Move by the key's step; return False if the key steers nothing."""
        direction = _KEY_DIRECTIONS.get(str(key).lower())
        if direction is None:
            return False
        dx, dy = direction.step
        self.x += dx
        self.y += dy
        self.direction = direction
        return True


def pointer_line(pointer):
    """Return the yellow line that shows which way the pointer faces."""
    rx, ry = pointer.direction.reach
    return Line((pointer.x, pointer.y), (pointer.x + rx, pointer.y + ry), YELLOW, 3)


def quadrant_colors(x, y, width=WIDTH, height=HEIGHT):
    """Return (background, text) colours for a click in one of four quadrants."""
    left = x < width // 2
    top = y < height // 2
    if left and top:
        return WHITE, BLACK
    if top:
        return BLACK, WHITE
    if left:
        return BLUE, YELLOW
    return YELLOW, BLUE


def coordinate_text(x, y):
    """Return the label that reports a position."""
    return f"X: {x}  Y: {y}"


def ship_primitives():
    """Return the primitives of the spaceship on its 64x64 canvas."""
    return [
        Triangle(((32, 4), (14, 48), (50, 48)), SHIP_SILVER),
        Triangle(((14, 48), (2, 60), (22, 42)), SHIP_SILVER),
        Triangle(((50, 48), (62, 60), (42, 42)), SHIP_SILVER),
        Circle((32, 24), 7, SHIP_RED),
        Rectangle(22, 48, 42, 56, SHIP_ORANGE),
    ]


def _quit_requested(event):
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def _run_house(screen):
    background, primitives = house_scene()
    screen.fill(background)
    render(screen, primitives)
    pygame.display.flip()
    pygame.time.wait(HOUSE_DELAY_MS)


def _draw_pointer(screen, pointer):
    screen.fill(BLACK)
    render(screen, [Circle((pointer.x, pointer.y), OBJECT_RADIUS, GREEN), pointer_line(pointer)])
    pygame.display.flip()


def _run_pointer(screen):
    pointer = Pointer()
    _draw_pointer(screen, pointer)
    while True:
        event = pygame.event.wait()
        if _quit_requested(event):
            return
        if event.type == pygame.KEYDOWN:
            pointer.move(pygame.key.name(event.key))
        _draw_pointer(screen, pointer)


def _run_quadrants(screen):
    font = pygame.font.Font(None, FONT_SIZE)
    x, y = WIDTH // 2, HEIGHT // 2
    background, text_color = BLACK, WHITE
    while True:
        screen.fill(background)
        render(screen, [Circle((x, y), OBJECT_RADIUS, RED)])
        screen.blit(font.render(coordinate_text(x, y), True, text_color), (10, 10))
        pygame.display.flip()
        event = pygame.event.wait()
        if _quit_requested(event):
            return
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            background, text_color = quadrant_colors(x, y, WIDTH, HEIGHT)


def _run_ship(screen):
    ship = pygame.Surface((SHIP_SIZE, SHIP_SIZE), pygame.SRCALPHA)
    render(ship, ship_primitives())
    position = (WIDTH // 2 - SHIP_SIZE // 2, HEIGHT // 2 - SHIP_SIZE // 2)
    while True:
        screen.fill(SPACE)
        screen.blit(ship, position)
        pygame.display.flip()
        if _quit_requested(pygame.event.wait()):
            return


_DEMOS = {
    "house": _run_house,
    "pointer": _run_pointer,
    "quadrants": _run_quadrants,
    "ship": _run_ship,
}


def main(argv=None):
    """Open a window and run one of the demos."""
    parser = argparse.ArgumentParser(description="Run one of the drawing demos.")
    parser.add_argument("demo", choices=sorted(_DEMOS), help="which demo to run")
    args = parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(args.demo.capitalize())
        _DEMOS[args.demo](screen)
    finally:
        pygame.quit()
    return 0