"""Window and event loop for the shape-matching memory game."""

from __future__ import annotations

import argparse
import random
import time

import pygame

from shapegames.memory import COLS, ROWS, TOTAL_PAIRS, MemoryBoard, MemoryGame
from shapegames.shapes import (
    CELL_SIZE,
    STATUS_BACKGROUND,
    cell_at,
    grid_lines,
    matched_mark,
    render,
    shape_primitives,
    status_lines,
)

FPS = 30
FONT_SIZE = 20
WIN_DELAY_MS = 3000
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def cell_center(row, col):
    """Return the pixel at the centre of a grid cell."""
    return col * CELL_SIZE + CELL_SIZE // 2, row * CELL_SIZE + CELL_SIZE // 2


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Find the matching pairs of shapes.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the layout")
    return parser.parse_args(argv)


def _draw(screen, font, game):
    screen.fill(BLACK)
    render(screen, grid_lines())
    for row, col in sorted(game.played):
        x, y = cell_center(row, col)
        render(screen, shape_primitives(game.board.get(row, col), x, y))
        render(screen, matched_mark(x, y))
    for row, col in game.revealed():
        render(screen, shape_primitives(game.board.get(row, col), *cell_center(row, col)))
    render(screen, [STATUS_BACKGROUND])
    for text, position in status_lines(game.matched, game.remaining):
        screen.blit(font.render(text, True, WHITE), position)


def _show_win(screen, font):
    screen.fill(BLACK)
    label = font.render("YOU WIN!", True, WHITE)
    centre = (CELL_SIZE * COLS // 2, CELL_SIZE * ROWS // 2)
    screen.blit(label, label.get_rect(midtop=centre))
    pygame.display.flip()
    pygame.time.wait(WIN_DELAY_MS)


def main(argv=None):
    """Run the memory game until every pair is found or the player quits."""
    args = _parse_args(argv)
    board = MemoryBoard()
    board.fill_random(TOTAL_PAIRS, random.Random(args.seed))
    game = MemoryGame(board)

    pygame.init()
    try:
        screen = pygame.display.set_mode((CELL_SIZE * COLS, CELL_SIZE * ROWS))
        pygame.display.set_caption("Memory")
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()

        done = False
        while not done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    done = True
                elif event.type == pygame.MOUSEBUTTONDOWN and not done:
                    row, col = cell_at(*event.pos)
                    game.click(row, col, time.monotonic())
                    if game.won():
                        _show_win(screen, font)
                        done = True
            if done:
                break
            game.update(time.monotonic())
            _draw(screen, font, game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0