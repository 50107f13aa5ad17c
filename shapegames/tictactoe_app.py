"""Window, mouse input and a random computer opponent for tic-tac-toe."""

from __future__ import annotations

import argparse
import random

import pygame

from shapegames.shapes import Circle, Line, Rectangle, render
from shapegames.tictactoe import Outcome, TicTacToe

WIDTH = 640
HEIGHT = 480
BOARD_BOTTOM = 375
COLUMN_EDGES = (213, 426)
ROW_EDGES = (125, 250)
CENTER_X = (106, 319, 533)
CENTER_Y = (62, 186, 314)

WHITE = (255, 255, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
PANEL_GRAY = (200, 200, 200)
BLACK = (0, 0, 0)

FONT_NAME = "arial"
FONT_SIZE = 24
CLOSE_DELAY_MS = 5000

_MESSAGES = {
    Outcome.TIE: ("The game is a tie -- screen will close shortly", (1, 400)),
    Outcome.X_WON: ("X won the game-- screen will close shortly", (1, 400)),
    Outcome.O_WON: ("O won the game-- screen will close shortly", (1, 400)),
    Outcome.IN_PROGRESS: ("Pick a Square", (420, 440)),
}

_BOARD = [
    Line((0, BOARD_BOTTOM), (WIDTH, BOARD_BOTTOM), RED, 2),
    Rectangle(0, BOARD_BOTTOM + 1, WIDTH, HEIGHT, PANEL_GRAY),
    Line((0, ROW_EDGES[0]), (WIDTH, ROW_EDGES[0]), WHITE, 2),
    Line((0, ROW_EDGES[1]), (WIDTH, ROW_EDGES[1]), WHITE, 2),
    Line((COLUMN_EDGES[0], 0), (COLUMN_EDGES[0], BOARD_BOTTOM), WHITE, 2),
    Line((COLUMN_EDGES[1], 0), (COLUMN_EDGES[1], BOARD_BOTTOM), WHITE, 2),
]


def _band(value, edges):
    for index, edge in enumerate(edges):
        if value <= edge:
            return index
    return len(edges)


def cell_from_point(x, y):
    """Map a pixel to its (row, col) square, or None below the board."""
    if y >= BOARD_BOTTOM:
        return None
    return _band(y, ROW_EDGES), _band(x, COLUMN_EDGES)


def cell_center(row, col):
    """Return the pixel at which a square's mark is centred."""
    return CENTER_X[col], CENTER_Y[row]


def computer_move(game, rng=None):
    """Put an O on a randomly chosen empty square and return that square."""
    free = game.empty_cells()
    if not free:
        raise ValueError("no empty square left for the computer")
    rng = rng if rng is not None else random.Random()
    row, col = rng.choice(free)
    game.place_o(row, col)
    return row, col


def status_message(outcome):
    """Return the (text, position) shown under the board for an outcome."""
    return _MESSAGES[Outcome(outcome)]


def _x_mark(x, y):
    return [
        Line((x - 106, y - 62), (x + 106, y + 62), RED, 2),
        Line((x - 106, y + 62), (x + 106, y - 62), RED, 2),
    ]


def _o_mark(x, y):
    return [Circle((x, y), 62, YELLOW, 4)]


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's moves")
    return parser.parse_args(argv)


def _draw(screen, font, marks, outcome):
    screen.fill(BLACK)
    render(screen, _BOARD)
    render(screen, marks)
    text, position = status_message(outcome)
    screen.blit(font.render(text, True, WHITE), position)


def main(argv=None):
    """Run the game window until the game ends or the window is closed."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Tic-Tac-Toe")
        font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        game = TicTacToe()
        marks = []
        outcome = game.outcome()
        _draw(screen, font, marks, outcome)
        pygame.display.flip()

        done = False
        while not done and outcome is Outcome.IN_PROGRESS:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                done = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = cell_from_point(*event.pos)
                if cell is not None and game.place_x(*cell):
                    marks.extend(_x_mark(*cell_center(*cell)))
                    outcome = game.outcome()
                    if outcome is Outcome.IN_PROGRESS:
                        reply = computer_move(game, rng)
                        marks.extend(_o_mark(*cell_center(*reply)))
                        outcome = game.outcome()
            _draw(screen, font, marks, outcome)
            pygame.display.flip()

        pygame.time.wait(CLOSE_DELAY_MS)
    finally:
        pygame.quit()
    return 0