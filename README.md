# shapegames

A handful of small games and drawing scenes built on pygame.

## Installing

```
pip install .
```

## Games

### Tic-tac-toe

```
shapegames-tictactoe [--seed N]
```

You play X and click a square with the left mouse button. Clicks in the grey
panel below the board are ignored. The computer answers with O in a random
free square; `--seed` makes its choices repeatable. When somebody completes a
row, column or diagonal, or the board fills up, the result is shown under the
board and the window closes five seconds later. Closing the window ends the
game early.

### Memory (concentration)

```
shapegames-memory [--seed N]
```

A 5×5 grid hides twelve pairs of coloured shapes: circle, triangle,
rectangle, diamond, oval, octagon, star, cross, arrow, hexagon, pentagon and
heart. `--seed` fixes the layout. The bottom-right cell shows how many pairs
are matched and how many are left. Click two cells to reveal them. A matching
pair stays on the board, crossed out. A pair that does not match is hidden
again after 1.5 seconds, or as soon as you click again. Find all twelve pairs
and "YOU WIN!" is shown for three seconds before the window closes. Press
Escape or close the window to quit.

### Drawing demos

```
shapegames-labs {house,pointer,quadrants,ship}
```

Runs one demo scene, chosen by its name:

- `house` — a house under a sun on a sky-blue background, shown for five
  seconds.
- `pointer` — a green circle you move with the arrow keys, and with U, D, R
  and L for the diagonals (up-left, down-right, up-right, down-left); a
  yellow line shows which way it last moved.
- `quadrants` — a red circle that jumps to where you click; the background
  and text colours change with the screen quadrant clicked, and the position
  is printed in the top-left corner.
- `ship` — a small spaceship sprite drawn in the middle of the screen.

Escape or closing the window leaves the `pointer`, `quadrants` and `ship`
scenes.

## Using the game logic

The rules are kept apart from drawing, so they work without a window:

```python
from shapegames.tictactoe import TicTacToe

game = TicTacToe()
game.place_x(0, 0)
game.place_o(1, 1)
print(game.outcome())       # Outcome.IN_PROGRESS
print(game.empty_cells())
```

`place_x` and `place_o` return `False` for a square that is already taken
and raise `IndexError` for one off the board. `outcome()` returns an
`Outcome`: `X_WON`, `O_WON`, `TIE` or `IN_PROGRESS`.

```python
import random
from shapegames.memory import MemoryBoard, MemoryGame

board = MemoryBoard()
board.fill_random(12, random.Random(7))
game = MemoryGame(board)
game.click(0, 0, now=0.0)
game.click(0, 1, now=0.1)
game.update(now=2.0)
print(game.revealed(), game.won())
```

`shapegames.tictactoe_app` also offers `cell_from_point`, `cell_center`,
`computer_move` and `status_message`, the pieces the tic-tac-toe window is
built from.

`shapegames.shapes` turns shapes, the grid and the status cell into plain
drawing primitives (`Circle`, `Triangle`, `Rectangle`, `Ellipse`, `Line`);
`cell_at` maps a pixel to a grid cell, and `render` draws primitives onto a
pygame surface. `shapegames.labs` exposes the demo pieces the same way:
`house_scene`, `Pointer` and `Direction`, `pointer_line`, `quadrant_colors`,
`coordinate_text` and `ship_primitives`.

## What it does not do

The computer opponent in tic-tac-toe picks squares at random and does not
play to win. Neither game keeps scores or saves anything between runs.

## Running the tests

```
pip install .[test]
pytest
```