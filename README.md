# minesweeper

A small Minesweeper game played in a pygame window.

The board is a grid of 20-pixel tiles filling a 500 × 500 area. Bombs are
placed at random according to the difficulty. Easy covers 20 % of the tiles,
medium covers 45 % and hard covers 60 %.

## Installing

```
pip install .
```

## Playing

```
minesweeper
minesweeper --difficulty easy
```

`--difficulty` takes `easy`, `medium` or `hard`. The default is `medium`.

- **Left click** uncovers a tile. The tile then shows how many bombs are next
  to it. If a tile has no bombs next to it, its neighbours are uncovered too,
  and this spreads across the open area. If you click a bomb, every bomb on
  the board blows up.
- **Right click** marks a covered tile with a red `X`, or removes the mark. A
  left click does not uncover a marked tile.
- **Middle click** on an uncovered tile that is not a bomb uncovers every
  unmarked tile around it.
- **R** starts a new board.
- **S** doubles the window size and starts a new board.

## What it does not do

The game does not detect a win. It does not stop after a bomb goes off. It
has no timer, no bomb counter and no score. To play again, press **R**.

## Using it as a library

The game logic works without a window:

```python
import random

from minesweeper.board import Board, surrounding_tiles
from minesweeper.tile import Difficulty, make_tiles, place_bombs

board = Board(200, 200, Difficulty.EASY, random.Random(1))
print(board.size())

tiles = make_tiles(100, 100, 10)
place_bombs(Difficulty.MEDIUM, tiles, random.Random(7))
print(len(surrounding_tiles(0, 0, tiles)))
```

Main pieces:

- `minesweeper.tile`:
  - `Tile` is a single tile. `Tile.update(button, surrounding)` applies a click to it.
  - `TileState` and `Difficulty` are the tile states and the difficulty levels.
  - `make_tiles`, `place_bombs` and `explode_all` build and change a grid of tiles.
- `minesweeper.board`:
  - `Board` holds the grid. `Board.update(mouse)` applies a settled click.
  - `match_tile`, `surrounding_tiles` and `clear_zero_surrounds` work on a grid of tiles.
- `minesweeper.input`: `Input` is a small state machine. A click settles when its `MouseButton` is released.
- `minesweeper.game`:
  - `Game` ties a board to the mouse input. Drive it with `Game.update(pressed, position)` and `Game.handle_key(key)`.
  - `main` runs the pygame window.
- `minesweeper.colors`: the palette. `num_color` gives the colour for each bomb count.

## Running the tests

```
pip install ".[test]"
pytest
```