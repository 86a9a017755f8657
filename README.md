# pokelink

A small tile-matching puzzle game. The board is a grid of 8 rows by 12
columns filled with pairs of creature tiles. Click two identical tiles to
remove them. This works only when they can be joined by a path of straight
segments with at most two turns that passes through empty cells. The path may
run along the empty border around the board. Clear every tile to win. After a
victory screen of about two and a half seconds, a fresh board is dealt.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed along with it.

## Playing

```
pokelink
```

`python -m pokelink.game` does the same thing.

A title screen appears first. Press any key or click to start. Click a tile
to select it and it is outlined in green. Click a matching tile that can be
connected to remove the pair, and the connecting path flashes red for half a
second. Any other second click clears the selection, including a click on a
tile that does not match, on an empty cell, or on the selected tile again.
Close the window to quit.

The game loads its images from an `assets/` directory and its music from
`sound/1.mp3`. Both are looked up relative to the working directory:

- `assets/menu.png` and `assets/key.png`: the title screen and its pulsing
  "press any key" prompt
- `assets/background.png`: the playing background
- `assets/pokemon0.png` to `assets/pokemon11.png`: the twelve tile images
- `assets/win.png`: the victory screen

If the window, the music or the background image cannot be set up, the
command prints the error and exits with status -1. It does the same when the
window is closed from the title screen. If any other image is missing, a
warning is logged and the image is simply not drawn.

## Using the board logic

The rules live in `pokelink.board.Board`, which can be used without any
display:

```python
import random
from pokelink.board import Board

board = Board(8, 12, random.Random(1))
print(board.pokemon_at(1, 1))          # tile type at row 1, column 1, or -1 if empty
path = board.find_path(1, 1, 1, 2)     # list of (row, col) corners, or []
print(board.can_connect(1, 1, 1, 2))   # True for paths of one to three segments
board.remove_pokemon(1, 1)
print(board.is_empty())
```

Rows and columns are numbered from 1. Row 0, column 0, and the row and column
just past the last ones make up the always-empty border that paths may use.
Coordinates outside the board plus its border raise `IndexError`. A board
with a non-positive size or an odd number of cells raises `ValueError`.

`Board.select_pokemon(x, y)` follows a two-click selection. The first call
stores the cell in `board.selected`. A second call returns `True` when it
completes a matching, connectable pair, and otherwise clears the selection.

The screen-side pieces are `pokelink.boardview.BoardView`, which turns clicks
into moves with `click(px, py, now)` and `cell_at(px, py)`, and
`pokelink.menu.Menu`. Drawing helpers are in `pokelink.graphics`.

## What it does not do

There is no score, timer, hint or shuffle when no moves remain. A board can
therefore reach a state with no removable pair, and the only way out is to
close the window. The board size is fixed at 8 by 12 when the game is started
from the command.

## Running the tests

```
pip install ".[test]"
pytest
```