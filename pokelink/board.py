"""Game board: a grid of tiles that vanish in matching, connectable pairs."""

from __future__ import annotations

import random
from collections import deque

EMPTY = -1
TILE_TYPES = 12

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Cell = tuple[int, int]


class Board:
    """A rows x cols board of tiles surrounded by an empty one-cell margin.

    Playable cells use 1-based coordinates ``(row, col)``; row 0, row
    ``rows + 1``, column 0 and column ``cols + 1`` form the always-empty border
    that paths may run through.
    """

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("board dimensions must be positive")
        if (rows * cols) % 2:
            raise ValueError("board must have an even number of cells")
        self.rows = rows
        self.cols = cols
        self.rng = rng if rng is not None else random.Random()
        self.selected: Cell | None = None
        self._grid = [[EMPTY] * (cols + 2) for _ in range(rows + 2)]
        self.initialize()

    def initialize(self) -> None:
        """Fill the board with shuffled pairs of tile types."""
        pairs = (self.rows * self.cols) // 2
        tiles = [i % TILE_TYPES for i in range(pairs) for _ in range(2)]
        self.rng.shuffle(tiles)
        it = iter(tiles)
        for row in self._grid[1 : self.rows + 1]:
            row[1 : self.cols + 1] = [next(it) for _ in range(self.cols)]
        self.selected = None

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x <= self.rows + 1 and 0 <= y <= self.cols + 1):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def select_pokemon(self, x: int, y: int) -> bool:
        """Select a cell; return True when it completes a removable pair.

        On success the first cell stays in ``selected``; otherwise the
        selection is updated or cleared as appropriate.
        """
        self._check(x, y)
        if self.selected is None:
            self.selected = (x, y)
            return False
        sx, sy = self.selected
        if (sx, sy) == (x, y):
            self.selected = None
            return False
        if self._grid[x][y] != self._grid[sx][sy] or not self.can_connect(sx, sy, x, y):
            self.selected = None
            return False
        return True

    def can_connect(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Whether the two cells are linked by a path of at most three segments."""
        return 2 <= len(self.find_path(x1, y1, x2, y2)) <= 4

    def find_path(self, x1: int, y1: int, x2: int, y2: int) -> list[Cell]:
        """Return the corner points of a fewest-segment path from the first cell to the second.

        The path runs through empty cells only, its endpoints excepted. An
        empty list means no path exists.
        """
        self._check(x1, y1)
        self._check(x2, y2)
        start, goal = (x1, y1), (x2, y2)

        def free(cell: Cell) -> bool:
            return cell in (start, goal) or self._grid[cell[0]][cell[1]] == EMPTY

        parent: dict[Cell, Cell | None] = {goal: None}
        queue: deque[Cell] = deque([goal])
        while queue:
            u = queue.popleft()
            if u == start:
                break
            for dx, dy in _DIRECTIONS:
                nx, ny = u[0] + dx, u[1] + dy
                while 0 <= nx <= self.rows + 1 and 0 <= ny <= self.cols + 1 and free((nx, ny)):
                    if (nx, ny) not in parent:
                        parent[(nx, ny)] = u
                        queue.append((nx, ny))
                    nx += dx
                    ny += dy

        if start not in parent:
            return []
        path: list[Cell] = []
        cell: Cell | None = start
        while cell is not None:
            path.append(cell)
            cell = parent[cell]
        return path

    def pokemon_at(self, x: int, y: int) -> int:
        """The tile type at a cell, or -1 if it is empty."""
        self._check(x, y)
        return self._grid[x][y]

    def remove_pokemon(self, x: int, y: int) -> None:
        """Clear a cell."""
        self._check(x, y)
        self._grid[x][y] = EMPTY

    def is_empty(self) -> bool:
        """Whether every playable cell has been cleared."""
        return all(
            value == EMPTY
            for row in self._grid[1 : self.rows + 1]
            for value in row[1 : self.cols + 1]
        )