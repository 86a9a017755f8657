"""On-screen board: tile drawing, mouse selection and the win screen."""

from __future__ import annotations

import random
from enum import Enum, auto

import pygame

from pokelink.board import EMPTY, TILE_TYPES, Board, Cell
from pokelink.graphics import ASSET_DIR, draw_border, draw_path, load_texture, scaled

ROWS = 8
COLS = 12
CELL_SIZE = 72
PATH_DURATION_MS = 500
WIN_DURATION_MS = 2500
WIN_RECT = pygame.Rect(168, 87, 864, 576)
SELECT_COLOR = (0, 255, 0, 255)
PATH_COLOR = (255, 0, 0, 255)


class GameState(Enum):
    """Whether the board is being played or the win screen is showing."""

    PLAYING = auto()
    WIN = auto()


class BoardView:
    """Draws a board centred on the screen and turns clicks into moves."""

    def __init__(
        self,
        screen: pygame.Surface,
        rows: int = ROWS,
        cols: int = COLS,
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.rows = rows
        self.cols = cols
        self.rng = rng
        self.cell_size = CELL_SIZE
        width, height = screen.get_size()
        self.offset_x = (width - cols * self.cell_size) // 2
        self.offset_y = (height - rows * self.cell_size) // 2
        self.board = Board(rows, cols, rng)
        self.state = GameState.PLAYING
        self.selected: Cell | None = None
        self.path: list[Cell] = []
        self.path_start = 0
        self.win_start = 0
        self.clock = pygame.time.get_ticks
        size = (self.cell_size, self.cell_size)
        self.textures = [
            scaled(load_texture(ASSET_DIR / f"pokemon{i}.png"), size) for i in range(TILE_TYPES)
        ]
        self.win_texture = scaled(load_texture(ASSET_DIR / "win.png"), WIN_RECT.size)

    def reset_board(self) -> None:
        """Deal a fresh board and return to play."""
        self.board = Board(self.rows, self.cols, self.rng)
        self.state = GameState.PLAYING
        self.selected = None
        self.path = []

    def cell_at(self, px: int, py: int) -> Cell | None:
        """The 1-based board cell under a screen point, or None."""
        if px - self.offset_x < 0 or py - self.offset_y < 0:
            return None
        row = (py - self.offset_y) // self.cell_size + 1
        col = (px - self.offset_x) // self.cell_size + 1
        if 1 <= row <= self.rows and 1 <= col <= self.cols:
            return row, col
        return None

    def click(self, px: int, py: int, now: int) -> bool:
        """Handle a click at a screen point; return True if a pair was removed."""
        cell = self.cell_at(px, py)
        if cell is None:
            return False
        if self.selected is None:
            if self.board.pokemon_at(*cell) != EMPTY:
                self.selected = cell
                self.board.selected = cell
            return False
        if not self.board.select_pokemon(*cell):
            self.selected = None
            return False
        first = self.board.selected
        self.path = self.board.find_path(*first, *cell)
        self.path_start = now
        self.board.remove_pokemon(*cell)
        self.board.remove_pokemon(*first)
        self.board.selected = None
        self.selected = None
        if self.board.is_empty():
            self.win_start = now
            self.state = GameState.WIN
        return True

    def _cell_origin(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.offset_x + (col - 1) * self.cell_size,
            self.offset_y + (row - 1) * self.cell_size,
        )

    def render(self) -> None:
        """Draw the board, or the win screen, onto the screen."""
        now = self.clock()
        if self.state is GameState.WIN:
            if self.win_texture is not None:
                self.screen.blit(self.win_texture, WIN_RECT.topleft)
            if now - self.win_start > WIN_DURATION_MS:
                self.reset_board()
            return

        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                tile = self.board.pokemon_at(row, col)
                if tile != EMPTY and self.textures[tile] is not None:
                    self.screen.blit(self.textures[tile], self._cell_origin(row, col))

        if self.selected is not None:
            x, y = self._cell_origin(*self.selected)
            draw_border(self.screen, x, y, self.cell_size, self.cell_size, SELECT_COLOR)

        if self.path and now - self.path_start < PATH_DURATION_MS:
            draw_path(
                self.screen, self.path, self.cell_size, self.offset_x, self.offset_y, PATH_COLOR
            )
        else:
            self.path = []

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to mouse presses."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.click(*event.pos, self.clock())