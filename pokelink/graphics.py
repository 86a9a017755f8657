"""Drawing helpers: texture loading, selection borders and connection paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

import pygame

ASSET_DIR = Path("assets")

Color = tuple[int, int, int] | tuple[int, int, int, int]

log = logging.getLogger(__name__)


def load_texture(path: str | Path) -> pygame.Surface | None:
    """Load an image file, or return None if it cannot be read."""
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("could not load %s: %s", path, exc)
        return None
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def scaled(texture: pygame.Surface | None, size: tuple[int, int]) -> pygame.Surface | None:
    """Scale a texture to the given size, passing None through."""
    if texture is None:
        return None
    return pygame.transform.scale(texture, size)


def draw_border(surface: pygame.Surface, x: int, y: int, w: int, h: int, color: Color) -> None:
    """Draw a one-pixel rectangle outline."""
    pygame.draw.rect(surface, color, pygame.Rect(x, y, w, h), width=1)


def path_points(
    path: Iterable[tuple[int, int]], cell_size: int, offset_x: int, offset_y: int
) -> list[tuple[int, int]]:
    """Screen coordinates of the centres of the given 1-based board cells."""
    half = cell_size // 2
    return [
        (offset_x + (col - 1) * cell_size + half, offset_y + (row - 1) * cell_size + half)
        for row, col in path
    ]


def draw_path(
    surface: pygame.Surface,
    path: Sequence[tuple[int, int]],
    cell_size: int,
    offset_x: int,
    offset_y: int,
    color: Color,
) -> None:
    """Draw straight lines joining the centres of consecutive path cells."""
    for start, end in pairwise(path_points(path, cell_size, offset_x, offset_y)):
        pygame.draw.line(surface, color, start, end)