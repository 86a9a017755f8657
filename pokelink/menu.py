"""Title screen with a pulsing "press any key" prompt."""

from __future__ import annotations

import logging
from enum import Enum

import pygame

from pokelink.graphics import ASSET_DIR, load_texture, scaled

ALPHA_STEP = 3
MAX_ALPHA = 255
KEY_RECT = pygame.Rect(400, 570, 400, 100)

log = logging.getLogger(__name__)


class MenuAction(Enum):
    """What the game should do after a menu event."""

    NONE = 0
    START = 1
    QUIT = 2


class Menu:
    """The title screen."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.alpha = 0
        self.fading_in = True
        self.background = scaled(load_texture(ASSET_DIR / "menu.png"), screen.get_size())
        self.prompt = scaled(load_texture(ASSET_DIR / "key.png"), KEY_RECT.size)
        if self.background is None:
            log.warning("menu background is missing")
        if self.prompt is None:
            log.warning("menu prompt is missing")

    def update(self) -> None:
        """Advance the prompt's fade by one step, bouncing between 0 and 255."""
        if self.fading_in:
            self.alpha += ALPHA_STEP
            if self.alpha >= MAX_ALPHA:
                self.alpha = MAX_ALPHA
                self.fading_in = False
        else:
            self.alpha -= ALPHA_STEP
            if self.alpha <= 0:
                self.alpha = 0
                self.fading_in = True

    def render(self) -> None:
        """Draw the menu onto the screen."""
        self.screen.fill((0, 0, 0))
        if self.background is not None:
            self.screen.blit(self.background, (0, 0))
        if self.prompt is not None:
            self.prompt.set_alpha(self.alpha)
            self.screen.blit(self.prompt, KEY_RECT.topleft)

    def handle_event(self, event: pygame.event.Event) -> MenuAction:
        """Any key or mouse press starts the game; closing the window quits."""
        if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
            return MenuAction.START
        if event.type == pygame.QUIT:
            return MenuAction.QUIT
        return MenuAction.NONE