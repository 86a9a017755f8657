"""Window, music, title screen and main loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from pokelink.boardview import BoardView
from pokelink.graphics import ASSET_DIR, load_texture, scaled
from pokelink.menu import Menu, MenuAction

TITLE = "Pokemon"
WIDTH = 1200
HEIGHT = 750
MUSIC_FILE = Path("sound") / "1.mp3"
MENU_FRAME_MS = 16


class GameInitError(RuntimeError):
    """The window, sound or assets could not be set up."""


class Game:
    """The running game: owns the window and the board view."""

    def __init__(self) -> None:
        self.screen: pygame.Surface | None = None
        self.board_view: BoardView | None = None
        self.background: pygame.Surface | None = None
        self.running = False

    def init(self, title: str, width: int, height: int) -> bool:
        """Open the window, start the music and show the title screen.

        Returns False if the player closed the window from the title screen;
        raises GameInitError if setup fails.
        """
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise GameInitError(f"could not create window: {exc}") from exc
        pygame.display.set_caption(title)

        try:
            pygame.mixer.init(44100, -16, 2, 2048)
            pygame.mixer.music.load(str(MUSIC_FILE))
        except pygame.error as exc:
            raise GameInitError(f"could not start sound: {exc}") from exc
        pygame.mixer.music.play(-1)

        menu = Menu(self.screen)
        in_menu = True
        while in_menu:
            for event in pygame.event.get():
                action = menu.handle_event(event)
                if action is MenuAction.START:
                    in_menu = False
                elif action is MenuAction.QUIT:
                    self.cleanup()
                    return False
            menu.update()
            menu.render()
            pygame.display.flip()
            pygame.time.delay(MENU_FRAME_MS)

        self.board_view = BoardView(self.screen)
        self.background = scaled(load_texture(ASSET_DIR / "background.png"), (width, height))
        if self.background is None:
            raise GameInitError("could not load background")

        self.running = True
        return True

    def run(self) -> None:
        """Process events and redraw until the window is closed."""
        while self.running:
            self.process_events()
            self.render()

    def process_events(self) -> None:
        """Handle pending events: quit, or pass them to the board."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif self.board_view is not None:
                self.board_view.handle_event(event)

    def render(self) -> None:
        """Draw one frame."""
        if self.screen is None:
            return
        self.screen.fill((0, 0, 0))
        if self.background is not None:
            self.screen.blit(self.background, (0, 0))
        if self.board_view is not None:
            self.board_view.render()
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def cleanup(self) -> None:
        """Release the board, stop the sound and shut the display down."""
        self.background = None
        self.board_view = None
        self.running = False
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()
        pygame.quit()
        self.screen = None


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; return the process exit status."""
    game = Game()
    try:
        if not game.init(TITLE, WIDTH, HEIGHT):
            return -1
    except GameInitError as exc:
        print(exc, file=sys.stderr)
        game.cleanup()
        return -1
    game.run()
    game.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())