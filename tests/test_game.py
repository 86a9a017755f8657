import random

import pygame
import pytest

from pokelink.boardview import BoardView
from pokelink.game import Game, GameInitError, main


@pytest.fixture(autouse=True)
def _headless(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    yield
    pygame.quit()


def make_game():
    game = Game()
    game.screen = pygame.Surface((1200, 750))
    game.board_view = BoardView(game.screen, 1, 2, random.Random(3))
    game.running = True
    return game


def cell_centre(view, row, col):
    return (
        view.offset_x + (col - 1) * view.cell_size + view.cell_size // 2,
        view.offset_y + (row - 1) * view.cell_size + view.cell_size // 2,
    )


def test_new_game_is_not_running():
    game = Game()
    assert game.running is False
    assert game.board_view is None


def test_init_without_sound_file_raises():
    game = Game()
    with pytest.raises(GameInitError):
        game.init("Pokemon", 320, 200)
    game.cleanup()
    assert game.screen is None


def test_main_fails_without_assets():
    assert main([]) == -1


def test_quit_event_stops_game():
    pygame.display.init()
    game = make_game()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.process_events()
    assert game.running is False


def test_mouse_event_reaches_board():
    pygame.display.init()
    game = make_game()
    pygame.event.clear()
    pos = cell_centre(game.board_view, 1, 1)
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
    game.process_events()
    assert game.board_view.selected == (1, 1)
    assert game.running is True


def test_render_draws_board_selection():
    game = make_game()
    view = game.board_view
    view.clock = lambda: 0
    view.click(*cell_centre(view, 1, 2), 0)
    game.render()
    assert tuple(game.screen.get_at((view.offset_x + view.cell_size, view.offset_y)))[:3] == (0, 255, 0)


def test_cleanup_releases_everything():
    game = make_game()
    game.cleanup()
    assert game.board_view is None
    assert game.screen is None
    assert game.running is False