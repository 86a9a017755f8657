import pygame
import pytest

from pokelink.menu import Menu, MenuAction

RED = (255, 0, 0)


@pytest.fixture
def menu(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return Menu(pygame.Surface((1200, 750)))


def test_starts_transparent_and_fading_in(menu):
    assert menu.alpha == 0
    assert menu.fading_in is True


def test_update_steps_alpha(menu):
    menu.update()
    assert menu.alpha == 3


def test_alpha_bounces_within_limits(menu):
    seen = []
    for _ in range(400):
        menu.update()
        seen.append(menu.alpha)
    assert max(seen) == 255
    assert min(seen) == 0
    assert all(0 <= a <= 255 for a in seen)


def test_fade_direction_flips_at_top(menu):
    while menu.fading_in:
        menu.update()
    assert menu.alpha == 255
    menu.update()
    assert menu.alpha < 255


@pytest.mark.parametrize(
    "event, expected",
    [
        (pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), MenuAction.START),
        (pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=1), MenuAction.START),
        (pygame.event.Event(pygame.QUIT), MenuAction.QUIT),
        (pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0)), MenuAction.NONE),
    ],
)
def test_handle_event(menu, event, expected):
    assert menu.handle_event(event) == expected


def test_missing_assets_leave_textures_empty(menu):
    assert menu.background is None
    assert menu.prompt is None


def test_render_draws_background(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "assets").mkdir()
    bg = pygame.Surface((10, 10))
    bg.fill(RED)
    pygame.image.save(bg, str(tmp_path / "assets" / "menu.png"))
    screen = pygame.Surface((1200, 750))
    menu = Menu(screen)
    menu.render()
    assert tuple(screen.get_at((0, 0)))[:3] == RED
    assert tuple(screen.get_at((1199, 749)))[:3] == RED