import pygame

from gdiquest.defines import NOEVENT
from gdiquest.mouse import Mouse
from gdiquest.objects import Services, create_object


def test_update_follows_cursor():
    mouse = create_object(Mouse, Services(cursor=lambda: (40, 50)))
    assert mouse.update() == NOEVENT
    assert (mouse.info.x, mouse.info.y) == (40.0, 50.0)
    assert mouse.rect.right - mouse.rect.left == int(mouse.info.cx)
    assert (mouse.rect.left + mouse.rect.right) / 2 == 40


def test_cursor_moves_between_frames():
    positions = iter([(10, 10), (70, 30)])
    mouse = create_object(Mouse, Services(cursor=lambda: next(positions)))
    mouse.update()
    mouse.update()
    assert (mouse.info.x, mouse.info.y) == (70.0, 30.0)


def test_render_draws_square():
    mouse = create_object(Mouse, Services(cursor=lambda: (40, 40)))
    mouse.update()
    surface = pygame.Surface((80, 80))
    surface.fill((10, 20, 30))
    mouse.render(surface)
    assert tuple(surface.get_at((40, 40)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((mouse.rect.left, 40)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((0, 0)))[:3] == (10, 20, 30)