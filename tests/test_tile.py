import pygame

from gdiquest.bitmaps import BitmapManager
from gdiquest.defines import TILECX, TILECY
from gdiquest.objects import Services, create_object
from gdiquest.tile import Tile

RED = (255, 0, 0)
GREEN = (0, 255, 0)


def _sheet(path):
    sheet = pygame.Surface((TILECX * 2, TILECY))
    sheet.fill(RED, pygame.Rect(0, 0, TILECX, TILECY))
    sheet.fill(GREEN, pygame.Rect(TILECX, 0, TILECX, TILECY))
    return sheet


def _services():
    bitmaps = BitmapManager(_sheet)
    bitmaps.insert_bmp("Tile.bmp", "Tile")
    return Services(bitmaps=bitmaps)


def test_tile_has_tile_size_and_rect():
    tile = create_object(Tile, Services(), TILECX / 2, TILECY / 2)
    assert (tile.info.cx, tile.info.cy) == (TILECX, TILECY)
    assert tile.update() == 0
    assert (tile.rect.left, tile.rect.top) == (0, 0)
    assert (tile.rect.right, tile.rect.bottom) == (TILECX, TILECY)


def test_render_uses_draw_id_slice():
    tile = create_object(Tile, _services(), TILECX / 2, TILECY / 2)
    tile.draw_id = 1
    tile.update()
    surface = pygame.Surface((TILECX * 2, TILECY * 2))
    tile.render(surface)
    assert tuple(surface.get_at((1, 1)))[:3] == GREEN


def test_render_applies_scroll():
    services = _services()
    services.scroll.scroll_x = float(TILECX)
    tile = create_object(Tile, services, TILECX / 2, TILECY / 2)
    tile.update()
    surface = pygame.Surface((TILECX * 2, TILECY))
    tile.render(surface)
    assert tuple(surface.get_at((TILECX + 1, 1)))[:3] == RED
    assert tuple(surface.get_at((1, 1)))[:3] == (0, 0, 0)


def test_draw_id_and_option_defaults():
    tile = Tile(Services())
    assert (tile.draw_id, tile.option) == (0, 0)