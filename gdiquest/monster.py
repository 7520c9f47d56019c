"""A stationary monster drawn from its sprite."""

from __future__ import annotations

import pygame

from .defines import DEAD, NOEVENT, RenderId
from .objects import GameObject

MONSTER_IMAGE = "../Image/Monster/Monster.bmp"
_COLOUR_KEY = (255, 255, 255)


def _transparent_blit(
    surface: pygame.Surface,
    image: pygame.Surface,
    dest: tuple[int, int],
    area: pygame.Rect,
    colour_key: tuple[int, int, int],
) -> None:
    piece = pygame.Surface(area.size)
    piece.blit(image, (0, 0), area)
    piece.set_colorkey(colour_key)
    surface.blit(piece, dest)


class Monster(GameObject):
    """An enemy that sits where it was placed."""

    def initialize(self) -> None:
        bitmaps = self.services.bitmaps
        if bitmaps is not None:
            bitmaps.insert_bmp(MONSTER_IMAGE, "Monster")
        self.info.cx = 300.0
        self.info.cy = 300.0
        self.speed = 3.0
        self.render_id = RenderId.GAMEOBJECT

    def update(self) -> int:
        if self.dead:
            return DEAD
        self.update_rect()
        return NOEVENT

    def late_update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        bitmaps = self.services.bitmaps
        image = bitmaps.find_image("Monster") if bitmaps is not None else None
        if image is None:
            return
        scroll_x = int(self.services.scroll.scroll_x)
        scroll_y = int(self.services.scroll.scroll_y)
        _transparent_blit(
            surface,
            image,
            (self.rect.left + scroll_x, self.rect.top + scroll_y),
            pygame.Rect(0, 0, int(self.info.cx), int(self.info.cy)),
            _COLOUR_KEY,
        )