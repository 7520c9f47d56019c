"""A single map tile drawn from the shared tile sheet."""

from __future__ import annotations

import pygame

from .defines import TILECX, TILECY
from .objects import GameObject


class Tile(GameObject):
    """A map cell showing one picture from the tile sheet."""

    def __init__(self, services=None) -> None:
        super().__init__(services)
        self.draw_id = 0
        self.option = 0

    def initialize(self) -> None:
        self.info.cx = float(TILECX)
        self.info.cy = float(TILECY)

    def update(self) -> int:
        self.update_rect()
        return 0

    def late_update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        bitmaps = self.services.bitmaps
        sheet = bitmaps.find_image("Tile") if bitmaps is not None else None
        if sheet is None:
            return
        scroll_x = int(self.services.scroll.scroll_x)
        scroll_y = int(self.services.scroll.scroll_y)
        surface.blit(
            sheet,
            (self.rect.left + scroll_x, self.rect.top + scroll_y),
            pygame.Rect(TILECX * self.draw_id, 0, TILECX, TILECY),
        )