"""A square that follows the pointer in place of the system cursor."""

from __future__ import annotations

import pygame

from .defines import NOEVENT
from .objects import GameObject

_FILL = (255, 255, 255)
_OUTLINE = (0, 0, 0)


class Mouse(GameObject):
    """Tracks the cursor position every frame."""

    def initialize(self) -> None:
        self.info.cx = 20.0
        self.info.cy = 20.0

    def update(self) -> int:
        x, y = self.services.cursor()
        self.info.x = float(x)
        self.info.y = float(y)
        self.update_rect()
        if pygame.display.get_init():
            pygame.mouse.set_visible(False)
        return NOEVENT

    def late_update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(
            self.rect.left,
            self.rect.top,
            self.rect.right - self.rect.left,
            self.rect.bottom - self.rect.top,
        )
        pygame.draw.rect(surface, _FILL, rect)
        pygame.draw.rect(surface, _OUTLINE, rect, 1)