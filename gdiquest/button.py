"""Menu buttons that switch scenes or quit when clicked."""

from __future__ import annotations

import pygame

from .defines import NOEVENT, RenderId, SceneId
from .keys import VK_LBUTTON
from .objects import GameObject

_COLOUR_KEY = (255, 255, 255)

_SCENE_FOR_KEY = {
    "Start": SceneId.STAGE,
    "Edit": SceneId.EDIT,
}


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


class Button(GameObject):
    """A clickable image; its frame key names both the picture and the action."""

    def __init__(self, services=None) -> None:
        super().__init__(services)
        self.draw_id = 0

    def initialize(self) -> None:
        self.info.cx = 150.0
        self.info.cy = 150.0
        self.render_id = RenderId.UI

    def update(self) -> int:
        self.update_rect()
        return NOEVENT

    def late_update(self) -> None:
        x, y = self.services.cursor()
        if not self.rect.contains(x, y):
            self.draw_id = 0
            return
        if self.services.keys.key_pressing(VK_LBUTTON):
            scene_id = _SCENE_FOR_KEY.get(self.frame_key)
            if scene_id is not None:
                self.services.scenes.scene_change(scene_id)
            elif self.frame_key == "Exit":
                self.services.running = False
            return
        self.draw_id = 1

    def render(self, surface: pygame.Surface) -> None:
        bitmaps = self.services.bitmaps
        image = bitmaps.find_image(self.frame_key) if bitmaps is not None else None
        if image is None:
            return
        width = int(self.info.cx)
        height = int(self.info.cy)
        _transparent_blit(
            surface,
            image,
            (self.rect.left, self.rect.top),
            pygame.Rect(width * self.draw_id, 0, width, height),
            _COLOUR_KEY,
        )