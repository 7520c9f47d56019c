"""Game scenes (logo, menu, stage) and the manager that switches between them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

import pygame

from .button import Button
from .defines import WINCX, WINCY, ObjId, SceneId
from .keys import VK_RETURN
from .monster import Monster
from .objects import Services, create_object
from .player import Player

LOGO_IMAGE = "../Image/Logo/Logo.bmp"
MENU_IMAGES = {
    "Menu": "../Image/Menu/Menu.bmp",
    "Start": "../Image/Button/Start.bmp",
    "Edit": "../Image/Button/Edit.bmp",
    "Exit": "../Image/Button/Exit.bmp",
}
STAGE_IMAGES = {
    "Ground": "../Image/Ground.bmp",
    "Tile": "../Image/Edit/Tile.bmp",
}

MENU_BUTTONS = (("Start", 200.0, 400.0), ("Edit", 400.0, 400.0), ("Exit", 600.0, 400.0))
MONSTER_COUNT = 5
GROUND_SIZE = (1920, 1280)


class Scene(ABC):
    """One screen of the game with its own per-frame behaviour."""

    def __init__(self, services: Services) -> None:
        self.services = services

    @abstractmethod
    def initialize(self) -> None:
        """Load resources and create the scene's objects."""

    @abstractmethod
    def update(self) -> int:
        """Advance one frame."""

    @abstractmethod
    def late_update(self) -> None:
        """Work done after the frame's updates."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene."""

    @abstractmethod
    def release(self) -> None:
        """Free what the scene owns."""


def _draw_image(surface: pygame.Surface, services: Services, key: str,
                dest: tuple[int, int], size: tuple[int, int]) -> None:
    bitmaps = services.bitmaps
    image = bitmaps.find_image(key) if bitmaps is not None else None
    if image is not None:
        surface.blit(image, dest, pygame.Rect(0, 0, *size))


class Logo(Scene):
    """Title picture; Return moves on to the menu."""

    def initialize(self) -> None:
        self.services.bitmaps.insert_bmp(LOGO_IMAGE, "Logo")

    def update(self) -> int:
        if self.services.keys.key_pressing(VK_RETURN):
            self.services.scenes.scene_change(SceneId.MENU)
        return 0

    def late_update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        _draw_image(surface, self.services, "Logo", (0, 0), (WINCX, WINCY))

    def release(self) -> None:
        pass


class Menu(Scene):
    """Background with Start, Edit and Exit buttons."""

    def initialize(self) -> None:
        for key, path in MENU_IMAGES.items():
            self.services.bitmaps.insert_bmp(path, key)
        for key, x, y in MENU_BUTTONS:
            button = create_object(Button, self.services, x, y)
            button.frame_key = key
            self.services.objects.add_object(ObjId.BUTTON, button)

    def update(self) -> int:
        self.services.objects.update()
        return 0

    def late_update(self) -> None:
        self.services.objects.late_update()

    def render(self, surface: pygame.Surface) -> None:
        _draw_image(surface, self.services, "Menu", (0, 0), (WINCX, WINCY))
        self.services.objects.render(surface)

    def release(self) -> None:
        self.services.objects.delete_object(ObjId.BUTTON)


class Stage(Scene):
    """The playing field: the player and a few randomly placed monsters."""

    def __init__(self, services: Services, rng: random.Random | None = None) -> None:
        super().__init__(services)
        self.rng = rng if rng is not None else random.Random()

    def initialize(self) -> None:
        for key, path in STAGE_IMAGES.items():
            self.services.bitmaps.insert_bmp(path, key)
        objects = self.services.objects
        objects.add_object(ObjId.PLAYER, create_object(Player, self.services))
        for _ in range(MONSTER_COUNT):
            x = float(self.rng.randrange(WINCX))
            y = float(self.rng.randrange(WINCY))
            objects.add_object(ObjId.MONSTER, create_object(Monster, self.services, x, y))

    def update(self) -> int:
        self.services.objects.update()
        return 0

    def late_update(self) -> None:
        self.services.objects.late_update()
        if self.services.tiles is not None:
            self.services.tiles.late_update()

    def render(self, surface: pygame.Surface) -> None:
        scroll = self.services.scroll
        dest = (int(scroll.scroll_x), int(scroll.scroll_y))
        _draw_image(surface, self.services, "Ground", dest, GROUND_SIZE)
        self.services.objects.render(surface)

    def release(self) -> None:
        pass


DEFAULT_SCENES: dict[SceneId, Callable[[Services], Scene]] = {
    SceneId.LOGO: Logo,
    SceneId.MENU: Menu,
    SceneId.STAGE: Stage,
}


class SceneManager:
    """Holds the active scene and swaps it when another is requested."""

    def __init__(
        self,
        services: Services,
        factories: Mapping[SceneId, Callable[[Services], Scene]] | None = None,
    ) -> None:
        self.services = services
        self.factories = dict(DEFAULT_SCENES if factories is None else factories)
        self.scene: Scene | None = None
        self.current = SceneId.LOGO
        self.previous = SceneId.END

    def scene_change(self, scene_id: SceneId) -> None:
        """Switch to the scene unless it is already active."""
        if scene_id == self.previous:
            self.current = scene_id
            return
        factory = self.factories.get(scene_id)
        if factory is None:
            raise ValueError(f"no scene available for {scene_id!r}")
        self.current = scene_id
        if self.scene is not None:
            old, self.scene = self.scene, None
            old.release()
        self.scene = factory(self.services)
        self.scene.initialize()
        self.previous = scene_id

    def _active(self) -> Scene:
        if self.scene is None:
            raise RuntimeError("no active scene")
        return self.scene

    def update(self) -> None:
        self._active().update()

    def late_update(self) -> None:
        self._active().late_update()

    def render(self, surface: pygame.Surface) -> None:
        self._active().render(surface)

    def release(self) -> None:
        if self.scene is not None:
            old, self.scene = self.scene, None
            old.release()