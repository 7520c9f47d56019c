"""Top-level game object and the program's main loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from .bitmaps import BitmapManager
from .defines import WINCX, WINCY, SceneId
from .lines import LineManager
from .object_manager import ObjectManager
from .objects import Services
from .scenes import SceneManager

BACK_IMAGE = "../Image/Back.bmp"
TITLE = "DefaultWindow"
FRAME_INTERVAL_MS = 10


class MainGame:
    """Wires the managers together and runs one frame at a time."""

    def __init__(
        self, services: Services | None = None, screen: pygame.Surface | None = None
    ) -> None:
        self.services = services if services is not None else Services()
        self.screen = screen
        self.fps = 0
        self.fps_text = ""
        self.time = self.services.clock()
        self._back: pygame.Surface | None = None

    def initialize(self) -> None:
        """Create missing managers, load the back buffer and show the logo."""
        services = self.services
        if services.bitmaps is None:
            services.bitmaps = BitmapManager()
        if services.objects is None:
            services.objects = ObjectManager()
        if services.lines is None:
            services.lines = LineManager()
        if services.scenes is None:
            services.scenes = SceneManager(services)
        services.bitmaps.insert_bmp(BACK_IMAGE, "Back")
        services.scenes.scene_change(SceneId.LOGO)

    def update(self) -> None:
        self.services.scenes.update()

    def late_update(self) -> None:
        self.services.keys.update()
        self.services.scenes.late_update()
        self.services.scroll.lock()

    def render(self) -> None:
        """Count frames, draw the scene to the back buffer and show it."""
        self.fps += 1
        now = self.services.clock()
        if self.time + 1000 < now:
            self.fps_text = f"FPS : {self.fps}"
            if pygame.display.get_init():
                pygame.display.set_caption(self.fps_text)
            self.fps = 0
            self.time = now
        back = self.services.bitmaps.find_image("Back")
        if back is None:
            if self._back is None:
                self._back = pygame.Surface((WINCX, WINCY))
            back = self._back
        self.services.scenes.render(back)
        if self.screen is not None:
            self.screen.blit(back, (0, 0), pygame.Rect(0, 0, WINCX, WINCY))

    def release(self) -> None:
        """Drop every scene, object, line and image."""
        services = self.services
        if services.tiles is not None:
            services.tiles.release()
        if services.scenes is not None:
            services.scenes.release()
        if services.objects is not None:
            services.objects.release()
        if services.lines is not None:
            services.lines.release()
        if services.bitmaps is not None:
            services.bitmaps.release()
        services.scroll.scroll_x = 0.0
        services.scroll.scroll_y = 0.0


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="gdiquest", description="Run the game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINCX, WINCY))
        pygame.display.set_caption(TITLE)
        game = MainGame(screen=screen)
        try:
            game.initialize()
        except FileNotFoundError as exc:
            print(f"gdiquest: {exc}", file=sys.stderr)
            return 1
        last = game.services.clock()
        running = True
        while running and game.services.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            now = game.services.clock()
            if last + FRAME_INTERVAL_MS < now:
                game.update()
                game.late_update()
                game.render()
                pygame.display.flip()
                last = game.services.clock()
            else:
                pygame.time.wait(1)
        game.release()
        return 0
    finally:
        pygame.quit()