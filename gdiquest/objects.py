"""Base game object, shared services and object construction."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from .defines import Direction, Frame, Info, Rect, RenderId
from .keys import KeyManager
from .scroll import ScrollManager


def _tick_count() -> int:
    return int(time.monotonic() * 1000)


def _pygame_cursor() -> tuple[int, int]:
    x, y = pygame.mouse.get_pos()
    return x, y


@dataclass
class Services:
    """The managers and system hooks shared by objects and scenes."""

    keys: KeyManager = field(default_factory=KeyManager)
    scroll: ScrollManager = field(default_factory=ScrollManager)
    bitmaps: Any = None
    objects: Any = None
    lines: Any = None
    tiles: Any = None
    scenes: Any = None
    cursor: Callable[[], tuple[int, int]] = _pygame_cursor
    clock: Callable[[], int] = _tick_count
    running: bool = True


class GameObject(ABC):
    """Something in the world with a position, size and per-frame behaviour."""

    def __init__(self, services: Services | None = None) -> None:
        self.services = services if services is not None else Services()
        self.target: GameObject | None = None
        self.info = Info()
        self.rect = Rect()
        self.direction = Direction.END
        self.frame = Frame()
        self.render_id = RenderId.END
        self.speed = 0.0
        self.distance = 0.0
        self.angle = 0.0
        self.dead = False
        self.frame_key = ""

    def set_pos(self, x: float, y: float) -> None:
        self.info.x = x
        self.info.y = y

    def move_x(self, dx: float) -> None:
        self.info.x += dx

    def move_y(self, dy: float) -> None:
        self.info.y += dy

    @abstractmethod
    def initialize(self) -> None:
        """Set size, speed and other starting values."""

    @abstractmethod
    def update(self) -> int:
        """Advance one frame; return DEAD to be removed, else NOEVENT."""

    @abstractmethod
    def late_update(self) -> None:
        """Work done after every object has been updated."""

    @abstractmethod
    def render(self, surface: Any) -> None:
        """Draw the object on the surface."""

    def update_rect(self) -> None:
        """Recompute the bounding rectangle from centre and size."""
        half_w = self.info.cx / 2.0
        half_h = self.info.cy / 2.0
        self.rect.left = int(self.info.x - half_w)
        self.rect.top = int(self.info.y - half_h)
        self.rect.right = int(self.info.x + half_w)
        self.rect.bottom = int(self.info.y + half_h)

    def update_frame(self) -> None:
        """Step the sprite animation when its frame time has passed."""
        now = self.services.clock()
        if self.frame.time + self.frame.speed < now:
            self.frame.frame_start += 1
            self.frame.time = now
            if self.frame.frame_start > self.frame.frame_end:
                self.frame.frame_start = 0


def create_object(
    kind: type[GameObject],
    services: Services | None = None,
    x: float | None = None,
    y: float | None = None,
    direction: Direction = Direction.END,
) -> GameObject:
    """Build and initialise an object, placing it when a position is given."""
    obj = kind(services)
    obj.initialize()
    if x is not None and y is not None:
        obj.set_pos(x, y)
        obj.direction = direction
    return obj