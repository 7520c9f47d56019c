"""Projectiles and the orbiting shield."""

from __future__ import annotations

import math

import pygame

from .defines import DEAD, NOEVENT, PI, ObjId
from .objects import GameObject

_FILL = (255, 255, 255)
_OUTLINE = (0, 0, 0)


def _radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


def _draw_ellipse(surface: pygame.Surface, obj: GameObject) -> None:
    rect = pygame.Rect(
        obj.rect.left,
        obj.rect.top,
        obj.rect.right - obj.rect.left,
        obj.rect.bottom - obj.rect.top,
    )
    pygame.draw.ellipse(surface, _FILL, rect)
    pygame.draw.ellipse(surface, _OUTLINE, rect, 1)


class Bullet(GameObject):
    """Flies in a straight line along its angle."""

    def initialize(self) -> None:
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 3.0

    def update(self) -> int:
        if self.dead:
            return DEAD
        self.update_rect()
        rad = _radians(self.angle)
        self.info.x += self.speed * math.cos(rad)
        self.info.y -= self.speed * math.sin(rad)
        return NOEVENT

    def late_update(self) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        _draw_ellipse(surface, self)


class GuideBullet(GameObject):
    """Steers towards the nearest living monster each frame."""

    def initialize(self) -> None:
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 3.0

    def update(self) -> int:
        if self.dead:
            return DEAD
        self.update_rect()
        return NOEVENT

    def late_update(self) -> None:
        objects = self.services.objects
        self.target = (
            objects.get_target(ObjId.MONSTER, self) if objects is not None else None
        )
        if self.target is not None:
            width = self.target.info.x - self.info.x
            height = self.target.info.y - self.info.y
            diagonal = math.hypot(width, height)
            if diagonal > 0.0:
                radian = math.acos(max(-1.0, min(1.0, width / diagonal)))
                if self.target.info.y > self.info.y:
                    radian = 2.0 * PI - radian
                self.angle = radian * (180.0 / PI)
        rad = _radians(self.angle)
        self.info.x += self.speed * math.cos(rad)
        self.info.y -= self.speed * math.sin(rad)

    def render(self, surface: pygame.Surface) -> None:
        _draw_ellipse(surface, self)


class ScrewBullet(GameObject):
    """Spins around a centre that travels along the bullet's angle."""

    def __init__(self, services=None) -> None:
        super().__init__(services)
        self.center = (0, 0)
        self.rot_angle = 0.0
        self.rot_speed = 0.0
        self.start = False

    def initialize(self) -> None:
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.speed = 3.0
        self.rot_angle = 0.0
        self.rot_speed = 30.0
        self.distance = 20.0
        self.start = True

    def update(self) -> int:
        if self.dead:
            return DEAD
        self.update_rect()
        if self.start:
            self.center = (int(self.info.x), int(self.info.y))
            self.start = False
        return NOEVENT

    def late_update(self) -> None:
        rad = _radians(self.angle)
        cx, cy = self.center
        cx += int(self.speed * math.cos(rad))
        cy -= int(self.speed * math.sin(rad))
        self.center = (cx, cy)
        self.rot_angle += self.rot_speed
        rot = _radians(self.rot_angle)
        self.info.x = cx + self.distance * math.cos(rot)
        self.info.y = cy - self.distance * math.sin(rot)

    def render(self, surface: pygame.Surface) -> None:
        _draw_ellipse(surface, self)


class Shield(GameObject):
    """Circles its target at a fixed distance."""

    def initialize(self) -> None:
        self.info.cx = 30.0
        self.info.cy = 30.0
        self.distance = 100.0
        self.speed = 5.0

    def update(self) -> int:
        self.update_rect()
        self.angle += self.speed
        return NOEVENT

    def late_update(self) -> None:
        if self.target is None:
            raise RuntimeError("shield has no target to circle")
        rad = _radians(self.angle)
        self.info.x = self.target.info.x + self.distance * math.cos(rad)
        self.info.y = self.target.info.y - self.distance * math.sin(rad)

    def render(self, surface: pygame.Surface) -> None:
        _draw_ellipse(surface, self)