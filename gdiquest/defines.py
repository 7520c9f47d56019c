"""Shared constants, enumerations and plain records used across the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

WINCX = 800
WINCY = 600

TILECX = 64
TILECY = 64

TILEX = 30
TILEY = 20

NOEVENT = 0
DEAD = 1

PI = 3.141592

VK_MAX = 0xFF


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    LUP = 4
    RUP = 5
    END = 6


class ObjId(IntEnum):
    PLAYER = 0
    BULLET = 1
    MONSTER = 2
    MOUSE = 3
    SHIELD = 4
    BUTTON = 5
    END = 6


class RenderId(IntEnum):
    BACKGROUND = 0
    GAMEOBJECT = 1
    EFFECT = 2
    UI = 3
    END = 4


class SceneId(IntEnum):
    LOGO = 0
    MENU = 1
    EDIT = 2
    STAGE = 3
    END = 4


@dataclass
class Info:
    """Centre position and size of an object."""

    x: float = 0.0
    y: float = 0.0
    cx: float = 0.0
    cy: float = 0.0


@dataclass
class Rect:
    """Integer rectangle; right and bottom edges are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share a non-empty area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside, left/top inclusive."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass
class LinePoint:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Line:
    left: LinePoint = field(default_factory=LinePoint)
    right: LinePoint = field(default_factory=LinePoint)


@dataclass
class Frame:
    """Sprite animation state; times are in milliseconds."""

    frame_start: int = 0
    frame_end: int = 0
    motion: int = 0
    speed: int = 0
    time: int = 0