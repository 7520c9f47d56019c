"""The player character: walking, jumping, camera follow and animation."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .bullets import Shield
from .defines import NOEVENT, WINCY, Frame, Info, RenderId
from .keys import VK_DOWN, VK_LEFT, VK_RIGHT, VK_SPACE, VK_UP
from .objects import GameObject, create_object

PLAYER_IMAGES = {
    "Player": "../Image/maja2.bmp",
    "Player_DOWN": "../Image/Player/Player_DOWN.bmp",
    "Player_UP": "../Image/Player/Player_UP.bmp",
    "Player_LEFT": "../Image/Player/Player_LEFT.bmp",
    "Player_RIGHT": "../Image/Player/Player_RIGHT.bmp",
    "Player_LD": "../Image/Player/Player_LD.bmp",
    "Player_RD": "../Image/Player/Player_RD.bmp",
    "Player_LU": "../Image/Player/Player_LU.bmp",
    "Player_RU": "../Image/Player/Player_RU.bmp",
}

GRAVITY = 9.8
JUMP_TIME_STEP = 0.2
FRAME_SPEED = 200

OFFSET_MIN_X = 100
OFFSET_MAX_X = 700
OFFSET_MIN_Y = 100
OFFSET_MAX_Y = 500

_COLOUR_KEY = (0, 0, 0)


class PlayerState(IntEnum):
    IDLE = 0
    WALK = 1
    ATTACK = 2
    HIT = 3
    DEATH = 4
    END = 5


# state -> (last frame index, sprite sheet row)
_MOTIONS = {
    PlayerState.IDLE: (3, 0),
    PlayerState.WALK: (5, 1),
    PlayerState.ATTACK: (5, 2),
    PlayerState.HIT: (1, 3),
    PlayerState.DEATH: (3, 4),
}

# key -> (dx sign, dy sign, frame key), checked in this order
_WALK_KEYS = (
    (VK_LEFT, -1, 0, "Player_LEFT"),
    (VK_RIGHT, 1, 0, "Player_RIGHT"),
    (VK_UP, 0, -1, "Player_UP"),
    (VK_DOWN, 0, 1, "Player_DOWN"),
)


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


class Player(GameObject):
    """The character the user steers with the arrow keys."""

    def __init__(self, services=None) -> None:
        super().__init__(services)
        self.posin = (0, 0)
        self.jump = False
        self.velocity = 0.0
        self.time = 0.0
        self.cur_state = PlayerState.IDLE
        self.pre_state = PlayerState.END

    def initialize(self) -> None:
        bitmaps = self.services.bitmaps
        if bitmaps is not None:
            for key, path in PLAYER_IMAGES.items():
                bitmaps.insert_bmp(path, key)
        self.info = Info(100.0, float(WINCY >> 1), 200.0, 200.0)
        self.speed = 4.0
        self.distance = 100.0
        self.velocity = 20.0
        self.frame_key = "Player_DOWN"
        self.frame = Frame(
            frame_start=0,
            frame_end=3,
            motion=0,
            speed=FRAME_SPEED,
            time=self.services.clock(),
        )
        self.render_id = RenderId.GAMEOBJECT

    def update(self) -> int:
        self.key_input()
        self.update_rect()
        self.update_frame()
        return NOEVENT

    def late_update(self) -> None:
        self.jumping()
        self.offset()
        self.motion_change()

    def render(self, surface: pygame.Surface) -> None:
        bitmaps = self.services.bitmaps
        image = bitmaps.find_image(self.frame_key) if bitmaps is not None else None
        if image is None:
            return
        scroll_x = int(self.services.scroll.scroll_x)
        scroll_y = int(self.services.scroll.scroll_y)
        width = int(self.info.cx)
        height = int(self.info.cy)
        _transparent_blit(
            surface,
            image,
            (self.rect.left + scroll_x, self.rect.top + scroll_y),
            pygame.Rect(
                width * self.frame.frame_start,
                height * self.frame.motion,
                width,
                height,
            ),
            _COLOUR_KEY,
        )

    def key_input(self) -> None:
        """Move one step for the first held arrow key, or start a jump."""
        keys = self.services.keys
        for key, sx, sy, frame_key in _WALK_KEYS:
            if keys.key_pressing(key):
                self.info.x += sx * self.speed
                self.info.y += sy * self.speed
                self.frame_key = frame_key
                self.cur_state = PlayerState.WALK
                return
        if keys.key_up(VK_SPACE):
            self.jump = True
        else:
            self.cur_state = PlayerState.IDLE

    def jumping(self) -> None:
        """Follow the jump arc, landing on or standing on the ground line."""
        lines = self.services.lines
        ground = lines.collision_line(self.info.x) if lines is not None else None
        if self.jump:
            self.info.y -= (
                self.velocity * self.time
                - (GRAVITY * self.time * self.time) * 0.5
            )
            self.time += JUMP_TIME_STEP
            if ground is not None and ground < self.info.y:
                self.jump = False
                self.time = 0.0
                self.info.y = ground
        elif ground is not None:
            self.info.y = ground

    def offset(self) -> None:
        """Scroll the view when the player nears an edge of the window."""
        scroll = self.services.scroll
        scroll_x = int(scroll.scroll_x)
        scroll_y = int(scroll.scroll_y)
        if OFFSET_MIN_X > self.info.x + scroll_x:
            scroll.move_x(self.speed)
        if OFFSET_MAX_X < self.info.x + scroll_x:
            scroll.move_x(-self.speed)
        if OFFSET_MIN_Y > self.info.y + scroll_y:
            scroll.move_y(self.speed)
        if OFFSET_MAX_Y < self.info.y + scroll_y:
            scroll.move_y(-self.speed)

    def motion_change(self) -> None:
        """Restart the animation when the state has changed."""
        if self.pre_state == self.cur_state:
            return
        motion = _MOTIONS.get(self.cur_state)
        if motion is not None:
            frame_end, row = motion
            self.frame = Frame(
                frame_start=0,
                frame_end=frame_end,
                motion=row,
                speed=FRAME_SPEED,
                time=self.services.clock(),
            )
        self.pre_state = self.cur_state

    def create_bullet(
        self, kind: type[GameObject], x: float, y: float, angle: float
    ) -> GameObject:
        """Build a projectile of the kind at the point, heading at the angle."""
        bullet = create_object(kind, self.services, x, y)
        bullet.angle = angle
        return bullet

    def create_shield(self) -> GameObject:
        """Build a shield that circles this player."""
        shield = create_object(Shield, self.services)
        shield.target = self
        return shield