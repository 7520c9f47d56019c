"""Keyboard and mouse button state tracking with edge detection."""

from __future__ import annotations

from typing import Callable

import pygame

from .defines import VK_MAX

VK_LBUTTON = 0x01
VK_RBUTTON = 0x02
VK_MBUTTON = 0x04
VK_RETURN = 0x0D
VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

_MOUSE_BUTTONS = {VK_LBUTTON: 0, VK_MBUTTON: 1, VK_RBUTTON: 2}

_KEYS = {
    VK_RETURN: pygame.K_RETURN,
    VK_ESCAPE: pygame.K_ESCAPE,
    VK_SPACE: pygame.K_SPACE,
    VK_LEFT: pygame.K_LEFT,
    VK_UP: pygame.K_UP,
    VK_RIGHT: pygame.K_RIGHT,
    VK_DOWN: pygame.K_DOWN,
}


def _pygame_probe(key: int) -> bool:
    """Report whether a virtual key is held, using pygame's live state."""
    if key in _MOUSE_BUTTONS:
        return bool(pygame.mouse.get_pressed()[_MOUSE_BUTTONS[key]])
    if ord("A") <= key <= ord("Z"):
        code = pygame.K_a + key - ord("A")
    elif ord("0") <= key <= ord("9"):
        code = pygame.K_0 + key - ord("0")
    else:
        code = _KEYS.get(key)
        if code is None:
            return False
    return bool(pygame.key.get_pressed()[code])


class KeyManager:
    """Tracks which keys were held last frame to detect presses and releases."""

    def __init__(self, probe: Callable[[int], bool] | None = None) -> None:
        self._probe = probe if probe is not None else _pygame_probe
        self._states = [False] * VK_MAX

    def key_pressing(self, key: int) -> bool:
        """True while the key is held."""
        return bool(self._probe(key))

    def key_down(self, key: int) -> bool:
        """True on the first frame the key is held."""
        if not self._states[key] and self._probe(key):
            self._states[key] = True
            return True
        return False

    def key_up(self, key: int) -> bool:
        """True on the first frame after the key is released."""
        if self._states[key] and not self._probe(key):
            self._states[key] = False
            return True
        return False

    def update(self) -> None:
        """Record the current state of every key for the next frame."""
        self._states = [bool(self._probe(key)) for key in range(VK_MAX)]