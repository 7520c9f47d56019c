"""World scroll offset."""

from __future__ import annotations

from dataclasses import dataclass

from .defines import TILECX, TILECY, TILEX, TILEY, WINCX, WINCY


@dataclass
class ScrollManager:
    """Holds the camera offset added to world positions when drawing."""

    scroll_x: float = 0.0
    scroll_y: float = 0.0

    def move_x(self, dx: float) -> None:
        self.scroll_x += dx

    def move_y(self, dy: float) -> None:
        self.scroll_y += dy

    def lock(self) -> None:
        """Clamp the offset so the view stays inside the tile map."""
        if self.scroll_x > 0.0:
            self.scroll_x = 0.0
        if self.scroll_y > 0.0:
            self.scroll_y = 0.0
        min_x = WINCX - TILECX * TILEX
        min_y = WINCY - TILECY * TILEY
        if self.scroll_x < min_x:
            self.scroll_x = float(min_x)
        if self.scroll_y < min_y:
            self.scroll_y = float(min_y)