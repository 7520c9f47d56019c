"""Ground lines loaded from a binary file, used to land on terrain."""

from __future__ import annotations

import struct
from pathlib import Path

import pygame

from .defines import Line, LinePoint

DEFAULT_LINE_PATH = Path("../Data/Line.dat")

_RECORD = struct.Struct("<4f")
_LINE_COLOUR = (0, 0, 0)


def parse_lines(data: bytes) -> list[Line]:
    """Decode consecutive little-endian float records of (x1, y1, x2, y2).

    A short trailing record overwrites only the leading part of the previous
    record, the rest being kept from it.
    """
    lines = []
    buffer = bytearray(_RECORD.size)
    for start in range(0, len(data), _RECORD.size):
        chunk = data[start:start + _RECORD.size]
        buffer[:len(chunk)] = chunk
        x1, y1, x2, y2 = _RECORD.unpack(buffer)
        lines.append(Line(LinePoint(x1, y1), LinePoint(x2, y2)))
    return lines


def render_line(surface: pygame.Surface, line: Line, scroll_x: int) -> None:
    """Draw a line shifted horizontally by the scroll offset."""
    start = (int(line.left.x) + scroll_x, int(line.left.y))
    end = (int(line.right.x) + scroll_x, int(line.right.y))
    pygame.draw.line(surface, _LINE_COLOUR, start, end)


class LineManager:
    """Holds the ground lines and finds the ground height under a point."""

    def __init__(self, lines: list[Line] | None = None) -> None:
        self.lines: list[Line] = list(lines) if lines else []

    def collision_line(self, x: float) -> float | None:
        """Return the height of the last line spanning x, or None."""
        target = None
        for line in self.lines:
            if line.left.x <= x <= line.right.x:
                target = line
        if target is None:
            return None
        x1, y1 = target.left.x, target.left.y
        x2, y2 = target.right.x, target.right.y
        return (y2 - y1) / (x2 - x1) * (x - x1) + y1

    def load_data(self, path: str | Path = DEFAULT_LINE_PATH) -> None:
        """Replace the lines with those stored in the file."""
        data = Path(path).read_bytes()
        self.release()
        self.lines = parse_lines(data)

    def render(self, surface: pygame.Surface, scroll_x: int) -> None:
        for line in self.lines:
            render_line(surface, line, scroll_x)

    def release(self) -> None:
        self.lines.clear()