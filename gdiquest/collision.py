"""Collision tests and responses between groups of objects."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .objects import GameObject


def collision_rect(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Mark both objects dead wherever their rectangles overlap."""
    sources = list(src)
    for a in dst:
        for b in sources:
            if a.rect.intersects(b.rect):
                a.dead = True
                b.dead = True


def collision_circle(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Mark both objects dead wherever their circles touch."""
    sources = list(src)
    for a in dst:
        for b in sources:
            if check_sphere(a, b):
                a.dead = True
                b.dead = True


def check_sphere(dst: GameObject, src: GameObject) -> bool:
    """True when circles sized by width are within reach of each other."""
    radius = (dst.info.cx + src.info.cx) * 0.5
    distance = math.hypot(dst.info.x - src.info.x, dst.info.y - src.info.y)
    return radius >= distance


def collision_rect_ex(dst: Iterable[GameObject], src: Iterable[GameObject]) -> None:
    """Push each destination object out of the sources along the shallow axis."""
    sources = list(src)
    for a in dst:
        for b in sources:
            overlap = check_rect(a, b)
            if overlap is None:
                continue
            width, height = overlap
            if width > height:
                a.move_y(-height if a.info.y < b.info.y else height)
            else:
                a.move_x(-width if a.info.x < b.info.x else width)


def check_rect(dst: GameObject, src: GameObject) -> tuple[float, float] | None:
    """Return the (x, y) overlap of two boxes, or None when apart."""
    radius_x = (dst.info.cx + src.info.cx) * 0.5
    radius_y = (dst.info.cy + src.info.cy) * 0.5
    width = abs(dst.info.x - src.info.x)
    height = abs(dst.info.y - src.info.y)
    if radius_x > width and radius_y > height:
        return radius_x - width, radius_y - height
    return None