"""Owns every live game object and drives their frame updates."""

from __future__ import annotations

import math

import pygame

from .defines import DEAD, ObjId, RenderId
from .objects import GameObject


class ObjectManager:
    """Object lists per kind, plus per-layer render queues."""

    def __init__(self) -> None:
        self.object_lists: dict[ObjId, list[GameObject]] = {
            obj_id: [] for obj_id in ObjId if obj_id is not ObjId.END
        }
        self.render_lists: dict[RenderId, list[GameObject]] = {
            render_id: [] for render_id in RenderId if render_id is not RenderId.END
        }

    def get_target(self, obj_id: ObjId, obj: GameObject) -> GameObject | None:
        """Return the nearest living object of the kind, or None."""
        target = None
        best = 0.0
        for candidate in self.object_lists[obj_id]:
            if candidate.dead:
                continue
            distance = math.hypot(
                candidate.info.x - obj.info.x, candidate.info.y - obj.info.y
            )
            if target is None or best > distance:
                target = candidate
                best = distance
        return target

    def delete_object(self, obj_id: ObjId) -> None:
        """Drop every object of the kind."""
        self.object_lists[obj_id].clear()

    def add_object(self, obj_id: ObjId, obj: GameObject | None) -> None:
        """Add an object; unknown kinds and None are ignored."""
        if obj is None or obj_id not in self.object_lists:
            return
        self.object_lists[obj_id].append(obj)

    def update(self) -> None:
        """Update every object, removing those that report DEAD."""
        for objects in self.object_lists.values():
            survivors = []
            for obj in objects:
                if obj.update() != DEAD:
                    survivors.append(obj)
            objects[:] = survivors

    def late_update(self) -> None:
        """Run late updates and queue objects on their render layer."""
        for objects in self.object_lists.values():
            for obj in objects:
                obj.late_update()
                if not objects:
                    break
                queue = self.render_lists.get(obj.render_id)
                if queue is not None:
                    queue.append(obj)

    def render(self, surface: pygame.Surface) -> None:
        """Draw each layer in order, lower objects on top within a layer."""
        for queue in self.render_lists.values():
            queue.sort(key=lambda obj: obj.info.y)
            for obj in queue:
                obj.render(surface)
            queue.clear()

    def release(self) -> None:
        """Drop every object."""
        for objects in self.object_lists.values():
            objects.clear()