"""Named bitmap images loaded once and shared by everything that draws."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pygame


def _load_bitmap(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"bitmap not found: {path}")
    return pygame.image.load(str(path))


class BitmapManager:
    """Keeps loaded images under string keys; a key is loaded only once."""

    def __init__(
        self, loader: Callable[[Path], pygame.Surface] | None = None
    ) -> None:
        self._loader = loader if loader is not None else _load_bitmap
        self._images: dict[str, pygame.Surface] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._images

    def __len__(self) -> int:
        return len(self._images)

    def find_image(self, key: str) -> pygame.Surface | None:
        """Return the image stored under the key, or None."""
        return self._images.get(key)

    def insert_bmp(self, path: str | Path, key: str) -> None:
        """Load the file under the key unless the key is already taken."""
        if key in self._images:
            return
        self._images[key] = self._loader(Path(path))

    def release(self) -> None:
        """Forget every image."""
        self._images.clear()