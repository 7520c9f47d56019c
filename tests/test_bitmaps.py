import pygame
import pytest

from gdiquest.bitmaps import BitmapManager


def _surface(size, colour):
    image = pygame.Surface(size)
    image.fill(colour)
    return image


def test_insert_and_find_real_file(tmp_path):
    path = tmp_path / "a.bmp"
    pygame.image.save(_surface((8, 4), (200, 10, 20)), str(path))
    manager = BitmapManager()
    manager.insert_bmp(path, "A")
    image = manager.find_image("A")
    assert image.get_size() == (8, 4)
    assert tuple(image.get_at((3, 2)))[:3] == (200, 10, 20)


def test_existing_key_is_not_reloaded():
    calls = []

    def loader(path):
        calls.append(path.name)
        return _surface((2, 2), (0, 0, 0))

    manager = BitmapManager(loader)
    manager.insert_bmp("first.bmp", "Key")
    manager.insert_bmp("second.bmp", "Key")
    assert calls == ["first.bmp"]
    assert len(manager) == 1


def test_find_missing_key_gives_none():
    manager = BitmapManager(lambda path: _surface((1, 1), (0, 0, 0)))
    assert manager.find_image("Nothing") is None


def test_release_forgets_images():
    manager = BitmapManager(lambda path: _surface((1, 1), (0, 0, 0)))
    manager.insert_bmp("x.bmp", "X")
    assert "X" in manager
    manager.release()
    assert manager.find_image("X") is None
    assert len(manager) == 0


def test_missing_file_raises(tmp_path):
    manager = BitmapManager()
    with pytest.raises(FileNotFoundError):
        manager.insert_bmp(tmp_path / "absent.bmp", "Absent")
    assert "Absent" not in manager