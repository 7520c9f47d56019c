import struct

import pygame
import pytest

from gdiquest.defines import Line, LinePoint
from gdiquest.lines import LineManager, parse_lines, render_line


def pack(*values):
    return struct.pack("<%df" % len(values), *values)


def test_parse_round_trip():
    data = pack(100.0, 450.0, 300.0, 450.0) + pack(300.0, 450.0, 500.0, 250.0)
    lines = parse_lines(data)
    assert lines == [
        Line(LinePoint(100.0, 450.0), LinePoint(300.0, 450.0)),
        Line(LinePoint(300.0, 450.0), LinePoint(500.0, 250.0)),
    ]


def test_parse_empty():
    assert parse_lines(b"") == []


def test_parse_short_trailing_record_keeps_previous_tail():
    data = pack(1.0, 2.0, 3.0, 4.0) + pack(5.0, 6.0)
    lines = parse_lines(data)
    assert len(lines) == 2
    assert lines[1] == Line(LinePoint(5.0, 6.0), LinePoint(3.0, 4.0))


def test_collision_empty_returns_none():
    assert LineManager().collision_line(10.0) is None


def test_collision_outside_returns_none():
    manager = LineManager([Line(LinePoint(0.0, 0.0), LinePoint(10.0, 10.0))])
    assert manager.collision_line(11.0) is None


def test_collision_flat_line():
    manager = LineManager([Line(LinePoint(100.0, 450.0), LinePoint(300.0, 450.0))])
    assert manager.collision_line(200.0) == pytest.approx(450.0)


def test_collision_endpoints_and_midpoint():
    manager = LineManager([Line(LinePoint(300.0, 450.0), LinePoint(500.0, 250.0))])
    assert manager.collision_line(300.0) == pytest.approx(450.0)
    assert manager.collision_line(500.0) == pytest.approx(250.0)
    assert manager.collision_line(400.0) == pytest.approx((450.0 + 250.0) / 2)


def test_collision_last_matching_line_wins():
    manager = LineManager([
        Line(LinePoint(0.0, 100.0), LinePoint(50.0, 100.0)),
        Line(LinePoint(0.0, 200.0), LinePoint(50.0, 200.0)),
    ])
    assert manager.collision_line(25.0) == pytest.approx(200.0)


def test_load_data_replaces_lines(tmp_path):
    path = tmp_path / "Line.dat"
    path.write_bytes(pack(0.0, 10.0, 20.0, 10.0))
    manager = LineManager([Line(LinePoint(1.0, 1.0), LinePoint(2.0, 2.0))])
    manager.load_data(path)
    assert manager.lines == [Line(LinePoint(0.0, 10.0), LinePoint(20.0, 10.0))]


def test_load_missing_file_keeps_lines(tmp_path):
    original = Line(LinePoint(1.0, 1.0), LinePoint(2.0, 2.0))
    manager = LineManager([original])
    with pytest.raises(FileNotFoundError):
        manager.load_data(tmp_path / "missing.dat")
    assert manager.lines == [original]


def test_release_clears():
    manager = LineManager([Line()])
    manager.release()
    assert manager.lines == []


def test_render_line_applies_scroll():
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    line = Line(LinePoint(5.0, 10.0), LinePoint(30.0, 10.0))
    render_line(surface, line, 5)
    assert surface.get_at((20, 10))[:3] == (0, 0, 0)
    assert surface.get_at((7, 10))[:3] == (255, 255, 255)


def test_manager_render_draws_every_line():
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    manager = LineManager([
        Line(LinePoint(0.0, 5.0), LinePoint(40.0, 5.0)),
        Line(LinePoint(0.0, 30.0), LinePoint(40.0, 30.0)),
    ])
    manager.render(surface, 0)
    assert surface.get_at((20, 5))[:3] == (0, 0, 0)
    assert surface.get_at((20, 30))[:3] == (0, 0, 0)
    assert surface.get_at((20, 20))[:3] == (255, 255, 255)