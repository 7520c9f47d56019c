"""A small side-scrolling arcade game with scenes, line terrain, scrolling and bullets."""

__version__ = "0.1.0"