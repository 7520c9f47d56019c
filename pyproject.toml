[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdiquest"
version = "0.1.0"
description = "A small side-scrolling arcade game with scenes, line terrain, scrolling and homing bullets"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "side-scrolling", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gdiquest = "gdiquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gdiquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
