[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formengine"
version = "0.1.0"
description = "State and logic for a tile-based 2D game engine: camera, sprite animation, tile grids, world view, players, menus and a game loop."
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "tiles", "sprites", "animation", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["formengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
