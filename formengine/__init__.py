"""State and logic for a tile-based 2D game engine: camera, textures, animation, tiles, world view, players, UI and game loop."""

__version__ = "0.1.0"

__all__ = [
    "anim",
    "camera",
    "engine",
    "god",
    "players",
    "textures",
    "tiles",
    "ui",
    "worldview",
]