"""Loading textures and splitting sprites into white, palette-able colour layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence

from PIL import Image

CHANNELS = 4


@dataclass
class ColorLayer:
    """One colour of a sprite: the colour itself and a white mask of its pixels."""

    color: tuple[int, int, int, int]
    data: bytearray


@dataclass
class TextureSource:
    """A named texture made of one or more RGBA images, each with a tint colour."""

    name: str
    width: int
    height: int
    channels: int = CHANNELS
    images: list[bytes] = field(default_factory=list)
    colors: list[float] = field(default_factory=list)

    @property
    def num_tex(self) -> int:
        return len(self.images)


def load_image(path, flip: bool) -> tuple[bytes, int, int, int]:
    """Load an image as RGBA bytes; return (data, width, height, channels).

    With ``flip`` the rows are stored bottom-up. Raises FileNotFoundError for a
    missing file.
    """
    with Image.open(path) as img:
        rgba = img.convert("RGBA")
    if flip:
        rgba = rgba.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return rgba.tobytes(), rgba.width, rgba.height, CHANNELS


def _pixels(data, width: int, height: int, channels: int) -> Iterator[tuple[int, tuple]]:
    """Yield (offset, rgba) for every opaque-enough pixel (alpha != 0)."""
    for offset in range(0, width * height * channels, channels):
        pixel = tuple(data[offset:offset + channels])
        color = (pixel + (0, 0, 0, 255)[len(pixel):])[:4]
        if color[3] != 0:
            yield offset, color


def count_colors(data, width: int, height: int, channels: int) -> int:
    """Count the distinct colours among pixels whose alpha is not zero."""
    return len({color for _, color in _pixels(data, width, height, channels)})


def separate_by_color(data, width: int, height: int, channels: int,
                      num_colors: int) -> list[ColorLayer]:
    """Split an image into one white mask layer per colour.

    Layers are ordered by first appearance. If ``num_colors`` is zero or less
    the colours are counted first. Raises ValueError if the image holds more
    colours than ``num_colors``.
    """
    if num_colors <= 0:
        num_colors = count_colors(data, width, height, channels)
    length = width * height * channels
    layers = [ColorLayer((0, 0, 0, 0), bytearray(length)) for _ in range(num_colors)]
    seen: dict[tuple, int] = {}
    for offset, color in _pixels(data, width, height, channels):
        index = seen.get(color)
        if index is None:
            index = len(seen)
            if index >= num_colors:
                raise ValueError(
                    f"image has more than {num_colors} colours"
                )
            seen[color] = index
            layers[index].color = color
        layers[index].data[offset:offset + channels] = b"\xff" * channels
    return layers


def _apply_layers(texture: TextureSource, layers: Sequence[ColorLayer]) -> None:
    texture.images = [bytes(layer.data) for layer in layers]
    texture.colors = [c / 255 for layer in layers for c in layer.color]


def layer_file_names(name: str, count: int) -> list[str]:
    """Names of the numbered layer files: ``foo.png`` -> ``foo0.png``, ``foo1.png``..."""
    stem = name[:-4]
    return [f"{stem}{chr(ord('0') + i)}.png" for i in range(count)]


def write_layer_files(texture: TextureSource, layers: Sequence[ColorLayer]) -> list[str]:
    """Write each layer as a PNG beside the texture's file; return the paths."""
    mode = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}[texture.channels]
    paths = layer_file_names(texture.name, texture.num_tex)
    for path, layer in zip(paths, layers):
        Image.frombytes(mode, (texture.width, texture.height), bytes(layer.data)).save(path)
    return paths


def palette_source(texture: TextureSource, name: str) -> str:
    """Render the texture's colours as a C float array declaration."""
    values = ", ".join(f"{c:f}" for c in texture.colors)
    return f"float {name}Palette0[{texture.num_tex * 4}] = {{{values}}};\n"


def write_palette(texture: TextureSource, name: str) -> str:
    """Write :func:`palette_source` to ``<name>Palette0.c``; return the path."""
    path = f"{name}Palette0.c"
    Path(path).write_text(palette_source(texture, name))
    return path


class TextureManager:
    """Cache of loaded textures, looked up by the name of their first file."""

    def __init__(self) -> None:
        self._textures: list[TextureSource] = []

    def __len__(self) -> int:
        return len(self._textures)

    def __iter__(self) -> Iterator[TextureSource]:
        return iter(self._textures)

    def add(self, texture: TextureSource) -> None:
        self._textures.append(texture)

    def find(self, name: str) -> Optional[TextureSource]:
        return next((t for t in self._textures if t.name == name), None)

    def get(self, names: Sequence[str], num: int, white_gen: bool) -> TextureSource:
        """Return the cached texture for ``names[0]`` or build it."""
        found = self.find(names[0])
        if found is not None:
            return found
        return self.make_from_images(names, num, white_gen)

    def make_texture(self, path: str, single: bool) -> TextureSource:
        """Load one image; unless ``single``, split it into colour layers."""
        data, width, height, channels = load_image(path, flip=True)
        texture = TextureSource(str(path), width, height, channels)
        if single:
            texture.images = [data]
            texture.colors = [1.0] * 4
        else:
            _apply_layers(texture, separate_by_color(data, width, height, channels, 0))
        self.add(texture)
        return texture

    def make_from_images(self, paths: Sequence[str], num: int,
                         white_gen: bool) -> TextureSource:
        """Build a texture from ``num`` layer images.

        ``num`` of 1 loads a single image, 0 splits one image into layers.
        Generated (white) layers are not flipped, since they were flipped
        when written.
        """
        if num == 1:
            return self.make_texture(paths[0], True)
        if num == 0:
            return self.make_texture(paths[0], False)
        images = []
        width = height = 0
        channels = CHANNELS
        for path in paths[:num]:
            data, width, height, channels = load_image(path, flip=not white_gen)
            images.append(data)
        texture = TextureSource(str(paths[0]), width, height, channels,
                                images, [1.0] * (4 * num))
        self.add(texture)
        return texture

    def make_white_layer_files(self, path: str) -> TextureSource:
        """Split an image into colour layers, write them as files and cache it."""
        data, width, height, channels = load_image(path, flip=True)
        texture = TextureSource(str(path), width, height, channels)
        layers = separate_by_color(data, width, height, channels, 0)
        _apply_layers(texture, layers)
        write_layer_files(texture, layers)
        self.add(texture)
        return texture

    def clear(self) -> None:
        self._textures.clear()