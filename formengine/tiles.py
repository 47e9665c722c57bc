"""Instanced tile grids: per-cell attribute buffers and the registry of tile sets."""

from __future__ import annotations

import math
from typing import Any, Iterator

_DIRECTION_RADIANS = {0: 0.0, 1: 1.5708, 2: 3.14159, 3: 4.71239}


def dir_to_rad(d: int) -> float:
    """Angle of a direction code 0-3 (right, up, left, down)."""
    try:
        return _DIRECTION_RADIANS[d]
    except KeyError:
        raise ValueError(f"unknown direction {d!r}") from None


class DrawScreen:
    """A grid of per-cell attribute values, ``stride`` floats per cell.

    The buffer is laid out row by row; ``mod`` selects a value counted from
    the end of a cell's stride (1 is the last value).
    """

    def __init__(self, dim_x: int, dim_y: int, max_x: int, max_y: int,
                 location: int, stride: int, base: bool,
                 default: float = 0.0) -> None:
        self.max_x = max_x
        self.max_y = max_y
        self.stride = stride
        self.location = location
        self.default = float(default)
        self.data: list[float] = [self.default] * (max_x * max_y * stride)
        self.dimension_x = 0
        self.dimension_y = 0
        self.size_x = 0.0
        self.size_y = 0.0
        self.resize(dim_x, dim_y, base)

    @property
    def cells(self) -> int:
        return self.dimension_x * self.dimension_y

    def _ensure(self, length: int) -> None:
        if len(self.data) < length:
            self.data.extend([self.default] * (length - len(self.data)))

    def _index(self, x: int, y: int, mod: int) -> int:
        index = (y * self.dimension_x * self.stride) + (self.stride - mod) + (x * self.stride)
        if not 0 <= index < self.cells * self.stride:
            raise IndexError(f"cell ({x}, {y}) value {mod} is outside the screen")
        return index

    def resize(self, size_x: int, size_y: int, base: bool) -> None:
        """Change the grid size and reinitialise it; non-positive sizes are ignored."""
        if size_x > 0 and size_y > 0:
            self.dimension_x = size_x
            self.dimension_y = size_y
            self._ensure(self.cells * self.stride)
            self.initialize(base)

    def initialize(self, base: bool) -> None:
        """Fill with ones (``base``) or with cell centre positions followed by ones."""
        if base:
            self._ensure(self.cells)
            self.data[:self.cells] = [1.0] * self.cells
            return
        start_x = -1 + self.size_x * 0.5
        start_y = -1 + self.size_y * 0.5
        values: list[float] = []
        for y in range(self.dimension_y):
            for x in range(self.dimension_x):
                values.append(start_x + self.size_x * x)
                values.append(start_y + self.size_y * y)
                values.extend([1.0] * (self.stride - 2))
        self._ensure(len(values))
        self.data[:len(values)] = values

    def edit(self, x: int, y: int, val: float, mod: int) -> None:
        self.data[self._index(x, y, mod)] = val

    def get(self, x: int, y: int, mod: int) -> float:
        return self.data[self._index(x, y, mod)]

    def xy_of(self, index: int) -> tuple[int, int]:
        """Cell coordinates holding the buffer position ``index``."""
        row = self.dimension_x * self.stride
        y = index // row
        x = (index - y * row) // self.stride
        return x, y

    def clear(self, base: bool) -> None:
        """Zero every cell; without ``base`` the first two values are kept."""
        keep = 0 if base else 2
        for cell in range(self.cells):
            start = cell * self.stride
            self.data[start + keep:start + self.stride] = [0.0] * (self.stride - keep)

    def _fill_quads(self, quad: list[float]) -> None:
        values = quad * self.cells
        self._ensure(len(values))
        self.data[:len(values)] = values

    def set_rotations(self, rad: float) -> None:
        """Give every cell the 2x2 rotation matrix of ``rad``."""
        c, s = math.cos(rad), math.sin(rad)
        self._fill_quads([c, -s, s, c])

    def fill(self, value: float) -> None:
        """Set four values of every cell to ``value``."""
        self._fill_quads([float(value)] * 4)

    def set_rotation(self, x: int, y: int, rad: float) -> None:
        c, s = math.cos(rad), math.sin(rad)
        self.edit(x, y, c, 4)
        self.edit(x, y, -s, 3)
        self.edit(x, y, s, 2)
        self.edit(x, y, c, 1)

    def render_visibility(self) -> str:
        """Text map, top row first, of cells whose second-to-last value is 1."""
        lines = []
        for y in range(self.dimension_y - 1, -1, -1):
            lines.append("".join(
                " 1 " if self.get(x, y, 2) == 1 else " 0 "
                for x in range(self.dimension_x)
            ))
        return "\n".join(lines) + "\n\n"


class TileSet:
    """An animation drawn as a grid of tiles, with colour, position, rotation and texture buffers."""

    def __init__(self, anim: Any, dim_x: int, dim_y: int, max_x: int, max_y: int) -> None:
        self.set = anim
        self.type_id = -1
        self.color = DrawScreen(dim_x, dim_y, max_x, max_y, 1, 4, True, 1)
        self.trans = DrawScreen(dim_x, dim_y, max_x, max_y, 3, 3, False, 0)
        self.rot = DrawScreen(dim_x, dim_y, max_x, max_y, 4, 4, True, 0)
        self.texture = DrawScreen(dim_x, dim_y, max_x, max_y, 5, 2, True, 0)

    @property
    def screens(self) -> tuple[DrawScreen, DrawScreen, DrawScreen, DrawScreen]:
        return self.trans, self.rot, self.color, self.texture

    def resize(self, size_x: int, size_y: int) -> None:
        self.trans.resize(size_x, size_y, False)
        self.rot.resize(size_x, size_y, True)
        self.color.resize(size_x, size_y, True)
        self.texture.resize(size_x, size_y, True)

    def set_tile_size(self, size_x: float, size_y: float) -> None:
        for screen in self.screens:
            screen.size_x = size_x
            screen.size_y = size_y

    def set_type_id(self, type_id: int) -> None:
        self.type_id = type_id


class TileRegistry:
    """Every tile set, indexed in the order they were registered."""

    def __init__(self) -> None:
        self._sets: list[TileSet] = []

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[TileSet]:
        return iter(self._sets)

    def make(self, anim: Any, dim_x: int, dim_y: int, max_x: int, max_y: int) -> TileSet:
        tile_set = TileSet(anim, dim_x, dim_y, max_x, max_y)
        self.add(tile_set)
        return tile_set

    def add(self, tile_set: TileSet) -> int:
        """Register a tile set; return its index."""
        self._sets.append(tile_set)
        return len(self._sets) - 1

    def get(self, index: int) -> TileSet:
        if not 0 <= index < len(self._sets):
            raise IndexError(f"no tile set {index}")
        return self._sets[index]

    def count(self) -> int:
        return len(self._sets)