"""Sprite-sheet animations, the global animation list and per-frame draw layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence

from .textures import TextureSource, layer_file_names

NO_CHANGE = -1


def make_sheet(base_file: str, num_colors: int) -> list[str]:
    """File names making up a sheet.

    With more than one colour the sheet is the numbered layer files
    (``hero.png`` -> ``hero0.png``, ``hero1.png``...); otherwise it is the
    base file alone.
    """
    if num_colors > 1:
        return layer_file_names(base_file, num_colors)
    return [base_file]


def roto_to_radian(d: int) -> float:
    """Angle for a rotation code: 0, 1 and 2 are quarter turns, anything else is 0."""
    return {0: 1.5708, 1: 3.14159, 2: 4.71239}.get(d, 0.0)


def invert_factor(flipped: bool) -> int:
    """Scale factor for an inverted axis: -1 when flipped, 1 otherwise."""
    return (-1) ** int(bool(flipped))


@dataclass(eq=False)
class Anim:
    """An animation over a sprite sheet of ``sprite_num`` rows of frames."""

    texture: TextureSource
    frame_x: float
    frame_y: float
    sprite_num: int
    lengths: list[int]
    ratio: list[float] = field(default_factory=lambda: [1.0, 1.0])
    palette: list[float] = field(default_factory=list)
    draw_order: int = 0
    speed: int = 6
    speed_counter: int = 0
    frame: int = 0
    sprite: int = 0
    scale: list[float] = field(default_factory=lambda: [1.0, 1.0])
    flip: list[int] = field(default_factory=lambda: [1, 1])
    offset: list[float] = field(default_factory=lambda: [0.0, 0.0])
    invert: list[bool] = field(default_factory=lambda: [False, False])
    roto: int = 3
    loop: bool = True
    reverse: bool = False
    vao: int = -1
    data: Any = None
    anim_end: Optional[Callable[["Anim"], None]] = field(default=None, repr=False)

    def animate(self) -> None:
        """Advance one tick; move a frame once the counter passes ``speed``."""
        length = self.lengths[self.sprite]
        if length <= 0:
            return
        if self.speed_counter <= self.speed:
            self.speed_counter += 1
            return
        if not self.reverse:
            if self.frame + 1 < length:
                self.frame += 1
            else:
                if self.loop:
                    self.frame = 0
                self._ended()
        else:
            if self.frame - 1 > -1:
                self.frame -= 1
            else:
                if self.loop:
                    self.frame = length - 1
                self._ended()
        self.speed_counter = 0

    def _ended(self) -> None:
        if self.anim_end is not None:
            self.anim_end(self)

    def change_sprite(self, index: int) -> None:
        """Switch to another row, restarting it; disabled rows (length -1) are ignored."""
        if 0 <= index < self.sprite_num and self.sprite != index:
            if self.lengths[index] != -1:
                self.sprite = index
                self.frame = 0
                self.speed_counter = 0

    def add_sprite(self, index: int, length: int) -> None:
        """Set the number of frames of a row; out-of-range rows are ignored."""
        if 0 <= index < self.sprite_num:
            self.lengths[index] = length

    def coord_x(self) -> float:
        return self.frame * self.frame_x

    def coord_y(self) -> float:
        return ((self.sprite_num - 1) - self.sprite) * self.frame_y + 1

    def set_scale(self, x: float, y: float) -> None:
        self.scale = [x, y]

    def set_offset(self, x: float, y: float) -> None:
        self.offset = [x, y]

    def set_invert(self, axis: int, flipped: bool) -> None:
        self.invert[axis] = flipped

    def set_roto(self, degree: int) -> None:
        self.roto = degree

    def load_palette(self, palette: Sequence[float]) -> None:
        """Replace the RGBA tint of every texture layer."""
        needed = self.texture.num_tex * 4
        if len(palette) < needed:
            raise ValueError(f"palette needs {needed} values, got {len(palette)}")
        self.palette = [float(v) for v in palette[:needed]]

    def sprite_translation(self, x_size: float, y_size: float,
                           xp: float, yp: float) -> tuple[float, float]:
        """Screen position of the sprite drawn at cell (xp, yp) with cell size (x_size, y_size)."""
        tx = (-1 + x_size / 2) + (xp + self.offset[0]) * x_size
        ty = (-1 + y_size / 2) + (yp + self.offset[1]) * y_size
        return tx, ty

    def sprite_scale(self, x_size: float, y_size: float) -> tuple[float, float]:
        """Drawn size on each axis, including aspect ratio, scale and inversion."""
        sx = x_size * self.ratio[0] * self.scale[0] * invert_factor(self.invert[0])
        sy = y_size * self.ratio[1] * self.scale[1] * invert_factor(self.invert[1])
        return sx, sy

    def texture_matrices(self) -> tuple[list[float], list[float]]:
        """Row-major 3x3 translation and scale matrices selecting the current frame."""
        translation = [
            1.0, 0.0, self.coord_x(),
            0.0, 1.0, self.coord_y(),
            0.0, 0.0, 1.0,
        ]
        scale = [
            self.frame_x, 0.0, 0.0,
            0.0, self.frame_y, 0.0,
            0.0, 0.0, 1.0,
        ]
        return translation, scale

    def rotation_matrix(self) -> list[float]:
        """Row-major 4x4 rotation matrix for the current rotation code."""
        rad = roto_to_radian(self.roto)
        c, s = math.cos(rad), math.sin(rad)
        return [
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]


def make_anim(texture: Optional[TextureSource], rows: int, cols: int) -> Anim:
    """Build an animation over ``texture`` split into ``rows`` x ``cols`` cells."""
    if texture is None:
        raise ValueError("texture not made well")
    if rows <= 0 or cols <= 0:
        raise ValueError("rows and cols must be positive")
    cell_width = texture.width // cols
    cell_height = texture.height // rows
    prop_x = prop_y = 1.0
    if cell_width > cell_height:
        prop_y = cell_height / cell_width
    elif cell_height:
        prop_x = cell_width / cell_height
    return Anim(
        texture=texture,
        frame_x=1.0 / cols,
        frame_y=1.0 / rows,
        sprite_num=rows,
        lengths=[cols] * rows,
        ratio=[prop_x, prop_y],
        palette=list(texture.colors[:texture.num_tex * 4]),
    )


class AnimList:
    """Every live animation, ticked together once per frame."""

    def __init__(self) -> None:
        self._anims: list[Anim] = []

    def __len__(self) -> int:
        return len(self._anims)

    def __iter__(self) -> Iterator[Anim]:
        return iter(self._anims)

    def __contains__(self, anim: object) -> bool:
        return any(a is anim for a in self._anims)

    def add(self, anim: Anim) -> None:
        self._anims.append(anim)

    def remove(self, anim: Anim) -> None:
        """Remove ``anim`` if present."""
        for i, current in enumerate(self._anims):
            if current is anim:
                del self._anims[i]
                return

    def animate_all(self) -> None:
        for anim in self._anims:
            anim.animate()

    def clear(self) -> None:
        self._anims.clear()


@dataclass
class OrderEntry:
    """One animation queued for drawing at a position, with optional overrides."""

    anim: Anim
    x: float
    y: float
    sprite: int = NO_CHANGE
    rotation: int = NO_CHANGE


class AnimOrder:
    """Animations queued for one draw layer, in the order they were added."""

    def __init__(self, order: int = 0) -> None:
        self.order = order
        self.entries: list[OrderEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[OrderEntry]:
        return iter(self.entries)

    def add(self, anim: Anim, x: float, y: float, sprite: int = NO_CHANGE,
            rotation: int = NO_CHANGE, check: bool = True) -> bool:
        """Queue ``anim``; with ``check`` an animation already queued is skipped.

        Returns whether the animation was queued.
        """
        if check and any(e.anim is anim for e in self.entries):
            return False
        self.entries.append(OrderEntry(anim, x, y, sprite, rotation))
        return True

    def apply(self) -> list[OrderEntry]:
        """Apply sprite and rotation overrides; return the entries in draw order."""
        for entry in self.entries:
            if entry.sprite != NO_CHANGE:
                entry.anim.change_sprite(entry.sprite)
            if entry.rotation != NO_CHANGE:
                entry.anim.set_roto(entry.rotation)
        return list(self.entries)


class DrawLayers:
    """The back, middle and front draw layers of a frame."""

    def __init__(self) -> None:
        self.back = AnimOrder(-1)
        self.mid = AnimOrder(0)
        self.front = AnimOrder(1)

    def __iter__(self) -> Iterator[AnimOrder]:
        return iter((self.back, self.mid, self.front))

    def layer_for(self, draw_order: int) -> AnimOrder:
        if draw_order > 0:
            return self.front
        if draw_order < 0:
            return self.back
        return self.mid

    def add(self, draw_order: int, anim: Anim, x: float, y: float,
            sprite: int = NO_CHANGE, rotation: int = NO_CHANGE,
            check: bool = True) -> bool:
        return self.layer_for(draw_order).add(anim, x, y, sprite, rotation, check)