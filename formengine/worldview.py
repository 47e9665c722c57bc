"""The world view: which part of the world is on screen, at what size, and where the camera sits."""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

from .camera import Camera


def sign(value: float) -> int:
    """-1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def _c_round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _fraction(value: int, scale: int) -> float:
    """Fractional cell part of a position held in units of 1/scale."""
    return math.fmod(value, scale) / scale


class WorldView:
    """The visible window onto a ``world_x`` by ``world_y`` grid.

    Centres are held in units of ``1 / scale_power`` of a cell. ``frame`` is
    the number of cells across the view before the screen ratio is applied;
    ``frame_x``/``frame_y`` are the cells drawn on each axis, ``buff_x``/
    ``buff_y`` the first cell drawn and ``obj_sx``/``obj_sy`` the size of one
    cell in normalised screen units.
    """

    def __init__(self, world_x: int, world_y: int, scale: int = 100,
                 x_ratio: float = 1.0, y_ratio: float = 1.0,
                 camera: Optional[Camera] = None,
                 tiles: Optional[Iterable[Any]] = None) -> None:
        if world_x <= 0 or world_y <= 0:
            raise ValueError("world dimensions must be positive")
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.world_x = world_x
        self.world_y = world_y
        self.scale_power = scale
        self.x_ratio = x_ratio
        self.y_ratio = y_ratio
        self.center_x = 0.0
        self.center_y = 0.0
        self.frame_x = 0.0
        self.frame_y = 0.0
        self.frame = 0.0
        self.frame_min = 0.0
        self.buff_x = 0
        self.buff_y = 0
        self.obj_sx = 0.0
        self.obj_sy = 0.0
        self.frame_dest = 0.0
        self.cen_dest_x = 0.0
        self.cen_dest_y = 0.0
        self.move_speed = 18.0
        self.zoom_speed = 0.2
        self.camera = camera if camera is not None else Camera()
        self.tiles = tiles
        self.background: Any = None

    def _axis(self, frame: float, ratio: float, center: float,
              world: int) -> tuple[float, int, float, float]:
        """Return (cells drawn, first cell, cell size, camera offset) for one axis."""
        scale = self.scale_power
        span = math.ceil(frame * ratio) - 1
        if span <= 0:
            raise ValueError(f"frame {frame} is too small to show any cells")
        center_buff = int(0.5 * scale) if span % 2 == 0 else 0
        half = span / 2
        low = math.floor(half) * scale - center_buff
        high = world * scale - (math.ceil(half) * scale + center_buff)
        c = int(clamp(center, low, high))
        remainder = _fraction(c + center_buff, scale)
        if span >= world:
            size = (2.0 * (world / span)) / world
            return float(world), 0, size, 1 - world / span
        if center_buff == 0:
            buff = int(c / scale - math.floor(half))
        else:
            buff = int(max(0.0, _c_round(c / scale - half)))
        size = 2.0 / span
        return float(span + 1), buff, size, -remainder * size

    def set_frame(self, frame: float) -> None:
        """Show ``frame`` cells across, recompute the layout and move the camera."""
        fx, bx, sx, cam_x = self._axis(frame, self.x_ratio, self.center_x, self.world_x)
        fy, by, sy, cam_y = self._axis(frame, self.y_ratio, self.center_y, self.world_y)
        self.frame = frame
        self.frame_x, self.buff_x, self.obj_sx = fx, bx, sx
        self.frame_y, self.buff_y, self.obj_sy = fy, by, sy
        self.camera.x = cam_x
        self.camera.y = cam_y
        self.camera.set_size(1.0)
        if self.tiles is not None:
            for tile_set in self.tiles:
                tile_set.set_tile_size(self.obj_sx, self.obj_sy)
                tile_set.resize(int(self.frame_x), int(self.frame_y))

    def set_frame_min(self, minimum: float) -> None:
        self.frame_min = minimum

    def set_center(self, xp: float, yp: float) -> None:
        """Centre the view on cell position (xp, yp)."""
        self.center_x = xp * self.scale_power
        self.center_y = yp * self.scale_power

    def center_camera(self, x: float, y: float) -> None:
        """Move the camera so that world position (x, y) is in the middle of the screen."""
        size_x = 2.0 / self.frame_x
        size_y = 2.0 / self.frame_y
        cx = clamp(x, 0, self.world_x)
        cy = clamp(y, 0, self.world_y)
        fx = -((-1 + size_x / 2) + cx * size_x)
        fy = -((-1 + size_y / 2) + cy * size_y)
        self.camera.set_position(fx * self.camera.z, fy * self.camera.z)

    def resize_screen(self, x_ratio: float, y_ratio: float) -> None:
        """Apply a new screen ratio to the current frame."""
        self.x_ratio = x_ratio
        self.y_ratio = y_ratio
        self.set_frame(self.frame)

    def background_offset(self) -> tuple[float, float]:
        """Cell position at which the world-sized background is drawn."""
        return (self.world_x / 2 - self.buff_x - 0.5,
                self.world_y / 2 - self.buff_y - 0.5)

    @staticmethod
    def _step(current: float, dest: float, speed: float) -> float:
        if current == dest:
            return current
        if sign(dest - current) > 0:
            return current + speed if current + speed < dest else dest
        return current - speed if current - speed > dest else dest

    def lerp(self) -> bool:
        """Step frame and centre towards their destinations; return whether anything moved."""
        if (self.frame == self.frame_dest and self.center_x == self.cen_dest_x
                and self.center_y == self.cen_dest_y):
            return False
        self.frame = self._step(self.frame, self.frame_dest, self.zoom_speed)
        self.center_x = self._step(self.center_x, self.cen_dest_x, self.move_speed)
        self.center_y = self._step(self.center_y, self.cen_dest_y, self.move_speed)
        self.set_frame(self.frame)
        return True


class Follower:
    """Forms the view keeps in sight, centring on them and zooming to fit."""

    def __init__(self) -> None:
        self._forms: list[Any] = []
        self._started = False

    def __len__(self) -> int:
        return len(self._forms)

    def __iter__(self):
        return iter(self._forms)

    def follow(self, form: Any) -> None:
        self._started = True
        self._forms.append(form)

    def unfollow(self, form: Any) -> None:
        """Stop following ``form``; raises ValueError if nothing was ever followed."""
        if not self._started:
            raise ValueError("we are not following anything")
        if form is None:
            return
        for i, current in enumerate(self._forms):
            if current is form:
                del self._forms[i]
                return

    @staticmethod
    def _position(form: Any) -> tuple[float, float]:
        mod = getattr(form, "p_mod", (0.0, 0.0))
        return form.pos[0] + mod[0], form.pos[1] + mod[1]

    def update(self, view: WorldView) -> bool:
        """Centre ``view`` on the followed forms and fit them in; return whether it changed."""
        forms = self._forms
        if not forms:
            return False
        positions = [self._position(f) for f in forms]
        xp = sum(p[0] for p in positions) / len(positions)
        yp = sum(p[1] for p in positions) / len(positions)
        max_distance = max(
            distance(a.pos[0], a.pos[1], b.pos[0], b.pos[1])
            for a in forms for b in forms
        )
        world_max = max(view.world_x, view.world_y) + 1
        max_distance = clamp(max_distance + 10,
                             min(world_max, view.frame_min),
                             max(world_max, view.frame_min))
        scale = view.scale_power
        if (xp * scale != view.center_x or yp * scale != view.center_y
                or max_distance != view.frame):
            view.set_center(xp, yp)
            view.set_frame(max_distance)
            return True
        return False