"""A free camera driven by keyboard controls, bound to a player numbered -1."""

from __future__ import annotations

from typing import Optional

from .players import Player, PlayerManager
from .worldview import WorldView


class GodView:
    """Free camera over a world view, controlled through its own player."""

    def __init__(self, view: WorldView, manager: Optional[PlayerManager] = None,
                 px: float = 0, py: float = 0, fx: int = 0, fy: int = 0) -> None:
        self.cam = view
        self.on = False
        self.move = [0, 0]
        self.zoom = [False, False]
        self.pos = [int(px), int(py)]
        self.frame = [int(fx), int(fy)]
        self.speed = 1
        self.zoom_speed_x = 1
        self.zoom_speed_y = 0
        self.max_zoom = max(view.world_x, view.world_y) * 3
        self.min_zoom = 2
        self.player = Player(self, -1)
        self.player.active = True
        if manager is not None:
            manager.add(self.player)
        self.player.add_control("K0^", GodView.cam_up)
        self.player.add_control("K0<", GodView.cam_left)
        self.player.add_control("K0_", GodView.cam_down)
        self.player.add_control("K0>", GodView.cam_right)
        self.player.add_control("K0-", GodView.zoom_out)
        self.player.add_control("K0=", GodView.zoom_in)

    def zoom_out(self, value: float) -> None:
        if self.on:
            self.zoom[0] = value > 0

    def zoom_in(self, value: float) -> None:
        if self.on:
            self.zoom[1] = value > 0

    def _press(self, axis: int, direction: int, value: float) -> None:
        if not self.on:
            return
        if value > 0:
            self.move[axis] = direction
        elif self.move[axis] != -direction:
            self.move[axis] = 0

    def cam_up(self, value: float) -> None:
        self._press(1, 1, value)

    def cam_left(self, value: float) -> None:
        self._press(0, -1, value)

    def cam_down(self, value: float) -> None:
        self._press(1, -1, value)

    def cam_right(self, value: float) -> None:
        self._press(0, 1, value)

    def turn_on(self) -> None:
        self.on = True
        self.apply_frame()

    def turn_off(self) -> None:
        self.on = False

    def place(self, px: float, py: float, fx: int, fy: int) -> None:
        """Set the centre cell and frame size without applying them."""
        self.frame = [int(fx), int(fy)]
        self.pos = [int(px), int(py)]

    def apply_frame(self) -> bool:
        """Push position and frame to the view if they differ; return whether they did."""
        scale = self.cam.scale_power
        if (self.cam.frame != self.frame[0]
                or self.pos[0] * scale != self.cam.center_x
                or self.pos[1] * scale != self.cam.center_y):
            self.cam.set_center(self.pos[0], self.pos[1])
            self.cam.set_frame(self.frame[0])
            return True
        return False