"""A 2D camera: translation plus uniform zoom, expressed as a 4x4 matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class Camera:
    """Camera position (x, y) and zoom factor z.

    ``on_change`` is called with the camera whenever its position or size is
    changed through :meth:`set_position` or :meth:`set_size`; a renderer can
    use it to upload :meth:`matrix` to its shaders.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 1.0
    on_change: Optional[Callable[["Camera"], None]] = field(
        default=None, repr=False, compare=False
    )

    def set_position(self, x: float, y: float) -> None:
        """Move the camera and notify the listener."""
        self.x = x
        self.y = y
        self._changed()

    def set_size(self, z: float) -> None:
        """Change the zoom factor and notify the listener."""
        self.z = z
        self._changed()

    def matrix(self) -> list[float]:
        """Return the row-major 4x4 camera matrix."""
        return [
            self.z, 0.0, 0.0, self.x,
            0.0, self.z, 0.0, self.y,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self)