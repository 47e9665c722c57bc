"""The main loop, its pause and stop switches, and helpers over a form's animations."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableSequence, Optional

from .anim import Anim, AnimList
from .players import PlayerManager
from .ui import UILayers


class Engine:
    """Runs a game function once per frame, dispatching queued input to players.

    Input arrives as (name, value) pairs appended to ``inputs``; it is handed
    to the players at the start of each frame, also while paused.
    """

    def __init__(self) -> None:
        self.players = PlayerManager()
        self.anims = AnimList()
        self.ui = UILayers()
        self.inputs: list[tuple[str, float]] = []
        self.running = True
        self.freeze = False
        self.background_color = [0.0, 0.0, 0.0, 0.0]

    def run(self, game: Callable[[], Any],
            should_close: Optional[Callable[[], bool]] = None) -> int:
        """Loop until stopped or ``should_close`` says so; return the frames run."""
        frames = 0
        while self.running and not (should_close is not None and should_close()):
            inputs, self.inputs = self.inputs, []
            self.players.process(inputs, self.freeze)
            if not self.freeze:
                game()
            frames += 1
        return frames

    def stop(self) -> None:
        self.running = False

    def toggle_pause(self) -> None:
        self.freeze = not self.freeze

    def set_background_color(self, r: float, g: float, b: float, a: float) -> None:
        self.background_color = [r, g, b, a]


def attach_anim(anims: MutableSequence[Anim], anim: Anim,
                registry: Optional[AnimList]) -> None:
    """Give a form another animation and register it for ticking."""
    anims.append(anim)
    if registry is not None:
        registry.add(anim)


def change_sprites(anims: Iterable[Anim], index: int) -> None:
    for anim in anims:
        anim.change_sprite(index)


def set_offsets(anims: Iterable[Anim], x: float, y: float) -> None:
    for anim in anims:
        anim.set_offset(x, y)


def set_inverts(anims: Iterable[Anim], axis: int, flipped: bool) -> None:
    for anim in anims:
        anim.set_invert(axis, flipped)


def set_rotos(anims: Iterable[Anim], roto: int) -> None:
    for anim in anims:
        anim.set_roto(roto)