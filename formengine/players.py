"""Players, their input bindings and dispatch of received input to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Handler = Callable[[Any, float], None]


@dataclass
class InputMapping:
    """An input name bound to a handler called with (character, value)."""

    input: str
    func: Handler


@dataclass(eq=False)
class Player:
    """A controlled character with its input bindings."""

    character: Any
    num: int
    delete_func: Optional[Callable[[Any], None]] = None
    controls: list[InputMapping] = field(default_factory=list)
    joy: Any = None
    active: bool = True
    pause_player: bool = False

    def add_control(self, key: str, func: Handler) -> InputMapping:
        mapping = InputMapping(key, func)
        self.controls.append(mapping)
        return mapping

    def release(self) -> None:
        """Drop the bindings and hand the character to the delete function."""
        self.controls.clear()
        if self.delete_func is not None:
            self.delete_func(self.character)

    def handle(self, key: str, value: float) -> bool:
        """Call the first handler bound to ``key``; return whether one was found."""
        for mapping in self.controls:
            if mapping.input == key:
                mapping.func(self.character, value)
                return True
        return False


class PlayerManager:
    """The registered players, at most one per player number."""

    def __init__(self) -> None:
        self._players: list[Player] = []

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def check(self, num: int) -> Optional[Player]:
        return next((p for p in self._players if p.num == num), None)

    def add(self, player: Player) -> Optional[Player]:
        """Register ``player``; if its number is taken return the existing player instead."""
        existing = self.check(player.num)
        if existing is not None:
            return existing
        self._players.append(player)
        return None

    def remove(self, player: Player) -> None:
        for i, current in enumerate(self._players):
            if current is player:
                del self._players[i]
                return

    def process(self, inputs: Iterable[tuple[str, float]], paused: bool) -> int:
        """Dispatch each (input, value) to every eligible player; return handlers called.

        Inactive players are skipped, and while paused so are players marked
        ``pause_player``.
        """
        called = 0
        for key, value in inputs:
            for player in list(self._players):
                if player.active and (not paused or not player.pause_player):
                    if player.handle(key, value):
                        called += 1
        return called

    def release_all(self) -> None:
        for player in self._players:
            player.release()
        self._players.clear()