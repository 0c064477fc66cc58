from __future__ import annotations

from enum import Enum
from typing import Dict, Hashable


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"


class InputState:
    """
    Held keys plus pressed-edge triggers.

    take_edge() reports a key-down at most once: it latches on first read and
    only re-arms when the key is released. Reading it mutates state, so call
    it once per tick per key.
    """

    def __init__(self) -> None:
        self._held: Dict[Hashable, bool] = {}
        self._consumed: Dict[Hashable, bool] = {}

    def set_held(self, key: Hashable, held: bool) -> None:
        self._held[key] = held
        if not held:
            self._consumed[key] = False

    def key_down(self, key: Hashable) -> None:
        self.set_held(key, True)

    def key_up(self, key: Hashable) -> None:
        self.set_held(key, False)

    def is_held(self, key: Hashable) -> bool:
        return self._held.get(key, False)

    def take_edge(self, key: Hashable) -> bool:
        if self._consumed.get(key, False):
            return False
        if self._held.get(key, False):
            self._consumed[key] = True
            return True
        return False

    def reset(self) -> None:
        self._held.clear()
        self._consumed.clear()
