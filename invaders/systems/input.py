from __future__ import annotations

from typing import Dict, Iterable, Optional

import pygame

from ..constants import KEY_TOGGLE_DEBUG, KEYS_FIRE, KEYS_LEFT, KEYS_RIGHT
from ..events import EventBus, Quit, ToggleDebug
from ..input_state import InputState, Key


def key_constant(name: str) -> int:
    return getattr(pygame, f"K_{name}")


def default_bindings() -> Dict[int, Key]:
    """pygame key code -> logical key, from the names in constants."""
    bindings: Dict[int, Key] = {}
    for names, key in ((KEYS_LEFT, Key.LEFT), (KEYS_RIGHT, Key.RIGHT), (KEYS_FIRE, Key.FIRE)):
        for name in names:
            bindings[key_constant(name)] = key
    return bindings


class InputSystem:
    """
    Feeds pygame key events into an InputState. Unbound keys are dropped;
    Escape and window close publish Quit.
    """

    def __init__(self, keys: InputState, bus: EventBus, bindings: Optional[Dict[int, Key]] = None) -> None:
        self.keys = keys
        self.bus = bus
        self.bindings = default_bindings() if bindings is None else bindings
        self._debug_key = key_constant(KEY_TOGGLE_DEBUG)

    def handle_event(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.QUIT:
            self.bus.publish(Quit())
            return

        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                self.bus.publish(Quit())
                return
            if ev.key == self._debug_key:
                self.bus.publish(ToggleDebug())
                return

        if ev.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = self.bindings.get(ev.key)
            if key is not None:
                self.keys.set_held(key, ev.type == pygame.KEYDOWN)

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for ev in events:
            self.handle_event(ev)
