from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List, Optional, Tuple, Type, TypeVar

E = TypeVar("E")  # event type variable
Handler = Callable[[Any], None]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Base event marker class."""


# --- Shell events ---
@dataclass(frozen=True)
class Quit(Event):
    pass


@dataclass(frozen=True)
class ToggleDebug(Event):
    pass


# --- Simulation events ---
@dataclass(frozen=True)
class ProjectileFired(Event):
    entity: int
    x: float
    y: float
    direction: int


@dataclass(frozen=True)
class EnemyDestroyed(Event):
    projectile: int
    enemy: int
    frame: int


@dataclass(frozen=True)
class FormationReversed(Event):
    direction: int
    frame: int


@dataclass(frozen=True)
class CadenceChanged(Event):
    tier: int
    cadence: int
    remaining: int


@dataclass(frozen=True)
class FormationCleared(Event):
    frame: int


class EventBus:
    """
    Synchronous pub/sub keyed by exact event type.

    - a failing handler is logged and skipped; delivery continues
    - once=True handlers are dropped after their first delivery
    """

    def __init__(self) -> None:
        self._subs: DefaultDict[Type[Event], List[Tuple[int, bool, Handler]]] = DefaultDict(list)
        self._next_id: int = 1

    def subscribe(self, event_type: Type[E], handler: Handler, *, once: bool = False) -> int:
        handle_id = self._next_id
        self._next_id += 1
        self._subs[event_type].append((handle_id, once, handler))
        return handle_id

    def unsubscribe(self, event_type: Type[E], handle_id: Optional[int] = None, handler: Optional[Handler] = None) -> None:
        subs = self._subs.get(event_type)
        if not subs:
            return
        self._subs[event_type] = [
            (hid, once, h)
            for hid, once, h in subs
            if hid != handle_id and (handler is None or h != handler)
        ]

    def publish(self, event: Event) -> None:
        subs = self._subs.get(type(event))
        if not subs:
            return

        spent: List[int] = []
        for handle_id, once, handler in list(subs):
            if once:
                spent.append(handle_id)
            try:
                handler(event)
            except Exception:
                log.exception("handler %r failed on %r", handler, event)

        if spent:
            self._subs[type(event)] = [s for s in self._subs[type(event)] if s[0] not in spent]
