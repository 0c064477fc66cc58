from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple, Type, TypeVar

T = TypeVar("T")

View = Tuple[Tuple[int, ...], Tuple[Tuple[Any, ...], ...]]


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0


class World:
    """
    Entity arena:
      - one store per component type: Dict[type, Dict[entity, component]]
      - view() returns immutable (entities, rows) snapshots, cached until a
        store they read from changes
      - destroy() removes an entity from every store; ids are never reused
    """

    def __init__(self) -> None:
        self._next_eid: int = 1
        self.stores: Dict[Type[Any], Dict[int, Any]] = {}
        self._views: Dict[Tuple[Type[Any], ...], View] = {}
        self._readers: Dict[Type[Any], Set[Tuple[Type[Any], ...]]] = {}
        self.cache_stats = CacheStats()

    # ---- Entity & Components ----
    def spawn(self, *components: Any) -> int:
        eid = self._next_eid
        self._next_eid += 1
        for comp in components:
            self.add(eid, comp)
        return eid

    def add(self, entity: int, component: Any) -> None:
        self.stores.setdefault(type(component), {})[entity] = component
        self._invalidate(type(component))

    def get(self, entity: int, comp_type: Type[T]) -> T | None:
        store = self.stores.get(comp_type)
        return None if store is None else store.get(entity)

    def has(self, entity: int, comp_type: Type[Any]) -> bool:
        return entity in self.stores.get(comp_type, ())

    def destroy(self, entity: int) -> bool:
        """Returns False if the entity held no components."""
        found = False
        for comp_type, store in self.stores.items():
            if store.pop(entity, None) is not None:
                found = True
                self._invalidate(comp_type)
        return found

    def count(self, comp_type: Type[Any]) -> int:
        return len(self.stores.get(comp_type, ()))

    # ---- Views ----
    def view(self, *comp_types: Type[Any]) -> View:
        """
        Entities holding every listed component, in id order, with their
        components in the order requested.
        """
        key = tuple(comp_types)
        cached = self._views.get(key)
        if cached is not None:
            self.cache_stats.hits += 1
            return cached

        stores = [self.stores.get(ct, {}) for ct in comp_types]
        if stores:
            smallest = min(stores, key=len)
            ids = sorted(e for e in smallest if all(e in s for s in stores))
        else:
            ids = []
        rows: List[Tuple[Any, ...]] = [tuple(s[e] for s in stores) for e in ids]

        result: View = (tuple(ids), tuple(rows))
        self._views[key] = result
        for ct in comp_types:
            self._readers.setdefault(ct, set()).add(key)
        self.cache_stats.misses += 1
        return result

    def _invalidate(self, comp_type: Type[Any]) -> None:
        for key in self._readers.get(comp_type, ()):
            self._views.pop(key, None)
