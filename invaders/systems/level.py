from __future__ import annotations

import logging
from typing import Optional

from ..config import CadenceTable
from ..events import CadenceChanged, EventBus

log = logging.getLogger(__name__)


def tier_for(table: CadenceTable, remaining: int) -> Optional[int]:
    """Index of the tier whose threshold equals `remaining`, else None."""
    for tier, (threshold, _) in enumerate(table):
        if threshold == remaining:
            return tier
    return None


def cadence_for(table: CadenceTable, remaining: int, current: int) -> int:
    """
    Exact-match lookup: a count that is not a listed threshold keeps
    `current`. Batched removals can therefore skip a tier.
    """
    tier = tier_for(table, remaining)
    return current if tier is None else table[tier][1]


class LevelController:
    """
    Difficulty tier for the formation: frames between formation steps.
    Only changes when CollisionResolver reports a new enemy count.
    """

    def __init__(self, table: CadenceTable, bus: Optional[EventBus] = None) -> None:
        self.table = table
        self.bus = bus
        self.tier = 0
        self.cadence = table[0][1]

    def report_remaining(self, remaining: int) -> bool:
        """Returns True if the cadence changed."""
        tier = tier_for(self.table, remaining)
        if tier is None or tier == self.tier:
            return False

        self.tier = tier
        self.cadence = cadence_for(self.table, remaining, self.cadence)
        log.info("tier %d: %d enemies left, formation steps every %d frames", tier + 1, remaining, self.cadence)
        if self.bus is not None:
            self.bus.publish(CadenceChanged(tier, self.cadence, remaining))
        return True
