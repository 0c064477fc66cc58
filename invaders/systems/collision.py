from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from ..components import Body, EnemyUnit, Projectile
from ..events import EnemyDestroyed, EventBus, FormationCleared

if TYPE_CHECKING:
    from ..state import SimulationState

log = logging.getLogger(__name__)

Hit = Tuple[int, int]  # (projectile, enemy)


class CollisionResolver:
    """
    Brute-force AABB pass, projectiles x enemies. Each projectile destroys at
    most one enemy per tick; the level controller hears the new count once.
    """

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self.bus = bus

    def resolve(self, state: SimulationState) -> List[Hit]:
        world = state.world
        shot_ids, shots = world.view(Body, Projectile)
        enemy_ids, enemies = world.view(Body, EnemyUnit)
        if not shot_ids or not enemy_ids:
            return []

        hits: List[Hit] = []
        dead: Set[int] = set()
        for sid, (shot_body, _) in zip(shot_ids, shots):
            for eid, (enemy_body, _) in zip(enemy_ids, enemies):
                if eid in dead:
                    continue
                if shot_body.overlaps(enemy_body):
                    dead.add(eid)
                    hits.append((sid, eid))
                    break

        if not hits:
            return hits

        frame = state.clock.frame
        for sid, eid in hits:
            world.destroy(sid)
            world.destroy(eid)
            log.debug("projectile %d hit enemy %d", sid, eid)
            if self.bus is not None:
                self.bus.publish(EnemyDestroyed(sid, eid, frame))

        remaining = world.count(EnemyUnit)
        state.level.report_remaining(remaining)
        if remaining == 0:
            log.info("formation cleared at frame %d", frame)
            if self.bus is not None:
                self.bus.publish(FormationCleared(frame))
        return hits
