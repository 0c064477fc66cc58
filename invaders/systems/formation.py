from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..components import Body, EnemyUnit, Renderable
from ..config import GameConfig
from ..constants import ENEMY
from ..events import EventBus, FormationReversed

if TYPE_CHECKING:
    from ..state import SimulationState

log = logging.getLogger(__name__)


class FormationSystem:
    """
    Lockstep enemy grid:
      - moves only on frames that are a multiple of the level cadence
      - one horizontal step per move, shared direction for every unit
      - crossing the edge margin flips direction, then every unit takes one
        step back in the new direction and drops by its own height
    """

    def __init__(self, config: GameConfig, bus: Optional[EventBus] = None) -> None:
        self.config = config
        self.bus = bus

    def build(self, state: SimulationState) -> List[int]:
        cfg = self.config
        pitch_x = cfg.enemy_width + cfg.column_gap
        pitch_y = cfg.enemy_height + cfg.row_gap
        eids: List[int] = []
        for row in range(1, cfg.rows + 1):
            for col in range(1, cfg.cols + 1):
                eids.append(
                    state.world.spawn(
                        Body(pitch_x * col, pitch_y * row, cfg.enemy_width, cfg.enemy_height),
                        EnemyUnit(cfg.enemy_velocity),
                        Renderable(ENEMY),
                    )
                )
        log.debug("formation built: %d x %d", cfg.rows, cfg.cols)
        return eids

    def update(self, state: SimulationState) -> bool:
        """Returns True if the formation moved this tick."""
        _, rows = state.world.view(Body, EnemyUnit)
        if not rows or not state.clock.every(state.level.cadence):
            return False

        direction = state.formation.direction
        for body, unit in rows:
            body.x += unit.velocity * direction

        left = min(body.x for body, _ in rows)
        right = max(body.right for body, _ in rows)
        cfg = self.config
        if right > cfg.screen_width - cfg.edge_margin or left < cfg.edge_margin:
            direction = state.formation.reverse()
            for body, unit in rows:
                body.x += unit.velocity * direction
                body.y += body.height
            log.debug("formation reversed to %+d at frame %d", direction, state.clock.frame)
            if self.bus is not None:
                self.bus.publish(FormationReversed(direction, state.clock.frame))
        return True
