from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..components import Body, Projectile, Renderable
from ..config import GameConfig
from ..constants import PROJECTILE
from ..events import EventBus, ProjectileFired

if TYPE_CHECKING:
    from ..state import SimulationState

log = logging.getLogger(__name__)


class ProjectileSystem:
    """
    Owns every projectile from spawn to removal. update() moves and prunes in
    one pass so collision checks never see an off-screen shot.
    """

    def __init__(self, config: GameConfig, bus: Optional[EventBus] = None) -> None:
        self.config = config
        self.bus = bus

    def spawn(self, state: SimulationState, x: float, y: float, direction: int) -> int:
        cfg = self.config
        eid = state.world.spawn(
            Body(x, y, cfg.projectile_width, cfg.projectile_height),
            Projectile(cfg.projectile_velocity, direction),
            Renderable(PROJECTILE),
        )
        log.debug("projectile %d spawned at (%.1f, %.1f) dir %+d", eid, x, y, direction)
        if self.bus is not None:
            self.bus.publish(ProjectileFired(eid, x, y, direction))
        return eid

    def update(self, state: SimulationState) -> None:
        world = state.world
        eids, rows = world.view(Body, Projectile)
        if not eids:
            return

        height = self.config.screen_height
        for eid, (body, shot) in zip(eids, rows):
            body.y += shot.velocity * shot.direction
            gone = body.bottom <= 0 if shot.direction < 0 else body.y >= height
            if gone:
                world.destroy(eid)
                log.debug("projectile %d left the screen", eid)
