"""
Simulation orchestrator.

One tick, always in this order:
    clock -> player -> projectiles -> formation (cadence-gated) -> collisions

Collisions see this tick's post-move positions, so a shot and an enemy that
cross each other within one step can miss. Rendering happens outside, from
snapshot().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, List, Optional

from .components import EnemyUnit, Projectile
from .config import DEFAULT_CONFIG, GameConfig
from .events import EventBus
from .snapshot import DrawRect, snapshot
from .state import SimulationState, new_state
from .systems.collision import CollisionResolver, Hit
from .systems.formation import FormationSystem
from .systems.player import PlayerSystem
from .systems.projectiles import ProjectileSystem

log = logging.getLogger(__name__)


class SimStatus(Enum):
    RUNNING = "running"
    CLEARED = "cleared"  # formation empty; ticking continues, nothing resets


@dataclass(frozen=True)
class TickReport:
    frame: int
    hits: List[Hit]
    remaining: int
    formation_moved: bool


class Simulation:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG, bus: Optional[EventBus] = None) -> None:
        config.validate()
        self.config = config
        self.bus = bus if bus is not None else EventBus()

        self.projectiles = ProjectileSystem(config, self.bus)
        self.player = PlayerSystem(config, self.projectiles)
        self.formation = FormationSystem(config, self.bus)
        self.collisions = CollisionResolver(self.bus)

        self.state: SimulationState = new_state(config, self.bus)
        self.formation.build(self.state)
        log.info(
            "session started: %d enemies, cadence %d, screen %gx%g",
            self.remaining,
            self.state.level.cadence,
            config.screen_width,
            config.screen_height,
        )

    # ---- Input ----
    def key_down(self, key: Hashable) -> None:
        self.state.input.key_down(key)

    def key_up(self, key: Hashable) -> None:
        self.state.input.key_up(key)

    # ---- Tick ----
    def tick(self) -> TickReport:
        state = self.state
        frame = state.clock.tick()
        self.player.update(state)
        self.projectiles.update(state)
        moved = self.formation.update(state)
        hits = self.collisions.resolve(state)
        return TickReport(frame, hits, self.remaining, moved)

    def run(self, frames: int) -> List[TickReport]:
        return [self.tick() for _ in range(frames)]

    # ---- Queries ----
    @property
    def remaining(self) -> int:
        return self.state.world.count(EnemyUnit)

    @property
    def projectile_count(self) -> int:
        return self.state.world.count(Projectile)

    @property
    def status(self) -> SimStatus:
        return SimStatus.CLEARED if self.remaining == 0 else SimStatus.RUNNING

    def snapshot(self) -> List[DrawRect]:
        return snapshot(self.state.world)
