from __future__ import annotations

from typing import TYPE_CHECKING

from ..components import Body, PlayerCraft
from ..config import GameConfig
from ..constants import UP
from ..input_state import Key
from .projectiles import ProjectileSystem

if TYPE_CHECKING:
    from ..state import SimulationState


class PlayerSystem:
    """
    Horizontal movement from held keys, one shot per fire key-down.
    """

    def __init__(self, config: GameConfig, projectiles: ProjectileSystem) -> None:
        self.config = config
        self.projectiles = projectiles

    def update(self, state: SimulationState) -> None:
        body = state.world.get(state.player, Body)
        craft = state.world.get(state.player, PlayerCraft)
        if body is None or craft is None:
            return

        keys = state.input
        right_limit = self.config.screen_width - body.width
        if keys.is_held(Key.LEFT):
            body.x = max(0.0, body.x - craft.velocity)
        if keys.is_held(Key.RIGHT):
            body.x = min(right_limit, body.x + craft.velocity)

        if keys.take_edge(Key.FIRE):
            self.projectiles.spawn(
                state,
                body.x + body.width / 2,
                body.y - self.config.projectile_spawn_offset,
                UP,
            )
