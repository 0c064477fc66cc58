from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .clock import SimulationClock
from .components import Body, PlayerCraft, Renderable
from .config import GameConfig
from .constants import PLAYER
from .ecs import World
from .events import EventBus
from .input_state import InputState
from .systems.level import LevelController


@dataclass
class FormationState:
    direction: int = 1

    def __post_init__(self) -> None:
        if self.direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {self.direction!r}")

    def reverse(self) -> int:
        self.direction = -self.direction
        return self.direction


@dataclass
class SimulationState:
    """Everything a tick reads or writes. Owned by the Simulation."""
    world: World
    level: LevelController
    player: int
    input: InputState = field(default_factory=InputState)
    clock: SimulationClock = field(default_factory=SimulationClock)
    formation: FormationState = field(default_factory=FormationState)


def new_state(config: GameConfig, bus: Optional[EventBus] = None) -> SimulationState:
    """Fresh session: the player craft placed, no enemies or projectiles yet."""
    world = World()
    player = world.spawn(
        Body(
            (config.screen_width - config.player_width) / 2,
            config.screen_height - (config.player_height + config.ground_margin),
            config.player_width,
            config.player_height,
        ),
        PlayerCraft(config.player_velocity),
        Renderable(PLAYER),
    )
    return SimulationState(world=world, level=LevelController(config.cadence_tiers, bus), player=player)
