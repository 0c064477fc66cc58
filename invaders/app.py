from __future__ import annotations

import logging
import os
import sys

import pygame

from .config import GameConfig
from .constants import DEBUG
from .events import CadenceChanged, EventBus, FormationCleared, Quit, ToggleDebug
from .simulation import Simulation
from .systems.input import InputSystem
from .systems.render import RenderSystem

log = logging.getLogger(__name__)

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def log_level(environ=None) -> int:
    """INVADERS_LOG_LEVEL as a logging level; unknown names fall back to WARNING."""
    env = os.environ if environ is None else environ
    return _LOG_LEVELS.get(env.get("INVADERS_LOG_LEVEL", "WARNING").strip().upper(), logging.WARNING)


class Game:
    """pygame shell: events in, one simulation tick, full redraw."""

    def __init__(self, config: GameConfig, screen: pygame.Surface, clock: pygame.time.Clock) -> None:
        self.config = config
        self.clock = clock
        self.bus = EventBus()
        self.sim = Simulation(config, self.bus)
        self.input_sys = InputSystem(self.sim.state.input, self.bus)
        self.font = pygame.font.SysFont("consolas,menlo,monaco,dejavu sans mono", 14)
        self.renderer = RenderSystem(screen, font=self.font)
        self.running = True

        self.bus.subscribe(Quit, self._on_quit)
        self.bus.subscribe(ToggleDebug, self._toggle_debug)
        self.bus.subscribe(CadenceChanged, self._on_cadence)
        self.bus.subscribe(FormationCleared, self._on_cleared, once=True)

    def _on_quit(self, _: Quit) -> None:
        self.running = False

    def _toggle_debug(self, _: ToggleDebug) -> None:
        DEBUG.show_fps = not DEBUG.show_fps
        DEBUG.show_level = not DEBUG.show_level
        DEBUG.show_cache_stats = not DEBUG.show_cache_stats

    def _on_cadence(self, ev: CadenceChanged) -> None:
        pygame.display.set_caption(f"invaders – tier {ev.tier + 1}")

    def _on_cleared(self, _: FormationCleared) -> None:
        pygame.display.set_caption("invaders – formation cleared")

    def frame(self) -> None:
        self.input_sys.handle_events(pygame.event.get())
        if not self.running:
            return
        self.sim.tick()

        state = self.sim.state
        hud = RenderSystem.hud_lines(
            state.clock.frame,
            self.sim.remaining,
            state.level.tier,
            state.level.cadence,
            self.clock.get_fps(),
            state.world.cache_stats,
        )
        self.renderer.render(self.sim.snapshot(), hud)
        pygame.display.flip()


def main() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig.from_env()

    pygame.init()
    pygame.display.set_caption("invaders")
    screen = pygame.display.set_mode((int(config.screen_width), int(config.screen_height)))
    clock = pygame.time.Clock()

    game = Game(config, screen, clock)
    # One tick per frame; movement is per tick, so a slow frame rate slows the game.
    while game.running:
        game.frame()
        clock.tick(config.fps)

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
