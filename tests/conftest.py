"""Shared fixtures for the invaders test suite."""

from __future__ import annotations

import os

# pygame adapters are exercised headless.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from invaders.components import Body, EnemyUnit, Renderable
from invaders.config import GameConfig
from invaders.constants import ENEMY, UP
from invaders.events import EventBus
from invaders.simulation import Simulation
from invaders.state import new_state
from invaders.systems.projectiles import ProjectileSystem


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def sim(config, bus):
    return Simulation(config, bus)


@pytest.fixture
def state(config, bus):
    """Player only; no formation built."""
    return new_state(config, bus)


@pytest.fixture
def recorder(bus):
    """Collects every published event of the requested types."""
    seen = []

    def watch(*event_types):
        for et in event_types:
            bus.subscribe(et, seen.append)
        return seen

    return watch


def add_enemy(state, x, y, width=20, height=20, velocity=30):
    return state.world.spawn(Body(x, y, width, height), EnemyUnit(velocity), Renderable(ENEMY))


def shoot_at(state, projectiles: ProjectileSystem, enemy: int) -> int:
    """Spawn an upward projectile already overlapping `enemy`."""
    body = state.world.get(enemy, Body)
    return projectiles.spawn(state, body.x + 1, body.y + 1, UP)
