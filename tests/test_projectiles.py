"""Tests for ProjectileSystem spawn, advance and pruning."""

from __future__ import annotations

import pytest

from invaders.components import Body, Projectile
from invaders.constants import DOWN, UP
from invaders.events import ProjectileFired
from invaders.systems.projectiles import ProjectileSystem

pytestmark = pytest.mark.unit


@pytest.fixture
def projectiles(config, bus):
    return ProjectileSystem(config, bus)


class TestSpawn:
    def test_spawn_creates_entity(self, state, projectiles, config):
        eid = projectiles.spawn(state, 100, 200, UP)
        assert state.world.get(eid, Body) == Body(100, 200, config.projectile_width, config.projectile_height)
        assert state.world.get(eid, Projectile) == Projectile(config.projectile_velocity, UP)

    def test_spawn_publishes(self, state, projectiles, recorder):
        seen = recorder(ProjectileFired)
        eid = projectiles.spawn(state, 1, 2, UP)
        assert seen == [ProjectileFired(eid, 1, 2, UP)]


class TestUpdate:
    def test_empty_set_is_noop(self, state, projectiles):
        projectiles.update(state)
        assert state.world.count(Projectile) == 0

    def test_advances_by_velocity_and_direction(self, state, projectiles):
        up = projectiles.spawn(state, 10, 300, UP)
        down = projectiles.spawn(state, 10, 300, DOWN)
        projectiles.update(state)
        assert state.world.get(up, Body).y == 295
        assert state.world.get(down, Body).y == 305
        assert state.world.get(up, Body).x == 10

    def test_upward_shot_kept_while_partly_visible(self, state, projectiles):
        eid = projectiles.spawn(state, 10, 1, UP)
        projectiles.update(state)  # y = -4, bottom = 2
        assert state.world.has(eid, Projectile)

    def test_upward_shot_pruned_once_fully_above(self, state, projectiles):
        eid = projectiles.spawn(state, 10, 1, UP)
        projectiles.update(state)
        projectiles.update(state)  # y = -9, bottom = -3
        assert not state.world.has(eid, Projectile)
        assert state.world.get(eid, Body) is None

    def test_pruned_on_the_pass_it_crosses(self, state, projectiles):
        eid = projectiles.spawn(state, 10, -1, UP)
        projectiles.update(state)  # bottom lands exactly on 0
        assert not state.world.has(eid, Projectile)

    def test_downward_shot_pruned_below_screen(self, state, projectiles, config):
        eid = projectiles.spawn(state, 10, config.screen_height - 4, DOWN)
        projectiles.update(state)
        assert not state.world.has(eid, Projectile)

    def test_pruning_leaves_others(self, state, projectiles):
        gone = projectiles.spawn(state, 10, -1, UP)
        kept = projectiles.spawn(state, 10, 300, UP)
        projectiles.update(state)
        _, rows = state.world.view(Body, Projectile)
        assert len(rows) == 1
        assert state.world.has(kept, Projectile)
        assert not state.world.has(gone, Projectile)
