"""Tests for the cadence table lookup and LevelController."""

from __future__ import annotations

import pytest

from invaders.config import DEFAULT_CONFIG
from invaders.events import CadenceChanged
from invaders.systems.level import LevelController, cadence_for, tier_for

pytestmark = pytest.mark.unit

TABLE = DEFAULT_CONFIG.cadence_tiers


class TestLookup:
    @pytest.mark.parametrize("remaining,tier", [(50, 0), (40, 1), (20, 2), (6, 3), (1, 4)])
    def test_thresholds(self, remaining, tier):
        assert tier_for(TABLE, remaining) == tier

    @pytest.mark.parametrize("remaining", [49, 39, 21, 7, 0, 100])
    def test_miss(self, remaining):
        assert tier_for(TABLE, remaining) is None

    def test_cadence_for_exact_match(self):
        assert cadence_for(TABLE, 40, current=40) == 30

    def test_cadence_for_miss_keeps_current(self):
        assert cadence_for(TABLE, 39, current=40) == 40
        assert cadence_for(TABLE, 0, current=4) == 4


class TestLevelController:
    def test_starts_at_first_tier(self):
        level = LevelController(TABLE)
        assert (level.tier, level.cadence) == (0, 40)

    def test_report_progression(self):
        level = LevelController(TABLE)
        cadences = []
        for remaining in range(49, 0, -1):
            level.report_remaining(remaining)
            cadences.append((remaining, level.cadence))
        by_count = dict(cadences)
        assert by_count[41] == 40
        assert by_count[40] == 30
        assert by_count[21] == 30
        assert by_count[20] == 20
        assert by_count[6] == 10
        assert by_count[1] == 4

    def test_skipped_threshold_never_updates(self):
        level = LevelController(TABLE)
        assert level.report_remaining(39) is False
        assert level.cadence == 40

    def test_repeat_report_is_not_a_change(self, bus):
        seen = []
        bus.subscribe(CadenceChanged, seen.append)
        level = LevelController(TABLE, bus)
        assert level.report_remaining(40) is True
        assert level.report_remaining(40) is False
        assert seen == [CadenceChanged(tier=1, cadence=30, remaining=40)]

    def test_change_is_logged(self, caplog):
        level = LevelController(TABLE)
        with caplog.at_level("INFO", logger="invaders.systems.level"):
            level.report_remaining(20)
        assert "tier 3" in caplog.text
