"""Tests for InputState held keys and pressed-edge triggers."""

from __future__ import annotations

import pytest

from invaders.input_state import InputState, Key

pytestmark = pytest.mark.unit


class TestHeld:
    def test_unknown_key_is_never_held(self):
        keys = InputState()
        assert keys.is_held(Key.LEFT) is False
        assert keys.is_held("not-a-key") is False

    def test_key_down_and_up(self):
        keys = InputState()
        keys.key_down(Key.LEFT)
        assert keys.is_held(Key.LEFT)
        keys.key_up(Key.LEFT)
        assert not keys.is_held(Key.LEFT)

    def test_keys_are_independent(self):
        keys = InputState()
        keys.set_held(Key.RIGHT, True)
        assert keys.is_held(Key.RIGHT)
        assert not keys.is_held(Key.LEFT)


class TestPressedEdge:
    def test_no_edge_without_press(self):
        keys = InputState()
        assert keys.take_edge(Key.FIRE) is False

    def test_edge_fires_once_while_held(self):
        keys = InputState()
        keys.key_down(Key.FIRE)
        reads = [keys.take_edge(Key.FIRE) for _ in range(10)]
        assert reads == [True] + [False] * 9

    def test_release_rearms_edge(self):
        keys = InputState()
        keys.key_down(Key.FIRE)
        assert keys.take_edge(Key.FIRE)
        keys.key_up(Key.FIRE)
        assert not keys.take_edge(Key.FIRE)
        keys.key_down(Key.FIRE)
        assert keys.take_edge(Key.FIRE)

    def test_repeated_key_down_does_not_rearm(self):
        # OS auto-repeat delivers key-down again without a key-up.
        keys = InputState()
        keys.key_down(Key.FIRE)
        assert keys.take_edge(Key.FIRE)
        keys.key_down(Key.FIRE)
        assert not keys.take_edge(Key.FIRE)

    def test_press_and_release_before_read_is_lost(self):
        keys = InputState()
        keys.key_down(Key.FIRE)
        keys.key_up(Key.FIRE)
        assert not keys.take_edge(Key.FIRE)

    def test_reset_clears_everything(self):
        keys = InputState()
        keys.key_down(Key.FIRE)
        keys.take_edge(Key.FIRE)
        keys.reset()
        assert not keys.is_held(Key.FIRE)
        keys.key_down(Key.FIRE)
        assert keys.take_edge(Key.FIRE)
