from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from . import constants as C

CadenceTable = Tuple[Tuple[int, int], ...]


class ConfigError(ValueError):
    """Raised when a GameConfig cannot drive a session."""


@dataclass(frozen=True)
class GameConfig:
    """
    Session constants. Fixed at session start; use with_overrides() to derive
    a variant (tests, tuning) instead of mutating.
    """

    screen_width: float = C.SCREEN_W
    screen_height: float = C.SCREEN_H
    fps: int = C.FPS

    player_width: float = C.PLAYER_W
    player_height: float = C.PLAYER_H
    player_velocity: float = C.PLAYER_VELOCITY
    ground_margin: float = C.GROUND_MARGIN

    enemy_width: float = C.ENEMY_W
    enemy_height: float = C.ENEMY_H
    enemy_velocity: float = C.ENEMY_VELOCITY

    projectile_width: float = C.PROJECTILE_W
    projectile_height: float = C.PROJECTILE_H
    projectile_velocity: float = C.PROJECTILE_VELOCITY
    projectile_spawn_offset: float = C.PROJECTILE_SPAWN_OFFSET

    rows: int = C.FORMATION_ROWS
    cols: int = C.FORMATION_COLS
    column_gap: float = C.COLUMN_GAP
    row_gap: float = C.ROW_GAP
    edge_margin: float = C.EDGE_MARGIN

    # None derives the tiers from the grid size; see cadence_tiers.
    cadence_table: Optional[CadenceTable] = None

    @property
    def formation_size(self) -> int:
        return self.rows * self.cols

    @property
    def cadence_tiers(self) -> CadenceTable:
        """
        (remaining, divisor) tiers. The first threshold is always the full
        grid; the fixed tiers below it are kept when smaller than the grid.
        """
        if self.cadence_table is not None:
            return self.cadence_table
        size = self.formation_size
        lower = tuple(t for t in C.CADENCE_TIERS if t[0] < size)
        return ((size, C.FULL_FORMATION_CADENCE),) + lower

    @property
    def initial_cadence(self) -> int:
        return self.cadence_tiers[0][1]

    def with_overrides(self, **changes) -> "GameConfig":
        cfg = replace(self, **changes)
        cfg.validate()
        return cfg

    def validate(self) -> None:
        positive = (
            "screen_width",
            "screen_height",
            "fps",
            "player_width",
            "player_height",
            "player_velocity",
            "enemy_width",
            "enemy_height",
            "enemy_velocity",
            "projectile_width",
            "projectile_height",
            "projectile_velocity",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.rows < 0 or self.cols < 0:
            raise ConfigError("formation rows/cols must not be negative")
        for name in ("ground_margin", "projectile_spawn_offset", "column_gap", "row_gap", "edge_margin"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if self.player_width > self.screen_width:
            raise ConfigError("player craft is wider than the screen")

        table = self.cadence_tiers
        if not table:
            raise ConfigError("cadence table is empty")
        for (t0, d0), (t1, d1) in zip(table, table[1:]):
            if t1 >= t0:
                raise ConfigError(f"cadence thresholds must descend: {t0} then {t1}")
            if d1 >= d0:
                raise ConfigError(f"cadence divisors must decrease: {d0} then {d1}")
        if any(d <= 0 for _, d in table):
            raise ConfigError("cadence divisors must be positive")
        if table[0][0] != self.formation_size:
            raise ConfigError(
                f"first cadence threshold must equal the formation size {self.formation_size}, got {table[0][0]}"
            )

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """Defaults, with INVADERS_FPS overriding the shell frame rate."""
        env = os.environ if environ is None else environ
        raw = env.get("INVADERS_FPS")
        if raw is None:
            cfg = cls()
        else:
            try:
                fps = int(raw)
            except ValueError:
                raise ConfigError(f"INVADERS_FPS must be an integer, got {raw!r}") from None
            cfg = cls(fps=fps)
        cfg.validate()
        return cfg


DEFAULT_CONFIG = GameConfig()
