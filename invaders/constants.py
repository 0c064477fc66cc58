from __future__ import annotations

from dataclasses import dataclass

# ---- Display & Timestep ----
SCREEN_W, SCREEN_H = 510, 600
FPS = 60

# ---- Player craft ----
PLAYER_W, PLAYER_H = 22, 16
PLAYER_VELOCITY = 4
GROUND_MARGIN = 30  # gap between craft bottom and screen bottom

# ---- Enemy units ----
ENEMY_W, ENEMY_H = 20, 20
ENEMY_VELOCITY = 30  # px per formation step

# ---- Projectiles ----
PROJECTILE_W, PROJECTILE_H = 2, 6
PROJECTILE_VELOCITY = 5
PROJECTILE_SPAWN_OFFSET = 10  # spawn this far above the craft's top edge

UP, DOWN = -1, 1

# ---- Formation layout ----
FORMATION_ROWS, FORMATION_COLS = 5, 10
COLUMN_GAP = 10
ROW_GAP = 16
EDGE_MARGIN = 30

# Frames per formation step while the grid is whole, then
# (remaining enemies, frames per formation step); exact-match thresholds
FULL_FORMATION_CADENCE = 40
CADENCE_TIERS = (
    (40, 30),
    (20, 20),
    (6, 10),
    (1, 4),
)

# ---- Colors ----
BACKGROUND = (0, 0, 0)
PLAYER = (0, 128, 0)
ENEMY = (255, 0, 0)
PROJECTILE = (255, 255, 255)
HUD = (200, 200, 240)


# Instrumentation toggles (runtime-togglable)
@dataclass
class DebugFlags:
    show_fps: bool = False
    show_level: bool = False
    show_cache_stats: bool = False

DEBUG = DebugFlags()

# Keybinds (pygame.K_* constants resolved at runtime)
KEYS_LEFT = ("a", "LEFT")
KEYS_RIGHT = ("d", "RIGHT")
KEYS_FIRE = ("SPACE",)
KEY_TOGGLE_DEBUG = "F1"
