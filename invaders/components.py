from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ---- Core spatial components ----
@dataclass
class Body:
    """Axis-aligned box; (x, y) is the top-left corner in screen units."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "Body") -> bool:
        # Open intervals: touching edges do not count.
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass
class Renderable:
    color: Tuple[int, int, int] = (255, 255, 255)


# ---- Gameplay ----
@dataclass
class PlayerCraft:
    velocity: float


@dataclass
class EnemyUnit:
    """Step magnitude per formation move."""
    velocity: float


@dataclass
class Projectile:
    velocity: float
    direction: int  # -1 up (player shots), +1 down
