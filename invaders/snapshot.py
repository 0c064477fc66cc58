from __future__ import annotations

from typing import List, NamedTuple, Protocol, Tuple

from .components import Body, EnemyUnit, PlayerCraft, Projectile, Renderable
from .ecs import World

Color = Tuple[int, int, int]


class DrawRect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    color: Color


class RenderSink(Protocol):
    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...


def snapshot(world: World) -> List[DrawRect]:
    """Read-only draw list: player, then projectiles, then enemies."""
    out: List[DrawRect] = []
    for kind in (PlayerCraft, Projectile, EnemyUnit):
        _, rows = world.view(Body, Renderable, kind)
        for body, rend, _ in rows:
            out.append(DrawRect(body.x, body.y, body.width, body.height, rend.color))
    return out


def replay(commands: List[DrawRect], sink: RenderSink) -> None:
    for cmd in commands:
        sink.draw_rect(*cmd)
