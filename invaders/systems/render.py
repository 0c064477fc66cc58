from __future__ import annotations

from typing import List, Optional

import pygame

from ..constants import BACKGROUND, DEBUG, HUD
from ..ecs import CacheStats
from ..snapshot import Color, DrawRect, RenderSink, replay


class SurfaceSink:
    """RenderSink backed by a pygame Surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(width), round(height)))


class RenderSystem:
    """
    Full redraw every frame from the simulation snapshot; no diffing.
    """

    def __init__(self, screen: pygame.Surface, sink: Optional[RenderSink] = None, font: Optional[pygame.font.Font] = None) -> None:
        self.screen = screen
        self.sink = sink if sink is not None else SurfaceSink(screen)
        self.font = font

    def render(self, commands: List[DrawRect], hud_lines: Optional[List[str]] = None) -> None:
        self.screen.fill(BACKGROUND)
        replay(commands, self.sink)

        # HUD / debug
        if self.font is None or not hud_lines:
            return
        y = 6
        for line in hud_lines:
            txt = self.font.render(line, True, HUD)
            self.screen.blit(txt, (8, y))
            y += 18

    @staticmethod
    def hud_lines(
        frame: int, remaining: int, tier: int, cadence: int, fps: float, cache: Optional[CacheStats] = None
    ) -> List[str]:
        lines: List[str] = []
        if DEBUG.show_fps:
            lines.append(f"{fps:5.1f} fps  frame {frame}")
        if DEBUG.show_level:
            lines.append(f"tier {tier + 1}  cadence {cadence}  enemies {remaining}")
        if DEBUG.show_cache_stats and cache is not None:
            lines.append(f"views cache: {cache.hits}/{cache.misses}")
        return lines
