from __future__ import annotations
import logging
from typing import List
import pygame

from snaply.types import SnapDirection, SnapEdge
from showcase.settings import AppCfg
from showcase.ui.carousel import Carousel

logger = logging.getLogger(__name__)

_EDGE_KEYS = {pygame.K_1: SnapEdge.MIN, pygame.K_2: SnapEdge.MID, pygame.K_3: SnapEdge.MAX}


class CarouselScene:
    """
    Carousels stacked vertically, one per configured edge.
      - drag / wheel scrolls, release snaps
      - 1 / 2 / 3 switch every carousel to MIN / MID / MAX snapping
      - D toggles AUTOMATIC / HORIZONTAL direction
    """
    def __init__(self, screen: pygame.Surface, cfg: AppCfg):
        self.screen = screen
        self.cfg = cfg
        self.carousels: List[Carousel] = [
            Carousel(rect, c, cfg.input, snap_duration=cfg.snap_duration)
            for rect, c in zip(self._rows(), cfg.carousels)
        ]
        self._font = pygame.font.Font(None, 22)

    def _rows(self) -> List[pygame.Rect]:
        n = max(1, len(self.cfg.carousels))
        w, h = self.screen.get_size()
        margin, top = 24, 48
        row_h = max(1, (h - top - margin * (n + 1)) // n)
        return [pygame.Rect(margin, top + margin + i * (row_h + margin), w - 2 * margin, row_h)
                for i in range(n)]

    # --- loop ---
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type == pygame.KEYDOWN and e.key in _EDGE_KEYS:
            edge = _EDGE_KEYS[e.key]
            logger.info("Switching all carousels to %s edge", edge.name)
            for c in self.carousels:
                c.set_edge(edge)
            return True
        if e.type == pygame.KEYDOWN and e.key == pygame.K_d:
            for c in self.carousels:
                nxt = (SnapDirection.HORIZONTAL if c.resolver.direction is SnapDirection.AUTOMATIC
                       else SnapDirection.AUTOMATIC)
                c.set_direction(nxt)
            logger.info("Direction now %s", self.carousels[0].resolver.direction.name if self.carousels else "-")
            return True
        if e.type == pygame.VIDEORESIZE:
            for c, rect in zip(self.carousels, self._rows()):
                c.on_resize(rect)
            return False
        return any(c.handle_event(e) for c in self.carousels)

    def update(self, dt: float) -> None:
        for c in self.carousels:
            c.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.cfg.window.bg_rgb)
        tip = self._font.render("drag to scroll  |  1/2/3: min/mid/max edge  |  D: toggle direction",
                                True, (180, 182, 190))
        surface.blit(tip, (24, 18))
        for c in self.carousels:
            c.draw(surface)
