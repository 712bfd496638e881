from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from snaply.binding import SnapBinding
from snaply.types import Point, SnapDirection, SnapEdge
from showcase.layout import FlowLayout, content_extent, item_origins, snap_locations
from showcase.settings import CarouselCfg, InputCfg
from showcase.ui.scroll_model import ScrollModel
from showcase.ui.scrollbar import Scrollbar
from showcase.ui.style import CarouselStyle

logger = logging.getLogger(__name__)

# where the edge marker sits, as a fraction of the viewport width
_EDGE_FRAC = {SnapEdge.MIN: 0.0, SnapEdge.MID: 0.5, SnapEdge.MAX: 1.0}


def projected_offset(offset: float, velocity: float, rate: float) -> float:
    """
    Where a released drag would come to rest under per-millisecond exponential
    deceleration `rate` (velocity in px/s).
    """
    rate = max(0.0, min(rate, 0.9999))
    return offset + velocity / 1000.0 * rate / (1.0 - rate)


class Carousel:
    """
    One horizontally scrolling strip of items with snapping.

    The ScrollModel is the viewport the snap resolver reads; the carousel only
    gathers drag input, hands releases to its SnapBinding and draws.
    """
    def __init__(self, rect: pygame.Rect, cfg: CarouselCfg, inp: InputCfg,
                 style: Optional[CarouselStyle] = None, snap_duration: float = 0.25) -> None:
        self.cfg = cfg
        self.inp = inp
        self.style = style or CarouselStyle()
        self.rect = pygame.Rect(rect)
        self.layout: FlowLayout = cfg.layout
        self.model = ScrollModel(snap_duration=snap_duration)
        self.binding = SnapBinding(self.model, cfg.snap, downstream=self._on_released)
        self.current_index = 0

        self._dragging = False
        self._velocity = 0.0
        self._last_ms = 0
        self._font: pygame.font.Font | None = None
        self._relayout(realign=False)

    @property
    def resolver(self):
        return self.binding.resolver

    # --- layout -------------------------------------------------------------
    def on_resize(self, rect: pygame.Rect) -> None:
        self.rect = pygame.Rect(rect)
        self._relayout(realign=True)

    def set_edge(self, edge: SnapEdge) -> None:
        # locations are edge specific: swap both, then realign once
        self.resolver.set_edge(edge)
        self.resolver.set_locations(self._locations(), realign=True)

    def set_direction(self, direction: SnapDirection) -> None:
        self.resolver.set_direction(direction, realign=True)

    def _relayout(self, realign: bool) -> None:
        self.layout.item_height = float(self.rect.h)
        self.layout.item_width = float(self.rect.h) * self.cfg.item_width_frac
        self.model.viewport_w = float(self.rect.w)
        self.model.viewport_h = float(self.rect.h)
        self.model.content_w = content_extent(self.layout, self.cfg.count)
        self.model.content_h = float(self.rect.h)
        self.model.clamp()
        self.resolver.set_locations(self._locations(), realign=realign)

    def _locations(self) -> List[float]:
        if self.cfg.locations is not None:
            return list(self.cfg.locations)
        return snap_locations(self.resolver.edge, self.layout, self.cfg.count)

    # --- input --------------------------------------------------------------
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and self.rect.collidepoint(e.pos):
            self._dragging = True
            self._velocity = 0.0
            self._last_ms = pygame.time.get_ticks()
            self.model.animator.cancel(self.model)
            return True

        if e.type == pygame.MOUSEMOTION and self._dragging:
            now = pygame.time.get_ticks()
            dt = max(1, now - self._last_ms) / 1000.0
            self._last_ms = now
            dx = -float(e.rel[0])
            self.model.scroll(dx)
            k = self.inp.velocity_smoothing
            self._velocity = k * (dx / dt) + (1.0 - k) * self._velocity
            return True

        if e.type == pygame.MOUSEBUTTONUP and e.button == 1 and self._dragging:
            self._dragging = False
            # a pause before letting go means no fling
            if pygame.time.get_ticks() - self._last_ms > 80:
                self._velocity = 0.0
            self.release(self._velocity)
            return True

        if e.type == pygame.MOUSEWHEEL and self.rect.collidepoint(pygame.mouse.get_pos()):
            step = e.x if e.x else e.y
            self.model.scroll(-step * self.inp.wheel_pixels)
            self.release(0.0)
            return True
        return False

    def release(self, velocity_x: float) -> None:
        """ Drag let go with `velocity_x` px/s: project the rest point, then snap. """
        x = self.model.offset_x
        target = Point(projected_offset(x, velocity_x, self.inp.deceleration_rate), 0.0)
        pending = self.binding.drag_ended(Point(velocity_x, 0.0), target)
        if pending is not None:
            self.model.set_content_offset(pending, animated=True)

    def _on_released(self, velocity: Point, target: Point) -> None:
        origins = item_origins(self.layout, self.cfg.count)
        if not origins:
            return
        x = target.x + self.model.viewport_w * _EDGE_FRAC[self.resolver.edge]
        self.current_index = min(range(len(origins)), key=lambda i: abs(origins[i] - x))
        logger.debug("%s: settling on item %d (v=%.1f)", self.cfg.label, self.current_index, velocity.x)

    # --- loop ---------------------------------------------------------------
    def update(self, dt: float) -> None:
        self.model.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        st = self.style
        if self.rect.w <= 0 or self.rect.h <= 0:
            return
        if self._font is None:
            self._font = pygame.font.Font(None, st.font_size)

        pygame.draw.rect(surface, st.bg_rgb, self.rect)
        prev_clip = surface.get_clip()
        surface.set_clip(self.rect)

        ox = self.model.offset_x
        for i, x in enumerate(item_origins(self.layout, self.cfg.count)):
            left = self.rect.x + int(x - ox)
            w = int(self.layout.item_width)
            if left + w < self.rect.x or left > self.rect.right:
                continue
            item = pygame.Rect(left, self.rect.y, w, self.rect.h)
            color = st.item_alt_rgb if i == self.current_index else st.item_rgb
            pygame.draw.rect(surface, color, item, border_radius=st.item_radius)
            label = self._font.render(str(i + 1), True, st.label_rgb)
            surface.blit(label, label.get_rect(center=item.center))

        mx = self.rect.x + int(self.rect.w * _EDGE_FRAC[self.resolver.edge])
        mx = min(max(mx, self.rect.x), self.rect.right - st.marker_px)
        pygame.draw.line(surface, st.marker_rgb, (mx, self.rect.y), (mx, self.rect.bottom), st.marker_px)

        caption = self._font.render(self.cfg.label, True, st.label_rgb)
        surface.blit(caption, (self.rect.x + 8, self.rect.y + 6))

        Scrollbar.draw(surface, self.rect, self.model.content_w, ox, self.model.max_x(), st.scrollbar)
        surface.set_clip(prev_clip)
