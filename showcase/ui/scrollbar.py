from __future__ import annotations

import pygame
from showcase.ui.style import ScrollbarStyle

class Scrollbar:
    """
    Stateless drawer for a thin horizontal scroll indicator along the bottom of a widget.
    """
    @staticmethod
    def draw(layer: pygame.Surface, widget_rect: pygame.Rect, content_w: float,
             scroll_x: float, max_scroll: float, sb: ScrollbarStyle) -> None:
        track_x = widget_rect.x + sb.margin
        track_y = widget_rect.bottom - sb.margin - sb.height
        track_w = widget_rect.w - 2 * sb.margin
        if track_w <= 0 or sb.height <= 0:
            return

        overflow = content_w > widget_rect.w
        if not overflow and not sb.show_when_no_overflow:
            return

        track_rect = pygame.Rect(track_x, track_y, track_w, sb.height)
        pygame.draw.rect(layer, sb.track_color, track_rect, border_radius=sb.radius)

        if overflow:
            ratio = max(0.0, min(1.0, widget_rect.w / max(1.0, content_w)))
            thumb_w = max(sb.min_thumb_size, int(track_w * ratio))
            pos_ratio = max(0.0, min(1.0, scroll_x / max(1e-6, max_scroll)))
            free = max(0, track_w - thumb_w)
            thumb_x = track_x + int(free * pos_ratio)
        else:
            thumb_w = track_w
            thumb_x = track_x

        thumb_rect = pygame.Rect(thumb_x, track_y, thumb_w, sb.height)
        pygame.draw.rect(layer, sb.thumb_color, thumb_rect, border_radius=sb.radius)
