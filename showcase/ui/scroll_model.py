from __future__ import annotations
from dataclasses import dataclass, field

from snaply.types import Point, Size
from showcase.ui.anim import Animator, Tween, ease_out_cubic

@dataclass
class ScrollModel:
    """ 2D scroll state of a viewport; satisfies snaply's ViewportHost protocol. """
    content_w: float = 0.0
    content_h: float = 0.0
    viewport_w: float = 0.0
    viewport_h: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    snap_duration: float = 0.25
    animator: Animator = field(default_factory=Animator, repr=False)

    # --- ViewportHost ---
    @property
    def content_offset(self) -> Point: return Point(self.offset_x, self.offset_y)
    @property
    def bounds(self) -> Size: return Size(self.viewport_w, self.viewport_h)
    @property
    def content_size(self) -> Size: return Size(self.content_w, self.content_h)

    def set_content_offset(self, offset: Point, animated: bool = True) -> None:
        x = max(0.0, min(self.max_x(), offset.x))
        y = max(0.0, min(self.max_y(), offset.y))
        if not animated or self.snap_duration <= 0:
            self.animator.cancel(self)
            self.offset_x, self.offset_y = x, y
            return
        self.animator.add(Tween(self, "offset_x", self.offset_x, x, self.snap_duration, ease_out_cubic))
        self.animator.add(Tween(self, "offset_y", self.offset_y, y, self.snap_duration, ease_out_cubic))

    # --- plain scrolling ---
    def max_x(self) -> float: return max(0.0, float(self.content_w - self.viewport_w))
    def max_y(self) -> float: return max(0.0, float(self.content_h - self.viewport_h))
    def clamp(self):
        self.offset_x = max(0.0, min(self.max_x(), self.offset_x))
        self.offset_y = max(0.0, min(self.max_y(), self.offset_y))
    def scroll(self, dx: float, dy: float = 0.0): self.animator.cancel(self); self.offset_x += dx; self.offset_y += dy; self.clamp()
    def to_start(self): self.animator.cancel(self); self.offset_x = self.offset_y = 0.0
    def update(self, dt: float) -> None: self.animator.update(dt)
    def animating(self) -> bool: return self.animator.busy(self)
