from __future__ import annotations

import logging
from typing import Callable, Optional

from snaply.resolver import SnapResolver, ViewportHost
from snaply.types import DragDecision, Point, SnapConfig

logger = logging.getLogger(__name__)

# (velocity, target) -> None. Whatever drag-end behaviour the host had before snapping.
DragEndHandler = Callable[[Point, Point], None]


class SnapBinding:
    """
    Two stage drag-end pipeline for one viewport:
      1. the resolver decides (corrected offset + flags)
      2. the binding applies the decision to the viewport and, when asked to,
         calls the handler that was installed before snapping was added.

    The binding owns neither the viewport nor the downstream handler.
    """
    def __init__(
        self,
        viewport: ViewportHost,
        config: Optional[SnapConfig] = None,
        *,
        downstream: Optional[DragEndHandler] = None,
    ) -> None:
        self.viewport = viewport
        self.resolver = SnapResolver(viewport, config)
        self.downstream = downstream

    def drag_ended(self, velocity: Point, target: Point) -> Optional[Point]:
        """
        Feed a drag release into the pipeline.

        Returns the target the host should still decelerate to on its own, or
        None when the viewport has already been sent to the snapped offset.
        """
        decision: DragDecision = self.resolver.on_drag_end(velocity, target)
        if decision.override_target:
            target = decision.offset
        if decision.animate:
            self.viewport.set_content_offset(decision.offset, animated=True)
        if decision.run_downstream and self.downstream is not None:
            self.downstream(velocity, target)
        else:
            logger.debug("drag end handled by snapping; downstream skipped")
        return None if decision.animate else target
