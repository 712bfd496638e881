from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from snaply.locations import SnapLocationSet
from snaply.types import (
    ZERO, DragDecision, Geometry, Point, Size, SnapConfig, SnapDirection, SnapEdge,
)

logger = logging.getLogger(__name__)


class ViewportHost(Protocol):
    """
    What the resolver reads from (and asks of) the scrollable it is bound to.
    Optional hints, read with getattr():
      - is_list: bool               single column list widget
      - is_grid: bool               grid widget with its own scroll axis
      - grid_direction: SnapDirection
    """
    content_offset: Point
    bounds: Size
    content_size: Size

    def set_content_offset(self, offset: Point, animated: bool = True) -> None: ...


# --------------------------------------------------------------------------- #
# Pure functions
# --------------------------------------------------------------------------- #
def infer_direction(
    explicit: SnapDirection,
    content_size: Size,
    *,
    is_list: bool = False,
    is_grid: bool = False,
    grid_vertical: bool = True,
) -> SnapDirection:
    if is_list:
        return SnapDirection.VERTICAL
    if explicit is not SnapDirection.AUTOMATIC:
        return explicit
    if is_grid:
        return SnapDirection.VERTICAL if grid_vertical else SnapDirection.HORIZONTAL
    if content_size.width > content_size.height:
        return SnapDirection.HORIZONTAL
    return SnapDirection.VERTICAL


def maximum_value(edge: SnapEdge, direction: SnapDirection, geometry: Geometry) -> float:
    """ Largest MIN-edge offset a snap target may reach without leaving the content. """
    content = geometry.content_size.along(direction)
    bounds = geometry.bounds.along(direction)
    if edge is SnapEdge.MID:
        return content - bounds / 2
    if edge is SnapEdge.MAX:
        return content
    return content - bounds


def _edge_shift(edge: SnapEdge, bounds: float) -> float:
    if edge is SnapEdge.MID:
        return bounds / 2
    if edge is SnapEdge.MAX:
        return bounds
    return 0.0


def resolve_offset(
    requested: Point,
    geometry: Geometry,
    edge: SnapEdge,
    direction: SnapDirection,
    locations: SnapLocationSet,
) -> Point:
    """
    Map a requested offset onto the nearest snap location.

    `direction` must already be resolved (HORIZONTAL uses x, anything else y).
    The orthogonal axis of the result is always 0.
    """
    value = requested.along(direction)
    if value <= 0 or not len(locations):
        return ZERO

    bounds = geometry.bounds.along(direction)
    shift = _edge_shift(edge, bounds)
    value += shift

    if value > locations.last:
        # past the final stop: rest on it, but never beyond the scrollable end
        end = maximum_value(SnapEdge.MIN, direction, geometry)
        return Point.on_axis(max(min(locations.last, end), 0.0), direction)

    # first location strictly past `value`; if none, `next_` ends on the last one
    next_, prev = 0.0, 0.0
    for i, loc in enumerate(locations):
        next_ = loc
        if loc > value:
            prev = locations[max(0, i - 1)]
            break

    next_ = min(next_, maximum_value(edge, direction, geometry))

    span = abs(next_ - prev)
    mid = next_ - span / 2
    if mid <= 0:
        return ZERO

    location = prev if value < mid else next_
    location = max(location - shift, 0.0)
    return Point.on_axis(location, direction)


# --------------------------------------------------------------------------- #
# Stateful resolver bound to one viewport
# --------------------------------------------------------------------------- #
class SnapResolver:
    """
    Snap state for a single viewport.

    The viewport is not owned: it is queried for geometry on every call and
    never cached beyond one resolution. Locations are replaced wholesale.
    """

    def __init__(self, viewport: ViewportHost, config: Optional[SnapConfig] = None) -> None:
        cfg = config or SnapConfig()
        self.viewport = viewport
        self._edge = cfg.edge
        self._direction = cfg.direction
        self._locations = SnapLocationSet.build()

    # --- read-only state ---------------------------------------------------
    @property
    def edge(self) -> SnapEdge:
        return self._edge

    @property
    def direction(self) -> SnapDirection:
        """ Configured direction (may be AUTOMATIC); see supported_direction(). """
        return self._direction

    @property
    def locations(self) -> SnapLocationSet:
        return self._locations

    def __repr__(self) -> str:
        return (f"<SnapResolver edge={self._edge.name} direction={self._direction.name}, "
                f"Locations:\n{list(self._locations)}>")

    # --- queries -----------------------------------------------------------
    def geometry(self, offset: Optional[Point] = None) -> Geometry:
        vp = self.viewport
        return Geometry(
            bounds=vp.bounds,
            content_size=vp.content_size,
            offset=vp.content_offset if offset is None else offset,
        )

    def supported_direction(self) -> SnapDirection:
        vp = self.viewport
        grid_dir = getattr(vp, "grid_direction", None)
        return infer_direction(
            self._direction,
            vp.content_size,
            is_list=bool(getattr(vp, "is_list", False)),
            is_grid=bool(getattr(vp, "is_grid", False)),
            grid_vertical=grid_dir is not SnapDirection.HORIZONTAL,
        )

    def content_offset_for_target(self, offset: Point) -> Point:
        direction = self.supported_direction()
        resolved = resolve_offset(offset, self.geometry(offset), self._edge, direction, self._locations)
        logger.debug("snap %s -> %s (edge=%s, direction=%s)",
                     offset, resolved, self._edge.name, direction.name)
        return resolved

    # --- host events -------------------------------------------------------
    def on_drag_end(self, velocity: Point, requested: Point) -> DragDecision:
        if not self._locations.has_stops():
            return DragDecision(requested, override_target=False, animate=False, run_downstream=True)

        direction = self.supported_direction()
        offset = self.content_offset_for_target(requested)
        speed = abs(velocity.along(direction))

        if speed == 0:
            return DragDecision(offset, override_target=False, animate=True, run_downstream=False)

        # animate as well as retargeting; hosts otherwise flicker on release
        return DragDecision(offset, override_target=True, animate=True, run_downstream=True)

    def scroll_to_nearest(self, offset: Point) -> Point:
        """ Resolve `offset` and ask the viewport to animate there. """
        target = self.content_offset_for_target(offset)
        self.viewport.set_content_offset(target, animated=True)
        return target

    # --- setters -----------------------------------------------------------
    def set_locations(self, locations: Iterable[float], realign: bool = False) -> None:
        current = self.viewport.content_offset
        self._locations = SnapLocationSet.build(locations)
        logger.debug("snap locations -> %s", list(self._locations))
        if realign:
            self.scroll_to_nearest(current)

    def set_edge(self, edge: SnapEdge, realign: bool = False) -> None:
        self._edge = edge
        if realign:
            self.scroll_to_nearest(self.viewport.content_offset)

    def set_direction(self, direction: SnapDirection, realign: bool = False) -> None:
        self._direction = direction
        if realign:
            self.scroll_to_nearest(self.viewport.content_offset)
