from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SnapDirection(Enum):
    """
    Axis snapping applies to.
    AUTOMATIC defers to the viewport: list widgets are always vertical, grid
    widgets use their own scroll axis, anything else compares content width
    and height (ties -> VERTICAL).
    """
    AUTOMATIC = "automatic"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class SnapEdge(Enum):
    """ Which point of the viewport lines up with a snap location. """
    MIN = "min"     # left / top
    MID = "mid"     # center
    MAX = "max"     # right / bottom


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def along(self, direction: SnapDirection) -> float:
        return self.x if direction is SnapDirection.HORIZONTAL else self.y

    @staticmethod
    def on_axis(value: float, direction: SnapDirection) -> "Point":
        if direction is SnapDirection.HORIZONTAL:
            return Point(value, 0.0)
        return Point(0.0, value)


ZERO = Point()


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def along(self, direction: SnapDirection) -> float:
        return self.width if direction is SnapDirection.HORIZONTAL else self.height


@dataclass(frozen=True)
class Geometry:
    bounds: Size                # viewport size
    content_size: Size          # total scrollable content
    offset: Point = ZERO        # requested offset of the pending scroll


@dataclass(frozen=True)
class DragDecision:
    offset: Point               # corrected offset
    override_target: bool       # replace the host's pending target with `offset`
    animate: bool               # host should animate to `offset` now
    run_downstream: bool        # host should still run its own drag-end handlers


@dataclass
class SnapConfig:
    edge: SnapEdge = SnapEdge.MIN
    direction: SnapDirection = SnapDirection.AUTOMATIC
