from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from snaply.types import SnapEdge


@dataclass
class FlowLayout:
    """ Single-row horizontal flow: header | inset | item gap item gap ... | inset | footer """
    item_width: float = 160.0
    item_height: float = 200.0
    spacing: float = 10.0           # minimum inter-item spacing
    inset_left: float = 0.0
    inset_right: float = 0.0
    header_width: float = 0.0
    footer_width: float = 0.0

    def widths(self, count: int, item_widths: Optional[Sequence[float]] = None) -> List[float]:
        if item_widths is not None:
            return [float(w) for w in item_widths[:count]]
        return [float(self.item_width)] * max(0, count)


def item_origins(layout: FlowLayout, count: int, item_widths: Optional[Sequence[float]] = None) -> List[float]:
    """ Left x of every item in content coordinates. """
    x = layout.header_width + layout.inset_left
    out: List[float] = []
    for w in layout.widths(count, item_widths):
        out.append(x)
        x += w + layout.spacing
    return out


def content_extent(layout: FlowLayout, count: int, item_widths: Optional[Sequence[float]] = None) -> float:
    widths = layout.widths(count, item_widths)
    gaps = layout.spacing * max(0, len(widths) - 1)
    return (layout.header_width + layout.inset_left + sum(widths) + gaps
            + layout.inset_right + layout.footer_width)


def snap_locations(
    edge: SnapEdge,
    layout: FlowLayout,
    count: int,
    item_widths: Optional[Sequence[float]] = None,
) -> List[float]:
    """
    One snap location per item, expressed for `edge`:
      MIN -> running item end (leading edges line up)
      MID -> running item center
      MAX -> running item end plus one gap (trailing edges line up)
    """
    if edge is SnapEdge.MIN:
        origin = layout.header_width + layout.inset_left
    elif edge is SnapEdge.MID:
        origin = (layout.header_width + layout.inset_left) / 2
    else:
        origin = layout.footer_width + layout.inset_right

    locations: List[float] = []
    size = origin
    for w in layout.widths(count, item_widths):
        size += w + layout.spacing
        if edge is SnapEdge.MIN:
            locations.append(size - origin)
        elif edge is SnapEdge.MID:
            locations.append(size + origin - w / 2 - layout.spacing)
        else:
            locations.append(size - origin + layout.spacing)
    return locations
