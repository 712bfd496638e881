from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml

from snaply.settings import parse_direction, parse_edge, parse_locations, snap_config_from_mapping
from snaply.types import SnapConfig, SnapDirection, SnapEdge
from showcase.layout import FlowLayout

logger = logging.getLogger(__name__)

DEFAULTS_PATH = str(Path(__file__).resolve().parent / "config" / "defaults.yaml")

@dataclass
class WindowCfg:
    width: int = 1024
    height: int = 720
    title: str = "snaply showcase"
    bg_rgb: tuple[int, int, int] = (14, 15, 18)

@dataclass
class InputCfg:
    deceleration_rate: float = 0.99     # per millisecond, like a "fast" scroll view
    wheel_pixels: int = 40
    velocity_smoothing: float = 0.6     # weight of the newest drag sample

@dataclass
class CarouselCfg:
    label: str = "Min"
    edge: SnapEdge = SnapEdge.MIN
    direction: SnapDirection = SnapDirection.HORIZONTAL
    count: int = 20
    item_width_frac: float = 0.8        # item width as a fraction of the carousel height
    locations: Optional[List[float]] = None   # explicit stops; derived from the layout when None
    layout: FlowLayout = field(default_factory=FlowLayout)

    @property
    def snap(self) -> SnapConfig:
        return SnapConfig(edge=self.edge, direction=self.direction)

def _default_carousels() -> List[CarouselCfg]:
    return [
        CarouselCfg(label="Min", edge=SnapEdge.MIN, item_width_frac=0.8),
        CarouselCfg(label="Mid", edge=SnapEdge.MID, item_width_frac=1.5),
        CarouselCfg(label="Max", edge=SnapEdge.MAX, item_width_frac=0.8),
    ]

@dataclass
class AppCfg:
    fps: int = 60
    log_level: str = "INFO"
    snap_duration: float = 0.25
    window: WindowCfg = field(default_factory=WindowCfg)
    input: InputCfg = field(default_factory=InputCfg)
    carousels: List[CarouselCfg] = field(default_factory=_default_carousels)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def _carousel(path: str, idx: int, raw: Any, snap: SnapConfig) -> CarouselCfg:
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: carousels[{idx}] must be a mapping")
    base = CarouselCfg()
    try:
        edge = parse_edge(raw.get("edge", snap.edge))
        direction = parse_direction(raw.get("direction", snap.direction))
        locations = parse_locations(raw["locations"]) if raw.get("locations") is not None else None
    except ValueError as e:
        raise ValueError(f"{path}: carousels[{idx}]: {e}") from e
    lay = FlowLayout(
        spacing=float(_get(raw, "layout.spacing", 10.0)),
        inset_left=float(_get(raw, "layout.inset_left", 0.0)),
        inset_right=float(_get(raw, "layout.inset_right", 0.0)),
        header_width=float(_get(raw, "layout.header_width", 0.0)),
        footer_width=float(_get(raw, "layout.footer_width", 0.0)),
    )
    return CarouselCfg(
        label=str(raw.get("label") or edge.name.title()),
        edge=edge,
        direction=direction,
        count=max(0, int(raw.get("count", base.count))),
        item_width_frac=float(raw.get("item_width_frac", base.item_width_frac)),
        locations=locations,
        layout=lay,
    )

def load_settings(path: str = DEFAULTS_PATH) -> AppCfg:
    data = {}
    p = Path(path)
    if p.exists():
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning("Settings file '%s' not found; using built-in defaults", path)

    try:
        snap = snap_config_from_mapping(_get(data, "snap", None))
    except ValueError as e:
        raise ValueError(f"{path}: snap: {e}") from e

    raw_carousels = _get(data, "carousels", None)
    if raw_carousels is None:
        carousels = _default_carousels()
    elif isinstance(raw_carousels, list):
        carousels = [_carousel(path, i, c, snap) for i, c in enumerate(raw_carousels)]
    else:
        raise ValueError(f"{path}: 'carousels' must be a list")

    return AppCfg(
        fps=int(_get(data, "fps", 60)),
        log_level=str(_get(data, "log_level", "INFO")).upper(),
        snap_duration=float(_get(data, "snap.duration", 0.25)),
        window=WindowCfg(
            width=int(_get(data, "window.width", 1024)),
            height=int(_get(data, "window.height", 720)),
            title=str(_get(data, "window.title", "snaply showcase")),
            bg_rgb=tuple(_get(data, "window.bg_rgb", (14, 15, 18))),
        ),
        input=InputCfg(
            deceleration_rate=float(_get(data, "input.deceleration_rate", 0.99)),
            wheel_pixels=int(_get(data, "input.wheel_pixels", 40)),
            velocity_smoothing=float(_get(data, "input.velocity_smoothing", 0.6)),
        ),
        carousels=carousels,
    )
