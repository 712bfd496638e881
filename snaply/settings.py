from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from snaply.types import SnapConfig, SnapDirection, SnapEdge

logger = logging.getLogger(__name__)


def parse_edge(raw: Any) -> SnapEdge:
    if isinstance(raw, SnapEdge):
        return raw
    s = str(raw or "").strip().lower()
    for e in SnapEdge:
        if s in (e.value, e.name.lower()):
            return e
    raise ValueError(f"Unknown snap edge: {raw!r} (expected one of {[e.value for e in SnapEdge]})")


def parse_direction(raw: Any) -> SnapDirection:
    if isinstance(raw, SnapDirection):
        return raw
    s = str(raw or "").strip().lower()
    for d in SnapDirection:
        if s in (d.value, d.name.lower()):
            return d
    raise ValueError(f"Unknown snap direction: {raw!r} (expected one of {[d.value for d in SnapDirection]})")


def snap_config_from_mapping(data: Dict[str, Any] | None) -> SnapConfig:
    """
    Build a SnapConfig from {edge: min|mid|max, direction: automatic|vertical|horizontal}.
    Missing keys keep the defaults.
    """
    if data is None:
        return SnapConfig()
    if not isinstance(data, dict):
        raise ValueError(f"snap config must be a mapping, got {type(data).__name__}")
    cfg = SnapConfig()
    if data.get("edge") is not None:
        cfg.edge = parse_edge(data["edge"])
    if data.get("direction") is not None:
        cfg.direction = parse_direction(data["direction"])
    return cfg


def parse_locations(raw: Any) -> List[float]:
    if raw is None:
        return []
    if not isinstance(raw, Iterable) or isinstance(raw, (str, bytes, dict)):
        raise ValueError(f"snap locations must be a list of numbers, got {raw!r}")
    try:
        return [float(v) for v in raw]
    except (TypeError, ValueError) as e:
        raise ValueError(f"snap locations must be numeric: {raw!r}") from e


def load_snap_config(path: str, key: str = "snap") -> SnapConfig:
    """ Read the `key` section of a YAML file. A missing file yields defaults. """
    p = Path(path)
    if not p.exists():
        logger.warning("Snap config '%s' not found; using defaults", path)
        return SnapConfig()
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    try:
        return snap_config_from_mapping(data.get(key))
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
