"""YAML config for region selection."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

import yaml

from .indices_mediapipe import Region, as_region
from .landmarks import check_point_count


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(cfg).__name__}")
    return cfg


def resolve_regions(names: Iterable[Any]) -> Tuple[Region, ...]:
    """Validate region names, keeping first occurrence order."""
    seen: List[Region] = []
    for name in names:
        region = as_region(name)
        if region not in seen:
            seen.append(region)
    return tuple(seen)


def regions_from_config(cfg: Dict[str, Any]) -> Tuple[Region, ...]:
    """Regions named under ``regions`` (default all), checked against ``num_points`` when set."""
    names = cfg.get("regions")
    if names is None:
        regions = tuple(Region)
    elif isinstance(names, str):
        regions = resolve_regions([names])
    elif isinstance(names, (list, tuple)):
        regions = resolve_regions(names)
    else:
        raise ValueError(f"regions must be a name or a list of names, got {type(names).__name__}")
    if not regions:
        raise ValueError("no regions selected")
    num_points = cfg.get("num_points")
    if num_points is not None:
        if isinstance(num_points, bool) or not isinstance(num_points, int):
            raise ValueError(f"num_points must be an integer, got {num_points!r}")
        check_point_count(num_points, regions)
    return regions
