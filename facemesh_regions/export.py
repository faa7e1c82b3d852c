"""Export the region table for non-Python consumers (shaders, Unity scripts)."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Iterable, List, Optional

import yaml

from .config import load_config, regions_from_config
from .indices_mediapipe import Region, RegionLike, UnknownRegion, as_region, get_indices

FORMATS = ["yaml", "json", "c"]

# Array names that differ from the camelCased region value.
_C_NAMES = {Region.MOUTH_CORNERS: "mouthCornerIndices"}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def c_array_name(region: RegionLike) -> str:
    region = as_region(region)
    return _C_NAMES.get(region, _camel(region.value) + "Indices")


def render(regions: Iterable[RegionLike], fmt: str = "yaml") -> str:
    """Serialize ``regions`` as yaml, json or C array declarations."""
    table: Dict[str, List[int]] = {}
    for r in regions:
        region = as_region(r)
        table[region.value] = list(get_indices(region))
    if fmt == "yaml":
        return yaml.safe_dump(table, sort_keys=False, default_flow_style=None)
    if fmt == "json":
        return json.dumps(table, indent=2) + "\n"
    if fmt == "c":
        lines = [
            f"int[] {c_array_name(name)} = {{ {', '.join(str(i) for i in idxs)} }};"
            for name, idxs in table.items()
        ]
        return "\n".join(lines) + "\n"
    raise ValueError(f"unsupported format {fmt!r}; expected one of {FORMATS}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export MediaPipe Face Mesh region indices")
    parser.add_argument("--config", type=str, default=None, help="Path to config YAML")
    parser.add_argument("--regions", type=str, nargs="+", default=None, help="Region names, e.g. face_oval left_eye")
    parser.add_argument("--format", type=str, choices=FORMATS, default=None, help="Output format")
    parser.add_argument("--output", type=str, default=None, help="Output file (stdout when omitted)")
    return parser.parse_args(argv)


def merge_config(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    merged = dict(cfg)
    if args.regions is not None:
        merged["regions"] = args.regions
    if args.format is not None:
        merged["format"] = args.format
    merged.setdefault("format", "yaml")
    return merged


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config) if args.config else {}
        cfg = merge_config(cfg, args)
        regions = regions_from_config(cfg)
        text = render(regions, cfg["format"])
    except (UnknownRegion, ValueError, OSError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {len(regions)} regions to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
