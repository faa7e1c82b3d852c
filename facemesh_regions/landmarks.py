"""
Gather region points out of a detector landmark array.

The registry never bounds-checks; these helpers are where a consumer meets an
actual array. Out-of-range indices become NaN rows unless ``strict`` is set.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from .indices_mediapipe import MEDIAPIPE_REGIONS, RegionLike, as_region, get_indices, required_landmark_count


class LandmarkCountError(ValueError):
    """Landmark array is too short for the requested regions."""


def landmarks_to_numpy(landmarks: Sequence[Sequence[float]]) -> np.ndarray:
    """Convenience helper to convert a list of (x, y) or (x, y, z) to float32 array."""
    return np.asarray(landmarks, dtype=np.float32)


def check_point_count(num_points: int, regions: Optional[Iterable[RegionLike]] = None) -> None:
    """Raise ``LandmarkCountError`` if ``num_points`` cannot address every index of ``regions``."""
    regions = list(MEDIAPIPE_REGIONS.keys()) if regions is None else [as_region(r) for r in regions]
    needed = required_landmark_count(regions)
    if num_points < needed:
        names = [r.value for r in regions if max(get_indices(r)) >= num_points]
        raise LandmarkCountError(f"got {num_points} landmarks, need {needed} for regions {names}")


def check_landmark_count(landmarks: np.ndarray, regions: Optional[Iterable[RegionLike]] = None) -> None:
    check_point_count(len(landmarks), regions)


def select_region_points(landmarks: np.ndarray, region: RegionLike, strict: bool = False) -> np.ndarray:
    """
    Return the points of ``region`` in region order, shape (len(indices), D).

    With ``strict`` false, indices past the end of ``landmarks`` yield NaN rows
    so contour drawing can skip them.
    """
    pts = np.asarray(landmarks, dtype=np.float32)
    if pts.ndim != 2:
        raise ValueError(f"expected landmarks of shape (N, D), got {pts.shape}")
    idxs = get_indices(region)
    if strict:
        check_landmark_count(pts, [region])
        return pts[list(idxs)]
    out: List[np.ndarray] = []
    for i in idxs:
        if i >= len(pts):
            out.append(np.full(pts.shape[1], np.nan, dtype=np.float32))
        else:
            out.append(pts[i])
    return np.asarray(out, dtype=np.float32).reshape(len(idxs), pts.shape[1])


def select_regions(
    landmarks: np.ndarray, regions: Optional[Iterable[RegionLike]] = None, strict: bool = False
) -> Dict[str, np.ndarray]:
    """Map region name to its points for ``regions`` (all when omitted)."""
    if regions is None:
        regions = MEDIAPIPE_REGIONS.keys()
    selected = [as_region(r) for r in regions]
    if strict:
        check_landmark_count(landmarks, selected)
    return {r.value: select_region_points(landmarks, r) for r in selected}
