"""
MediaPipe Face Mesh landmark regions.

Each region is a fixed, ordered tuple of indices into the landmark array
produced by MediaPipe Face Mesh with ``refine_landmarks=True`` (478 points,
iris points at 468..477). Contour regions keep drawing order so consumers can
connect consecutive points into a polyline.

Side naming follows the table the photobooth shaders were written against:
eyes and irises are named from the viewer's side (``LEFT_EYE`` starts at 33),
while ears, eyebrows and cheeks are named from the subject's side.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

MESH_LANDMARK_COUNT = 468  # refine_landmarks=False


class Region(str, Enum):
    LEFT_EYE = "left_eye"
    RIGHT_EYE = "right_eye"
    LEFT_IRIS = "left_iris"
    RIGHT_IRIS = "right_iris"
    OUTER_LIPS = "outer_lips"
    INNER_LIPS = "inner_lips"
    NOSE = "nose"
    MOUTH_CORNERS = "mouth_corners"
    RIGHT_EAR = "right_ear"
    LEFT_EAR = "left_ear"
    RIGHT_EYEBROW = "right_eyebrow"
    LEFT_EYEBROW = "left_eyebrow"
    FACE_OVAL = "face_oval"
    NOSE_BRIDGE = "nose_bridge"
    RIGHT_CHEEK = "right_cheek"
    LEFT_CHEEK = "left_cheek"
    FOREHEAD = "forehead"


class UnknownRegion(KeyError):
    """Raised for a region name outside :class:`Region`."""

    def __init__(self, region: object) -> None:
        super().__init__(region)
        self.region = region

    def __str__(self) -> str:
        return f"unknown landmark region {self.region!r}; expected one of {REGION_ORDER}"


RegionLike = Union[Region, str]

LEFT_EYE_INDICES: Tuple[int, ...] = (33, 7, 163, 144, 145, 153, 154, 155, 133, 173, 157, 158, 159, 160, 161, 246)
RIGHT_EYE_INDICES: Tuple[int, ...] = (362, 382, 381, 380, 374, 373, 390, 249, 263, 466, 388, 387, 386, 385, 384, 398)

# Refined iris points, center first then the four rim points.
LEFT_IRIS_INDICES: Tuple[int, ...] = (468, 469, 470, 471, 472)
RIGHT_IRIS_INDICES: Tuple[int, ...] = (473, 474, 475, 476, 477)

# Outer loop closes at 291, then continues along the lower inner lip.
OUTER_LIPS_INDICES: Tuple[int, ...] = (
    61, 146, 91, 181, 84, 17, 314, 405, 321, 375, 291,
    308, 324, 318, 402, 317, 14, 87, 178, 88, 95,
)
INNER_LIPS_INDICES: Tuple[int, ...] = (
    78, 191, 80, 81, 82, 13, 312, 311, 310, 415,
    308, 324, 318, 402, 317, 14, 87, 178, 88, 95,
)

NOSE_INDICES: Tuple[int, ...] = (
    1, 2, 98, 327, 168, 197, 195, 5, 4, 45, 220, 115,
    122, 6, 351, 417, 456, 399, 209, 49, 64,
)

MOUTH_CORNER_INDICES: Tuple[int, ...] = (61, 291)

RIGHT_EAR_INDICES: Tuple[int, ...] = (127, 234, 93, 132, 58, 172, 136)
LEFT_EAR_INDICES: Tuple[int, ...] = (356, 454, 323, 361, 288, 397, 365)

RIGHT_EYEBROW_INDICES: Tuple[int, ...] = (70, 63, 105, 66, 107, 55, 65, 52, 53, 46)
LEFT_EYEBROW_INDICES: Tuple[int, ...] = (336, 296, 334, 293, 300, 276, 283, 282, 295, 285)

# Clockwise from the top of the forehead.
FACE_OVAL_INDICES: Tuple[int, ...] = (
    10, 338, 297, 332, 284, 251, 389, 356,
    454, 323, 361, 288, 397, 365, 379, 378,
    400, 377, 152, 148, 176, 149, 150, 136,
    172, 58, 132, 93, 234, 127, 162, 21, 54, 103, 67, 109,
)

NOSE_BRIDGE_INDICES: Tuple[int, ...] = (6, 197, 195, 5, 4, 1, 19, 94, 2)

RIGHT_CHEEK_INDICES: Tuple[int, ...] = (50, 101, 118, 117, 111, 46, 53, 52)
LEFT_CHEEK_INDICES: Tuple[int, ...] = (280, 330, 349, 347, 341, 265, 353, 339)

FOREHEAD_INDICES: Tuple[int, ...] = (10, 338, 297, 332, 284)

MEDIAPIPE_REGIONS: Mapping[Region, Tuple[int, ...]] = MappingProxyType(
    {
        Region.LEFT_EYE: LEFT_EYE_INDICES,
        Region.RIGHT_EYE: RIGHT_EYE_INDICES,
        Region.LEFT_IRIS: LEFT_IRIS_INDICES,
        Region.RIGHT_IRIS: RIGHT_IRIS_INDICES,
        Region.OUTER_LIPS: OUTER_LIPS_INDICES,
        Region.INNER_LIPS: INNER_LIPS_INDICES,
        Region.NOSE: NOSE_INDICES,
        Region.MOUTH_CORNERS: MOUTH_CORNER_INDICES,
        Region.RIGHT_EAR: RIGHT_EAR_INDICES,
        Region.LEFT_EAR: LEFT_EAR_INDICES,
        Region.RIGHT_EYEBROW: RIGHT_EYEBROW_INDICES,
        Region.LEFT_EYEBROW: LEFT_EYEBROW_INDICES,
        Region.FACE_OVAL: FACE_OVAL_INDICES,
        Region.NOSE_BRIDGE: NOSE_BRIDGE_INDICES,
        Region.RIGHT_CHEEK: RIGHT_CHEEK_INDICES,
        Region.LEFT_CHEEK: LEFT_CHEEK_INDICES,
        Region.FOREHEAD: FOREHEAD_INDICES,
    }
)

REGION_ORDER: List[str] = [r.value for r in Region]

# Regions whose index order traces a line; the rest are unordered clusters.
CONTOUR_REGIONS = frozenset(
    {
        Region.LEFT_EYE,
        Region.RIGHT_EYE,
        Region.OUTER_LIPS,
        Region.INNER_LIPS,
        Region.RIGHT_EYEBROW,
        Region.LEFT_EYEBROW,
        Region.FACE_OVAL,
        Region.FOREHEAD,
    }
)

_PAIRS = [
    (Region.LEFT_EYE, Region.RIGHT_EYE),
    (Region.LEFT_IRIS, Region.RIGHT_IRIS),
    (Region.LEFT_EAR, Region.RIGHT_EAR),
    (Region.LEFT_EYEBROW, Region.RIGHT_EYEBROW),
    (Region.LEFT_CHEEK, Region.RIGHT_CHEEK),
]
MIRROR_PAIRS: Mapping[Region, Region] = MappingProxyType(
    {
        **{r: r for r in Region},
        **{a: b for a, b in _PAIRS},
        **{b: a for a, b in _PAIRS},
    }
)


def as_region(region: RegionLike) -> Region:
    """Coerce a ``Region`` or its string value, raising ``UnknownRegion`` otherwise."""
    if isinstance(region, Region):
        return region
    try:
        return Region(region)
    except ValueError:
        raise UnknownRegion(region) from None


def get_indices(region: RegionLike) -> Tuple[int, ...]:
    """Return the fixed index tuple for ``region``."""
    return MEDIAPIPE_REGIONS[as_region(region)]


def get_groups() -> Dict[str, List[int]]:
    """Return a fresh mapping of region name to landmark indices."""
    return {r.value: list(idxs) for r, idxs in MEDIAPIPE_REGIONS.items()}


def required_landmark_count(regions: Optional[Iterable[RegionLike]] = None) -> int:
    """Smallest landmark array length that covers every index of ``regions``."""
    if regions is None:
        regions = MEDIAPIPE_REGIONS.keys()
    selected = [get_indices(r) for r in regions]
    if not selected:
        return 0
    return max(max(idxs) for idxs in selected) + 1


MIN_LANDMARK_COUNT = required_landmark_count()


def regions_for_count(num_points: int) -> Tuple[Region, ...]:
    """Regions fully addressable in a landmark array of ``num_points``."""
    return tuple(r for r, idxs in MEDIAPIPE_REGIONS.items() if max(idxs) < num_points)


def mirror_region(region: RegionLike) -> Region:
    """Counterpart of ``region`` after a horizontal flip."""
    return MIRROR_PAIRS[as_region(region)]


def mirror_groups(groups: Dict[str, List[int]]) -> Dict[str, List[int]]:
    """Swap left/right entries of a name -> indices dict; other keys pass through."""
    swapped = dict(groups)
    for left, right in _PAIRS:
        if left.value in swapped and right.value in swapped:
            swapped[left.value], swapped[right.value] = swapped[right.value], swapped[left.value]
    return swapped
