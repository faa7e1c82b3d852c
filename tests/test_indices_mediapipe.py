import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from facemesh_regions.indices_mediapipe import (
    CONTOUR_REGIONS,
    FACE_OVAL_INDICES,
    INNER_LIPS_INDICES,
    MEDIAPIPE_REGIONS,
    MESH_LANDMARK_COUNT,
    MIN_LANDMARK_COUNT,
    MOUTH_CORNER_INDICES,
    OUTER_LIPS_INDICES,
    REGION_ORDER,
    Region,
    UnknownRegion,
    get_groups,
    get_indices,
    mirror_groups,
    mirror_region,
    regions_for_count,
    required_landmark_count,
)


def test_every_region_has_indices():
    assert set(MEDIAPIPE_REGIONS) == set(Region)
    assert len(REGION_ORDER) == 17
    for region in Region:
        idxs = get_indices(region)
        assert len(idxs) > 0
        assert all(isinstance(i, int) and i >= 0 for i in idxs)


def test_max_index_requires_478_points():
    all_idxs = [i for idxs in MEDIAPIPE_REGIONS.values() for i in idxs]
    assert max(all_idxs) == 477
    assert max(get_indices(Region.RIGHT_IRIS)) == 477
    assert required_landmark_count() == MIN_LANDMARK_COUNT == 478
    assert required_landmark_count([Region.FACE_OVAL, "nose"]) == 457
    assert required_landmark_count([]) == 0


def test_lookup_by_value_matches_member():
    assert get_indices("face_oval") == get_indices(Region.FACE_OVAL) == FACE_OVAL_INDICES
    assert get_indices("left_iris") == (468, 469, 470, 471, 472)


def test_repeated_calls_are_identical():
    first = get_indices(Region.OUTER_LIPS)
    second = get_indices(Region.OUTER_LIPS)
    assert first == second
    assert first is second


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        MEDIAPIPE_REGIONS[Region.NOSE] = (0,)
    with pytest.raises(TypeError):
        get_indices(Region.NOSE)[0] = 0


def test_get_groups_returns_copy():
    groups = get_groups()
    assert list(groups) == REGION_ORDER
    groups["nose"].append(999)
    del groups["forehead"]
    assert 999 not in get_indices(Region.NOSE)
    assert "forehead" in get_groups()


def test_lips_share_lower_inner_contour():
    shared = {308, 324, 318, 402, 317, 14, 87, 178, 88, 95}
    assert shared <= set(OUTER_LIPS_INDICES) & set(INNER_LIPS_INDICES)
    assert OUTER_LIPS_INDICES.count(308) == 1


def test_mouth_corners():
    assert set(MOUTH_CORNER_INDICES) == {61, 291}
    assert OUTER_LIPS_INDICES[0] == 61
    assert 291 in OUTER_LIPS_INDICES


def test_face_oval_is_closed_unique_contour():
    assert len(FACE_OVAL_INDICES) == 36
    assert len(set(FACE_OVAL_INDICES)) == 36
    assert Region.FACE_OVAL in CONTOUR_REGIONS
    assert Region.MOUTH_CORNERS not in CONTOUR_REGIONS
    # Forehead is the first stretch of the oval.
    assert FACE_OVAL_INDICES[:5] == get_indices(Region.FOREHEAD)


@pytest.mark.parametrize("bad", ["LeftEye", "LEFT_EYE", "cheek", "", None, 3])
def test_unknown_region(bad):
    with pytest.raises(UnknownRegion) as info:
        get_indices(bad)
    assert isinstance(info.value, KeyError)
    assert "unknown landmark region" in str(info.value)


def test_regions_for_unrefined_mesh_drop_irises():
    usable = regions_for_count(MESH_LANDMARK_COUNT)
    assert Region.LEFT_IRIS not in usable
    assert Region.RIGHT_IRIS not in usable
    assert len(usable) == len(Region) - 2
    assert regions_for_count(MIN_LANDMARK_COUNT) == tuple(Region)
    assert regions_for_count(0) == ()


def test_mirror_region_is_involution():
    assert mirror_region(Region.LEFT_EYE) is Region.RIGHT_EYE
    assert mirror_region("right_cheek") is Region.LEFT_CHEEK
    assert mirror_region(Region.NOSE) is Region.NOSE
    for region in Region:
        assert mirror_region(mirror_region(region)) is region
        assert len(get_indices(region)) == len(get_indices(mirror_region(region)))
    with pytest.raises(UnknownRegion):
        mirror_region("left_ear_lobe")


def test_mirror_groups_swaps_pairs_only():
    groups = {"left_eye": [1], "right_eye": [2], "nose": [3], "left_ear": [4]}
    swapped = mirror_groups(groups)
    assert swapped == {"left_eye": [2], "right_eye": [1], "nose": [3], "left_ear": [4]}
    assert groups["left_eye"] == [1]
