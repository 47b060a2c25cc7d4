import dataclasses

import pytest

from multivox.gadget import VORTEX
from multivox.slicemap import (
    SLICE_COUNT,
    SLICE_QUADRANT,
    SliceBrightness,
    SliceMap,
    extended_bit_reversal,
)

SMALL = dataclasses.replace(
    VORTEX, panel_width=16, voxels_x=16, voxels_y=16, eccentricity=(0.0, 0.0)
)


@pytest.fixture(scope="module")
def uniform():
    return SliceMap(SMALL, SliceBrightness.UNIFORM)


@pytest.fixture(scope="module")
def boosted():
    return SliceMap(SMALL, SliceBrightness.BOOSTED)


@pytest.fixture(scope="module")
def unlimited():
    return SliceMap(SMALL, SliceBrightness.UNLIMITED)


def _entries(slice_map):
    return {
        (s, c, p): slice_map.voxel(s, c, p)
        for s in range(SLICE_COUNT)
        for c in range(SMALL.panel_width)
        for p in range(SMALL.panel_count)
        if slice_map.voxel(s, c, p) is not None
    }


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 8, 10, 90, 97])
def test_ebr_is_permutation(n):
    assert sorted(extended_bit_reversal(n)) == list(range(n))


def test_ebr_power_of_two_is_bit_reversal():
    assert extended_bit_reversal(8) == [0, 4, 2, 6, 1, 5, 3, 7]
    assert extended_bit_reversal(1) == [0]


def test_ebr_rejects_empty():
    with pytest.raises(ValueError):
        extended_bit_reversal(0)


def test_voxels_in_bounds(boosted):
    for x, y in _entries(boosted).values():
        assert 0 <= x < SMALL.voxels_x
        assert 0 <= y < SMALL.voxels_y


def test_panel_zero_outer_columns_skipped(boosted):
    for s in range(SLICE_COUNT):
        assert boosted.voxel(s, 0, 0) is None
        assert boosted.voxel(s, SMALL.panel_width - 1, 0) is None


def test_quadrant_symmetry(boosted):
    top = SMALL.voxels_x - 1
    for (s, c, p), (x, y) in _entries(boosted).items():
        if s < SLICE_COUNT - SLICE_QUADRANT:
            assert boosted.voxel(s + SLICE_QUADRANT, c, p) == (top - y, x)


def test_uniform_visits_each_slot_once(uniform):
    half = (SMALL.panel_width - 1) * 0.5
    slots = []
    for s in range(SLICE_COUNT):
        for c in range(SMALL.panel_width):
            for p in range(SMALL.panel_count):
                voxel = uniform.voxel(s, c, p)
                if voxel is not None:
                    slots.append((voxel, p, c > half))
    assert len(slots) > 0
    assert len(slots) == len(set(slots))


def test_boosted_maps_superset_of_uniform(uniform, boosted):
    uniform_keys = set(_entries(uniform))
    boosted_keys = set(_entries(boosted))
    assert uniform_keys <= boosted_keys
    assert boosted.coverage() >= uniform.coverage()


def test_unlimited_maps_superset_of_uniform(uniform, unlimited):
    assert set(_entries(uniform)) <= set(_entries(unlimited))


def test_coverage_is_fraction(uniform, unlimited):
    for slice_map in (uniform, unlimited):
        assert 0.0 < slice_map.coverage() <= 1.0


def test_default_eccentricity_from_gadget():
    gadget = dataclasses.replace(SMALL, eccentricity=(1.5, 0.375))
    implicit = SliceMap(gadget, SliceBrightness.UNIFORM)
    explicit = SliceMap(gadget, SliceBrightness.UNIFORM, (1.5, 0.375))
    assert implicit.eccentricity == (1.5, 0.375)
    assert _entries(implicit) == _entries(explicit)


def test_brightness_accepts_int():
    slice_map = SliceMap(SMALL, 0)
    assert slice_map.brightness is SliceBrightness.UNIFORM


@pytest.mark.parametrize("args", [(SLICE_COUNT, 0, 0), (-1, 0, 0), (0, 16, 0), (0, 0, 2)])
def test_voxel_out_of_range(uniform, args):
    with pytest.raises(IndexError):
        uniform.voxel(*args)