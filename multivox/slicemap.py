"""Mapping of rotating panel columns onto voxels of the display volume."""

from __future__ import annotations

import math
from collections import Counter
from enum import IntEnum
from typing import Optional

from .gadget import Gadget

SLICE_COUNT = 360
SLICE_QUADRANT = SLICE_COUNT // 4

_TOLERANCES_SQ = tuple(t * t for t in (0.0625, 0.125, 0.25, 0.5, 0.7))


class SliceBrightness(IntEnum):
    """How often a voxel may be lit by the same side of a panel."""

    UNIFORM = 0
    BOOSTED = 1
    UNLIMITED = 2


def extended_bit_reversal(n: int) -> list[int]:
    """Order ``0..n-1`` so that consecutive entries are spread evenly, for any ``n``."""
    if n < 1:
        raise ValueError("sequence length must be at least 1")
    order = [0] * n
    _fill_reversal(order, n)
    return order


def _fill_reversal(a: list[int], n: int) -> None:
    if n == 1:
        a[0] = 0
        return

    k = n // 2

    def s(i: int) -> int:
        return i if i < k else i + 1

    _fill_reversal(a, k)
    if n % 2 == 0:
        for i in range(k - 1, 0, -1):
            a[2 * i] = a[i]
        for i in range(1, n, 2):
            a[i] = a[i - 1] + k
    else:
        for i in range(k - 1, 0, -1):
            a[s(2 * i)] = a[i]
        for i in range(1, n - 1, 2):
            a[s(i)] = a[s(i - 1)] + k + 1
        a[k] = k


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


Voxel2D = tuple[int, int]


class SliceMap:
    """Lookup from (slice, column, panel) to the voxel column that LED passes over."""

    def __init__(
        self,
        gadget: Gadget,
        brightness: SliceBrightness = SliceBrightness.BOOSTED,
        eccentricity: Optional[tuple[float, float]] = None,
    ):
        self.gadget = gadget
        self.brightness = SliceBrightness(brightness)
        self.eccentricity = tuple(gadget.eccentricity if eccentricity is None else eccentricity)
        self.slice_count = SLICE_COUNT
        self._map: list[list[list[Optional[Voxel2D]]]] = [
            [[None] * gadget.panel_count for _ in range(gadget.panel_width)]
            for _ in range(SLICE_COUNT)
        ]
        self._taken: Counter = Counter()
        self._build()

    def _build(self) -> None:
        g = self.gadget
        width = g.panel_width
        vx_max, vy_max = g.voxels_x - 1, g.voxels_y - 1
        centre_x, centre_y = vx_max * 0.5, vy_max * 0.5
        ecc0, ecc1 = self.eccentricity
        order = extended_bit_reversal(SLICE_QUADRANT)
        unlimited = self.brightness is SliceBrightness.UNLIMITED
        passes = 2 if self.brightness is SliceBrightness.BOOSTED else 1

        for pass_index in range(passes):
            for tolerance_sq in _TOLERANCES_SQ:
                for a in order:
                    angle = a * math.pi * 2.0 / SLICE_COUNT
                    slope_x, slope_y = math.cos(angle), math.sin(angle)
                    offsets = (
                        (slope_y * ecc0, -slope_x * ecc0),
                        (-slope_y * ecc1, slope_x * ecc1),
                    )
                    for column in range(width):
                        coff = column - (width - 1) * 0.5
                        side = int(coff > 0)
                        for panel, (off_x, off_y) in enumerate(offsets):
                            # outer columns of panel 0 are skipped so it stays inside panel 1's radius
                            if panel == 0 and column in (0, width - 1):
                                continue
                            if self._map[a][column][panel] is not None:
                                continue
                            sign = 1 - panel * 2
                            actual_x = centre_x + (off_x + slope_x * coff) * sign
                            actual_y = centre_y + (off_y + slope_y * coff) * sign
                            near_x = _round_half_away(actual_x)
                            near_y = _round_half_away(actual_y)

                            closest = math.inf
                            voxel: Optional[Voxel2D] = None
                            for y in range(max(0, near_y - 1), min(vy_max, near_y + 1) + 1):
                                for x in range(max(0, near_x - 1), min(vx_max, near_x + 1) + 1):
                                    if unlimited or self._taken[(x, y, panel, side)] <= pass_index:
                                        distsq = (actual_x - x) ** 2 + (actual_y - y) ** 2
                                        if distsq < closest:
                                            closest = distsq
                                            voxel = (x, y)

                            if voxel is not None and closest <= tolerance_sq:
                                x, y = voxel
                                for q in range(4):
                                    self._map[a + q * SLICE_QUADRANT][column][panel] = (x, y)
                                    self._taken[(x, y, panel, side)] += 1
                                    x, y = vx_max - y, x

    def voxel(self, slice_index: int, column: int, panel: int) -> Optional[Voxel2D]:
        """The (x, y) voxel column lit by ``column`` of ``panel`` at ``slice_index``, or None."""
        if not 0 <= slice_index < SLICE_COUNT:
            raise IndexError(f"slice {slice_index} out of range")
        if not 0 <= column < self.gadget.panel_width:
            raise IndexError(f"column {column} out of range")
        if not 0 <= panel < self.gadget.panel_count:
            raise IndexError(f"panel {panel} out of range")
        return self._map[slice_index][column][panel]

    def coverage(self) -> float:
        """Fraction of (voxel, panel, side) combinations visited at least once."""
        g = self.gadget
        total = g.voxels_x * g.voxels_y * 2 * 2
        visited = sum(1 for count in self._taken.values() if count)
        return visited / total