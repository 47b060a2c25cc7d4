"""Hardware descriptions of the supported volumetric display gadgets."""

from __future__ import annotations

from dataclasses import dataclass


def clamp(value, low, high):
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def modulo(a: int, b: int) -> int:
    """Remainder of ``a / b`` with truncating division, shifted up by ``b`` when negative."""
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    if remainder < 0:
        remainder += b
    return remainder


def _mask(*pins: int) -> int:
    bits = 0
    for pin in pins:
        bits |= 1 << pin
    return bits


@dataclass(frozen=True)
class Gadget:
    """Pin assignments, panel geometry and voxel volume of one display build."""

    name: str
    spin_sync: int
    panel_0_pins: tuple[int, int, int, int, int, int]
    panel_1_pins: tuple[int, int, int, int, int, int]
    row_pins: tuple[int, int, int, int, int]
    rgb_blank: int
    rgb_clock: int
    rgb_strobe: int
    panel_width: int = 128
    panel_height: int = 64
    panel_count: int = 2
    panel_multiplex: int = 2
    panel_reversed: tuple[bool, bool] = (False, False)
    eccentricity: tuple[float, float] = (0.0, 0.0)
    voxels_x: int = 128
    voxels_y: int = 128
    voxels_z: int = 64
    rotation_zero: int = 0
    vertical_scan: bool = False
    clock_waits: int = 4
    address_enable_mask: int = 0

    @property
    def field_height(self) -> int:
        return self.panel_height // self.panel_multiplex

    @property
    def voxels_count(self) -> int:
        return self.voxels_x * self.voxels_y * self.voxels_z

    @property
    def z_stride(self) -> int:
        return 1

    @property
    def x_stride(self) -> int:
        return self.voxels_z

    @property
    def y_stride(self) -> int:
        return self.x_stride * self.voxels_x

    @property
    def row_mask(self) -> int:
        return _mask(*self.row_pins)

    @property
    def rgb_bits_mask(self) -> int:
        return _mask(*self.panel_0_pins, *self.panel_1_pins)

    @property
    def blank_mask(self) -> int:
        return 1 << self.rgb_blank

    @property
    def clock_mask(self) -> int:
        return 1 << self.rgb_clock

    @property
    def strobe_mask(self) -> int:
        return 1 << self.rgb_strobe

    @property
    def output_pins(self) -> tuple[int, ...]:
        """Every pin that is driven as an output, in initialisation order."""
        return (
            *self.panel_0_pins,
            *self.panel_1_pins,
            *self.row_pins,
            self.rgb_blank,
            self.rgb_clock,
            self.rgb_strobe,
        )

    def voxel_index(self, x: int, y: int, z: int) -> int:
        """Offset of voxel ``(x, y, z)`` in a flat volume buffer."""
        return x * self.x_stride + y * self.y_stride + z * self.z_stride


VORTEX = Gadget(
    name="vortex",
    spin_sync=26,
    panel_0_pins=(27, 7, 11, 10, 9, 8),
    panel_1_pins=(5, 6, 12, 20, 13, 19),
    row_pins=(22, 23, 24, 25, 15),
    rgb_blank=18,
    rgb_clock=17,
    rgb_strobe=4,
    panel_reversed=(False, False),
    eccentricity=(13.5, 0.375),
    voxels_x=128,
    voxels_y=128,
    voxels_z=64,
    rotation_zero=286,
    vertical_scan=False,
    clock_waits=5,
)

ROTOVOX = Gadget(
    name="rotovox",
    spin_sync=1,
    panel_0_pins=(6, 9, 12, 7, 8, 5),
    panel_1_pins=(10, 27, 25, 22, 23, 24),
    row_pins=(4, 15, 18, 17, 14),
    rgb_blank=11,
    rgb_clock=0,
    rgb_strobe=3,
    panel_reversed=(True, False),
    eccentricity=(0.0, 0.0),
    voxels_x=128,
    voxels_y=128,
    voxels_z=128,
    rotation_zero=160,
    vertical_scan=True,
    clock_waits=4,
)

GADGETS = {gadget.name: gadget for gadget in (VORTEX, ROTOVOX)}