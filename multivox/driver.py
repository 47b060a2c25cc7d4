"""Scan-out helpers and interactive settings for the display driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .gadget import Gadget
from .rotation import ROTATION_FULL, ROTATION_MASK, ROTATION_PRECISION, RotationTracker
from .slicemap import SLICE_COUNT, SliceBrightness

BPC_MAX = 3
"""Most bits per colour channel the scan-out supports."""

ESCAPE = 27

_ANGLE_BITS = 10
_ROW_ADDRESS_BITS = 5
_NON_UNIFORMITY_NAMES = ("uniform", "overdriven", "unlimited")


def row_address_bits(gadget: Gadget, row: int) -> int:
    """GPIO bits to set for a direct (A-E) row address; the rest of the row mask is cleared."""
    if row < 0:
        raise ValueError(f"row must not be negative, not {row}")
    bits = 0
    for bit, pin in enumerate(gadget.row_pins[:_ROW_ADDRESS_BITS]):
        if row & (1 << bit):
            bits |= 1 << pin
    return bits & gadget.row_mask


def unblank_schedule(bits_per_channel: int, panel_width: int = 128) -> tuple[int, ...]:
    """Column at which the previous row is unblanked during each bit plane.

    Later unblanking gives a shorter display time; the offsets shape the
    perceived brightness curve of binary code modulation.
    """
    bpc = min(max(1, bits_per_channel), BPC_MAX)
    gamma = (panel_width - 120, panel_width - 60, panel_width - 30)
    unblank = [0] * bpc
    for b in range(bpc):
        unblank[(b + 1) % bpc] = gamma[b]
    return tuple(unblank)


def slice_from_angle(angle: int, slice_count: int = SLICE_COUNT) -> int:
    """Slice index for a fixed-point rotation angle."""
    if slice_count <= 0:
        raise ValueError(f"slice count must be positive, not {slice_count}")
    coarse = (angle & ROTATION_MASK) >> (ROTATION_PRECISION - _ANGLE_BITS)
    return ((coarse * slice_count) >> _ANGLE_BITS) % slice_count


class ShiftRowAddress:
    """Row addressing through a shift register that a single 1 bit is clocked along."""

    def __init__(self, field_height: int = 32):
        if field_height <= 0:
            raise ValueError(f"field height must be positive, not {field_height}")
        self.field_height = field_height
        self.current_row = 1

    def shifts_for(self, row: int) -> list[int]:
        """Data bits to clock in, in order, so the register selects ``row``."""
        if not 0 <= row < self.field_height:
            raise ValueError(f"row {row} outside 0..{self.field_height - 1}")
        shifts: list[int] = []
        if row < self.current_row:
            leading_zeros = self.field_height - row - 1
            flush = leading_zeros - self.current_row
            shifts.extend([0] * max(0, flush))
            shifts.append(1)
            self.current_row = 0
        while self.current_row < row:
            shifts.append(0)
            self.current_row += 1
        return shifts


@dataclass
class DriverSettings:
    """Adjustable driver parameters, changed from the keyboard while running."""

    trail_stack: int = 2
    sweep_trails: int = 1
    debug_panel: int = 0
    stop_axis: int = 1
    non_uniformity: int = int(SliceBrightness.BOOSTED)
    bits_per_channel: int = 2
    rotation: Optional[RotationTracker] = None
    slicemap_dirty: bool = False

    @classmethod
    def for_gadget(cls, gadget: Gadget, rotation: Optional[RotationTracker] = None) -> "DriverSettings":
        """Defaults for the scan mode of ``gadget``."""
        trail_stack = 1 if gadget.vertical_scan else 2
        return cls(
            trail_stack=trail_stack,
            sweep_trails=trail_stack - 1,
            non_uniformity=0 if gadget.vertical_scan else int(SliceBrightness.BOOSTED),
            rotation=rotation,
        )

    def handle_key(self, ch: Union[str, int, None]) -> bool:
        """Apply one key press; returns False when the driver should stop."""
        if ch is None:
            return True
        code = ord(ch) if isinstance(ch, str) else ch
        if code < 0:
            return True
        if code == ESCAPE:
            return False

        key = chr(code)
        if key == "b":
            self.bits_per_channel = (self.bits_per_channel % 3) + 1
            print(f"{self.bits_per_channel} bpc")
        elif key == "u":
            self.non_uniformity = (self.non_uniformity + 1) % 3
            print(f"non uniformity: {_NON_UNIFORMITY_NAMES[self.non_uniformity]}")
            self.slicemap_dirty = True
        elif key in "xyz" and len(key) == 1:
            self.stop_axis = code - ord("x")
        elif key == "0" and self.rotation is not None:
            self.rotation.zero = (self.rotation.zero + ROTATION_FULL // 64) & ROTATION_MASK
            print(f"rotation zero {self.rotation.zero}")
        elif key == "l" and self.rotation is not None:
            self.rotation.lock = not self.rotation.lock
            print("rotation lock on" if self.rotation.lock else "rotation lock off")
        elif key in ("d", "D") and self.rotation is not None:
            self.rotation.drift += 1 if key == "d" else -1
            print(f"rotation drift {self.rotation.drift}")
        elif key == "t":
            self.sweep_trails = (self.sweep_trails + 1) % self.trail_stack
            print(f"trails: {self.sweep_trails}")
        elif key == "p":
            self.debug_panel = (self.debug_panel + 1) % 3
            print(f"debug panel {self.debug_panel}")
        return True