# multivox

A pure-Python toolkit for swept-volume voxel displays, where a pair of LED
matrix panels spins around a vertical axis and draws a cylinder of light.
It covers the geometry and timing work between a voxel volume and the
panel rows: which voxel each LED passes over, how fast the display is
turning, how to draw into the volume, and how rows are addressed and
timed during scan-out.

It has no dependencies outside the standard library.

## Modules

- `multivox.gadget`: `Gadget`, a frozen description of one display build.
  It holds the pin assignments, panel size and multiplexing, panel
  eccentricity, the voxel volume size and the rotation zero. It derives
  masks, strides and `voxel_index(x, y, z)` from these. Two builds are
  predefined, `VORTEX` and `ROTOVOX`, and `GADGETS` maps each name to its
  build. The module also holds the helpers `clamp(value, low, high)` and
  `modulo(a, b)`; `modulo` always returns a non-negative remainder for a
  positive `b`.
- `multivox.slicemap`: `SliceMap(gadget, brightness, eccentricity)`
  divides a turn into 360 slices. For every slice, panel column and panel
  it finds the (x, y) voxel column that the LED passes over.
  `SliceMap.voxel` returns that column, or `None` where the LED lights
  nothing. `SliceMap.coverage` gives the fraction of voxels reached.
  `SliceBrightness` (`UNIFORM`, `BOOSTED`, `UNLIMITED`) decides how often
  one voxel may be reused, trading uniformity for brightness. Slices are
  visited in the order given by `extended_bit_reversal(n)`.
- `multivox.colscatter`: `scatter_column(index, field_height)` gives the
  column refresh order for vertically scanned panels. Outer columns are
  refreshed more often than inner ones. It returns `(column, inner)`, and
  `inner` tells whether the inner multiplexed scanline is lit as well.
- `multivox.rotation`: `RotationTracker(clock, sync_pin, zero_degrees)`
  turns a sync signal that changes level every half turn into a
  fixed-point angle, with `ROTATION_FULL` units per turn.
  `current_angle()` reads the clock and the pin each time it is called.
  The tracker smooths the period with `median_period()` over the last
  eight half turns. It sets `stopped` once no edge has been seen for a
  second. It can lock its phase to the sync edges (`lock`) and apply a
  steady `drift` to the zero.
- `multivox.image`: `Image(width, height, samples, channels)` builds a
  texture from raw 8-bit samples with 2, 3 or 4 channels. Pixels with
  alpha below 128 become transparent. `Image.sample(uv)` wraps the
  coordinates, with v pointing upwards, and returns an `0xRRGGBB` colour,
  or `None` where the texel is transparent.
- `multivox.graphics`: matrix helpers for column-major 4×4 matrices
  (`identity`, `transform_point`, `apply_scale`, `apply_translation`,
  `apply_rotation_x`, `apply_rotation_y`, `apply_rotation_z`,
  `apply_rotation`). Each returns a new list. `Rasteriser(gadget, volume)`
  draws into a flat voxel list of `gadget.voxels_count` entries:
  `draw_line` draws a clipped 3D line. `draw_triangle` voxelises a
  triangle across its flattest axis, filled either with the colour from
  `set_colour` or with the texture from `set_texture`. A custom per-voxel
  `shader` callable may replace both fills.
- `multivox.driver`: the arithmetic of panel scan-out:
  - `row_address_bits(gadget, row)` gives the GPIO bits for a direct
    A–E row address.
  - `ShiftRowAddress(field_height).shifts_for(row)` lists the data bits
    to clock into a shift-register row address.
  - `unblank_schedule(bits_per_channel, panel_width)` gives the
    unblanking column for each bit plane of binary code modulation.
  - `slice_from_angle(angle, slice_count)` turns a rotation angle into
    a slice index.
  - `DriverSettings` holds the adjustable parameters, such as trails,
    debug panel, stop axis, non-uniformity and bits per channel.
    `DriverSettings.for_gadget` picks defaults for a gadget's scan mode.
    `handle_key(ch)` applies one keyboard command and returns `False`
    on Escape.

## Examples

```python
from multivox.gadget import VORTEX, clamp, modulo
from multivox.slicemap import extended_bit_reversal, SliceMap, SliceBrightness
from multivox.graphics import Rasteriser
from multivox.driver import unblank_schedule

clamp(5, 0, 3)               # 3
modulo(-1, 4)                # 3
extended_bit_reversal(4)     # [0, 2, 1, 3]
unblank_schedule(2)          # (68, 8)

slices = SliceMap(VORTEX, SliceBrightness.UNIFORM)
slices.voxel(0, 64, 1)       # (x, y) voxel column, or None

volume = [0] * VORTEX.voxels_count
raster = Rasteriser(VORTEX, volume)
raster.set_colour(0x00EFFF)
raster.draw_triangle((10, 10, 5), (100, 20, 5), (60, 110, 40))
raster.draw_line((0, 0, 0), (127, 127, 63), 0xFF0000)
```

## What this package does not do

This package only computes. It does not touch the hardware, so there is
no GPIO or timer register access and no loop that clocks rows out to the
panels. `RotationTracker` takes its clock and sync pin as callables that
you supply. The package does not read game controllers. It has no shared
volume buffer between processes, no menu, and no way to launch
applications. It installs no commands.

## Tests

The test suite uses pytest, installed with the `test` extra:

```
pip install .[test]
pytest
```