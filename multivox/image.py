"""Decoded raster images used as textures for voxelised triangles."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .gadget import modulo

MASK_KEY = 0x200000
"""Colour reserved for transparent pixels in a masked image."""

_OPAQUE_FROM = 128


def _rgb(r: int, g: int, b: int) -> int:
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


class Image:
    """An RGB image, stored top row first, with an optional transparency key.

    ``samples`` holds ``width * height * channels`` bytes, row by row from the
    top. Two channels are grey and alpha, three are RGB, four are RGBA; any
    other count takes every component from the first channel. Pixels whose
    alpha is below 128 become the mask key, and ``masked`` is set.
    """

    def __init__(self, width: int, height: int, samples: Sequence[int], channels: int = 4):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, not {width}x{height}")
        if channels < 1:
            raise ValueError(f"channel count must be positive, not {channels}")
        size = width * height
        if len(samples) != size * channels:
            raise ValueError(
                f"expected {size * channels} samples for {width}x{height}x{channels}, got {len(samples)}"
            )

        self.width = width
        self.height = height
        self.masked = False
        self.key = MASK_KEY

        layouts = {2: (0, 0, 0, 1), 3: (0, 1, 2, 0), 4: (0, 1, 2, 3)}
        r, g, b, a = layouts.get(channels, (0, 0, 0, 0))

        pixels = [samples[i * channels:(i + 1) * channels] for i in range(size)]
        colours = [_rgb(p[r], p[g], p[b]) for p in pixels]

        if a:
            opaque = [p[a] >= _OPAQUE_FROM for p in pixels]
            self.masked = not all(opaque)
            key_clash = any(
                is_opaque and colour == self.key for colour, is_opaque in zip(colours, opaque)
            )
            if self.masked and key_clash:
                # nudge genuine key-coloured pixels away from the key
                colours = [
                    colour ^ MASK_KEY if is_opaque and colour == self.key else colour
                    for colour, is_opaque in zip(colours, opaque)
                ]
            colours = [
                colour if is_opaque else self.key for colour, is_opaque in zip(colours, opaque)
            ]

        self.data: list[int] = colours

    def sample(self, uv: Sequence[float]) -> Optional[int]:
        """Colour at texture coordinate ``uv`` (wrapping, v upwards), or None where transparent."""
        x = modulo(math.floor(uv[0] * self.width), self.width)
        y = modulo(math.floor(uv[1] * self.height), self.height)
        y = (self.height - 1) - y
        colour = self.data[x + self.width * y]
        if self.masked and colour == self.key:
            return None
        return colour