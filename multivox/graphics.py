"""Matrix helpers and voxelisation of lines and triangles into a volume buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, MutableSequence, Optional, Sequence

from .gadget import Gadget
from .image import Image

Matrix = list
Vec3 = Sequence[float]
VoxelShader = Callable[[MutableSequence[int], Sequence[int], Sequence[float], "TriangleState"], None]


def identity() -> Matrix:
    """A new 4x4 column-major identity matrix."""
    return [1.0 if row == col else 0.0 for col in range(4) for row in range(4)]


def _multiply(a: Sequence[float], b: Sequence[float]) -> Matrix:
    return [
        sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
        for col in range(4)
        for row in range(4)
    ]


def transform_point(matrix: Sequence[float], point: Vec3) -> tuple[float, float, float]:
    """Apply ``matrix`` to ``point`` as a position (w = 1)."""
    x, y, z = point[0], point[1], point[2]
    return tuple(
        matrix[i] * x + matrix[i + 4] * y + matrix[i + 8] * z + matrix[i + 12] for i in range(3)
    )


def apply_scale(matrix: Sequence[float], scale) -> Matrix:
    """Scale the basis columns, by one factor or by a factor per axis."""
    result = list(matrix)
    if isinstance(scale, (int, float)):
        factors = (scale, scale, scale)
    else:
        factors = tuple(scale[:3])
    for i in range(12):
        result[i] *= factors[i // 4]
    return result


def apply_translation(matrix: Sequence[float], vector: Vec3) -> Matrix:
    """Translate in the matrix's local frame."""
    result = list(matrix)
    for i in range(4):
        result[i + 12] += matrix[i] * vector[0] + matrix[i + 4] * vector[1] + matrix[i + 8] * vector[2]
    return result


def _rotate_columns(matrix: Sequence[float], first: int, second: int, angle: float, sign: float) -> Matrix:
    c = math.cos(angle)
    s = math.sin(angle) * sign
    result = list(matrix)
    a = matrix[first * 4:first * 4 + 4]
    b = matrix[second * 4:second * 4 + 4]
    result[first * 4:first * 4 + 4] = [a[i] * c + b[i] * s for i in range(4)]
    result[second * 4:second * 4 + 4] = [a[i] * -s + b[i] * c for i in range(4)]
    return result


def apply_rotation_x(matrix: Sequence[float], angle: float) -> Matrix:
    """Rotate about the local x axis."""
    return _rotate_columns(matrix, 1, 2, angle, 1.0)


def apply_rotation_y(matrix: Sequence[float], angle: float) -> Matrix:
    """Rotate about the local y axis."""
    return _rotate_columns(matrix, 0, 2, angle, -1.0)


def apply_rotation_z(matrix: Sequence[float], angle: float) -> Matrix:
    """Rotate about the local z axis."""
    return _rotate_columns(matrix, 0, 1, angle, 1.0)


def apply_rotation(matrix: Sequence[float], euler: Vec3) -> Matrix:
    """Rotate by Euler angles (pitch about x, roll about y, yaw about z)."""
    cp, sp = math.cos(euler[0]), math.sin(euler[0])
    cr, sr = math.cos(euler[1]), math.sin(euler[1])
    cy, sy = math.cos(euler[2]), math.sin(euler[2])
    rotation = [
        cy * cr - sy * sp * sr, cr * sy + cy * sp * sr, -cp * sr, 0.0,
        -cp * sy, cy * cp, sp, 0.0,
        cy * sr + cr * sy * sp, sy * sr - cy * cr * sp, cp * cr, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    return _multiply(matrix, rotation)


def _sort_channels(axis: Sequence[float]) -> tuple[int, int, int]:
    """Axis indices ordered so the last is the largest component."""
    x, y, z = 0, 1, 2
    if axis[y] > axis[z]:
        y, z = z, y
    if axis[x] > axis[z]:
        x, z = z, x
    return x, y, z


def _clip(one: list, two: list, c: int, maxval: float) -> Optional[tuple[list, list]]:
    swapped = one[c] > two[c]
    lo, hi = (two, one) if swapped else (one, two)

    if hi[c] < 0 or lo[c] > maxval:
        return None

    if lo[c] < 0:
        delta = [h - l for h, l in zip(hi, lo)]
        factor = -lo[c] / delta[c]
        lo = [l + d * factor for l, d in zip(lo, delta)]

    if hi[c] > maxval:
        delta = [h - l for h, l in zip(hi, lo)]
        factor = (hi[c] - maxval) / delta[c]
        hi = [h - d * factor for h, d in zip(hi, delta)]

    return (hi, lo) if swapped else (lo, hi)


@dataclass
class TriangleState:
    """Colour or texture applied to the triangles being drawn."""

    colour: int = 0
    texcoord: tuple = field(default_factory=lambda: ((0.0, 0.0), (0.0, 0.0), (0.0, 0.0)))
    texture: Optional[Image] = None


class Rasteriser:
    """Draws lines and triangles into a flat voxel volume laid out by ``gadget``.

    ``shader``, when set, is called for every voxel a triangle covers as
    ``shader(volume, coordinate, barycentric, state)`` in place of the
    built-in flat and textured fills.
    """

    def __init__(self, gadget: Gadget, volume: MutableSequence[int]):
        if len(volume) != gadget.voxels_count:
            raise ValueError(
                f"volume holds {len(volume)} voxels, gadget needs {gadget.voxels_count}"
            )
        self.gadget = gadget
        self.volume = volume
        self.state = TriangleState()
        self.shader: Optional[VoxelShader] = None
        self._dims = (gadget.voxels_x, gadget.voxels_y, gadget.voxels_z)

    def set_colour(self, colour: int) -> None:
        """Fill following triangles with a flat colour."""
        self.state.colour = colour
        self.state.texture = None

    def set_texture(self, uv0: Sequence[float], uv1: Sequence[float], uv2: Sequence[float], texture: Image) -> None:
        """Texture following triangles, with one texture coordinate per vertex."""
        self.state.texcoord = tuple((float(uv[0]), float(uv[1])) for uv in (uv0, uv1, uv2))
        self.state.texture = texture

    def _plot_flat(self, volume, coordinate, barycentric, state) -> None:
        volume[self.gadget.voxel_index(*coordinate)] = state.colour

    def _plot_textured(self, volume, coordinate, barycentric, state) -> None:
        u = sum(tc[0] * w for tc, w in zip(state.texcoord, barycentric))
        v = sum(tc[1] * w for tc, w in zip(state.texcoord, barycentric))
        colour = state.texture.sample((u, v))
        if colour is not None:
            volume[self.gadget.voxel_index(*coordinate)] = colour

    def draw_line(self, one: Vec3, two: Vec3, colour: int) -> None:
        """Draw a line between two points, clipped to the volume."""
        a = [float(c) for c in one[:3]]
        b = [float(c) for c in two[:3]]
        for c, size in enumerate(self._dims):
            clipped = _clip(a, b, c, size - 1)
            if clipped is None:
                return
            a, b = clipped

        delta = [abs(p - q) for p, q in zip(a, b)]
        minor, middle, major = _sort_channels(delta)
        g = self.gadget
        strides = (g.x_stride, g.y_stride, g.z_stride)
        if a[major] >= b[major]:
            a, b = b, a
        self._draw_run(
            a[major], b[major], a[middle], b[middle], a[minor], b[minor],
            strides[major], strides[middle], strides[minor], colour,
        )

    def _draw_run(self, x0, x1, y0, y1, z0, z1, x_stride, y_stride, z_stride, colour) -> None:
        dx = x1 - x0
        if dx <= 0:
            return
        dy = y1 - y0
        dz = z1 - z0
        edy = abs(dy / dx)
        edz = abs(dz / dx)
        start = 0.5 - math.fmod(x0, 1.0)

        ey = start * edy + math.fmod(y0, 1.0)
        if dy >= 0:
            sdy = 1.0
            ey -= 1.0
        else:
            sdy = -1.0
            ey = -ey

        ez = start * edz + math.fmod(z0, 1.0)
        if dz >= 0:
            sdz = 1.0
            ez -= 1.0
        else:
            sdz = -1.0
            ez = -ez

        count = self.gadget.voxels_count
        x, y, z = x0, y0, z0
        while x < x1:
            while ey > 0:
                y += sdy
                ey -= 1
            while ez > 0:
                z += sdz
                ez -= 1
            idx = int(x) * x_stride + int(y) * y_stride + int(z) * z_stride
            if 0 <= idx < count:
                self.volume[idx] = colour
            x += 1
            ey += edy
            ez += edz

    def _draw_tiny(self, plot, v0: Vec3) -> None:
        pos = [int(c) for c in v0]
        if all(0 <= p < size for p, size in zip(pos, self._dims)):
            plot(self.volume, pos, (1.0, 0.0, 0.0), self.state)

    def draw_triangle(self, v0: Vec3, v1: Vec3, v2: Vec3) -> None:
        """Voxelise a triangle by rasterising it across its flattest axis."""
        if self.shader is not None:
            plot = self.shader
        elif self.state.texture is not None:
            plot = self._plot_textured
        else:
            plot = self._plot_flat

        v0, v1, v2 = ([float(c) for c in v[:3]] for v in (v0, v1, v2))
        dims = self._dims

        ab_min = [min(p) for p in zip(v0, v1, v2)]
        if any(m >= size for m, size in zip(ab_min, dims)):
            return
        ab_max = [max(p) for p in zip(v0, v1, v2)]
        if any(m < 0 for m in ab_max):
            return

        t1 = [b - a for a, b in zip(v0, v1)]
        t2 = [b - a for a, b in zip(v0, v2)]
        normal = [
            t1[1] * t2[2] - t1[2] * t2[1],
            t1[2] * t2[0] - t1[0] * t2[2],
            t1[0] * t2[1] - t1[1] * t2[0],
        ]
        if sum(n * n for n in normal) < 4:
            self._draw_tiny(plot, v0)
            return

        xc, yc, zc = _sort_channels([abs(n) for n in normal])
        if ab_max[xc] - ab_min[xc] < ab_max[yc] - ab_min[yc]:
            # favour wide spans for early-out
            xc, yc = yc, xc

        lo = [math.floor(max(m, 0.0)) + 0.5 for m in ab_min]
        hi = [min(math.ceil(m), size - 1) + 0.5 for m, size in zip(ab_max, dims)]

        def orient(a, b, c):
            return (b[xc] - a[xc]) * (c[yc] - a[yc]) - (b[yc] - a[yc]) * (c[xc] - a[xc])

        rden = 1.0 / orient(v0, v1, v2)
        dx = [(v1[yc] - v2[yc]) * rden, (v2[yc] - v0[yc]) * rden, (v0[yc] - v1[yc]) * rden]
        dy = [(v2[xc] - v1[xc]) * rden, (v0[xc] - v2[xc]) * rden, (v1[xc] - v0[xc]) * rden]
        w0 = [orient(v1, v2, lo) * rden, orient(v2, v0, lo) * rden, orient(v0, v1, lo) * rden]

        xrange = int(hi[xc] - lo[xc] + 1.5)
        yrange = int(hi[yc] - lo[yc] + 1.5)
        depth = dims[zc]
        epsilon = -1e-5

        voxel = [0, 0, 0]
        voxel[yc] = math.floor(lo[yc])
        for _ in range(yrange):
            w = list(w0)
            done = False
            voxel[xc] = math.floor(lo[xc])
            for _ in range(xrange):
                if w[0] >= epsilon and w[1] >= epsilon and w[2] >= epsilon:
                    done = True
                    voxel[zc] = math.floor(v0[zc] * w[0] + v1[zc] * w[1] + v2[zc] * w[2])
                    if 0 <= voxel[zc] < depth:
                        plot(self.volume, tuple(voxel), tuple(w), self.state)
                elif done:
                    break
                w = [a + b for a, b in zip(w, dx)]
                voxel[xc] += 1
            w0 = [a + b for a, b in zip(w0, dy)]
            voxel[yc] += 1