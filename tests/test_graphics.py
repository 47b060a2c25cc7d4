import math

import pytest

from multivox.gadget import Gadget
from multivox.graphics import (
    Rasteriser,
    apply_rotation,
    apply_rotation_x,
    apply_rotation_y,
    apply_rotation_z,
    apply_scale,
    apply_translation,
    identity,
    transform_point,
)
from multivox.image import Image

TINY = Gadget(
    name="tiny",
    spin_sync=0,
    panel_0_pins=(0, 1, 2, 3, 4, 5),
    panel_1_pins=(6, 7, 8, 9, 10, 11),
    row_pins=(12, 13, 14, 15, 16),
    rgb_blank=17,
    rgb_clock=18,
    rgb_strobe=19,
    voxels_x=16,
    voxels_y=16,
    voxels_z=16,
)


def _rasteriser():
    return Rasteriser(TINY, [0] * TINY.voxels_count)


def _coords(index):
    z = index % TINY.voxels_z
    x = (index // TINY.voxels_z) % TINY.voxels_x
    y = index // (TINY.voxels_z * TINY.voxels_x)
    return x, y, z


def _written(volume):
    return {_coords(i) for i, v in enumerate(volume) if v}


def test_identity_leaves_points_alone():
    assert transform_point(identity(), (1.5, -2.0, 3.0)) == (1.5, -2.0, 3.0)


def test_translation_moves_points():
    matrix = apply_translation(identity(), (1.0, 2.0, 3.0))
    assert transform_point(matrix, (0.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)


def test_translation_is_applied_in_local_frame():
    matrix = apply_scale(identity(), 2.0)
    matrix = apply_translation(matrix, (1.0, 1.0, 1.0))
    assert transform_point(matrix, (0.0, 0.0, 0.0)) == (2.0, 2.0, 2.0)


def test_scale_per_axis():
    matrix = apply_scale(identity(), (2.0, 3.0, 4.0))
    assert transform_point(matrix, (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)


def test_functions_do_not_modify_input():
    base = identity()
    apply_translation(base, (5.0, 5.0, 5.0))
    apply_rotation_z(base, 1.0)
    assert base == identity()


def test_rotation_z_quarter_turn():
    matrix = apply_rotation_z(identity(), math.pi / 2)
    point = transform_point(matrix, (1.0, 0.0, 0.0))
    assert list(point) == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)


@pytest.mark.parametrize("rotate", [apply_rotation_x, apply_rotation_y, apply_rotation_z])
def test_rotation_inverse_restores_identity(rotate):
    matrix = rotate(rotate(identity(), 0.7), -0.7)
    assert list(matrix) == pytest.approx(list(identity()), abs=1e-9)


@pytest.mark.parametrize("rotate", [apply_rotation_x, apply_rotation_y, apply_rotation_z])
def test_rotation_preserves_length(rotate):
    point = transform_point(rotate(identity(), 1.1), (1.0, 2.0, 3.0))
    assert math.isclose(math.hypot(*point), math.hypot(1.0, 2.0, 3.0))


@pytest.mark.parametrize(
    "axis,rotate", [(0, apply_rotation_x), (1, apply_rotation_y), (2, apply_rotation_z)]
)
def test_euler_single_axis_matches_axis_rotation(axis, rotate):
    euler = [0.0, 0.0, 0.0]
    euler[axis] = 0.9
    combined = apply_rotation(identity(), euler)
    single = rotate(identity(), 0.9)
    assert list(combined) == pytest.approx(list(single), abs=1e-9)


def test_volume_size_checked():
    with pytest.raises(ValueError):
        Rasteriser(TINY, [0] * 10)


def test_axis_aligned_line():
    r = _rasteriser()
    r.draw_line((0.5, 3.5, 2.5), (10.5, 3.5, 2.5), 7)
    assert _written(r.volume) == {(x, 3, 2) for x in range(10)}
    assert {v for v in r.volume if v} == {7}


def test_line_direction_does_not_matter():
    forward = _rasteriser()
    backward = _rasteriser()
    forward.draw_line((1.2, 2.7, 9.1), (13.4, 7.3, 3.6), 1)
    backward.draw_line((13.4, 7.3, 3.6), (1.2, 2.7, 9.1), 1)
    assert forward.volume == backward.volume


def test_diagonal_line_stays_on_diagonal():
    r = _rasteriser()
    r.draw_line((0.5, 0.5, 0.5), (10.5, 10.5, 10.5), 3)
    written = _written(r.volume)
    assert len(written) == 10
    assert all(x == y == z for x, y, z in written)


def test_line_outside_volume_draws_nothing():
    r = _rasteriser()
    r.draw_line((-5.0, -5.0, -5.0), (-1.0, -1.0, -1.0), 9)
    assert _written(r.volume) == set()


def test_line_is_clipped_to_volume():
    r = _rasteriser()
    r.draw_line((-5.0, 3.5, 2.5), (30.0, 3.5, 2.5), 5)
    written = _written(r.volume)
    assert (0, 3, 2) in written
    assert all(y == 3 and z == 2 for _, y, z in written)


def test_flat_triangle():
    r = _rasteriser()
    r.set_colour(4)
    r.draw_triangle((1.0, 1.0, 5.5), (12.0, 1.0, 5.5), (1.0, 12.0, 5.5))
    written = _written(r.volume)
    assert (3, 3, 5) in written
    assert all(z == 5 for _, _, z in written)
    assert all(x >= 1 and y >= 1 and x + y <= 12 for x, y, _ in written)
    assert {v for v in r.volume if v} == {4}


def test_triangle_outside_volume_draws_nothing():
    r = _rasteriser()
    r.set_colour(4)
    r.draw_triangle((20.0, 20.0, 5.0), (30.0, 20.0, 5.0), (20.0, 30.0, 5.0))
    assert _written(r.volume) == set()


def test_tiny_triangle_draws_first_vertex():
    r = _rasteriser()
    r.set_colour(6)
    r.draw_triangle((4.7, 5.2, 6.9), (4.9, 5.3, 6.9), (4.8, 5.6, 7.0))
    assert _written(r.volume) == {(4, 5, 6)}


def test_textured_triangle_uses_texture_colour():
    texture = Image(1, 1, [10, 20, 30], channels=3)
    r = _rasteriser()
    r.set_texture((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), texture)
    r.draw_triangle((1.0, 1.0, 5.5), (12.0, 1.0, 5.5), (1.0, 12.0, 5.5))
    values = {v for v in r.volume if v}
    assert values == {texture.sample((0.0, 0.0))}


def test_masked_texture_draws_nothing():
    texture = Image(1, 1, [10, 20, 30, 0], channels=4)
    r = _rasteriser()
    r.set_texture((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), texture)
    r.draw_triangle((1.0, 1.0, 5.5), (12.0, 1.0, 5.5), (1.0, 12.0, 5.5))
    assert _written(r.volume) == set()


def test_set_colour_clears_texture():
    texture = Image(1, 1, [10, 20, 30, 0], channels=4)
    r = _rasteriser()
    r.set_texture((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), texture)
    r.set_colour(2)
    r.draw_triangle((1.0, 1.0, 5.5), (12.0, 1.0, 5.5), (1.0, 12.0, 5.5))
    assert {v for v in r.volume if v} == {2}


def test_shader_receives_barycentric_weights():
    calls = []

    def shader(volume, coordinate, barycentric, state):
        calls.append((tuple(coordinate), tuple(barycentric)))

    r = _rasteriser()
    r.shader = shader
    r.draw_triangle((1.0, 1.0, 5.5), (12.0, 1.0, 5.5), (1.0, 12.0, 5.5))
    assert len(calls) > 0
    sums = [sum(w) for _, w in calls]
    assert sums == pytest.approx([1.0] * len(calls), abs=1e-6)
    assert min(min(w) for _, w in calls) >= -1e-5
    assert _written(r.volume) == set()