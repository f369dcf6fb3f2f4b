import math

import numpy as np
import pytest

from rtsgame import transforms


def _apply(matrix, point):
    return matrix @ np.array([*point, 1.0])


def test_identity_is_eye():
    assert np.array_equal(transforms.identity(), np.eye(4))


def test_translate_moves_origin_to_offset():
    m = transforms.translate(transforms.identity(), (1.0, -2.0, 3.5))
    assert np.allclose(_apply(m, (0, 0, 0))[:3], (1.0, -2.0, 3.5))


def test_translations_compose():
    a = np.array([1.0, 2.0, 3.0])
    b = np.array([-4.0, 0.5, 2.0])
    m = transforms.translate(transforms.translate(transforms.identity(), a), b)
    assert np.allclose(_apply(m, (0, 0, 0))[:3], a + b)


def test_scale_scales_points():
    m = transforms.scale(transforms.identity(), (2.0, 3.0, 4.0))
    p = np.array([1.0, 1.0, 1.0])
    assert np.allclose(_apply(m, p)[:3], p * np.array([2.0, 3.0, 4.0]))


def test_translate_then_scale_order():
    offset = np.array([-1.0, 0.0, 0.0])
    m = transforms.scale(transforms.translate(transforms.identity(), offset), (0.3, 0.3, 0.3))
    assert np.allclose(_apply(m, (0, 0, 0))[:3], offset)


def test_ortho_maps_corners_to_ndc():
    m = transforms.ortho(-4.0, 4.0, -3.0, 3.0)
    assert np.allclose(_apply(m, (-4.0, -3.0, 0.0)), (-1.0, -1.0, 0.0, 1.0))
    assert np.allclose(_apply(m, (4.0, 3.0, 0.0)), (1.0, 1.0, 0.0, 1.0))


def test_ortho_rejects_degenerate_bounds():
    with pytest.raises(ValueError):
        transforms.ortho(1.0, 1.0, 0.0, 1.0)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    m = transforms.perspective(math.radians(45.0), 800.0 / 600.0, near, far)
    clip_near = _apply(m, (0, 0, -near))
    clip_far = _apply(m, (0, 0, -far))
    assert clip_near[2] / clip_near[3] == pytest.approx(-1.0)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        transforms.perspective(math.radians(45.0), 0.0, 0.1, 100.0)


def test_look_at_puts_eye_at_origin_and_center_ahead():
    eye = np.array([3.0, 3.0, 3.0])
    center = np.zeros(3)
    m = transforms.look_at(eye, center, (0, 1, 0))
    assert np.allclose(_apply(m, eye)[:3], 0.0)
    ahead = _apply(m, center)[:3]
    assert np.allclose(ahead[:2], 0.0)
    assert ahead[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_look_at_rotation_is_orthonormal():
    m = transforms.look_at((1.0, 2.0, 5.0), (0.0, 0.5, -1.0), (0, 1, 0))
    rotation = m[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3))


def test_normalize_gives_unit_parallel_vector():
    v = np.array([2.0, -3.0, 6.0])
    n = transforms.normalize(v)
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(np.cross(n, v), 0.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        transforms.normalize((0.0, 0.0, 0.0))