"""4x4 transform matrices for column vectors (OpenGL conventions)."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def identity() -> np.ndarray:
    return np.identity(4)


def _vec3(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def translate(matrix: ArrayLike, offset: ArrayLike) -> np.ndarray:
    """Return matrix multiplied on the right by a translation."""
    translation = identity()
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ translation


def scale(matrix: ArrayLike, factors: ArrayLike) -> np.ndarray:
    """Return matrix multiplied on the right by a scaling."""
    scaling = np.diag([*_vec3(factors), 1.0])
    return np.asarray(matrix, dtype=float) @ scaling


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """2D orthographic projection with depth range [-1, 1]."""
    if left == right or bottom == top:
        raise ValueError("orthographic bounds must not be degenerate")
    result = identity()
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -1.0
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; fovy is in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / np.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def normalize(vector: ArrayLike) -> np.ndarray:
    """Return the vector scaled to unit length."""
    v = np.asarray(vector, dtype=float)
    length = np.linalg.norm(v)
    if length == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / length


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye_v = _vec3(eye)
    forward = normalize(_vec3(center) - eye_v)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    result = identity()
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye_v)
    result[1, 3] = -np.dot(upward, eye_v)
    result[2, 3] = np.dot(forward, eye_v)
    return result