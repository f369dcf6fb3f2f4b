"""Orthographic camera with pan and zoom."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from rtsgame import transforms

MIN_ZOOM = 0.1
MAX_ZOOM = 10.0


class Camera2D:
    """A 2D camera; zoom_by keeps the zoom within [MIN_ZOOM, MAX_ZOOM]."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._position = np.zeros(2)
        self._zoom = 1.0
        self._projection = transforms.ortho(left, right, bottom, top)
        self._update_view()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: ArrayLike) -> None:
        self._position = np.asarray(value, dtype=float).reshape(2).copy()
        self._update_view()

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, value: float) -> None:
        self._zoom = float(value)
        self._update_view()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    def move(self, delta: ArrayLike) -> None:
        self._position = self._position + np.asarray(delta, dtype=float).reshape(2)
        self._update_view()

    def zoom_by(self, factor: float) -> None:
        self._zoom = min(max(self._zoom * factor, MIN_ZOOM), MAX_ZOOM)
        self._update_view()

    def _update_view(self) -> None:
        x, y = self._position
        view = transforms.translate(transforms.identity(), (-x, -y, 0.0))
        self._view = transforms.scale(view, (self._zoom, self._zoom, 1.0))