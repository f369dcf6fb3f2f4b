"""Free-flying perspective camera controlled by keys and mouse."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from rtsgame import transforms

PITCH_LIMIT = 89.0


class Direction(Enum):
    FORWARD = "W"
    BACKWARD = "S"
    LEFT = "A"
    RIGHT = "D"


class Camera3D:
    """A yaw/pitch camera; angles are in degrees."""

    def __init__(self, position: ArrayLike, up: ArrayLike, yaw: float, pitch: float) -> None:
        self._position = np.asarray(position, dtype=float).reshape(3).copy()
        self._world_up = np.asarray(up, dtype=float).reshape(3).copy()
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = 5.0
        self.mouse_sensitivity = 0.1
        self.fov = 45.0
        self._update_vectors()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    def view_matrix(self) -> np.ndarray:
        return transforms.look_at(self._position, self._position + self._front, self._up)

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        return transforms.perspective(math.radians(self.fov), aspect_ratio, 0.1, 100.0)

    def process_keyboard(self, direction: Direction | str, delta_time: float) -> None:
        """Move along the view axes; unknown directions are ignored."""
        try:
            direction = Direction(direction)
        except ValueError:
            return
        velocity = self.movement_speed * delta_time
        if direction is Direction.FORWARD:
            self._position = self._position + self._front * velocity
        elif direction is Direction.BACKWARD:
            self._position = self._position - self._front * velocity
        elif direction is Direction.LEFT:
            self._position = self._position - self._right * velocity
        elif direction is Direction.RIGHT:
            self._position = self._position + self._right * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = (
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self._front = transforms.normalize(front)
        self._right = transforms.normalize(np.cross(self._front, self._world_up))
        self._up = transforms.normalize(np.cross(self._right, self._front))