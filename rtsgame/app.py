"""The game application: window, camera switching and the fixed-step loop."""

from __future__ import annotations

import time
from contextlib import ExitStack
from enum import Enum
from pathlib import Path
from typing import Sequence

import numpy as np

from rtsgame import transforms
from rtsgame.camera2d import Camera2D
from rtsgame.camera3d import Camera3D, Direction
from rtsgame.input_manager import InputManager

FIXED_TIME_STEP = 0.016666  # seconds
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "RTS Game"
ORTHO_PAN_SPEED = 5.0

KEY_A = ord("a")
KEY_D = ord("d")
KEY_E = ord("e")
KEY_Q = ord("q")
KEY_S = ord("s")
KEY_W = ord("w")
KEY_TAB = 0xFF09
KEY_ESCAPE = 0xFF1B

QUAD_VERTICES = (
    -0.5, -0.5, 0.0, 0.0, 0.0,
    0.5, -0.5, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.0, 1.0, 1.0,
    -0.5, 0.5, 0.0, 0.0, 1.0,
)
QUAD_INDICES = (0, 1, 2, 2, 3, 0)

MODEL_MATRIX = transforms.scale(
    transforms.translate(transforms.identity(), (-1.0, 0.0, 0.0)), (0.3, 0.3, 0.3)
)

_FPS_KEYS = (
    (KEY_W, Direction.FORWARD),
    (KEY_S, Direction.BACKWARD),
    (KEY_A, Direction.LEFT),
    (KEY_D, Direction.RIGHT),
)
_PAN_KEYS = (
    (KEY_W, (0.0, 1.0)),
    (KEY_S, (0.0, -1.0)),
    (KEY_A, (-1.0, 0.0)),
    (KEY_D, (1.0, 0.0)),
)


class CameraMode(Enum):
    FPS_3D = "fps_3d"
    ORTHO_2D = "ortho_2d"


class CameraController:
    """Drives a perspective and an orthographic camera from input; Tab switches them."""

    def __init__(
        self,
        fps_camera: Camera3D | None = None,
        ortho_camera: Camera2D | None = None,
        aspect_ratio: float = WINDOW_WIDTH / WINDOW_HEIGHT,
        mode: CameraMode = CameraMode.ORTHO_2D,
    ) -> None:
        self.fps_camera = fps_camera or Camera3D((3.0, 3.0, 3.0), (0.0, 1.0, 0.0), -135.0, -35.0)
        self.ortho_camera = ortho_camera or Camera2D(-4.0, 4.0, -3.0, 3.0)
        self.aspect_ratio = aspect_ratio
        self.mode = mode
        self._tab_was_pressed = False

    def update(self, input_manager: InputManager, dt: float) -> None:
        """Advance the active camera by one time step."""
        if self.mode is CameraMode.FPS_3D:
            for key, direction in _FPS_KEYS:
                if input_manager.is_key_pressed(key):
                    self.fps_camera.process_keyboard(direction, dt)
            dx, dy = input_manager.mouse_delta
            self.fps_camera.process_mouse_movement(dx, -dy)
            input_manager.reset_mouse_delta()
        else:
            move = sum(
                (np.array(step) for key, step in _PAN_KEYS if input_manager.is_key_pressed(key)),
                np.zeros(2),
            )
            if np.linalg.norm(move) > 0:
                self.ortho_camera.move(move * dt * ORTHO_PAN_SPEED)
            if input_manager.is_key_pressed(KEY_Q):
                self.ortho_camera.zoom_by(1.0 + dt)
            if input_manager.is_key_pressed(KEY_E):
                self.ortho_camera.zoom_by(1.0 - dt)

    def handle_events(self, input_manager: InputManager) -> bool:
        """Toggle the camera on a fresh Tab press; return True when Escape is held."""
        tab_pressed = input_manager.is_key_pressed(KEY_TAB)
        if tab_pressed and not self._tab_was_pressed:
            self.mode = (
                CameraMode.ORTHO_2D if self.mode is CameraMode.FPS_3D else CameraMode.FPS_3D
            )
        self._tab_was_pressed = tab_pressed
        return input_manager.is_key_pressed(KEY_ESCAPE)

    def matrices(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (projection, view) for the active camera."""
        if self.mode is CameraMode.FPS_3D:
            return (
                self.fps_camera.projection_matrix(self.aspect_ratio),
                self.fps_camera.view_matrix(),
            )
        return self.ortho_camera.projection_matrix, self.ortho_camera.view_matrix


class App:
    """Opens the game window, loads the assets and runs the main loop."""

    def __init__(self, assets_dir: str | Path = "assets") -> None:
        from rtsgame.graphics import Mesh, ObjModel, ShaderProgram, Texture2D, create_window

        assets = Path(assets_dir)
        self._resources = ExitStack()
        try:
            self.window = create_window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
            self._resources.callback(self.window.close)
            self.input_manager = InputManager()
            self.input_manager.attach(self.window)
            self.controller = CameraController()
            self.shader = self._resources.enter_context(
                ShaderProgram(assets / "shaders" / "basic.vert", assets / "shaders" / "basic.frag")
            )
            self.mesh = self._resources.enter_context(Mesh(QUAD_VERTICES, QUAD_INDICES))
            self.model = self._resources.enter_context(ObjModel(assets / "models" / "sphere.obj"))
            self.texture = self._resources.enter_context(
                Texture2D(assets / "images" / "StoneWall_Texture.png")
            )
        except BaseException:
            self._resources.close()
            raise

        from pyglet import gl

        gl.glEnable(gl.GL_DEPTH_TEST)
        self.window.set_exclusive_mouse(True)

    def run(self) -> None:
        """Run until the window closes, updating at a fixed time step."""
        with self._resources:
            last_frame = time.perf_counter()
            accumulator = 0.0
            while not self.window.has_exit:
                current_frame = time.perf_counter()
                accumulator += current_frame - last_frame
                last_frame = current_frame

                self.window.dispatch_events()
                if self.controller.handle_events(self.input_manager):
                    self.window.has_exit = True

                while accumulator >= FIXED_TIME_STEP:
                    self.controller.update(self.input_manager, FIXED_TIME_STEP)
                    accumulator -= FIXED_TIME_STEP

                self.render()
                self.window.flip()

    def render(self) -> None:
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.shader.use()
        projection, view = self.controller.matrices()
        self.shader.set_mat4("MVP", projection @ view @ MODEL_MATRIX)
        self.texture.bind(0)
        self.shader.set_int("texture1", 0)
        self.model.draw()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; the program takes no command-line arguments."""
    App().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())