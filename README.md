# rtsgame

This is an early prototype of a real-time strategy game. It opens an 800×600
OpenGL window and draws a textured model loaded from a Wavefront OBJ file. You
can view the model through an orthographic camera or a free-flying first-person
camera. Tab switches between the two.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

Run the game from the directory that holds an `assets/` folder with these
files:

- `assets/shaders/basic.vert` and `assets/shaders/basic.frag`: the vertex and
  fragment shaders. The game sets a `mat4` uniform `MVP` and a sampler uniform
  `texture1`, which it sets to texture unit 0.
- `assets/models/sphere.obj`: the model.
- `assets/images/StoneWall_Texture.png`: the texture.

Then start the game:

```
rtsgame
```

The command takes no arguments. `rtsgame.app.App` takes the assets directory
as `assets_dir`, which defaults to `"assets"`.

### Controls

| Key     | Orthographic camera (default) | First-person camera           |
|---------|-------------------------------|-------------------------------|
| W/A/S/D | pan up/left/down/right        | move forward/left/back/right  |
| Q / E   | zoom in / zoom out            | –                             |
| Mouse   | –                             | look around                   |
| Tab     | switch to first-person camera | switch to orthographic camera |
| Escape  | quit                          | quit                          |

Game logic runs at a fixed step of 0.016666 s, which is about 60 updates a
second, whatever the frame rate.

## What the package does not do

- It ships no assets. The shaders, the model and the texture must be supplied.
- There is no game play yet: no map, no units, no selection or orders. The
  `rtsgame.tile` module defines tile types and their colours, but the game does
  not draw tiles.

## Using the building blocks

All modules except `rtsgame.graphics` and `rtsgame.app.App` work without a
window:

```python
from rtsgame.vec2 import Vec2
from rtsgame.game_timer import GameTimer
from rtsgame.tile import Tile, TileType, tile_type_to_color
from rtsgame.camera2d import Camera2D
from rtsgame.camera3d import Camera3D, Direction
from rtsgame.input_manager import InputManager, Action
from rtsgame.app import CameraController, CameraMode
from rtsgame.obj_model import parse_obj, load_obj

v = Vec2(3.0, 4.0)
print(v.length())                 # 5.0
print(v.normalized())             # Vec2(x=0.6, y=0.8)

timer = GameTimer(500.0)
timer.start()
print(timer.update(600.0))        # True; the timer then resets itself

print(tile_type_to_color(TileType.WATER))   # (0.2, 0.4, 0.8)

cam = Camera2D(-4.0, 4.0, -3.0, 3.0)
cam.move((1.0, 0.0))
cam.zoom_by(2.0)                  # zoom is kept between 0.1 and 10

fps = Camera3D((3.0, 3.0, 3.0), (0.0, 1.0, 0.0), -135.0, -35.0)
fps.process_keyboard(Direction.FORWARD, 0.016)
fps.process_mouse_movement(10.0, -5.0, True)   # pitch is kept within ±89°
mvp = fps.projection_matrix(800 / 600) @ fps.view_matrix()

inputs = InputManager()
inputs.key_event(ord("w"), Action.PRESS)
controller = CameraController()   # starts in CameraMode.ORTHO_2D
controller.update(inputs, 0.016)
projection, view = controller.matrices()

mesh = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
print(mesh.vertex_count)          # 3
```

Here is what each module holds:

- `rtsgame.vec2`: `Vec2`, a two-component vector with `+`, `-`, `*`, `/`, the
  in-place forms of these, `increment`, `decrement`, `length`,
  `length_squared`, `normalized` and `dot`.
- `rtsgame.game_timer`: `GameTimer`, which collects elapsed time through
  `update(dt)`, reports and resets when its `duration` is reached, and has
  `start`, `reset` and `did_finish`.
- `rtsgame.tile`: `TileType` (`GRASS`, `WATER`), `Tile`, and
  `tile_type_to_color`, which raises `ValueError` for a type without a colour.
- `rtsgame.transforms`: `identity`, `translate`, `scale`, `ortho`,
  `perspective`, `look_at` and `normalize`. They return 4×4 NumPy arrays for
  column vectors.
- `rtsgame.camera2d`: `Camera2D` with `position`, `zoom`, `view_matrix`,
  `projection_matrix`, `move` and `zoom_by`.
- `rtsgame.camera3d`: `Camera3D` and `Direction`. `process_keyboard` also
  accepts `"W"`, `"S"`, `"A"` and `"D"`, and ignores any other direction.
- `rtsgame.input_manager`: `InputManager`. It tracks held keys and mouse
  buttons and the cursor's position and last movement, with the y axis growing
  downwards. `attach(window)` subscribes it to a pyglet window's events.
- `rtsgame.obj_model`: `parse_obj` and `load_obj`. They return `MeshData` with
  interleaved vertices of eight floats each (position, normal, texture
  coordinates) and one index per vertex. Polygons are split into triangles.
  Missing normals and texture coordinates become zeros. Both raise
  `ObjLoadError` for a file that cannot be read or parsed.
- `rtsgame.graphics`: OpenGL resources that need a current context, namely
  `Mesh`, `ShaderProgram`, `Texture2D` and `ObjModel`. Each one is a context
  manager that frees its GPU objects on exit. The module also has
  `create_window`, `load_shader_source` (which raises `ShaderError`) and
  `check_texture_unit` (which raises `ValueError` outside 0–31).
- `rtsgame.app`: `CameraMode`, `CameraController`, `App` and `main`, the
  function that the `rtsgame` command runs.