"""OpenGL resources: window, meshes, shader programs, textures and models."""

from __future__ import annotations

import io
from os import PathLike
from pathlib import Path
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike

from rtsgame.obj_model import STRIDE, load_obj

MAX_TEXTURE_UNITS = 32
_FLOAT_SIZE = 4
# (attribute location, component count, offset in floats): position, normal, uv
_ATTRIBUTES = ((0, 3, 0), (1, 3, 3), (2, 2, 6))


class ShaderError(RuntimeError):
    """Raised when a shader cannot be loaded, compiled or linked."""


def load_shader_source(path: str | PathLike[str]) -> str:
    """Return the text of a shader file."""
    try:
        return Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise ShaderError(f"Failed to load shader: {path}") from exc


def check_texture_unit(unit: int) -> int:
    """Return the unit if it is a valid texture unit, otherwise raise ValueError."""
    if not 0 <= unit < MAX_TEXTURE_UNITS:
        raise ValueError(f"Texture unit out of range: {unit}")
    return unit


def create_window(width: int, height: int, title: str) -> Any:
    """Open a window with a current OpenGL 3.3 core context."""
    import pyglet

    config = pyglet.gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    try:
        return pyglet.window.Window(width, height, caption=title, config=config)
    except pyglet.window.NoSuchConfigException as exc:
        raise RuntimeError("window creation failed") from exc


class Mesh:
    """Indexed triangles in GPU buffers with position, normal and uv attributes."""

    def __init__(
        self, vertices: Sequence[float], indices: Sequence[int], stride: int = STRIDE
    ) -> None:
        from pyglet import gl

        vertex_data = np.asarray(vertices, dtype=np.float32)
        index_data = np.asarray(indices, dtype=np.uint32)
        self.index_count = int(index_data.size)

        vao, vbo, ebo = gl.GLuint(), gl.GLuint(), gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)
        gl.glGenBuffers(1, ebo)
        self._vao, self._vbo, self._ebo = vao.value, vbo.value, ebo.value

        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, vertex_data.nbytes, vertex_data.tobytes(), gl.GL_STATIC_DRAW
        )
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, index_data.nbytes, index_data.tobytes(), gl.GL_STATIC_DRAW
        )

        stride_bytes = stride * _FLOAT_SIZE
        for location, size, offset in _ATTRIBUTES:
            gl.glVertexAttribPointer(
                location, size, gl.GL_FLOAT, gl.GL_FALSE, stride_bytes, offset * _FLOAT_SIZE
            )
            gl.glEnableVertexAttribArray(location)
        gl.glBindVertexArray(0)

    def draw(self) -> None:
        from pyglet import gl

        gl.glBindVertexArray(self._vao)
        gl.glDrawElements(gl.GL_TRIANGLES, self.index_count, gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)

    def __enter__(self) -> Mesh:
        return self

    def __exit__(self, *exc_info: object) -> None:
        from pyglet import gl

        gl.glDeleteBuffers(1, gl.GLuint(self._vbo))
        gl.glDeleteBuffers(1, gl.GLuint(self._ebo))
        gl.glDeleteVertexArrays(1, gl.GLuint(self._vao))


class ShaderProgram:
    """A linked vertex and fragment shader pair read from files."""

    def __init__(
        self, vertex_path: str | PathLike[str], fragment_path: str | PathLike[str]
    ) -> None:
        vertex_code = load_shader_source(vertex_path)
        fragment_code = load_shader_source(fragment_path)

        from pyglet.graphics.shader import Shader, ShaderException
        from pyglet.graphics.shader import ShaderProgram as _Program

        try:
            vertex = Shader(vertex_code, "vertex")
            fragment = Shader(fragment_code, "fragment")
        except ShaderException as exc:
            raise ShaderError(f"Shader compile failed: {exc}") from exc
        try:
            self._program = _Program(vertex, fragment)
        except ShaderException as exc:
            raise ShaderError(f"Shader link failed: {exc}") from exc
        finally:
            vertex.delete()
            fragment.delete()

    @property
    def id(self) -> int:
        return self._program.id

    def use(self) -> None:
        self._program.use()

    def set_int(self, name: str, value: int) -> None:
        self._set_uniform(name, int(value))

    def set_mat4(self, name: str, matrix: ArrayLike) -> None:
        values = np.asarray(matrix, dtype=float).reshape(4, 4).flatten(order="F")
        self._set_uniform(name, tuple(float(v) for v in values))

    def _set_uniform(self, name: str, value: Any) -> None:
        # Uniforms the program does not use are ignored, as OpenGL does.
        if name in self._program.uniforms:
            self._program[name] = value

    def __enter__(self) -> ShaderProgram:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._program.delete()


class Texture2D:
    """An RGBA texture with mipmaps and repeat wrapping, loaded from an image file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        with open(path, "rb") as handle:
            raw = handle.read()

        import pyglet
        from pyglet import gl

        image = pyglet.image.load(str(path), file=io.BytesIO(raw)).get_image_data()
        self.width, self.height = image.width, image.height
        # Rows come bottom-up, which is what texture coordinates expect.
        pixels = image.get_data("RGBA", image.width * 4)

        texture = gl.GLuint()
        gl.glGenTextures(1, texture)
        self._id = texture.value
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._id)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, self.width, self.height, 0,
            gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    def bind(self, unit: int = 0) -> None:
        from pyglet import gl

        check_texture_unit(unit)
        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._id)

    def __enter__(self) -> Texture2D:
        return self

    def __exit__(self, *exc_info: object) -> None:
        from pyglet import gl

        gl.glDeleteTextures(1, gl.GLuint(self._id))


class ObjModel:
    """A drawable model loaded from an OBJ file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.data = load_obj(path)
        self._mesh = Mesh(self.data.vertices, self.data.indices, self.data.stride)

    def draw(self) -> None:
        self._mesh.draw()

    def __enter__(self) -> ObjModel:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._mesh.__exit__(*exc_info)