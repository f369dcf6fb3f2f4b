import pytest

from rtsgame.graphics import (
    MAX_TEXTURE_UNITS,
    ObjModel,
    ShaderError,
    ShaderProgram,
    Texture2D,
    check_texture_unit,
    load_shader_source,
)
from rtsgame.obj_model import ObjLoadError

SHADER = "#version 330 core\nvoid main() {}\n"


def test_load_shader_source_returns_text(tmp_path):
    path = tmp_path / "basic.vert"
    path.write_text(SHADER)
    assert load_shader_source(path) == SHADER


def test_load_shader_source_missing_file(tmp_path):
    path = tmp_path / "missing.vert"
    with pytest.raises(ShaderError) as info:
        load_shader_source(path)
    assert str(info.value) == f"Failed to load shader: {path}"


def test_shader_error_caught_as_runtime_error(tmp_path):
    path = tmp_path / "absent.frag"
    with pytest.raises(RuntimeError, match="Failed to load shader"):
        load_shader_source(path)


@pytest.mark.parametrize("unit", [0, 1, MAX_TEXTURE_UNITS - 1])
def test_valid_texture_units(unit):
    assert check_texture_unit(unit) == unit


@pytest.mark.parametrize("unit", [MAX_TEXTURE_UNITS, MAX_TEXTURE_UNITS + 5, -1])
def test_invalid_texture_units(unit):
    with pytest.raises(ValueError, match="Texture unit out of range"):
        check_texture_unit(unit)


def test_shader_program_missing_vertex_file(tmp_path):
    fragment = tmp_path / "basic.frag"
    fragment.write_text(SHADER)
    with pytest.raises(ShaderError, match="basic.vert"):
        ShaderProgram(tmp_path / "basic.vert", fragment)


def test_shader_program_missing_fragment_file(tmp_path):
    vertex = tmp_path / "basic.vert"
    vertex.write_text(SHADER)
    with pytest.raises(ShaderError, match="basic.frag"):
        ShaderProgram(vertex, tmp_path / "basic.frag")


def test_obj_model_missing_file(tmp_path):
    with pytest.raises(ObjLoadError):
        ObjModel(tmp_path / "sphere.obj")


def test_obj_model_malformed_file(tmp_path):
    path = tmp_path / "broken.obj"
    path.write_text("v 0 0 0\nf 1 2 3\n")
    with pytest.raises(ObjLoadError):
        ObjModel(path)


def test_texture_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Texture2D(tmp_path / "wall.png")