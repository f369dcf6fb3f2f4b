import pytest

from rtsgame.obj_model import MeshData, ObjLoadError, load_obj, parse_obj

TRIANGLE = """\
# a single textured triangle
v 0 0 0
v 1 0 0
v 0 1 0
vt 0.25 0.5
vn 0 0 1
f 1/1/1 2/1/1 3/1/1
"""


def test_full_corners_interleaved():
    data = parse_obj(TRIANGLE)
    assert data.stride == 8
    assert data.indices == (0, 1, 2)
    assert data.vertices[:8] == (0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.25, 0.5)
    assert data.vertices[8:11] == (1.0, 0.0, 0.0)


def test_vertex_count_matches_stride():
    data = parse_obj(TRIANGLE)
    assert len(data.vertices) == data.vertex_count * data.stride


def test_positions_only_use_zero_normal_and_uv():
    data = parse_obj("v 1 2 3\nv 4 5 6\nv 7 8 9\nf 1 2 3\n")
    assert data.vertices[:8] == (1.0, 2.0, 3.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    assert data.vertices[16:19] == (7.0, 8.0, 9.0)


def test_position_and_normal_without_uv():
    data = parse_obj("v 1 2 3\nv 4 5 6\nv 7 8 9\nvn 0 1 0\nf 1//1 2//1 3//1\n")
    assert data.vertices[3:8] == (0.0, 1.0, 0.0, 0.0, 0.0)


def test_texcoord_with_single_component():
    data = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0.75\nf 1/1 2/1 3/1\n")
    assert data.vertices[6:8] == (0.75, 0.0)


def test_negative_indices_match_positive():
    negative = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
    positive = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    assert negative == positive


def test_quad_is_split_into_two_triangles():
    text = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"
    data = parse_obj(text)
    assert data.indices == tuple(range(6))
    corners = [data.vertices[i * 8 : i * 8 + 3] for i in data.indices]
    p1, p2, p3, p4 = (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)
    assert corners == [p1, p2, p3, p1, p3, p4]


def test_unknown_statements_are_ignored():
    decorated = "mtllib scene.mtl\no thing\ns off\nusemtl stone\n" + TRIANGLE
    assert parse_obj(decorated) == parse_obj(TRIANGLE)


def test_empty_text_gives_empty_mesh():
    assert parse_obj("") == MeshData(vertices=(), indices=())


@pytest.mark.parametrize(
    "text",
    [
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 4\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n",
        "v 0 0 0\nv 1 0 0\nf 1 2\n",
        "v 1 2\n",
        "v a b c\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1/2 2 3\n",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(ObjLoadError):
        parse_obj(text)


def test_load_obj_round_trip(tmp_path):
    path = tmp_path / "triangle.obj"
    path.write_text(TRIANGLE)
    assert load_obj(path) == parse_obj(TRIANGLE)


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(ObjLoadError, match="Failed to load OBJ file"):
        load_obj(tmp_path / "missing.obj")