"""Wavefront OBJ parsing into interleaved position/normal/uv vertex data."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

STRIDE = 8

_Corner = tuple[int, "int | None", "int | None"]


class ObjLoadError(RuntimeError):
    """Raised when an OBJ file cannot be read or is malformed."""


@dataclass(frozen=True)
class MeshData:
    """Interleaved vertices (x y z, nx ny nz, u v) and their triangle indices."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]
    stride: int = STRIDE

    @property
    def vertex_count(self) -> int:
        return len(self.indices)


def _floats(fields: list[str], required: int, count: int) -> tuple[float, ...]:
    if len(fields) < required:
        raise ValueError(f"expected at least {required} values, got {len(fields)}")
    values = [float(field) for field in fields[:count]]
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _resolve(token: str, count: int, kind: str) -> int:
    number = int(token)
    if number > 0:
        index = number - 1
    elif number < 0:
        index = count + number
    else:
        raise ValueError(f"{kind} index must not be zero")
    if not 0 <= index < count:
        raise ValueError(f"{kind} index {number} out of range")
    return index


def _corner(token: str, positions: int, texcoords: int, normals: int) -> _Corner:
    parts = token.split("/")
    if len(parts) > 3:
        raise ValueError(f"malformed face vertex {token!r}")
    position = _resolve(parts[0], positions, "vertex")
    texcoord = _resolve(parts[1], texcoords, "texcoord") if len(parts) > 1 and parts[1] else None
    normal = _resolve(parts[2], normals, "normal") if len(parts) > 2 and parts[2] else None
    return position, texcoord, normal


def parse_obj(text: str) -> MeshData:
    """Parse OBJ text; polygons are split into triangles around their first vertex."""
    positions: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    texcoords: list[tuple[float, ...]] = []
    vertices: list[float] = []

    def emit(corner: _Corner) -> None:
        position, texcoord, normal = corner
        vertices.extend(positions[position])
        vertices.extend(normals[normal] if normal is not None else (0.0, 0.0, 0.0))
        vertices.extend(texcoords[texcoord] if texcoord is not None else (0.0, 0.0))

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *fields = line.split()
        try:
            if keyword == "v":
                positions.append(_floats(fields, 3, 3))
            elif keyword == "vn":
                normals.append(_floats(fields, 3, 3))
            elif keyword == "vt":
                texcoords.append(_floats(fields, 1, 2))
            elif keyword == "f":
                corners = [
                    _corner(field, len(positions), len(texcoords), len(normals))
                    for field in fields
                ]
                if len(corners) < 3:
                    raise ValueError("a face needs at least three vertices")
                for second, third in zip(corners[1:-1], corners[2:]):
                    for corner in (corners[0], second, third):
                        emit(corner)
        except ValueError as exc:
            raise ObjLoadError(f"line {line_number}: {exc}") from exc

    return MeshData(vertices=tuple(vertices), indices=tuple(range(len(vertices) // STRIDE)))


def load_obj(path: str | PathLike[str]) -> MeshData:
    """Read and parse an OBJ file."""
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise ObjLoadError(f"Failed to load OBJ file: {path}") from exc
    return parse_obj(text)