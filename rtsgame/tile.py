"""Map tiles and their display colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[float, float, float]


class TileType(Enum):
    GRASS = "grass"
    WATER = "water"


TILE_TYPE_COLORS: dict[TileType, Color] = {
    TileType.GRASS: (0.2, 0.8, 0.2),
    TileType.WATER: (0.2, 0.4, 0.8),
}


def tile_type_to_color(tile_type: TileType) -> Color:
    """Return the RGB colour of a tile type."""
    try:
        return TILE_TYPE_COLORS[tile_type]
    except (KeyError, TypeError):
        raise ValueError(f"{tile_type!r} has no color defined") from None


@dataclass
class Tile:
    type: TileType
    position: tuple[float, float, float]