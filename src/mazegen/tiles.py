# Tile types and the per-cell record stored in the grid.

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional


class TileType(IntEnum):
    WALL = 0
    FLOOR = 1
    HOLE = 2


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    NONE = "none"


# (dx, dz) per direction; Up is towards z == 0.
STEPS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

TEXT_CHARS = {TileType.WALL: "#", TileType.FLOOR: ".", TileType.HOLE: "O"}


def is_open(tile_type: TileType) -> bool:
    # Holes count as open wherever connectivity matters.
    return tile_type != TileType.WALL


@dataclass(unsafe_hash=True)
class Tile:
    """
    One grid cell. Equality and hashing use only the (x, z) coordinates, so
    tiles can be used as set members and dict keys regardless of identity.
    `cluster` holds an arena handle and is None exactly when the tile is a wall.
    """
    x: int
    z: int
    type: TileType = field(default=TileType.WALL, compare=False)
    cluster: Optional[int] = field(default=None, compare=False)

    @property
    def pos(self):
        return (self.x, self.z)

    def __repr__(self) -> str:
        return f"Tile({self.x}, {self.z}, {self.type.name})"
