# src/mazegen/mapgen/rooms.py
# Rectangular floor areas stamped over whatever is already in the grid.

from dataclasses import dataclass
from typing import Iterator, Set, Tuple

from ..clusters import ClusterArena
from ..grid import Grid
from ..tiles import Tile, TileType


@dataclass
class Room:
    # top-left tile and extent (width along x, length along z)
    x: int
    z: int
    width: int
    length: int

    def tiles(self, grid: Grid) -> Iterator[Tile]:
        for z in range(self.z, self.z + self.length):
            for x in range(self.x, self.x + self.width):
                yield grid.rows[z][x]

    def contains(self, x: int, z: int) -> bool:
        return self.x <= x < self.x + self.width and self.z <= z < self.z + self.length

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(x0, z0, x1, z1), inclusive."""
        return (self.x, self.z, self.x + self.width - 1, self.z + self.length - 1)

    def touches(self, tile: Tile) -> bool:
        """
        True if the tile is inside the room or orthogonally next to its edge.
        The four diagonal corners just outside do not count: nothing can walk
        from there straight into the room.
        """
        x0, z0 = self.x - 1, self.z - 1
        x1, z1 = self.x + self.width, self.z + self.length
        if not (x0 <= tile.x <= x1 and z0 <= tile.z <= z1):
            return False
        return not (tile.x in (x0, x1) and tile.z in (z0, z1))

    def connected_clusters(self, grid: Grid) -> Set[int]:
        found = set()
        for z in range(self.z - 1, self.z + self.length + 1):
            for x in range(self.x - 1, self.x + self.width + 1):
                t = grid.rows[z][x]
                if t.cluster is not None and self.touches(t):
                    found.add(t.cluster)
        return found


def random_room(grid: Grid, rng, size_min: int, size_max: int) -> Room:
    """
    Pick width/length in [size_min, size_max], clamped so the room keeps a
    one-tile wall margin, and an anchor that keeps the whole room interior.
    """
    width = rng.randrange(size_min, size_max + 1)
    length = rng.randrange(size_min, size_max + 1)
    width = min(width, grid.size - 2)
    length = min(length, grid.size - 2)
    x = rng.randrange(1, grid.size - width)
    z = rng.randrange(1, grid.size - length)
    return Room(x, z, width, length)


def stamp_room(grid: Grid, arena: ClusterArena, room: Room) -> int:
    """
    Merge every cluster the room touches into the biggest of them (or a new
    cluster) and fill the room's wall tiles with floor. Existing floor and
    holes are left as they are. Returns the cluster handle of the room.
    """
    touching = room.connected_clusters(grid)
    target = arena.biggest(touching)
    if target is None:
        target = arena.new()
    for h in sorted(touching):
        if h != target:
            arena.convert(h, target)
    for t in room.tiles(grid):
        if t.type == TileType.WALL:
            arena.make_floor(t, target)
    return target


def generate_room(grid: Grid, arena: ClusterArena, rng, size_min: int, size_max: int) -> Room:
    room = random_room(grid, rng, size_min, size_max)
    stamp_room(grid, arena, room)
    return room
