# src/mazegen/mapgen/placement.py
# Floor-tile queries used to put entities (player, monster, pickup) into a finished maze.

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..tiles import Tile, TileType

BANDS = ("near", "middle", "far")


@dataclass
class Spawns:
    player: Tile
    monster: Tile
    pickup: Tile


def floor_tiles(maze) -> List[Tile]:
    return list(maze.inner_tiles(TileType.FLOOR))


def random_floor_tile(maze, rng) -> Tile:
    tiles = floor_tiles(maze)
    if not tiles:
        raise LookupError("maze has no floor tiles")
    return rng.choice(tiles)


def sq_distance(tile: Tile, ref: Tuple[int, int]) -> int:
    dx, dz = tile.x - ref[0], tile.z - ref[1]
    return dx * dx + dz * dz


def tiles_by_distance(tiles: Sequence[Tile], ref: Tuple[int, int]) -> List[Tile]:
    # nearest first; equal distances ordered by (z, x)
    return sorted(tiles, key=lambda t: (sq_distance(t, ref), t.z, t.x))


def distance_band(maze, ref: Tuple[int, int], band: str) -> List[Tile]:
    """
    Interior floor tiles in the nearest, middle or farthest third by distance
    to `ref`. The far band takes the remainder when the count is not a
    multiple of three.
    """
    if band not in BANDS:
        raise ValueError(f"band must be one of {BANDS}, got {band!r}")
    ordered = tiles_by_distance(floor_tiles(maze), ref)
    third = len(ordered) // 3
    if band == "near":
        return ordered[:third]
    if band == "middle":
        return ordered[third:2 * third]
    return ordered[2 * third:]


def pick_spawns(maze, rng) -> Spawns:
    """
    Player on a random floor tile; monster somewhere in the farther half of
    the floor (by distance to the player), pickup beyond the nearest quarter.
    """
    player = random_floor_tile(maze, rng)
    ordered = tiles_by_distance(floor_tiles(maze), player.pos)
    n = len(ordered)
    monster = ordered[rng.randrange(n // 2, n)]
    pickup = ordered[rng.randrange(n // 4, n)]
    return Spawns(player=player, monster=monster, pickup=pickup)


def floor_position(tile: Tile, block_scale: float = 1.0) -> Tuple[float, float, float]:
    """Centre of the top face of the floor block under `tile`, in world units."""
    return (tile.x * block_scale, block_scale / 2, tile.z * block_scale)
