import pytest

from mazegen.config import MazeParams
from mazegen.mapgen.generator import Maze, generate_maze
from mazegen.mapgen.placement import (
    BANDS, distance_band, floor_position, floor_tiles, pick_spawns,
    random_floor_tile, sq_distance, tiles_by_distance,
)
from mazegen.rng import PMRandom
from mazegen.tiles import Tile, TileType


@pytest.fixture(scope="module")
def maze():
    return generate_maze(MazeParams(size=24, hole_density=0.3), seed=8675309)


def test_floor_tiles_skip_holes_and_walls(maze):
    tiles = floor_tiles(maze)
    assert tiles
    assert all(t.type == TileType.FLOOR for t in tiles)
    assert random_floor_tile(maze, PMRandom(12)) in tiles


def test_no_floor_raises_lookup_error():
    empty = Maze(MazeParams(size=5))
    with pytest.raises(LookupError):
        random_floor_tile(empty, PMRandom(1))


def test_distance_order_and_ties():
    tiles = [Tile(3, 2), Tile(1, 2), Tile(2, 1), Tile(2, 3), Tile(2, 2)]
    ordered = tiles_by_distance(tiles, (2, 2))
    assert [t.pos for t in ordered] == [(2, 2), (2, 1), (1, 2), (3, 2), (2, 3)]
    assert sq_distance(Tile(5, 6), (2, 2)) == 25


def test_bands_partition_floor_by_distance(maze):
    ref = (1, 1)
    near, middle, far = (distance_band(maze, ref, b) for b in BANDS)
    ordered = tiles_by_distance(floor_tiles(maze), ref)
    assert near + middle + far == ordered
    assert len(near) == len(middle) == len(ordered) // 3
    if near and far:
        assert max(sq_distance(t, ref) for t in near) <= min(sq_distance(t, ref) for t in far)
    with pytest.raises(ValueError):
        distance_band(maze, ref, "nowhere")


def test_spawns(maze):
    for seed in (3, 30, 300, 3000):
        s = pick_spawns(maze, PMRandom(seed * 1000003))
        ordered = tiles_by_distance(floor_tiles(maze), s.player.pos)
        n = len(ordered)
        assert s.player.type == TileType.FLOOR
        assert ordered.index(s.monster) >= n // 2
        assert ordered.index(s.pickup) >= n // 4


def test_floor_position():
    assert floor_position(Tile(3, 4)) == (3.0, 0.5, 4.0)
    assert floor_position(Tile(1, 2), block_scale=2.0) == (2.0, 1.0, 4.0)
