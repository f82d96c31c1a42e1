from mazegen.clusters import ClusterArena
from mazegen.grid import Grid
from mazegen.mapgen.rooms import Room, random_room, stamp_room
from mazegen.rng import PMRandom
from mazegen.tiles import Tile, TileType


def test_touches_excludes_outer_diagonal_corners():
    room = Room(2, 2, 2, 2)   # x 2..3, z 2..3
    assert room.bounds == (2, 2, 3, 3)
    assert room.touches(Tile(2, 2))
    assert room.touches(Tile(1, 2))
    assert room.touches(Tile(4, 3))
    assert room.touches(Tile(3, 1))
    assert not room.touches(Tile(1, 1))
    assert not room.touches(Tile(4, 4))
    assert not room.touches(Tile(5, 3))
    assert room.contains(3, 3) and not room.contains(4, 3)


def test_stamp_on_empty_grid_makes_one_cluster():
    g, arena = Grid.empty(8), ClusterArena()
    h = stamp_room(g, arena, Room(2, 2, 3, 2))
    floors = list(g.all_tiles(TileType.FLOOR))
    assert len(floors) == 6
    assert {t.cluster for t in floors} == {h}
    assert arena.size(h) == 6


def test_stamp_keeps_existing_holes():
    g, arena = Grid.empty(8), ClusterArena()
    h0 = arena.new()
    hole = g.tile(3, 3)
    arena.make_floor(hole, h0)
    hole.type = TileType.HOLE
    h = stamp_room(g, arena, Room(2, 2, 3, 3))
    assert h == h0
    assert hole.type == TileType.HOLE
    assert hole.cluster == h0
    assert arena.size(h0) == 9


def test_stamp_merges_orthogonal_neighbours_into_biggest():
    g, arena = Grid.empty(10), ClusterArena()
    a, b, c = arena.new(), arena.new(), arena.new()
    arena.make_floor(g.tile(1, 3), a)
    arena.make_floor(g.tile(2, 3), a)      # left of the room
    arena.make_floor(g.tile(5, 5), b)      # diagonal corner only
    arena.make_floor(g.tile(4, 5), c)      # below the room
    h = stamp_room(g, arena, Room(3, 3, 2, 2))
    assert h == a
    assert arena.size(a) == 7
    assert g.tile(4, 5).cluster == a
    assert arena.find(c) == a
    assert arena.is_live(b) and g.tile(5, 5).cluster == b


def test_random_rooms_keep_a_wall_margin():
    g = Grid.empty(12)
    for seed in range(1, 60):
        room = random_room(g, PMRandom(seed * 7919), 2, 6)
        x0, z0, x1, z1 = room.bounds
        assert 2 <= room.width <= 6 and 2 <= room.length <= 6
        assert x0 >= 1 and z0 >= 1
        assert x1 <= g.size - 2 and z1 <= g.size - 2


def test_random_room_clamped_to_tiny_grid():
    room = random_room(Grid.empty(3), PMRandom(3), 2, 6)
    assert room == Room(1, 1, 1, 1)
