import pytest

from mazegen.clusters import ClusterArena, ClusterConnection
from mazegen.errors import ClusterStateError
from mazegen.grid import Grid
from mazegen.rng import PMRandom
from mazegen.tiles import TileType


def floor(grid, arena, handle, *coords):
    for x, z in coords:
        arena.make_floor(grid.tile(x, z), handle)


def test_make_floor_and_reset_keep_membership_consistent():
    g, arena = Grid.empty(5), ClusterArena()
    h = arena.new()
    t = g.tile(1, 1)
    arena.make_floor(t, h)
    assert t.type == TileType.FLOOR and t.cluster == h
    assert t in arena.members(h)
    arena.reset(t)
    assert t.type == TileType.WALL and t.cluster is None
    assert arena.size(h) == 0


def test_make_floor_moves_tile_between_clusters():
    g, arena = Grid.empty(5), ClusterArena()
    a, b = arena.new(), arena.new()
    t = g.tile(2, 2)
    arena.make_floor(t, a)
    arena.make_floor(t, b)
    assert arena.size(a) == 0 and arena.size(b) == 1
    assert t.cluster == b


def test_convert_moves_tiles_and_redirects():
    g, arena = Grid.empty(6), ClusterArena()
    a, b = arena.new(), arena.new()
    floor(g, arena, a, (1, 1), (2, 1))
    floor(g, arena, b, (4, 4))
    arena.convert(b, a)
    assert g.tile(4, 4).cluster == a
    assert arena.size(a) == 3
    assert arena.find(b) == a
    assert not arena.is_live(b)
    assert arena.live() == [a]
    with pytest.raises(ClusterStateError):
        arena.members(b)
    with pytest.raises(ClusterStateError):
        arena.make_floor(g.tile(3, 3), b)


def test_find_follows_redirect_chains():
    arena = ClusterArena()
    a, b, c = arena.new(), arena.new(), arena.new()
    arena.convert(c, b)
    arena.convert(b, a)
    assert arena.find(c) == a
    assert arena.find(c) == a
    assert arena.find(a) == a


def test_delete_returns_tiles_to_wall():
    g, arena = Grid.empty(5), ClusterArena()
    h = arena.new()
    floor(g, arena, h, (1, 1), (1, 2))
    arena.delete(h)
    assert all(t.type == TileType.WALL and t.cluster is None for t in g.all_tiles())
    with pytest.raises(ClusterStateError, match="deleted"):
        arena.size(h)


def test_biggest_prefers_size_then_lowest_handle():
    g, arena = Grid.empty(6), ClusterArena()
    a, b, c = arena.new(), arena.new(), arena.new()
    floor(g, arena, a, (1, 1))
    floor(g, arena, b, (3, 1), (4, 1))
    floor(g, arena, c, (1, 4), (2, 4))
    assert arena.biggest([a, b, c]) == b
    assert arena.biggest([c, b]) == b
    assert arena.biggest([]) is None


def test_connect_opens_wall_and_merges_pair():
    g, arena = Grid.empty(5), ClusterArena()
    a, b = arena.new(), arena.new()
    floor(g, arena, a, (1, 2))
    floor(g, arena, b, (3, 2))
    wall = g.tile(2, 2)
    opened = ClusterConnection({a, b}, [wall]).connect(arena, PMRandom(1))
    assert opened == wall
    assert wall.type == TileType.FLOOR
    assert {g.tile(x, 2).cluster for x in (1, 2, 3)} == {a}
    assert arena.size(a) == 3


def test_connection_of_already_merged_pair_still_opens_a_wall():
    g, arena = Grid.empty(5), ClusterArena()
    a, b = arena.new(), arena.new()
    floor(g, arena, a, (1, 1), (1, 2), (1, 3))
    floor(g, arena, b, (3, 1), (3, 2), (3, 3))
    first = ClusterConnection({a, b}, [g.tile(2, 1)])
    second = ClusterConnection({a, b}, [g.tile(2, 3)])
    rng = PMRandom(5)
    first.connect(arena, rng)
    assert second.resolve(arena) == {a}
    second.connect(arena, rng)
    assert g.tile(2, 1).type == TileType.FLOOR
    assert g.tile(2, 3).type == TileType.FLOOR
    assert g.tile(2, 2).type == TileType.WALL
    assert arena.live() == [a]
    assert arena.size(a) == 8
