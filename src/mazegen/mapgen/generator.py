# src/mazegen/mapgen/generator.py
"""
Maze orchestrator.

Fixed pipeline:
    allocate grid -> rooms -> paths until saturation -> prune small clusters
    -> connect all clusters -> prune leftovers -> shrink dead ends -> holes

Clusters are merged through `mazegen.clusters.ClusterArena`; a tile's
`cluster` field always holds a live root handle. Connectivity is only a
post-condition of the connection phase, not something kept during carving.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..clusters import ClusterArena, ClusterConnection
from ..config import MazeParams
from ..grid import Grid
from ..rng import PMRandom, seed_for_level
from ..tiles import Tile, TileType
from .carve import MazePath, generate_paths
from .rooms import Room, generate_room

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    rooms: int = 0
    paths: int = 0
    path_tiles: int = 0
    small_clusters_removed: int = 0
    connections: int = 0
    unconnected_clusters_removed: int = 0
    dead_end_tiles_removed: int = 0
    holes: int = 0
    phase_ms: Dict[str, float] = field(default_factory=dict)


class Maze:
    def __init__(self, params: Optional[MazeParams] = None, rng=None):
        self.params = (params or MazeParams()).validate()
        self.rng = rng if rng is not None else PMRandom(time.time_ns())
        self.grid = Grid.empty(self.params.size)
        self.arena = ClusterArena()
        self.rooms: List[Room] = []
        self.paths: List[MazePath] = []
        self.stats = GenerationStats()

    # ---------- pipeline ----------

    def generate(self) -> "Maze":
        p = self.params
        logger.info("Generating maze %dx%d (%d rooms, paths <= %d tiles)",
                    p.size, p.size, p.rooms, p.path_length_max)
        self._phase("rooms", self.generate_rooms)
        self._phase("paths", self.generate_paths)
        self._phase("remove_small_clusters", self.remove_small_clusters)
        self._phase("connect_clusters", self.connect_clusters)
        self._phase("remove_unconnected_clusters", self.remove_unconnected_clusters)
        self._phase("reduce_dead_ends", self.reduce_dead_ends)
        self._phase("generate_holes", self.generate_holes)
        s = self.stats
        logger.info("Maze done: %d rooms, %d paths, %d connections, %d holes, %d open tiles",
                    s.rooms, s.paths, s.connections, s.holes, self.open_tile_count())
        logger.debug("Generated maze:\n%s", self.grid.as_text())
        return self

    def _phase(self, label: str, fn) -> None:
        start = time.perf_counter()
        fn()
        self.stats.phase_ms[label] = (time.perf_counter() - start) * 1000.0

    def generate_rooms(self) -> List[Room]:
        p = self.params
        for _ in range(p.rooms):
            self.rooms.append(generate_room(self.grid, self.arena, self.rng, p.room_size_min, p.room_size_max))
        self.stats.rooms = len(self.rooms)
        logger.debug("rooms: %s", [r.bounds for r in self.rooms])
        return self.rooms

    def generate_paths(self) -> List[MazePath]:
        p = self.params
        self.paths = generate_paths(self.grid, self.arena, self.rng, p.path_length_max, p.path_straightness)
        self.stats.paths = len(self.paths)
        self.stats.path_tiles = sum(len(path.tiles) for path in self.paths)
        logger.debug("paths: %d carved, %d tiles", self.stats.paths, self.stats.path_tiles)
        return self.paths

    def remove_small_clusters(self) -> int:
        if self.params.cluster_size_min < 2:
            return 0
        removed = 0
        for h in sorted(self.clusters()):
            if self.arena.size(h) < self.params.cluster_size_min:
                self.arena.delete(h)
                removed += 1
        self.stats.small_clusters_removed = removed
        logger.debug("small clusters removed: %d", removed)
        return removed

    def find_connections(self) -> List[ClusterConnection]:
        """
        One connection per unordered pair of clusters that share a separating
        wall; each connection collects every wall able to join its pair.
        Three or more clusters around one wall yield every pair among them.
        """
        by_pair: Dict[Tuple[int, int], ClusterConnection] = {}
        for wall in self.grid.inner_tiles(TileType.WALL):
            around = sorted(self.surrounding_clusters(wall))
            if len(around) < 2:
                continue
            for pair in combinations(around, 2):
                conn = by_pair.get(pair)
                if conn is None:
                    conn = by_pair[pair] = ClusterConnection(set(pair))
                conn.tiles.append(wall)
        return list(by_pair.values())

    def connect_clusters(self) -> int:
        connections = self.find_connections()
        for conn in connections:
            conn.connect(self.arena, self.rng)
        self.stats.connections = len(connections)
        logger.debug("connections made: %d", len(connections))
        return len(connections)

    def remove_unconnected_clusters(self) -> int:
        """Keep only the biggest cluster; e.g. a room walled in two tiles away from everything."""
        clusters = self.clusters()
        keep = self.arena.biggest(clusters)
        removed = 0
        for h in sorted(clusters):
            if h != keep:
                self.arena.delete(h)
                removed += 1
        self.stats.unconnected_clusters_removed = removed
        if removed:
            logger.debug("unconnected clusters removed: %d", removed)
        return removed

    def reduce_dead_ends(self) -> int:
        """
        Each round turns every current dead end back into wall at once, so all
        dead ends shrink in lockstep. Loops and corridors open at both ends stay.
        """
        total = 0
        for _ in range(self.params.dead_end_reduction):
            dead_ends = self.dead_ends()
            if not dead_ends:
                break
            for t in dead_ends:
                self.arena.reset(t)
            total += len(dead_ends)
        self.stats.dead_end_tiles_removed = total
        logger.debug("dead end tiles removed: %d", total)
        return total

    def generate_holes(self) -> int:
        """
        Visit floor tiles in row-major order; with probability hole_density a
        dead end or open corner becomes a hole. Tiles are classified against
        the grid as it stands, including holes made earlier in the pass.
        """
        density = self.params.hole_density
        holes = 0
        if density == 0:
            return 0
        for t in list(self.grid.inner_tiles(TileType.FLOOR)):
            roll = self.rng.uniform(0.0, 1.0)
            if roll <= density and (self.grid.is_dead_end(t) or self.grid.is_open_corner(t)):
                t.type = TileType.HOLE
                holes += 1
        self.stats.holes = holes
        logger.debug("holes: %d", holes)
        return holes

    # ---------- queries ----------

    @property
    def size(self) -> int:
        return self.grid.size

    def tile(self, x: int, z: int) -> Tile:
        return self.grid.tile(x, z)

    def tile_type(self, x: int, z: int) -> TileType:
        return self.grid.tile(x, z).type

    def all_tiles(self, tile_type: Optional[TileType] = None) -> Iterator[Tile]:
        return self.grid.all_tiles(tile_type)

    def inner_tiles(self, tile_type: Optional[TileType] = None) -> Iterator[Tile]:
        return self.grid.inner_tiles(tile_type)

    def clusters(self) -> Set[int]:
        return {t.cluster for t in self.grid.inner_tiles() if t.cluster is not None}

    def surrounding_clusters(self, tile: Tile) -> Set[int]:
        return {n.cluster for n in self.grid.neighbors(tile) if n.cluster is not None}

    def dead_ends(self) -> List[Tile]:
        return [t for t in self.grid.inner_tiles() if self.grid.is_dead_end(t)]

    def open_tile_count(self) -> int:
        return sum(1 for t in self.grid.inner_tiles() if t.type != TileType.WALL)

    def as_matrix(self) -> List[List[int]]:
        return self.grid.as_matrix()


def generate_maze(params: Optional[MazeParams] = None, seed: Optional[int] = None, rng=None) -> Maze:
    if rng is None and seed is not None:
        rng = PMRandom(seed)
    return Maze(params, rng).generate()


def generate_level(base_seed: int, level: int, params: Optional[MazeParams] = None) -> Maze:
    """Maze for a 1-based level of a run started from `base_seed`."""
    return generate_maze(params, seed=seed_for_level(base_seed, level))


def generate_grid(base_seed: int, level: int, params: Optional[MazeParams] = None) -> List[List[int]]:
    return generate_level(base_seed, level, params).as_matrix()
