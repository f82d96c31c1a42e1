# src/mazegen/mapgen/carve.py
# Corridor carving: non-looping paths grown from isolated wall pockets.

from typing import List, Optional

from ..clusters import ClusterArena
from ..grid import Grid, direction
from ..tiles import Tile


def find_wall_area(grid: Grid, rng) -> Optional[Tile]:
    """
    Find a wall pocket (see Grid.is_wall_area). The scan starts at a random
    coordinate, runs forward in row-major order to the end of the grid, then
    backward from the start; None means the grid is saturated.
    """
    n = grid.size
    start_x = rng.randrange(1, n)
    start_z = rng.randrange(1, n)
    start = start_z * n + start_x
    cells = n * n
    for i in range(start, cells):
        t = grid.rows[i // n][i % n]
        if grid.is_wall_area(t):
            return t
    for i in range(start, -1, -1):
        t = grid.rows[i // n][i % n]
        if grid.is_wall_area(t):
            return t
    return None


def extension_candidates(grid: Grid, tile: Tile) -> List[Tile]:
    return [n for n in grid.neighbors(tile) if grid.is_wall_area_ahead(tile, n)]


def choose_extension(grid: Grid, rng, tile: Tile, previous: Optional[Tile], straightness: float) -> Optional[Tile]:
    """
    Choose the next corridor tile. With a previous tile and straightness != 1
    the candidate continuing the current heading weighs `straightness`, every
    other candidate weighs 1.
    """
    found = extension_candidates(grid, tile)
    if not found:
        return None
    if previous is None or straightness == 1:
        return rng.choice(found)

    heading = direction(previous, tile)
    straight = next((c for c in found if direction(tile, c) == heading), None)
    if straight is None:
        return rng.choice(found)
    others = [c for c in found if c is not straight]
    roll = rng.uniform(0.0, len(others) + straightness)
    if others and roll > straightness:
        return rng.choice(others)
    return straight


class MazePath:
    """One corridor. `tiles` is the carve order; the first tile seeded the path."""

    def __init__(self, grid: Grid, arena: ClusterArena):
        self.grid = grid
        self.arena = arena
        self.tiles: List[Tile] = []
        # tiles with no room left next to them
        self.exhausted: List[Tile] = []
        self.cluster: Optional[int] = None

    def generate(self, rng, length_max: int, straightness: float = 1.0) -> bool:
        """
        Grow the corridor until it reaches `length_max` tiles or no tile of it
        can be extended any further. Returns False only when the grid holds no
        wall pocket to start from.
        """
        current = find_wall_area(self.grid, rng)
        if current is None:
            return False
        self.cluster = self.arena.new()
        # tiles of this path that may still have room next to them, used as a FIFO
        usable: List[Tile] = []
        previous: Optional[Tile] = None

        while True:
            self.arena.make_floor(current, self.cluster)
            self.tiles.append(current)
            if len(self.tiles) >= length_max:
                return True
            nxt = None
            while nxt is None:
                nxt = choose_extension(self.grid, rng, current, previous, straightness)
                if nxt is None:
                    # heading only means something between neighbouring tiles
                    previous = None
                    self.exhausted.append(current)
                    if current in usable:
                        usable.remove(current)
                    if not usable:
                        return True
                    current = usable[0]
            if current not in usable:
                usable.append(current)
            previous = current
            current = nxt


def generate_paths(grid: Grid, arena: ClusterArena, rng, length_max: int, straightness: float = 1.0) -> List[MazePath]:
    """Carve paths until no wall pocket is left."""
    paths = []
    while True:
        path = MazePath(grid, arena)
        if not path.generate(rng, length_max, straightness):
            return paths
        paths.append(path)
