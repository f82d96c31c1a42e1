from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .tiles import STEPS, TEXT_CHARS, Direction, Tile, TileType, is_open


@dataclass
class Grid:
    """
    Square tile array addressed as rows[z][x]. All tiles are created once as
    walls and mutated in place afterwards; the outer ring is never opened.
    """
    rows: List[List[Tile]]

    @classmethod
    def empty(cls, size: int) -> "Grid":
        return cls(rows=[[Tile(x, z) for x in range(size)] for z in range(size)])

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "Grid":
        # Types only: no cluster handles are assigned.
        g = cls.empty(len(matrix))
        for z, row in enumerate(matrix):
            if len(row) != g.size:
                raise ValueError(f"row {z} has {len(row)} columns, expected {g.size}")
            for x, v in enumerate(row):
                g.rows[z][x].type = TileType(v)
        return g

    @property
    def size(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.size and 0 <= z < self.size

    def tile(self, x: int, z: int) -> Tile:
        if not self.in_bounds(x, z):
            raise IndexError(f"tile ({x}, {z}) outside {self.size}x{self.size} grid")
        return self.rows[z][x]

    # ---------- enumeration ----------

    def all_tiles(self, tile_type: Optional[TileType] = None) -> Iterator[Tile]:
        for row in self.rows:
            for t in row:
                if tile_type is None or t.type == tile_type:
                    yield t

    def inner_tiles(self, tile_type: Optional[TileType] = None) -> Iterator[Tile]:
        for z in range(1, self.size - 1):
            for x in range(1, self.size - 1):
                t = self.rows[z][x]
                if tile_type is None or t.type == tile_type:
                    yield t

    # ---------- geometry ----------

    def neighbors(self, tile: Tile) -> List[Tile]:
        # Fixed order: left, right, up, down. Diagonals are never adjacent.
        out = []
        for dx, dz in (STEPS[Direction.LEFT], STEPS[Direction.RIGHT],
                       STEPS[Direction.UP], STEPS[Direction.DOWN]):
            nx, nz = tile.x + dx, tile.z + dz
            if self.in_bounds(nx, nz):
                out.append(self.rows[nz][nx])
        return out

    def is_edge(self, tile: Tile) -> bool:
        last = self.size - 1
        return tile.x in (0, last) or tile.z in (0, last)

    def tile_in_direction(self, tile: Tile, direction: Direction) -> Optional[Tile]:
        if direction == Direction.NONE:
            return None
        dx, dz = STEPS[direction]
        nx, nz = tile.x + dx, tile.z + dz
        return self.rows[nz][nx] if self.in_bounds(nx, nz) else None

    def is_wall_area(self, tile: Tile) -> bool:
        """Tile and all of its neighbours are walls: a pocket untouched by any structure."""
        if self.is_edge(tile) or tile.type != TileType.WALL:
            return False
        return all(n.type == TileType.WALL for n in self.neighbors(tile))

    def is_wall_area_ahead(self, base: Tile, candidate: Tile) -> bool:
        """Candidate may extend a corridor from `base`: it touches nothing else that is open."""
        if self.is_edge(candidate) or candidate.type != TileType.WALL:
            return False
        return all(n.type == TileType.WALL for n in self.neighbors(candidate) if n != base)

    def is_dead_end(self, tile: Tile) -> bool:
        if tile.type == TileType.WALL:
            return False
        return sum(1 for n in self.neighbors(tile) if is_open(n.type)) <= 1

    def is_open_corner(self, tile: Tile) -> bool:
        """
        Floor tile sitting in a corner of an open area:

            - W -     - W -     F F -     - F F
            W F F     F F W     F F W     W F F
            - F F     F F -     - W -     - W -

        Holes count as walls here, so two diagonal corner holes can never
        cut a corridor in two.
        """
        if tile.type != TileType.FLOOR or self.is_edge(tile):
            return False
        away: List[Direction] = []
        for n in self.neighbors(tile):
            if n.type != TileType.WALL:
                continue
            d = direction(n, tile)
            opposite = self.tile_in_direction(tile, d)
            if opposite is None or opposite.type != TileType.FLOOR:
                return False
            away.append(d)
        if len(away) != 2:
            return False
        diagonal: Optional[Tile] = tile
        for d in away:
            diagonal = self.tile_in_direction(diagonal, d)
            if diagonal is None:
                return False
        return diagonal.type == TileType.FLOOR

    # ---------- output ----------

    def as_matrix(self) -> List[List[int]]:
        return [[int(t.type) for t in row] for row in self.rows]

    def as_text(self) -> str:
        return "\n".join("".join(TEXT_CHARS[t.type] for t in row) for row in self.rows)


def direction(from_tile: Tile, to_tile: Tile) -> Direction:
    """
    Primary axis of travel from one tile to another. When |dx| == |dz| the
    vertical axis wins.
    """
    dx = to_tile.x - from_tile.x
    dz = to_tile.z - from_tile.z
    if dx == 0 and dz == 0:
        return Direction.NONE
    if abs(dx) > abs(dz):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dz > 0 else Direction.UP
