"""
Cluster bookkeeping.

Every open tile belongs to exactly one cluster, addressed by an integer
handle into a `ClusterArena`. Merging moves the members of one cluster into
another and leaves a redirect behind, so stale handles held elsewhere (for
example by a pending `ClusterConnection`) can be resolved with `find()`.
A converted or deleted cluster keeps no members; reading them is an error.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from .errors import ClusterStateError
from .tiles import Tile, TileType


class ClusterArena:
    def __init__(self):
        self._members: List[Optional[Set[Tile]]] = []
        self._redirect: List[int] = []
        self._deleted: Set[int] = set()

    def __len__(self) -> int:
        return len(self._members)

    def new(self) -> int:
        handle = len(self._members)
        self._members.append(set())
        self._redirect.append(handle)
        return handle

    def find(self, handle: int) -> int:
        root = handle
        while self._redirect[root] != root:
            root = self._redirect[root]
        # compress the chain we just walked
        while self._redirect[handle] != root:
            self._redirect[handle], handle = root, self._redirect[handle]
        return root

    def is_live(self, handle: int) -> bool:
        return self._members[handle] is not None

    def live(self) -> List[int]:
        return [h for h, m in enumerate(self._members) if m]

    def members(self, handle: int) -> Set[Tile]:
        m = self._members[handle]
        if m is None:
            state = "deleted" if handle in self._deleted else f"converted to {self.find(handle)}"
            raise ClusterStateError(f"cluster {handle} is {state}")
        return m

    def size(self, handle: int) -> int:
        return len(self.members(handle))

    # ---------- tile mutations ----------

    def make_floor(self, tile: Tile, handle: int) -> None:
        members = self.members(handle)
        if self._redirect[handle] != handle:
            raise ClusterStateError(f"cluster {handle} is not a root")
        if tile.cluster is not None and tile.cluster != handle:
            self.members(tile.cluster).discard(tile)
        tile.type = TileType.FLOOR
        tile.cluster = handle
        members.add(tile)

    def reset(self, tile: Tile) -> None:
        if tile.cluster is not None:
            self.members(tile.cluster).discard(tile)
        tile.type = TileType.WALL
        tile.cluster = None

    # ---------- cluster mutations ----------

    def convert(self, handle: int, target: int) -> None:
        """Move every tile of `handle` into `target`; `handle` becomes a redirect."""
        if handle == target:
            return
        src = self.members(handle)
        dst = self.members(target)
        for tile in src:
            tile.cluster = target
        dst.update(src)
        self._members[handle] = None
        self._redirect[handle] = target

    def delete(self, handle: int) -> None:
        """Turn every tile of the cluster back into wall and retire the handle."""
        for tile in self.members(handle):
            tile.type = TileType.WALL
            tile.cluster = None
        self._members[handle] = None
        self._deleted.add(handle)

    def biggest(self, handles: Iterable[int]) -> Optional[int]:
        # Most tiles wins; ties go to the lowest (oldest) handle.
        best = None
        for h in sorted(set(handles)):
            if best is None or self.size(h) > self.size(best):
                best = h
        return best


@dataclass
class ClusterConnection:
    """A pair of clusters separated by single wall tiles, and those walls."""
    clusters: Set[int]
    tiles: List[Tile] = field(default_factory=list)

    def resolve(self, arena: ClusterArena) -> Set[int]:
        self.clusters = {arena.find(h) for h in self.clusters}
        return self.clusters

    def connect(self, arena: ClusterArena, rng) -> Tile:
        """
        Open one random candidate wall and merge everything it joins into the
        biggest cluster. A wall is opened even when the pair is already merged,
        so the number of openings depends only on the initial cluster layout.
        """
        clusters = self.resolve(arena)
        tile = self.tiles[rng.randrange(0, len(self.tiles))]
        if tile.cluster is not None:
            # opened by an earlier connection; whatever it already joined merges too
            clusters.add(arena.find(tile.cluster))
        target = arena.biggest(clusters)
        arena.make_floor(tile, target)
        for h in sorted(clusters):
            if h != target:
                arena.convert(h, target)
        self.clusters = {target}
        return tile
