from dataclasses import asdict, dataclass, fields, replace

from .errors import MazeConfigError


@dataclass(frozen=True)
class MazeParams:
    # Side length of the square grid, outer ring included.
    size: int = 30
    rooms: int = 3
    room_size_min: int = 2
    room_size_max: int = 6
    # Primarily controls how many loops the maze ends up with.
    path_length_max: int = 30
    # 1 = every direction equally likely, >1 favours straight corridors.
    path_straightness: float = 1.0
    # Clusters below this size are deleted before connecting.
    cluster_size_min: int = 3
    dead_end_reduction: int = 0
    hole_density: float = 0.0

    def validate(self) -> "MazeParams":
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MazeConfigError(f"{f.name} must be a number, got {value!r}")
            if value < 0:
                raise MazeConfigError(f"{f.name} must be >= 0, got {value}")
        for name in ("size", "rooms", "room_size_min", "room_size_max",
                     "path_length_max", "cluster_size_min", "dead_end_reduction"):
            if not isinstance(getattr(self, name), int):
                raise MazeConfigError(f"{name} must be an integer")
        if self.size < 3:
            raise MazeConfigError(f"size must be >= 3 to leave an interior, got {self.size}")
        if self.room_size_min > self.room_size_max:
            raise MazeConfigError(
                f"room_size_min ({self.room_size_min}) > room_size_max ({self.room_size_max})"
            )
        if self.rooms > 0 and self.room_size_min < 1:
            raise MazeConfigError("room_size_min must be >= 1 when rooms are generated")
        if not 0.0 <= self.hole_density <= 1.0:
            raise MazeConfigError(f"hole_density must be within [0, 1], got {self.hole_density}")
        return self

    def replace(self, **changes) -> "MazeParams":
        return replace(self, **changes)

    def as_dict(self) -> dict:
        return asdict(self)
