class MazeError(Exception):
    """Base exception for the maze generator."""


class MazeConfigError(MazeError, ValueError):
    """Raised before generation when the parameters cannot produce a maze."""


class ClusterStateError(MazeError, RuntimeError):
    """Raised when a converted or deleted cluster is used as if it were live."""
