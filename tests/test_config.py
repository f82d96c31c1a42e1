import pytest

from mazegen.config import MazeParams
from mazegen.errors import MazeConfigError
from mazegen.mapgen.generator import Maze


def test_defaults_are_valid():
    p = MazeParams()
    assert p.validate() is p
    assert p.as_dict()["size"] == 30


@pytest.mark.parametrize("changes", [
    {"size": 2},
    {"rooms": -1},
    {"room_size_min": 5, "room_size_max": 4},
    {"room_size_min": 0},
    {"path_straightness": -0.5},
    {"hole_density": 1.5},
    {"hole_density": -0.1},
    {"dead_end_reduction": -3},
    {"size": 10.5},
    {"rooms": True},
])
def test_invalid_params_rejected(changes):
    with pytest.raises(MazeConfigError):
        MazeParams().replace(**changes).validate()


def test_zero_room_size_allowed_without_rooms():
    MazeParams(rooms=0, room_size_min=0, room_size_max=0).validate()


def test_maze_validates_before_generating():
    with pytest.raises(MazeConfigError):
        Maze(MazeParams(room_size_min=9, room_size_max=3))
    # config errors are ValueErrors for callers that don't know the taxonomy
    with pytest.raises(ValueError):
        Maze(MazeParams(size=1))
