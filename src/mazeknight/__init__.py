from importlib.metadata import version, PackageNotFoundError

from .maze import Maze, Tile, build_maze, can_move_in_direction, can_move_to, can_step

__all__ = [
    "__version__",
    "Maze",
    "Tile",
    "build_maze",
    "can_move_to",
    "can_move_in_direction",
    "can_step",
]

try:
    __version__ = version("maze-knight")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
