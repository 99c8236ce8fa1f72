from .acceptance import AcceptancePolicy, AcceptanceResult, AcceptanceState, MazeAcceptance
from .builder import MazeBuilder, build_maze
from .codes import Shape, TileCode, decode, is_navigable
from .connectivity import can_enter, can_exit
from .directions import Direction
from .grid import Maze, Point
from .movement import can_move_in_direction, can_move_to, can_step
from .placement import Edge, Placement, place_spawn_and_goal
from .tile import Tile

__all__ = [
    "AcceptancePolicy",
    "AcceptanceResult",
    "AcceptanceState",
    "MazeAcceptance",
    "MazeBuilder",
    "build_maze",
    "Shape",
    "TileCode",
    "decode",
    "is_navigable",
    "can_enter",
    "can_exit",
    "Direction",
    "Maze",
    "Point",
    "can_move_in_direction",
    "can_move_to",
    "can_step",
    "Edge",
    "Placement",
    "place_spawn_and_goal",
    "Tile",
]
