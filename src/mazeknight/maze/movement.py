from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .collision import GRID_SIZE
from .connectivity import can_enter, can_exit
from .directions import CARDINALS, Direction
from .grid import Maze
from .tile import Tile

logger = logging.getLogger(__name__)


def split_sub(sub: int) -> Tuple[int, int]:
    """Split a 1-based global sub-cell coordinate into (tile, local).

    The tile index is 1-based; the local index is 0-based within the tile's
    3x3 collision grid.
    """
    return (sub - 1) // GRID_SIZE + 1, (sub - 1) % GRID_SIZE


def tile_center_sub(x: int, y: int) -> Tuple[int, int]:
    """Global sub-cell coordinates of the centre of tile (x, y)."""
    return (x - 1) * GRID_SIZE + 2, (y - 1) * GRID_SIZE + 2


# ---- Sub-cell precision (player) ----------------------------------------
def can_move_to(maze: Maze, from_sub_x: int, from_sub_y: int, to_sub_x: int, to_sub_y: int) -> bool:
    """Can an agent step from one sub-cell to an orthogonally adjacent one?

    Coordinates are 1-based global sub-cells (``1..3*width`` by ``1..3*height``).
    Only single cardinal steps between open sub-cells are valid. Crossing into another tile needs the
    source sub-cell to sit on the edge it leaves through and the target
    sub-cell to sit on the edge it enters through, both walkable. Never raises.
    """
    direction = Direction.from_delta(to_sub_x - from_sub_x, to_sub_y - from_sub_y)
    if direction is None:
        logger.debug(
            "Rejected non-cardinal move (%d,%d) -> (%d,%d)", from_sub_x, from_sub_y, to_sub_x, to_sub_y
        )
        return False

    to_tx, to_lx = split_sub(to_sub_x)
    to_ty, to_ly = split_sub(to_sub_y)
    target = maze.tile_at(to_tx, to_ty)
    if target is None:
        logger.debug("Rejected move: target tile (%d,%d) out of bounds", to_tx, to_ty)
        return False

    from_tx, from_lx = split_sub(from_sub_x)
    from_ty, from_ly = split_sub(from_sub_y)
    source = maze.tile_at(from_tx, from_ty)
    if source is None:
        logger.debug("Rejected move: source tile (%d,%d) out of bounds", from_tx, from_ty)
        return False
    if source is target:
        # Moves inside a tile only ever start from an open sub-cell.
        return source.is_walkable(from_lx, from_ly) and target.is_walkable(to_lx, to_ly)
    if not source.can_exit_from(from_lx, from_ly, direction):
        logger.debug(
            "Cannot exit tile (%d,%d) code=%d towards %s", from_tx, from_ty, source.code, direction.value
        )
        return False
    if not target.can_enter_from(to_lx, to_ly, direction.opposite):
        logger.debug(
            "Cannot enter tile (%d,%d) code=%d from %s", to_tx, to_ty, target.code, direction.opposite.value
        )
        return False
    return True


# ---- Tile precision (enemies) -------------------------------------------
def can_move_in_direction(tile: Optional[Tile], direction: Direction) -> bool:
    if tile is None or not tile.is_navigable:
        return False
    return can_exit(tile.code, direction)


def valid_directions(tile: Optional[Tile]) -> List[Direction]:
    return [d for d in CARDINALS if can_move_in_direction(tile, d)]


def can_step(maze: Maze, x: int, y: int, direction: Direction) -> bool:
    """Full whole-tile step: leave (x, y) toward ``direction`` and enter its neighbour."""
    if not can_move_in_direction(maze.tile_at(x, y), direction):
        return False
    dx, dy = direction.delta
    target = maze.tile_at(x + dx, y + dy)
    if target is None or not target.is_navigable:
        return False
    return can_enter(target.code, direction.opposite)
