from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..maze.directions import Direction
from ..maze.grid import Maze
from ..maze.movement import can_move_to, split_sub, tile_center_sub

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """Player position at sub-cell precision.

    ``sub_x``/``sub_y`` are 1-based global sub-cell coordinates; every tile
    spans three sub-cells per axis.
    """

    maze: Maze = field(repr=False)
    sub_x: int
    sub_y: int
    facing: Direction = Direction.EAST

    @classmethod
    def at_spawn(cls, maze: Maze) -> Optional["Player"]:
        """Place a player on the centre sub-cell of the spawn tile, if there is one."""
        if maze.spawn is None:
            logger.warning("Maze has no spawn tile; cannot place player")
            return None
        sub_x, sub_y = tile_center_sub(maze.spawn.x, maze.spawn.y)
        return cls(maze=maze, sub_x=sub_x, sub_y=sub_y)

    @property
    def tile_pos(self) -> Tuple[int, int]:
        return split_sub(self.sub_x)[0], split_sub(self.sub_y)[0]

    def try_move(self, dx: int, dy: int) -> bool:
        """Attempt a single cardinal sub-cell step.

        Facing follows the requested direction even when the step is blocked.
        Returns True if the player moved.
        """
        direction = Direction.from_delta(dx, dy)
        if direction is None:
            logger.debug("Ignoring non-cardinal player move (%d,%d)", dx, dy)
            return False
        self.facing = direction
        tx, ty = self.sub_x + dx, self.sub_y + dy
        if not can_move_to(self.maze, self.sub_x, self.sub_y, tx, ty):
            return False
        self.sub_x, self.sub_y = tx, ty
        return True

    def move(self, direction: Direction) -> bool:
        return self.try_move(*direction.delta)

    @property
    def at_goal(self) -> bool:
        goal = self.maze.goal
        return goal is not None and self.tile_pos == (goal.x, goal.y)
