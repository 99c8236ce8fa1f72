from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.rng import RNG
from ..maze.directions import Direction
from ..maze.grid import Maze
from ..maze.movement import can_step, valid_directions

logger = logging.getLogger(__name__)


@dataclass
class Enemy:
    """Corridor-walking enemy that occupies whole tiles.

    It keeps walking its heading, turns back at a blocked end, and picks a
    fresh random heading when even turning back is blocked.
    """

    maze: Maze = field(repr=False)
    x: int
    y: int
    rng: RNG = field(repr=False)
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        if self.direction is None:
            self.choose_direction()

    def valid_directions(self) -> List[Direction]:
        return valid_directions(self.maze.tile_at(self.x, self.y))

    def choose_direction(self) -> Optional[Direction]:
        options = self.valid_directions()
        self.direction = self.rng.choice(options) if options else None
        return self.direction

    def can_continue(self) -> bool:
        if self.direction is None:
            return False
        return can_step(self.maze, self.x, self.y, self.direction)

    def step(self) -> bool:
        """Advance one tile along the heading. Returns True if the enemy moved."""
        if self.direction is None:
            self.choose_direction()
            return False
        if self.can_continue():
            dx, dy = self.direction.delta
            self.x += dx
            self.y += dy
            return True
        self.direction = self.direction.opposite
        if not self.can_continue():
            self.choose_direction()
        return False


def spawn_enemies(maze: Maze, count: int, rng: RNG) -> List[Enemy]:
    """Drop up to ``count`` enemies on random navigable tiles (repeats allowed)."""
    candidates = maze.navigable_tiles()
    enemies = []
    for _ in range(min(count, len(candidates))):
        tile = rng.choice(candidates)
        enemies.append(Enemy(maze=maze, x=tile.x, y=tile.y, rng=rng))
    logger.info("Spawned %d enemies", len(enemies))
    return enemies
