from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """Compass directions on the maze grid.

    Grid y grows southward, so NORTH is a step of -1 in y.
    """

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Optional["Direction"]:
        """Return the direction of a single cardinal unit step, or None."""
        for direction, step in _DELTAS.items():
            if step == (dx, dy):
                return direction
        return None


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

# Fixed probe order used wherever directions are enumerated.
CARDINALS: Tuple[Direction, ...] = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
