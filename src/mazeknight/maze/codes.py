from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, NamedTuple


class TileCode(IntEnum):
    """Tile codes emitted by the maze generator.

    Each navigable code is a single bit; 0 is the empty cell. SPECIAL_X_CORRIDOR
    links layers in a multi-layer maze and behaves as NORMAL_X_CORRIDOR in a
    single-layer one.
    """

    EMPTY = 0
    NORTH_EAST_CORRIDOR = 1 << 0
    SOUTH_EAST_CORRIDOR = 1 << 1
    SOUTH_WEST_CORRIDOR = 1 << 2
    NORTH_WEST_CORRIDOR = 1 << 3
    NORTH_SOUTH_CORRIDOR = 1 << 4
    WEST_EAST_CORRIDOR = 1 << 5
    NORTH_T_CORRIDOR = 1 << 6
    EAST_T_CORRIDOR = 1 << 7
    SOUTH_T_CORRIDOR = 1 << 8
    WEST_T_CORRIDOR = 1 << 9
    NORMAL_X_CORRIDOR = 1 << 10
    SPECIAL_X_CORRIDOR = 1 << 11
    NORTH_DEAD_END = 1 << 12
    EAST_DEAD_END = 1 << 13
    SOUTH_DEAD_END = 1 << 14
    WEST_DEAD_END = 1 << 15


class Shape(Enum):
    DEAD_END = "dead_end"
    STRAIGHT = "straight"
    CORNER = "corner"
    T_JUNCTION = "t_junction"
    CROSSROAD = "crossroad"
    EMPTY = "empty"


class Decoded(NamedTuple):
    shape: Shape
    rotation: int


_CATALOG: Dict[int, Decoded] = {
    TileCode.NORTH_EAST_CORRIDOR: Decoded(Shape.CORNER, 0),
    TileCode.SOUTH_EAST_CORRIDOR: Decoded(Shape.CORNER, 1),
    TileCode.SOUTH_WEST_CORRIDOR: Decoded(Shape.CORNER, 2),
    TileCode.NORTH_WEST_CORRIDOR: Decoded(Shape.CORNER, 3),
    TileCode.NORTH_SOUTH_CORRIDOR: Decoded(Shape.STRAIGHT, 0),
    TileCode.WEST_EAST_CORRIDOR: Decoded(Shape.STRAIGHT, 1),
    TileCode.NORTH_T_CORRIDOR: Decoded(Shape.T_JUNCTION, 0),
    TileCode.EAST_T_CORRIDOR: Decoded(Shape.T_JUNCTION, 1),
    TileCode.SOUTH_T_CORRIDOR: Decoded(Shape.T_JUNCTION, 2),
    TileCode.WEST_T_CORRIDOR: Decoded(Shape.T_JUNCTION, 3),
    TileCode.NORMAL_X_CORRIDOR: Decoded(Shape.CROSSROAD, 0),
    TileCode.SPECIAL_X_CORRIDOR: Decoded(Shape.CROSSROAD, 0),
    TileCode.NORTH_DEAD_END: Decoded(Shape.DEAD_END, 0),
    TileCode.EAST_DEAD_END: Decoded(Shape.DEAD_END, 1),
    TileCode.SOUTH_DEAD_END: Decoded(Shape.DEAD_END, 2),
    TileCode.WEST_DEAD_END: Decoded(Shape.DEAD_END, 3),
}

_EMPTY = Decoded(Shape.EMPTY, 0)


def decode(code: int) -> Decoded:
    """Map a raw tile code to its (shape, rotation).

    Total over every integer: anything outside the catalog, including 0, is
    ``(Shape.EMPTY, 0)``.
    """
    return _CATALOG.get(code, _EMPTY)


def is_navigable(code: int) -> bool:
    return decode(code).shape is not Shape.EMPTY


def to_tile_code(code: int) -> TileCode:
    """Closed-enum view of a raw code; unknown values become TileCode.EMPTY."""
    if code in _CATALOG:
        return TileCode(code)
    return TileCode.EMPTY
