from __future__ import annotations

from typing import AbstractSet, Dict, FrozenSet

from .codes import TileCode, is_navigable
from .directions import CARDINALS, Direction

TC = TileCode

# Codes that open toward each side. Kept as a direct table over raw codes so the
# whole-tile check used by enemies never has to build a collision grid; the
# sub-cell grids in collision.py must agree with it (see tests).
EXIT_CODES: Dict[Direction, FrozenSet[int]] = {
    Direction.NORTH: frozenset({
        TC.NORTH_SOUTH_CORRIDOR,
        TC.NORTH_EAST_CORRIDOR,
        TC.NORTH_WEST_CORRIDOR,
        TC.NORTH_T_CORRIDOR,
        TC.EAST_T_CORRIDOR,
        TC.WEST_T_CORRIDOR,
        TC.NORMAL_X_CORRIDOR,
        TC.SPECIAL_X_CORRIDOR,
        TC.NORTH_DEAD_END,
    }),
    Direction.SOUTH: frozenset({
        TC.NORTH_SOUTH_CORRIDOR,
        TC.SOUTH_EAST_CORRIDOR,
        TC.SOUTH_WEST_CORRIDOR,
        TC.SOUTH_T_CORRIDOR,
        TC.EAST_T_CORRIDOR,
        TC.WEST_T_CORRIDOR,
        TC.NORMAL_X_CORRIDOR,
        TC.SPECIAL_X_CORRIDOR,
        TC.SOUTH_DEAD_END,
    }),
    Direction.EAST: frozenset({
        TC.WEST_EAST_CORRIDOR,
        TC.NORTH_EAST_CORRIDOR,
        TC.SOUTH_EAST_CORRIDOR,
        TC.NORTH_T_CORRIDOR,
        TC.EAST_T_CORRIDOR,
        TC.SOUTH_T_CORRIDOR,
        TC.NORMAL_X_CORRIDOR,
        TC.SPECIAL_X_CORRIDOR,
        TC.EAST_DEAD_END,
    }),
    Direction.WEST: frozenset({
        TC.WEST_EAST_CORRIDOR,
        TC.NORTH_WEST_CORRIDOR,
        TC.SOUTH_WEST_CORRIDOR,
        TC.NORTH_T_CORRIDOR,
        TC.SOUTH_T_CORRIDOR,
        TC.WEST_T_CORRIDOR,
        TC.NORMAL_X_CORRIDOR,
        TC.SPECIAL_X_CORRIDOR,
        TC.WEST_DEAD_END,
    }),
}


def can_exit(code: int, direction: Direction) -> bool:
    """True if a tile with ``code`` opens toward ``direction``."""
    if not is_navigable(code):
        return False
    return code in EXIT_CODES[direction]


def can_enter(code: int, from_direction: Direction) -> bool:
    """True if a tile can be entered through its ``from_direction`` side.

    Entering through a side needs the same opening as leaving through it.
    """
    return can_exit(code, from_direction)


def openings(code: int) -> FrozenSet[Direction]:
    return frozenset(d for d in CARDINALS if can_exit(code, d))


_CODE_BY_OPENINGS: Dict[FrozenSet[Direction], TileCode] = {
    openings(code): code
    for code in TileCode
    if code not in (TileCode.EMPTY, TileCode.SPECIAL_X_CORRIDOR)
}


def code_for_openings(directions: AbstractSet[Direction]) -> TileCode:
    """Inverse of openings(); an empty set (or none at all) maps to TileCode.EMPTY."""
    return _CODE_BY_OPENINGS.get(frozenset(directions), TileCode.EMPTY)
