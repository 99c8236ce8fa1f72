from __future__ import annotations

from typing import Dict, List, Tuple

from .codes import Shape

# Row-major 3x3 walkability grid: rows run north to south, columns west to east.
Grid = Tuple[Tuple[bool, ...], ...]

GRID_SIZE = 3


def _grid(*rows: str) -> Grid:
    return tuple(tuple(ch == "1" for ch in row) for row in rows)


# Canonical (rotation 0) grids. Every shape opens to the north at rotation 0.
CANONICAL_GRIDS: Dict[Shape, Grid] = {
    Shape.DEAD_END: _grid(
        "010",
        "010",
        "000",
    ),
    Shape.STRAIGHT: _grid(
        "010",
        "010",
        "010",
    ),
    Shape.CORNER: _grid(
        "010",
        "011",
        "000",
    ),
    Shape.T_JUNCTION: _grid(
        "010",
        "111",
        "000",
    ),
    Shape.CROSSROAD: _grid(
        "010",
        "111",
        "010",
    ),
    Shape.EMPTY: _grid(
        "000",
        "000",
        "000",
    ),
}


def rotate_grid(grid: Grid) -> Grid:
    """Rotate a 3x3 grid 90 degrees clockwise: ``out[c][2 - r] = grid[r][c]``."""
    last = GRID_SIZE - 1
    out: List[List[bool]] = [[False] * GRID_SIZE for _ in range(GRID_SIZE)]
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            out[c][last - r] = grid[r][c]
    return tuple(tuple(row) for row in out)


def collision_grid(shape: Shape, rotation: int) -> Grid:
    """Canonical grid for ``shape`` turned clockwise ``rotation`` quarter turns."""
    grid = CANONICAL_GRIDS.get(shape, CANONICAL_GRIDS[Shape.EMPTY])
    for _ in range(rotation % 4):
        grid = rotate_grid(grid)
    return grid


def is_walkable(grid: Grid, sub_x: int, sub_y: int) -> bool:
    if not (0 <= sub_x < GRID_SIZE and 0 <= sub_y < GRID_SIZE):
        return False
    return grid[sub_y][sub_x]


def format_grid(grid: Grid) -> List[str]:
    """Debug rendering: '.' for open sub-cells, '#' for walls."""
    return ["".join("." if cell else "#" for cell in row) for row in grid]
