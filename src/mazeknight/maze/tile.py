from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .codes import Shape, TileCode, decode, to_tile_code
from .collision import GRID_SIZE, Grid, collision_grid, format_grid, is_walkable
from .directions import Direction


def _on_edge(sub_x: int, sub_y: int, direction: Direction) -> bool:
    last = GRID_SIZE - 1
    if direction is Direction.NORTH:
        return sub_y == 0
    if direction is Direction.SOUTH:
        return sub_y == last
    if direction is Direction.EAST:
        return sub_x == last
    return sub_x == 0


@dataclass
class Tile:
    """One maze cell with its rotated 3x3 collision grid.

    ``x``/``y`` are 1-based grid coordinates. Shape, rotation and the collision
    grid are derived from ``code`` at construction and never change afterwards;
    only the spawn/finish markers are set later, by spawn/goal placement.
    ``raw_code`` keeps the integer the tile was built from; ``code`` is its
    closed-enum view, EMPTY for anything outside the catalog.
    """

    x: int
    y: int
    code: TileCode
    is_spawn: bool = False
    is_finish: bool = False
    shape: Shape = field(init=False)
    rotation: int = field(init=False)
    raw_code: int = field(init=False, repr=False)
    collision: Grid = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.raw_code = int(self.code)
        self.code = to_tile_code(self.raw_code)
        self.shape, self.rotation = decode(self.code)
        self.collision = collision_grid(self.shape, self.rotation)

    @property
    def is_navigable(self) -> bool:
        return self.shape is not Shape.EMPTY

    # ---- Sub-cell queries -------------------------------------------------
    def is_walkable(self, sub_x: int, sub_y: int) -> bool:
        """Local sub-cell check; sub_x/sub_y are 0-based within the tile."""
        return is_walkable(self.collision, sub_x, sub_y)

    def can_exit_from(self, sub_x: int, sub_y: int, direction: Direction) -> bool:
        """A walkable sub-cell can leave the tile only across the edge it sits on."""
        return self.is_walkable(sub_x, sub_y) and _on_edge(sub_x, sub_y, direction)

    def can_enter_from(self, sub_x: int, sub_y: int, from_direction: Direction) -> bool:
        return self.is_walkable(sub_x, sub_y) and _on_edge(sub_x, sub_y, from_direction)

    # ---- Debug ------------------------------------------------------------
    def to_str_lines(self) -> List[str]:
        header = f"Tile ({self.x},{self.y}) {self.shape.value} rot={self.rotation}:"
        return [header] + ["  " + line for line in format_grid(self.collision)]
