from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .collision import format_grid
from .tile import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Maze:
    """
    The decoded maze: a width x height block of Tiles plus optional spawn and
    goal markers. Grid coordinates are 1-based, ``(1, 1)`` being the north-west
    tile; ``tiles`` itself is a plain row-major list indexed ``[row][col]``.

    A Maze is built once per level and replaced wholesale on regeneration.
    """

    def __init__(self, width: int, height: int, tiles: List[List[Tile]]) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {width}x{height}")
        if len(tiles) != height or any(len(row) != width for row in tiles):
            raise ValueError(f"Tile rows do not match maze size {width}x{height}")
        self.width = width
        self.height = height
        self.tiles = tiles
        self.spawn: Optional[Point] = None
        self.goal: Optional[Point] = None

    @classmethod
    def from_codes(cls, codes: Sequence[Sequence[int]]) -> "Maze":
        """Decode a row-major grid of raw tile codes."""
        height = len(codes)
        width = len(codes[0]) if height else 0
        tiles = [
            [Tile(x + 1, y + 1, code) for x, code in enumerate(row)]
            for y, row in enumerate(codes)
        ]
        return cls(width, height, tiles)

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get_tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [1,{self.width}]x[1,{self.height}]")
        return self.tiles[y - 1][x - 1]

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """Bounds-safe lookup; None outside the maze."""
        if not self.in_bounds(x, y):
            return None
        return self.tiles[y - 1][x - 1]

    # ---- Query -----------------------------------------------------------
    def __iter__(self) -> Iterator[Tile]:
        """Row-major scan, north row first."""
        for row in self.tiles:
            yield from row

    def navigable_tiles(self) -> List[Tile]:
        return [t for t in self if t.is_navigable]

    def neighbors_4(self, x: int, y: int) -> Iterable[Point]:
        # Ordered for deterministic traversal
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield Point(nx, ny)

    @property
    def spawn_tile(self) -> Optional[Tile]:
        return self.tile_at(self.spawn.x, self.spawn.y) if self.spawn else None

    @property
    def goal_tile(self) -> Optional[Tile]:
        return self.tile_at(self.goal.x, self.goal.y) if self.goal else None

    # ---- Export / Compare -----------------------------------------------
    def to_str_lines(self) -> List[str]:
        """ASCII rendering, three text rows per tile row.

        Every tile is drawn as its collision grid; the centre sub-cell of the
        spawn and goal tiles is replaced by 'S' and 'G', or by 'B' when one
        tile is both.
        """
        lines: List[str] = []
        for row in self.tiles:
            blocks = []
            for tile in row:
                block = [list(line) for line in format_grid(tile.collision)]
                if tile.is_spawn and tile.is_finish:
                    block[1][1] = "B"
                elif tile.is_spawn:
                    block[1][1] = "S"
                elif tile.is_finish:
                    block[1][1] = "G"
                blocks.append(block)
            for sub_row in range(3):
                lines.append("".join("".join(block[sub_row]) for block in blocks))
        return lines

    def codes(self) -> Tuple[Tuple[int, ...], ...]:
        """Deterministic, hashable snapshot of tile codes for equality tests."""
        return tuple(tuple(int(t.code) for t in row) for row in self.tiles)
