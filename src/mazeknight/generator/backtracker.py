from __future__ import annotations

import logging
import math
import random
from typing import List, Set, Tuple

from ..maze.connectivity import code_for_openings
from ..maze.directions import CARDINALS, Direction
from .base import BaseGenerator, RawGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]  # (x, y), 0-based


class BacktrackerGenerator(BaseGenerator):
    """Pure-Python reference generator.

    Carves passages depth-first from a random start cell and stops once
    ``target_fullness`` percent of the cells have been reached, so lower targets
    leave empty cells behind. Every emitted code is navigable and agrees with
    its neighbours' openings. Layers are carved independently.
    """

    def generate(self, width: int, depth: int, layers: int, seed: int, target_fullness: int) -> RawGrid:
        rng = random.Random(seed)
        target_cells = max(1, math.ceil(width * depth * max(0, min(100, target_fullness)) / 100))
        grid = [self._carve_layer(rng, width, depth, target_cells) for _ in range(layers)]
        logger.debug(
            "Backtracker generated %dx%dx%d grid (seed=%d, target=%d%%)", width, depth, layers, seed, target_fullness
        )
        return grid

    @staticmethod
    def _carve_layer(rng: random.Random, width: int, depth: int, target_cells: int) -> List[List[int]]:
        opened: List[List[Set[Direction]]] = [[set() for _ in range(width)] for _ in range(depth)]
        start = (rng.randrange(width), rng.randrange(depth))
        visited: Set[Cell] = {start}
        stack: List[Cell] = [start]

        while stack and len(visited) < target_cells:
            x, y = stack[-1]
            candidates = []
            for direction in CARDINALS:
                dx, dy = direction.delta
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < depth and (nx, ny) not in visited:
                    candidates.append((direction, (nx, ny)))
            if not candidates:
                stack.pop()
                continue
            direction, nxt = candidates[rng.randrange(len(candidates))]
            opened[y][x].add(direction)
            opened[nxt[1]][nxt[0]].add(direction.opposite)
            visited.add(nxt)
            stack.append(nxt)

        return [[int(code_for_openings(cell)) for cell in row] for row in opened]
