from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from ..core.rng import RNG
from .grid import Maze, Point
from .tile import Tile

logger = logging.getLogger(__name__)


class Edge(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Edge":
        return _OPPOSITE_EDGES[self]


_OPPOSITE_EDGES = {
    Edge.TOP: Edge.BOTTOM,
    Edge.BOTTOM: Edge.TOP,
    Edge.LEFT: Edge.RIGHT,
    Edge.RIGHT: Edge.LEFT,
}

# A corner tile belongs to the first edge listed here that contains it.
EDGE_PRIORITY = (Edge.TOP, Edge.BOTTOM, Edge.LEFT, Edge.RIGHT)


@dataclass(frozen=True)
class Placement:
    spawn: Optional[Point]
    goal: Optional[Point]
    spawn_edge: Optional[Edge] = None
    goal_by_distance: bool = False

    @property
    def degenerate(self) -> bool:
        return self.spawn is None


def on_edge(maze: Maze, tile: Tile, edge: Edge) -> bool:
    if edge is Edge.TOP:
        return tile.y == 1
    if edge is Edge.BOTTOM:
        return tile.y == maze.height
    if edge is Edge.LEFT:
        return tile.x == 1
    return tile.x == maze.width


def edge_tiles(maze: Maze) -> Dict[Edge, List[Tile]]:
    """Navigable tiles on each border, in row-major scan order."""
    out: Dict[Edge, List[Tile]] = {edge: [] for edge in EDGE_PRIORITY}
    for tile in maze.navigable_tiles():
        for edge in EDGE_PRIORITY:
            if on_edge(maze, tile, edge):
                out[edge].append(tile)
    return out


def primary_edge(maze: Maze, tile: Tile) -> Optional[Edge]:
    for edge in EDGE_PRIORITY:
        if on_edge(maze, tile, edge):
            return edge
    return None


def distance_to_edge(maze: Maze, tile: Tile, edge: Edge) -> int:
    if edge is Edge.TOP:
        return tile.y
    if edge is Edge.BOTTOM:
        return maze.height - tile.y
    if edge is Edge.LEFT:
        return tile.x
    return maze.width - tile.x


def closest_to_edge(maze: Maze, edge: Edge) -> Optional[Tile]:
    """Navigable tile nearest to ``edge``; ties go to the first in scan order."""
    closest: Optional[Tile] = None
    best = None
    for tile in maze.navigable_tiles():
        dist = distance_to_edge(maze, tile, edge)
        if best is None or dist < best:
            best = dist
            closest = tile
    return closest


def place_spawn_and_goal(maze: Maze, rng: RNG) -> Placement:
    """Mark a spawn tile on one border and a goal tile on the opposite border.

    The spawn is drawn uniformly from every navigable border tile. The goal is
    drawn from the opposite border; if that border has no navigable tile, the
    navigable tile closest to it is used instead. A maze without navigable
    border tiles is left unmarked and reported with a warning.
    """
    by_edge = edge_tiles(maze)
    # Union of the border lists without duplicating corner tiles.
    candidates = [t for t in maze.navigable_tiles() if primary_edge(maze, t) is not None]

    if not candidates:
        logger.warning("Could not find valid spawn/goal tiles: no navigable tile on any edge")
        return Placement(spawn=None, goal=None)

    spawn = rng.choice(candidates)
    spawn_edge = primary_edge(maze, spawn)
    target_edge = spawn_edge.opposite

    goal_by_distance = False
    opposite_tiles = by_edge[target_edge]
    if opposite_tiles:
        goal = rng.choice(opposite_tiles)
    else:
        goal = closest_to_edge(maze, target_edge)
        goal_by_distance = True

    spawn.is_spawn = True
    goal.is_finish = True
    maze.spawn = Point(spawn.x, spawn.y)
    maze.goal = Point(goal.x, goal.y)
    logger.info(
        "Spawn at (%d, %d) [%s edge], goal at (%d, %d)%s",
        spawn.x,
        spawn.y,
        spawn_edge.value,
        goal.x,
        goal.y,
        " [closest to %s edge]" % target_edge.value if goal_by_distance else "",
    )
    return Placement(
        spawn=maze.spawn,
        goal=maze.goal,
        spawn_edge=spawn_edge,
        goal_by_distance=goal_by_distance,
    )
