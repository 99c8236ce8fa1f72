from __future__ import annotations

import logging
import time
from typing import Optional

from ..core.rng import RNG
from ..generator.backtracker import BacktrackerGenerator
from ..generator.base import MazeSource
from .acceptance import AcceptancePolicy, AcceptanceResult, MazeAcceptance
from .grid import Maze
from .placement import Placement, place_spawn_and_goal

logger = logging.getLogger(__name__)


def time_seed() -> int:
    """Millisecond clock seed, unique even when mazes are regenerated rapidly."""
    return int(time.time() * 1000) & 0xFFFFFFFF


class MazeBuilder:
    """Acceptance loop, decoding and spawn/goal placement in one pipeline.

    Keeps the acceptance result and placement of the most recent build for
    callers that want to report them (seed used, fullness, fallback state).
    """

    def __init__(
        self,
        generator: Optional[MazeSource] = None,
        policy: Optional[AcceptancePolicy] = None,
        rng: Optional[RNG] = None,
    ) -> None:
        self.generator = generator or BacktrackerGenerator()
        self.policy = policy or AcceptancePolicy()
        self.rng = rng
        self.last_result: Optional[AcceptanceResult] = None
        self.last_placement: Optional[Placement] = None

    def build(self, width: int, height: int, seed: Optional[int] = None) -> Maze:
        if seed is None:
            seed = time_seed()
        result = MazeAcceptance(self.generator, self.policy).run(width, height, seed)
        maze = Maze.from_codes(result.codes)
        # Decoration draws from its own stream so a seed reproduces the whole maze.
        rng = self.rng if self.rng is not None else RNG(seed)
        placement = place_spawn_and_goal(maze, rng)
        self.last_result = result
        self.last_placement = placement
        logger.info(
            "Maze ready: %dx%d seed=%d fill=%.1f%% (%s)",
            width,
            height,
            result.seed,
            result.fullness,
            result.state.name.lower(),
        )
        return maze


def build_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    *,
    generator: Optional[MazeSource] = None,
    rng: Optional[RNG] = None,
    policy: Optional[AcceptancePolicy] = None,
) -> Maze:
    """Generate, accept, decode and decorate a maze ready for play."""
    return MazeBuilder(generator=generator, policy=policy, rng=rng).build(width, height, seed)
