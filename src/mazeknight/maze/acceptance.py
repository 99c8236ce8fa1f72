from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

from ..generator.base import MazeSource, validate_grid
from .codes import TileCode, is_navigable

logger = logging.getLogger(__name__)

LAYERS = 1


class AcceptanceState(Enum):
    ATTEMPTING = auto()
    ACCEPTED = auto()
    EXHAUSTED_FALLBACK = auto()


@dataclass(frozen=True)
class AcceptancePolicy:
    """Retry budget and thresholds for the acceptance loop.

    - min_fill_percent: lowest fullness (percent of navigable cells) accepted.
    - max_attempts: seeded attempts before falling back.
    - target_fullness: passed through to the generator untouched; unrelated to
      the acceptance threshold.
    """

    min_fill_percent: float = 60.0
    max_attempts: int = 10
    target_fullness: int = 80

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")


@dataclass
class AcceptanceResult:
    state: AcceptanceState
    codes: List[List[int]]  # [row][col], alias crossroads canonicalised
    seed: int
    attempts: int
    generator_calls: int
    fullness: float

    @property
    def accepted(self) -> bool:
        return self.state is AcceptanceState.ACCEPTED


def count_navigable(layer: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in layer for code in row if is_navigable(code))


def fill_percent(layer: Sequence[Sequence[int]], width: int, height: int) -> float:
    """Percentage of the width x height cells that decode to a navigable shape."""
    return count_navigable(layer) / float(width * height) * 100.0


def canonicalize(layer: Sequence[Sequence[int]]) -> List[List[int]]:
    """Rewrite the layer-linking crossroad to the plain crossroad; nothing else changes."""
    return [
        [int(TileCode.NORMAL_X_CORRIDOR) if code == TileCode.SPECIAL_X_CORRIDOR else code for code in row]
        for row in layer
    ]


class MazeAcceptance:
    """Drives a generator until it produces a grid that is full enough to play.

    Attempt k uses ``base_seed + k - 1``. The first attempt reaching
    ``min_fill_percent`` is accepted. When every attempt falls short the
    generator is called once more with the last attempt's seed and that grid is
    used as-is, with a warning. Generator faults propagate as GeneratorError.
    """

    def __init__(self, generator: MazeSource, policy: Optional[AcceptancePolicy] = None) -> None:
        self.generator = generator
        self.policy = policy or AcceptancePolicy()
        self.state = AcceptanceState.ATTEMPTING
        self.generator_calls = 0

    def _generate(self, width: int, height: int, seed: int) -> List[List[int]]:
        self.generator_calls += 1
        raw = self.generator.generate(width, height, LAYERS, seed, self.policy.target_fullness)
        return validate_grid(raw, width, height, LAYERS)[0]

    def run(self, width: int, height: int, base_seed: int) -> AcceptanceResult:
        if width < 1 or height < 1:
            raise ValueError(f"Maze must be at least 1x1, got {width}x{height}")
        self.state = AcceptanceState.ATTEMPTING
        self.generator_calls = 0
        policy = self.policy
        total = width * height

        for attempt in range(1, policy.max_attempts + 1):
            seed = base_seed + attempt - 1
            logger.info("Generating maze: %dx%d, seed: %d (attempt %d)", width, height, seed, attempt)
            layer = self._generate(width, height, seed)
            fill = fill_percent(layer, width, height)
            logger.info("Maze fill: %.1f%% (%d/%d tiles)", fill, count_navigable(layer), total)
            if fill >= policy.min_fill_percent:
                self.state = AcceptanceState.ACCEPTED
                return AcceptanceResult(
                    state=self.state,
                    codes=canonicalize(layer),
                    seed=seed,
                    attempts=attempt,
                    generator_calls=self.generator_calls,
                    fullness=fill,
                )
            logger.info("Maze too empty (%.1f%%), regenerating", fill)

        seed = base_seed + policy.max_attempts - 1
        logger.warning(
            "Could not generate a maze at least %.1f%% full after %d attempts; using seed %d anyway",
            policy.min_fill_percent,
            policy.max_attempts,
            seed,
        )
        layer = self._generate(width, height, seed)
        self.state = AcceptanceState.EXHAUSTED_FALLBACK
        return AcceptanceResult(
            state=self.state,
            codes=canonicalize(layer),
            seed=seed,
            attempts=policy.max_attempts,
            generator_calls=self.generator_calls,
            fullness=fill_percent(layer, width, height),
        )
