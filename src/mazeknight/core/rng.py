from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class RNG:
    """
    Injectable RNG wrapper around random.Random.

    Maze decoration (spawn/goal picks, enemy placement, wandering) draws from an
    instance of this class instead of the process-wide ``random`` state, so a
    decorated maze is reproducible from its seed regardless of what else the
    program has drawn.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.randrange(len(seq))]
