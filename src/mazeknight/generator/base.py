from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Sequence

from ..errors import GeneratorError

# grid[layer][row][col] of raw tile codes
RawGrid = List[List[List[int]]]


class MazeSource(Protocol):
    """Anything that can produce raw tile-code grids for the acceptance loop."""

    def generate(self, width: int, depth: int, layers: int, seed: int, target_fullness: int) -> RawGrid: ...


class BaseGenerator(ABC):
    """Abstract base for maze generators."""

    @abstractmethod
    def generate(self, width: int, depth: int, layers: int, seed: int, target_fullness: int) -> RawGrid:
        """Generate ``layers`` layers of ``depth`` rows by ``width`` columns."""
        raise NotImplementedError


def validate_grid(raw: Optional[Sequence], width: int, depth: int, layers: int) -> RawGrid:
    """Check a generator result has the requested shape.

    A missing, empty or mis-shaped result is a generator fault and raises
    GeneratorError; it is never padded with empty tiles.
    """
    if not raw:
        raise GeneratorError("Generator returned no grid")
    if len(raw) < layers:
        raise GeneratorError(f"Generator returned {len(raw)} layer(s), expected {layers}")
    out: RawGrid = []
    for li in range(layers):
        layer = raw[li]
        if layer is None or len(layer) != depth:
            raise GeneratorError(f"Layer {li} has wrong row count, expected {depth}")
        rows: List[List[int]] = []
        for ri, row in enumerate(layer):
            if row is None or len(row) != width:
                raise GeneratorError(f"Layer {li} row {ri} has wrong width, expected {width}")
            rows.append([int(code) for code in row])
        out.append(rows)
    return out
