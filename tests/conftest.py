import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedGenerator:
    """Generator double that replays canned single-layer grids and records calls."""

    def __init__(self, layers: List[List[List[int]]], repeat_last: bool = True) -> None:
        self.layers = layers
        self.repeat_last = repeat_last
        self.calls: List[dict] = []

    @property
    def seeds(self) -> List[int]:
        return [c["seed"] for c in self.calls]

    def generate(self, width, depth, layers, seed, target_fullness):
        self.calls.append(
            {"width": width, "depth": depth, "layers": layers, "seed": seed, "target_fullness": target_fullness}
        )
        index = len(self.calls) - 1
        if index >= len(self.layers):
            if not self.repeat_last:
                return None
            index = len(self.layers) - 1
        return [[list(row) for row in self.layers[index]]]


def filled_layer(width: int, height: int, valid: int, code: int = 16) -> List[List[int]]:
    """Row-major layer whose first ``valid`` cells hold ``code`` and the rest are empty."""
    cells = [code if i < valid else 0 for i in range(width * height)]
    return [cells[r * width:(r + 1) * width] for r in range(height)]


@pytest.fixture
def scripted():
    return ScriptedGenerator


@pytest.fixture
def make_layer():
    return filled_layer
