from .backtracker import BacktrackerGenerator
from .base import BaseGenerator, MazeSource, RawGrid, validate_grid
from .native import NativeGenerator

__all__ = [
    "BaseGenerator",
    "MazeSource",
    "RawGrid",
    "validate_grid",
    "BacktrackerGenerator",
    "NativeGenerator",
]
