from __future__ import annotations

import ctypes
import logging
from pathlib import Path
from typing import Union

from ..errors import GeneratorError
from .base import BaseGenerator, RawGrid

logger = logging.getLogger(__name__)

_U16_GRID = ctypes.POINTER(ctypes.POINTER(ctypes.POINTER(ctypes.c_uint16)))


class NativeGenerator(BaseGenerator):
    """Adapter for the compiled wave-function-collapse maze library.

    The library must export::

        uint16_t*** generateGrid(uint32_t width, uint32_t length, uint32_t height,
                                 uint32_t seed, uint32_t targetFullness);
        void freeGrid(uint16_t*** grid, uint32_t width, uint32_t length, uint32_t height);

    The returned grid is indexed ``[layer][row][col]``; it is copied into
    Python lists and released with ``freeGrid`` before returning.
    """

    def __init__(self, library_path: Union[str, Path]) -> None:
        self.library_path = Path(library_path)
        try:
            lib = ctypes.CDLL(str(self.library_path))
        except OSError as exc:
            raise GeneratorError(f"Failed to load maze library {self.library_path}: {exc}") from exc
        try:
            lib.generateGrid.argtypes = [ctypes.c_uint32] * 5
            lib.generateGrid.restype = _U16_GRID
            lib.freeGrid.argtypes = [_U16_GRID, ctypes.c_uint32, ctypes.c_uint32, ctypes.c_uint32]
            lib.freeGrid.restype = None
        except AttributeError as exc:
            raise GeneratorError(f"Maze library {self.library_path} lacks generateGrid/freeGrid") from exc
        self._lib = lib
        logger.info("Loaded native maze library: %s", self.library_path)

    def generate(self, width: int, depth: int, layers: int, seed: int, target_fullness: int) -> RawGrid:
        ptr = self._lib.generateGrid(width, depth, layers, seed & 0xFFFFFFFF, target_fullness)
        if not ptr:
            raise GeneratorError(f"Native generator returned NULL for seed {seed}")
        try:
            return [
                [[int(ptr[layer][y][x]) for x in range(width)] for y in range(depth)]
                for layer in range(layers)
            ]
        finally:
            self._lib.freeGrid(ptr, width, depth, layers)
