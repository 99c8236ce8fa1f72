from __future__ import annotations


class MazeError(Exception):
    """Base class for errors raised by the maze core."""


class GeneratorError(MazeError):
    """Raised when the maze generator returns no usable grid for an attempt."""


class ConfigError(MazeError):
    """Raised when a settings file cannot be read or parsed."""
