import logging
import os
import sys
from typing import Optional


def configure_logging(default_level: int = logging.INFO, level_name: Optional[str] = None) -> None:
    """Configure the root logger with the project's log format.

    Respects the MAZE_LOG_LEVEL env var when no explicit level name is given.
    Existing root handlers are replaced so repeated calls do not duplicate output.
    """
    level_name = level_name or os.getenv("MAZE_LOG_LEVEL")
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
