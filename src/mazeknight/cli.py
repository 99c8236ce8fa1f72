from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .agents import spawn_enemies
from .config import Settings
from .core.rng import RNG
from .errors import MazeError
from .generator import BacktrackerGenerator, NativeGenerator
from .logging_config import configure_logging
from .maze import Maze, MazeBuilder
from .maze.builder import time_seed

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mazeknight",
        description="MazeKnight - generate, validate and print a playable maze",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", dest="settings_path", type=Path, default=None,
                        help="Path to a user settings YAML file to load/override defaults.")
    parser.add_argument("--width", type=int, default=None, help="Maze width in tiles")
    parser.add_argument("--height", type=int, default=None, help="Maze height in tiles")
    parser.add_argument("--seed", type=int, default=None, help="Base seed (default: clock based)")
    parser.add_argument("--min-fill", type=float, default=None, help="Minimum fill percent to accept")
    parser.add_argument("--max-attempts", type=int, default=None, help="Seeded attempts before fallback")
    parser.add_argument("--library", type=Path, default=None,
                        help="Shared library exporting generateGrid/freeGrid (default: built-in generator)")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of ASCII")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """CLI flags win over file and environment settings."""
    if args.width is not None:
        settings.maze.width = args.width
    if args.height is not None:
        settings.maze.height = args.height
    if args.seed is not None:
        settings.maze.seed = args.seed
    if args.min_fill is not None:
        settings.acceptance.min_fill_percent = args.min_fill
    if args.max_attempts is not None:
        settings.acceptance.max_attempts = args.max_attempts
    settings.validate()
    return settings


def summarize(maze: Maze, builder: MazeBuilder, enemies: list) -> Dict[str, Any]:
    result = builder.last_result
    return {
        "width": maze.width,
        "height": maze.height,
        "seed": result.seed if result else None,
        "state": result.state.name.lower() if result else None,
        "attempts": result.attempts if result else None,
        "fill_percent": round(result.fullness, 2) if result else None,
        "spawn": [maze.spawn.x, maze.spawn.y] if maze.spawn else None,
        "goal": [maze.goal.x, maze.goal.y] if maze.goal else None,
        "enemies": [[e.x, e.y] for e in enemies],
        "codes": [list(row) for row in maze.codes()],
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(default_level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = apply_overrides(Settings.load(user_path=args.settings_path), args)
        seed = settings.maze.seed if settings.maze.seed is not None else time_seed()
        rng = RNG(seed)
        generator = NativeGenerator(args.library) if args.library else BacktrackerGenerator()
        builder = MazeBuilder(generator=generator, policy=settings.acceptance.to_policy(), rng=rng)
        maze = builder.build(settings.maze.width, settings.maze.height, seed)
    except MazeError as exc:
        logger.error("Maze generation failed: %s", exc)
        return 1
    enemies = spawn_enemies(maze, settings.enemies.count, rng)

    if args.json:
        print(json.dumps(summarize(maze, builder, enemies), indent=2, sort_keys=True))
    else:
        result = builder.last_result
        print(f"Seed: {result.seed}  Fill: {result.fullness:.1f}%  ({result.state.name.lower()})")
        for line in maze.to_str_lines():
            print(line)
        if builder.last_placement.degenerate:
            print("Warning: no valid spawn/goal tiles", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
