from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from ..errors import ConfigError
from ..maze.acceptance import AcceptancePolicy

logger = logging.getLogger(__name__)


@dataclass
class MazeSettings:
    width: int = 20
    height: int = 20
    seed: Optional[int] = None


@dataclass
class AcceptanceSettings:
    min_fill_percent: float = 60.0
    max_attempts: int = 10
    target_fullness: int = 80

    def to_policy(self) -> AcceptancePolicy:
        return AcceptancePolicy(
            min_fill_percent=float(self.min_fill_percent),
            max_attempts=int(self.max_attempts),
            target_fullness=int(self.target_fullness),
        )


@dataclass
class EnemySettings:
    count: int = 3


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().lower()
        if value in {"", "none", "null"}:
            return None
    return int(value)


# env var -> (section, field, caster)
ENV_OVERRIDES: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "MAZE_WIDTH": ("maze", "width", int),
    "MAZE_HEIGHT": ("maze", "height", int),
    "MAZE_SEED": ("maze", "seed", _optional_int),
    "MAZE_MIN_FILL": ("acceptance", "min_fill_percent", float),
    "MAZE_MAX_ATTEMPTS": ("acceptance", "max_attempts", int),
    "MAZE_TARGET_FULLNESS": ("acceptance", "target_fullness", int),
    "MAZE_ENEMIES": ("enemies", "count", int),
}

# (section, field) -> caster, shared by the YAML and env layers
FIELD_CASTERS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    (section, name): caster for section, name, caster in ENV_OVERRIDES.values()
}


@dataclass
class Settings:
    """Maze generation settings.

    Sources, lowest to highest precedence: dataclass defaults, the packaged
    default_settings.yaml, an optional user YAML file, then MAZE_* environment
    variables.
    """

    maze: MazeSettings = field(default_factory=MazeSettings)
    acceptance: AcceptanceSettings = field(default_factory=AcceptanceSettings)
    enemies: EnemySettings = field(default_factory=EnemySettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Could not read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _section(klass, section: str, raw: Any):
        if not isinstance(raw, dict):
            return klass()
        allowed = {f.name for f in dataclasses.fields(klass)}
        unknown = set(raw) - allowed
        if unknown:
            logger.warning("Ignoring unknown %s settings: %s", klass.__name__, sorted(unknown))
        values = {}
        for k, v in raw.items():
            if k not in allowed:
                continue
            try:
                values[k] = FIELD_CASTERS[(section, k)](v)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid {klass.__name__}.{k}: {v!r}") from exc
        return klass(**values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        settings = cls(
            maze=cls._section(MazeSettings, "maze", data.get("maze")),
            acceptance=cls._section(AcceptanceSettings, "acceptance", data.get("acceptance")),
            enemies=cls._section(EnemySettings, "enemies", data.get("enemies")),
        )
        settings.validate()
        return settings

    @staticmethod
    def env_overrides(env: Optional[Mapping[str, str]] = None) -> dict:
        env = os.environ if env is None else env
        out: dict = {}
        for key, (section, name, caster) in ENV_OVERRIDES.items():
            if key not in env or env[key] == "":
                continue
            try:
                out.setdefault(section, {})[name] = caster(env[key])
            except ValueError as exc:
                logger.error("Invalid env for %s=%r: %s", key, env[key], exc)
        return out

    @classmethod
    def load(cls, user_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from built-in defaults, an optional user file and the environment."""
        try:
            text = resources.files("mazeknight.config").joinpath("default_settings.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        merged = cls._deep_merge(merged, cls.env_overrides(env))
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def validate(self) -> None:
        """Normalize settings to safe values, logging anything that had to change."""
        if self.maze.width < 1 or self.maze.height < 1:
            logger.warning("Invalid maze size %sx%s; resetting to 20x20", self.maze.width, self.maze.height)
            self.maze.width, self.maze.height = 20, 20
        if self.acceptance.max_attempts < 1:
            logger.warning("max_attempts must be >= 1 (got %s); using 1", self.acceptance.max_attempts)
            self.acceptance.max_attempts = 1
        fill = float(self.acceptance.min_fill_percent)
        if not 0.0 <= fill <= 100.0:
            logger.warning("min_fill_percent %s outside [0, 100]; clamping", fill)
            self.acceptance.min_fill_percent = max(0.0, min(100.0, fill))
        if self.enemies.count < 0:
            logger.warning("Negative enemy count %s; using 0", self.enemies.count)
            self.enemies.count = 0

    def save(self, path: Path) -> None:
        data = dataclasses.asdict(self)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.info("Saved settings to %s", path)
