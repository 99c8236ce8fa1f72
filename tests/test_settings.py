from pathlib import Path

import pytest

from mazeknight.config import Settings
from mazeknight.errors import ConfigError


def test_packaged_defaults():
    s = Settings.load(env={})
    assert (s.maze.width, s.maze.height, s.maze.seed) == (20, 20, None)
    assert s.acceptance.min_fill_percent == 60
    assert s.acceptance.max_attempts == 10
    assert s.acceptance.target_fullness == 80
    assert s.enemies.count == 3


def test_user_file_overrides_defaults(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("maze:\n  width: 31\nacceptance:\n  min_fill_percent: 75\n", encoding="utf-8")

    s = Settings.load(user_path=user, env={})
    assert s.maze.width == 31
    assert s.maze.height == 20  # untouched keys keep their defaults
    assert s.acceptance.min_fill_percent == 75


def test_env_wins_over_user_file(tmp_path: Path):
    user = tmp_path / "settings.yaml"
    user.write_text("maze:\n  width: 31\n  seed: 4\n", encoding="utf-8")

    s = Settings.load(user_path=user, env={"MAZE_WIDTH": "12", "MAZE_SEED": "none", "MAZE_ENEMIES": "0"})
    assert s.maze.width == 12
    assert s.maze.seed is None
    assert s.enemies.count == 0


def test_invalid_env_value_is_ignored(caplog):
    with caplog.at_level("ERROR"):
        s = Settings.load(env={"MAZE_MAX_ATTEMPTS": "lots"})
    assert s.acceptance.max_attempts == 10
    assert any("MAZE_MAX_ATTEMPTS" in rec.getMessage() for rec in caplog.records)


def test_missing_user_file_keeps_defaults(tmp_path: Path):
    s = Settings.load(user_path=tmp_path / "nope.yaml", env={})
    assert s.maze.width == 20


@pytest.mark.parametrize("content", ["maze: [unclosed\n", "- just\n- a list\n"])
def test_unreadable_user_file_raises(tmp_path: Path, content):
    user = tmp_path / "settings.yaml"
    user.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load(user_path=user, env={})


def test_validate_clamps_out_of_range_values():
    s = Settings.from_dict(
        {
            "maze": {"width": 0, "height": 5},
            "acceptance": {"min_fill_percent": 140, "max_attempts": 0},
            "enemies": {"count": -2},
        }
    )
    assert (s.maze.width, s.maze.height) == (20, 20)
    assert s.acceptance.min_fill_percent == 100.0
    assert s.acceptance.max_attempts == 1
    assert s.enemies.count == 0


def test_unknown_keys_are_dropped(caplog):
    with caplog.at_level("WARNING"):
        s = Settings.from_dict({"maze": {"width": 8, "colour": "blue"}})
    assert s.maze.width == 8
    assert any("colour" in rec.getMessage() for rec in caplog.records)


def test_save_then_load_round_trip(tmp_path: Path):
    s = Settings.load(env={})
    s.maze.seed = 99
    s.acceptance.max_attempts = 4
    path = tmp_path / "nested" / "settings.yaml"
    s.save(path)

    again = Settings.load(user_path=path, env={})
    assert again == s


def test_to_policy():
    s = Settings.from_dict({"acceptance": {"min_fill_percent": 55, "max_attempts": 3, "target_fullness": 90}})
    policy = s.acceptance.to_policy()
    assert policy.min_fill_percent == 55.0
    assert policy.max_attempts == 3
    assert policy.target_fullness == 90


@pytest.mark.parametrize(
    "content,field",
    [
        ("maze:\n  width: abc\n", "MazeSettings.width"),
        ("maze:\n  seed: abc\n", "MazeSettings.seed"),
        ("acceptance:\n  min_fill_percent: lots\n", "AcceptanceSettings.min_fill_percent"),
        ("enemies:\n  count: [1, 2]\n", "EnemySettings.count"),
    ],
)
def test_wrongly_typed_value_raises_config_error(tmp_path: Path, content, field):
    user = tmp_path / "settings.yaml"
    user.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=field):
        Settings.load(user_path=user, env={})


def test_yaml_values_are_coerced_to_field_types():
    s = Settings.from_dict({"maze": {"width": "12", "seed": "7"}, "acceptance": {"min_fill_percent": 55}})
    assert s.maze.width == 12
    assert s.maze.seed == 7
    assert isinstance(s.acceptance.min_fill_percent, float)
