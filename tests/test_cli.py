import json

import pytest

from mazeknight.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("MAZE_WIDTH", "MAZE_HEIGHT", "MAZE_SEED", "MAZE_MIN_FILL", "MAZE_MAX_ATTEMPTS",
                "MAZE_TARGET_FULLNESS", "MAZE_ENEMIES", "MAZE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_json_summary(capsys):
    assert main(["--width", "6", "--height", "5", "--seed", "3", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)

    assert (data["width"], data["height"]) == (6, 5)
    assert data["seed"] == 3
    assert data["state"] == "accepted"
    assert data["attempts"] == 1
    assert data["fill_percent"] >= 60
    assert len(data["codes"]) == 5 and all(len(row) == 6 for row in data["codes"])
    assert data["spawn"] is not None and data["goal"] is not None
    assert len(data["enemies"]) == 3


def test_json_summary_is_reproducible(capsys):
    main(["--width", "7", "--height", "7", "--seed", "11", "--json"])
    first = capsys.readouterr().out
    main(["--width", "7", "--height", "7", "--seed", "11", "--json"])
    assert capsys.readouterr().out == first


def test_ascii_output(capsys):
    assert main(["--width", "4", "--height", "3", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Seed: 1")
    grid = lines[1:]
    assert len(grid) == 9
    assert all(len(line) == 12 for line in grid)
    text = "\n".join(grid)
    assert (text.count("S"), text.count("G")) == (1, 1) or text.count("B") == 1


def test_unloadable_library_fails_cleanly(tmp_path):
    assert main(["--library", str(tmp_path / "missing.so"), "--seed", "1"]) == 1


def test_settings_file_is_used(tmp_path, capsys):
    user = tmp_path / "s.yaml"
    user.write_text("maze:\n  width: 3\n  height: 2\n  seed: 8\nenemies:\n  count: 1\n", encoding="utf-8")
    assert main(["--settings", str(user), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert (data["width"], data["height"], data["seed"]) == (3, 2, 8)
    assert len(data["enemies"]) == 1


def test_wrongly_typed_settings_value_fails_cleanly(tmp_path, capsys):
    user = tmp_path / "s.yaml"
    user.write_text("maze:\n  width: abc\n", encoding="utf-8")
    assert main(["--settings", str(user)]) == 1
    assert capsys.readouterr().out == ""


class _CentreOnlyGenerator:
    def generate(self, width, depth, layers, seed, target_fullness):
        return [[[16 if (x, y) == (1, 1) else 0 for x in range(width)] for y in range(depth)]]


def test_maze_without_edge_tiles_is_printed_with_warning(monkeypatch, capsys):
    monkeypatch.setattr("mazeknight.cli.BacktrackerGenerator", _CentreOnlyGenerator)
    assert main(["--width", "3", "--height", "3", "--seed", "2", "--max-attempts", "1"]) == 0
    captured = capsys.readouterr()
    assert "exhausted_fallback" in captured.out
    grid = "\n".join(captured.out.splitlines()[1:])
    assert len(grid.splitlines()) == 9
    assert not any(marker in grid for marker in "SGB")
    assert "no valid spawn/goal" in captured.err
