import ctypes
from types import SimpleNamespace

import pytest

from mazeknight.errors import GeneratorError
from mazeknight.generator import BacktrackerGenerator, NativeGenerator, validate_grid
from mazeknight.maze.codes import is_navigable
from mazeknight.maze.connectivity import openings


def _navigable(layer):
    return sum(1 for row in layer for code in row if is_navigable(code))


def test_backtracker_openings_agree_between_neighbours():
    width, depth = 9, 7
    (layer,) = BacktrackerGenerator().generate(width, depth, 1, seed=11, target_fullness=100)
    for y, row in enumerate(layer):
        for x, code in enumerate(row):
            for direction in openings(code):
                dx, dy = direction.delta
                nx, ny = x + dx, y + dy
                assert 0 <= nx < width and 0 <= ny < depth, (x, y, direction)
                assert direction.opposite in openings(layer[ny][nx])


@pytest.mark.parametrize("target,expected", [(100, 100), (80, 80), (30, 30), (0, 0)])
def test_backtracker_reaches_target_fullness(target, expected):
    # At 0% only the start cell is visited and it has nothing to open toward.
    (layer,) = BacktrackerGenerator().generate(10, 10, 1, seed=3, target_fullness=target)
    assert _navigable(layer) == expected


def test_backtracker_is_deterministic_per_seed():
    gen = BacktrackerGenerator()
    assert gen.generate(8, 8, 1, 5, 80) == gen.generate(8, 8, 1, 5, 80)
    assert gen.generate(8, 8, 1, 5, 80) != gen.generate(8, 8, 1, 6, 80)


def test_backtracker_emits_requested_shape():
    grid = BacktrackerGenerator().generate(4, 3, 2, seed=0, target_fullness=80)
    assert validate_grid(grid, 4, 3, 2) == grid


@pytest.mark.parametrize(
    "raw",
    [None, [], [[[1, 2]]], [[[1, 2], [3]]], [None], [[None, [1, 2]]]],
)
def test_validate_grid_rejects_bad_shapes(raw):
    with pytest.raises(GeneratorError):
        validate_grid(raw, 2, 2, 1)


def test_validate_grid_needs_every_layer():
    with pytest.raises(GeneratorError, match="layer"):
        validate_grid([[[1]]], 1, 1, 2)


def test_validate_grid_coerces_ints():
    assert validate_grid([[[True, 16.0]]], 2, 1, 1) == [[[1, 16]]]


def test_native_generator_missing_library(tmp_path):
    with pytest.raises(GeneratorError, match="Failed to load"):
        NativeGenerator(tmp_path / "libmissing.so")


def _fake_library(grid, freed):
    def generateGrid(width, length, height, seed, fullness):
        return grid

    def freeGrid(ptr, width, length, height):
        freed.append((width, length, height))

    return SimpleNamespace(generateGrid=generateGrid, freeGrid=freeGrid)


def test_native_generator_copies_and_frees(monkeypatch):
    freed = []
    grid = [[[16, 32], [1, 0]]]
    monkeypatch.setattr(ctypes, "CDLL", lambda path: _fake_library(grid, freed))

    gen = NativeGenerator("libmaze.so")
    assert gen.generate(2, 2, 1, seed=4, target_fullness=80) == [[[16, 32], [1, 0]]]
    assert freed == [(2, 2, 1)]


def test_native_generator_null_result(monkeypatch):
    freed = []
    monkeypatch.setattr(ctypes, "CDLL", lambda path: _fake_library(None, freed))
    gen = NativeGenerator("libmaze.so")
    with pytest.raises(GeneratorError, match="NULL"):
        gen.generate(2, 2, 1, seed=4, target_fullness=80)
    assert freed == []


def test_native_generator_missing_symbol(monkeypatch):
    monkeypatch.setattr(ctypes, "CDLL", lambda path: SimpleNamespace(generateGrid=lambda *a: None))
    with pytest.raises(GeneratorError, match="freeGrid"):
        NativeGenerator("libmaze.so")
