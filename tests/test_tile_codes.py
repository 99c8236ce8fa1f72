import pytest

from mazeknight.maze.codes import (
    Shape,
    TileCode,
    decode,
    is_navigable,
    to_tile_code,
)


def test_decode_is_total_over_uint16():
    seen_shapes = set()
    for code in range(0, 1 << 16):
        shape, rotation = decode(code)
        assert isinstance(shape, Shape)
        assert 0 <= rotation <= 3
        seen_shapes.add(shape)
    assert seen_shapes == set(Shape)


def test_decode_never_raises_on_odd_input():
    assert decode(-1) == (Shape.EMPTY, 0)
    assert decode(1 << 20) == (Shape.EMPTY, 0)
    assert decode(3) == (Shape.EMPTY, 0)  # two bits set is not a tile


def test_special_crossroad_decodes_like_normal():
    assert decode(TileCode.SPECIAL_X_CORRIDOR) == decode(TileCode.NORMAL_X_CORRIDOR)
    assert decode(2048) == (Shape.CROSSROAD, 0)


@pytest.mark.parametrize(
    "code,shape,rotation",
    [
        (1, Shape.CORNER, 0),
        (2, Shape.CORNER, 1),
        (4, Shape.CORNER, 2),
        (8, Shape.CORNER, 3),
        (16, Shape.STRAIGHT, 0),
        (32, Shape.STRAIGHT, 1),
        (64, Shape.T_JUNCTION, 0),
        (128, Shape.T_JUNCTION, 1),
        (256, Shape.T_JUNCTION, 2),
        (512, Shape.T_JUNCTION, 3),
        (1024, Shape.CROSSROAD, 0),
        (4096, Shape.DEAD_END, 0),
        (8192, Shape.DEAD_END, 1),
        (16384, Shape.DEAD_END, 2),
        (32768, Shape.DEAD_END, 3),
        (0, Shape.EMPTY, 0),
    ],
)
def test_catalog_entries(code, shape, rotation):
    assert decode(code) == (shape, rotation)


def test_navigable_codes_are_exactly_the_sixteen_bits():
    navigable = [code for code in range(1 << 16) if is_navigable(code)]
    assert navigable == [1 << bit for bit in range(16)]


def test_to_tile_code_closes_the_set():
    assert to_tile_code(16) is TileCode.NORTH_SOUTH_CORRIDOR
    assert to_tile_code(2048) is TileCode.SPECIAL_X_CORRIDOR
    assert to_tile_code(12345) is TileCode.EMPTY