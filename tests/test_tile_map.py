import pytest

from tilecrawler.sim.tiles import Tile
from tilecrawler.sim.world import (
    OutOfBoundsError,
    PILLAR_WALL_CELLS,
    TileMap,
    generate_map,
    make_map,
    map_generator_names,
    register_map_generator,
)


def test_make_map_has_exact_dimensions_and_only_empty_tiles() -> None:
    width = 7
    height = 4
    tile_map = make_map(width, height)

    assert tile_map.width == width
    assert tile_map.height == height
    assert len(tile_map.tiles) == width
    assert all(len(column) == height for column in tile_map.tiles)
    cells = list(tile_map.iter_cells())
    assert len(cells) == width * height
    assert all(tile == Tile.empty() for _, _, tile in cells)


def test_default_sized_map_is_all_empty() -> None:
    tile_map = make_map(80, 45)

    assert not any(tile_map.is_blocked(x, y) for x in range(80) for y in range(45))
    assert not any(tile_map.blocks_sight(x, y) for x in range(80) for y in range(45))


def test_set_tile_changes_only_that_cell() -> None:
    tile_map = make_map(5, 5)

    tile_map.set_tile(2, 3, Tile.wall())

    assert tile_map.is_blocked(2, 3)
    assert tile_map.blocks_sight(2, 3)
    assert not tile_map.is_blocked(3, 2)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
def test_out_of_bounds_queries_raise(x: int, y: int) -> None:
    tile_map = make_map(5, 4)

    assert tile_map.in_bounds(x, y) is False
    with pytest.raises(OutOfBoundsError) as excinfo:
        tile_map.is_blocked(x, y)
    assert (excinfo.value.x, excinfo.value.y) == (x, y)
    assert (excinfo.value.width, excinfo.value.height) == (5, 4)
    with pytest.raises(OutOfBoundsError):
        tile_map.blocks_sight(x, y)
    with pytest.raises(OutOfBoundsError):
        tile_map.set_tile(x, y, Tile.wall())


def test_out_of_bounds_error_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        make_map(2, 2).get_tile(2, 2)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, 2)])
def test_non_positive_dimensions_are_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        TileMap(width=width, height=height)


def test_generate_map_defaults_to_empty_generator() -> None:
    tile_map = generate_map(10, 6)

    assert (tile_map.width, tile_map.height) == (10, 6)
    assert all(tile == Tile.empty() for _, _, tile in tile_map.iter_cells())


def test_pillars_generator_places_walls_that_fit() -> None:
    tile_map = generate_map(80, 45, "pillars")

    for x, y in PILLAR_WALL_CELLS:
        assert tile_map.get_tile(x, y) == Tile.wall()
    walls = [(x, y) for x, y, tile in tile_map.iter_cells() if tile.blocked]
    assert sorted(walls) == sorted(PILLAR_WALL_CELLS)

    small = generate_map(40, 30, "pillars")
    assert [(x, y) for x, y, tile in small.iter_cells() if tile.blocked] == [(30, 22)]


def test_unknown_generator_is_rejected() -> None:
    with pytest.raises(ValueError, match="unknown map generator"):
        generate_map(5, 5, "caves")


def test_registered_generator_is_used_and_size_checked() -> None:
    def border(width: int, height: int) -> TileMap:
        tile_map = make_map(width, height)
        for x in range(width):
            tile_map.set_tile(x, 0, Tile.wall())
        return tile_map

    register_map_generator("test_border", border)
    register_map_generator("test_wrong_size", lambda width, height: make_map(width + 1, height))

    assert "test_border" in map_generator_names()
    tile_map = generate_map(4, 3, "test_border")
    assert all(tile_map.is_blocked(x, 0) for x in range(4))
    assert not tile_map.is_blocked(0, 1)
    with pytest.raises(ValueError):
        generate_map(4, 3, "test_wrong_size")
