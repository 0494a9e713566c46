from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from tilecrawler.sim.tiles import Tile

DEFAULT_MAP_GENERATOR = "empty"
PILLAR_WALL_CELLS: tuple[tuple[int, int], ...] = ((30, 22), (50, 22))


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside a grid's extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


def _make_grid(width: int, height: int) -> list[list[Tile]]:
    return [[Tile.empty() for _ in range(height)] for _ in range(width)]


@dataclass
class TileMap:
    """Fixed-size grid of tiles, indexed as ``tiles[x][y]``."""

    width: int
    height: int
    tiles: list[list[Tile]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise ValueError("map width must be an integer > 0")
        if isinstance(self.height, bool) or not isinstance(self.height, int) or self.height <= 0:
            raise ValueError("map height must be an integer > 0")
        self.tiles = _make_grid(self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get_tile(self, x: int, y: int) -> Tile:
        self._require_in_bounds(x, y)
        return self.tiles[x][y]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._require_in_bounds(x, y)
        self.tiles[x][y] = tile

    def is_blocked(self, x: int, y: int) -> bool:
        return self.get_tile(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.get_tile(x, y).block_sight

    def iter_cells(self) -> Iterator[tuple[int, int, Tile]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.tiles[x][y]


def make_map(width: int, height: int) -> TileMap:
    """Build a map filled with empty tiles."""
    return TileMap(width=width, height=height)


def _generate_pillars(width: int, height: int) -> TileMap:
    tile_map = make_map(width, height)
    for x, y in PILLAR_WALL_CELLS:
        if tile_map.in_bounds(x, y):
            tile_map.set_tile(x, y, Tile.wall())
    return tile_map


MapGenerator = Callable[[int, int], TileMap]

_MAP_GENERATORS: dict[str, MapGenerator] = {
    "empty": make_map,
    "pillars": _generate_pillars,
}


def register_map_generator(name: str, generator: MapGenerator) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("map generator name must be a non-empty string")
    _MAP_GENERATORS[name] = generator


def map_generator_names() -> tuple[str, ...]:
    return tuple(sorted(_MAP_GENERATORS))


def generate_map(width: int, height: int, generator: str = DEFAULT_MAP_GENERATOR) -> TileMap:
    build = _MAP_GENERATORS.get(generator)
    if build is None:
        raise ValueError(f"unknown map generator: {generator}")
    tile_map = build(width, height)
    if tile_map.width != width or tile_map.height != height:
        raise ValueError(f"map generator '{generator}' returned a {tile_map.width}x{tile_map.height} map")
    return tile_map
