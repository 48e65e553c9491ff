"""The map: generation of sea and islands, and placing cities on coasts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import product

from seafarer.gamedata import GameData
from seafarer.maptile import City, MapTile, TileType
from seafarer.rng import dice_roll, random_int

_BOARD = GameData()
ZONE_SIZE = 10
VORONOI_SEEDS = 5

_OPEN_SEA = 0
_ARCHIPELAGO = 1
_BIG_ISLAND = 2


def index_from_xy(x: int, y: int) -> int:
    """Index into the tile list of a tile coordinate."""
    return _BOARD.tile_index(x, y)


def tile_at(x: int, y: int, tiles: list[MapTile]) -> MapTile:
    """The tile at a tile coordinate."""
    return tiles[index_from_xy(x, y)]


def set_tile(x: int, y: int, tiles: list[MapTile], tile_type: TileType) -> None:
    """Change the terrain of the tile at a coordinate."""
    tile_at(x, y, tiles).set_tile_type(tile_type)


def adjacent_tiles(x: int, y: int, tiles: list[MapTile]) -> list[MapTile]:
    """The up to eight tiles around a coordinate that lie on the map."""
    return [
        tile_at(x + dx, y + dy, tiles)
        for dx, dy in product((-1, 0, 1), repeat=2)
        if (dx, dy) != (0, 0) and _BOARD.contains(x + dx, y + dy)
    ]


def adjacent_type_mask(x: int, y: int, tiles: list[MapTile], type_name: str) -> int:
    """Eight-bit mask of the neighbours of a given type.

    Neighbours are read row by row from the top left, the first one being the
    most significant bit. Neighbours off the map count as not matching.
    """
    mask = 0
    for dy, dx in product((-1, 0, 1), repeat=2):
        if (dx, dy) == (0, 0):
            continue
        nx, ny = x + dx, y + dy
        hit = _BOARD.contains(nx, ny) and tile_at(nx, ny, tiles).tile_type.name == type_name
        mask = (mask << 1) | int(hit)
    return mask


def pythagorean_distance(a: MapTile, b: MapTile) -> int:
    """Straight-line distance between two tiles, rounded down."""
    return math.isqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def _sea_type() -> TileType:
    sea = TileType("sea", True)
    sea.add_image("assets/sea_dither_5.png")
    sea.add_image("assets/sea_dither_3.png")
    return sea


def _grass_type() -> TileType:
    grass = TileType("grass", True)
    grass.load_variations("assets/grass/grass_", 256)
    return grass


def _random_point(zone_x: int, zone_y: int) -> tuple[int, int]:
    x = random_int(ZONE_SIZE - 2) + 1 + zone_x * ZONE_SIZE
    y = random_int(ZONE_SIZE - 2) + 1 + zone_y * ZONE_SIZE
    return x, y


def _mark_shallows(x: int, y: int, tiles: list[MapTile]) -> None:
    for neighbour in adjacent_tiles(x, y, tiles):
        if neighbour.tile_type.name == "sea":
            neighbour.image_index = 1


def _scatter_islands(tiles: list[MapTile], zone_x: int, zone_y: int, grass: TileType) -> None:
    for _ in range(dice_roll(3)):
        x, y = _random_point(zone_x, zone_y)
        set_tile(x, y, tiles, grass)
        _mark_shallows(x, y, tiles)


def _grow_island(tiles: list[MapTile], zone_x: int, zone_y: int, grass: TileType) -> None:
    seeds = [tile_at(*_random_point(zone_x, zone_y), tiles) for _ in range(VORONOI_SEEDS)]
    centre = tile_at(
        ZONE_SIZE // 2 + zone_x * ZONE_SIZE, ZONE_SIZE // 2 + zone_y * ZONE_SIZE, tiles
    )

    def nearest_seed(tile: MapTile) -> int:
        return min(range(len(seeds)), key=lambda k: pythagorean_distance(seeds[k], tile))

    central_zone = nearest_seed(centre)
    zone_tiles = [
        tile_at(x + zone_x * ZONE_SIZE, y + zone_y * ZONE_SIZE, tiles)
        for x in range(ZONE_SIZE)
        for y in range(ZONE_SIZE)
    ]
    island = [tile for tile in zone_tiles if nearest_seed(tile) == central_zone]
    for tile in island:
        tile.set_tile_type(grass)


def _shade_shores(tiles: list[MapTile]) -> None:
    for tile in tiles:
        if tile.tile_type.name == "grass":
            _mark_shallows(tile.x, tile.y, tiles)
            tile.image_index = adjacent_type_mask(tile.x, tile.y, tiles, "sea")


def generate_tiles() -> list[MapTile]:
    """Generate a random map of open sea, archipelagos and large islands."""
    sea = _sea_type()
    grass = _grass_type()
    tiles = [
        MapTile(x, y, sea)
        for x in range(_BOARD.screen_width)
        for y in range(_BOARD.screen_height)
    ]
    for zone_x in range(_BOARD.screen_width // ZONE_SIZE):
        for zone_y in range(_BOARD.screen_height // ZONE_SIZE):
            kind = random_int(3)
            if kind == _ARCHIPELAGO:
                _scatter_islands(tiles, zone_x, zone_y, grass)
            elif kind == _BIG_ISLAND:
                _grow_island(tiles, zone_x, zone_y, grass)
    _shade_shores(tiles)
    return tiles


@dataclass
class Level:
    """A map of tiles, stored column by column."""

    tiles: list[MapTile] = field(default_factory=generate_tiles)

    def tile(self, x: int, y: int) -> MapTile:
        """The tile at a tile coordinate."""
        return tile_at(x, y, self.tiles)

    def _can_host(self, tile: MapTile) -> bool:
        return (
            not tile.has_city()
            and tile.tile_type.name != "sea"
            and adjacent_type_mask(tile.x, tile.y, self.tiles, "sea") > 0
        )

    def create_cities(self, cities: list[City]) -> None:
        """Place each city on a random free land tile that touches the sea."""
        for city in cities:
            if not any(self._can_host(tile) for tile in self.tiles):
                raise ValueError(f"no free coastal tile left for city {city.name!r}")
            while True:
                x = random_int(_BOARD.screen_width)
                y = random_int(_BOARD.screen_height)
                target = self.tile(x, y)
                if self._can_host(target):
                    target.city = city
                    city.x, city.y = x, y
                    break