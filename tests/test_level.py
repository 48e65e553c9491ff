import pytest

from seafarer.gamedata import GameData
from seafarer.level import (
    Level,
    adjacent_tiles,
    adjacent_type_mask,
    generate_tiles,
    index_from_xy,
    pythagorean_distance,
    set_tile,
    tile_at,
)
from seafarer.maptile import City, MapTile, TileType

BOARD = GameData()


def make_tiles(land=()):
    sea = TileType("sea", True, ["sea0.png", "sea1.png"])
    grass = TileType("grass", True, [f"g{n}.png" for n in range(256)])
    tiles = [
        MapTile(x, y, sea) for x in range(BOARD.screen_width) for y in range(BOARD.screen_height)
    ]
    for x, y in land:
        set_tile(x, y, tiles, grass)
    return tiles


def test_index_is_column_major():
    assert index_from_xy(0, 0) == 0
    assert index_from_xy(0, 1) == 1
    assert index_from_xy(1, 0) == BOARD.screen_height


def test_index_outside_map_raises():
    with pytest.raises(IndexError):
        index_from_xy(BOARD.screen_width, 0)


def test_tile_at_matches_coordinates():
    tiles = make_tiles()
    tile = tile_at(7, 11, tiles)
    assert (tile.x, tile.y) == (7, 11)


def test_set_tile_changes_type():
    tiles = make_tiles(land=[(4, 4)])
    assert tile_at(4, 4, tiles).tile_type.name == "grass"
    assert tile_at(4, 5, tiles).tile_type.name == "sea"


def test_adjacent_tiles_interior_and_corner():
    tiles = make_tiles()
    inner = adjacent_tiles(5, 5, tiles)
    assert {(t.x, t.y) for t in inner} == {
        (x, y) for x in (4, 5, 6) for y in (4, 5, 6) if (x, y) != (5, 5)
    }
    corner = adjacent_tiles(0, 0, tiles)
    assert {(t.x, t.y) for t in corner} == {(0, 1), (1, 0), (1, 1)}


def test_mask_all_or_nothing():
    tiles = make_tiles()
    assert adjacent_type_mask(5, 5, tiles, "sea") == 0b11111111
    assert adjacent_type_mask(5, 5, tiles, "grass") == 0


def test_mask_bits_match_neighbour_count():
    tiles = make_tiles(land=[(4, 4), (6, 5), (5, 6)])
    mask = adjacent_type_mask(5, 5, tiles, "grass")
    grass_near = sum(t.tile_type.name == "grass" for t in adjacent_tiles(5, 5, tiles))
    assert bin(mask).count("1") == grass_near == 3


def test_mask_first_neighbour_is_high_bit():
    tiles = make_tiles(land=[(4, 4)])
    assert adjacent_type_mask(5, 5, tiles, "grass") == 1 << 7


def test_mask_off_map_counts_as_miss():
    tiles = make_tiles()
    mask = adjacent_type_mask(0, 0, tiles, "sea")
    assert bin(mask).count("1") == len(adjacent_tiles(0, 0, tiles))


def test_pythagorean_distance():
    sea = TileType("sea", True)
    assert pythagorean_distance(MapTile(0, 0, sea), MapTile(3, 4, sea)) == 5
    assert pythagorean_distance(MapTile(0, 0, sea), MapTile(1, 1, sea)) == 1
    a, b = MapTile(2, 9, sea), MapTile(7, 1, sea)
    assert pythagorean_distance(a, b) == pythagorean_distance(b, a)


@pytest.mark.parametrize("attempt", range(5))
def test_generated_map_invariants(attempt):
    tiles = generate_tiles()
    assert len(tiles) == BOARD.screen_width * BOARD.screen_height
    for index, tile in enumerate(tiles):
        assert index_from_xy(tile.x, tile.y) == index
        assert tile.tile_type.name in {"sea", "grass"}
        assert tile.image_path().endswith(".png")
        near_grass = any(
            t.tile_type.name == "grass" for t in adjacent_tiles(tile.x, tile.y, tiles)
        )
        if tile.tile_type.name == "grass":
            assert tile.image_index == adjacent_type_mask(tile.x, tile.y, tiles, "sea")
        else:
            assert tile.image_index == int(near_grass)


def test_level_tile():
    level = Level(tiles=make_tiles())
    tile = level.tile(3, 4)
    assert (tile.x, tile.y) == (3, 4)


def test_create_cities_on_coast():
    level = Level(tiles=make_tiles(land=[(3, 4), (10, 10)]))
    cities = [City("Havana", "c.png"), City("Nassau", "c.png")]
    level.create_cities(cities)
    placed = {(c.x, c.y) for c in cities}
    assert placed == {(3, 4), (10, 10)}
    for city in cities:
        assert level.tile(city.x, city.y).city is city


def test_create_cities_without_land_fails():
    level = Level(tiles=make_tiles())
    with pytest.raises(ValueError):
        level.create_cities([City("Havana", "c.png")])


def test_create_cities_runs_out_of_coast():
    level = Level(tiles=make_tiles(land=[(3, 4)]))
    with pytest.raises(ValueError):
        level.create_cities([City("Havana", "c.png"), City("Nassau", "c.png")])