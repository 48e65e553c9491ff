import pytest

from seafarer.maptile import City, MapTile, TileType


def _sea():
    sea = TileType("sea", True)
    sea.add_image("sea_a.png")
    sea.add_image("sea_b.png")
    return sea


def test_city_starts_at_origin():
    city = City("Havana", "city.png")
    assert (city.x, city.y) == (0, 0)
    assert city.name == "Havana"


def test_add_image_keeps_order():
    sea = _sea()
    assert sea.images == ["sea_a.png", "sea_b.png"]


def test_load_variations_numbers_files():
    grass = TileType("grass", True)
    grass.load_variations("assets/grass/grass_", 3)
    assert grass.images == [
        "assets/grass/grass_0.png",
        "assets/grass/grass_1.png",
        "assets/grass/grass_2.png",
    ]


def test_load_variations_appends_after_existing():
    sea = _sea()
    sea.load_variations("x_", 2)
    assert sea.images[:2] == ["sea_a.png", "sea_b.png"]
    assert len(sea.images) == 4


def test_image_path_follows_index():
    tile = MapTile(2, 3, _sea())
    assert tile.image_path() == "sea_a.png"
    tile.image_index = 1
    assert tile.image_path() == "sea_b.png"


def test_image_path_out_of_range():
    tile = MapTile(0, 0, _sea(), image_index=5)
    with pytest.raises(IndexError):
        tile.image_path()


def test_set_tile_type_resets_index():
    tile = MapTile(0, 0, _sea(), image_index=1)
    grass = TileType("grass", True, ["g.png"])
    tile.set_tile_type(grass)
    assert tile.tile_type is grass
    assert tile.image_index == 0
    assert tile.image_path() == "g.png"


def test_has_city():
    tile = MapTile(0, 0, _sea())
    assert tile.has_city() is False
    tile.city = City("Havana", "city.png")
    assert tile.has_city() is True


def test_randomize_stays_in_range():
    sea = _sea()
    tile = MapTile(0, 0, sea)
    for _ in range(50):
        tile.randomize_image_index()
        assert 0 <= tile.image_index < len(sea.images)


def test_randomize_without_images_fails():
    tile = MapTile(0, 0, TileType("void", False))
    with pytest.raises(ValueError):
        tile.randomize_image_index()