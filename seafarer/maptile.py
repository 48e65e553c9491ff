"""Map tiles, the kinds of terrain they show and the cities built on them."""

from __future__ import annotations

from dataclasses import dataclass, field

from seafarer.rng import random_int


@dataclass
class City:
    """A named city with a sprite, placed on a tile of the map."""

    name: str
    sprite: str
    x: int = 0
    y: int = 0


@dataclass
class TileType:
    """A kind of terrain and the images that can show it."""

    name: str
    navigable: bool
    images: list[str] = field(default_factory=list)

    def add_image(self, path: str) -> None:
        """Append one image to the type's variations."""
        self.images.append(path)

    def load_variations(self, prefix: str, count: int) -> None:
        """Append ``count`` numbered images named ``<prefix><n>.png``."""
        self.images.extend(f"{prefix}{n}.png" for n in range(count))


@dataclass
class MapTile:
    """One tile of the map, at a tile coordinate."""

    x: int
    y: int
    tile_type: TileType
    image_index: int = 0
    city: City | None = None

    def randomize_image_index(self) -> None:
        """Pick one of the type's images at random."""
        self.image_index = random_int(len(self.tile_type.images))

    def image_path(self) -> str:
        """Path of the image this tile shows."""
        return self.tile_type.images[self.image_index]

    def set_tile_type(self, tile_type: TileType) -> None:
        """Change the terrain, showing its first image."""
        self.tile_type = tile_type
        self.image_index = 0

    def has_city(self) -> bool:
        """Whether a city stands on this tile."""
        return self.city is not None