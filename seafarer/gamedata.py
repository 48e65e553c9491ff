"""Dimensions of the playing field."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameData:
    """Size of the map in tiles and of a tile in pixels."""

    screen_width: int = 30
    screen_height: int = 20
    tile_width: int = 16
    tile_height: int = 16

    def contains(self, x: int, y: int) -> bool:
        """Whether the tile coordinate lies on the map."""
        return 0 <= x < self.screen_width and 0 <= y < self.screen_height

    def tile_index(self, x: int, y: int) -> int:
        """Index into the column-major tile list for a tile coordinate."""
        if not self.contains(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return x * self.screen_height + y