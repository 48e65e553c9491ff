"""The game loop: input, turn resolution and drawing."""

from __future__ import annotations

import argparse
from functools import lru_cache

import pygame

from seafarer.gamedata import GameData
from seafarer.maptile import City
from seafarer.player import Player
from seafarer.world import World, new_world

SCREEN_SIZE = (640, 480)
BACKGROUND = (0x60, 0x30, 0x00)
MENU_COLOUR = (0x60, 0x30, 0x00)
MENU_RECT = (20, 120, 280, 60)
_BOARD = GameData()


@lru_cache(maxsize=None)
def _image(path: str) -> pygame.Surface:
    return pygame.image.load(path)


def _default_cities() -> list[City]:
    return [City("Havana", "assets/city_0.png")]


class Game:
    """A running game: the world, the player and the cities."""

    def __init__(
        self,
        world: World | None = None,
        player: Player | None = None,
        cities: list[City] | None = None,
    ) -> None:
        self.world = world if world is not None else new_world()
        self.player = player if player is not None else Player("Dread Pirate Roberts")
        self.cities = cities if cities is not None else _default_cities()
        self.world.level.create_cities(self.cities)

    def update(self, key: str | None) -> bool:
        """Handle the key pressed this tick and perform the chosen action."""
        self.player.handle_input(key)
        return self.player.current_action(self.world)

    def _blit(self, screen: pygame.Surface, path: str, x: int, y: int) -> None:
        screen.blit(_image(path), (x * _BOARD.tile_width, y * _BOARD.tile_height))

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the map, the player's ship, the menu and the cities."""
        screen.fill(BACKGROUND)
        for tile in self.world.level.tiles:
            self._blit(screen, tile.image_path(), tile.x, tile.y)
        ship = self.player.ship
        self._blit(screen, ship.ship_type.model, ship.x, ship.y)
        if self.player.current_menu == 1:
            pygame.draw.rect(screen, MENU_COLOUR, pygame.Rect(*MENU_RECT))
        for city in self.cities:
            self._blit(screen, city.sprite, city.x, city.y)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="seafarer",
        description="Sail a ship across a generated sea. Q/W/E steer, S anchors, O toggles the menu.",
    )
    parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE, pygame.RESIZABLE | pygame.SCALED)
        pygame.display.set_caption("Seafarer")
        game = Game()
        clock = pygame.time.Clock()
        running = True
        while running:
            key = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and key is None:
                    key = pygame.key.name(event.key)
            game.update(key)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0