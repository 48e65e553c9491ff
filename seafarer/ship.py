"""Ships and their movement on the map."""

from dataclasses import dataclass

from seafarer.gamedata import GameData
from seafarer.sailphysics import Direction, Rudder

_BOARD = GameData()

_STEPS = {
    Direction.N: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (1, 1),
    Direction.S: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
    Direction.NW: (-1, -1),
}


@dataclass
class ShipType:
    """A class of ship: its sprite and sailing capabilities."""

    name: str
    model: str
    max_move_points: int
    max_turn_speed: int


@dataclass
class Ship:
    """A ship on the map."""

    name: str
    ship_type: ShipType
    x: int = 5
    y: int = 6
    rudder: Rudder = Rudder.STRAIGHT
    direction: Direction = Direction.N
    move_points: int = 0
    anchored: bool = False

    def port_turn(self) -> None:
        """Turn one compass point anticlockwise."""
        self.direction = Direction((self.direction - 1) % len(Direction))

    def starboard_turn(self) -> None:
        """Turn one compass point clockwise."""
        self.direction = Direction((self.direction + 1) % len(Direction))

    def move(self) -> None:
        """Advance one tile along the heading, stopping at the map's edges."""
        dx, dy = _STEPS[Direction(self.direction)]
        if (dx < 0 and self.x > 0) or (dx > 0 and self.x < _BOARD.screen_width - 1):
            self.x += dx
        if (dy < 0 and self.y > 0) or (dy > 0 and self.y < _BOARD.screen_height - 1):
            self.y += dy