"""The world: the map and the wind blowing over it."""

from dataclasses import dataclass, field

from seafarer.level import Level
from seafarer.rng import dice_roll, random_int
from seafarer.sailphysics import Direction, Wind, WindSpeed


@dataclass
class World:
    """Current wind and level."""

    wind: Wind
    level: Level = field(default_factory=Level)


def new_world() -> World:
    """Create a world with a random wind and map, and announce the wind."""
    wind = Wind(speed=WindSpeed(dice_roll(4)), direction=Direction(random_int(8)))
    world = World(wind=wind, level=Level())
    world.wind.display()
    return world