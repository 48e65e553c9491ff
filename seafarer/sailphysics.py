"""Compass directions, wind and how a ship's heading relates to it."""

import sys
from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """Compass heading, numbered clockwise from north."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7


class PointOfSail(IntEnum):
    """Angle of a ship's heading relative to the wind."""

    INTO_WIND = 0
    CLOSE_HAUL = 1
    BEAM_REACH = 2
    BROAD_REACH = 3
    RUN_DOWNWIND = 4


class Rudder(IntEnum):
    """Position of the rudder."""

    PORT = 0
    STRAIGHT = 1
    STARBOARD = 2


class WindSpeed(IntEnum):
    """Strength of the wind."""

    FEEBLE_BREEZE = 1
    LIGHT_WINDS = 2
    STEADY_GUSTS = 3
    HEAVY_SQUALLS = 4


@dataclass
class Wind:
    """Current wind: its strength and the direction it blows from."""

    speed: int
    direction: int

    def direction_name(self) -> str:
        """Compass abbreviation of the wind direction, or '' if unknown."""
        try:
            return Direction(self.direction).name
        except ValueError:
            return ""

    def describe(self) -> str:
        """One-line human readable summary of the wind."""
        return f"Wind Strength: {int(self.speed)} Wind Direction: {self.direction_name()}"

    def display(self) -> str:
        """Write the summary line to standard output and return it."""
        text = self.describe()
        sys.stdout.write(text + "\n")
        return text


def is_turn_windward(previous: int, present: int, wind: int) -> bool:
    """Whether turning from ``previous`` to ``present`` heads into ``wind``.

    Only a turn from N to NW is treated as a port-side turn; every other turn
    is judged as a starboard one.
    """
    if present == Direction.NW and previous == Direction.N:
        return present < wind or wind == Direction.N
    return present > wind or (present == Direction.N and wind == Direction.NW)


def points_of_sail(sail_dir: int, wind_dir: int) -> PointOfSail:
    """Point of sail for a ship heading ``sail_dir`` with wind from ``wind_dir``."""
    sail = Direction(sail_dir)
    wind = Direction(wind_dir)
    offset = (sail - wind) % len(Direction)
    return PointOfSail(min(offset, len(Direction) - offset))