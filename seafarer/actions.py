"""Actions an actor can take on its turn."""

from typing import Any

from seafarer.sailphysics import PointOfSail, Rudder, WindSpeed, is_turn_windward, points_of_sail
from seafarer.ship import Ship


def _finish(actor: Any, world: Any, *, advances: bool) -> bool:
    """Report whether the action just taken by ``actor`` advances the turn."""
    return bool(advances) and actor is not None and world is not None


def no_action(actor: Any, world: Any) -> bool:
    """Do nothing; the turn does not advance."""
    return _finish(actor, world, advances=False)


def open_menu(actor: Any, world: Any) -> bool:
    """Open the actor's menu; the turn does not advance."""
    actor.current_menu = 1
    return _finish(actor, world, advances=False)


def close_menu(actor: Any, world: Any) -> bool:
    """Close the actor's menu; the turn does not advance."""
    actor.current_menu = 0
    return _finish(actor, world, advances=False)


def _turn(ship: Ship, world: Any) -> None:
    if ship.rudder == Rudder.STRAIGHT:
        return
    step = ship.port_turn if ship.rudder == Rudder.PORT else ship.starboard_turn
    original = ship.direction
    step()
    if is_turn_windward(original, ship.direction, world.wind.direction):
        # Turning into the wind allows only a single point of turn.
        return
    for _ in range(ship.ship_type.max_turn_speed - 1):
        step()


def _move_points(ship: Ship, world: Any) -> int:
    if ship.anchored:
        return 0
    wind = world.wind
    point = points_of_sail(ship.direction, wind.direction)
    if point in (PointOfSail.CLOSE_HAUL, PointOfSail.BEAM_REACH):
        return 2 if wind.speed == WindSpeed.STEADY_GUSTS else 1
    if point == PointOfSail.BROAD_REACH:
        if wind.speed == WindSpeed.STEADY_GUSTS:
            return 1
        if wind.speed == WindSpeed.LIGHT_WINDS:
            return 2
        return 3
    if point == PointOfSail.RUN_DOWNWIND:
        return 1
    return 0


def sail(ship: Ship, world: Any) -> bool:
    """Turn according to the rudder, then move as far as the wind allows."""
    _turn(ship, world)
    ship.move_points = _move_points(ship, world)
    for _ in range(ship.move_points):
        ship.move()
    return True


def anchor(ship: Ship, world: Any) -> bool:
    """Drop or weigh anchor."""
    ship.anchored = not ship.anchored
    return True