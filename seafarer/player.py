"""The player, their ship and the keys that command it."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from seafarer.actions import anchor, close_menu, no_action, open_menu, sail
from seafarer.sailphysics import Rudder
from seafarer.ship import Ship, ShipType


def _default_ship() -> Ship:
    return Ship("Terrible", ShipType("Carrack", "assets/carrack.png", 3, 2))


_RUDDER_KEYS = {"q": Rudder.PORT, "w": Rudder.STRAIGHT, "e": Rudder.STARBOARD}


@dataclass
class Player:
    """A captain with a ship, the action chosen this tick and an open menu."""

    name: str
    ship: Ship = field(default_factory=_default_ship)
    current_menu: int = 0
    current_action: Callable[[Any], bool] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.current_action = partial(no_action, self)

    def handle_input(self, key: str | None) -> None:
        """Choose the action for a key pressed this tick, or none."""
        if key in _RUDDER_KEYS:
            self.ship.rudder = _RUDDER_KEYS[key]
            self.current_action = partial(sail, self.ship)
        elif key == "s":
            self.current_action = partial(anchor, self.ship)
        elif key == "o":
            toggle = open_menu if self.current_menu == 0 else close_menu
            self.current_action = partial(toggle, self)
        else:
            self.current_action = partial(no_action, self)