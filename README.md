# seafarer

A small turn-based sailing game. You command a carrack on a 30 × 20 tile sea
that is dotted with randomly generated archipelagos and islands, and you have
to work with the wind to get anywhere.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Playing

Start the game with:

```
seafarer
```

`seafarer --help` shows a short summary of the controls; the command takes no
other options.

The game loads its tile, ship and city images from an `assets/` directory
under the current working directory (for example `assets/sea_dither_5.png`,
`assets/grass/grass_0.png` to `assets/grass/grass_255.png`,
`assets/carrack.png` and `assets/city_0.png`). These images are not part of
the package; you have to supply them yourself.

### Controls

| Key | Action                                        |
|-----|-----------------------------------------------|
| Q   | Put the rudder to port and sail one turn      |
| W   | Hold the rudder straight and sail one turn    |
| E   | Put the rudder to starboard and sail one turn |
| S   | Drop or weigh anchor                          |
| O   | Open or close the menu                        |

Only the first key pressed in a frame is acted on.

### Sailing

The wind has a direction (one of the eight compass points) and a strength,
chosen when the world is created and printed to the console. How far your
ship moves each turn depends on its point of sail relative to the wind:

- heading straight into the wind, the ship does not move;
- close-hauled or on a beam reach it moves one tile, or two in steady gusts;
- on a broad reach it moves three tiles, two in light winds, one in steady gusts;
- running downwind it moves one tile.

With the rudder to port or starboard, a ship turns up to its maximum turn
speed (two points for the carrack), but only one point when
`is_turn_windward` judges the turn to be towards the wind. An anchored ship
stays where it is. Ships stop at the edges of the map.

### The map

The map is split into 10 × 10 zones. Each zone is open sea, an archipelago of
one to three single-tile islands, or one larger island grown from a small
Voronoi diagram. Sea next to land is drawn as shallow water, and each land
tile picks its shore image from which of its eight neighbours are sea. The
city of Havana is placed on a random land tile that touches the sea.

## Using the library

The game logic can be used on its own, without opening a window:

```python
from seafarer.sailphysics import Direction, PointOfSail, points_of_sail

assert points_of_sail(Direction.N, Direction.S) is PointOfSail.RUN_DOWNWIND
```

Modules:

- `seafarer.rng`: `random_int`, `dice_roll`
- `seafarer.gamedata`: `GameData` (map and tile sizes, `contains`, `tile_index`)
- `seafarer.sailphysics`: `Direction`, `PointOfSail`, `Rudder`, `WindSpeed`,
  `Wind`, `is_turn_windward`, `points_of_sail`
- `seafarer.ship`: `Ship`, `ShipType`
- `seafarer.actions`: `sail`, `anchor`, `open_menu`, `close_menu`, `no_action`
- `seafarer.maptile`: `City`, `TileType`, `MapTile`
- `seafarer.level`: `Level`, `generate_tiles`, `tile_at`, `set_tile`,
  `adjacent_tiles`, `adjacent_type_mask`, `pythagorean_distance`
- `seafarer.world`: `World`, `new_world`
- `seafarer.player`: `Player` (`handle_input` takes a key name such as `"q"`)
- `seafarer.game`: `Game` (`update`, `draw`), `main`

Tile types and ships refer to their images by path only; images are loaded
just when `Game.draw` blits them, so everything except drawing works without
the asset files.

## What it does not do

The game is a sketch. The menu is an empty box with nothing in it; cities
are only drawn, with no trading or docking; there is a single ship and no
other vessels; the wind never changes once the world is created; and there
is no saving or loading of a game.

## Running the tests

```
pytest
```