# tilejumper

A small tile-based platformer built on pygame. A player walks and
double-jumps across a stage of 16×16 terrain tiles laid over a repeating
64×64 background, and breaks boxes by touching them.

## Installing

```
pip install .
```

Install the test extra as well (`pip install .[test]`) to run the test suite
with `pytest`.

## Playing

From a directory that holds the game's assets, run:

```
tilejumper
```

By default the game reads these files, relative to the working directory:

- `levels/lvl1/static.txt`: the level layout
- `src/backgrounds.bmp`: a sheet of 64×64 backgrounds placed side by side
- `src/terrain.bmp`: a sheet of 16×16 terrain tiles, 13 to a row
- `src/player_idle.bmp`: the player sprite
- `src/box_idle.bmp`: the box sprite

The first three can be chosen on the command line:

```
tilejumper --level path/to/static.txt --backgrounds path/to/backgrounds.bmp --terrain path/to/terrain.bmp
```

If the level file cannot be opened, the command prints
`Could not open file <path>` and exits with status 1. A sprite sheet that
cannot be loaded is logged as a warning and simply not drawn.

The window is 1000×600; the 480×420 stage is drawn at offset (240, 80).
The player starts at (80, 208) and two boxes, each taking three hits, stand
at (172, 112) and (120, 112).

Controls:

| Key     | Action                                   |
|---------|------------------------------------------|
| `A`     | move left                                |
| `D`     | move right                               |
| `Space` | jump (two jumps allowed before landing)  |

Close the window to quit.

## Level files

A level file starts with the index of the background to use. After it,
every tile is three integers: `x y type`. `x` and `y` are the pixel
coordinates of the tile's top-left corner on the stage, and `type` counts
sprites on the terrain sheet from the top left, moving right and then down.

```
0
0 404 1
16 404 1
32 404 2
```

Reading stops at the first token that is not an integer, and an incomplete
trailing triple is ignored. An empty file gives background 0 and no tiles.

## Using it as a library

- `tilejumper.stage.read_static(path)` reads a level file and returns
  `(background, tiles)`, where `tiles` is a list of `(x, y, type)` tuples.
- `tilejumper.stage.terrain_source_rect(tile_type)` gives the `pygame.Rect`
  of the terrain sheet that a tile type uses.
- `tilejumper.stage.Stage(width, height, level_path, background_path, terrain_path)`
  reads a level and renders it onto its `screen` surface; its `tiles` are
  used for collisions.
- `tilejumper.entity.Entity` is the abstract base of everything on the
  stage, with `x`, `y`, `width`, `height`, `speed` and `alive`, and the
  methods `update(static_elements, entities)` and `sprite()`.
- `tilejumper.player.Player` is the player. `controls(event)` handles key
  events, `move(delta_time)` moves it by a time in milliseconds, and
  `check_collision(x, y, width, height)` pushes it out of a rectangle. Its
  `clock` argument supplies the time in milliseconds (pygame's tick counter
  by default).
- `tilejumper.box.Box(x, y, hp)` loses one hit point each time a player
  starts touching it and stops being `alive` at zero.
- `tilejumper.game.step_entities(entities, tiles)` updates every entity once,
  removes dead ones from the list and returns the entities that were updated.
- `tilejumper.game.main(argv=None)` runs the game window.

## What it does not do

There is one level layout at a time and no way to move between levels. The
player's health is stored but nothing changes it, there are no enemies,
scores or win conditions, and the player's sprite is a single still frame.