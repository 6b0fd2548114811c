# solong

A small tile-based puzzle game. You walk a player across a grid map, pick up
every collectible, and then step onto the exit. Enemies wander the map;
touching one ends the game.

## Installing

```
pip install .
```

This installs the `solong` command. It uses `pygame` for the window.

## Playing

```
solong maps/level1.ber
```

The command takes exactly one argument: the path of a map file. It prints
its progress while loading, reports why a map is invalid, and exits with
status 1 when the map or the textures cannot be loaded.

Controls (acted on when the key is pressed):

| Key   | Action       |
|-------|--------------|
| W     | move up      |
| S     | move down    |
| A     | move left    |
| D     | move right   |
| Esc   | quit         |

Closing the window also quits. The move count is shown as `Score: N` near
the top-left corner. Walls block the player, and so does the exit while any
collectible is left. Stepping onto an enemy loses the game; stepping onto the
exit with every collectible taken wins it. A message then appears in the
middle of the window, and from then on only Esc does anything.

Enemies move once every 9000 passes of the event loop. All enemies take the
same step (up, down, left or right), chosen from the frame count and the
player's position; an enemy only moves onto floor, and an enemy that reaches
the player loses the game.

## Map files

A map is a plain text file. Every line is one row of tiles. All rows must
have the same width as the first. The characters are:

| Char | Tile        |
|------|-------------|
| `0`  | floor       |
| `1`  | wall        |
| `C`  | collectible |
| `E`  | exit        |
| `P`  | player      |
| `X`  | enemy       |

A valid map has at least one collectible, exactly one exit and exactly one
player. Any other character, including a carriage return at the end of a
line, makes the map invalid.

Example:

```
1111111
1P0C0E1
10X0001
1111111
```

## Textures

Tiles are drawn from XPM images loaded from `textures/` in the current
directory: `player.xpm`, `wall.xpm`, `collectible.xpm`, `exit.xpm`,
`floor.xpm` and `enemy.xpm`. Each map cell is 32×32 pixels. Every cell is
first drawn with the floor image, then with the image of its tile.

## Using the library

The pieces can be used on their own:

```python
from solong.gamemap import parse_map
from solong.game import Game

game_map = parse_map(["1111", "1PCE", "1111"])
game_map.validate()          # raises solong.gamemap.MapError if invalid
game = Game(game_map)
game.move_player(2, 1)       # picks up the collectible
print(game.status_text())    # Score: 1
```

- `solong.gamemap`: `load_map`, `parse_map`, `GameMap` (`validate`, `find`,
  `rows`) and `MapError`.
- `solong.game`: `Game` with `move_player`, `move_enemies`, `handle_key`,
  `handle_frame` and `status_text`; the `Outcome` and `Key` enums.
- `solong.display`: `Renderer`, which draws a game into a pygame surface
  (`draw`) or plays it in a window (`run`), and the `main` command function.
- `solong.window`: `Connection` and `Window`, an event-hook registry and
  event loop driven by any iterable of events.
- `solong.xpm`: `load_xpm` and `parse_xpm` read XPM pixmaps into
  `solong.ximage.Image` pixel buffers; colour names are resolved by
  `solong.colors.lookup_color`.
- `solong.lines`: `LineReader` and `read_lines` read a stream line by line
  through a fixed-size buffer.
- Small helpers: `solong.chars` (ASCII classification), `solong.strings`
  (`atoi`, `itoa`, `split`), `solong.memory` (byte-buffer operations),
  `solong.printf` (`format_text`, `printf`) and `solong.linkedlist`
  (`LinkedList`, `Node`).

## Limitations

- Only reading XPM images is supported; the package does not write them.
- Textures are always looked up in `textures/` under the current directory
  when the game is started from the command.

## Running the tests

```
pip install .[test]
pytest
```