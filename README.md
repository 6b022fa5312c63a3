# solong

A small top-down puzzle game played on a tile map. You move the player
around the map, pick up every potion, and then walk through the exit door.
The door stays shut until the last potion has been collected.

## Installing

```
pip install .
```

The game window is drawn with pygame. To install the test tools as well:

```
pip install .[test]
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the path of a map file. With any
other number of arguments it prints `Enter the path of the map only` and
exits with status 1. A map that cannot be read or is not playable is
reported on standard error and the command exits with status 1.

Sprites are read from XPM files in a `textures` directory relative to the
current working directory:

| File             | Drawn for                      |
|------------------|--------------------------------|
| `ground.xpm`     | floor                          |
| `wall.xpm`       | wall                           |
| `player.xpm`     | player                         |
| `potion.xpm`     | potion                         |
| `door_close.xpm` | exit while potions remain      |
| `door_open.xpm`  | exit once every potion is gone |

Each tile takes 32×32 pixels of the window.

Move with `W` `A` `S` `D` or the arrow keys; a move happens when the key is
released. Each step onto a floor tile is counted and the count is printed as
`moves : N`. Stepping onto a potion picks it up without counting a move.
Walking into the exit with every potion collected wins the game. `Escape` or
closing the window ends the game.

## What is not included

The package ships no sprite images. The `textures` directory with the six
XPM files above has to be supplied by you; without it the game reports an
error loading the images and exits. From Python, `solong.app.run(map_path,
sprite_dir)` accepts another directory.

## Map format

A map is a plain text file with one row per line:

| Character | Meaning              |
|-----------|----------------------|
| `1`       | wall                 |
| `0`       | floor                |
| `P`       | player start         |
| `C`       | potion (collectible) |
| `E`       | exit                 |

A map is accepted only when:

- it holds exactly one player,
- every row has the same length,
- every cell on its edge is a wall,
- every potion and at least one exit can be reached from the player's start.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.gamemap import GameMap, MapError, check_map
from solong.game import Direction, Game, MoveResult

game_map = GameMap.from_lines(["1111111", "1P0C0E1", "1111111"])
check_map(game_map)                  # raises MapError when the map is not playable

game = Game(game_map)
print(game.move(Direction.RIGHT))    # MoveResult.MOVED
print(game.move(Direction.RIGHT))    # MoveResult.COLLECTED
print(game.door_open())              # True
print(game.handle_key("d"), game.handle_key("d"))  # MoveResult.MOVED MoveResult.WON
print(game.moves, game.finished)     # 2 True
```

`GameMap.from_file(path)` reads a map from disk. A `GameMap` exposes
`rows`, `width`, `height`, `player` (a `Position` with `x` and `y`) and
`potions_count`, along with `tile`, `set_tile`, `positions_of`, `copy_rows`
and `refresh`. The individual checks are also available as `count_players`,
`is_rectangular`, `has_border_walls` and `flood_fill`.

`Game.handle_key` takes key names: `w`, `a`, `s`, `d`, `up`, `down`,
`left`, `right` and `escape`; any other name gives `MoveResult.IGNORED`.

### XPM images

`solong.xpm` decodes XPM images into plain pixel grids:

```python
from solong.xpm import xpm_from_data

image = xpm_from_data([
    "2 1 2 1",
    "r c red",
    "b c #0000FF",
    "rb",
])
print(image.width, image.height)         # 2 1
print(hex(image.pixel(0, 0)))            # 0xff0000
print(image.to_bytes(big_endian=True))   # 4 bytes per pixel
```

`read_xpm_file(path)` reads an XPM file, ignoring C comments. The colour
`None` becomes the pixel value `solong.xpm.TRANSPARENT`. Unreadable or
malformed data raises `XpmError`.

### Colours

`solong.colors` resolves X11 colour names:

```python
from solong.colors import convert_color, lookup_color, text_to_rgb

lookup_color("Navy Blue")                  # 0x80
text_to_rgb("#ff8800")                     # 0xff8800
text_to_rgb("light", "grey")               # 0xd3d3d3
convert_color(0xFFFFFF, 16, (11, 5, 5, 6, 0, 5))  # 0xffff for a 5-6-5 visual
```

Unknown names give `None` from `lookup_color` and 0 from `text_to_rgb`.