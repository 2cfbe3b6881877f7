# labgame

labgame is a small labyrinth game. You move the green avatar through a maze
while red enemies hunt you along the shortest path. If an enemy reaches
your cell, the level is loaded again from its file. A pixel minimap in the
top-left corner of the window shows the maze, and the current time and date
are printed beside it.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
labgame [--level LAB1.LB] [--font MyFont.FNT]
```

- `--level` is the maze file. The default is `LAB1.LB` in the current
  directory. If the file cannot be read, the command prints `FAIL!` and
  exits with status 1.
- `--font` is a raw 8x16 bitmap font of 256 glyphs. The default is
  `MyFont.FNT`. If the file is missing, a blank font is used, so the clock
  is not visible.

Controls:

| Key         | Action                                      |
|-------------|---------------------------------------------|
| `W A S D`   | move up, left, down, right                  |
| `V`         | open or close the door at column 18, row 15 |
| `+` / `=`   | zoom the minimap in (up to 13x)             |
| `-` / `_`   | zoom the minimap out (down to 1x)           |
| `Esc`       | quit                                        |

The window title shows the frame rate. Each enemy takes one step towards
the avatar at its own fixed interval, chosen at random between 1/3 and
10/3 seconds when the level is loaded.

## Maze files

A maze is plain text with one row per line:

- `*` is a wall
- `a` is where the avatar starts
- `e` is an enemy (at most eight; any more become floor)
- a space, or any other character, is floor

A maze is at most 50 by 50 cells, and anything beyond that is ignored. The
minimap shows only the first 30 rows.

## What it does not do

The main view is a flat top-down grid drawn with pygame, centred on a
camera that follows the avatar. It is not a 3D scene. When you are caught,
nothing is shown on screen: the level simply starts again. The message is
kept in `Game.messages`, and `Game.deaths` counts how many times it
happened.

## Using it as a library

The parts can also be used on their own:

```python
import random
from labgame.lab import parse_labyrinth
from labgame.gfx import Frame

lab = parse_labyrinth("*****\n*a e*\n*****\n", random.Random(1))
lab.move("d")
frame = Frame(130, 33)
lab.draw(frame)
print(lab.is_dead())
```

- `labgame.lab` has `Cell`, `Vec`, `Enemy`, `Labyrinth`, `parse_labyrinth`
  and `load_labyrinth`.
  - `Labyrinth.solution()` returns the distance map that the enemies
    follow, with -1 for unreachable cells.
  - `ai_step(now)` moves every enemy whose interval has elapsed.
  - `move(key)` handles a key and returns `True` when the avatar walks into
    an enemy.
  - `toggle_door()` opens or closes the door cell.
- `labgame.gfx` has `Frame`, a buffer of 32-bit ARGB pixels with
  `put_pixel`, `pixel`, `circle`, `clear`, `clear_black`, `resize`,
  `draw_letter`, `draw_letters`, `print_time` and `to_bgra_bytes`. It also
  has `Font`, `load_font` and `format_time`.
- `labgame.app` has:
  - `Timer`, which tracks frame time and frames per second.
  - `Camera`, which eases towards the avatar.
  - `Game`, which ties together the level, the minimap frame, the zoom and
    the keys.
  - `main`, the entry point of the `labgame` command.
- `labgame.glut` has enums for windowing constants: `DisplayMode`,
  `MouseButton`, `ButtonState`, `SpecialKey`, `Modifier` and `Cursor`. It
  also has the helpers `display_mode`, `special_key_name` and
  `modifiers_from_mask`.
- `labgame.comdf` has `Point2D`, `Rectangle` and byte and bit helpers:
  `sign`, `lo_byte`, `hi_byte`, `lo_word`, `hi_word`, `long_byte`,
  `make_word`, `make_long`, `make_long_bytes`, `set_bit`, `reset_bit`,
  `get_bit` and `has_bits`.