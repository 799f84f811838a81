# gold_digger

A small tile-based puzzle game. You walk a player across a walled map,
pick up every coin and then step onto an exit. The number of moves made
so far is printed after every step.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
gold-digger path/to/level.ber
```

The command needs exactly one argument, and that argument must end in
`.ber`. If it does not, if the map is invalid, or if a sprite file is
missing, a message starting with `Error` is printed and the command exits
with status 1. The game opens a pygame window, so it needs a display.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Esc | quit       |

Closing the window also quits. An exit blocks the player until every coin
is collected; stepping onto it after that counts a final step and ends the
game.

The sprites are read as XPM files from `./pics/` relative to the directory
the game is started in: `player64.xpm`, `coin64.xpm`, `exit64.xpm`,
`wall64.xpm` and `back64.xpm`. Each tile is 64×64 pixels. No sprites ship
with the package.

## Map format

A `.ber` map is a rectangle of characters, one row per line, with no
newline after the last row:

- `1` wall
- `0` empty floor
- `P` the player's start (exactly one)
- `C` a coin (at least one)
- `E` an exit (at least one)

The map must be surrounded by walls and must contain at least one `0`.
No other characters are allowed inside it.

```
1111111111
1P0C00C0E1
1111111111
```

## Using it as a library

```python
from gold_digger.mapcheck import load_map, MapError

try:
    game_map = load_map("level.ber")
except MapError as err:
    print(err)
else:
    print(game_map.width, game_map.height, game_map.coins)
```

- `gold_digger.mapcheck` – `load_map`, `validate_map` and the single checks
  (`check_walls`, `check_rectangular`, `check_characters`,
  `check_unwanted`); every failure raises `MapError`.
- `gold_digger.game` – `Game` holds the game state and can be driven
  without a window through `Game.move(Direction.UP)` and
  `Game.handle_key(keycode)`; `Game.sprites()` lists what to draw and where.
  Pass `on_step` to receive the step count instead of having it printed.
- `gold_digger.xpm` – `load_xpm` and `parse_xpm` decode XPM images into an
  `XpmImage` of 0xRRGGBB pixel rows; errors raise `XpmError`.
- `gold_digger.colors` – `lookup_color` resolves named XPM colours.
- `gold_digger.printf` – `format_string` and `printf`, a small formatter
  for `%c %s %d %i %u %x %X %p %%`.
- `gold_digger.app` – `main(argv=None)`, the command above.