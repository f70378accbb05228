# solong

`solong` reads and checks map files for a small tile-based puzzle game in
which a player collects coins and walks to the exit. It tells you whether a
map follows the rules and which coins or exits the player cannot reach.

## Map files

A map is a plain-text file whose name is `<name>.ber`: everything from the
first `.` in the name must be exactly `.ber`. Each line is a row of tiles:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `E`  | exit         |
| `C`  | coin         |

The checks applied to each line as it is read:

- only the characters above may appear;
- the first row, the last row and the first column must be walls;
- every row must be as long as the first one (the last row may lack its
  line terminator);
- blank lines are not allowed;
- there may be at most one player and at most one exit, and by the last row
  the map must hold a player, an exit and at least one coin.

Example `level.ber`:

```
1111111
1P0C0E1
1111111
```

## Command line

```
pip install .
solong level.ber
```

The command prints where the player, the exit and each coin sit, then the
number of rows and the map's width, and then one `Unreachable coin at (x, y)`
or `Unreachable exit at (x, y)` line for every coin or exit that the player
cannot reach without crossing a wall.

When the map file is unreadable, has a wrong name or breaks a rule, the
reason is written to standard error. The exit status is 1 only when the
command is not given exactly one argument, or when that argument holds more
than one space-separated word; otherwise it is 0.

## Library use

```python
from solong.board import check_file_name, read_map, find_unreachable

if check_file_name("level.ber"):
    state = read_map("level.ber")
    for kind, coord in find_unreachable(state):
        print(kind, coord.x, coord.y)
```

- `solong.board.read_map(path)` returns a `solong.model.MapState` (rows in
  `grid`, `width`, `height`, counts and `Coord` positions of the player, exit
  and last coin). It raises `solong.model.MapError` on the first broken rule
  and `OSError` when the file cannot be opened.
- `solong.board.flood_fill(state, x, y)` returns the set of `Coord` cells
  reachable from a position; `find_unreachable(state)` lists the coins and
  exits outside that set, in row order.
- `solong.board.check_map(argument)` runs the whole check the command runs.
- `solong.validation.check_line` and `check_elements` are the per-line checks.

Smaller helpers:

- `solong.chars`: ASCII classification (`is_alpha`, `is_digit`, ...),
  `atoi`, `itoa` and `put_char`/`put_str`/`put_endl`/`put_nbr` stream writers.
- `solong.textops`: `split`, `find_char`, `find_substring`, `compare_n`,
  `trim`, `substring`, and the bounded `lcopy`/`lcat`.
- `solong.fmt`: `format_string` and `printf`, supporting
  `%c %s %d %i %u %x %X %p %%`.
- `solong.reader.LineReader`: reads a text or binary stream line by line
  through a fixed-size buffer; iterate over it or call `next_line()`.

## What it does not do

The package only loads and checks maps. There is no game window, no drawing
of tiles and no player movement or move counting.

## Tests

```
pip install .[test]
pytest
```