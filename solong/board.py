"""Reading a map file, checking it and finding what the player cannot reach."""

from __future__ import annotations

import errno
import os
from typing import FrozenSet, List, Tuple, Union

from solong.fmt import printf
from solong.model import COIN, EXIT, VISITED, WALL, Coord, MapError, MapState
from solong.reader import LineReader
from solong.textops import split
from solong.validation import check_elements, check_line

MAP_SUFFIX = ".ber"

PathLike = Union[str, "os.PathLike[str]"]


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def check_file_name(name: str) -> bool:
    """True when everything from the first '.' in ``name`` is exactly '.ber'."""
    dot = name.find(".")
    return dot >= 0 and name[dot:] == MAP_SUFFIX


def read_map(path: PathLike) -> MapState:
    """Read and validate the map file at ``path``.

    Raises OSError when the file cannot be opened and MapError when a line
    breaks the map rules.
    """
    with open(path, encoding="latin-1", newline="") as handle:
        lines = list(LineReader(handle))
    state = MapState(height=len(lines))
    for row, line in enumerate(lines):
        if row == 0:
            state.width = len(_strip_newline(line))
        check_line(line, state, row)
        check_elements(line, state, row)
        state.grid.append(_strip_newline(line))
    printf("Final i: %d\n", len(lines))
    printf("Final width: %d\n", len(lines[0]) if lines else 0)
    printf("Final height: %d\n", state.height)
    return state


def flood_fill(state: MapState, x: int, y: int) -> FrozenSet[Coord]:
    """Every cell reachable from (x, y) without crossing a wall.

    The state itself is left unchanged.
    """
    grid = state.copy_grid()
    reached = set()
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if cx < 0 or cy < 0 or cx >= state.width or cy >= state.height or cy >= len(grid):
            continue
        row = grid[cy]
        if cx >= len(row) or row[cx] in (WALL, VISITED):
            continue
        row[cx] = VISITED
        reached.add(Coord(cx, cy))
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))
    return frozenset(reached)


def find_unreachable(state: MapState) -> List[Tuple[str, Coord]]:
    """Coins and exits the player cannot reach, in row-major order.

    Each entry is ``("coin", position)`` or ``("exit", position)``.
    """
    reached = flood_fill(state, state.player.x, state.player.y)
    found = []
    for y, row in enumerate(state.grid):
        for x, ch in enumerate(row):
            position = Coord(x, y)
            if position in reached:
                continue
            if ch == COIN:
                found.append(("coin", position))
            elif ch == EXIT:
                found.append(("exit", position))
    return found


def check_map(argument: str) -> MapState:
    """Check the map named by ``argument`` and report unreachable elements.

    ``argument`` must hold exactly one space-separated word; otherwise
    ValueError is raised. A bad file name or map raises MapError, an
    unreadable file OSError.
    """
    words = split(argument, " ")
    if len(words) != 1:
        raise ValueError(os.strerror(errno.EINVAL))
    name = words[0]
    if not check_file_name(name):
        raise MapError("Invalid file name")
    state = read_map(name)
    for kind, position in find_unreachable(state):
        printf("Unreachable %s at (%d, %d)\n", kind, position.x, position.y)
    return state