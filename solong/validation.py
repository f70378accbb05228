"""Checks applied to each raw map line as it is read."""

from __future__ import annotations

from solong.fmt import printf
from solong.model import COIN, EXIT, FLOOR, PLAYER, WALL, Coord, MapError, MapState

_KNOWN = frozenset((WALL, FLOOR, COIN, EXIT, PLAYER))


def check_line(line: str, state: MapState, row: int) -> None:
    """Check one raw line (terminator included) of the map at ``row``.

    Every character but the last of the raw line must be a known map
    character; the first column, the first row and the last row must be
    walls. Each row must be as long as the first one; the last row may be
    one character shorter. Raises MapError on the first broken rule.
    """
    if not line or line[0] == "\n":
        raise MapError("Unexpected new line in map!")
    last_row = state.height - 1
    for col, ch in enumerate(line[:-1]):
        if ch not in _KNOWN:
            raise MapError("Unknown character!")
        on_border = col == 0 or col == state.width or row == 0 or row == last_row
        if on_border and ch != WALL:
            raise MapError("Map is not surrounded by walls")
    full = state.width + 1
    if row == last_row and len(line) == state.width:
        return
    if len(line) != full:
        raise MapError("Map is not rectangular")


def check_elements(line: str, state: MapState, row: int) -> None:
    """Record the player, exit and coins on ``line`` into ``state``.

    A second player or exit is an error. On the last row, a map still
    lacking a player, an exit or any coin is an error listing what is missing.
    """
    for col, ch in enumerate(line):
        if ch == PLAYER:
            if state.player_count == 1:
                raise MapError("More than one player!")
            state.player_count = 1
            state.player = Coord(col, row)
            printf("Player found at (%d, %d)\n", col, row)
        elif ch == EXIT:
            if state.exit_count == 1:
                raise MapError("More than one exit!")
            state.exit_count = 1
            state.exit = Coord(col, row)
            printf("Exit found at (%d, %d)\n", col, row)
        elif ch == COIN:
            state.coin_count += 1
            state.coin = Coord(col, row)
            printf("Coin found at (%d, %d)\n", col, row)
    if state.height != row + 1:
        return
    missing = []
    if state.player_count == 0:
        missing.append("Player not found!")
    if state.exit_count == 0:
        missing.append("Exit not found!")
    if state.coin_count == 0:
        missing.append("No coins found!")
    if missing:
        raise MapError("\n".join(missing))