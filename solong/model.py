"""Map state shared by the reader, the line validators and the reachability check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
VISITED = "x"


class MapError(Exception):
    """A map file or map line that breaks the rules of the game."""


@dataclass(frozen=True)
class Coord:
    """A cell position: column ``x`` and row ``y``, both counted from zero."""

    x: int
    y: int


def _origin() -> Coord:
    return Coord(0, 0)


@dataclass
class MapState:
    """A map being read: its rows, its size and the elements found so far.

    ``grid`` holds the rows without line terminators, ``width`` is the
    length of the first row and ``height`` the number of rows in the file.
    ``coin`` is the position of the most recently found coin.
    """

    grid: List[str] = field(default_factory=list)
    height: int = 0
    width: int = 0
    coin_count: int = 0
    exit_count: int = 0
    player_count: int = 0
    player: Coord = field(default_factory=_origin)
    exit: Coord = field(default_factory=_origin)
    coin: Coord = field(default_factory=_origin)

    def copy_grid(self) -> List[List[str]]:
        """A mutable copy of the grid, one list of characters per row."""
        return [list(row) for row in self.grid]