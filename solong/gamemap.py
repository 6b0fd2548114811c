"""Loading and validating the tile map of the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from solong.lines import read_lines

TILE_SIZE = 32

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

_PLAIN_TILES = frozenset({FLOOR, WALL, ENEMY})


class MapError(ValueError):
    """A map could not be read or does not meet the rules."""


@dataclass
class GameMap:
    """A rectangular grid of one-character tiles; grid[y][x] is mutable."""

    grid: list[list[str]]
    width: int
    collectibles: int = 0
    exits: int = 0
    players: int = 0
    errors: list[str] = field(default_factory=list, repr=False)

    @property
    def height(self) -> int:
        return len(self.grid)

    def rows(self) -> list[str]:
        """Return the grid as a list of strings, top to bottom."""
        return ["".join(row) for row in self.grid]

    def find(self, tile: str) -> Optional[tuple[int, int]]:
        """Return (x, y) of the first tile in reading order, or None."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell == tile:
                    return x, y
        return None

    def validate(self) -> "GameMap":
        """Count the special tiles and check the map rules.

        Every row must be as wide as the first, only 0 1 C E P X may
        appear, and there must be at least one collectible, exactly one
        exit and exactly one player. Raises MapError otherwise; returns
        the map on success.
        """
        self.collectibles = self.exits = self.players = 0
        for y, row in enumerate(self.grid):
            if len(row) != self.width:
                raise MapError(f"row {y} has length {len(row)}, expected {self.width}")
            for x, cell in enumerate(row):
                if cell == COLLECTIBLE:
                    self.collectibles += 1
                elif cell == EXIT:
                    self.exits += 1
                elif cell == PLAYER:
                    self.players += 1
                elif cell not in _PLAIN_TILES:
                    raise MapError(f"Invalid character '{cell}' at position ({x},{y})")
        self.errors = []
        if self.collectibles == 0:
            self.errors.append("No collectibles found")
        if self.exits != 1:
            self.errors.append(f"Must have exactly one exit (found {self.exits})")
        if self.players != 1:
            self.errors.append(f"Must have exactly one player (found {self.players})")
        if self.errors:
            raise MapError("; ".join(self.errors))
        return self


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from text lines; one trailing newline per line is dropped.

    The width is that of the first line. Raises MapError for no lines.
    """
    grid = [list(line[:-1] if line.endswith("\n") else line) for line in lines]
    if not grid:
        raise MapError("map is empty")
    return GameMap(grid=grid, width=len(grid[0]))


def load_map(path: Union[str, Path]) -> GameMap:
    """Read and parse a map file; raises MapError if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            return parse_map(list(read_lines(stream)))
    except OSError as exc:
        raise MapError(f"cannot read map file {path}: {exc}") from exc