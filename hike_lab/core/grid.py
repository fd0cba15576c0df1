# hike_lab/core/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

import numpy as np

from .errors import OutOfBounds, ParseError, StructureError

Coordinate = Tuple[int, int]  # (column, row)


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# Order in which neighbours are tried everywhere in the package.
SCAN_ORDER = (Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH)


class TileKind(Enum):
    OPEN = "open"
    BLOCKED = "blocked"
    DIRECTIONAL = "directional"


@dataclass(frozen=True)
class Tile:
    kind: TileKind
    direction: Optional[Direction] = None

    @property
    def is_blocked(self) -> bool:
        return self.kind is TileKind.BLOCKED


OPEN = Tile(TileKind.OPEN)
BLOCKED = Tile(TileKind.BLOCKED)

TILE_ALPHABET: Dict[str, Tile] = {
    ".": OPEN,
    "#": BLOCKED,
    "^": Tile(TileKind.DIRECTIONAL, Direction.NORTH),
    ">": Tile(TileKind.DIRECTIONAL, Direction.EAST),
    "v": Tile(TileKind.DIRECTIONAL, Direction.SOUTH),
    "<": Tile(TileKind.DIRECTIONAL, Direction.WEST),
}


@dataclass(frozen=True)
class Grid:
    """
    Read-only tile matrix.

    - tiles[row][column] holds the parsed Tile
    - open_mask[row, column] is True wherever the tile is not blocked
    - directional_mask[row, column] is True on slope tiles
    """
    tiles: Tuple[Tuple[Tile, ...], ...]
    open_mask: np.ndarray = field(compare=False, repr=False)
    directional_mask: np.ndarray = field(compare=False, repr=False)

    @property
    def width(self) -> int:
        return len(self.tiles[0])

    @property
    def height(self) -> int:
        return len(self.tiles)

    def in_bounds(self, coordinate: Coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, coordinate: Coordinate) -> Tile:
        if not self.in_bounds(coordinate):
            raise OutOfBounds(coordinate, self.width, self.height)
        x, y = coordinate
        return self.tiles[y][x]

    def neighbour(self, coordinate: Coordinate, direction: Direction) -> Coordinate:
        x, y = coordinate
        return (x + direction.dx, y + direction.dy)

    def is_passable(self, coordinate: Coordinate) -> bool:
        return self.in_bounds(coordinate) and not self.tile_at(coordinate).is_blocked


def parse_grid(text: str) -> Grid:
    """Parse maze text (one line per row) into a Grid."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ParseError("grid is empty")

    width = len(lines[0])
    rows = []
    for y, line in enumerate(lines):
        if len(line) != width:
            raise ParseError(f"line {y + 1} has {len(line)} characters, expected {width}")
        row = []
        for x, char in enumerate(line):
            tile = TILE_ALPHABET.get(char)
            if tile is None:
                raise ParseError(f"unknown tile {char!r} at line {y + 1}, column {x + 1}")
            row.append(tile)
        rows.append(tuple(row))

    kinds = np.array([[t.kind.value for t in row] for row in rows])
    return Grid(
        tiles=tuple(rows),
        open_mask=kinds != TileKind.BLOCKED.value,
        directional_mask=kinds == TileKind.DIRECTIONAL.value,
    )


def _single_opening(grid: Grid, y: int, label: str) -> Coordinate:
    openings = np.flatnonzero(grid.open_mask[y])
    if len(openings) != 1:
        raise StructureError(f"{label} row must have exactly one opening, found {len(openings)}")
    return (int(openings[0]), y)


def locate_openings(grid: Grid) -> Tuple[Coordinate, Coordinate]:
    """Return (entrance, exit): the only open cell of the first and of the last row."""
    if grid.height < 2:
        raise StructureError("grid needs at least two rows to have an entrance and an exit")
    return _single_opening(grid, 0, "top"), _single_opening(grid, grid.height - 1, "bottom")


def tile_at(grid: Grid, coordinate: Coordinate) -> Tile:
    return grid.tile_at(coordinate)
