# hike_lab/core/directions.py
# Decides where a walker standing on a tile may go next. The mode is fixed when the
# junction graph is built, so the searcher never has to look at slopes.
from __future__ import annotations
from enum import Enum
from typing import FrozenSet, Iterator, Optional, Tuple

from .grid import SCAN_ORDER, Coordinate, Direction, Grid, Tile, TileKind

ALL_DIRECTIONS: FrozenSet[Direction] = frozenset(Direction)


class Mode(Enum):
    DIRECTED = "directed"      # slopes are one-way
    UNDIRECTED = "undirected"  # slopes count as open path

    @classmethod
    def from_name(cls, name: str) -> "Mode":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown mode {name!r} (expected one of: {choices})") from None


def allowed_directions(tile: Tile, arrival: Optional[Direction], mode: Mode) -> FrozenSet[Direction]:
    """
    Directions a walker may leave `tile` in, having arrived by moving `arrival`.

    arrival=None means there is no history (a junction decision point), so
    every direction the tile permits is returned. Otherwise stepping straight
    back is excluded. In directed mode a slope permits only its own direction;
    if that direction is the way back the result is empty (dead corridor).
    """
    if tile.kind is TileKind.BLOCKED:
        raise ValueError("blocked tiles are never traversed")

    if mode is Mode.DIRECTED and tile.kind is TileKind.DIRECTIONAL:
        options = frozenset((tile.direction,))
    else:
        options = ALL_DIRECTIONS

    if arrival is None:
        return options
    return options - {arrival.opposite}


def viable_steps(grid: Grid, coordinate: Coordinate, arrival: Optional[Direction],
                 mode: Mode) -> Iterator[Tuple[Direction, Coordinate]]:
    """Yield (direction, neighbour) for every legal single step out of `coordinate`."""
    allowed = allowed_directions(grid.tile_at(coordinate), arrival, mode)
    for direction in SCAN_ORDER:
        if direction not in allowed:
            continue
        nxt = grid.neighbour(coordinate, direction)
        if grid.is_passable(nxt):
            yield direction, nxt
