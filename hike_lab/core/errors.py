# hike_lab/core/errors.py
# Error taxonomy for parsing and walking a maze. "No path" is not an error: the
# searcher reports it as a None length.
from __future__ import annotations


class HikeError(Exception):
    """Base class for every error raised by hike_lab."""


class ParseError(HikeError):
    """Rows of unequal length, an empty grid, or a character outside the tile alphabet."""


class StructureError(HikeError):
    """The top or bottom row does not have exactly one opening."""


class OutOfBounds(HikeError, IndexError):
    """A coordinate fell outside the grid. Signals a builder bug, not bad input."""

    def __init__(self, coordinate, width: int, height: int):
        self.coordinate = coordinate
        super().__init__(f"{coordinate!r} is outside a {width}x{height} grid")
