# hike_lab: longest simple hike through a slope maze.
from .algorithms import longest_path_search, longest_simple_path, parallel_longest_path
from .core import (
    Direction, Grid, HikeError, Mode, OutOfBounds, ParseError, StructureError, Tile, TileKind,
    allowed_directions, locate_openings, parse_grid, tile_at,
)
from .graph import Edge, JunctionGraph, build_junction_graph, nodes_without_exit, replay_edge
from .solver import HikeReport, solve, solve_report

__version__ = "0.1.0"
