# hike_lab/graph/junctions.py
# Compresses the maze into a small weighted graph: every corridor between two
# junctions becomes one edge whose weight is the number of steps walked.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..core.directions import Mode, viable_steps
from ..core.errors import HikeError
from ..core.frontiers import FIFOQueue
from ..core.grid import Coordinate, Direction, Grid, locate_openings

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: int
    trail: Tuple[Coordinate, ...]  # cells stepped onto, ending on the target junction


@dataclass(frozen=True, eq=False)
class JunctionGraph:
    """
    Read-only adjacency lists over dense node ids.

    nodes[i] is the grid coordinate of node i and edges[i] its outgoing edges.
    The coordinate lookup is only needed while building and reporting; the
    searcher works on ids alone.
    """
    nodes: Tuple[Coordinate, ...]
    edges: Tuple[Tuple[Edge, ...], ...]
    entrance: int
    exit: int
    mode: Mode
    index: Dict[Coordinate, int]

    def __len__(self) -> int:
        return len(self.nodes)

    def id_of(self, coordinate: Coordinate) -> int:
        return self.index[coordinate]

    def coordinate_of(self, node: int) -> Coordinate:
        return self.nodes[node]

    def edges_from(self, node: int) -> Tuple[Edge, ...]:
        return self.edges[node]

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self.edges)

    @property
    def total_weight(self) -> int:
        return sum(e.weight for out in self.edges for e in out)


def _open_neighbour_counts(grid: Grid) -> np.ndarray:
    padded = np.pad(grid.open_mask, 1, constant_values=False).astype(np.int8)
    return padded[:-2, 1:-1] + padded[2:, 1:-1] + padded[1:-1, :-2] + padded[1:-1, 2:]


def find_junctions(grid: Grid, mode: Mode, entrance: Coordinate, exit: Coordinate) -> Set[Coordinate]:
    """Entrance, exit, and every cell a walker could leave in three or more ways."""
    junctions = {entrance, exit}
    # A cell needs three open neighbours to have three exits in either mode.
    candidates = grid.open_mask & (_open_neighbour_counts(grid) >= 3)
    for y, x in zip(*np.nonzero(candidates)):
        cell = (int(x), int(y))
        if sum(1 for _ in viable_steps(grid, cell, None, mode)) >= 3:
            junctions.add(cell)
    return junctions


def follow_corridor(grid: Grid, start: Coordinate, first: Direction, junctions: Set[Coordinate],
                    mode: Mode) -> Optional[Tuple[Coordinate, Tuple[Coordinate, ...]]]:
    """
    Walk from `start` in direction `first` until a junction is reached.

    Returns (junction, trail) or None when the corridor dead-ends, including a
    slope pointing back the way we came.
    """
    cell = grid.neighbour(start, first)
    arrival = first
    trail = [cell]
    seen = {cell}

    while cell not in junctions:
        steps = list(viable_steps(grid, cell, arrival, mode))
        if not steps:
            return None
        if len(steps) > 1:
            raise HikeError(f"corridor cell {cell} branches but was not classified as a junction")
        arrival, cell = steps[0]
        if cell in seen:
            # one-way loop that never meets a junction
            _logger.debug("corridor from %s loops back on itself at %s", start, cell)
            return None
        seen.add(cell)
        trail.append(cell)

    return cell, tuple(trail)


def build_junction_graph(grid: Grid, mode: Mode = Mode.DIRECTED,
                         openings: Optional[Tuple[Coordinate, Coordinate]] = None) -> JunctionGraph:
    entrance, exit_ = openings if openings is not None else locate_openings(grid)
    junctions = find_junctions(grid, mode, entrance, exit_)

    index: Dict[Coordinate, int] = {entrance: 0}
    nodes: List[Coordinate] = [entrance]
    edges: List[List[Edge]] = [[]]

    def discover(cell: Coordinate) -> int:
        index[cell] = len(nodes)
        nodes.append(cell)
        edges.append([])
        return index[cell]

    queue = FIFOQueue([entrance])
    dead_corridors = 0
    while len(queue):
        here = queue.pop()
        if here == exit_:
            continue  # the walk ends at the exit, nothing leaves it
        source = index[here]
        for direction, _ in viable_steps(grid, here, None, mode):
            walked = follow_corridor(grid, here, direction, junctions, mode)
            if walked is None:
                dead_corridors += 1
                continue
            end, trail = walked
            if end not in index:
                discover(end)
                queue.push(end)
            edges[source].append(Edge(source, index[end], len(trail), trail))

    if exit_ not in index:
        discover(exit_)

    graph = JunctionGraph(
        nodes=tuple(nodes),
        edges=tuple(tuple(out) for out in edges),
        entrance=index[entrance],
        exit=index[exit_],
        mode=mode,
        index=index,
    )
    _logger.info(
        "%s graph: %d junctions, %d edges, %d dead corridors (grid %dx%d)",
        mode.value, len(graph), graph.edge_count, dead_corridors, grid.width, grid.height,
    )
    return graph
