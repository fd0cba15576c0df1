# hike_lab/graph/checks.py
# Sanity checks over a built junction graph.
from __future__ import annotations
from typing import List

from ..core.frontiers import FIFOQueue
from ..core.grid import Coordinate, Grid
from .junctions import Edge, JunctionGraph


def nodes_without_exit(graph: JunctionGraph) -> List[Coordinate]:
    """Walks the edges backwards from the exit; returns the nodes it never reaches."""
    incoming: List[List[int]] = [[] for _ in range(len(graph))]
    for out in graph.edges:
        for edge in out:
            incoming[edge.target].append(edge.source)

    seen = {graph.exit}
    q = FIFOQueue([graph.exit])
    while len(q):
        node = q.pop()
        for prev in incoming[node]:
            if prev not in seen:
                seen.add(prev)
                q.push(prev)
    return [graph.coordinate_of(n) for n in range(len(graph)) if n not in seen]


def replay_edge(grid: Grid, graph: JunctionGraph, edge: Edge) -> bool:
    """True if the edge's trail is `weight` unit steps over open tiles from source to target."""
    if edge.weight != len(edge.trail) or not edge.trail:
        return False
    if edge.trail[-1] != graph.coordinate_of(edge.target):
        return False
    x0, y0 = graph.coordinate_of(edge.source)
    for x, y in edge.trail:
        if abs(x - x0) + abs(y - y0) != 1 or not grid.is_passable((x, y)):
            return False
        x0, y0 = x, y
    return True
