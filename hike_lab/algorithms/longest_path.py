# hike_lab/algorithms/longest_path.py
# Exhaustive depth-first search for the longest simple entrance-to-exit path on a
# junction graph, driven by an explicit LIFO stack instead of recursion.
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult, MeasuredRun
from ..graph.junctions import JunctionGraph

_logger = logging.getLogger(__name__)

# A frame is (node, length). length=None marks the point where the node's
# branches are exhausted and it leaves the ancestor set again.
Frame = Tuple[int, Optional[int]]


def _best_out(graph: JunctionGraph) -> List[int]:
    return [max((e.weight for e in out), default=0) for out in graph.edges]


def explore(graph: JunctionGraph, start: int, length: int = 0, ancestors: Iterable[int] = (),
            prune: bool = False, max_expansions: Optional[int] = None):
    """
    Core backtracking loop. Returns (best_length, best_route, expanded, exhausted).

    `ancestors` pre-seeds nodes already on the path (used when the search is
    split across workers); they are also the prefix of the returned route.
    The bound used by `prune` adds the heaviest outgoing edge of every node not
    yet on the path, which can never underestimate what is left to walk.
    """
    exit_ = graph.exit
    path: List[int] = list(ancestors)
    on_path = set(path)
    best_out = _best_out(graph)
    remaining = sum(w for n, w in enumerate(best_out) if n not in on_path)

    best: Optional[int] = None
    best_route: Tuple[int, ...] = ()
    expanded = 0

    stack = LIFOStack([(start, length)])
    while len(stack):
        node, dist = stack.pop()

        if dist is None:
            on_path.discard(node)
            path.pop()
            remaining += best_out[node]
            continue

        if node == exit_:
            if best is None or dist > best:
                best, best_route = dist, tuple(path) + (node,)
            continue

        if prune and best is not None and dist + remaining <= best:
            continue
        if max_expansions is not None and expanded >= max_expansions:
            return best, best_route, expanded, True

        expanded += 1
        on_path.add(node)
        path.append(node)
        remaining -= best_out[node]
        stack.push((node, None))
        # reversed so the first edge is explored first
        for edge in reversed(graph.edges[node]):
            if edge.target not in on_path:
                stack.push((edge.target, dist + edge.weight))

    return best, best_route, expanded, False


def longest_path_search(graph: JunctionGraph, prune: bool = False,
                        max_expansions: Optional[int] = None,
                        trace_memory: bool = True) -> SearchResult:
    name = "LongestPath-DFS" + ("+bound" if prune else "")

    with MeasuredRun(trace_memory=trace_memory) as meter:
        best, route, expanded, exhausted = explore(
            graph, graph.entrance, prune=prune, max_expansions=max_expansions)

    error = None
    if exhausted:
        error = "expansion budget exhausted"
        _logger.warning("%s stopped after %d expansions; best so far %s", name, expanded, best)
    _logger.debug("%s expanded %d frames in %.4fs", name, expanded, meter.elapsed)

    return SearchResult(
        algo=name,
        success=best is not None and not exhausted,
        length=best,
        route=[graph.coordinate_of(n) for n in route],
        nodes_expanded=expanded,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        error=error,
    )


def longest_simple_path(graph: JunctionGraph, entrance: Optional[int] = None,
                        exit: Optional[int] = None, prune: bool = False) -> Optional[int]:
    """Length of the longest simple path from entrance to exit, or None if there is none."""
    if exit is not None and exit != graph.exit:
        raise ValueError("the graph was built for a different exit")
    start = graph.entrance if entrance is None else entrance
    best, _, _, _ = explore(graph, start, prune=prune)
    return best
