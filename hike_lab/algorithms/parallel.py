# hike_lab/algorithms/parallel.py
# Splits the search at the entrance: each first-level branch is an independent
# subproblem, so it can run in its own process and the maxima are combined.
from __future__ import annotations
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional

from ..core.metrics import SearchResult, MeasuredRun
from ..graph.junctions import Edge, JunctionGraph
from .longest_path import explore

_logger = logging.getLogger(__name__)


def _search_branch(graph: JunctionGraph, edge: Edge, prune: bool):
    best, route, expanded, _ = explore(
        graph, edge.target, length=edge.weight, ancestors=(edge.source,), prune=prune)
    return best, route, expanded


def parallel_longest_path(graph: JunctionGraph, max_workers: Optional[int] = None,
                          prune: bool = False) -> SearchResult:
    """
    Same answer as longest_path_search, computed one entrance branch per worker.
    Workers share nothing; the only combination step is max() over finished branches.
    """
    name = f"LongestPath-DFS(workers={max_workers or 'auto'})"
    branches = graph.edges_from(graph.entrance)
    results: List[Optional[int]] = [None] * len(branches)
    best: Optional[int] = None
    best_route = ()
    expanded = 1 if branches else 0  # the entrance itself

    with MeasuredRun(trace_memory=False) as meter:
        if branches:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                future_to_branch = {
                    executor.submit(_search_branch, graph, edge, prune): i
                    for i, edge in enumerate(branches)
                }
                for future in as_completed(future_to_branch):
                    i = future_to_branch[future]
                    length, route, n = future.result()
                    results[i] = length
                    expanded += n
                    _logger.debug("branch %d via %s finished: %s", i,
                                  graph.coordinate_of(branches[i].target), length)
                    if length is not None and (best is None or length > best):
                        best, best_route = length, route

    return SearchResult(
        algo=name,
        success=best is not None,
        length=best,
        route=[graph.coordinate_of(n) for n in best_route],
        nodes_expanded=expanded,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
        branches=results,
    )
