# hike_lab/solver.py
# Text in, longest hike out: parse -> compress -> search.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import config
from .algorithms.longest_path import longest_path_search
from .algorithms.parallel import parallel_longest_path
from .core.directions import Mode
from .core.grid import locate_openings, parse_grid
from .core.metrics import SearchResult
from .graph.checks import nodes_without_exit
from .graph.junctions import build_junction_graph

_logger = logging.getLogger(__name__)


@dataclass
class HikeReport:
    mode: Mode
    width: int
    height: int
    junctions: int
    edges: int
    search: SearchResult

    @property
    def length(self) -> Optional[int]:
        return self.search.length if self.search.success else None

    def as_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "grid": [self.width, self.height],
            "junctions": self.junctions,
            "edges": self.edges,
            "length": self.length,
            "search": self.search.as_dict(),
        }


def solve_report(text: str, mode: Union[Mode, str] = Mode.DIRECTED, prune: Optional[bool] = None,
                 workers: Optional[int] = None, max_expansions: Optional[int] = None,
                 trace_memory: bool = False) -> HikeReport:
    """
    Full pipeline with statistics. ParseError / StructureError propagate;
    an unreachable exit is reported as length None.
    """
    if isinstance(mode, str):
        mode = Mode.from_name(mode)
    prune = config.PRUNE if prune is None else prune
    workers = config.WORKERS if workers is None else workers
    if max_expansions is None and config.MAX_EXPANSIONS > 0:
        max_expansions = config.MAX_EXPANSIONS

    grid = parse_grid(text)
    openings = locate_openings(grid)
    graph = build_junction_graph(grid, mode, openings)

    stranded = nodes_without_exit(graph)
    if stranded:
        _logger.warning("%d junction(s) cannot reach the exit: %s", len(stranded), stranded[:10])

    if workers and workers > 1:
        if max_expansions is not None:
            _logger.warning("expansion budget is ignored by the parallel search")
        result = parallel_longest_path(graph, max_workers=workers, prune=prune)
    else:
        result = longest_path_search(graph, prune=prune, max_expansions=max_expansions,
                                     trace_memory=trace_memory)

    return HikeReport(
        mode=mode,
        width=grid.width,
        height=grid.height,
        junctions=len(graph),
        edges=graph.edge_count,
        search=result,
    )


def solve(text: str, mode: Union[Mode, str] = Mode.DIRECTED, **kwargs) -> Optional[int]:
    """Longest simple entrance-to-exit walk in steps, or None if the exit cannot be reached."""
    return solve_report(text, mode, **kwargs).length
