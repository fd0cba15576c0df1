# hike_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    length: Optional[int]
    route: List[Tuple[int, int]]
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    branches: List[Optional[int]] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "algo": self.algo,
            "success": self.success,
            "length": self.length,
            "route": [list(c) for c in self.route],
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.

    Memory tracing slows the search loop down noticeably, so it can be
    switched off with trace_memory=False; peak_kb then stays 0.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        if self._trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
