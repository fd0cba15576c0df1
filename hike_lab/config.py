# hike_lab/config.py
from __future__ import annotations
import os

# ---- Tunables (overridable via environment variables) -----------------------
DEFAULT_MODE    = os.getenv("HIKE_MODE", "directed")             # directed | undirected | both
PRUNE           = os.getenv("HIKE_PRUNE", "0") not in ("", "0")  # upper-bound pruning in the search
WORKERS         = int(os.getenv("HIKE_WORKERS", "0"))            # 0 = sequential search
MAX_EXPANSIONS  = int(os.getenv("HIKE_MAX_EXPANSIONS", "0"))     # 0 = unbounded
LOG_LEVEL       = os.getenv("HIKE_LOG_LEVEL", "WARNING")
