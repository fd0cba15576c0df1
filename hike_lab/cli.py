# hike_lab/cli.py
# Command-line entry point: python -m hike_lab MAZE_FILE [--mode both] [--json]
from __future__ import annotations
import argparse, json, logging, sys
from typing import List, Optional

from . import config
from .core.directions import Mode
from .core.errors import HikeError
from .problems.sample import SAMPLE_MAZE
from .solver import solve_report


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _modes(name: str) -> List[Mode]:
    if name == "both":
        return [Mode.DIRECTED, Mode.UNDIRECTED]
    return [Mode.from_name(name)]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Longest simple hike through a maze with one-way slopes.")
    ap.add_argument("maze", nargs="?", default="", help="maze text file ('-' for stdin). If empty, use the built-in sample.")
    ap.add_argument("--mode", choices=["directed", "undirected", "both"], default=config.DEFAULT_MODE,
                    help="directed respects slopes, undirected treats them as open path")
    ap.add_argument("--prune", action="store_true", default=config.PRUNE, help="enable upper-bound pruning")
    ap.add_argument("--workers", type=int, default=config.WORKERS, help="processes for the branch-parallel search (0 = sequential)")
    ap.add_argument("--max-expansions", type=int, default=config.MAX_EXPANSIONS, help="stop the search after N expansions (0 = unbounded)")
    ap.add_argument("--json", action="store_true", help="print a JSON report instead of plain lengths")
    ap.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        text = _read_input(args.maze) if args.maze else SAMPLE_MAZE
        reports = [
            solve_report(text, mode, prune=args.prune, workers=args.workers,
                         max_expansions=args.max_expansions or None)
            for mode in _modes(args.mode)
        ]
    except (HikeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps({"results": [r.as_dict() for r in reports]}, indent=2))
        return 0

    for r in reports:
        shown = r.length if r.length is not None else "no path"
        if r.search.error:
            shown = f"{shown} ({r.search.error})"
        print(f"{r.mode.value}: {shown}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
