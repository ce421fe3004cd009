# beam_lab/benchmarks/run_all.py
# Demo / benchmark: build a random geometric digraph, warm up once, then time the
# unidirectional and bidirectional beam searches on random source/target pairs.
#
#   python -m beam_lab.benchmarks.run_all --nodes 20000 --arcs 120000 --beam-width 4
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import numpy as np

from ..algorithms.beam import beam_search
from ..algorithms.bidir_beam import bidirectional_beam_search
from ..core.config import (
    BENCH_ARCS,
    BENCH_BEAM_WIDTH,
    BENCH_NODES,
    BENCH_SEED,
    BeamConfig,
    configure_logging,
)
from ..core.errors import BeamSearchError
from ..core.metrics import MeasuredRun, SearchResult, SearchStats
from ..core.utils import path_cost
from ..problems.random_graph import GraphData, random_geometric_digraph

logger = logging.getLogger(__name__)

Pathfinder = Callable[..., list]


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_algos() -> List[Tuple[str, Pathfinder]]:
    return [
        ("BeamSearch", beam_search),
        ("BidirectionalBeamSearch", bidirectional_beam_search),
    ]


def run_one(name: str, fn: Pathfinder, data: GraphData, source, target,
            config: BeamConfig, trace_memory: bool = True) -> SearchResult:
    """One timed search. A search that finds nothing becomes a failed row, not an exception."""
    stats = SearchStats()
    path: list = []
    error: Optional[str] = None
    with MeasuredRun(trace_memory=trace_memory) as meter:
        try:
            path = fn(data.graph, source, target, data.heuristic, config, stats=stats)
        except BeamSearchError as e:
            error = str(e)
    cost = path_cost(data.graph, path) if path else float("inf")
    return SearchResult(
        algo=name,
        success=error is None,
        path=path,
        cost=cost,
        nodes_expanded=stats.expanded,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb if trace_memory else None,
        beam_width=config.beam_width,
        error=error,
        extra={"source": source, "target": target, "relaxed": stats.relaxed, "stale": stats.stale},
    )


def perform(data: GraphData, rng: np.random.Generator, config: BeamConfig,
            output: bool, trace_memory: bool = True) -> List[SearchResult]:
    n = len(data.graph)
    source = int(rng.integers(0, n))
    target = int(rng.integers(0, n))
    results = []
    for name, fn in _load_algos():
        r = run_one(name, fn, data, source, target, config, trace_memory)
        results.append(r)
        if output:
            status = "OK" if r.success else f"FAIL ({r.error})"
            print(f"{name}:")
            print(f"  Path: {r.path}, length = {r.cost}")
            print(f"  {status} expanded={r.nodes_expanded} time={_fmt_time(r.time_s)}s")
    return results


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Benchmark beam search vs bidirectional beam search on a random digraph.")
    ap.add_argument("--nodes", type=int, default=BENCH_NODES)
    ap.add_argument("--arcs", type=int, default=BENCH_ARCS)
    ap.add_argument("--beam-width", type=int, default=BENCH_BEAM_WIDTH,
                    help="successors kept per expansion; 0 or less clamps to 1")
    ap.add_argument("--unbounded", action="store_true", help="ignore --beam-width and run exact A*")
    ap.add_argument("--seed", type=int, default=int(BENCH_SEED) if BENCH_SEED else None)
    ap.add_argument("--queries", type=int, default=1, help="timed source/target pairs after the warm-up")
    ap.add_argument("--no-memory", action="store_true", help="skip tracemalloc (faster timings)")
    ap.add_argument("--out", type=Path, default=Path("results.json"))
    ap.add_argument("--log-level", default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    seed = args.seed if args.seed is not None else int(time.time() * 1000)
    print(f"Seed = {seed}")
    config = BeamConfig(beam_width=None if args.unbounded else args.beam_width)

    t0 = time.perf_counter()
    data = random_geometric_digraph(args.nodes, args.arcs, seed=seed)
    logger.info(f"Built graph: {len(data.graph):,} nodes, {data.graph.edge_count():,} arcs "
                f"in {time.perf_counter() - t0:.2f}s")

    # warm-up and timed runs replay the same random stream
    perform(data, np.random.default_rng(seed), config, output=False, trace_memory=False)
    rng = np.random.default_rng(seed)
    rows = []
    for _ in range(args.queries):
        rows.extend(r.as_row() for r in perform(data, rng, config, output=True,
                                                trace_memory=not args.no_memory))

    out = {
        "results": rows,
        "seed": seed,
        "nodes": args.nodes,
        "arcs": args.arcs,
        "beam_width": config.beam_width,
        "ts": time.time(),
    }
    args.out.write_text(json.dumps(out, indent=2, default=str))
    logger.info(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
