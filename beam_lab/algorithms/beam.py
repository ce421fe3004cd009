# beam_lab/algorithms/beam.py
# Unidirectional beam search: A*-style best-first search where each expansion keeps only
# the `beam_width` best-scoring successors. With an unbounded beam it is exactly A*.
from __future__ import annotations
import logging
from typing import Hashable, List, Optional, Union

from ..core.config import BeamConfig
from ..core.errors import PathNotFoundError, SearchLimitError
from ..core.metrics import SearchStats
from ..core.problem import Graph, HeuristicLike, as_estimator, check_inputs
from ..core.state import SearchState
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


def beam_search(
    graph: Graph,
    source: Hashable,
    target: Hashable,
    heuristic: HeuristicLike,
    config: Union[BeamConfig, int, None] = None,
    *,
    stats: Optional[SearchStats] = None,
) -> List[Hashable]:
    """
    Path from source to target as a list of nodes (both ends included).

    config: BeamConfig, a bare beam width, or None for an unbounded beam.
    stats: optional SearchStats the call fills in.

    Raises InvalidArgumentError before searching on bad input, PathNotFoundError when the
    frontier runs dry, SearchLimitError when config.max_expansions is hit. The result is
    not guaranteed optimal once the beam actually prunes something.
    """
    check_inputs(graph, source, target, heuristic)
    estimate = as_estimator(heuristic)
    cfg = BeamConfig.coerce(config)
    stats = stats if stats is not None else SearchStats()

    if source == target:
        return [source]

    logger.debug(f"Beam search {source!r} -> {target!r} (beam_width={cfg.beam_width})")
    state = SearchState.forward(graph, source, target, estimate)

    while state.open:
        current = state.open.pop()
        if current == target:
            path = reconstruct_path(state.parents, target)
            logger.debug(
                f"Beam search reached target: {len(path)} nodes, cost {state.distances[target]}, "
                f"{stats.expanded} expansions"
            )
            return path

        if current in state.closed:
            stats.stale += 1
            continue

        if cfg.max_expansions is not None and stats.expanded >= cfg.max_expansions:
            raise SearchLimitError(cfg.max_expansions)

        stats.expanded += 1
        stats.forward_expanded += 1
        stats.relaxed += len(state.expand(current, target, cfg.beam_width))

    logger.debug(f"Beam search exhausted the frontier after {stats.expanded} expansions")
    raise PathNotFoundError(source, target)
