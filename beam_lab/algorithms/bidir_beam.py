# beam_lab/algorithms/bidir_beam.py
# Bidirectional beam search: a forward search from the source and a backward search from the
# target (over predecessor edges), each beam-limited, expanded alternately by frontier size.
# The searches stop once the best meeting found so far cannot be beaten by either frontier.
from __future__ import annotations
import logging
from typing import Hashable, List, Optional, Union

from ..core.config import BeamConfig
from ..core.errors import PathNotFoundError, SearchLimitError
from ..core.metrics import SearchStats
from ..core.problem import Graph, HeuristicLike, as_estimator, check_inputs
from ..core.state import SearchState
from ..core.utils import join_paths

logger = logging.getLogger(__name__)

INF = float("inf")


class _Meeting:
    """Best source->target length seen so far and the node where the two searches touch."""
    def __init__(self):
        self.length = INF
        self.node = None

    @property
    def found(self) -> bool:
        return self.node is not None

    def offer(self, node, length: float) -> bool:
        if length < self.length:
            self.length = length
            self.node = node
            return True
        return False


def _can_stop(meeting: _Meeting, fwd: SearchState, bwd: SearchState) -> bool:
    # fwd.top_score() estimates toward the target, bwd.top_score() toward the source
    return meeting.length <= max(fwd.top_score(), bwd.top_score())


def bidirectional_beam_search(
    graph: Graph,
    source: Hashable,
    target: Hashable,
    heuristic: HeuristicLike,
    config: Union[BeamConfig, int, None] = None,
    *,
    stats: Optional[SearchStats] = None,
) -> List[Hashable]:
    """
    Path from source to target, found by meeting in the middle.

    Same arguments and exceptions as beam_search. With an unbounded beam and a consistent
    heuristic the returned path has the same length as the unidirectional result.
    """
    check_inputs(graph, source, target, heuristic)
    estimate = as_estimator(heuristic)
    cfg = BeamConfig.coerce(config)
    stats = stats if stats is not None else SearchStats()

    if source == target:
        return [source]

    logger.debug(f"Bidirectional beam search {source!r} -> {target!r} (beam_width={cfg.beam_width})")
    fwd = SearchState.forward(graph, source, target, estimate)
    bwd = SearchState.backward(graph, target, source, estimate)
    meeting = _Meeting()

    while fwd.open and bwd.open:
        if meeting.found and _can_stop(meeting, fwd, bwd):
            logger.debug(
                f"Searches met at {meeting.node!r}, length {meeting.length}, "
                f"{stats.expanded} expansions"
            )
            return join_paths(fwd.parents, bwd.parents, meeting.node)

        # grow the smaller side; ties go backward
        this, other = (fwd, bwd) if fwd.size() < bwd.size() else (bwd, fwd)
        current = this.open.pop()
        if current in this.closed:
            stats.stale += 1
            continue

        if cfg.max_expansions is not None and stats.expanded >= cfg.max_expansions:
            raise SearchLimitError(cfg.max_expansions)

        stats.expanded += 1
        if this is fwd:
            stats.forward_expanded += 1
        else:
            stats.backward_expanded += 1

        # beam ranking aims at the other frontier's best node, not at the far endpoint
        toward = other.open.peek()
        for child, g in this.expand(current, toward, cfg.beam_width):
            stats.relaxed += 1
            g_other = other.distances.get(child)
            if g_other is not None and meeting.offer(child, g + g_other):
                stats.meeting_updates += 1
                logger.debug(f"{this.name} search: new meeting node {child!r}, length {meeting.length}")

    if meeting.found:
        # one side ran dry after the searches touched: nothing on that side can improve the meeting
        logger.debug(f"{'Forward' if not fwd.open else 'Backward'} frontier exhausted, "
                     f"returning meeting at {meeting.node!r}")
        return join_paths(fwd.parents, bwd.parents, meeting.node)

    logger.debug(f"Bidirectional beam search gave up after {stats.expanded} expansions")
    raise PathNotFoundError(source, target, f"Target node {target!r} is not reachable from {source!r}.")
