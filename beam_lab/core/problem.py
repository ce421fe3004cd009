# beam_lab/core/problem.py
# Interfaces the searches consume (graph, heuristic) and the eager input checks.
from __future__ import annotations
from typing import Any, Callable, Hashable, Iterable, Protocol, Union

from .errors import InvalidArgumentError

NodeId = Hashable


class Graph(Protocol):
    """Directed weighted graph as seen by the searches (read-only)."""
    def has_node(self, n: NodeId) -> bool: ...
    def successors(self, n: NodeId) -> Iterable[NodeId]: ...
    def predecessors(self, n: NodeId) -> Iterable[NodeId]: ...
    # Non-negative; raises (e.g. KeyError) when the edge u -> v does not exist.
    def edge_weight(self, u: NodeId, v: NodeId) -> float: ...


class Heuristic(Protocol):
    """Optimistic distance estimate between two nodes. Admissibility is not checked."""
    def estimate(self, a: NodeId, b: NodeId) -> float: ...


HeuristicLike = Union[Heuristic, Callable[[NodeId, NodeId], float]]


def as_estimator(heuristic: HeuristicLike) -> Callable[[NodeId, NodeId], float]:
    """Accept either a Heuristic object or a bare (a, b) -> float callable."""
    est = getattr(heuristic, "estimate", None)
    if callable(est):
        return est
    if callable(heuristic):
        return heuristic
    raise InvalidArgumentError(
        f"heuristic must define estimate(a, b) or be callable, got {type(heuristic).__name__}"
    )


def check_inputs(graph: Any, source: Any, target: Any, heuristic: Any) -> None:
    if graph is None:
        raise InvalidArgumentError("The input graph is None.")
    if source is None:
        raise InvalidArgumentError("The source node is None.")
    if target is None:
        raise InvalidArgumentError("The target node is None.")
    if heuristic is None:
        raise InvalidArgumentError("The heuristic function is None.")
    if not graph.has_node(source):
        raise InvalidArgumentError(f"The source node {source!r} is not in the graph.")
    if not graph.has_node(target):
        raise InvalidArgumentError(f"The target node {target!r} is not in the graph.")
