# beam_lab/core/state.py
# One direction of a best-first search: open frontier, closed set, distance map and parent map.
# The unidirectional search uses a single forward state; the bidirectional search runs a
# forward and a backward state side by side.
from __future__ import annotations
from operator import itemgetter
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from .frontiers import PriorityQueue
from .problem import Graph

Estimator = Callable[[Hashable, Hashable], float]


class SearchState:
    def __init__(
        self,
        name: str,
        origin,
        goal,
        neighbours: Callable[[Hashable], Iterable[Hashable]],
        weight: Callable[[Hashable, Hashable], float],
        estimate: Estimator,
    ):
        """
        name: label used in logs ("forward" / "backward").
        origin: node this direction grows from; goal: node its frontier scores aim at.
        neighbours(n): nodes one step away in this direction.
        weight(n, m): cost of that step, m being one of neighbours(n).
        """
        self.name = name
        self.origin = origin
        self.goal = goal
        self.neighbours = neighbours
        self.weight = weight
        self.estimate = estimate

        self.open = PriorityQueue()
        self.closed: Set[Hashable] = set()
        self.distances: Dict[Hashable, float] = {origin: 0.0}
        self.parents: Dict[Hashable, Optional[Hashable]] = {origin: None}
        self.open.push(origin, estimate(origin, goal))

    @classmethod
    def forward(cls, graph: Graph, source, target, estimate: Estimator) -> "SearchState":
        return cls("forward", source, target, graph.successors, graph.edge_weight, estimate)

    @classmethod
    def backward(cls, graph: Graph, target, source, estimate: Estimator) -> "SearchState":
        # walking predecessors: the step n -> m follows the graph edge m -> n
        return cls("backward", target, source, graph.predecessors,
                   lambda n, m: graph.edge_weight(m, n), estimate)

    def size(self) -> int:
        return len(self.open) + len(self.closed)

    def top_score(self) -> float:
        """g + h of the node at the top of the frontier, from the current distance map."""
        node = self.open.peek()
        return self.distances[node] + self.estimate(node, self.goal)

    def ranked_neighbours(self, current, toward, beam_width: Optional[int]) -> List[Tuple[Hashable, float]]:
        """
        Score every neighbour of `current` by g(current) + w + h(neighbour, toward), sort
        ascending and keep the first `beam_width` (all of them when None). The sort is stable,
        so equal scores keep the graph's enumeration order.
        """
        g = self.distances[current]
        scored = []
        for n in self.neighbours(current):
            w = self.weight(current, n)
            scored.append((g + w + self.estimate(n, toward), n, w))
        scored.sort(key=itemgetter(0))
        return [(n, w) for _, n, w in scored[:beam_width]]

    def relax(self, current, child, w: float) -> Optional[float]:
        """Record current -> child if it strictly improves child's distance. Returns the new distance."""
        if child in self.closed:
            return None
        tentative = self.distances[current] + w
        known = self.distances.get(child)
        if known is not None and known <= tentative:
            return None
        self.distances[child] = tentative
        self.parents[child] = current
        self.open.push(child, tentative + self.estimate(child, self.goal))
        return tentative

    def expand(self, current, toward, beam_width: Optional[int]) -> List[Tuple[Hashable, float]]:
        """Close `current` and relax its beam. Returns (child, new distance) per relaxation."""
        self.closed.add(current)
        relaxed = []
        for child, w in self.ranked_neighbours(current, toward, beam_width):
            g = self.relax(current, child, w)
            if g is not None:
                relaxed.append((child, g))
        return relaxed
