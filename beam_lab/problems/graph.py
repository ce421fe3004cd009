# beam_lab/problems/graph.py
# Minimal in-memory directed graph satisfying core.problem.Graph.
from __future__ import annotations
from typing import Dict, Hashable, Iterable, Iterator, Mapping, Tuple


class DirectedGraph:
    """
    Adjacency kept in both directions so successors and predecessors are O(out/in-degree).

    - _out[u][v] = weight of u -> v
    - _in[v][u]  = same weight, seen from v
    Re-adding an edge overwrites its weight. Insertion order is preserved everywhere,
    which keeps search tie-breaks reproducible.
    """
    def __init__(self) -> None:
        self._out: Dict[Hashable, Dict[Hashable, float]] = {}
        self._in: Dict[Hashable, Dict[Hashable, float]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Hashable, Hashable, float]]) -> "DirectedGraph":
        g = cls()
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    @classmethod
    def from_mapping(cls, adjacency: Mapping[Hashable, Mapping[Hashable, float]]) -> "DirectedGraph":
        """{u: {v: w}} -> graph; nodes that only appear as keys are kept too."""
        g = cls()
        for u, nbrs in adjacency.items():
            g.add_node(u)
            for v, w in nbrs.items():
                g.add_edge(u, v, w)
        return g

    def add_node(self, n: Hashable) -> None:
        self._out.setdefault(n, {})
        self._in.setdefault(n, {})

    def add_edge(self, u: Hashable, v: Hashable, weight: float) -> None:
        weight = float(weight)
        if weight < 0:
            raise ValueError(f"negative weight {weight} on edge {u!r} -> {v!r}")
        self.add_node(u)
        self.add_node(v)
        self._out[u][v] = weight
        self._in[v][u] = weight

    # --- core.problem.Graph ---------------------------------------------------
    def has_node(self, n: Hashable) -> bool:
        return n in self._out

    def successors(self, n: Hashable) -> Iterable[Hashable]:
        return self._out[n].keys()

    def predecessors(self, n: Hashable) -> Iterable[Hashable]:
        return self._in[n].keys()

    def edge_weight(self, u: Hashable, v: Hashable) -> float:
        try:
            return self._out[u][v]
        except KeyError:
            raise KeyError(f"no edge {u!r} -> {v!r}") from None

    # --- conveniences -----------------------------------------------------------
    def nodes(self) -> Iterator[Hashable]:
        return iter(self._out)

    def edges(self) -> Iterator[Tuple[Hashable, Hashable, float]]:
        for u, nbrs in self._out.items():
            for v, w in nbrs.items():
                yield u, v, w

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._out.values())

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, n: object) -> bool:
        return n in self._out
