"""
Pytest configuration and shared fixtures.

Small hand-built graphs whose shortest paths are known, plus a seeded random
geometric digraph for property-style checks.
"""

import pytest

from beam_lab.problems.graph import DirectedGraph
from beam_lab.problems.heuristics import ZeroHeuristic
from beam_lab.problems.random_graph import random_geometric_digraph
from beam_lab.problems.romania import romania_graph, romania_heuristic


@pytest.fixture
def zero():
    return ZeroHeuristic()


@pytest.fixture
def abcd_graph() -> DirectedGraph:
    """A->B(1), B->C(1), A->C(5), C->D(1): shortest A->D is A,B,C,D at cost 3."""
    return DirectedGraph.from_edges([
        ("A", "B", 1),
        ("B", "C", 1),
        ("A", "C", 5),
        ("C", "D", 1),
    ])


@pytest.fixture
def trap_graph() -> DirectedGraph:
    """Cheapest first step from A leads to a dead end; the real route is A,B,C,D."""
    return DirectedGraph.from_edges([
        ("A", "X", 1),
        ("A", "B", 2),
        ("B", "C", 1),
        ("C", "D", 1),
    ])


@pytest.fixture
def detour_graph() -> DirectedGraph:
    """Cheapest first step from A commits to an expensive finish: A,B,D costs 11, A,C,D costs 3."""
    return DirectedGraph.from_edges([
        ("A", "B", 1),
        ("B", "D", 10),
        ("A", "C", 2),
        ("C", "D", 1),
    ])


@pytest.fixture
def disconnected_graph() -> DirectedGraph:
    g = DirectedGraph.from_edges([("A", "B", 1), ("C", "D", 1), ("D", "C", 1)])
    g.add_node("Z")
    return g


@pytest.fixture(scope="session")
def romania():
    return romania_graph(), romania_heuristic()


@pytest.fixture(scope="session")
def geo_data():
    """Seeded random digraph, dense enough that most pairs are connected."""
    return random_geometric_digraph(nodes=300, arcs=2400, seed=1234)


@pytest.fixture(scope="session")
def geo_pairs(geo_data):
    import numpy as np

    rng = np.random.default_rng(99)
    n = len(geo_data.graph)
    return [(int(rng.integers(0, n)), int(rng.integers(0, n))) for _ in range(25)]
