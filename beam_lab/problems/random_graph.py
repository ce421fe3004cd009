# beam_lab/problems/random_graph.py
# Random geometric digraph for demos and benchmarks: nodes are points in a plane,
# arcs join random node pairs and cost a fixed factor times their Euclidean length.
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .graph import DirectedGraph
from .heuristics import EuclideanHeuristic

LAYOUT_WIDTH = 1000.0
LAYOUT_HEIGHT = 1000.0
ARC_LENGTH_FACTOR = 1.2  # >= 1 keeps the Euclidean heuristic admissible


@dataclass
class GraphData:
    graph: DirectedGraph
    heuristic: EuclideanHeuristic
    coords: Dict[int, Tuple[float, float]]
    seed: Optional[int] = None


def random_geometric_digraph(
    nodes: int,
    arcs: int,
    seed: Optional[int] = None,
    width: float = LAYOUT_WIDTH,
    height: float = LAYOUT_HEIGHT,
    arc_length_factor: float = ARC_LENGTH_FACTOR,
) -> GraphData:
    """
    Nodes 0..nodes-1 at uniform random points in [0, width) x [0, height).
    `arcs` arcs are drawn with replacement, self-loops included; a repeated pair
    simply overwrites the same arc, so the final edge count can be lower.
    """
    if nodes < 1:
        raise ValueError("need at least one node")
    if arcs < 0:
        raise ValueError("arcs must be >= 0")
    rng = np.random.default_rng(seed)

    xy = rng.random((nodes, 2)) * np.array([width, height])
    coords = {i: (float(x), float(y)) for i, (x, y) in enumerate(xy)}

    graph = DirectedGraph()
    for i in range(nodes):
        graph.add_node(i)

    src = rng.integers(0, nodes, size=arcs)
    dst = rng.integers(0, nodes, size=arcs)
    lengths = np.hypot(*(xy[src] - xy[dst]).T) * arc_length_factor
    for u, v, w in zip(src.tolist(), dst.tolist(), lengths.tolist()):
        graph.add_edge(u, v, w)

    return GraphData(graph=graph, heuristic=EuclideanHeuristic(coords), coords=coords, seed=seed)
