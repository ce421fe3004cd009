# beam_lab/core/utils.py
# Turning parent maps back into node sequences, and checking/costing a returned path.
from __future__ import annotations
from typing import Dict, Hashable, List, Optional, Sequence

from .problem import Graph


def reconstruct_path(parents: Dict[Hashable, Optional[Hashable]], end) -> List:
    """Follow parent links from `end` back to the root (parent None), root first."""
    path = []
    cur = end
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path


def join_paths(forward_parents: Dict, backward_parents: Dict, meeting) -> List:
    """
    source ... meeting ... target.

    The forward chain is reversed as usual. The backward chain already runs
    meeting -> target, so it is appended as walked, starting one step past the
    meeting node so that node appears once.
    """
    path = reconstruct_path(forward_parents, meeting)
    cur = backward_parents[meeting]
    while cur is not None:
        path.append(cur)
        cur = backward_parents[cur]
    return path


def path_cost(graph: Graph, path: Sequence) -> float:
    # Missing edges raise whatever graph.edge_weight raises.
    return float(sum(graph.edge_weight(u, v) for u, v in zip(path, path[1:])))


def is_valid_path(graph: Graph, path: Sequence, source=None, target=None, simple: bool = False) -> bool:
    """True if consecutive nodes are joined by edges in the forward direction.
    With simple=True a repeated node also fails the check."""
    if not path:
        return False
    if simple and len(set(path)) != len(path):
        return False
    if source is not None and path[0] != source:
        return False
    if target is not None and path[-1] != target:
        return False
    if not all(graph.has_node(n) for n in path):
        return False
    for u, v in zip(path, path[1:]):
        if v not in set(graph.successors(u)):
            return False
    return True
