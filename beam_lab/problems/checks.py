def sanity_check_graph(graph, max_nodes: int = 10_000):
    """Visits up to max_nodes nodes and checks edge weights are present and non-negative
    and that successors/predecessors describe the same arcs."""
    from collections import deque
    seen = set()
    q = deque(graph.nodes())
    steps = 0
    while q and steps < max_nodes:
        u = q.popleft()
        if u in seen:
            continue
        seen.add(u)
        for v in graph.successors(u):
            w = graph.edge_weight(u, v)
            if w is None or w < 0:
                raise AssertionError(f"bad weight {w!r} on edge {u!r} -> {v!r}")
            if u not in set(graph.predecessors(v)):
                raise AssertionError(f"{u!r} -> {v!r} missing from predecessors of {v!r}")
            q.append(v)
        for p in graph.predecessors(u):
            if u not in set(graph.successors(p)):
                raise AssertionError(f"{p!r} listed as predecessor of {u!r} without the arc")
        steps += 1
    return f"OK: visited {len(seen)} nodes; weights and reverse arcs consistent."
