"""
Tests for the unidirectional beam search.
"""

import networkx as nx
import pytest

from beam_lab.algorithms.beam import beam_search
from beam_lab.core.config import BeamConfig
from beam_lab.core.errors import InvalidArgumentError, PathNotFoundError, SearchLimitError
from beam_lab.core.metrics import SearchStats
from beam_lab.core.utils import is_valid_path, path_cost


def _dijkstra_cost(graph, source, target):
    g = nx.DiGraph()
    g.add_nodes_from(graph.nodes())
    g.add_weighted_edges_from(graph.edges())
    try:
        return nx.dijkstra_path_length(g, source, target)
    except nx.NetworkXNoPath:
        return None


class TestScenarios:
    """Hand-built graphs with known answers."""

    def test_unbounded_prefers_cheaper_longer_route(self, abcd_graph, zero):
        """A,B,C,D (cost 3) beats the direct A,C,D (cost 6)."""
        path = beam_search(abcd_graph, "A", "D", zero)
        assert path == ["A", "B", "C", "D"]
        assert path_cost(abcd_graph, path) == 3.0

    def test_beam_one_keeps_the_right_successor(self, abcd_graph, zero):
        """At A the beam scores B (1) ahead of C (5), so width 1 still finds the optimum."""
        assert beam_search(abcd_graph, "A", "D", zero, 1) == ["A", "B", "C", "D"]

    def test_beam_one_into_dead_end_fails(self, trap_graph, zero):
        """Width 1 keeps only the dead-end X; the unbounded search finds the real route."""
        assert beam_search(trap_graph, "A", "D", zero) == ["A", "B", "C", "D"]
        with pytest.raises(PathNotFoundError):
            beam_search(trap_graph, "A", "D", zero, 1)

    def test_beam_one_commits_to_expensive_route(self, detour_graph, zero):
        """Width 1 follows B and ends up with cost 11 instead of 3."""
        best = beam_search(detour_graph, "A", "D", zero)
        greedy = beam_search(detour_graph, "A", "D", zero, 1)
        assert best == ["A", "C", "D"]
        assert greedy == ["A", "B", "D"]
        assert path_cost(detour_graph, greedy) == 11.0 > path_cost(detour_graph, best)

    def test_source_equals_target(self, abcd_graph, zero):
        assert beam_search(abcd_graph, "C", "C", zero) == ["C"]
        assert beam_search(abcd_graph, "C", "C", zero, 1) == ["C"]

    def test_unreachable_target(self, disconnected_graph, zero):
        with pytest.raises(PathNotFoundError):
            beam_search(disconnected_graph, "A", "C", zero)
        with pytest.raises(PathNotFoundError):
            beam_search(disconnected_graph, "A", "Z", zero)

    def test_edge_direction_respected(self, abcd_graph, zero):
        """D has no outgoing arcs, so D -> A is unreachable even though A -> D is not."""
        with pytest.raises(PathNotFoundError):
            beam_search(abcd_graph, "D", "A", zero)

    def test_romania_arad_bucharest(self, romania):
        graph, h = romania
        path = beam_search(graph, "Arad", "Bucharest", h)
        assert path == ["Arad", "Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]
        assert path_cost(graph, path) == 418.0


class TestInputs:
    """Argument validation happens before any search work."""

    def test_missing_source(self, abcd_graph, zero):
        with pytest.raises(InvalidArgumentError, match="source"):
            beam_search(abcd_graph, "Q", "D", zero)

    def test_missing_target(self, abcd_graph, zero):
        with pytest.raises(InvalidArgumentError, match="target"):
            beam_search(abcd_graph, "A", "Q", zero)

    @pytest.mark.parametrize("which", ["graph", "source", "target", "heuristic"])
    def test_none_arguments(self, abcd_graph, zero, which):
        args = {"graph": abcd_graph, "source": "A", "target": "D", "heuristic": zero}
        args[which] = None
        with pytest.raises(InvalidArgumentError):
            beam_search(**args)

    def test_invalid_argument_is_value_error(self, abcd_graph):
        with pytest.raises(ValueError):
            beam_search(abcd_graph, "A", "D", 42)

    def test_plain_callable_heuristic(self, abcd_graph):
        assert beam_search(abcd_graph, "A", "D", lambda a, b: 0.0) == ["A", "B", "C", "D"]

    def test_zero_width_is_clamped_to_one(self, detour_graph, zero):
        assert beam_search(detour_graph, "A", "D", zero, 0) == beam_search(detour_graph, "A", "D", zero, 1)
        assert beam_search(detour_graph, "A", "D", zero, BeamConfig(beam_width=-3)) == ["A", "B", "D"]

    def test_edge_weight_errors_propagate(self, zero):
        class BrokenGraph:
            def has_node(self, n): return n in ("s", "t")
            def successors(self, n): return ["t"] if n == "s" else []
            def predecessors(self, n): return ["s"] if n == "t" else []
            def edge_weight(self, u, v): raise KeyError((u, v))

        with pytest.raises(KeyError):
            beam_search(BrokenGraph(), "s", "t", zero)


class TestStatsAndLimits:
    def test_stats_counts_expansions(self, abcd_graph, zero):
        stats = SearchStats()
        beam_search(abcd_graph, "A", "D", zero, stats=stats)
        assert stats.expanded == 3          # A, B, C; D is returned when popped
        assert stats.forward_expanded == 3
        assert stats.relaxed == 4           # B, C(5), C(2), D

    def test_max_expansions_aborts(self, abcd_graph, zero):
        with pytest.raises(SearchLimitError) as exc:
            beam_search(abcd_graph, "A", "D", zero, BeamConfig(max_expansions=1))
        assert exc.value.limit == 1

    def test_repeated_calls_are_identical(self, geo_data, geo_pairs):
        s, t = geo_pairs[0]
        runs = []
        for _ in range(2):
            try:
                runs.append(beam_search(geo_data.graph, s, t, geo_data.heuristic, 2))
            except PathNotFoundError:
                runs.append(None)
        assert runs[0] == runs[1]


class TestProperties:
    """Checks against networkx Dijkstra on a seeded random geometric digraph."""

    def test_unbounded_matches_dijkstra(self, geo_data, geo_pairs):
        for s, t in geo_pairs:
            expected = _dijkstra_cost(geo_data.graph, s, t)
            if expected is None:
                with pytest.raises(PathNotFoundError):
                    beam_search(geo_data.graph, s, t, geo_data.heuristic)
                continue
            path = beam_search(geo_data.graph, s, t, geo_data.heuristic)
            assert path_cost(geo_data.graph, path) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("width", [1, 2, 3, 5])
    def test_pruned_paths_are_valid_and_never_shorter(self, geo_data, geo_pairs, width):
        for s, t in geo_pairs:
            try:
                path = beam_search(geo_data.graph, s, t, geo_data.heuristic, width)
            except PathNotFoundError:
                continue
            assert is_valid_path(geo_data.graph, path, s, t, simple=True)
            optimum = _dijkstra_cost(geo_data.graph, s, t)
            assert optimum is not None
            assert path_cost(geo_data.graph, path) >= optimum - 1e-9
