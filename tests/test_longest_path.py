"""
Tests for the exhaustive longest-simple-path search.
"""

import pytest

from hike_lab.algorithms.longest_path import explore, longest_path_search, longest_simple_path
from hike_lab.algorithms.parallel import parallel_longest_path
from hike_lab.core.directions import Mode
from hike_lab.core.grid import parse_grid
from hike_lab.graph.junctions import build_junction_graph
from hike_lab.problems.sample import (
    ISOLATED_POCKET,
    ONE_WAY_LOOP,
    ONE_WAY_LOOP_EXPECTED,
    SAMPLE_MAZE,
    STRAIGHT_CORRIDOR,
)

FIXTURES = [SAMPLE_MAZE, STRAIGHT_CORRIDOR, ISOLATED_POCKET, ONE_WAY_LOOP]


def _graph(text, mode):
    return build_junction_graph(parse_grid(text), mode)


class TestSampleMaze:
    def test_directed(self, directed_graph) -> None:
        assert longest_simple_path(directed_graph) == 94

    def test_undirected(self, undirected_graph) -> None:
        assert longest_simple_path(undirected_graph) == 154

    def test_repeated_search_is_identical(self, undirected_graph) -> None:
        first = longest_path_search(undirected_graph, trace_memory=False)
        second = longest_path_search(undirected_graph, trace_memory=False)
        assert first.length == second.length == 154
        assert first.route == second.route
        assert first.nodes_expanded == second.nodes_expanded

    @pytest.mark.parametrize("mode,expected", [(Mode.DIRECTED, 94), (Mode.UNDIRECTED, 154)])
    def test_route_is_simple(self, sample_grid, mode, expected) -> None:
        graph = build_junction_graph(sample_grid, mode)
        result = longest_path_search(graph)
        assert result.success
        assert result.length == expected
        assert result.route[0] == (1, 0)
        assert result.route[-1] == (21, 22)
        assert len(result.route) == len(set(result.route))
        assert result.error is None

    def test_route_follows_edges(self, undirected_graph) -> None:
        g = undirected_graph
        result = longest_path_search(g, trace_memory=False)
        ids = [g.id_of(c) for c in result.route]
        total = 0
        for a, b in zip(ids, ids[1:]):
            weights = [e.weight for e in g.edges_from(a) if e.target == b]
            assert weights
            total += max(weights)
        assert total == result.length

    def test_metrics_are_reported(self, directed_graph) -> None:
        result = longest_path_search(directed_graph)
        assert result.nodes_expanded > 0
        assert result.time_s >= 0.0
        assert result.peak_kb >= 0
        assert result.as_dict()["route"][0] == [1, 0]


class TestPruning:
    @pytest.mark.parametrize("mode", list(Mode))
    @pytest.mark.parametrize("text", FIXTURES)
    def test_same_answer(self, text, mode) -> None:
        graph = _graph(text, mode)
        assert longest_simple_path(graph, prune=True) == longest_simple_path(graph)

    def test_expands_no_more(self, undirected_graph) -> None:
        plain = longest_path_search(undirected_graph, trace_memory=False)
        pruned = longest_path_search(undirected_graph, prune=True, trace_memory=False)
        assert pruned.length == plain.length
        assert pruned.nodes_expanded <= plain.nodes_expanded


class TestEdgeCases:
    @pytest.mark.parametrize("mode", list(Mode))
    def test_single_corridor(self, mode) -> None:
        assert longest_simple_path(_graph(STRAIGHT_CORRIDOR, mode)) == 6

    @pytest.mark.parametrize("mode", list(Mode))
    def test_no_path_is_none_not_zero(self, mode) -> None:
        graph = _graph(ISOLATED_POCKET, mode)
        assert longest_simple_path(graph) is None
        result = longest_path_search(graph)
        assert not result.success
        assert result.length is None
        assert result.route == []

    @pytest.mark.parametrize("mode", list(Mode))
    def test_one_way_loop(self, mode) -> None:
        assert longest_simple_path(_graph(ONE_WAY_LOOP, mode)) == ONE_WAY_LOOP_EXPECTED[mode.value]

    @pytest.mark.parametrize("text", FIXTURES)
    def test_undirected_never_shorter(self, text) -> None:
        directed = longest_simple_path(_graph(text, Mode.DIRECTED))
        undirected = longest_simple_path(_graph(text, Mode.UNDIRECTED))
        if directed is not None:
            assert undirected is not None
            assert undirected >= directed

    def test_wrong_exit_rejected(self, directed_graph) -> None:
        with pytest.raises(ValueError):
            longest_simple_path(directed_graph, exit=directed_graph.entrance)

    def test_expansion_budget(self, undirected_graph) -> None:
        result = longest_path_search(undirected_graph, max_expansions=3, trace_memory=False)
        assert not result.success
        assert result.nodes_expanded == 3
        assert result.error == "expansion budget exhausted"


class TestExplore:
    def test_seeded_ancestors_are_excluded(self, undirected_graph) -> None:
        g = undirected_graph
        (first,) = g.edges_from(g.entrance)
        best, route, _, exhausted = explore(g, first.target, length=first.weight, ancestors=(g.entrance,))
        assert best == 154
        assert route[0] == g.entrance
        assert not exhausted


class TestParallel:
    @pytest.mark.parametrize("mode,expected", [(Mode.DIRECTED, 94), (Mode.UNDIRECTED, 154)])
    def test_matches_sequential(self, sample_grid, mode, expected) -> None:
        graph = build_junction_graph(sample_grid, mode)
        result = parallel_longest_path(graph, max_workers=2)
        assert result.success
        assert result.length == expected
        assert result.branches == [expected]

    def test_no_branches(self) -> None:
        graph = _graph("#.#\n###\n#.#\n", Mode.DIRECTED)
        result = parallel_longest_path(graph, max_workers=2)
        assert not result.success
        assert result.length is None
