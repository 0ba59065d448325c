"""Tests for single-source BFS reports and tied weighted shortest paths."""

import itertools

import pytest

from textgraph.graph.word_graph import WordGraph
from textgraph.query.paths import (
    calc_shortest_path,
    find_shortest_paths,
    shortest_path,
    shortest_paths_from,
)
from textgraph.query.types import QueryStatus


def _graph(edges: list[tuple[str, str]]) -> WordGraph:
    graph = WordGraph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def _path_cost(graph: WordGraph, path: tuple[str, ...]) -> int:
    return sum(graph.edge_weight(a, b) for a, b in zip(path, path[1:]))


@pytest.fixture
def diamond():
    """Two tied routes a->b->d and a->c->d, plus a heavier direct a->d."""
    return _graph(
        [
            ("a", "b"),
            ("b", "d"),
            ("a", "c"),
            ("c", "d"),
            ("a", "d"),
            ("a", "d"),
            ("a", "d"),
        ]
    )


def test_single_source_report(diamond):
    diamond.add_edge("e", "a")
    report = shortest_paths_from(diamond, "A")

    assert report.status == QueryStatus.OK
    by_target = {entry.target: entry for entry in report.entries}
    assert set(by_target) == {"b", "c", "d", "e"}

    # BFS ignores weights: heavy direct edge still wins by hop count
    assert by_target["d"].path == ("a", "d")
    assert by_target["d"].distance == 1
    assert by_target["b"].path == ("a", "b")
    assert not by_target["e"].reachable


def test_single_source_paths_are_valid_edges():
    graph = _graph([("a", "b"), ("b", "c"), ("c", "a"), ("c", "d"), ("b", "d")])
    report = shortest_paths_from(graph, "a")

    for entry in report.entries:
        assert entry.path[0] == "a"
        assert entry.path[-1] == entry.target
        assert len(entry.path) - 1 == entry.distance
        for source, target in zip(entry.path, entry.path[1:]):
            assert graph.edge_weight(source, target) > 0


def test_single_source_missing_start(diamond):
    report = shortest_paths_from(diamond, "zzz")
    assert report.status == QueryStatus.NODE_NOT_FOUND
    assert find_shortest_paths(diamond, "zzz") == 'No "zzz" in the graph!'


def test_single_source_rendering(diamond):
    diamond.add_edge("e", "a")
    text = find_shortest_paths(diamond, "a")

    assert 'Shortest path from "a" to "b": a -> b (Distance: 1)' in text
    assert 'No path from "a" to "e".' in text


def test_all_tied_paths_returned(diamond):
    result = shortest_path(diamond, "a", "d")

    assert result.status == QueryStatus.OK
    assert result.distance == 2
    assert result.paths == (("a", "b", "d"), ("a", "c", "d"))
    assert result.path_count == 2


def test_weighted_path_prefers_light_route():
    graph = _graph([("a", "b"), ("a", "b"), ("a", "b"), ("a", "c"), ("c", "b")])

    result = shortest_path(graph, "a", "b")
    assert result.distance == 2
    assert result.paths == (("a", "c", "b"),)


def test_pairwise_missing_nodes(diamond):
    assert shortest_path(diamond, "zzz", "a").missing == "zzz"
    assert shortest_path(diamond, "a", "yyy").missing == "yyy"
    assert calc_shortest_path(diamond, "a", "yyy") == 'No "yyy" in the graph!'


def test_pairwise_unreachable(diamond):
    result = shortest_path(diamond, "d", "a")
    assert result.status == QueryStatus.UNREACHABLE
    assert calc_shortest_path(diamond, "d", "a") == 'No path from "d" to "a".'


def test_pairwise_same_node(diamond):
    result = shortest_path(diamond, "a", "a")
    assert result.distance == 0
    assert result.paths == (("a",),)


def test_pairwise_rendering(diamond):
    text = calc_shortest_path(diamond, "A", "D")

    assert text.startswith('Found 2 shortest paths from "a" to "d" (Distance: 2):')
    assert "Path 1: a -> b -> d" in text
    assert "Path 2: a -> c -> d" in text


def _all_simple_paths(graph: WordGraph, source: str, target: str):
    stack = [(source, (source,))]
    while stack:
        node, path = stack.pop()
        if node == target:
            yield path
            continue
        for neighbor in graph.neighbors(node):
            if neighbor not in path:
                stack.append((neighbor, path + (neighbor,)))


def test_returned_paths_are_exactly_the_minimum_cost_set():
    words = ["a", "b", "c", "d", "e", "f"]
    graph = WordGraph()
    # Deterministic dense graph with many ties
    for index, (source, target) in enumerate(itertools.permutations(words, 2)):
        if (index * 7) % 3 != 0:
            for _ in range(1 + index % 2):
                graph.add_edge(source, target)

    for source, target in itertools.permutations(words, 2):
        result = shortest_path(graph, source, target)
        simple = list(_all_simple_paths(graph, source, target))
        if not simple:
            assert result.status == QueryStatus.UNREACHABLE
            continue

        best = min(_path_cost(graph, path) for path in simple)
        expected = sorted(path for path in simple if _path_cost(graph, path) == best)

        assert result.distance == best
        assert list(result.paths) == expected
        for path in result.paths:
            assert _path_cost(graph, path) == result.distance
