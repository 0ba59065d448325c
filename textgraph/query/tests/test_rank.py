"""Tests for term-frequency seeded PageRank."""

import itertools

import pytest

from textgraph.graph.word_graph import WordGraph
from textgraph.parser.corpus import build_corpus
from textgraph.query.rank import initial_ranks, iter_page_rank, page_rank, page_rank_vector


@pytest.fixture
def corpus():
    return build_corpus(
        [
            "the scientist carefully analyzed the data",
            "the team requested more data",
            "the scientist wrote a report",
        ]
    )


def test_initial_ranks_follow_term_frequency(corpus):
    seed = initial_ranks(corpus.graph, corpus.tokens)

    total = len(corpus.tokens)
    assert seed["the"] == pytest.approx(4 / total)
    assert seed["data"] == pytest.approx(2 / total)
    assert sum(seed.values()) == pytest.approx(1.0)


def test_initial_ranks_when_every_node_has_frequency():
    graph = WordGraph()
    graph.add_edge("a", "b")

    # N == |tf|: the shared-remainder branch must be skipped
    seed = initial_ranks(graph, ["a", "b", "b"])
    assert seed == {"a": pytest.approx(1 / 3), "b": pytest.approx(2 / 3)}


def test_initial_ranks_unseen_nodes_share_remainder():
    graph = WordGraph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")

    seed = initial_ranks(graph, ["a", "zzz"])
    assert seed["a"] == pytest.approx(1.0)
    assert seed["b"] == 0.0
    assert seed["c"] == 0.0


def test_initial_ranks_uniform_without_corpus_overlap():
    graph = WordGraph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")

    seed = initial_ranks(graph, ["unrelated"])
    assert seed == {node: pytest.approx(1 / 3) for node in ("a", "b", "c")}


def test_mass_is_conserved_every_iteration(corpus):
    rounds = 0
    for ranks in iter_page_rank(corpus.graph, corpus.tokens):
        rounds += 1
        assert sum(ranks.values()) == pytest.approx(1.0, abs=1e-9)
        assert all(0.0 <= value <= 1.0 for value in ranks.values())
    assert rounds == 100


def test_iteration_count_is_exact(corpus):
    assert len(list(iter_page_rank(corpus.graph, corpus.tokens, iterations=7))) == 7


def test_generator_can_stop_early(corpus):
    first_three = list(itertools.islice(iter_page_rank(corpus.graph, corpus.tokens), 3))
    assert len(first_three) == 3


def test_two_node_cycle_is_symmetric():
    graph = WordGraph()
    graph.add_edge("a", "b")
    graph.add_edge("b", "a")

    assert page_rank(graph, "a", ["a", "b"]) == pytest.approx(0.5)
    assert page_rank(graph, "b", ["a", "b"]) == pytest.approx(0.5)


def test_dangling_mass_redistributed():
    graph = WordGraph()
    graph.add_edge("a", "b")

    # a -> b with b dangling: the result must be a fixed point of one more round
    ranks = page_rank_vector(graph, ["a", "b"])
    d = 0.85
    pa = (1 - d) / 2 + d * ranks["b"] / 2
    pb = (1 - d) / 2 + d * ranks["a"] + d * ranks["b"] / 2
    assert ranks["a"] == pytest.approx(pa, abs=1e-9)
    assert ranks["b"] == pytest.approx(pb, abs=1e-9)
    assert ranks["b"] > ranks["a"]


def test_edge_weights_count_as_multiplicity():
    graph = WordGraph()
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")
    graph.add_edge("a", "c")
    graph.add_edge("b", "a")
    graph.add_edge("c", "a")

    ranks = page_rank_vector(graph, ["a", "b", "c"])
    # b receives 3/4 of a's mass, c receives 1/4 of it
    assert ranks["b"] > ranks["c"]


def test_page_rank_unknown_word_and_case(corpus):
    assert page_rank(corpus.graph, "unicorn", corpus.tokens) == 0.0
    assert page_rank(corpus.graph, "THE", corpus.tokens) == pytest.approx(
        page_rank(corpus.graph, "the", corpus.tokens)
    )


def test_page_rank_empty_graph():
    assert page_rank_vector(WordGraph(), ["a"]) == {}
    assert page_rank(WordGraph(), "a", ["a"]) == 0.0


def test_repeated_bigram_passes_full_weight():
    graph = WordGraph()
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")
    graph.add_edge("b", "a")

    rounds = list(iter_page_rank(graph, ["a", "b", "b", "b"], iterations=3))

    # a gives all of its 0.25 to b, b gives all of its 0.75 to a
    assert rounds[0]["a"] == pytest.approx(0.075 + 0.85 * 0.75)
    assert rounds[0]["b"] == pytest.approx(0.075 + 0.85 * 0.25)
    for ranks in rounds:
        assert sum(ranks.values()) == pytest.approx(1.0, abs=1e-12)


def test_zero_iterations_return_the_seed(corpus):
    ranks = page_rank_vector(corpus.graph, corpus.tokens, iterations=0)
    assert ranks == initial_ranks(corpus.graph, corpus.tokens)
