"""Term-frequency seeded PageRank with dangling-node redistribution."""

from collections import Counter
from typing import Iterable, Iterator

from ..config import DEFAULT_CONFIG
from ..graph.word_graph import WordGraph, normalize_token


def initial_ranks(graph: WordGraph, corpus_tokens: Iterable[str]) -> dict[str, float]:
    """Seed ranks from corpus term frequency.

    Nodes seen in the corpus start at their relative frequency; the rest
    share whatever mass is left. If no corpus token is a node, the seed is
    uniform.
    """
    nodes = graph.nodes()
    n = len(nodes)
    if n == 0:
        return {}

    tf = Counter(
        token for token in map(normalize_token, corpus_tokens) if token in nodes
    )
    total_count = sum(tf.values())
    if total_count == 0:
        return {node: 1.0 / n for node in nodes}

    ranks = {node: count / total_count for node, count in tf.items()}

    # Skipped when every node already has a frequency
    unseen = n - len(tf)
    if unseen > 0:
        default_rank = (1.0 - sum(tf.values()) / total_count) / unseen
        for node in nodes:
            ranks.setdefault(node, default_rank)

    return ranks


def iter_page_rank(
    graph: WordGraph,
    corpus_tokens: Iterable[str],
    *,
    damping: float = DEFAULT_CONFIG.damping,
    iterations: int = DEFAULT_CONFIG.page_rank_iterations,
) -> Iterator[dict[str, float]]:
    """Yield the full rank vector after each of ``iterations`` rounds.

    Stop consuming the iterator to cancel early.
    """
    ranks = initial_ranks(graph, corpus_tokens)
    n = len(ranks)
    if n == 0:
        return

    nodes = sorted(ranks)
    out_weight = {node: graph.out_weight(node) for node in nodes}
    incoming = {
        node: [(pred, graph.edge_weight(pred, node)) for pred in graph.predecessors(node)]
        for node in nodes
    }
    dangling = [node for node in nodes if out_weight[node] == 0]
    teleport = (1.0 - damping) / n

    for _ in range(iterations):
        dangling_mass = sum(ranks[node] for node in dangling)
        base = teleport + damping * dangling_mass / n

        new_ranks: dict[str, float] = {}
        for node in nodes:
            contribution = sum(
                ranks[pred] * weight / out_weight[pred] for pred, weight in incoming[node]
            )
            new_ranks[node] = base + damping * contribution

        ranks = new_ranks
        yield ranks


def page_rank_vector(
    graph: WordGraph,
    corpus_tokens: Iterable[str],
    *,
    damping: float = DEFAULT_CONFIG.damping,
    iterations: int = DEFAULT_CONFIG.page_rank_iterations,
) -> dict[str, float]:
    """Rank of every node after exactly ``iterations`` rounds."""
    # Zero iterations return the seed itself
    tokens = list(corpus_tokens)
    ranks = initial_ranks(graph, tokens)
    for ranks in iter_page_rank(graph, tokens, damping=damping, iterations=iterations):
        pass
    return ranks


def page_rank(
    graph: WordGraph,
    word: str,
    corpus_tokens: Iterable[str],
    *,
    damping: float = DEFAULT_CONFIG.damping,
    iterations: int = DEFAULT_CONFIG.page_rank_iterations,
) -> float:
    """Rank of ``word``, or 0.0 if it is not in the graph."""
    ranks = page_rank_vector(
        graph, corpus_tokens, damping=damping, iterations=iterations
    )
    return ranks.get(normalize_token(word), 0.0)
