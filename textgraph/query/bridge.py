"""Bridge-word lookup and bridge-based text rewriting."""

import logging
import random
import re

from ..graph.word_graph import WordGraph, normalize_token
from .paths import shortest_paths_from
from .renderer import render_bridge_query
from .types import BridgeQuery, QueryStatus

log = logging.getLogger(__name__)

_WORD_SPLIT_RE = re.compile(r"[^a-z]+")


def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> set[str]:
    """Tokens ``b`` with both ``word1 -> b`` and ``b -> word2`` edges."""
    word2 = normalize_token(word2)
    return {
        candidate
        for candidate in graph.neighbors(word1)
        if word2 in graph.neighbors(candidate)
    }


def resolve_bridge_words(graph: WordGraph, word1: str, word2: str) -> BridgeQuery:
    """Classify a bridge query.

    An empty ``word2`` turns the query into a single-source shortest-path
    report rooted at ``word1``.
    """
    word1 = normalize_token(word1)
    word2 = normalize_token(word2)

    if not graph.contains_node(word1):
        return BridgeQuery(word1, word2, QueryStatus.NODE_NOT_FOUND, missing=word1)

    if not word2:
        report = shortest_paths_from(graph, word1)
        return BridgeQuery(word1, word2, QueryStatus.OK, report=report)

    if not graph.contains_node(word2):
        return BridgeQuery(word1, word2, QueryStatus.NODE_NOT_FOUND, missing=word2)

    bridges = find_bridge_words(graph, word1, word2)
    if not bridges:
        return BridgeQuery(word1, word2, QueryStatus.NO_BRIDGE)

    return BridgeQuery(word1, word2, QueryStatus.OK, bridges=tuple(sorted(bridges)))


def query_bridge_words(graph: WordGraph, word1: str, word2: str) -> str:
    """Bridge words between two tokens, as a user-facing message."""
    return render_bridge_query(resolve_bridge_words(graph, word1, word2))


def tokenize_text(text: str) -> list[str]:
    """Lowercase and split on every non-letter character."""
    return [token for token in _WORD_SPLIT_RE.split(text.lower()) if token]


def generate_new_text(
    graph: WordGraph,
    text: str,
    rng: random.Random | None = None,
) -> str:
    """Insert one random bridge word between each adjacent pair that has any."""
    if rng is None:
        rng = random.Random()

    words = tokenize_text(text)
    if not words:
        return ""

    output = [words[0]]
    inserted = 0
    for current, following in zip(words, words[1:]):
        bridges = sorted(find_bridge_words(graph, current, following))
        if bridges:
            output.append(rng.choice(bridges))
            inserted += 1
        output.append(following)

    log.debug(f"Inserted {inserted} bridge words into {len(words)} tokens")
    return " ".join(output)
