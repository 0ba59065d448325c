"""Corpus tokenizer and graph loader."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..graph.word_graph import WordGraph

log = logging.getLogger(__name__)

# Loader drops anything that is not a lowercase letter or whitespace
NON_LETTER_PATTERN = re.compile(r"[^a-z\s]")


@dataclass
class Corpus:
    """A built word graph together with the token stream it came from."""

    graph: WordGraph = field(default_factory=WordGraph)
    tokens: list[str] = field(default_factory=list)

    def clear(self) -> None:
        """Reset both the graph and the token stream."""
        self.graph.clear()
        self.tokens.clear()


def normalize_line(line: str) -> str:
    """Lowercase a line and delete every non-letter, non-space character."""
    return NON_LETTER_PATTERN.sub("", line.lower())


def tokenize_line(line: str) -> list[str]:
    """Split a raw line into normalized word tokens."""
    return normalize_line(line).split()


def add_line(corpus: Corpus, line: str) -> int:
    """Feed one line into ``corpus``.

    Returns:
        Number of tokens read from the line
    """
    words = tokenize_line(line)
    for current, following in zip(words, words[1:]):
        corpus.graph.add_edge(current, following)
    corpus.tokens.extend(words)
    return len(words)


def build_corpus(lines: Iterable[str], corpus: Corpus | None = None) -> Corpus:
    """Build a word graph from text lines.

    Edges only join words on the same line; every token, including the last
    one of each line, is appended to the token stream.
    """
    if corpus is None:
        corpus = Corpus()

    for line in lines:
        add_line(corpus, line)

    return corpus


def load_corpus(path: str | Path) -> Corpus:
    """Read a UTF-8 text file and build its word graph.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"Corpus file not found: {source}")

    with open(source, "r", encoding="utf-8") as f:
        corpus = build_corpus(f)

    stats = corpus.graph.get_stats()
    log.info(
        f"Loaded {source}: {len(corpus.tokens)} tokens, "
        f"{stats.nodes} nodes, {stats.edges} edges"
    )
    return corpus
