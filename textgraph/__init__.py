"""Word adjacency graphs built from text, with bridge, path, rank and walk queries."""

from .graph.word_graph import WordGraph
from .parser.corpus import Corpus, build_corpus, load_corpus

__all__ = ["WordGraph", "Corpus", "build_corpus", "load_corpus"]
