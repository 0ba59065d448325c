"""Text corpus parsing."""

from .corpus import Corpus, build_corpus, load_corpus, tokenize_line

__all__ = ["Corpus", "build_corpus", "load_corpus", "tokenize_line"]
