"""Word graph model and its file exports."""

from .word_graph import GraphStats, WordGraph, normalize_token

__all__ = ["GraphStats", "WordGraph", "normalize_token"]
