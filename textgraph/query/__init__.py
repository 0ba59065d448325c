"""Bridge, path, rank and walk queries over a word graph."""

from .bridge import (
    find_bridge_words,
    generate_new_text,
    query_bridge_words,
    resolve_bridge_words,
)
from .paths import (
    calc_shortest_path,
    find_shortest_paths,
    shortest_path,
    shortest_paths_from,
)
from .rank import iter_page_rank, page_rank, page_rank_vector
from .types import QueryStatus
from .walk import WalkGenerator, random_walk

__all__ = [
    "find_bridge_words",
    "generate_new_text",
    "query_bridge_words",
    "resolve_bridge_words",
    "shortest_path",
    "shortest_paths_from",
    "iter_page_rank",
    "page_rank",
    "page_rank_vector",
    "calc_shortest_path",
    "find_shortest_paths",
    "QueryStatus",
    "WalkGenerator",
    "random_walk",
]
