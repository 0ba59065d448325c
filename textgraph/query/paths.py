"""Shortest-path search over the word graph."""

import heapq
import logging
from collections import deque

from ..graph.word_graph import WordGraph, normalize_token
from .renderer import render_shortest_paths, render_single_source
from .types import PathEntry, QueryStatus, ShortestPathResult, SingleSourceReport

log = logging.getLogger(__name__)


def _breadth_first(graph: WordGraph, start: str) -> tuple[dict[str, int], dict[str, str]]:
    """Unit-cost BFS; the first node to reach a target becomes its predecessor."""
    distances: dict[str, int] = {start: 0}
    predecessors: dict[str, str] = {}
    queue: deque[str] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in distances:
                continue
            distances[neighbor] = distances[current] + 1
            predecessors[neighbor] = current
            queue.append(neighbor)

    return distances, predecessors


def _walk_back(node: str, predecessors: dict[str, str]) -> tuple[str, ...]:
    path = [node]
    while path[-1] in predecessors:
        path.append(predecessors[path[-1]])
    path.reverse()
    return tuple(path)


def shortest_paths_from(graph: WordGraph, start: str) -> SingleSourceReport:
    """Hop-count shortest path from ``start`` to every other node."""
    start = normalize_token(start)
    if not graph.contains_node(start):
        return SingleSourceReport(
            start=start, status=QueryStatus.NODE_NOT_FOUND, missing=start
        )

    distances, predecessors = _breadth_first(graph, start)

    entries: list[PathEntry] = []
    for node in sorted(graph.nodes()):
        if node == start:
            continue
        if node in distances:
            entries.append(
                PathEntry(
                    target=node,
                    path=_walk_back(node, predecessors),
                    distance=distances[node],
                )
            )
        else:
            entries.append(PathEntry(target=node, path=(), distance=None))

    log.debug(f"BFS from {start!r} reached {len(distances) - 1} nodes")
    return SingleSourceReport(
        start=start, status=QueryStatus.OK, entries=tuple(entries)
    )


def _tied_dijkstra(
    graph: WordGraph, source: str
) -> tuple[dict[str, int], dict[str, set[str]]]:
    """Weighted Dijkstra keeping every predecessor on a minimum-cost path."""
    dist: dict[str, int] = {source: 0}
    predecessors: dict[str, set[str]] = {source: set()}
    visited: set[str] = set()
    heap = [(0, source)]

    while heap:
        current_dist, current = heapq.heappop(heap)
        if current in visited:
            continue
        visited.add(current)

        for neighbor, weight in graph.neighbors(current).items():
            candidate = current_dist + weight
            known = dist.get(neighbor)
            if known is None or candidate < known:
                dist[neighbor] = candidate
                predecessors[neighbor] = {current}
                heapq.heappush(heap, (candidate, neighbor))
            elif candidate == known:
                predecessors[neighbor].add(current)

    return dist, predecessors


def _enumerate_paths(
    source: str, target: str, predecessors: dict[str, set[str]]
) -> list[tuple[str, ...]]:
    """Backtrack every path from ``target`` to ``source`` over the predecessor DAG."""
    paths: list[tuple[str, ...]] = []
    stack: list[tuple[str, tuple[str, ...]]] = [(target, (target,))]

    while stack:
        node, suffix = stack.pop()
        if node == source:
            paths.append(suffix)
            continue
        for pred in sorted(predecessors.get(node, ()), reverse=True):
            stack.append((pred, (pred,) + suffix))

    return sorted(paths)


def shortest_path(graph: WordGraph, word1: str, word2: str) -> ShortestPathResult:
    """All minimum-weight paths from ``word1`` to ``word2``."""
    source = normalize_token(word1)
    target = normalize_token(word2)

    for word in (source, target):
        if not graph.contains_node(word):
            return ShortestPathResult(
                source=source,
                target=target,
                status=QueryStatus.NODE_NOT_FOUND,
                missing=word,
            )

    dist, predecessors = _tied_dijkstra(graph, source)
    if target not in dist:
        return ShortestPathResult(
            source=source, target=target, status=QueryStatus.UNREACHABLE
        )

    paths = _enumerate_paths(source, target, predecessors)
    log.debug(f"{len(paths)} shortest paths {source!r} -> {target!r}")
    return ShortestPathResult(
        source=source,
        target=target,
        status=QueryStatus.OK,
        distance=dist[target],
        paths=tuple(paths),
    )


def find_shortest_paths(graph: WordGraph, start: str) -> str:
    """Single-source report as a user-facing message."""
    return render_single_source(shortest_paths_from(graph, start))


def calc_shortest_path(graph: WordGraph, word1: str, word2: str) -> str:
    """Pairwise shortest paths as a user-facing message."""
    return render_shortest_paths(shortest_path(graph, word1, word2))
