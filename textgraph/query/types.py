"""Typed results for graph queries."""

from dataclasses import dataclass
from enum import Enum


class QueryStatus(Enum):
    """Outcome of a graph query."""

    OK = "ok"
    NODE_NOT_FOUND = "node_not_found"
    NO_BRIDGE = "no_bridge"
    UNREACHABLE = "unreachable"
    EMPTY_GRAPH = "empty_graph"


@dataclass(frozen=True)
class PathEntry:
    target: str
    path: tuple[str, ...]
    distance: int | None

    @property
    def reachable(self) -> bool:
        return self.distance is not None


@dataclass(frozen=True)
class SingleSourceReport:
    start: str
    status: QueryStatus
    entries: tuple[PathEntry, ...] = ()
    missing: str | None = None


@dataclass(frozen=True)
class BridgeQuery:
    word1: str
    word2: str
    status: QueryStatus
    bridges: tuple[str, ...] = ()
    missing: str | None = None
    # set when word2 is empty and the query degrades to a path report
    report: SingleSourceReport | None = None


@dataclass(frozen=True)
class ShortestPathResult:
    source: str
    target: str
    status: QueryStatus
    distance: int | None = None
    paths: tuple[tuple[str, ...], ...] = ()
    missing: str | None = None

    @property
    def path_count(self) -> int:
        return len(self.paths)


@dataclass(frozen=True)
class WalkResult:
    status: QueryStatus
    nodes: tuple[str, ...] = ()
    # "dead_end", "repeated_edge", "cancelled" or "empty"
    stop_reason: str = "empty"

    @property
    def edges(self) -> tuple[tuple[str, str], ...]:
        return tuple(zip(self.nodes, self.nodes[1:]))
