"""NetworkX-backed word adjacency graph."""

from dataclasses import dataclass
from typing import Iterator

import networkx as nx


def normalize_token(token: str) -> str:
    """Case-fold a token to its graph identity."""
    return token.lower()


@dataclass
class GraphStats:
    """Statistics about the word graph."""

    nodes: int
    edges: int
    total_weight: int
    dangling: int

    def __str__(self) -> str:
        return (
            f"Graph Stats:\n"
            f"  Nodes: {self.nodes} ({self.dangling} dangling)\n"
            f"  Edges: {self.edges} (total weight {self.total_weight})"
        )


class WordGraph:
    """Directed graph of adjacent words, weighted by occurrence count.

    Nodes only ever enter the graph as endpoints of an edge, so the node set
    is exactly the union of all sources and destinations.
    """

    def __init__(self):
        self.graph = nx.DiGraph()

    def add_edge(self, source: str, target: str) -> None:
        """Record one occurrence of ``source`` followed by ``target``."""
        source = normalize_token(source)
        target = normalize_token(target)

        if self.graph.has_edge(source, target):
            self.graph.edges[source, target]["weight"] += 1
        else:
            self.graph.add_edge(source, target, weight=1)

    def neighbors(self, node: str) -> dict[str, int]:
        """Successors of ``node`` mapped to edge weight (empty if none)."""
        node = normalize_token(node)
        if node not in self.graph:
            return {}
        return {
            target: data["weight"] for target, data in self.graph.adj[node].items()
        }

    def edge_weight(self, source: str, target: str) -> int:
        """Weight of the ``source -> target`` edge, or 0 if absent."""
        data = self.graph.get_edge_data(
            normalize_token(source), normalize_token(target)
        )
        if data is None:
            return 0
        return data["weight"]

    def nodes(self) -> set[str]:
        """All tokens appearing as a source or a destination."""
        return set(self.graph.nodes)

    def contains_node(self, word: str) -> bool:
        return normalize_token(word) in self.graph

    def predecessors(self, node: str) -> list[str]:
        node = normalize_token(node)
        if node not in self.graph:
            return []
        return list(self.graph.predecessors(node))

    def out_weight(self, node: str) -> int:
        """Sum of outgoing edge weights (multiplicity-aware out-degree)."""
        node = normalize_token(node)
        if node not in self.graph:
            return 0
        return int(self.graph.out_degree(node, weight="weight"))

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Iterate over ``(source, target, weight)`` triples."""
        for source, target, data in self.graph.edges(data=True):
            yield source, target, data["weight"]

    def clear(self) -> None:
        """Drop every edge and node."""
        self.graph.clear()

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        return GraphStats(
            nodes=self.graph.number_of_nodes(),
            edges=self.graph.number_of_edges(),
            total_weight=int(self.graph.size(weight="weight")),
            dangling=sum(1 for _, degree in self.graph.out_degree() if degree == 0),
        )

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_node(word)
