"""Configuration for graph queries and exports."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextGraphConfig:
    """Constants controlling ranking, walks and output locations."""

    damping: float = 0.85
    page_rank_iterations: int = 100
    max_page_rank_iterations: int = 10_000

    # seconds between random walk steps
    walk_interval: float = 1.0

    dot_path: str = "graph_output.dot"
    image_path: str = "graph_output.png"
    html_path: str = "output/graph.html"
    walk_output_path: str = "random_walk.txt"

    def clamp_iterations(self, iterations: int) -> int:
        """Clamp PageRank iteration count to supported range."""
        if iterations < 1:
            return 1
        if iterations > self.max_page_rank_iterations:
            return self.max_page_rank_iterations
        return iterations


DEFAULT_CONFIG = TextGraphConfig()
