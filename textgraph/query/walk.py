"""Paced random walk that stops on dead ends, repeated edges or cancellation."""

import logging
import random
import threading
from pathlib import Path
from typing import Callable

from ..config import DEFAULT_CONFIG
from ..graph.export import write_walk
from ..graph.word_graph import WordGraph
from .types import QueryStatus, WalkResult

log = logging.getLogger(__name__)


class WalkGenerator:
    """Follow random outgoing edges until the walk cannot or should not go on.

    The walk ends when the current node has no successors, when the chosen
    edge was already taken earlier in this walk, or when ``cancel`` is set.
    Between steps the generator waits ``interval`` seconds on ``cancel`` so a
    stop request interrupts the pause immediately.
    """

    def __init__(
        self,
        graph: WordGraph,
        *,
        rng: random.Random | None = None,
        interval: float = DEFAULT_CONFIG.walk_interval,
        cancel: threading.Event | None = None,
        on_step: Callable[[str], None] | None = None,
    ):
        self.graph = graph
        self.rng = rng or random.Random()
        self.interval = max(0.0, interval)
        self.cancel = cancel or threading.Event()
        self.on_step = on_step

    def run(self) -> WalkResult:
        nodes = sorted(self.graph.nodes())
        if not nodes:
            return WalkResult(status=QueryStatus.EMPTY_GRAPH, stop_reason="empty")

        current = self.rng.choice(nodes)
        walk = [current]
        used_edges: set[tuple[str, str]] = set()
        stop_reason = "dead_end"

        while True:
            neighbors = sorted(self.graph.neighbors(current))
            if not neighbors:
                stop_reason = "dead_end"
                break

            following = self.rng.choice(neighbors)
            edge = (current, following)
            if edge in used_edges:
                stop_reason = "repeated_edge"
                break

            used_edges.add(edge)
            current = following
            walk.append(current)

            if self.on_step is not None:
                self.on_step(current)

            if self.interval > 0:
                self.cancel.wait(self.interval)
            if self.cancel.is_set():
                stop_reason = "cancelled"
                break

        log.info(f"Random walk stopped ({stop_reason}) after {len(walk)} nodes")
        return WalkResult(status=QueryStatus.OK, nodes=tuple(walk), stop_reason=stop_reason)


def random_walk(
    graph: WordGraph,
    *,
    rng: random.Random | None = None,
    interval: float = DEFAULT_CONFIG.walk_interval,
    cancel: threading.Event | None = None,
    on_step: Callable[[str], None] | None = None,
    output_path: str | Path | None = None,
) -> WalkResult:
    """Run one walk and optionally persist it as a single line of text."""
    result = WalkGenerator(
        graph, rng=rng, interval=interval, cancel=cancel, on_step=on_step
    ).run()

    if output_path is not None and result.status == QueryStatus.OK:
        write_walk(result.nodes, output_path)

    return result
