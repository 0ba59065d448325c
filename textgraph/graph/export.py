"""Plain-text artifacts: Graphviz DOT export, PNG rendering and walk output."""

import logging
import subprocess
from pathlib import Path
from typing import Any, Iterable

from .word_graph import WordGraph

log = logging.getLogger(__name__)


def _quote(token: str) -> str:
    return '"' + token.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(graph: WordGraph) -> str:
    """Describe the graph in DOT, one labelled edge per line."""
    lines = ["digraph G {"]
    for source in sorted(graph.nodes()):
        for target, weight in sorted(graph.neighbors(source).items()):
            lines.append(f'    {_quote(source)} -> {_quote(target)} [label="{weight}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_dot(graph: WordGraph, path: str | Path) -> Path:
    """Write the DOT description of ``graph`` to ``path``."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_dot(graph), encoding="utf-8")
    log.info(f"Exported DOT file: {output_path}")
    return output_path


def render_image(
    dot_path: str | Path,
    image_path: str | Path,
    *,
    fmt: str = "png",
) -> dict[str, Any]:
    """Render a DOT file with the Graphviz ``dot`` executable.

    Returns:
        Dict with ``success`` and either ``output`` or ``error``.
    """
    command = ["dot", f"-T{fmt}", str(dot_path), "-o", str(image_path)]
    try:
        completed = subprocess.run(command, capture_output=True, text=True)
    except FileNotFoundError:
        log.warning("Graphviz 'dot' executable not found")
        return {"success": False, "error": "Graphviz 'dot' executable not found"}

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        log.warning(f"dot failed: {stderr}")
        return {"success": False, "error": stderr or "unknown error"}

    log.info(f"Rendered image: {image_path}")
    return {"success": True, "output": str(image_path)}


def write_walk(nodes: Iterable[str], path: str | Path) -> Path:
    """Write a walk as a single space-joined line."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(" ".join(nodes), encoding="utf-8")
    log.info(f"Wrote walk to {output_path}")
    return output_path
