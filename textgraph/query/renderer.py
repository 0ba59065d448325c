"""User-facing messages for query results."""

from .types import (
    BridgeQuery,
    QueryStatus,
    ShortestPathResult,
    SingleSourceReport,
    WalkResult,
)

_ARROW = " -> "


def not_found_message(word: str | None) -> str:
    return f'No "{word}" in the graph!'


def _format_path(path: tuple[str, ...]) -> str:
    return _ARROW.join(path)


def render_single_source(report: SingleSourceReport) -> str:
    if report.status == QueryStatus.NODE_NOT_FOUND:
        return not_found_message(report.missing)

    lines: list[str] = []
    for entry in report.entries:
        if entry.reachable:
            lines.append(
                f'Shortest path from "{report.start}" to "{entry.target}": '
                f"{_format_path(entry.path)} (Distance: {entry.distance})"
            )
        else:
            lines.append(f'No path from "{report.start}" to "{entry.target}".')

    if not lines:
        return f'No other nodes reachable from "{report.start}".\n'
    return "\n".join(lines) + "\n"


def render_bridge_query(query: BridgeQuery) -> str:
    if query.status == QueryStatus.NODE_NOT_FOUND:
        return not_found_message(query.missing)

    if query.report is not None:
        return render_single_source(query.report)

    if query.status == QueryStatus.NO_BRIDGE:
        return f'No bridge words from "{query.word1}" to "{query.word2}"!'

    return (
        f'The bridge words from "{query.word1}" to "{query.word2}" are: '
        f"{', '.join(query.bridges)}."
    )


def render_shortest_paths(result: ShortestPathResult) -> str:
    if result.status == QueryStatus.NODE_NOT_FOUND:
        return not_found_message(result.missing)

    if result.status == QueryStatus.UNREACHABLE:
        return f'No path from "{result.source}" to "{result.target}".'

    noun = "path" if result.path_count == 1 else "paths"
    lines = [
        f"Found {result.path_count} shortest {noun} from "
        f'"{result.source}" to "{result.target}" (Distance: {result.distance}):'
    ]
    for index, path in enumerate(result.paths, 1):
        lines.append(f"Path {index}: {_format_path(path)}")
    return "\n".join(lines) + "\n"


def render_walk(result: WalkResult) -> str:
    if result.status == QueryStatus.EMPTY_GRAPH:
        return "The graph is empty!"
    return f"Random walk: {' '.join(result.nodes)}"


def render_page_rank(word: str, rank: float) -> str:
    return f"PageRank({word}) = {rank:.5f}"
