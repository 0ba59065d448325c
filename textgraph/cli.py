"""CLI for textgraph."""

import logging
import os
import random
import threading
from pathlib import Path

import click

from .config import DEFAULT_CONFIG
from .graph.export import export_dot, render_image
from .graph.word_graph import WordGraph
from .parser.corpus import Corpus, load_corpus
from .query.bridge import generate_new_text, query_bridge_words
from .query.paths import calc_shortest_path, find_shortest_paths
from .query.rank import page_rank
from .query.renderer import render_page_rank, render_walk
from .query.walk import random_walk

corpus_argument = click.argument(
    "corpus_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.environ.get("TEXTGRAPH_LOG_LEVEL", "WARNING"),
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (env: TEXTGRAPH_LOG_LEVEL)",
)
def cli(log_level: str):
    """Textgraph - word adjacency graphs for text corpora."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(corpus_path: Path) -> Corpus:
    try:
        return load_corpus(corpus_path)
    except (FileNotFoundError, UnicodeDecodeError) as exc:
        raise SystemExit(str(exc)) from exc


def _show_graph(graph: WordGraph, dot_path: Path, image_path: Path, render: bool):
    click.echo(str(graph.get_stats()))
    for source, target, weight in sorted(graph.edges()):
        click.echo(f"{source} -> {target} [weight={weight}]")

    try:
        export_dot(graph, dot_path)
    except OSError as exc:
        click.echo(f"Failed to write DOT file: {exc}", err=True)
        return
    click.echo(f"DOT file: {dot_path}")

    if not render:
        return
    result = render_image(dot_path, image_path)
    if result["success"]:
        click.echo(f"Image: {result['output']}")
    else:
        click.echo(f"Rendering failed: {result['error']}", err=True)


def _start_stop_listener(cancel: threading.Event) -> threading.Thread | None:
    """Set ``cancel`` when the user presses Enter (interactive terminals only)."""
    stdin = click.get_text_stream("stdin")
    if not stdin.isatty():
        return None

    def _wait_for_enter():
        stdin.readline()
        cancel.set()

    listener = threading.Thread(target=_wait_for_enter, daemon=True)
    listener.start()
    return listener


def _run_walk(graph: WordGraph, interval: float, output: Path) -> None:
    """Run a walk, printing each step.

    On a terminal, Enter stops the walk early. A walk that ends on its own
    still waits for Enter before returning, since the stdin reader cannot be
    interrupted.
    """
    cancel = threading.Event()
    listener = _start_stop_listener(cancel)
    if listener is not None:
        click.echo("Random walk started (one step per interval), press Enter to stop.")

    try:
        result = random_walk(
            graph,
            interval=interval,
            cancel=cancel,
            on_step=lambda node: click.echo(f"Current node: {node}"),
            output_path=output,
        )
    except OSError as exc:
        click.echo(f"Failed to write walk: {exc}", err=True)
        return
    finally:
        cancel.set()

    if result.stop_reason == "cancelled":
        click.echo("Random walk stopped by user.")
    elif listener is not None and listener.is_alive():
        click.echo("Random walk finished, press Enter to continue.")
        listener.join()
    click.echo(render_walk(result))


@cli.command()
@corpus_argument
@click.option(
    "--dot",
    "dot_path",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG.dot_path,
    help="Where to write the DOT description",
)
@click.option(
    "--image",
    "image_path",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG.image_path,
    help="Where to write the rendered image",
)
@click.option("--render/--no-render", default=True, help="Render with Graphviz dot")
def show(corpus_path: Path, dot_path: Path, image_path: Path, render: bool):
    """Print the graph edges and export them as DOT (and PNG)."""
    corpus = _load(corpus_path)
    _show_graph(corpus.graph, dot_path, image_path, render)


@cli.command()
@corpus_argument
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG.html_path,
    help="Where to write the HTML page",
)
@click.option("--max-nodes", type=int, default=None, help="Keep only the N most frequent words")
def html(corpus_path: Path, output: Path, max_nodes: int | None):
    """Write an interactive HTML view of the graph."""
    from .graph.visualize import create_web_visualization

    corpus = _load(corpus_path)
    try:
        path = create_web_visualization(corpus.graph, output_path=output, max_nodes=max_nodes)
    except OSError as exc:
        click.echo(f"Failed to write visualization: {exc}", err=True)
        return
    click.echo(f"Visualization: {path}")


@cli.command()
@corpus_argument
@click.argument("word1", type=str)
@click.argument("word2", type=str, default="")
def bridge(corpus_path: Path, word1: str, word2: str):
    """Query bridge words from WORD1 to WORD2.

    Without WORD2, report shortest paths from WORD1 instead.
    """
    corpus = _load(corpus_path)
    click.echo(query_bridge_words(corpus.graph, word1, word2))


@cli.command()
@corpus_argument
@click.argument("text", type=str)
@click.option("--seed", type=int, default=None, help="Random seed for bridge choice")
def generate(corpus_path: Path, text: str, seed: int | None):
    """Rewrite TEXT by inserting bridge words."""

    corpus = _load(corpus_path)
    click.echo(generate_new_text(corpus.graph, text, rng=random.Random(seed)))


@cli.command()
@corpus_argument
@click.argument("word1", type=str)
@click.argument("word2", type=str, default="")
def path(corpus_path: Path, word1: str, word2: str):
    """Shortest paths from WORD1 (to WORD2 if given)."""
    corpus = _load(corpus_path)
    if word2:
        click.echo(calc_shortest_path(corpus.graph, word1, word2))
    else:
        click.echo(find_shortest_paths(corpus.graph, word1))


@cli.command()
@corpus_argument
@click.argument("word", type=str)
@click.option(
    "--iterations",
    type=int,
    default=DEFAULT_CONFIG.page_rank_iterations,
    help="Number of PageRank rounds",
)
@click.option("--damping", type=float, default=DEFAULT_CONFIG.damping, help="Damping factor")
def pagerank(corpus_path: Path, word: str, iterations: int, damping: float):
    """PageRank of WORD, seeded by corpus term frequency."""
    corpus = _load(corpus_path)
    rank = page_rank(
        corpus.graph,
        word,
        corpus.tokens,
        damping=damping,
        iterations=DEFAULT_CONFIG.clamp_iterations(iterations),
    )
    click.echo(render_page_rank(word, rank))


@cli.command()
@corpus_argument
@click.option(
    "--interval",
    type=float,
    default=DEFAULT_CONFIG.walk_interval,
    help="Seconds between steps",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG.walk_output_path,
    help="Where to write the walk",
)
def walk(corpus_path: Path, interval: float, output: Path):
    """Random walk along graph edges until an edge repeats.

    On a terminal, press Enter to stop. A walk that ends by itself waits
    for Enter before printing the result.
    """
    corpus = _load(corpus_path)
    _run_walk(corpus.graph, interval, output)


MENU = """
Choose an action:
1. Show directed graph
2. Query bridge words
3. Generate new text
4. Shortest path
5. PageRank
6. Random walk
0. Exit"""


@cli.command()
@corpus_argument
def menu(corpus_path: Path):
    """Interactive menu over one loaded corpus."""
    corpus = _load(corpus_path)
    graph = corpus.graph
    click.echo(f"Graph built with {len(graph)} nodes.")

    while True:
        click.echo(MENU)
        option = click.prompt("Option", type=int)

        if option == 0:
            click.echo("Bye.")
            return
        if option == 1:
            _show_graph(
                graph,
                Path(DEFAULT_CONFIG.dot_path),
                Path(DEFAULT_CONFIG.image_path),
                render=True,
            )
        elif option == 2:
            words = click.prompt("Enter one or two words", type=str).split()
            if not words:
                click.echo("No input detected.")
                continue
            word2 = words[1] if len(words) > 1 else ""
            click.echo(query_bridge_words(graph, words[0], word2))
        elif option == 3:
            text = click.prompt("Enter a line of text", type=str)
            click.echo(generate_new_text(graph, text))
        elif option == 4:
            words = click.prompt("Enter one or two words", type=str).split()
            if len(words) == 1:
                click.echo(find_shortest_paths(graph, words[0]))
            elif len(words) == 2:
                click.echo(calc_shortest_path(graph, words[0], words[1]))
            else:
                click.echo("Please enter one or two words.")
        elif option == 5:
            word = click.prompt("Word", type=str)
            click.echo(render_page_rank(word, page_rank(graph, word, corpus.tokens)))
        elif option == 6:
            _run_walk(
                graph,
                DEFAULT_CONFIG.walk_interval,
                Path(DEFAULT_CONFIG.walk_output_path),
            )
        else:
            click.echo("Invalid option!")


if __name__ == "__main__":
    cli()
