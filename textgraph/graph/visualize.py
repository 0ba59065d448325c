"""Web-based graph visualization using pyvis."""

from pathlib import Path

from pyvis.network import Network

from .word_graph import WordGraph

NODE_COLOR = "#FCE38A"
DANGLING_COLOR = "#FF6B6B"
EDGE_COLOR = "#95E1D3"

NODE_SIZE_MIN = 10
NODE_SIZE_MAX = 40


def _node_size(in_weight: int, max_in_weight: int) -> float:
    if max_in_weight <= 0:
        return NODE_SIZE_MIN
    return NODE_SIZE_MIN + (NODE_SIZE_MAX - NODE_SIZE_MIN) * in_weight / max_in_weight


def create_web_visualization(
    graph: WordGraph,
    output_path: Path = Path("output/graph.html"),
    height: str = "900px",
    width: str = "100%",
    max_nodes: int | None = None,
) -> Path:
    """Create an interactive web visualization of the word graph.

    Args:
        graph: WordGraph instance
        output_path: Where to save the HTML file
        height: Height of the visualization
        width: Width of the visualization
        max_nodes: Limit number of nodes (for large graphs)

    Returns:
        Path to the generated HTML file
    """
    net = Network(
        height=height,
        width=width,
        bgcolor="#1a1a2e",
        font_color="white",
        directed=True,
        cdn_resources="remote",
    )

    # Physics settings for better layout
    net.set_options("""
    {
        "physics": {
            "forceAtlas2Based": {
                "gravitationalConstant": -100,
                "centralGravity": 0.01,
                "springLength": 200,
                "springConstant": 0.02
            },
            "solver": "forceAtlas2Based",
            "stabilization": {
                "iterations": 100
            }
        },
        "edges": {
            "arrows": {
                "to": {"enabled": true}
            },
            "smooth": {
                "type": "continuous"
            }
        },
        "interaction": {
            "hover": true,
            "navigationButtons": true,
            "keyboard": true
        }
    }
    """)

    in_weight = {node: 0 for node in graph.nodes()}
    for _, target, weight in graph.edges():
        in_weight[target] += weight
    max_in_weight = max(in_weight.values(), default=0)

    # Prioritize most frequent words when limited
    nodes_to_add = sorted(in_weight, key=lambda n: (-in_weight[n], n))
    if max_nodes and len(nodes_to_add) > max_nodes:
        nodes_to_add = nodes_to_add[:max_nodes]
    node_ids = set(nodes_to_add)

    for node in nodes_to_add:
        out_weight = graph.out_weight(node)
        net.add_node(
            node,
            label=node,
            title=f"<b>{node}</b><br>in: {in_weight[node]} out: {out_weight}",
            color=DANGLING_COLOR if out_weight == 0 else NODE_COLOR,
            size=_node_size(in_weight[node], max_in_weight),
        )

    for source, target, weight in graph.edges():
        if source not in node_ids or target not in node_ids:
            continue
        net.add_edge(
            source,
            target,
            label=str(weight),
            title=f"{source} -> {target} ({weight})",
            color=EDGE_COLOR,
            width=weight,
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    net.save_graph(str(output_path))

    return output_path
