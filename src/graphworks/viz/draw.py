from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from graphworks.io.nxconvert import graph_to_nx
from graphworks.model.edge import Graph, Tree


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Node positions for a small weighted graph.

    Up to 8 vertices go on a circle so edge weight labels stay apart;
    larger planar graphs use a planar embedding, the rest a seeded spring layout.
    """
    if G.number_of_nodes() <= 8:
        return nx.circular_layout(G)
    if nx.is_planar(G):
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_spanning_tree(
    graph: Graph,
    tree: Tree,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.0,
    tree_width: float = 3.0,
    save_path: str | None = None,
):
    """
    Draw *graph* with the edges of *tree* emphasised and weights as labels.

    If save_path is set, the figure is saved there and closed;
    otherwise it is shown.
    """
    G = graph_to_nx(graph)
    pos = base_layout(G, seed=seed)

    in_tree = {frozenset((e.u, e.v)) for e in tree.edges}
    tree_edges = [(u, v) for u, v in G.edges() if frozenset((u, v)) in in_tree]
    rest = [(u, v) for u, v in G.edges() if frozenset((u, v)) not in in_tree]

    fig, ax = plt.subplots(figsize=(7, 7))
    ax.set_title(
        f"|V|={graph.vertex_count}  |E|={G.number_of_edges()}  "
        f"tree weight={tree.total_weight}"
    )
    ax.set_axis_off()

    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=node_size)
    nx.draw_networkx_labels(G, pos, ax=ax)
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=rest, width=edge_width, style="dashed")
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=tree_edges, width=tree_width)
    nx.draw_networkx_edge_labels(
        G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "weight")
    )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return fig
