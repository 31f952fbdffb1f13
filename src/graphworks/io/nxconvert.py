from __future__ import annotations

from typing import Sequence

import networkx as nx

from graphworks.model.edge import Graph, Tree


def graph_to_nx(graph: Graph) -> nx.Graph:
    """
    Weighted NetworkX Graph on nodes 0..vertex_count-1.

    Self-loops are dropped; if an undirected pair appears twice the later
    weight wins.
    """
    G = nx.Graph()
    G.add_nodes_from(range(graph.vertex_count))
    for e in graph.edges:
        if e.u != e.v:
            G.add_edge(e.u, e.v, weight=e.w)
    return G


def tree_to_nx(tree: Tree, vertex_count: int | None = None) -> nx.Graph:
    T = nx.Graph()
    if vertex_count is not None:
        T.add_nodes_from(range(vertex_count))
    for e in tree.edges:
        T.add_edge(e.u, e.v, weight=e.w)
    return T


def adjacency_to_nx(matrix: Sequence[Sequence[int]]) -> nx.Graph:
    """Unweighted NetworkX Graph from a 0/1 adjacency matrix."""
    n = len(matrix)
    G = nx.Graph()
    G.add_nodes_from(range(n))
    for a in range(n):
        for b in range(a + 1, n):
            if matrix[a][b]:
                G.add_edge(a, b)
    return G
