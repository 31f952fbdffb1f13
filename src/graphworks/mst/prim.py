from __future__ import annotations

from typing import Iterator, Set, Tuple

from graphworks.errors import DisconnectedGraph
from graphworks.model.edge import Graph, Tree, WeightedEdge


def min_boundary_edge(graph: Graph, frontier: Set[int]) -> Tuple[int, WeightedEdge]:
    """
    Return (index, edge) of the lightest edge with exactly one endpoint in
    *frontier*.

    Ties go to the earliest edge in graph.edges.
    Raises DisconnectedGraph if no edge crosses the frontier.
    """
    best_index = -1
    best: WeightedEdge | None = None
    for i, e in enumerate(graph.edges):
        if (e.u in frontier) == (e.v in frontier):
            continue
        if best is None or e.w < best.w:
            best_index, best = i, e
    if best is None:
        raise DisconnectedGraph(
            f"no edge leaves the tree vertex set {sorted(frontier)} "
            f"({len(frontier)} of {graph.vertex_count} vertices reached)"
        )
    return best_index, best


def iter_prim(graph: Graph) -> Iterator[Tuple[WeightedEdge, int]]:
    """
    Grow a spanning tree with Prim's algorithm, yielding
    (edge, running_total) as each edge joins it.

    The frontier starts at the first edge's u endpoint. Every step is a
    linear scan over all edges, O(V*E) overall.
    """
    if graph.vertex_count < 1:
        raise ValueError("graph has no vertices")
    needed = graph.vertex_count - 1
    if needed == 0:
        return
    if not graph.edges:
        raise DisconnectedGraph(f"{graph.vertex_count} vertices but no edges")

    frontier = {graph.edges[0].u}
    total = 0
    for _ in range(needed):
        _, e = min_boundary_edge(graph, frontier)
        frontier.add(e.v if e.u in frontier else e.u)
        total += e.w
        yield e, total


def build_mst(graph: Graph) -> Tree:
    """Minimum-weight spanning tree of a connected graph."""
    edges = []
    total = 0
    for e, total in iter_prim(graph):
        edges.append(e)
    return Tree(edges=tuple(edges), total_weight=total)
