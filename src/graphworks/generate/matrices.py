"""Exhaustive generation of labeled simple graphs as adjacency matrices.

Each vertex pair of K_n is an edge slot; every combination of slots from
the minimal-change enumerator becomes one graph.
"""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterator, List, Sequence, Tuple

from graphworks.combinatorics.combinations import enumerate_combinations, triangle_number
from graphworks.errors import DegenerateCombinationRequest

AdjacencyMatrix = Tuple[Tuple[int, ...], ...]


@lru_cache(maxsize=None)
def edge_slots(vertex_count: int) -> Tuple[Tuple[int, int], ...]:
    """Slot index -> (a, b) with 0<=a<b<vertex_count, a-major order."""
    pairs: List[Tuple[int, int]] = []
    for a in range(vertex_count):
        for b in range(a + 1, vertex_count):
            pairs.append((a, b))
    return tuple(pairs)


def adjacency_from_combination(
    combination: Sequence[int],
    vertex_count: int,
) -> AdjacencyMatrix:
    """
    Adjacency matrix with exactly the slots in *combination* present.

    The result is symmetric with a zero diagonal.
    """
    slots = edge_slots(vertex_count)
    mat = [[0] * vertex_count for _ in range(vertex_count)]
    for j in combination:
        a, b = slots[j]
        mat[a][b] = 1
        mat[b][a] = 1
    return tuple(tuple(row) for row in mat)


def _check_request(vertex_count: int, edge_count: int) -> int:
    if vertex_count < 2:
        raise ValueError(f"need at least 2 vertices, got {vertex_count}")
    max_edges = triangle_number(vertex_count - 1)
    if edge_count < 1 or edge_count > max_edges:
        raise DegenerateCombinationRequest(vertex_count, edge_count, max_edges)
    return max_edges


def count_graphs(vertex_count: int, edge_count: int) -> int:
    """Number of matrices generate_graphs(vertex_count, edge_count) yields."""
    max_edges = _check_request(vertex_count, edge_count)
    return math.comb(max_edges, edge_count)


def _iter_graphs(vertex_count: int, edge_count: int, max_edges: int) -> Iterator[AdjacencyMatrix]:
    if edge_count == max_edges:
        yield adjacency_from_combination(range(max_edges), vertex_count)
        return
    for comb in enumerate_combinations(max_edges, edge_count):
        yield adjacency_from_combination(comb, vertex_count)


def generate_graphs(vertex_count: int, edge_count: int) -> Iterator[AdjacencyMatrix]:
    """
    Iterate over every labeled graph on *vertex_count* vertices with exactly
    *edge_count* edges, in the enumerator's decreasing combination order.

    Choosing every slot yields the complete graph once.
    Bad requests raise here, before any matrix is produced.
    """
    max_edges = _check_request(vertex_count, edge_count)
    return _iter_graphs(vertex_count, edge_count, max_edges)


def generate_all_graphs(max_vertices: int) -> Iterator[Tuple[int, int, AdjacencyMatrix]]:
    """
    Yield (vertex_count, edge_count, matrix) for every non-empty labeled
    graph on 2..max_vertices vertices.

    Order: vertex count, then edge count, then combination order.
    """
    for v in range(2, max_vertices + 1):
        for e in range(1, triangle_number(v - 1) + 1):
            for mat in generate_graphs(v, e):
                yield v, e, mat
