"""Weighted edge, graph and spanning tree records.

A graph is an edge list plus a vertex count kept alongside it, since
isolated vertices contribute no edges.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Sequence, Tuple


@dataclass(frozen=True)
class WeightedEdge:
    """
    Undirected weighted edge.

    u, v: endpoint ids; (u, v) and (v, u) describe the same edge.
    w:    integer weight, never zero (zero encodes "no edge" in a matrix).
    """

    u: int
    v: int
    w: int

    def endpoints(self) -> FrozenSet[int]:
        return frozenset((self.u, self.v))

    def other(self, x: int) -> int:
        """Endpoint opposite to x."""
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise ValueError(f"vertex {x} is not an endpoint of {self.describe()}")

    def describe(self) -> str:
        return f"<{self.u}, {self.v}> weight[ {self.w} ]"


@dataclass(frozen=True)
class Graph:
    edges: Tuple[WeightedEdge, ...]
    vertex_count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))

    def __len__(self) -> int:
        return len(self.edges)

    def total_weight(self) -> int:
        return sum(e.w for e in self.edges)


@dataclass(frozen=True)
class Tree:
    """
    Spanning tree produced by Prim's algorithm.

    edges:        selected edges, in the order they joined the tree.
    total_weight: sum of their weights.
    """

    edges: Tuple[WeightedEdge, ...]
    total_weight: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))

    def __len__(self) -> int:
        return len(self.edges)

    def running_totals(self) -> Iterator[Tuple[WeightedEdge, int]]:
        """Yield (edge, cumulative weight so far) in selection order."""
        total = 0
        for e in self.edges:
            total += e.w
            yield e, total

    def vertices(self) -> set[int]:
        verts: set[int] = set()
        for e in self.edges:
            verts.add(e.u)
            verts.add(e.v)
        return verts


def graph_from_matrix(rows: Sequence[Sequence[int]]) -> Graph:
    """
    Build a Graph from a square weight matrix.

    Only entries with column index >= row index are read, row by row, so each
    undirected edge of a symmetric matrix is captured once as
    WeightedEdge(column, row, weight). Zero entries are skipped.
    Symmetry of the matrix is not checked.
    """
    n = len(rows)
    edges = []
    for r, row in enumerate(rows):
        if len(row) != n:
            raise ValueError(f"row {r} has {len(row)} entries, expected {n}")
        for c in range(r, n):
            w = row[c]
            if w != 0:
                edges.append(WeightedEdge(c, r, w))
    return Graph(edges=tuple(edges), vertex_count=n)
