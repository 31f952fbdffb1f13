from __future__ import annotations


class GraphWorksError(Exception):
    """Base class for all graphworks failures."""


class InvalidCombinationSize(GraphWorksError, ValueError):
    """Requested m-subsets of n items with n <= m or m < 1."""

    def __init__(self, n: int, m: int):
        super().__init__(
            f"Cannot enumerate {m}-combinations of {n} items "
            "(need n > m >= 1)."
        )
        self.n = n
        self.m = m


class DegenerateCombinationRequest(GraphWorksError, ValueError):
    """Edge count outside the slots available for the vertex count."""

    def __init__(self, vertex_count: int, edge_count: int, max_edges: int):
        super().__init__(
            f"Cannot place {edge_count} edges among {vertex_count} vertices "
            f"(need 1 <= edge_count <= {max_edges})."
        )
        self.vertex_count = vertex_count
        self.edge_count = edge_count
        self.max_edges = max_edges


class MalformedInput(GraphWorksError, ValueError):
    """Weight-matrix text is missing tokens or holds non-integers."""


class DisconnectedGraph(GraphWorksError, RuntimeError):
    """No boundary edge left while the spanning tree is still incomplete."""
