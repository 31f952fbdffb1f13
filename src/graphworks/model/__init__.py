from .edge import WeightedEdge, Graph, Tree, graph_from_matrix

__all__ = [
    "WeightedEdge",
    "Graph",
    "Tree",
    "graph_from_matrix",
]
