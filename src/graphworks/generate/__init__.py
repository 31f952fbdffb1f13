from .matrices import (
    AdjacencyMatrix,
    edge_slots,
    adjacency_from_combination,
    count_graphs,
    generate_graphs,
    generate_all_graphs,
)

__all__ = [
    "AdjacencyMatrix",
    "edge_slots",
    "adjacency_from_combination",
    "count_graphs",
    "generate_graphs",
    "generate_all_graphs",
]
