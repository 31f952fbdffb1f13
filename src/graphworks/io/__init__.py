from .matrix_text import (
    parse_weight_matrix,
    read_weight_matrix,
    read_graph,
    format_edges,
    format_adjacency_matrix,
    write_matrices,
    write_generated_graphs,
    expected_graph_total,
)
from .nxconvert import graph_to_nx, tree_to_nx, adjacency_to_nx

__all__ = [
    "parse_weight_matrix",
    "read_weight_matrix",
    "read_graph",
    "format_edges",
    "format_adjacency_matrix",
    "write_matrices",
    "write_generated_graphs",
    "expected_graph_total",
    "graph_to_nx",
    "tree_to_nx",
    "adjacency_to_nx",
]
