"""
graphworks: Prim minimum spanning trees of small weighted graphs and
exhaustive generation of labeled simple graphs as adjacency matrices.
"""

from .errors import (
    GraphWorksError,
    InvalidCombinationSize,
    DegenerateCombinationRequest,
    MalformedInput,
    DisconnectedGraph,
)
from .model.edge import WeightedEdge, Graph, Tree, graph_from_matrix
from .combinatorics.combinations import (
    CombinationEnumerator,
    enumerate_combinations,
    triangle_number,
)
from .generate.matrices import (
    edge_slots,
    adjacency_from_combination,
    count_graphs,
    generate_graphs,
    generate_all_graphs,
)
from .mst.prim import min_boundary_edge, iter_prim, build_mst
from .io.matrix_text import (
    parse_weight_matrix,
    read_graph,
    format_adjacency_matrix,
    write_generated_graphs,
)
from .io.nxconvert import graph_to_nx, tree_to_nx, adjacency_to_nx
from .viz.draw import draw_spanning_tree

__all__ = [
    # Errors
    "GraphWorksError",
    "InvalidCombinationSize",
    "DegenerateCombinationRequest",
    "MalformedInput",
    "DisconnectedGraph",
    # Model
    "WeightedEdge",
    "Graph",
    "Tree",
    "graph_from_matrix",
    # Combinations
    "CombinationEnumerator",
    "enumerate_combinations",
    "triangle_number",
    # Generation
    "edge_slots",
    "adjacency_from_combination",
    "count_graphs",
    "generate_graphs",
    "generate_all_graphs",
    # MST
    "min_boundary_edge",
    "iter_prim",
    "build_mst",
    # IO
    "parse_weight_matrix",
    "read_graph",
    "format_adjacency_matrix",
    "write_generated_graphs",
    "graph_to_nx",
    "tree_to_nx",
    "adjacency_to_nx",
    # Viz
    "draw_spanning_tree",
]
