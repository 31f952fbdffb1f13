from .prim import min_boundary_edge, iter_prim, build_mst

__all__ = [
    "min_boundary_edge",
    "iter_prim",
    "build_mst",
]
