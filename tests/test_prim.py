"""Tests for graphworks.mst module."""
import random

import networkx as nx
import pytest

from graphworks.errors import DisconnectedGraph
from graphworks.io.nxconvert import graph_to_nx, tree_to_nx
from graphworks.model.edge import Graph, WeightedEdge, graph_from_matrix
from graphworks.mst.prim import build_mst, iter_prim, min_boundary_edge


EXAMPLE = [
    [0, 1, 4, 0],
    [1, 0, 2, 5],
    [4, 2, 0, 3],
    [0, 5, 3, 0],
]


def _pairs(edges):
    return {(frozenset((e.u, e.v)), e.w) for e in edges}


def _random_connected_matrix(n, rng, density=0.5, max_w=20):
    mat = [[0] * n for _ in range(n)]
    for a in range(n):
        for b in range(a + 1, n):
            if b == a + 1 or rng.random() < density:
                w = rng.randint(1, max_w)
                mat[a][b] = mat[b][a] = w
    return mat


# --- examples ---

def test_example_graph():
    tree = build_mst(graph_from_matrix(EXAMPLE))
    assert tree.total_weight == 6
    assert _pairs(tree.edges) == {
        (frozenset((0, 1)), 1),
        (frozenset((1, 2)), 2),
        (frozenset((2, 3)), 3),
    }


def test_example_selection_order():
    g = graph_from_matrix(EXAMPLE)
    steps = list(iter_prim(g))
    assert [(e.w, total) for e, total in steps] == [(1, 1), (2, 3), (3, 6)]


def test_running_totals_match_iter_prim():
    g = graph_from_matrix(EXAMPLE)
    tree = build_mst(g)
    assert list(tree.running_totals()) == list(iter_prim(g))


def test_ties_keep_first_edge():
    g = graph_from_matrix([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
    tree = build_mst(g)
    assert tree.edges == (WeightedEdge(1, 0, 1), WeightedEdge(2, 0, 1))


def test_self_loop_never_selected():
    g = graph_from_matrix([[5, 2], [2, 0]])
    assert g.edges[0] == WeightedEdge(0, 0, 5)
    tree = build_mst(g)
    assert tree.edges == (WeightedEdge(1, 0, 2),)


def test_min_boundary_edge():
    g = graph_from_matrix(EXAMPLE)
    idx, e = min_boundary_edge(g, {1, 0})
    assert e.w == 2
    assert g.edges[idx] == e


# --- against networkx ---

@pytest.mark.parametrize("seed", range(25))
def test_matches_networkx_weight(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    g = graph_from_matrix(_random_connected_matrix(n, rng))
    tree = build_mst(g)

    ref = nx.minimum_spanning_tree(graph_to_nx(g))
    assert tree.total_weight == ref.size(weight="weight")
    assert len(tree) == n - 1
    assert tree.vertices() == set(range(n))
    T = tree_to_nx(tree, n)
    assert nx.is_tree(T)


def test_idempotent_weight():
    rng = random.Random(99)
    g = graph_from_matrix(_random_connected_matrix(8, rng, density=0.9, max_w=3))
    assert build_mst(g).total_weight == build_mst(g).total_weight


# --- degenerate graphs ---

def test_single_vertex():
    tree = build_mst(graph_from_matrix([[0]]))
    assert tree.edges == ()
    assert tree.total_weight == 0


def test_no_vertices():
    with pytest.raises(ValueError):
        build_mst(Graph(edges=(), vertex_count=0))


def test_no_edges():
    with pytest.raises(DisconnectedGraph):
        build_mst(graph_from_matrix([[0, 0], [0, 0]]))


def test_disconnected():
    mat = [
        [0, 3, 0, 0],
        [3, 0, 0, 0],
        [0, 0, 0, 7],
        [0, 0, 7, 0],
    ]
    with pytest.raises(DisconnectedGraph):
        build_mst(graph_from_matrix(mat))


def test_isolated_vertex():
    mat = [
        [0, 1, 0],
        [1, 0, 0],
        [0, 0, 0],
    ]
    with pytest.raises(DisconnectedGraph):
        build_mst(graph_from_matrix(mat))
