"""Tests for graphworks.generate module."""
import math
from collections import Counter

import networkx as nx
import pytest

from graphworks.combinatorics.combinations import triangle_number
from graphworks.errors import DegenerateCombinationRequest
from graphworks.generate.matrices import (
    adjacency_from_combination,
    count_graphs,
    edge_slots,
    generate_all_graphs,
    generate_graphs,
)
from graphworks.io.nxconvert import adjacency_to_nx


def _upper_ones(mat):
    n = len(mat)
    return sum(mat[a][b] for a in range(n) for b in range(a + 1, n))


# --- edge slots ---

def test_edge_slots_k4():
    assert edge_slots(4) == ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))


def test_edge_slots_size():
    for v in range(2, 8):
        assert len(edge_slots(v)) == triangle_number(v - 1)


def test_adjacency_from_combination():
    mat = adjacency_from_combination((0, 5), 4)
    assert mat == (
        (0, 1, 0, 0),
        (1, 0, 0, 0),
        (0, 0, 0, 1),
        (0, 0, 1, 0),
    )


# --- small cases ---

def test_generate_3_1():
    mats = list(generate_graphs(3, 1))
    assert len(mats) == 3
    # slot order (0,1), (0,2), (1,2) visited from the highest slot down
    assert mats[0] == ((0, 0, 0), (0, 0, 1), (0, 1, 0))
    assert mats[2] == ((0, 1, 0), (1, 0, 0), (0, 0, 0))
    for m in mats:
        assert _upper_ones(m) == 1


def test_generate_complete_graph_once():
    mats = list(generate_graphs(3, 3))
    assert mats == [((0, 1, 1), (1, 0, 1), (1, 1, 0))]


def test_generate_k2():
    assert list(generate_graphs(2, 1)) == [((0, 1), (1, 0))]


# --- invariants ---

@pytest.mark.parametrize("v", [2, 3, 4, 5])
def test_matrices_symmetric_zero_diagonal(v):
    for e in range(1, triangle_number(v - 1) + 1):
        for mat in generate_graphs(v, e):
            assert len(mat) == v
            for a in range(v):
                assert mat[a][a] == 0
                for b in range(v):
                    assert mat[a][b] == mat[b][a]
            assert _upper_ones(mat) == e


@pytest.mark.parametrize("v", [2, 3, 4, 5])
def test_total_per_vertex_count(v):
    slots = triangle_number(v - 1)
    total = sum(len(list(generate_graphs(v, e))) for e in range(1, slots + 1))
    assert total == 2 ** slots - 1


def test_generated_graphs_distinct():
    mats = [m for e in range(1, 7) for m in generate_graphs(4, e)]
    assert len(set(mats)) == len(mats) == 63


def test_count_graphs_matches_generation():
    for e in range(1, 11):
        assert count_graphs(5, e) == math.comb(10, e) == len(list(generate_graphs(5, e)))


def test_connected_labeled_graphs_on_4_vertices():
    # 38 connected labeled graphs on 4 vertices (OEIS A001187)
    mats = [m for e in range(1, 7) for m in generate_graphs(4, e)]
    assert sum(1 for m in mats if nx.is_connected(adjacency_to_nx(m))) == 38


# --- nested order ---

def test_generate_all_order():
    keys = [(v, e) for v, e, _ in generate_all_graphs(4)]
    assert keys == sorted(keys)
    counts = Counter(keys)
    assert counts[(2, 1)] == 1
    assert counts[(3, 2)] == 3
    assert counts[(4, 3)] == 20
    assert len(keys) == 1 + 7 + 63


def test_generate_all_below_two_is_empty():
    assert list(generate_all_graphs(1)) == []


# --- caller errors ---

@pytest.mark.parametrize("v,e", [(3, 0), (3, 4), (4, 7), (2, 2)])
def test_degenerate_requests(v, e):
    with pytest.raises(DegenerateCombinationRequest):
        generate_graphs(v, e)
    with pytest.raises(DegenerateCombinationRequest):
        count_graphs(v, e)


def test_too_few_vertices():
    with pytest.raises(ValueError):
        generate_graphs(1, 1)


def test_bad_request_raises_before_iteration():
    with pytest.raises(DegenerateCombinationRequest):
        generate_graphs(3, 5)
    with pytest.raises(ValueError):
        generate_graphs(0, 1)
