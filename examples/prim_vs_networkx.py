"""
Compare Prim spanning-tree weights against networkx on random graphs.

Usage:
    python prim_vs_networkx.py [--trials T] [--max-n N] [--density D] [--seed S]
"""

from __future__ import annotations
import argparse
import random
import sys

import networkx as nx

from graphworks.errors import DisconnectedGraph
from graphworks.io.nxconvert import graph_to_nx
from graphworks.model.edge import graph_from_matrix
from graphworks.mst.prim import build_mst


def random_matrix(n: int, rng: random.Random, density: float, max_w: int):
    mat = [[0] * n for _ in range(n)]
    for a in range(n):
        for b in range(a + 1, n):
            if rng.random() < density:
                mat[a][b] = mat[b][a] = rng.randint(1, max_w)
    return mat


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--trials", type=int, default=200)
    ap.add_argument("--max-n", type=int, default=12)
    ap.add_argument("--density", type=float, default=0.4)
    ap.add_argument("--seed", type=int, default=1)
    args = ap.parse_args()

    rng = random.Random(args.seed)
    agree = disconnected = 0
    for t in range(args.trials):
        n = rng.randint(2, args.max_n)
        g = graph_from_matrix(random_matrix(n, rng, args.density, 30))
        G = graph_to_nx(g)
        try:
            tree = build_mst(g)
        except DisconnectedGraph:
            disconnected += 1
            assert not nx.is_connected(G)
            continue
        ref = nx.minimum_spanning_tree(G).size(weight="weight")
        if tree.total_weight != ref:
            print(f"trial {t}: prim={tree.total_weight} networkx={ref}", file=sys.stderr)
            sys.exit(1)
        agree += 1

    print(f"{agree} trees agree, {disconnected} disconnected graphs rejected")


if __name__ == "__main__":
    main()
