"""
Count connected labeled graphs per vertex count from the exhaustive generator.

Should reproduce OEIS A001187: 1, 4, 38, 728, 26704, ...

Usage:
    python count_connected.py [--max-n N]
"""

from __future__ import annotations
import argparse
import time
from collections import Counter

import networkx as nx

from graphworks.generate.matrices import generate_all_graphs
from graphworks.io.nxconvert import adjacency_to_nx


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--max-n", type=int, default=5)
    args = ap.parse_args()

    t0 = time.time()
    total: Counter = Counter()
    connected: Counter = Counter()
    for v, _e, mat in generate_all_graphs(args.max_n):
        total[v] += 1
        if nx.is_connected(adjacency_to_nx(mat)):
            connected[v] += 1

    print(f"{'n':>3} {'graphs':>10} {'connected':>10}")
    for v in sorted(total):
        print(f"{v:>3} {total[v]:>10} {connected[v]:>10}")
    print(f"({time.time() - t0:.1f}s)")


if __name__ == "__main__":
    main()
