"""
Command line front end.

Usage:
    graphworks                         interactive menu
    graphworks mst [--input PATH] [--draw PNG]
    graphworks generate N [--output PATH] [--quiet]
    graphworks combinations N M
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, List, Optional

from graphworks.combinatorics.combinations import enumerate_combinations
from graphworks.errors import GraphWorksError
from graphworks.io.matrix_text import format_edges, read_graph, write_generated_graphs
from graphworks.mst.prim import build_mst


VERSION = "0.2.0"

GRAPHWORKS_INPUT = os.environ.get("GRAPHWORKS_INPUT", "input.txt")
GRAPHWORKS_OUTPUT = os.environ.get("GRAPHWORKS_OUTPUT", "generated_graphs.txt")


def run_spanning_tree(input_path: str, draw_path: str | None = None) -> int:
    if not os.path.isfile(input_path):
        print(f"{input_path} is absent.", file=sys.stderr)
        return 1

    graph = read_graph(input_path)
    tree = build_mst(graph)

    print("Weighted edges will be shown as follows,")
    print("   index: <unordered vertices> weight[ w ]")
    print()
    print("For the given graph, G:")
    print(format_edges(graph.edges))
    print()
    print("The spanning tree T of G:")
    print(format_edges(tree.edges))
    print()
    print("Total weight of T:")
    print(f"   {tree.total_weight}")

    if draw_path:
        from graphworks.viz.draw import draw_spanning_tree

        draw_spanning_tree(graph, tree, save_path=draw_path)
        print(f"Drawing saved to {draw_path}")
    return 0


def run_generation(max_vertices: int, output_path: str, *, verbose: bool = True) -> int:
    if max_vertices < 2:
        print(f"need at least 2 vertices, got {max_vertices}", file=sys.stderr)
        return 1
    total = write_generated_graphs(output_path, max_vertices, verbose=verbose)
    print(f"{total} graphs on 2..{max_vertices} vertices written to {output_path}")
    return 0


def run_combinations(n: int, m: int) -> int:
    for comb in enumerate_combinations(n, m):
        print(" ".join(str(i) for i in comb))
    return 0


def launch_menu(read: Callable[[str], str] = input) -> int:
    """Show the menu until a valid choice is entered; return 1 or 2."""
    print()
    print("--------------------------------------------")
    print(f" Graph Works                  version {VERSION}")
    print("--------------------------------------------")
    print()
    while True:
        print(" 1: Spanning Tree")
        print(" 2: Graph Generation")
        choice = read(" > ").strip()
        if choice in ("1", "2"):
            print()
            return int(choice)


def prompt_vertex_bound(read: Callable[[str], str] = input) -> int:
    while True:
        print(" Generate all graphs up to how many vertices?")
        raw = read(" > ").strip()
        try:
            n = int(raw)
        except ValueError:
            continue
        if n >= 2:
            return n


def run_menu(read: Callable[[str], str] = input) -> int:
    try:
        choice = launch_menu(read)
        if choice == 2:
            max_vertices = prompt_vertex_bound(read)
    except EOFError:
        print("\nInput closed, nothing to do.", file=sys.stderr)
        return 1
    if choice == 1:
        return run_spanning_tree(GRAPHWORKS_INPUT)
    return run_generation(max_vertices, GRAPHWORKS_OUTPUT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphworks",
        description="Prim minimum spanning trees and exhaustive small-graph generation.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    sub = parser.add_subparsers(dest="command")

    p_mst = sub.add_parser("mst", help="minimum spanning tree of a weight matrix file")
    p_mst.add_argument("--input", default=GRAPHWORKS_INPUT, help="weight matrix file")
    p_mst.add_argument("--draw", default=None, metavar="PNG", help="save a drawing of G and T")

    p_gen = sub.add_parser("generate", help="write every labeled graph up to N vertices")
    p_gen.add_argument("max_vertices", type=int, metavar="N")
    p_gen.add_argument("--output", default=GRAPHWORKS_OUTPUT, help="output text file")
    p_gen.add_argument("--quiet", action="store_true", help="no progress on stderr")

    p_comb = sub.add_parser("combinations", help="list all M-subsets of 0..N-1")
    p_comb.add_argument("n", type=int)
    p_comb.add_argument("m", type=int)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.command == "mst":
            return run_spanning_tree(args.input, args.draw)
        if args.command == "generate":
            return run_generation(args.max_vertices, args.output, verbose=not args.quiet)
        if args.command == "combinations":
            return run_combinations(args.n, args.m)
        return run_menu()
    except GraphWorksError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
