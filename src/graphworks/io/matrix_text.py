"""Flat text formats: weighted input matrices and generated adjacency matrices."""
from __future__ import annotations

import os
import sys
from typing import Iterable, List, Sequence, Tuple

from graphworks.combinatorics.combinations import triangle_number
from graphworks.errors import MalformedInput
from graphworks.generate.matrices import count_graphs, generate_graphs
from graphworks.model.edge import Graph, WeightedEdge, graph_from_matrix


# ---------------------------------------------------------------------------
# Weighted matrix input
# ---------------------------------------------------------------------------

def parse_weight_matrix(text: str) -> Tuple[int, List[List[int]]]:
    """
    Parse "V w00 w01 ... w(V-1)(V-1)" (any whitespace) into (V, rows).

    Raises MalformedInput on missing or non-integer tokens.
    Extra trailing tokens are ignored.
    """
    tokens = text.split()
    if not tokens:
        raise MalformedInput("empty input: expected a vertex count")
    try:
        n = int(tokens[0])
    except ValueError:
        raise MalformedInput(f"vertex count is not an integer: {tokens[0]!r}") from None
    if n < 1:
        raise MalformedInput(f"vertex count must be positive, got {n}")

    needed = n * n
    body = tokens[1 : 1 + needed]
    if len(body) < needed:
        raise MalformedInput(
            f"expected {needed} matrix entries for {n} vertices, found {len(body)}"
        )
    try:
        values = [int(t) for t in body]
    except ValueError as exc:
        raise MalformedInput(f"non-integer matrix entry: {exc}") from None

    rows = [values[r * n : (r + 1) * n] for r in range(n)]
    return n, rows


def read_weight_matrix(path: str | os.PathLike) -> Tuple[int, List[List[int]]]:
    """Read a weight matrix file; a leading UTF-8 byte order mark is skipped."""
    with open(path, "r", encoding="utf-8-sig") as fh:
        try:
            text = fh.read()
        except UnicodeDecodeError as exc:
            raise MalformedInput(f"{path} is not UTF-8 text: {exc}") from None
    return parse_weight_matrix(text)


def read_graph(path: str | os.PathLike) -> Graph:
    """Read a weighted matrix file and build its Graph."""
    _, rows = read_weight_matrix(path)
    return graph_from_matrix(rows)


def format_edges(edges: Sequence[WeightedEdge]) -> str:
    """One "   Edge i: <u, v> weight[ w ]" line per edge."""
    return "\n".join(f"   Edge {i}: {e.describe()}" for i, e in enumerate(edges))


# ---------------------------------------------------------------------------
# Generated adjacency matrices
# ---------------------------------------------------------------------------

def format_adjacency_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """
    Render one graph block: the vertex count, one digit row per vertex,
    and a trailing blank line.
    """
    lines = [str(len(matrix))]
    lines.extend("".join(str(x) for x in row) for row in matrix)
    return "\n".join(lines) + "\n\n"


def write_matrices(fh, matrices: Iterable[Sequence[Sequence[int]]]) -> int:
    written = 0
    for mat in matrices:
        fh.write(format_adjacency_matrix(mat))
        written += 1
    return written


def write_generated_graphs(
    path: str | os.PathLike,
    max_vertices: int,
    *,
    verbose: bool = True,
) -> int:
    """
    Write every non-empty labeled graph on 2..max_vertices vertices to *path*.

    The file is truncated once, then blocks are written by vertex count,
    edge count and combination order. Returns the number of graphs written.
    """
    total = 0
    with open(path, "w", encoding="ascii") as fh:
        for v in range(2, max_vertices + 1):
            for e in range(1, triangle_number(v - 1) + 1):
                n_written = write_matrices(fh, generate_graphs(v, e))
                total += n_written
                if verbose:
                    print(
                        f"[v={v}] {e}-edge graphs complete ({n_written}).",
                        file=sys.stderr,
                    )
            if verbose:
                print(f"[v={v}] done, {total} graphs so far.", file=sys.stderr)
    return total


def expected_graph_total(max_vertices: int) -> int:
    """Number of blocks write_generated_graphs produces."""
    return sum(
        count_graphs(v, e)
        for v in range(2, max_vertices + 1)
        for e in range(1, triangle_number(v - 1) + 1)
    )
