"""Command that reorders or clusters a graph by community aggregation."""

from __future__ import annotations

import math
import sys
import time
from collections import defaultdict
from itertools import groupby
from pathlib import Path
from typing import Sequence, TextIO

from graphorder.edge_list import Edge, EdgeListError, read_edges
from graphorder.rabbit import aggregate, compute_perm

AdjacencyList = list[list[tuple[int, float]]]


def count_unused_id(n: int, edges: Sequence[Edge]) -> int:
    """Count ids below ``n`` that appear in no edge."""
    used = {s for s, _, _ in edges} | {t for _, t, _ in edges}
    return sum(1 for v in range(n) if v not in used)


def make_adj_list(n: int, edges: Sequence[Edge]) -> AdjacencyList:
    """Symmetrise ``edges``, drop self loops and sum duplicate weights."""
    symmetric: list[Edge] = []
    for s, t, w in edges:
        if s != t:
            symmetric.append((s, t, w))
            symmetric.append((t, s, w))
    symmetric.sort()

    adj: AdjacencyList = [[] for _ in range(n)]
    for (s, t), group in groupby(symmetric, key=lambda e: (e[0], e[1])):
        weight = sum(w for _, _, w in group)
        if weight > 0.0:
            adj[s].append((t, weight))
    return adj


def read_graph(path: str | Path) -> AdjacencyList:
    """Read an edge list and return its symmetric weighted adjacency list."""
    edges = read_edges(path)
    n = max((max(s, t) + 1 for s, t, _ in edges), default=0)
    unused = count_unused_id(n, edges)
    if unused:
        print(
            f"WARNING: {unused}/{n} vertex IDs are unused"
            " (zero-degree vertices or noncontiguous IDs?)",
            file=sys.stderr,
        )
    return make_adj_list(n, edges)


def compute_modularity(adjacency: AdjacencyList, coms: Sequence[int]) -> float:
    """Return the modularity of the community assignment ``coms``."""
    m2 = 0.0
    degrees: defaultdict[int, list[float]] = defaultdict(lambda: [0.0, 0.0])
    for v, edges in enumerate(adjacency):
        c = coms[v]
        entry = degrees[c]
        for target, weight in edges:
            m2 += weight
            entry[0] += weight
            if coms[target] == c:
                entry[1] += weight
    if m2 == 0.0:
        return math.nan
    return sum(loop / m2 - (total / m2) ** 2 for total, loop in degrees.values())


def detect_community(
    adjacency: AdjacencyList, out: TextIO | None = None
) -> tuple[list[int], float]:
    """Write each vertex's community id to ``out``; return ids and modularity."""
    stream = out if out is not None else sys.stdout
    print("Detecting communities...", file=sys.stderr)
    start = time.time()
    graph = aggregate(adjacency)
    coms = [graph.trace_com(v) for v in range(graph.n)]
    print(
        f"Runtime for community detection [sec]: {time.time() - start:g}",
        file=sys.stderr,
    )
    for c in coms:
        stream.write(f"{c}\n")
    print("Computing modularity of the result...", file=sys.stderr)
    q = compute_modularity(adjacency, coms)
    print(f"Modularity: {q:g}", file=sys.stderr)
    return coms, q


def reorder(adjacency: AdjacencyList, out: TextIO | None = None) -> list[int]:
    """Write ``old new`` id pairs to ``out`` and return the permutation."""
    stream = out if out is not None else sys.stdout
    print("Generating a permutation...", file=sys.stderr)
    start = time.time()
    graph = aggregate(adjacency)
    perm = compute_perm(graph)
    print(
        f"Runtime for permutation generation [sec]: {time.time() - start:g}",
        file=sys.stderr,
    )
    for old, new in enumerate(perm):
        stream.write(f"{old} {new}\n")
    return perm


def main(argv: list[str] | None = None) -> int:
    """Run ``[-c] GRAPH_FILE``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 and (len(args) != 2 or args[0] != "-c"):
        print(
            "Usage: reorder [-c] GRAPH_FILE\n"
            "  -c    Print community IDs instead of a new ordering",
            file=sys.stderr,
        )
        return 1
    graph_path = args[-1]
    community_mode = len(args) == 2

    print(f"Reading an edge-list file: {graph_path}", file=sys.stderr)
    try:
        adjacency = read_graph(graph_path)
    except EdgeListError as exc:
        print(f"[FATAL ERROR] {exc}", file=sys.stderr)
        return 1
    m = sum(len(edges) for edges in adjacency)
    print(f"Number of vertices: {len(adjacency)}", file=sys.stderr)
    print(f"Number of edges: {m}", file=sys.stderr)

    print(len(adjacency))
    print(m)

    if community_mode:
        detect_community(adjacency)
    else:
        reorder(adjacency)
    return 0


if __name__ == "__main__":
    sys.exit(main())