"""Command that reads an edge list and writes a greedy vertex ordering."""

from __future__ import annotations

import re
import sys
import time

from graphorder.gorder import GorderGraph
from graphorder.gorder_util import extract_filename

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str | None) -> int:
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run ``[-w WINDOW] [-o OUT_FILE] GRAPH_FILE``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("please provide parameter", file=sys.stderr)
        return 1

    window = 5
    out_file = "out.gorder"
    filename = ""
    items = iter(args)
    for arg in items:
        if arg == "-w":
            window = _atoi(next(items, None))
            if window <= 0:
                print("w should be larger than 0", file=sys.stderr)
                return 1
        elif arg == "-o":
            value = next(items, None)
            if value is None:
                print("-o needs a file name", file=sys.stderr)
                return 1
            out_file = value
        else:
            filename = arg

    name = extract_filename(filename)
    graph = GorderGraph(name=name)

    start = time.process_time()
    try:
        graph.read_graph(filename)
    except OSError:
        print(f"Fail to open {filename}", file=sys.stderr)
        return 1
    graph.transform()
    print(f"{name} readGraph is complete.")
    print(f"Time Cost: {time.process_time() - start:g}")

    start = time.process_time()
    order = graph.gorder_greedy(window)
    print(f"ReOrdered Time Cost: {time.process_time() - start:g}")
    print("Begin Output the Reordered Graph")
    graph.print_reordered_nodes(order, out_file, graph.edgenum)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())