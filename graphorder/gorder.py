"""Directed graph in CSR form with greedy locality-aware vertex ordering."""

from __future__ import annotations

import math
import sys
from bisect import bisect_left, bisect_right
from collections import Counter, deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence, TextIO

from graphorder.gorder_util import intersection_size
from graphorder.unitheap import UnitHeap

INT_MAX = 2**31 - 1
_PARKED = INT_MAX // 2


@dataclass
class Vertex:
    """Offsets and degrees of one vertex in the out- and in-edge arrays."""

    outstart: int = -1
    outdegree: int = 0
    instart: int = -1
    indegree: int = 0


def split(s: str, delim: str) -> list[str]:
    """Split ``s`` on ``delim``; an empty trailing field is dropped."""
    parts = s.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def str_trim_right(s: str) -> str:
    """Strip trailing spaces, tabs and line breaks."""
    return s.rstrip(" \t\r\n")


def _leading_int(text: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return (int(text[pos:end]) if end > pos else 0), end


def _parse_pair(line: str) -> tuple[int, int]:
    """Read two decimal ids separated by a single character."""
    u, pos = _leading_int(line, 0)
    v, _ = _leading_int(line, pos + 1)
    return u, v


def _read_pairs(path: str | Path) -> Iterator[tuple[int, int]]:
    """Yield the edges of an edge-list file, skipping self loops."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            u, v = _parse_pair(line)
            if u != v:
                yield u, v


def _contains(sorted_values: Sequence[int], value: int) -> bool:
    pos = bisect_left(sorted_values, value)
    return pos < len(sorted_values) and sorted_values[pos] == value


class GorderGraph:
    """A directed graph stored as sorted out- and in-adjacency arrays."""

    def __init__(self, name: str = "", stream: TextIO | None = None) -> None:
        self.name = name
        self.vsize = 0
        self.edgenum = 0
        self.graph: list[Vertex] = []
        self.outedge: list[int] = []
        self.inedge: list[int] = []
        self._stream = stream

    @property
    def _log(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _out(self, u: int) -> list[int]:
        vertex = self.graph[u]
        return self.outedge[vertex.outstart : vertex.outstart + vertex.outdegree]

    def _in(self, u: int) -> list[int]:
        vertex = self.graph[u]
        return self.inedge[vertex.instart : vertex.instart + vertex.indegree]

    def clear(self) -> None:
        self.vsize = 0
        self.edgenum = 0
        self.name = ""
        self.graph = []
        self.outedge = []
        self.inedge = []

    def _rebuild(self, edges: list[tuple[int, int]]) -> None:
        vsize = self.vsize
        graph = [Vertex() for _ in range(vsize + 1)]
        for u, v in edges:
            graph[u].outdegree += 1
            graph[v].indegree += 1
        out_total = in_total = 0
        for vertex in graph[:vsize]:
            vertex.outstart = out_total
            vertex.instart = in_total
            out_total += vertex.outdegree
            in_total += vertex.indegree
        graph[vsize].outstart = graph[vsize].instart = len(edges)

        ordered = sorted(edges)
        self.outedge = [v for _, v in ordered]
        inpos = [vertex.instart for vertex in graph[:vsize]]
        inedge = [0] * len(ordered)
        for u, v in ordered:
            inedge[inpos[v]] = u
            inpos[v] += 1
        self.inedge = inedge
        self.graph = graph

    def read_graph(self, path: str | Path) -> None:
        """Load an edge list; ids are non-negative integers, self loops dropped."""
        edges = list(_read_pairs(path))
        self.vsize = max((max(u, v) for u, v in edges), default=0) + 1
        self.edgenum = len(edges)
        self._rebuild(edges)
        print(f"vsize: {self.vsize}", file=self._log)
        print(f"edgenum: {self.edgenum}", file=self._log)

    def transform(self) -> None:
        """Relabel the vertices in reverse Cuthill-McKee order."""
        order = self.rcm_order()
        if len(self.graph) != self.vsize + 1:
            raise RuntimeError("graph.size()!=(vsize+1)")
        edges = [
            (order[u], order[v]) for u in range(self.vsize) for v in self._out(u)
        ]
        if len(edges) != self.edgenum:
            raise RuntimeError("edges.size()!=edgenum")
        self._rebuild(edges)

    def write_graph(self, out: TextIO) -> None:
        for u in range(self.vsize):
            for v in self._out(u):
                out.write(f"{u}\t{v}\n")

    def print_reordered_graph(self, order: Sequence[int]) -> Path:
        """Write the relabelled edge list to ``<name>_Gorder.txt``."""
        relabelled: list[list[int]] = [[] for _ in range(self.vsize)]
        for i in range(self.vsize):
            relabelled[order[i]] = sorted(order[v] for v in self._out(i))
        path = Path(f"{self.name}_Gorder.txt")
        with open(path, "w", encoding="utf-8") as handle:
            for u, targets in enumerate(relabelled):
                for v in targets:
                    handle.write(f"{u}\t{v}\n")
        return path

    def print_reordered_nodes(
        self, order: Sequence[int], out_file: str | Path, m: int
    ) -> None:
        """Write the vertex count, ``m`` and the old-to-new id map."""
        with open(out_file, "w", encoding="utf-8") as handle:
            handle.write(f"{self.vsize}\n{m}\n")
            for u in range(self.vsize):
                handle.write(f"{u}\t{order[u]}\n")

    def _degree_histogram(self, degrees: list[int]) -> list[tuple[int, int]]:
        ordered = sorted(degrees)
        buckets = []
        previous = 0
        bound = 1
        while bound < self.vsize:
            upto = bisect_right(ordered, bound)
            buckets.append((bound, upto - previous))
            previous = upto
            bound *= 10
        return buckets

    def graph_analysis(self) -> dict[str, list[tuple[int, int]]]:
        """Count vertices per power-of-ten degree bucket."""
        vertices = self.graph[: self.vsize]
        result = {
            "outdegree": self._degree_histogram([v.outdegree for v in vertices]),
            "indegree": self._degree_histogram([v.indegree for v in vertices]),
        }
        for label, buckets in result.items():
            print(f"{label}:", file=self._log)
            for bound, count in buckets:
                print(f"{bound}: {count}", file=self._log)
        return result

    def remove_duplicate(
        self, path: str | Path, out_path: str | Path = "NoDuplicate.txt"
    ) -> int:
        """Write the distinct non-loop edges of ``path`` sorted; return their count."""
        edges = sorted(set(_read_pairs(path)))
        print(f"after remove, the size is {len(edges)}", file=self._log)
        with open(out_path, "w", encoding="utf-8") as handle:
            for u, v in edges:
                handle.write(f"{u}\t{v}\n")
        return len(edges)

    def gap_count(self) -> float:
        """Return the Shannon sum over gaps between consecutive neighbours."""
        gaps: Counter[int] = Counter()
        for u in range(self.vsize):
            neighbours = self._out(u)
            gaps.update(b - a for a, b in zip(neighbours, neighbours[1:]))
            if neighbours:
                gaps[neighbours[0]] += 1
        entropy = 0.0
        if self.edgenum:
            for count in gaps.values():
                p = count / self.edgenum
                entropy += p * math.log2(p)
        print(f"shannon: {entropy:g}", file=self._log)
        return entropy

    def gap_cost(self, order: Sequence[int]) -> float:
        """Return the average log-gap of neighbour lists under ``order``."""
        original = 0.0
        relabelled = 0.0
        for u in range(self.vsize):
            neighbours = self._out(u)
            original += sum(math.log2(b - a) for a, b in zip(neighbours, neighbours[1:]) if b != a)
            mapped = sorted(order[w] for w in neighbours)
            relabelled += sum(math.log2(b - a) for a, b in zip(mapped, mapped[1:]) if b != a)
        if self.edgenum == 0:
            old_avg = new_avg = math.nan
        else:
            old_avg = original / self.edgenum
            new_avg = relabelled / self.edgenum
        print(f"original average gap cost: {old_avg:g}", file=self._log)
        print(f"new average gap cost: {new_avg:g}", file=self._log)
        return new_avg

    def gorder_greedy(self, window: int) -> list[int]:
        """Return the new id of every vertex under the greedy window ordering."""
        vsize = self.vsize
        if vsize == 0:
            raise ValueError("cannot order an empty graph")
        graph = self.graph
        heap = UnitHeap(vsize)
        update = heap.update
        popvexist = [False] * vsize
        order: list[int] = []
        zero: list[int] = []
        hugevertex = int(math.sqrt(vsize))

        def bump(x: int) -> None:
            if update[x] == 0:
                heap.increment_key(x)
            else:
                if update[x] == INT_MAX:
                    update[x] = _PARKED
                update[x] += 1

        def drop(x: int) -> None:
            update[x] -= 1
            if update[x] == 0:
                update[x] = _PARKED

        for i in range(vsize):
            heap.keys[i] = graph[i].indegree
            update[i] = -graph[i].indegree
        heap.reconstruct()

        first = -1
        best_weight = -1
        for i in range(vsize):
            if graph[i].indegree > best_weight:
                best_weight = graph[i].indegree
                first = i
            elif graph[i].indegree + graph[i].outdegree == 0:
                update[i] = _PARKED
                zero.append(i)
                heap.delete_element(i)

        order.append(first)
        update[first] = _PARKED
        heap.delete_element(first)
        for u in self._in(first):
            if graph[u].outdegree <= hugevertex:
                bump(u)
                if graph[u].outdegree > 1:
                    for w in self._out(u):
                        bump(w)
        if graph[first].outdegree <= hugevertex:
            for w in self._out(first):
                bump(w)

        count = 0
        while count < vsize - 1 - len(zero):
            v = heap.extract_max()
            count += 1
            order.append(v)
            update[v] = _PARKED

            popv = order[count - window] if count - window >= 0 else -1
            if popv >= 0:
                if graph[popv].outdegree <= hugevertex:
                    for w in self._out(popv):
                        drop(w)
                for u in self._in(popv):
                    if graph[u].outdegree <= hugevertex:
                        drop(u)
                        if graph[u].outdegree > 1:
                            neighbours = self._out(u)
                            if not _contains(neighbours, v):
                                for w in neighbours:
                                    drop(w)
                            else:
                                popvexist[u] = True

            if graph[v].outdegree <= hugevertex:
                for w in self._out(v):
                    bump(w)
            for u in self._in(v):
                if graph[u].outdegree <= hugevertex:
                    bump(u)
                    if not popvexist[u]:
                        if graph[u].outdegree > 1:
                            for w in self._out(u):
                                bump(w)
                    else:
                        popvexist[u] = False

        order[-1:-1] = zero
        if sorted(order) != list(range(vsize)):
            raise RuntimeError("greedy order is not a permutation of the vertices")

        result = [0] * vsize
        for position, vertex in enumerate(order):
            result[vertex] = position
        return result

    def rcm_order(self) -> list[int]:
        """Return the new id of every vertex in reverse Cuthill-McKee order."""
        vsize = self.vsize
        total = [v.outdegree + v.indegree for v in self.graph[:vsize]]
        visited = [False] * vsize
        order: list[int] = []
        for start in sorted(range(vsize), key=total.__getitem__):
            if visited[start]:
                continue
            visited[start] = True
            order.append(start)
            queue = deque([start])
            while queue:
                now = queue.popleft()
                for w in sorted(self._out(now), key=total.__getitem__):
                    if not visited[w]:
                        visited[w] = True
                        order.append(w)
                        queue.append(w)
        if len(order) != vsize:
            raise RuntimeError("order.size()!=vsize")
        result = [0] * vsize
        for position, vertex in enumerate(order):
            result[vertex] = vsize - 1 - position
        return result

    def locality_score(self, w: int) -> int:
        """Sum shared in-neighbours and direct links over id windows of width ``w``."""
        total = 0
        for i in range(self.vsize):
            in_i = self._in(i)
            for j in range(i - 1, max(i - w, 0) - 1, -1):
                in_j = self._in(j)
                total += intersection_size(in_i, in_j, -1)
                if _contains(in_i, j):
                    total += 1
                if _contains(in_j, i):
                    total += 1
        return total