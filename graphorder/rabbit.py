"""Community-based vertex ordering by incremental modularity aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import accumulate
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

VMAX = 2**32 - 1
"""Invalid vertex id."""

Edge = tuple[int, float]
T = TypeVar("T")


def uniq_accum(
    items: Iterable[T],
    equal: Callable[[T, T], bool],
    accum: Callable[[T, T], T],
) -> list[T]:
    """Fold each run of consecutive equal items into one with ``accum``."""
    result: list[T] = []
    iterator = iter(items)
    try:
        current = next(iterator)
    except StopIteration:
        return result
    for item in iterator:
        if equal(current, item):
            current = accum(current, item)
        else:
            result.append(current)
            current = item
    result.append(current)
    return result


def compact(edges: Iterable[Edge]) -> list[Edge]:
    """Sort edges by target and sum the weights of duplicate targets."""
    return uniq_accum(
        sorted(edges, key=lambda e: e[0]),
        lambda x, y: x[0] == y[0],
        lambda x, y: (x[0], x[1] + y[1]),
    )


@dataclass
class _Counters:
    reunite: int = 0
    fail_lock: int = 0
    fail_cas: int = 0
    tot_nbrs: int = 0


class RabbitGraph:
    """Weighted graph plus the dendrogram built while merging communities.

    ``strength[v]`` is the total weighted degree of the community rooted at
    ``v``; a negative value marks ``v`` as locked (permanently, once merged).
    ``child[v]`` is the last vertex merged into ``v`` and ``sibling[v]`` links
    vertices merged into the same parent.
    """

    def __init__(self, adjacency: Iterable[Iterable[Edge]]) -> None:
        self.es: list[list[Edge]] = [
            [(int(t), float(w)) for t, w in edges] for edges in adjacency
        ]
        n = len(self.es)
        self.strength: list[float] = [sum(w for _, w in edges) for edges in self.es]
        self.child: list[int] = [VMAX] * n
        self.sibling: list[int] = [VMAX] * n
        self.united_child: list[int] = [VMAX] * n
        self.coms: list[int] = list(range(n))
        self.tot_wgt: float = sum(self.strength)
        self.tops: list[int] | None = None
        self.counters = _Counters()

    @property
    def n(self) -> int:
        return len(self.es)

    def trace_com(self, v: int) -> int:
        """Return the vertex representing the community of ``v``."""
        com = v
        while True:
            c = self.coms[com]
            if c == com:
                break
            com = c
        if v != com and self.coms[v] != com:
            self.coms[v] = com
        return com

    def _community_edges(self, v: int, u: int) -> Iterator[Edge]:
        for target, weight in self.es[u]:
            c = self.trace_com(target)
            if c != v:
                yield c, weight

    def unite(self, v: int) -> list[Edge]:
        """Gather the edges of ``v`` and every vertex merged into it."""
        nbrs: list[Edge] = list(self._community_edges(v, v))
        while self.united_child[v] != self.child[v]:
            c = self.child[v]
            w = c
            while w != VMAX and w != self.united_child[v]:
                nbrs.extend(self._community_edges(v, w))
                w = self.sibling[w]
            self.united_child[v] = c
        self.counters.tot_nbrs += len(nbrs)
        self.es[v] = compact(nbrs)
        return self.es[v]

    def find_best(self, v: int, vstr: float) -> int:
        """Return the neighbour giving the best modularity gain, or ``v``."""
        dmax = 0.0
        best = v
        for target, weight in self.es[v]:
            d = weight - vstr * self.strength[target] / self.tot_wgt
            if dmax < d:
                dmax = d
                best = target
        return best

    def merge(self, v: int) -> int:
        """Merge ``v`` into its best neighbour.

        Returns ``v`` when no neighbour improves modularity, ``VMAX`` when the
        merge was rolled back, and otherwise the vertex ``v`` was merged into.
        """
        self.unite(v)
        vstr = self.strength[v]
        self.strength[v] = -1.0

        if self.child[v] != self.united_child[v]:
            self.unite(v)
            self.counters.reunite += 1

        u = self.find_best(v, vstr)
        if u == v:
            self.strength[v] = vstr
            return u

        ua_str = self.strength[u]
        if ua_str < 0.0:
            self.strength[v] = vstr
            self.counters.fail_lock += 1
            return VMAX

        self.sibling[v] = self.child[u]
        self.strength[u] = ua_str + vstr
        self.child[u] = v
        self.coms[v] = u
        return u

    def is_toplevel(self, v: int) -> bool:
        return self.strength[v] >= 0.0 and self.sibling[v] == VMAX and self.coms[v] == v

    def is_merged(self, v: int) -> bool:
        return self.strength[v] < 0.0 and self.coms[v] != v

    def check_result(self) -> bool:
        """Tell whether the aggregation result is self-consistent."""
        if self.tops is None:
            return False
        vertices = range(self.n)
        tops = set(self.tops)
        if len(tops) != len(self.tops):
            return False
        if {self.trace_com(v) for v in vertices} != tops:
            return False
        if not all(self.is_toplevel(v) for v in self.tops):
            return False
        if sum(1 for v in vertices if self.is_toplevel(v)) != len(self.tops):
            return False
        if not all(self.is_toplevel(self.trace_com(v)) for v in vertices):
            return False
        return all(self.is_toplevel(v) or self.is_merged(v) for v in vertices)

    def descendants(self, v: int) -> Iterator[int]:
        """Yield ``v`` and its chain of last-merged children."""
        yield v
        v = self.child[v]
        while v != VMAX:
            yield v
            v = self.child[v]


def merge_order(graph: RabbitGraph) -> list[tuple[int, int]]:
    """Return ``(vertex, degree)`` pairs in ascending order of degree."""
    return sorted(
        ((v, len(edges)) for v, edges in enumerate(graph.es)), key=lambda p: p[1]
    )


def aggregate(adjacency: Iterable[Iterable[Edge]]) -> RabbitGraph:
    """Build the community dendrogram of a weighted adjacency list."""
    graph = RabbitGraph(adjacency)
    tops: list[int] = []
    pends: list[int] = []

    for v, _ in merge_order(graph):
        still_pending = []
        for w in pends:
            u = graph.merge(w)
            if u == w:
                tops.append(w)
            elif u == VMAX:
                still_pending.append(w)
        pends = still_pending

        u = graph.merge(v)
        if u == v:
            tops.append(v)
        elif u == VMAX:
            pends.append(v)

    for v in pends:
        u = graph.merge(v)
        if u == VMAX:
            raise RuntimeError(f"pending vertex {v} could not be merged")
        if u == v:
            tops.append(v)

    graph.tops = tops
    if not graph.check_result():
        raise RuntimeError("inconsistent aggregation result")
    return graph


def compute_perm(graph: RabbitGraph) -> list[int]:
    """Return the new id of every vertex, keeping communities contiguous."""
    if graph.tops is None:
        raise ValueError("graph has not been aggregated")
    n = graph.n
    perm = [0] * n
    coms = [0] * n
    sizes = [0] * len(graph.tops)

    for comid, top in enumerate(graph.tops):
        newid = 0
        stack = list(graph.descendants(top))
        while stack:
            v = stack.pop()
            coms[v] = comid
            perm[v] = newid
            newid += 1
            if graph.sibling[v] != VMAX:
                stack.extend(graph.descendants(graph.sibling[v]))
        sizes[comid] = newid

    offsets: Sequence[int] = [0, *accumulate(sizes)]
    if offsets[-1] != n:
        raise RuntimeError("communities do not cover every vertex")
    perm = [p + offsets[coms[v]] for v, p in enumerate(perm)]
    if sorted(perm) != list(range(n)):
        raise RuntimeError("permutation is not a bijection")
    return perm