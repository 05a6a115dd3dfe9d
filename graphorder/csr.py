"""Graph in compressed sparse row form with degree counts and BFS helpers."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Sequence

from graphorder.gorder import split

UINT_MAX = 2**32 - 1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FLOAT_SIZE = 4
_DEFAULT_PARTITION_SIZE = (1024 * 1024) // _FLOAT_SIZE

_STOI = re.compile(r"\s*[+-]?\d+")


class Algo(IntEnum):
    """Reordering algorithms selectable by number."""

    HISORDER = 0
    FON = 1
    SORT = 2
    FBC = 3
    HC = 4
    DBG = 5
    CORDER = 6
    MAP = 7


@dataclass
class Params:
    """Tuning parameters shared by the reordering passes."""

    damping: float = 0.15
    partition_size: int = _DEFAULT_PARTITION_SIZE
    num_partitions: int = 0
    partition_offset: int = int(math.log2(_DEFAULT_PARTITION_SIZE))
    num_threads: int = 10
    overflow_ceil: int = 0


@dataclass
class BfsStats:
    """Outcome of a block-counting breadth-first search.

    ``levels[v]`` is the level at which ``v`` was first reached, or ``None``.
    The start vertex keeps ``None`` unless a cycle leads back to it.
    ``blocks`` sums, over every frontier, its number of contiguous id runs
    plus one; ``depth`` is the number of frontiers processed.
    """

    levels: list[int | None]
    blocks: int
    depth: int


def _stoi(token: str) -> int:
    match = _STOI.match(token)
    if match is None:
        raise ValueError(f"invalid integer: {token!r}")
    value = int(match.group())
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {token!r}")
    return value


class CsrGraph:
    """A directed graph stored as row offsets and column indices."""

    def __init__(
        self,
        num_vertex: int = 0,
        num_edges: int = 0,
        row_index: Sequence[int] | None = None,
        col_index: Sequence[int] | None = None,
    ) -> None:
        self.num_vertex = num_vertex
        self.num_edges = num_edges
        self.cluster_num = 0
        self.num_vertex_deg_0 = 0
        self.num_vertex_deg_1 = 0
        self.row_index: list[int] = list(row_index) if row_index is not None else []
        self.col_index: list[int] = list(col_index) if col_index is not None else []
        self.out_degree: list[int] = []
        self.in_degree: list[int] = []
        self.feat = 0
        self.attr: list[list[int]] = []
        self.in_feat = ""

    def _neighbours(self, v: int) -> list[int]:
        return self.col_index[self.row_index[v] : self.row_index[v + 1]]

    def compute_out_degree(self) -> None:
        """Fill ``out_degree`` and ``in_degree`` from the CSR arrays."""
        rows = self.row_index
        self.out_degree = [rows[i + 1] - rows[i] for i in range(self.num_vertex)]
        in_degree = [0] * self.num_vertex
        for v in self.col_index[: rows[self.num_vertex]] if self.num_vertex else []:
            in_degree[v] += 1
        self.in_degree = in_degree
        self.num_vertex_deg_0 = self.num_vertex
        self.num_vertex_deg_1 = 0

    def print_graph(self, all: bool = False) -> None:  # noqa: A002
        """Print the row and column arrays when ``all`` is set."""
        if all:
            print("".join(f"{x} " for x in self.row_index))
            print("".join(f"{x} " for x in self.col_index))

    def init_attribute(self, feat: int, rng: random.Random | None = None) -> None:
        """Give every vertex ``feat`` BFS distances from random start vertices.

        Unreached vertices keep ``UINT_MAX``. Start vertices are drawn among
        vertices with at least one out-edge.
        """
        source = rng if rng is not None else random.Random()
        self.feat = feat
        self.attr = [[UINT_MAX] * feat for _ in range(self.num_vertex)]
        if feat <= 0:
            return
        candidates = any(
            self.row_index[v + 1] - self.row_index[v] >= 1
            for v in range(self.num_vertex)
        )
        if not candidates:
            raise ValueError("no vertex has an out-edge to start from")

        for i in range(feat):
            start = source.randrange(self.num_vertex)
            while self.row_index[start + 1] - self.row_index[start] < 1:
                start = source.randrange(self.num_vertex)
            print(f"rand start vertex({i}) = {start}")
            level = 0
            self.attr[start][i] = level
            front = [start]
            while front:
                level += 1
                next_front = []
                for v in front:
                    for dst in self._neighbours(v):
                        if self.attr[dst][i] > level:
                            self.attr[dst][i] = level
                            next_front.append(dst)
                front = next_front

    def init_attribute_file(self, feat_file: str | Path, feat_size: int) -> None:
        """Append rows of comma-separated integers, at most ``feat_size`` each."""
        limit = max(feat_size, 0)
        with open(feat_file, encoding="utf-8") as handle:
            for line in handle:
                tokens = split(line.rstrip("\n"), ",")[:limit]
                row = [_stoi(token) & UINT_MAX for token in tokens]
                self.attr.append(row)
                if len(self.attr) == 1:
                    self.feat = len(row)

    def bfs(self, starter: int) -> BfsStats:
        """Run a BFS from ``starter`` counting contiguous id runs per frontier."""
        prop = [UINT_MAX] * self.num_vertex
        front = [starter]
        level = 0
        total = 0
        while front:
            front.sort()
            runs = 1 + sum(1 for a, b in zip(front, front[1:]) if b != a + 1)
            total += runs + 1
            level += 1
            next_front = []
            for v in front:
                for dst in self._neighbours(v):
                    if prop[dst] > level:
                        prop[dst] = level
                        next_front.append(dst)
            front = next_front
        levels = [None if p == UINT_MAX else p for p in prop]
        return BfsStats(levels=levels, blocks=total, depth=level)