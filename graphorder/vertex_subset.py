"""A set of vertices held as a sorted-by-insertion id list, a flag array, or both."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from graphorder.sequence import pack_index


class VertexSubset:
    """A subset of the vertices ``0 .. n-1`` with optional per-vertex data.

    The sparse form lists member ids; the dense form flags every vertex.
    Conversions keep an existing representation, so both may be present.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of vertices must not be negative")
        self.n = n
        self.m = 0
        self.is_dense = False
        self._sparse: list[int] | None = None
        self._sparse_data: list[Any] | None = None
        self._dense: list[bool] | None = None
        self._dense_data: list[Any] | None = None

    @classmethod
    def from_sparse(
        cls, n: int, indices: Iterable[int], data: Iterable[Any] | None = None
    ) -> "VertexSubset":
        """Build a subset from member ids and optional data for each."""
        subset = cls(n)
        ids = list(indices)
        for v in ids:
            if not 0 <= v < n:
                raise ValueError(f"vertex {v} outside [0, {n})")
        values = None
        if data is not None:
            values = list(data)
            if len(values) != len(ids):
                raise ValueError("data and indices differ in length")
        subset._sparse = ids
        subset._sparse_data = values
        subset.m = len(ids)
        return subset

    @classmethod
    def from_dense(
        cls, n: int, flags: Iterable[object], data: Sequence[Any] | None = None
    ) -> "VertexSubset":
        """Build a subset from one membership flag per vertex."""
        subset = cls(n)
        bits = [bool(flag) for flag in flags]
        if len(bits) != n:
            raise ValueError("need exactly one flag per vertex")
        values = None
        if data is not None:
            values = list(data)
            if len(values) != n:
                raise ValueError("need exactly one data item per vertex")
        subset._dense = bits
        subset._dense_data = values
        subset.m = sum(bits)
        subset.is_dense = True
        return subset

    @property
    def num_rows(self) -> int:
        return self.n

    @property
    def num_nonzeros(self) -> int:
        return self.m

    @property
    def is_empty(self) -> bool:
        return self.m == 0

    def _require_dense(self) -> list[bool]:
        if self._dense is None:
            raise ValueError("subset has no dense form; call to_dense first")
        return self._dense

    def _require_sparse(self) -> list[int]:
        if self._sparse is None:
            raise ValueError("subset has no sparse form; call to_sparse first")
        return self._sparse

    def is_in(self, v: int) -> bool:
        return self._require_dense()[v]

    def vtx(self, i: int) -> int:
        """Return the ``i``-th member id of the sparse form."""
        return self._require_sparse()[i]

    def vtx_data(self, i: int) -> Any:
        """Return the data of the ``i``-th member, or ``None`` without data."""
        self._require_sparse()
        return None if self._sparse_data is None else self._sparse_data[i]

    def ith_data(self, v: int) -> Any:
        """Return the data stored for vertex ``v`` in the dense form."""
        self._require_dense()
        return None if self._dense_data is None else self._dense_data[v]

    def to_sparse(self) -> None:
        """Make the sparse form current, building it from the flags if needed."""
        if self._sparse is None:
            if self.m > 0:
                dense = self._require_dense()
                ids = pack_index(dense)
                if len(ids) != self.m:
                    raise RuntimeError("bad stored value of m")
                self._sparse = ids
                if self._dense_data is not None:
                    self._sparse_data = [self._dense_data[v] for v in ids]
            else:
                self._sparse = []
        self.is_dense = False

    def to_dense(self) -> None:
        """Make the dense form current, keeping the sparse form if present."""
        if self._dense is None:
            flags = [False] * self.n
            values = [None] * self.n if self._sparse_data is not None else None
            for i, v in enumerate(self._sparse or []):
                flags[v] = True
                if values is not None:
                    values[v] = self._sparse_data[i]
            self._dense = flags
            self._dense_data = values
        self.is_dense = True

    def __len__(self) -> int:
        return self.m