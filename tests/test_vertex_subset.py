import pytest

from graphorder.vertex_subset import VertexSubset


def test_empty_subset():
    subset = VertexSubset(6)
    assert len(subset) == 0
    assert subset.is_empty
    assert subset.num_rows == 6
    subset.to_dense()
    assert [subset.is_in(v) for v in range(6)] == [False] * 6


def test_sparse_to_dense_round_trip():
    ids = [4, 1, 7]
    subset = VertexSubset.from_sparse(10, ids)
    assert len(subset) == len(ids)
    assert not subset.is_dense
    subset.to_dense()
    assert subset.is_dense
    assert [v for v in range(10) if subset.is_in(v)] == sorted(ids)
    # the sparse form is kept
    assert [subset.vtx(i) for i in range(len(ids))] == ids


def test_dense_to_sparse_lists_members_in_order():
    flags = [v % 3 == 1 for v in range(12)]
    subset = VertexSubset.from_dense(12, flags)
    assert subset.num_nonzeros == sum(flags)
    subset.to_sparse()
    assert not subset.is_dense
    members = [subset.vtx(i) for i in range(len(subset))]
    assert members == [v for v in range(12) if flags[v]]
    assert subset.is_in(4) is True


def test_data_follows_conversions():
    ids = [3, 0, 5]
    labels = ["x", "y", "z"]
    subset = VertexSubset.from_sparse(6, ids, labels)
    assert [subset.vtx_data(i) for i in range(3)] == labels
    subset.to_dense()
    assert [subset.ith_data(v) for v in ids] == labels
    assert subset.ith_data(1) is None

    dense = VertexSubset.from_dense(4, [True, False, True, False], [10, 11, 12, 13])
    dense.to_sparse()
    assert [dense.vtx_data(i) for i in range(len(dense))] == [10, 12]


def test_without_data_returns_none():
    subset = VertexSubset.from_sparse(3, [2])
    assert subset.vtx_data(0) is None
    subset.to_dense()
    assert subset.ith_data(2) is None


def test_missing_form_raises():
    sparse = VertexSubset.from_sparse(5, [1])
    with pytest.raises(ValueError):
        sparse.is_in(1)
    dense = VertexSubset.from_dense(3, [True, False, False])
    with pytest.raises(ValueError):
        dense.vtx(0)


def test_invalid_construction():
    with pytest.raises(ValueError):
        VertexSubset.from_sparse(3, [3])
    with pytest.raises(ValueError):
        VertexSubset.from_dense(3, [True, False])
    with pytest.raises(ValueError):
        VertexSubset.from_sparse(3, [0, 1], ["only one"])
    with pytest.raises(ValueError):
        VertexSubset(-1)


def test_to_sparse_of_empty_dense():
    subset = VertexSubset.from_dense(4, [False] * 4)
    subset.to_sparse()
    assert len(subset) == 0
    with pytest.raises(IndexError):
        subset.vtx(0)