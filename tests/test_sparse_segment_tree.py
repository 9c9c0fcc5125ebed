import pytest

from contestlib.sparse_segment_tree import LazySparseSegmentTree


def test_initially_zero():
    tree = LazySparseSegmentTree(10)
    assert tree.query(0, 9) == (0, 0)


def test_whole_range_add():
    tree = LazySparseSegmentTree(10)
    tree.range_add(0, 9, 5)
    assert tree.query(0, 9) == (5, 5)
    assert tree.query(4, 4) == (5, 5)


def test_partial_adds_track_min_and_max():
    tree = LazySparseSegmentTree(10)
    tree.range_add(2, 4, -3)
    tree.range_add(6, 8, 7)
    assert tree.query(3, 3) == (-3, -3)
    assert tree.query(0, 9) == (-3, 7)
    assert tree.query(0, 1) == (0, 0)
    assert tree.query(5, 8) == (0, 7)


def test_negative_values_inside_partial_query():
    tree = LazySparseSegmentTree(4)
    tree.range_add(0, 3, -5)
    assert tree.query(0, 0) == (-5, -5)
    assert tree.query(1, 2) == (-5, -5)


def test_huge_range():
    n = 10**18
    tree = LazySparseSegmentTree(n)
    tree.range_add(10**17, 10**17 + 5, 4)
    assert tree.query(10**17 + 3, 10**17 + 3) == (4, 4)
    assert tree.query(0, n - 1) == (0, 4)
    assert tree.query(n - 1, n - 1) == (0, 0)


def test_invalid_arguments():
    tree = LazySparseSegmentTree(5)
    with pytest.raises(IndexError):
        tree.query(0, 5)
    with pytest.raises(IndexError):
        tree.range_add(3, 1, 2)
    with pytest.raises(ValueError):
        LazySparseSegmentTree(0)