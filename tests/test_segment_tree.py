import random

import pytest

from contestlib.segment_tree import LazySegmentTree, SegmentTree


def test_segment_tree_worked_example():
    tree = SegmentTree([1, 3, 5, 7, 9, 11])
    assert tree.query(1, 3) == 15
    tree.update(1, 10)
    assert tree.query(1, 3) == 22


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_segment_tree_matches_list_sums(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(1, 30))]
    tree = SegmentTree(values)
    for _ in range(200):
        if rng.random() < 0.4:
            idx = rng.randrange(len(values))
            values[idx] = rng.randint(-50, 50)
            tree.update(idx, values[idx])
        else:
            left = rng.randrange(len(values))
            right = rng.randrange(left, len(values))
            assert tree.query(left, right) == sum(values[left : right + 1])


def test_segment_tree_single_element():
    tree = SegmentTree([42])
    assert tree.query(0, 0) == 42
    tree.update(0, -7)
    assert tree.query(0, 0) == -7


def test_segment_tree_rejects_empty():
    with pytest.raises(ValueError):
        SegmentTree([])


@pytest.mark.parametrize("left,right", [(-1, 2), (2, 1), (0, 6)])
def test_segment_tree_rejects_bad_range(left, right):
    tree = SegmentTree([1, 3, 5, 7, 9, 11])
    with pytest.raises(IndexError):
        tree.query(left, right)


def test_segment_tree_rejects_bad_index():
    tree = SegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.update(3, 0)


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_lazy_segment_tree_matches_list(seed):
    rng = random.Random(seed)
    values = [rng.randint(-20, 20) for _ in range(rng.randint(1, 25))]
    tree = LazySegmentTree(values)
    for _ in range(200):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        if rng.random() < 0.5:
            delta = rng.randint(-10, 10)
            for i in range(left, right + 1):
                values[i] += delta
            tree.update_range(left, right, delta)
        else:
            assert tree.query_range(left, right) == sum(values[left : right + 1])


def test_lazy_segment_tree_whole_range_total():
    values = [1, 3, 5, 7, 9, 11]
    tree = LazySegmentTree(values)
    tree.update_range(0, 5, 2)
    assert tree.query_range(0, 5) == sum(values) + 2 * len(values)


def test_lazy_segment_tree_rejects_bad_range():
    tree = LazySegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.update_range(1, 3, 5)
    with pytest.raises(IndexError):
        tree.query_range(2, 1)


def test_lazy_segment_tree_rejects_empty():
    with pytest.raises(ValueError):
        LazySegmentTree([])